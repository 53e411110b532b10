# backend/schemas/asset.py
import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# API field name -> database column.
# Requests use the mixed-case names, stored and returned rows use the columns.
ASSET_FIELD_MAP = {
    "assetPrefix": "assetprefix",
    "assetNumber": "assetnumber",
    "assetName": "assetname",
    "category": "category",
    "status": "status",
    "employeeName": "employeename",
    "employeeCode": "employeecode",
    "cugMobile": "cugmobile",
    "department": "department",
    "designation": "designation",
    "date": "date",
    "assetMake": "assetmake",
    "assetSerial": "assetserial",
    "location": "location",
    "notes": "notes",
}

COLUMN_TO_FIELD = {column: field for field, column in ASSET_FIELD_MAP.items()}


def to_api_field(column: str) -> str:
    return COLUMN_TO_FIELD[column]


# Every editable asset attribute, keyed by column name
class AssetBase(BaseModel):
    assetprefix: Optional[str] = None
    assetnumber: Optional[str] = None
    assetname: Optional[str] = None
    category: Optional[str] = None
    status: Optional[str] = None
    employeename: Optional[str] = None
    employeecode: Optional[str] = None
    cugmobile: Optional[str] = None
    department: Optional[str] = None
    designation: Optional[str] = None
    date: Optional[datetime.date] = None
    assetmake: Optional[str] = None
    assetserial: Optional[str] = None
    location: Optional[str] = None
    notes: Optional[str] = None


# Request body for POST and PUT; the full field set replaces the stored row
class AssetWrite(AssetBase):
    model_config = ConfigDict(alias_generator=to_api_field, coerce_numbers_to_str=True)

    assetname: str = Field(min_length=1)
    category: str = Field(min_length=1)
    status: str = Field(min_length=1)
    date: datetime.date

    def to_columns(self) -> dict:
        """Values keyed by column name, ready for INSERT/UPDATE."""
        return self.model_dump(by_alias=False)


# Row as stored, lowercase keys
class AssetResponse(AssetBase):
    id: int

    model_config = ConfigDict(from_attributes=True)
