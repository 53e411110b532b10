# backend/routes/assets.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy import delete, insert, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import MAX_ROW_ID, get_db, is_unique_violation
from models.asset import Asset
import schemas.asset as asset_schemas

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/assets", tags=["Assets"])

assets = Asset.__table__

DUPLICATE_ASSET = "This asset number already exists"


def _write(db: Session, stmt):
    """Run a single INSERT/UPDATE ... RETURNING and commit; None when no row matched."""
    try:
        row = db.execute(stmt).mappings().first()
        if row is None:
            db.rollback()
            return None
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=DUPLICATE_ASSET)
        raise
    return dict(row)


# List all assets in id order
@router.get("", response_model=List[asset_schemas.AssetResponse])
def list_assets(db: Session = Depends(get_db)):
    return db.query(Asset).order_by(Asset.id.asc()).all()


# Register a new asset
@router.post("", response_model=asset_schemas.AssetResponse, status_code=status.HTTP_201_CREATED)
def create_asset(payload: asset_schemas.AssetWrite, db: Session = Depends(get_db)):
    stmt = insert(assets).values(**payload.to_columns()).returning(assets)
    row = _write(db, stmt)
    logger.info("Created asset id=%s", row["id"])
    return row


# Replace every editable field of an asset
@router.put("/{asset_id}", response_model=asset_schemas.AssetResponse)
def update_asset(payload: asset_schemas.AssetWrite, asset_id: int = Path(ge=1, le=MAX_ROW_ID), db: Session = Depends(get_db)):
    stmt = (
        update(assets)
        .where(assets.c.id == asset_id)
        .values(**payload.to_columns())
        .returning(assets)
    )
    row = _write(db, stmt)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asset not found")
    logger.info("Updated asset id=%s", asset_id)
    return row


# Remove an asset
@router.delete("/{asset_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_asset(asset_id: int = Path(ge=1, le=MAX_ROW_ID), db: Session = Depends(get_db)):
    deleted = db.execute(delete(assets).where(assets.c.id == asset_id).returning(assets.c.id)).first()
    if deleted is None:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Asset not found")
    db.commit()

    logger.info("Deleted asset id=%s", asset_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
