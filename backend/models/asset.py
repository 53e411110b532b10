# backend/models/asset.py
from sqlalchemy import Column, Integer, String, Date, UniqueConstraint
from database import Base

# Model Asset
# A single piece of IT equipment and the employee it is issued to.
# Column names are lowercase; the mixed-case API names live in schemas/asset.py.
class Asset(Base):
    __tablename__ = "assets"
    __table_args__ = (
        UniqueConstraint("assetprefix", "assetnumber", name="uq_assets_prefix_number"),
    )

    id = Column(Integer, primary_key=True, index=True)

    # Identification
    assetprefix = Column(String)
    assetnumber = Column(String)
    assetname = Column(String, nullable=False)
    category = Column(String, nullable=False)
    status = Column(String, nullable=False)

    # Holder
    employeename = Column(String)
    employeecode = Column(String)
    cugmobile = Column(String)
    department = Column(String)
    designation = Column(String)
    date = Column(Date, nullable=False)

    # Hardware details
    assetmake = Column(String)
    assetserial = Column(String)
    location = Column(String)
    notes = Column(String)
