# backend/routes/auth.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from database import get_db
from models.users import User
from schemas import user as schemas
from utils.hashing import DUMMY_HASH, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Auth"])


# Check credentials and return the account profile
@router.post("/login", response_model=schemas.UserResponse)
def login(payload: schemas.UserLogin, db: Session = Depends(get_db)):
    db_user = db.query(User).filter(User.username == payload.username).first()

    # Same answer, and the same hashing work, for unknown user and wrong password
    stored_hash = db_user.password if db_user else DUMMY_HASH
    if not verify_password(payload.password, stored_hash) or not db_user:
        logger.warning("Failed login for username=%s", payload.username)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid username or password")

    logger.info("User %s logged in", db_user.username)
    return db_user
