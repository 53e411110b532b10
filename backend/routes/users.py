# backend/routes/users.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, Response, status
from sqlalchemy import bindparam, delete, insert, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from config import settings
from database import MAX_ROW_ID, get_db, is_unique_violation
from models.users import User
from schemas import user as schemas
from utils.hashing import get_password_hash

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["Users"])

users = User.__table__

# Columns sent back to clients; the password column is never among them
PUBLIC_COLUMNS = (users.c.id, users.c.username, users.c.role)

# The protected account is filtered out inside the statement itself,
# so for update and delete it behaves exactly like a missing row.
_target = (users.c.id == bindparam("user_id")) & (users.c.username != bindparam("protected_username"))

UPDATE_ROLE = (
    update(users)
    .where(_target)
    .values(role=bindparam("new_role"))
    .returning(*PUBLIC_COLUMNS)
)

UPDATE_ROLE_AND_PASSWORD = (
    update(users)
    .where(_target)
    .values(role=bindparam("new_role"), password=bindparam("new_password"))
    .returning(*PUBLIC_COLUMNS)
)

DELETE_USER = delete(users).where(_target).returning(users.c.id)


# List every account without passwords
@router.get("", response_model=List[schemas.UserResponse])
def list_users(db: Session = Depends(get_db)):
    return db.query(User).order_by(User.id).all()


# Create an account; duplicate usernames are rejected by the unique constraint
@router.post("", response_model=schemas.UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(payload: schemas.UserCreate, db: Session = Depends(get_db)):
    stmt = (
        insert(users)
        .values(
            username=payload.username,
            password=get_password_hash(payload.password),
            role=payload.role,
        )
        .returning(*PUBLIC_COLUMNS)
    )
    try:
        row = db.execute(stmt).mappings().one()
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if is_unique_violation(e):
            raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Username already exists")
        raise

    logger.info("Created user id=%s username=%s", row["id"], row["username"])
    return dict(row)


# Change role, and the password only when a new one is supplied
@router.put("/{user_id}", response_model=schemas.UserResponse)
def update_user(payload: schemas.UserUpdate, user_id: int = Path(ge=1, le=MAX_ROW_ID), db: Session = Depends(get_db)):
    params = {
        "user_id": user_id,
        "protected_username": settings.PROTECTED_USERNAME,
        "new_role": payload.role,
    }
    if payload.password:
        params["new_password"] = get_password_hash(payload.password)
        stmt = UPDATE_ROLE_AND_PASSWORD
    else:
        stmt = UPDATE_ROLE

    row = db.execute(stmt, params).mappings().first()
    if row is None:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    db.commit()

    logger.info("Updated user id=%s", user_id)
    return dict(row)


# Remove an account
@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(user_id: int = Path(ge=1, le=MAX_ROW_ID), db: Session = Depends(get_db)):
    params = {"user_id": user_id, "protected_username": settings.PROTECTED_USERNAME}
    deleted = db.execute(DELETE_USER, params).first()
    if deleted is None:
        db.rollback()
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    db.commit()

    logger.info("Deleted user id=%s", user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
