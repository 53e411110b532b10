# backend/seed_admin.py
"""Create the protected administrator account if it does not exist yet.

Usage:
    python seed_admin.py --password <secret>
    ADMIN_PASSWORD=<secret> python seed_admin.py
"""
import argparse
import logging
import os
import sys

from sqlalchemy.orm import Session

from config import settings
from database import SessionLocal, init_db
from models.users import User
from utils.hashing import get_password_hash
from utils.logging_setup import setup_logging

logger = logging.getLogger(__name__)


def ensure_admin(db: Session, password: str, username: str = None) -> bool:
    """Insert the admin row; return False when it was already there."""
    username = username or settings.PROTECTED_USERNAME
    if db.query(User).filter(User.username == username).first():
        return False

    db.add(User(username=username, password=get_password_hash(password), role="admin"))
    db.commit()
    return True


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create the protected admin account.")
    parser.add_argument("--password", default=os.getenv("ADMIN_PASSWORD"))
    args = parser.parse_args(argv)

    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    if not args.password:
        logger.error("No password given: pass --password or set ADMIN_PASSWORD")
        return 1

    init_db()
    db = SessionLocal()
    try:
        if ensure_admin(db, args.password):
            logger.info("Admin account '%s' created", settings.PROTECTED_USERNAME)
        else:
            logger.info("Admin account '%s' already exists", settings.PROTECTED_USERNAME)
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
