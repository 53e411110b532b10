# backend/database.py
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from config import settings

logger = logging.getLogger(__name__)

UNIQUE_VIOLATION = "23505"

# Largest value a 64-bit INTEGER primary key can hold
MAX_ROW_ID = 2**63 - 1


def build_engine(url: str):
    if url.startswith("sqlite"):
        # Only for SQLite
        return create_engine(url, connect_args={"check_same_thread": False})

    # Bounded pool shared by every request in this process
    return create_engine(
        url,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db():
    # Register tables on Base.metadata before creating them
    import models.users  # noqa: F401
    import models.asset  # noqa: F401

    Base.metadata.create_all(bind=engine)


def check_db_connection(bind=None) -> bool:
    """Run a trivial query; return False instead of raising when the store is down."""
    try:
        with (bind or engine).connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        logger.error("Database connection error: %s", e)
        return False
    return True


def is_unique_violation(exc: IntegrityError) -> bool:
    """Tell a unique-constraint failure apart from other integrity errors."""
    orig = exc.orig
    # psycopg2 exposes pgcode, psycopg 3 exposes sqlstate
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    if code is not None:
        return code == UNIQUE_VIOLATION
    return "UNIQUE constraint failed" in str(orig)
