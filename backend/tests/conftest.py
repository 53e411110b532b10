"""Shared fixtures: a fresh in-memory SQLite database per test and a TestClient bound to it."""

import os

# Must be set before config.py is imported
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from models.users import User
import models.asset  # noqa: F401
from main import app
from seed_admin import ensure_admin

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def client(session_factory):
    """TestClient with get_db pointed at the per-test database."""
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def admin_password():
    return "admin-secret"


@pytest.fixture
def admin(db_session, admin_password):
    """The protected account, created the same way seed_admin.py does it."""
    ensure_admin(db_session, admin_password)
    return db_session.query(User).filter(User.username == "admin").one()


@pytest.fixture
def asset_payload():
    return {
        "assetPrefix": "LT",
        "assetNumber": "001",
        "assetName": "Dell Laptop",
        "category": "Laptop",
        "status": "Assigned",
        "employeeName": "Ravi Kumar",
        "employeeCode": "E1024",
        "cugMobile": "9876543210",
        "department": "Finance",
        "designation": "Accountant",
        "date": "2024-01-01",
        "assetMake": "Dell",
        "assetSerial": "SN-77X1",
        "location": "Head Office",
        "notes": "Charger included",
    }
