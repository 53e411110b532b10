"""Health checks, origin policy, error envelope and configuration."""

import pytest
from fastapi.testclient import TestClient
from pydantic import ValidationError
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import database
from config import Settings, settings
from database import get_db
from main import app
from utils.origins import CORS_REJECTED, is_origin_allowed

ALLOWED = "https://best-itasset.online"


def use_engine(engine):
    """Point get_db at the given engine for the rest of the test."""
    factory = sessionmaker(bind=engine)

    def override_get_db():
        db = factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def unreachable_engine(tmp_path):
    """Engine whose file lives in a directory that does not exist, so connecting fails."""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'missing' / 'assets.db'}",
        connect_args={"check_same_thread": False},
    )
    yield engine
    engine.dispose()


@pytest.fixture
def broken_store_client(client):
    """Client whose database has no tables, so every query fails."""
    empty = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    use_engine(empty)
    yield client
    empty.dispose()


@pytest.fixture
def unreachable_store_client(client, unreachable_engine):
    use_engine(unreachable_engine)
    return client


def test_health(client):
    res = client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "ok"


def test_readiness(client):
    res = client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready"}


def test_store_failure_returns_generic_500(broken_store_client):
    res = broken_store_client.get("/api/assets")
    assert res.status_code == 500
    assert res.json() == {"error": "Server error"}


def test_readiness_reports_unreachable_store(unreachable_store_client):
    res = unreachable_store_client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json() == {"status": "not_ready", "reason": "database_unavailable"}


def test_app_starts_without_database(monkeypatch, unreachable_engine):
    monkeypatch.setattr(database, "engine", unreachable_engine)
    with TestClient(app) as c:
        assert c.get("/api/health").status_code == 200


def test_failed_user_insert_returns_generic_500(broken_store_client):
    res = broken_store_client.post("/api/users", json={"username": "asha", "password": "pw", "role": "user"})
    assert res.status_code == 500
    assert res.json() == {"error": "Server error"}


def test_failed_asset_insert_returns_generic_500(broken_store_client, asset_payload):
    res = broken_store_client.post("/api/assets", json=asset_payload)
    assert res.status_code == 500
    assert res.json() == {"error": "Server error"}


def test_request_without_origin_is_allowed(client):
    assert client.get("/api/health").status_code == 200


def test_allowed_origin_gets_cors_headers(client):
    res = client.get("/api/health", headers={"Origin": ALLOWED})
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == ALLOWED


def test_unknown_origin_is_rejected(client):
    res = client.get("/api/users", headers={"Origin": "https://evil.example"})
    assert res.status_code == 403
    assert res.json() == {"error": CORS_REJECTED}


def test_unknown_origin_preflight_is_rejected(client):
    res = client.options("/api/assets", headers={
        "Origin": "https://evil.example",
        "Access-Control-Request-Method": "POST",
    })
    assert res.status_code == 403


def test_allowed_origin_preflight_succeeds(client):
    res = client.options("/api/assets", headers={
        "Origin": ALLOWED,
        "Access-Control-Request-Method": "POST",
    })
    assert res.status_code == 200
    assert res.headers["access-control-allow-origin"] == ALLOWED


def test_is_origin_allowed():
    assert is_origin_allowed(None, [])
    assert is_origin_allowed("", [ALLOWED])
    assert is_origin_allowed(ALLOWED, [ALLOWED])
    assert not is_origin_allowed("https://other.example", [ALLOWED])


def test_unknown_route_uses_error_envelope(client):
    res = client.get("/api/nothing-here")
    assert res.status_code == 404
    assert "error" in res.json()


def test_malformed_json_returns_400(client):
    res = client.post("/api/login", content=b"{not json", headers={"Content-Type": "application/json"})
    assert res.status_code == 400


def test_settings_rewrite_postgres_scheme(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgres://u:p@db.example/assets")
    assert Settings().DATABASE_URL == "postgresql://u:p@db.example/assets"


def test_settings_require_database_url(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError):
        Settings()


def test_settings_defaults():
    assert Settings.model_fields["PORT"].default == 10000
    assert Settings.model_fields["PROTECTED_USERNAME"].default == "admin"
    assert ALLOWED in settings.ALLOWED_ORIGINS
