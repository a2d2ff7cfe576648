import os

# Point the engine at a shared in-memory database before the app is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret-key")
for name in ("TWILIO_ACCOUNT_SID", "TWILIO_AUTH_TOKEN", "TWILIO_FROM_NUMBER"):
    os.environ.pop(name, None)

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

import junkcrm.models  # noqa: F401
from junkcrm.db.session import engine
from junkcrm.main import app

ADMIN = {"X-User-Role": "admin"}
DISPATCHER = {"X-User-Role": "dispatcher"}
FIELD = {"X-User-Role": "field"}


def parse_ts(value):
    """Parse an API timestamp; a trailing Z means UTC"""
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


@pytest.fixture(autouse=True)
def reset_database():
    """Give every test empty tables"""
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def session():
    with Session(engine) as db:
        yield db


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def admin_token(client):
    """Register the first (admin) account and log it in"""
    client.post("/api/auth/register", json={"username": "owner", "password": "secret123"})
    response = client.post("/api/auth/login", json={"username": "owner", "password": "secret123"})
    return response.json()["access_token"]
