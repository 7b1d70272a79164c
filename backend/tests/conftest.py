from __future__ import annotations

import os

# Set test environment BEFORE importing infusesecret modules.
# infusesecret.db creates the engine at module level using get_settings().db_url,
# so we must override the env vars before any package imports.
os.environ.setdefault("DB_URL", "sqlite://")
os.environ.setdefault("FRONTEND_URL", "http://localhost:3000")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from infusesecret.config import get_settings
from infusesecret.db import get_session
from infusesecret.main import app as fastapi_app
from infusesecret.services.messages import MessageService
from infusesecret.services.qr import ShareLinks
from infusesecret.services.store import MessageStore


# ── Database fixtures ─────────────────────────────────────────────────


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an in-memory SQLite engine for testing.

    Uses StaticPool so every connection shares the same in-memory database.
    Recreates tables per test for full isolation.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine):
    """Provide a fresh session per test."""
    with Session(engine) as session:
        yield session


# ── Service fixtures ──────────────────────────────────────────────────


@pytest.fixture(name="store")
def store_fixture(session) -> MessageStore:
    return MessageStore(session)


@pytest.fixture(name="service")
def service_fixture(store) -> MessageService:
    return MessageService(store=store, links=ShareLinks(get_settings()))


# ── HTTP client fixtures ──────────────────────────────────────────────


@pytest.fixture(name="client")
def client_fixture(session):
    """FastAPI TestClient with overridden DB session."""

    def _get_session_override():
        yield session

    fastapi_app.dependency_overrides[get_session] = _get_session_override
    with TestClient(fastapi_app) as client:
        yield client
    fastapi_app.dependency_overrides.clear()


@pytest.fixture(name="created")
def created_fixture(client) -> dict:
    """Create a message through the API and return the creation response."""
    resp = client.post(
        "/api/messages",
        json={
            "message": "Happy Birthday!",
            "theme": "romantic",
            "photo_url": "https://example.com/cake.jpg",
            "quote": "Love is patient",
        },
    )
    assert resp.status_code == 201
    return resp.json()
