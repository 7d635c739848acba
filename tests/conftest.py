"""
Pytest fixtures for Dopaminote tests.
"""
from types import SimpleNamespace
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from main import create_app


# ============================================================================
# App & client fixtures
# ============================================================================

@pytest.fixture
def app_settings():
    """Settings for an isolated app on a fresh in-memory database."""
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-access-secret",
        REFRESH_SECRET_KEY="test-refresh-secret",
    )


@pytest.fixture
def app(app_settings):
    return create_app(app_settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def db_session(client, app):
    """Session on the same database the client talks to."""
    db = app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def register_and_login(client, email: str, password: str = "dopamine123") -> dict:
    response = client.post("/auth/register", json={"email": email, "password": password})
    assert response.status_code == 201, response.text
    response = client.post("/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def auth_headers(client):
    """Bearer headers for a freshly registered user."""
    return register_and_login(client, "user@example.com")


@pytest.fixture
def other_auth_headers(client):
    """Bearer headers for a second, unrelated user."""
    return register_and_login(client, "other@example.com")


# ============================================================================
# In-memory value builders for the pure analysis functions
# ============================================================================

def make_record(situation="social", mood="neutral", dopamine_score=50, created_at=None):
    return SimpleNamespace(
        situation=situation,
        mood=mood,
        dopamine_score=dopamine_score,
        created_at=created_at or datetime.now(timezone.utc),
    )


def make_contract(status="active", start_date=None, end_date=None, integrity_score=100):
    return SimpleNamespace(
        status=status,
        start_date=start_date or datetime.now(timezone.utc),
        end_date=end_date,
        integrity_score=integrity_score,
    )


def make_routine(completed=False, dopamine_reduction=10):
    return SimpleNamespace(completed=completed, dopamine_reduction=dopamine_reduction)
