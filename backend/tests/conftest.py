"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules:
an in-memory SQLite store with the real schema, an app wired to it, and
helpers to mint tokens.
"""

import pytest
from datetime import datetime, timezone, timedelta
from typing import Optional
import jwt  # PyJWT
from fastapi.testclient import TestClient

from api.app import create_app
from shared.config import Settings
from shared.database import create_db_engine, create_schema
from modules.accounts.repository import AccountRepository
from modules.profiles.repository import ProfileRepository


# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"
TEST_API_KEY = "test-api-key"


def create_test_token(
    user_id=1,
    secret: str = TEST_JWT_SECRET,
    expires_in: Optional[timedelta] = None,
) -> str:
    """
    Create a test JWT token.

    Args:
        user_id: Value of the user_id claim (any JSON type, to test rejection)
        secret: Signing secret
        expires_in: Adds an exp claim relative to now (negative for expired)

    Returns:
        JWT token string
    """
    payload = {"user_id": user_id}
    if expires_in is not None:
        now = datetime.now(timezone.utc)
        payload["iat"] = int(now.timestamp())
        payload["exp"] = int((now + expires_in).timestamp())
    return jwt.encode(payload, secret, algorithm="HS256")


def auth_headers_for(user_id: int, secret: str = TEST_JWT_SECRET) -> dict[str, str]:
    """API key plus bearer token headers for the given account."""
    return {
        "x-api-key": TEST_API_KEY,
        "Authorization": f"Bearer {create_test_token(user_id, secret=secret)}",
    }


@pytest.fixture
def settings() -> Settings:
    """Settings for an in-memory store, ignoring any local .env file."""
    return Settings(
        _env_file=None,
        database_url="sqlite://",
        jwt_secret=TEST_JWT_SECRET,
    )


@pytest.fixture
def engine(settings: Settings):
    """Fresh in-memory database with the schema created."""
    engine = create_db_engine(settings.database_url)
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def account_repository(engine) -> AccountRepository:
    return AccountRepository(engine)


@pytest.fixture
def profile_repository(engine) -> ProfileRepository:
    return ProfileRepository(engine)


@pytest.fixture
def app(settings: Settings, engine):
    """Create a fresh app bound to the test database."""
    return create_app(settings, engine)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def api_headers() -> dict[str, str]:
    """Headers that pass the API key gate."""
    return {"x-api-key": TEST_API_KEY}


@pytest.fixture
def registered_user(client: TestClient, api_headers: dict[str, str]) -> dict:
    """Register an account through the API and return its credentials and ID."""
    user = {
        "username": "alice",
        "email": "alice@example.com",
        "password": "correct horse battery staple",
    }
    response = client.post("/users", json=user, headers=api_headers)
    assert response.status_code == 201
    return {**user, "id": response.json()["id"]}
