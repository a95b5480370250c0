"""
Backend-specific test fixtures and helpers.

These fixtures extend the global fixtures with helpers for authenticated
requests, admin accounts and hand-crafted tokens.
"""

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt


# =============================================================================
# Account Helpers
# =============================================================================

@pytest.fixture
def register_and_login(client):
    """
    Register a user through the API, log in, and return
    ``(user, headers)`` where headers carry the bearer token.

    Usage:
        def test_something(register_and_login):
            user, headers = register_and_login("alice", "pw")
    """
    def _register_and_login(username: str, password: str):
        response = client.post(
            "/api/register", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text

        response = client.post(
            "/api/login", json={"username": username, "password": password}
        )
        assert response.status_code == 200, response.text
        data = response.json()

        return data["user"], {"Authorization": f"Bearer {data['token']}"}

    return _register_and_login


@pytest.fixture
def promote_to_admin(store):
    """
    Flip a stored user's admin flag directly in the data file.

    The API itself has no promotion path; admins are made by editing the store.
    """
    def _promote(username: str) -> None:
        document = store.load()
        user = document.find_user(username)
        assert user is not None
        user.is_admin = True
        store.save(document)

    return _promote


# =============================================================================
# Token Helpers
# =============================================================================

@pytest.fixture
def make_token():
    """
    Build a JWT with arbitrary claims, key and lifetime.

    Defaults to the app's secret and algorithm with a one-hour lifetime.
    """
    from blog_api.config import get_settings

    def _make_token(
        claims: dict,
        secret: str | None = None,
        expires_delta: timedelta = timedelta(hours=1),
    ) -> str:
        settings = get_settings()
        payload = {**claims, "exp": datetime.now(timezone.utc) + expires_delta}
        return jwt.encode(
            payload,
            secret or settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
        )

    return _make_token


@pytest.fixture
def claims():
    """Build TokenClaims for service-level tests."""
    from blog_api.schemas.auth import TokenClaims

    def _claims(user_id: int, username: str = "someone", is_admin: bool = False):
        return TokenClaims(user_id=user_id, username=username, is_admin=is_admin)

    return _claims


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert the `{"error": ...}` envelope and status code."""
    def _assert(response, status_code: int, error_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert set(data) == {"error"}
        if error_contains:
            assert error_contains.lower() in data["error"].lower()
    return _assert
