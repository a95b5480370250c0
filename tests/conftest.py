"""
Global test fixtures for the Lingran Blog backend.

This module provides shared fixtures for all tests including:
- Test-friendly settings (cheap bcrypt, fixed JWT secret, temp data file)
- A JSON store on a per-test temporary file
- Service instances bound to that store
- A FastAPI TestClient wired to the same store
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import Generator

# Settings are read at import time, so configure them before importing the app
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["DATA_FILE"] = str(Path(tempfile.mkdtemp(prefix="blog-api-tests-")) / "database.json")
os.environ["LOG_LEVEL"] = "WARNING"

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))

import pytest
from fastapi.testclient import TestClient


# =============================================================================
# Store Fixtures
# =============================================================================

@pytest.fixture
def data_file(tmp_path) -> Path:
    """Path of the JSON data file for one test (not created yet)."""
    return tmp_path / "database.json"


@pytest.fixture
def store(data_file):
    """A JSON document store on a fresh temporary file."""
    from blog_api.database.store import JsonStore
    return JsonStore(data_file)


# =============================================================================
# Service Fixtures
# =============================================================================

@pytest.fixture
def auth_service(store):
    """AuthService bound to the temporary store."""
    from blog_api.services.auth_service import AuthService
    return AuthService(store)


@pytest.fixture
def article_service(store):
    """ArticleService bound to the temporary store."""
    from blog_api.services.article_service import ArticleService
    return ArticleService(store)


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def app(store):
    """
    The FastAPI app with its store dependency pointed at the temporary store.
    """
    from blog_api.database.connections import get_store
    from blog_api.main import app

    async def _get_store():
        return store

    app.dependency_overrides[get_store] = _get_store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    Use this for synchronous endpoint testing.
    """
    with TestClient(app) as c:
        yield c


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Basic test user credentials."""
    return {
        "username": "linran",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def other_user_data() -> dict:
    """Credentials of a second, unrelated user."""
    return {
        "username": "visitor",
        "password": "AnotherPassword456!",
    }
