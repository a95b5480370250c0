"""
Tests for the authentication endpoints.

These tests verify:
- POST /api/register response shape and failure modes
- POST /api/login token issuance and failure modes
- The `{"error": ...}` envelope on every failure
"""

from unittest.mock import patch


class TestRegisterEndpoint:
    """Tests for POST /api/register."""

    def test_register_returns_public_user(self, client, test_user_data):
        response = client.post("/api/register", json=test_user_data)

        assert response.status_code == 200
        data = response.json()
        assert data["message"]
        assert set(data["user"]) == {"id", "username", "isAdmin"}
        assert data["user"]["username"] == test_user_data["username"]
        assert data["user"]["isAdmin"] is False

    def test_register_twice_conflicts(self, client, store, test_user_data, assert_error_response):
        first = client.post("/api/register", json=test_user_data)
        second = client.post("/api/register", json=test_user_data)

        assert first.status_code == 200
        assert_error_response(second, 400, "already exists")
        assert [u.username for u in store.load().users] == [test_user_data["username"]]

    def test_register_missing_password(self, client, assert_error_response):
        response = client.post("/api/register", json={"username": "linran"})

        assert_error_response(response, 400, "required")

    def test_register_empty_username(self, client, assert_error_response):
        response = client.post("/api/register", json={"username": "", "password": "pw"})

        assert_error_response(response, 400, "required")

    def test_register_without_body(self, client, assert_error_response):
        response = client.post("/api/register")

        assert_error_response(response, 400)

    def test_register_wrong_field_type(self, client, assert_error_response):
        response = client.post("/api/register", json={"username": ["x"], "password": "pw"})

        assert_error_response(response, 400, "invalid request body")

    def test_register_ignores_admin_flag_in_body(self, client, store):
        response = client.post(
            "/api/register",
            json={"username": "sneaky", "password": "pw", "isAdmin": True},
        )

        assert response.status_code == 200
        assert response.json()["user"]["isAdmin"] is False
        assert store.load().users[0].is_admin is False


class TestLoginEndpoint:
    """Tests for POST /api/login."""

    def test_login_returns_token_and_user(self, client, test_user_data):
        from blog_api.core.security import decode_token

        registered = client.post("/api/register", json=test_user_data).json()["user"]

        response = client.post("/api/login", json=test_user_data)

        assert response.status_code == 200
        data = response.json()
        assert data["message"]
        assert data["user"] == registered
        payload = decode_token(data["token"])
        assert payload["userId"] == registered["id"]
        assert payload["username"] == registered["username"]
        assert payload["isAdmin"] is False

    def test_login_wrong_password(self, client, test_user_data, assert_error_response):
        client.post("/api/register", json=test_user_data)

        response = client.post(
            "/api/login",
            json={"username": test_user_data["username"], "password": "nope"},
        )

        assert_error_response(response, 400, "incorrect password")
        assert "token" not in response.json()

    def test_login_unknown_user(self, client, assert_error_response):
        response = client.post("/api/login", json={"username": "ghost", "password": "pw"})

        assert_error_response(response, 400, "does not exist")

    def test_register_and_login_with_nul_byte_password(self, client, test_user_data, assert_error_response):
        body = {"username": "nul", "password": "a\x00b"}

        response = client.post("/api/register", json=body)
        assert_error_response(response, 400, "unsupported characters")

        client.post("/api/register", json=test_user_data)
        response = client.post(
            "/api/login",
            json={"username": test_user_data["username"], "password": "a\x00b"},
        )
        assert_error_response(response, 400, "incorrect password")


class TestInternalErrors:
    """Unexpected failures become 500 responses with the error envelope."""

    def test_unwritable_store_returns_generic_500(self, app, store, tmp_path, test_user_data):
        from fastapi.testclient import TestClient

        store.path = tmp_path / "missing" / "database.json"

        with TestClient(app, raise_server_exceptions=False) as client:
            response = client.post("/api/register", json=test_user_data)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_error_details_exposed_when_enabled(self, app, store, test_user_data):
        from fastapi.testclient import TestClient
        from blog_api.config import get_settings

        with patch.object(get_settings(), "expose_error_details", True), \
             patch.object(store, "save", side_effect=OSError("disk full")):
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.post("/api/register", json=test_user_data)

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error: disk full"}

    def test_500_response_carries_cors_headers(self, app, store, test_user_data):
        """Browser clients must be able to read the error body."""
        from fastapi.testclient import TestClient

        with patch.object(store, "save", side_effect=OSError("disk full")):
            with TestClient(app, raise_server_exceptions=False) as client:
                response = client.post(
                    "/api/register",
                    json=test_user_data,
                    headers={"Origin": "https://blog.example.com"},
                )

        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert response.headers["access-control-allow-origin"] == "*"
