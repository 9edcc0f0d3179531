"""
Tests for JWT authentication middleware.
"""

import pytest
from datetime import timedelta
from fastapi.testclient import TestClient

from api.app import create_app
from shared.config import Settings
from tests.conftest import TEST_API_KEY, auth_headers_for, create_test_token


def _headers(token: str) -> dict[str, str]:
    return {"x-api-key": TEST_API_KEY, "Authorization": f"Bearer {token}"}


class TestAuthentication:
    def test_missing_auth_header(self, client, api_headers):
        """Request without auth header should return 401."""
        response = client.post("/updateProfile", json={"age": 1}, headers=api_headers)
        assert response.status_code == 401
        assert response.json() == {"error": "Authorization header is missing"}
        assert response.headers["www-authenticate"] == "Bearer"

    def test_non_bearer_scheme(self, client, api_headers):
        """Only the Bearer scheme is recognised."""
        headers = {**api_headers, "Authorization": f"Basic {create_test_token()}"}
        response = client.post("/updateProfile", json={"age": 1}, headers=headers)
        assert response.status_code == 401
        assert response.json() == {"error": "Authorization header is missing"}

    def test_invalid_token(self, client):
        response = client.post("/updateProfile", json={"age": 1}, headers=_headers("garbage"))
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid token"}

    def test_wrong_secret(self, client):
        headers = auth_headers_for(1, secret="not-the-server-secret")
        response = client.post("/updateProfile", json={"age": 1}, headers=headers)
        assert response.status_code == 401

    def test_expired_token(self, client):
        token = create_test_token(expires_in=timedelta(minutes=-5))
        response = client.post("/updateProfile", json={"age": 1}, headers=_headers(token))
        assert response.status_code == 401
        assert response.json() == {"error": "Token has expired"}

    def test_string_user_id(self, client):
        token = create_test_token(user_id="1")
        response = client.post("/updateProfile", json={"age": 1}, headers=_headers(token))
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid user ID in token"}

    def test_valid_token_reaches_handler(self, client, registered_user):
        """A valid token passes the gate; the handler then reports the missing profile."""
        headers = auth_headers_for(registered_user["id"])
        response = client.post("/updateProfile", json={"age": 1}, headers=headers)
        assert response.status_code == 404
        assert response.json() == {"error": "profile not found"}

    def test_secret_not_configured(self, engine):
        """Without a signing secret every protected route fails closed."""
        settings = Settings(_env_file=None, database_url="sqlite://", jwt_secret="")
        client = TestClient(create_app(settings, engine))
        response = client.post("/updateProfile", json={"age": 1}, headers=auth_headers_for(1))
        assert response.status_code == 401
        assert response.json() == {"error": "Server authentication not configured"}


class TestPathOwner:
    def test_mismatched_path_id(self, client, registered_user):
        """Acting on another account's path is forbidden."""
        other_id = registered_user["id"] + 1
        response = client.put(
            f"/profile/{other_id}",
            json={"age": 1},
            headers=auth_headers_for(registered_user["id"]),
        )
        assert response.status_code == 403
        assert response.json() == {"error": "cannot act on another user's account"}

    def test_non_integer_path_id(self, client, registered_user):
        response = client.delete(
            "/profile/abc",
            headers=auth_headers_for(registered_user["id"]),
        )
        assert response.status_code == 400
        assert response.json() == {"error": "invalid request payload"}

    def test_path_route_requires_token(self, client, api_headers, registered_user):
        response = client.delete(f"/profile/{registered_user['id']}", headers=api_headers)
        assert response.status_code == 401

    @pytest.mark.parametrize("path_id", ["0", "-4", str(2**31), "9223372036854775808"])
    def test_out_of_range_path_id(self, client, registered_user, path_id):
        """Path IDs outside the account ID range are rejected as bad input."""
        response = client.delete(
            f"/profile/{path_id}",
            headers=auth_headers_for(registered_user["id"]),
        )
        assert response.status_code == 400
        assert response.json() == {"error": "invalid request payload"}


class TestTokenAccountRange:
    @pytest.mark.parametrize("user_id", [0, -1, 2**31, 2**63])
    def test_out_of_range_token_id(self, client, user_id):
        """Token IDs outside the account ID range never reach the store."""
        token = create_test_token(user_id=user_id)
        response = client.patch("/deleteUser", headers=_headers(token))
        assert response.status_code == 401
        assert response.json() == {"error": "Invalid user ID in token"}
