"""Tests for health check endpoints."""

import pytest
from unittest.mock import patch


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_needs_no_api_key(self, client):
        """Health and readiness probes should bypass the API key gate."""
        assert client.get("/health").status_code == 200
        assert client.get("/ready").status_code == 200

    def test_readiness_check(self, client):
        """Readiness endpoint should report the database as connected."""
        response = client.get("/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ready", "database": "connected"}

    def test_readiness_database_down(self, client):
        """Readiness should answer 503 when the database does not respond."""
        with patch("api.routes.health.check_connection", return_value=False):
            response = client.get("/ready")
        assert response.status_code == 503
        assert response.json() == {"status": "unavailable", "database": "unreachable"}

    def test_health_response_structure(self, client):
        """Health response should have correct structure."""
        data = client.get("/health").json()
        assert set(data.keys()) == {"status", "version"}


class TestPing:
    def test_ping(self, client, api_headers):
        response = client.get("/ping", headers=api_headers)
        assert response.status_code == 200
        assert response.json() == {"message": "pong"}

    def test_ping_requires_api_key(self, client):
        response = client.get("/ping")
        assert response.status_code == 401
        assert response.json() == {"error": "API key is required"}


class TestErrorShape:
    def test_unknown_route(self, client, api_headers):
        """Framework errors should use the flat error body too."""
        response = client.get("/no-such-route", headers=api_headers)
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}
