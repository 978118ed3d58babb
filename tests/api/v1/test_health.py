"""Tests for health check endpoints."""

from fastapi import status


class TestHealthEndpoints:
    """Test health check endpoints."""

    def test_health_check(self, client):
        """Test health check endpoint."""
        response = client.get("/api/v1/")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["service"] == "SRT Parser Service"
        assert data["status"] == "running"
        assert data["authentication"] == "disabled"
        assert "version" in data
        assert "parse" in data["endpoints"]
        assert "health" in data["endpoints"]

    def test_health_endpoint(self, client):
        """Test /health endpoint."""
        response = client.get("/api/v1/health")
        assert response.status_code == status.HTTP_200_OK
        assert isinstance(response.json()["endpoints"], dict)

    def test_health_is_public(self, authenticated_client):
        """Test health stays reachable without an API key."""
        response = authenticated_client.get("/api/v1/health")
        assert response.status_code == status.HTTP_200_OK
        assert response.json()["authentication"] == "enabled"
