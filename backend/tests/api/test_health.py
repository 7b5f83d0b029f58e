"""Tests for the welcome and health endpoints."""

import pytest
from fastapi.testclient import TestClient

from api import app


client = TestClient(app)


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_welcome(self):
        """Root endpoint greets the caller."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["message"] == "Welcome to iMall API"
        assert data["status"] == "success"
        assert set(data.keys()) == {"message", "status", "timestamp"}

    def test_health_check(self):
        """Health endpoint should return 200 with status."""
        response = client.get("/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["uptime"] >= 0

    def test_health_response_structure(self):
        """Health response should have correct structure."""
        response = client.get("/health")
        data = response.json()
        assert set(data.keys()) == {"status", "uptime", "timestamp"}

    def test_lifespan_runs(self):
        """Startup sets the uptime reference."""
        with TestClient(app) as started:
            response = started.get("/health")
        assert response.status_code == 200
        assert app.state.started_at is not None
