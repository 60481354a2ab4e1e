"""Tests for health check endpoints."""

import os
from unittest.mock import patch

from shared.config import get_settings


class TestHealthEndpoints:
    """Tests for health check endpoints."""

    def test_health_check(self, client):
        """Health endpoint should return 200 with status."""
        response = client.get("/api/health")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == "0.1.0"

    def test_health_response_structure(self, client):
        """Health response should have correct structure."""
        data = client.get("/api/health").json()
        assert set(data.keys()) == {"status", "version"}

    def test_readiness_response_structure(self, client):
        """Readiness response should have correct structure."""
        response = client.get("/api/ready")
        assert response.status_code == 200
        assert set(response.json().keys()) == {"status", "database", "auth"}

    def test_ready_when_configured(self, client):
        """Readiness should report ready once Supabase and JWT settings exist."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "JWT_SECRET": "configured-secret",
        }):
            get_settings.cache_clear()
            data = client.get("/api/ready").json()

        assert data == {"status": "ready", "database": "configured", "auth": "configured"}

    def test_not_ready_without_secret(self, client):
        """A missing JWT secret should be reported, not hidden."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
            "JWT_SECRET": "",
        }):
            get_settings.cache_clear()
            data = client.get("/api/ready").json()

        assert data["status"] == "not_ready"
        assert data["auth"] == "missing"
        assert data["database"] == "configured"
