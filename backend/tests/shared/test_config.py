"""Tests for shared/config.py."""

from unittest.mock import patch
import os

from shared.config import Settings, get_settings


class TestSettings:
    def test_default_values(self):
        """Settings should have sensible defaults."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.app_name == "Chakula API"
        assert settings.debug is False
        assert settings.port == 5000
        assert settings.host == "0.0.0.0"
        assert settings.app_version == "0.1.0"
        assert settings.log_level == "INFO"
        assert settings.jwt_secret == ""
        assert settings.jwt_expiry_days == 7
        assert settings.bcrypt_rounds == 12

    def test_loads_from_env(self):
        """Settings should load from environment variables."""
        with patch.dict(os.environ, {"DEBUG": "true", "PORT": "9000"}):
            settings = Settings()
            assert settings.debug is True
            assert settings.port == 9000

    def test_loads_auth_config_from_env(self):
        """Token and hashing settings should load from the environment."""
        with patch.dict(os.environ, {
            "JWT_SECRET": "env-secret",
            "JWT_EXPIRY_DAYS": "1",
            "BCRYPT_ROUNDS": "10",
        }):
            settings = Settings()
            assert settings.jwt_secret == "env-secret"
            assert settings.jwt_expiry_days == 1
            assert settings.bcrypt_rounds == 10

    def test_loads_supabase_config_from_env(self):
        """Settings should load Supabase configuration from environment variables."""
        with patch.dict(os.environ, {
            "SUPABASE_URL": "https://test.supabase.co",
            "SUPABASE_SERVICE_ROLE_KEY": "test-service-key",
        }):
            settings = Settings()
            assert settings.supabase_url == "https://test.supabase.co"
            assert settings.supabase_service_role_key == "test-service-key"

    def test_cors_origins_from_json(self):
        with patch.dict(os.environ, {"CORS_ORIGINS": '["https://chakula.example"]'}):
            assert Settings().cors_origins == ["https://chakula.example"]


class TestGetSettings:
    def test_get_settings_returns_settings_instance(self):
        """get_settings should return a Settings instance."""
        get_settings.cache_clear()
        settings = get_settings()
        assert isinstance(settings, Settings)

    def test_get_settings_caches(self):
        """get_settings should return cached instance."""
        get_settings.cache_clear()
        settings1 = get_settings()
        settings2 = get_settings()
        assert settings1 is settings2
