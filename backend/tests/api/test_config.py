"""Tests for API configuration."""

import pytest

from api.config import APISettings


class TestAPISettings:
    """Tests for APISettings class."""

    def test_default_values(self):
        """Should have sensible defaults."""
        settings = APISettings()
        assert settings.host == "0.0.0.0"
        assert settings.port == 5000
        assert settings.debug is False
        assert settings.reload is False
        assert settings.log_level == "INFO"

    def test_env_override(self, monkeypatch):
        """Should load from IMALL_ prefixed environment variables."""
        monkeypatch.setenv("IMALL_PORT", "9000")
        monkeypatch.setenv("IMALL_DEBUG", "true")
        monkeypatch.setenv("IMALL_LOG_LEVEL", "debug")
        settings = APISettings()
        assert settings.port == 9000
        assert settings.debug is True
        assert settings.log_level == "debug"

    def test_unprefixed_env_ignored(self, monkeypatch):
        monkeypatch.setenv("PORT", "9000")
        assert APISettings().port == 5000

    def test_cors_defaults(self):
        """Should have CORS defaults."""
        settings = APISettings()
        assert settings.cors_origins == ["*"]
        assert settings.cors_allow_credentials is False
        assert settings.cors_allow_methods == ["*"]
        assert settings.cors_allow_headers == ["*"]
