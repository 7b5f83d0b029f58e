"""
API configuration using Pydantic Settings.

Server, logging and CORS options. Loaded from ``IMALL_``-prefixed
environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class APISettings(BaseSettings):
    """API configuration settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="IMALL_",
        case_sensitive=False,
        extra="ignore",
    )

    # Server settings
    host: str = "0.0.0.0"
    port: int = 5000
    debug: bool = False
    reload: bool = False

    # Logging
    log_level: str = "INFO"

    # CORS settings (the mobile client calls from arbitrary origins)
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = False
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]


def get_settings() -> APISettings:
    """Get a settings instance."""
    return APISettings()
