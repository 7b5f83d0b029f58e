"""
Centralized configuration for the iMall backend.

All settings are loaded from environment variables with sensible defaults.
Server and CORS options live in api.config; this module holds the settings
the domain modules need (token signing, hashing cost, validation limits).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "iMall API"
    app_version: str = "0.1.0"
    environment: str = "development"

    # Tokens
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    jwt_expires_in_days: int = 7

    # Password hashing (bcrypt work factor)
    bcrypt_rounds: int = 10

    # Validation limits
    min_password_length: int = 6
    min_name_length: int = 2


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
