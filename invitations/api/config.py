"""
config.py — Environment configuration for the API.

Uses pydantic-settings for type-safe environment variable handling.
Every variable is prefixed with ``INVITATIONS_`` (e.g. ``INVITATIONS_DEBUG``).
"""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="INVITATIONS_",
        extra="ignore",
    )

    # Application
    app_name: str = "Invitation Block Engine"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # Routing
    api_prefix: str = "/api/v1"

    # CORS settings
    allowed_origins: list[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    # Settings storage; in-memory when unset
    storage_dir: Optional[str] = None

    # Category used when a request does not name one
    default_category: str = "wedding"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
