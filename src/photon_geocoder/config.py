"""
Application settings.

Values come from environment variables prefixed with ``PHOTON_`` (or a local
``.env`` file), e.g. ``PHOTON_BASE_URL=http://localhost:2322``.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://photon.komoot.io"


class Settings(BaseSettings):
    """Runtime configuration for the client and CLI."""

    model_config = SettingsConfigDict(
        env_prefix="PHOTON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "photon-geocoder"
    base_url: str = DEFAULT_BASE_URL
    secure: bool = True
    timeout: float = Field(default=30, gt=0, description="Request timeout in seconds")
    lang: str | None = Field(default=None, description="Default ISO-639-1 language code")
    limit: int | None = Field(default=None, gt=0, description="Default result limit")
    debug: bool = False
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
