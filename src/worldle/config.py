"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    timezone: str = "UTC"
    default_locale: str = "en"
    supported_locales: str | None = "en,fr"
    max_tries: int = Field(default=6, ge=1, le=6)
    default_hide_image_mode: bool = False
    default_rotation_mode: bool = False
    catalog_path: str | None = None
    session_backend: str = "file"
    session_file_path: str = "worldle_sessions.json"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    profile_id: str = "local"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="WORLDLE_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_locales(raw: str | None, default_locale: str) -> list[str]:
    """Parse a comma-separated locale list, always including the default."""
    locales = [default_locale]
    if raw is None:
        return locales
    for chunk in raw.split(","):
        value = chunk.strip()
        if value and value not in locales:
            locales.append(value)
    return locales
