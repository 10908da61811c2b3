"""Application configuration."""

import os
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    default_timezone: str = "UTC"
    password_min_length: int = 6
    session_ttl_seconds: int = 12 * 60 * 60
    recent_window_days: int = 7
    recent_workouts_limit: int = 5

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def is_valid_timezone(value: str) -> bool:
    """Return True when value names a known IANA timezone."""
    try:
        ZoneInfo(value)
    except (ValueError, KeyError):
        return False
    return True
