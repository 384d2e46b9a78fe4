"""Application configuration."""

import os
from datetime import timedelta
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    daily_max: timedelta = timedelta(hours=3)
    timezone: str = "UTC"
    snapshot_path: Path | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @field_validator("daily_max")
    @classmethod
    def _check_daily_max(cls, value: timedelta) -> timedelta:
        if value < timedelta(0):
            raise ValueError("daily_max must not be negative")
        return value

    @field_validator("timezone")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        return parse_timezone(value)


def parse_timezone(raw: str) -> str:
    """Return the IANA timezone name if it can be loaded."""
    try:
        ZoneInfo(raw)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"Unknown timezone: {raw!r}") from exc
    return raw
