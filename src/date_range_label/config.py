"""
Application settings and logging setup.

Settings are read from ``DATE_RANGE_*`` environment variables::

    DATE_RANGE_LOCALE=de_DE date-range-label format 2024-01-01T08:00 2024-01-01T09:00
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

#: Used when neither settings nor the environment name a usable locale.
FALLBACK_LOCALE = "en_US"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseSettings):
    """Runtime configuration, overridable per field via environment."""

    model_config = SettingsConfigDict(env_prefix="DATE_RANGE_", extra="ignore")

    app_name: str = "date-range-label"
    app_env: str = "development"
    debug: bool = False
    log_level: LogLevel = "WARNING"

    # Defaults for FormatOptions fields the caller leaves unset
    locale: str | None = None
    separator: str = "-"
    include_time: bool = True

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, read once."""
    return Settings()


def configure_logging(level: int | str) -> None:
    """Attach a stderr handler to the root logger at ``level``."""
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT, force=True)
