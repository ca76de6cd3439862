"""
Domain models for date-range-label.

Pydantic models for caller-supplied options, plus the enum naming each
output shape the range formatter can produce.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum

from pydantic import BaseModel, Field


class RangeShape(StrEnum):
    """Which branch of the formatting cascade produced a label."""

    FULL_DAYS = "full_days"
    FULL_YEAR = "full_year"
    FULL_QUARTER = "full_quarter"
    FULL_MONTH = "full_month"
    CROSS_YEAR = "cross_year"
    SAME_DAY = "same_day"
    SAME_YEAR = "same_year"


class FormatOptions(BaseModel):
    """Options accepted by ``format_date_range``.

    Fields left as ``None`` are filled in by ``resolve_options`` from the
    clock, the settings and the environment.
    """

    model_config = {"frozen": True}

    today: datetime | None = Field(
        default=None, description="Reference instant for Today/Tomorrow and the year suffix"
    )
    locale: str | None = Field(
        default=None, description="Locale identifier for time of day, e.g. en_US or de-DE"
    )
    include_time: bool | None = Field(
        default=None, description="Append time of day to date labels"
    )
    separator: str | None = Field(
        default=None, description="Token placed between the from and to halves"
    )
