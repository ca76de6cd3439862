"""Compact, locale-aware time-of-day labels.

A time is first broken into :class:`TimeParts` using the locale's CLDR short
time pattern (is it a 12-hour clock, and which meridiem token applies), then
rendered through one of two templates:

- Latin AM/PM locales get the compact form: ``9am``, ``9:30pm``, ``12pm``.
- Everything else uses the locale's own short pattern with a single-digit
  hour field: ``9:00``, ``0:30``, ``21:15``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, time

from babel import Locale, dates

from date_range_label.options import parse_locale

# Quoted literals in CLDR patterns, e.g. the 'h' in fr_CA "HH 'h' mm"
_QUOTED = re.compile(r"('[^']*')")
_HOUR_FIELD = re.compile(r"([hHkK])\1?")
_LATIN_MERIDIEM = re.compile(r"^[ap]\.?m\.?$", re.IGNORECASE)


@dataclass(frozen=True)
class TimeParts:
    """A time of day as the locale's clock shows it."""

    hour: int  # 0-23, always on the 24-hour clock
    minute: int
    hour_field: str  # CLDR hour symbol: h (1-12), K (0-11), H (0-23), k (1-24)
    meridiem: str | None = None

    @property
    def clock_hour(self) -> int:
        """Hour as displayed by the locale's clock."""
        if self.hour_field == "h":
            return self.hour % 12 or 12
        if self.hour_field == "K":
            return self.hour % 12
        if self.hour_field == "k":
            return self.hour or 24
        return self.hour

    @property
    def is_compactable(self) -> bool:
        """True for 12-hour output with a Latin am/pm token."""
        return self.meridiem is not None and bool(_LATIN_MERIDIEM.match(self.meridiem))


def _unquoted_segments(pattern: str) -> list[tuple[str, bool]]:
    """Split a CLDR pattern into (segment, is_quoted) pairs."""
    return [(part, part.startswith("'")) for part in _QUOTED.split(pattern) if part]


def hour_field(locale: Locale | str) -> str:
    """CLDR hour symbol used by the locale's short time pattern."""
    pattern = dates.get_time_format("short", locale=locale).pattern
    for segment, quoted in _unquoted_segments(pattern):
        if quoted:
            continue
        match = _HOUR_FIELD.search(segment)
        if match:
            return match.group(1)
    return "H"


def single_digit_hour_pattern(locale: Locale | str) -> str:
    """The locale's short time pattern with the hour field never zero-padded."""
    pattern = dates.get_time_format("short", locale=locale).pattern
    return "".join(
        segment if quoted else _HOUR_FIELD.sub(r"\1", segment)
        for segment, quoted in _unquoted_segments(pattern)
    )


def time_parts(instant: datetime, locale: Locale | str) -> TimeParts:
    """Break ``instant`` into the pieces the locale's short time format shows."""
    field = hour_field(locale)
    meridiem = None
    if field in ("h", "K"):
        periods = dates.get_period_names(width="abbreviated", context="format", locale=locale)
        meridiem = periods["am" if instant.hour < 12 else "pm"]
    return TimeParts(
        hour=instant.hour, minute=instant.minute, hour_field=field, meridiem=meridiem
    )


def render_time(parts: TimeParts, locale: Locale | str) -> str:
    """Render ``parts`` through the compact or the locale template."""
    if parts.is_compactable:
        suffix = (parts.meridiem or "").replace(".", "").lower()
        minutes = "" if parts.minute == 0 else f":{parts.minute:02d}"
        return f"{parts.clock_hour}{minutes}{suffix}"

    return dates.format_time(
        time(parts.hour, parts.minute),
        format=single_digit_hour_pattern(locale),
        locale=locale,
    )


def format_time(instant: datetime, locale: Locale | str) -> str:
    """Compact time-of-day label, e.g. ``9am`` (en_US) or ``9:00`` (de_DE)."""
    locale = parse_locale(locale)
    return render_time(time_parts(instant, locale), locale)
