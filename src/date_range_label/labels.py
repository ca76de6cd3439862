"""Day and month labels relative to a reference "today".

Calendar wording is always English; only time of day follows the locale
(see ``timefmt``).
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from babel import dates

from date_range_label import periods

# Month and weekday names are not localized
LABEL_LOCALE = "en_US"

TODAY = "Today"
TOMORROW = "Tomorrow"

WITH_YEAR = "MMM d ''yy"  # Jan 5 '24
WITH_WEEKDAY = "EEE MMM d"  # Fri Jan 5
PLAIN = "MMM d"  # Jan 5


def relative_day(value: date, today: date) -> str | None:
    """``Today`` / ``Tomorrow`` when ``value`` is one of those days, else None."""
    if periods.is_same_day(value, today):
        return TODAY
    if periods.difference_in_days(value, today) == 1:
        return TOMORROW
    return None


def _day_label(value: datetime, today: datetime, pattern: str) -> str:
    return relative_day(value, today) or dates.format_date(
        value.date(), pattern, locale=LABEL_LOCALE
    )


def date_with_year(value: datetime, today: datetime) -> str:
    return _day_label(value, today, WITH_YEAR)


def date_with_weekday(value: datetime, today: datetime) -> str:
    return _day_label(value, today, WITH_WEEKDAY)


def date_plain(value: datetime, today: datetime) -> str:
    return _day_label(value, today, PLAIN)


def last_included_day(end: datetime) -> datetime:
    """Day before a midnight-aligned exclusive ``end``."""
    return periods.start_of_day(end) - timedelta(days=1)


def month_name(value: date) -> str:
    return dates.format_date(value, "MMMM", locale=LABEL_LOCALE)


def month_abbr(value: date) -> str:
    return dates.format_date(value, "MMM", locale=LABEL_LOCALE)


def year(value: date) -> str:
    return f"{value.year:04d}"


def quarter(value: date) -> str:
    """E.g. ``Q3 2024``."""
    return f"Q{periods.quarter_of(value)} {year(value)}"
