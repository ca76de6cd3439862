"""Calendar arithmetic on ``datetime`` values.

Start/end of day, month, quarter and year, quarter-of-year extraction,
minute-level equality and whole-day differences.  Every helper preserves the
``tzinfo`` of its input and never converts between timezones.

"End of" helpers return the last representable instant of the period
(``23:59:59.999999``), so comparisons against them should go through
:func:`is_same_minute`.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, time

_END_OF_DAY = time(23, 59, 59, 999999)


def start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: datetime) -> datetime:
    return value.replace(
        hour=_END_OF_DAY.hour,
        minute=_END_OF_DAY.minute,
        second=_END_OF_DAY.second,
        microsecond=_END_OF_DAY.microsecond,
    )


def start_of_month(value: datetime) -> datetime:
    return start_of_day(value).replace(day=1)


def end_of_month(value: datetime) -> datetime:
    last_day = calendar.monthrange(value.year, value.month)[1]
    return end_of_day(value).replace(day=last_day)


def quarter_of(value: date) -> int:
    """Quarter of the year, 1-4."""
    return (value.month - 1) // 3 + 1


def start_of_quarter(value: datetime) -> datetime:
    first_month = (quarter_of(value) - 1) * 3 + 1
    return start_of_day(value).replace(month=first_month, day=1)


def end_of_quarter(value: datetime) -> datetime:
    last_month = quarter_of(value) * 3
    last_day = calendar.monthrange(value.year, last_month)[1]
    return end_of_day(value).replace(month=last_month, day=last_day)


def start_of_year(value: datetime) -> datetime:
    return start_of_day(value).replace(month=1, day=1)


def end_of_year(value: datetime) -> datetime:
    return end_of_day(value).replace(month=12, day=31)


def truncate_to_minute(value: datetime) -> datetime:
    return value.replace(second=0, microsecond=0)


def is_same_minute(left: datetime, right: datetime) -> bool:
    """True when both values fall within the same wall-clock minute."""
    return truncate_to_minute(left) == truncate_to_minute(right)


def is_same_day(left: date, right: date) -> bool:
    return _as_date(left) == _as_date(right)


def is_same_month(left: date, right: date) -> bool:
    return (left.year, left.month) == (right.year, right.month)


def is_same_year(left: date, right: date) -> bool:
    return left.year == right.year


def difference_in_days(later: date, earlier: date) -> int:
    """Whole calendar days between two values, ignoring time of day."""
    return (_as_date(later) - _as_date(earlier)).days


def _as_date(value: date) -> date:
    # datetime subclasses date; keep only the calendar day
    if isinstance(value, datetime):
        return value.date()
    return value
