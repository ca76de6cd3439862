"""
Format a ``start``/``end`` pair of datetimes as one display string.

The output shape depends on how the range lines up with the calendar
(examples with ``today`` in 2024)::

    2024-01-01 00:00 .. 2024-12-31 23:59        -> 2024
    2024-07-01 00:00 .. 2024-09-30 23:59        -> Q3 2024
    2024-03-01 00:00 .. 2024-03-31 23:59        -> March 2024
    2024-01-01 00:00 .. 2024-02-29 23:59        -> Jan - Feb 2024
    2024-03-04 00:00 .. 2024-03-07 00:00        -> Mar 4 - Mar 6
    2023-12-31 10:00 .. 2024-01-02 10:00        -> Dec 31, 10am - Jan 2 '24, 10am
    today 08:00 .. today 09:00                  -> Today, 8am - 9am
    2023-05-02 08:00 .. 2023-05-04 17:30        -> May 2, 8am - May 4, 5:30pm, 2023

``format_date_range`` resolves defaults (clock, locale) once and hands off to
``render_range``, which is pure.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from date_range_label import labels
from date_range_label.boundaries import RangeClassification, classify
from date_range_label.options import ResolvedOptions, resolve_options
from date_range_label.schemas import FormatOptions, RangeShape
from date_range_label.timefmt import format_time

logger = logging.getLogger(__name__)


class InvalidRangeError(ValueError):
    """Raised when ``start`` is after ``end``."""

    def __init__(self, start: datetime, end: datetime) -> None:
        self.start = start
        self.end = end
        super().__init__(f"Range start {start.isoformat()} is after end {end.isoformat()}")


def format_date_range(
    start: datetime,
    end: datetime,
    options: FormatOptions | None = None,
    *,
    clock: Callable[[], datetime] = datetime.now,
) -> str:
    """Human-readable label for the range ``start``..``end``.

    Args:
        start: First instant of the range.
        end: Last instant of the range; must not be before ``start``.
        options: Reference day, locale, time inclusion and separator.
            Unset fields come from settings and the environment.
        clock: Supplies ``today`` when ``options.today`` is unset.

    Raises:
        InvalidRangeError: ``start`` is after ``end``.
    """
    if start > end:
        raise InvalidRangeError(start, end)
    return render_range(start, end, resolve_options(options, clock=clock))


def render_range(start: datetime, end: datetime, options: ResolvedOptions) -> str:
    """Pure formatting cascade over fully-resolved options."""
    info = classify(start, end)
    shape = info.shape
    logger.debug("Range %s..%s classified as %s", start.isoformat(), end.isoformat(), shape)
    return _RENDERERS[shape](start, end, info, options)


class _Parts:
    """Label fragments shared by the cascade branches for one call."""

    def __init__(self, start: datetime, options: ResolvedOptions) -> None:
        self.options = options
        self.sep = f" {options.separator} "
        self.year_suffix = (
            "" if start.year == options.today.year else f", {labels.year(start)}"
        )

    def time(self, value: datetime) -> str:
        return format_time(value, self.options.locale)

    def with_time(self, label: str, value: datetime) -> str:
        if not self.options.include_time:
            return label
        return f"{label}, {self.time(value)}"


_Renderer = Callable[[datetime, datetime, RangeClassification, ResolvedOptions], str]


def _full_days(
    start: datetime, end: datetime, info: RangeClassification, options: ResolvedOptions
) -> str:
    parts = _Parts(start, options)
    first = labels.date_plain(start, options.today)
    if info.full_days == 1:
        return f"{first}{parts.year_suffix}"

    last = labels.last_included_day(end)
    return f"{first}{parts.sep}{labels.date_plain(last, options.today)}{parts.year_suffix}"


def _full_year(
    start: datetime, end: datetime, info: RangeClassification, options: ResolvedOptions
) -> str:
    return labels.year(start)


def _full_quarter(
    start: datetime, end: datetime, info: RangeClassification, options: ResolvedOptions
) -> str:
    return labels.quarter(start)


def _full_month(
    start: datetime, end: datetime, info: RangeClassification, options: ResolvedOptions
) -> str:
    if info.same_month:
        return f"{labels.month_name(start)} {labels.year(start)}"
    sep = _Parts(start, options).sep
    return f"{labels.month_abbr(start)}{sep}{labels.month_abbr(end)} {labels.year(end)}"


def _cross_year(
    start: datetime, end: datetime, info: RangeClassification, options: ResolvedOptions
) -> str:
    parts = _Parts(start, options)
    head = parts.with_time(labels.date_plain(start, options.today), start)
    tail = parts.with_time(labels.date_with_year(end, options.today), end)
    return f"{head}{parts.sep}{tail}"


def _same_day(
    start: datetime, end: datetime, info: RangeClassification, options: ResolvedOptions
) -> str:
    parts = _Parts(start, options)
    label = labels.date_plain(start, options.today)
    if options.include_time:
        label = f"{label}, {parts.time(start)}{parts.sep}{parts.time(end)}"
    return f"{label}{parts.year_suffix}"


def _same_year(
    start: datetime, end: datetime, info: RangeClassification, options: ResolvedOptions
) -> str:
    parts = _Parts(start, options)
    head = parts.with_time(labels.date_plain(start, options.today), start)
    tail = parts.with_time(labels.date_plain(end, options.today), end)
    return f"{head}{parts.sep}{tail}{parts.year_suffix}"


_RENDERERS: dict[RangeShape, _Renderer] = {
    RangeShape.FULL_DAYS: _full_days,
    RangeShape.FULL_YEAR: _full_year,
    RangeShape.FULL_QUARTER: _full_quarter,
    RangeShape.FULL_MONTH: _full_month,
    RangeShape.CROSS_YEAR: _cross_year,
    RangeShape.SAME_DAY: _same_day,
    RangeShape.SAME_YEAR: _same_year,
}
