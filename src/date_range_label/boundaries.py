"""Classify a range by how it lines up with calendar boundaries."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from date_range_label import periods
from date_range_label.schemas import RangeShape


@dataclass(frozen=True)
class RangeClassification:
    """Calendar facts about one ``start``/``end`` pair."""

    same_year: bool
    same_month: bool
    same_day: bool
    full_days: int
    full_year: bool
    full_quarter: bool
    full_month: bool

    @property
    def shape(self) -> RangeShape:
        """First matching branch of the formatting cascade."""
        if self.full_days:
            return RangeShape.FULL_DAYS
        if self.full_year:
            return RangeShape.FULL_YEAR
        if self.full_quarter:
            return RangeShape.FULL_QUARTER
        if self.full_month:
            return RangeShape.FULL_MONTH
        if not self.same_year:
            return RangeShape.CROSS_YEAR
        if self.same_day:
            return RangeShape.SAME_DAY
        return RangeShape.SAME_YEAR


def full_day_count(start: datetime, end: datetime) -> int:
    """Number of whole days in the range, or 0 if it isn't midnight-aligned.

    Both ends must sit on a start of day (minute precision) and ``end`` must
    be on a later day than ``start``.
    """
    if not periods.is_same_minute(periods.start_of_day(start), start):
        return 0
    if not periods.is_same_minute(periods.start_of_day(end), end):
        return 0
    return max(periods.difference_in_days(end, start), 0)


def is_full_year(start: datetime, end: datetime) -> bool:
    """Start of ``start``'s year through end of ``end``'s year."""
    return periods.is_same_minute(periods.start_of_year(start), start) and (
        periods.is_same_minute(periods.end_of_year(end), end)
    )


def is_full_quarter(start: datetime, end: datetime) -> bool:
    return (
        periods.is_same_minute(periods.start_of_quarter(start), start)
        and periods.is_same_minute(periods.end_of_quarter(end), end)
        and periods.quarter_of(start) == periods.quarter_of(end)
    )


def is_full_month(start: datetime, end: datetime) -> bool:
    return periods.is_same_minute(periods.start_of_month(start), start) and (
        periods.is_same_minute(periods.end_of_month(end), end)
    )


def classify(start: datetime, end: datetime) -> RangeClassification:
    """Compute every calendar predicate the formatter branches on."""
    return RangeClassification(
        same_year=periods.is_same_year(start, end),
        same_month=periods.is_same_month(start, end),
        same_day=periods.is_same_day(start, end),
        full_days=full_day_count(start, end),
        full_year=is_full_year(start, end),
        full_quarter=is_full_quarter(start, end),
        full_month=is_full_month(start, end),
    )
