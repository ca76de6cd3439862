"""
Tests for calendar-boundary classification.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from date_range_label.boundaries import (
    classify,
    full_day_count,
    is_full_month,
    is_full_quarter,
    is_full_year,
)
from date_range_label.schemas import RangeShape


class TestFullDayCount:
    """Tests for whole-day detection."""

    def test_single_day(self) -> None:
        assert full_day_count(datetime(2024, 3, 4), datetime(2024, 3, 5)) == 1

    def test_several_days(self) -> None:
        assert full_day_count(datetime(2024, 3, 4), datetime(2024, 3, 7)) == 3

    def test_seconds_past_midnight_still_aligned(self) -> None:
        assert full_day_count(datetime(2024, 3, 4, 0, 0, 30), datetime(2024, 3, 5)) == 1

    def test_zero_width_at_midnight(self) -> None:
        """A zero-width range is never a day set."""
        assert full_day_count(datetime(2024, 3, 4), datetime(2024, 3, 4)) == 0

    def test_unaligned_start(self) -> None:
        assert full_day_count(datetime(2024, 3, 4, 9, 0), datetime(2024, 3, 5)) == 0

    def test_unaligned_end(self) -> None:
        assert full_day_count(datetime(2024, 3, 4), datetime(2024, 3, 4, 23, 59)) == 0


class TestFullPeriods:
    """Tests for year, quarter and month alignment."""

    def test_full_year(self) -> None:
        assert is_full_year(datetime(2024, 1, 1), datetime(2024, 12, 31, 23, 59))

    def test_full_year_needs_year_end(self) -> None:
        assert not is_full_year(datetime(2024, 1, 1), datetime(2024, 12, 31, 23, 58))

    def test_multi_year_span_is_full_year(self) -> None:
        """Only the start of the first year and the end of the last are checked."""
        assert is_full_year(datetime(2023, 1, 1), datetime(2024, 12, 31, 23, 59))

    def test_full_quarter(self) -> None:
        assert is_full_quarter(datetime(2024, 7, 1), datetime(2024, 9, 30, 23, 59))

    def test_quarter_must_match(self) -> None:
        assert not is_full_quarter(datetime(2024, 1, 1), datetime(2024, 6, 30, 23, 59))

    def test_same_quarter_different_year(self) -> None:
        assert is_full_quarter(datetime(2023, 1, 1), datetime(2024, 3, 31, 23, 59))

    def test_full_month(self) -> None:
        assert is_full_month(datetime(2024, 2, 1), datetime(2024, 2, 29, 23, 59, 59))

    def test_multi_month(self) -> None:
        assert is_full_month(datetime(2024, 1, 1), datetime(2024, 2, 29, 23, 59))

    def test_partial_month(self) -> None:
        assert not is_full_month(datetime(2024, 2, 2), datetime(2024, 2, 29, 23, 59))


class TestClassify:
    """Tests for classify and the derived shape."""

    @pytest.mark.parametrize(
        ("start", "end", "shape"),
        [
            (datetime(2024, 3, 4), datetime(2024, 3, 6), RangeShape.FULL_DAYS),
            (datetime(2024, 1, 1), datetime(2024, 12, 31, 23, 59), RangeShape.FULL_YEAR),
            (datetime(2022, 1, 1), datetime(2024, 12, 31, 23, 59), RangeShape.FULL_YEAR),
            (datetime(2024, 1, 1), datetime(2024, 3, 31, 23, 59), RangeShape.FULL_QUARTER),
            (datetime(2024, 1, 1), datetime(2024, 2, 29, 23, 59), RangeShape.FULL_MONTH),
            (datetime(2023, 12, 31, 10), datetime(2024, 1, 2, 10), RangeShape.CROSS_YEAR),
            (datetime(2024, 5, 1, 8), datetime(2024, 5, 1, 9), RangeShape.SAME_DAY),
            (datetime(2024, 5, 1, 8), datetime(2024, 6, 3, 9), RangeShape.SAME_YEAR),
        ],
    )
    def test_shape(self, start: datetime, end: datetime, shape: RangeShape) -> None:
        assert classify(start, end).shape == shape

    def test_day_set_wins_over_month(self) -> None:
        """Midnight-to-midnight ranges are day sets even when they cover a month."""
        info = classify(datetime(2024, 1, 1), datetime(2024, 2, 1))
        assert info.full_days == 31
        assert info.shape == RangeShape.FULL_DAYS

    def test_zero_width_is_same_day(self) -> None:
        info = classify(datetime(2024, 3, 4), datetime(2024, 3, 4))
        assert info.full_days == 0
        assert info.same_day
        assert info.shape == RangeShape.SAME_DAY

    def test_flags(self) -> None:
        info = classify(datetime(2024, 3, 1), datetime(2024, 3, 31, 23, 59))
        assert info.same_year
        assert info.same_month
        assert not info.same_day
        assert info.full_month
        assert not info.full_quarter
