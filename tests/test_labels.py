"""
Tests for Today/Tomorrow and calendar labels.
"""

from __future__ import annotations

from datetime import date, datetime

from date_range_label import labels

TODAY = datetime(2024, 6, 15, 12, 0)


class TestRelativeDay:
    """Tests for relative_day."""

    def test_today(self) -> None:
        assert labels.relative_day(datetime(2024, 6, 15, 23, 59), TODAY) == "Today"

    def test_tomorrow(self) -> None:
        assert labels.relative_day(datetime(2024, 6, 16, 0, 0), TODAY) == "Tomorrow"

    def test_yesterday_has_no_name(self) -> None:
        assert labels.relative_day(datetime(2024, 6, 14), TODAY) is None

    def test_tomorrow_across_year_end(self) -> None:
        assert labels.relative_day(date(2025, 1, 1), datetime(2024, 12, 31, 18, 0)) == "Tomorrow"


class TestDayLabels:
    """Tests for the three calendar label shapes."""

    def test_with_year(self) -> None:
        assert labels.date_with_year(datetime(2024, 1, 5, 9, 0), TODAY) == "Jan 5 '24"

    def test_with_weekday(self) -> None:
        assert labels.date_with_weekday(datetime(2024, 1, 5, 9, 0), TODAY) == "Fri Jan 5"

    def test_plain(self) -> None:
        assert labels.date_plain(datetime(2024, 12, 25), TODAY) == "Dec 25"

    def test_relative_names_take_precedence(self) -> None:
        assert labels.date_with_year(datetime(2024, 6, 15, 8, 0), TODAY) == "Today"
        assert labels.date_with_weekday(datetime(2024, 6, 16, 8, 0), TODAY) == "Tomorrow"
        assert labels.date_plain(datetime(2024, 6, 16), TODAY) == "Tomorrow"


class TestPeriodLabels:
    """Tests for month, quarter and year labels."""

    def test_month_name(self) -> None:
        assert labels.month_name(date(2024, 3, 1)) == "March"

    def test_month_abbr(self) -> None:
        assert labels.month_abbr(date(2024, 9, 1)) == "Sep"

    def test_quarter(self) -> None:
        assert labels.quarter(date(2024, 8, 1)) == "Q3 2024"

    def test_year(self) -> None:
        assert labels.year(date(2024, 8, 1)) == "2024"

    def test_last_included_day(self) -> None:
        assert labels.last_included_day(datetime(2024, 3, 1)) == datetime(2024, 2, 29)
