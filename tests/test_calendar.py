"""Tests for calendar helpers and the month grid builder."""

from datetime import date, timedelta

import pytest

from shiftcal.domain.calendar import (
    build_calendar_days,
    days_in_month,
    format_date_key,
    format_full_date,
    is_valid_date_key,
    iter_month_days,
    monday_first_index,
    native_weekday,
    parse_date_key,
    shift_month,
)
from shiftcal.exceptions import MalformedKeyError


class TestDateKeys:
    """Tests for date key formatting and parsing."""

    def test_format_is_zero_padded(self):
        """Month and day should be zero-padded."""
        assert format_date_key(date(2025, 9, 8)) == "2025-09-08"

    def test_parse_round_trip(self):
        """Parsing a formatted key returns the same date."""
        assert parse_date_key("2024-02-29") == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "key",
        [
            "2025-9-8",
            "2025/09/08",
            "2025-02-30",
            "2025-13-01",
            "",
            "not-a-date",
            "2025-09-08T00:00",
            "2025-09-08\n",
            "\u0662\u0660\u0662\u0665-\u0660\u0669-\u0661\u0660",  # Arabic-Indic digits
            "\uff12\uff10\uff12\uff15-\uff10\uff19-\uff11\uff10",  # fullwidth digits
        ],
    )
    def test_malformed_keys_raise(self, key):
        """Malformed keys should raise MalformedKeyError."""
        with pytest.raises(MalformedKeyError):
            parse_date_key(key)

    def test_malformed_key_is_value_error(self):
        """MalformedKeyError should be catchable as ValueError."""
        with pytest.raises(ValueError):
            parse_date_key("2025-00-10")

    def test_non_string_key_raises(self):
        """Non-string keys are malformed too."""
        with pytest.raises(MalformedKeyError):
            parse_date_key(20250908)

    def test_is_valid_date_key(self):
        """is_valid_date_key should not raise."""
        assert is_valid_date_key("2025-09-08") is True
        assert is_valid_date_key("2025-09-31") is False


class TestWeekdays:
    """Tests for weekday numbering helpers."""

    def test_monday_first_mapping(self):
        """Sunday=0 maps to 6, Monday=1 maps to 0."""
        assert monday_first_index(0) == 6
        assert monday_first_index(1) == 0
        assert monday_first_index(6) == 5

    def test_native_weekday(self):
        """native_weekday uses Sunday=0."""
        assert native_weekday(date(2025, 9, 7)) == 0  # Sunday
        assert native_weekday(date(2025, 9, 8)) == 1  # Monday
        assert native_weekday(date(2025, 9, 13)) == 6  # Saturday

    def test_format_full_date(self):
        """Full label includes the Monday-first weekday name."""
        assert format_full_date(date(2025, 9, 8)) == "2025年09月08日 · 周一"
        assert format_full_date(date(2025, 9, 14)) == "2025年09月14日 · 周日"


class TestMonthHelpers:
    """Tests for month length, iteration and navigation."""

    def test_days_in_month_leap_year(self):
        """February has 29 days in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2025, 2) == 28

    def test_iter_month_days(self):
        """Iteration covers every day exactly once."""
        days = list(iter_month_days(2025, 4))
        assert len(days) == 30
        assert days[0] == date(2025, 4, 1)
        assert days[-1] == date(2025, 4, 30)

    def test_shift_month_across_years(self):
        """Navigation wraps across year boundaries."""
        assert shift_month(date(2025, 12, 15), 1) == date(2026, 1, 1)
        assert shift_month(date(2025, 1, 31), -1) == date(2024, 12, 1)
        assert shift_month(date(2025, 9, 8), 0) == date(2025, 9, 1)


class TestBuildCalendarDays:
    """Tests for the Monday-first month grid."""

    def test_month_starting_on_monday(self):
        """September 2025 starts on a Monday: no leading cells."""
        cells = build_calendar_days(date(2025, 9, 17))
        assert len(cells) == 35
        assert cells[0].date == date(2025, 9, 1)
        assert cells[-1].date == date(2025, 10, 5)
        assert cells[-1].is_current_month is False

    def test_month_with_leading_days(self):
        """February 2025 starts on a Saturday: five leading January cells."""
        cells = build_calendar_days(date(2025, 2, 1))
        assert len(cells) == 35
        assert cells[0].date == date(2025, 1, 27)
        assert [c.is_current_month for c in cells[:6]] == [False] * 5 + [True]
        assert cells[-1].date == date(2025, 3, 2)

    def test_exact_four_week_month(self):
        """February 2021 starts on Monday and fills exactly four rows."""
        cells = build_calendar_days(date(2021, 2, 10))
        assert len(cells) == 28
        assert all(c.is_current_month for c in cells)

    def test_six_row_month(self):
        """June 2025 starts on a Sunday and needs six rows."""
        cells = build_calendar_days(date(2025, 6, 1))
        assert len(cells) == 42

    def test_keys_match_dates(self):
        """Every cell key is the formatted cell date."""
        for cell in build_calendar_days(date(2025, 3, 1)):
            assert cell.key == format_date_key(cell.date)

    @pytest.mark.parametrize("year", [2023, 2024, 2025])
    def test_grid_completeness(self, year):
        """Grids are whole weeks, Monday to Sunday, covering the month once."""
        for month in range(1, 13):
            cells = build_calendar_days(date(year, month, 15))

            assert len(cells) % 7 == 0
            assert cells[0].date.weekday() == 0
            assert cells[-1].date.weekday() == 6

            in_month = [c.date for c in cells if c.is_current_month]
            assert in_month == list(iter_month_days(year, month))

            # Consecutive days with no gaps
            for previous, current in zip(cells, cells[1:]):
                assert current.date - previous.date == timedelta(days=1)
