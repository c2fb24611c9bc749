"""Unit tests for the calendar date helpers."""

from datetime import date, datetime

import pytest

from stay_with_friends.core import dates


class TestParseDate:
    def test_parses_iso_day(self):
        assert dates.parse_date("2025-11-19") == date(2025, 11, 19)

    def test_parses_timestamp_with_z(self):
        assert dates.parse_date("2025-11-19T23:30:00.000Z") == date(2025, 11, 19)

    def test_passes_dates_through(self):
        assert dates.parse_date(datetime(2025, 11, 19, 8, 0)) == date(2025, 11, 19)

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            dates.parse_date(20251119)


class TestFormatting:
    def test_format_date(self):
        assert dates.format_date(date(2025, 1, 2)) == "2025-01-02"

    def test_display_date(self):
        assert dates.format_display_date("2025-11-19") == "Nov 19, 2025"

    @pytest.mark.parametrize(
        "start,end,expected",
        [
            ("2025-11-19", "2025-11-24", "Nov 19-24, 2025"),
            ("2025-11-19", "2025-12-24", "Nov 19 - Dec 24, 2025"),
            ("2025-12-30", "2026-01-02", "Dec 30, 2025 - Jan 2, 2026"),
            ("2025-11-19", "2025-11-19", "Nov 19, 2025"),
        ],
    )
    def test_format_date_range(self, start, end, expected):
        assert dates.format_date_range(start, end) == expected


class TestArithmetic:
    def test_days_in_range_inclusive(self):
        assert dates.days_in_range("2025-02-27", "2025-03-01") == [
            date(2025, 2, 27),
            date(2025, 2, 28),
            date(2025, 3, 1),
        ]

    def test_days_in_inverted_range(self):
        assert dates.days_in_range("2025-03-02", "2025-03-01") == []

    def test_days_between_and_add_days(self):
        assert dates.days_between("2025-12-30", "2026-01-02") == 3
        assert dates.add_days("2025-12-30", 3) == date(2026, 1, 2)

    def test_is_date_in_range(self):
        assert dates.is_date_in_range("2025-01-05", "2025-01-05", "2025-01-10")
        assert not dates.is_date_in_range("2025-01-11", "2025-01-05", "2025-01-10")

    def test_is_valid_date_string(self):
        assert dates.is_valid_date_string("2024-02-29")
        assert not dates.is_valid_date_string("2025-02-29")

    def test_is_date_in_past(self):
        assert dates.is_date_in_past(dates.add_days(dates.today(), -1))
        assert not dates.is_date_in_past(dates.today())
