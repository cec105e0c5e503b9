"""Tests for duration construction and conversion."""
from __future__ import annotations

import pytest

from tock_dates import (
    ArgumentError,
    DurationUnit,
    duration_in_days,
    duration_in_hours,
    duration_in_minutes,
    duration_in_seconds,
    duration_in_weeks,
    make_duration,
)


class TestMakeDuration:

    def test_two_minutes(self):
        """Test two minutes is 120000 ms."""
        assert make_duration(3, 2) == 120000

    @pytest.mark.parametrize(
        "unit,expected",
        [
            (0, 604_800_000),
            (1, 86_400_000),
            (2, 3_600_000),
            (3, 60_000),
            (4, 1000),
            (5, 1),
        ],
    )
    def test_each_unit(self, unit, expected):
        """Test each unit selector maps to its millisecond size."""
        assert make_duration(unit, 1) == expected

    def test_accepts_enum(self):
        """Test DurationUnit members work as unit selectors."""
        assert make_duration(DurationUnit.HOURS, 3) == 10_800_000

    def test_negative_count(self):
        """Test a negative count gives a negative duration."""
        assert make_duration(4, -5) == -5000

    @pytest.mark.parametrize("unit", [6, -1, 100])
    def test_unknown_unit_raises(self, unit):
        """Test a unit outside 0-5 raises ArgumentError carrying the unit."""
        with pytest.raises(ArgumentError) as excinfo:
            make_duration(unit, 1)
        assert excinfo.value.unit == unit


class TestDurationIn:

    def test_seconds_and_minutes_truncate(self):
        """Test conversions drop the fractional part."""
        assert duration_in_seconds(90000) == 90
        assert duration_in_minutes(90000) == 1

    def test_hours_days_weeks(self):
        """Test hour, day and week conversions truncate."""
        assert duration_in_hours(7_199_999) == 1
        assert duration_in_days(make_duration(1, 3) + 1) == 3
        assert duration_in_weeks(make_duration(1, 13)) == 1

    def test_negative_truncates_toward_zero(self):
        """Test negative durations truncate toward zero."""
        assert duration_in_seconds(-1500) == -1
        assert duration_in_minutes(-59_999) == 0

    def test_zero(self):
        """Test a zero duration converts to zero."""
        assert duration_in_weeks(0) == 0
