"""tock-dates - Instant construction, arithmetic, fields, and formatting."""
from __future__ import annotations

from tock_dates.arithmetic import (
    add_days,
    add_duration,
    add_hours,
    add_minutes,
    add_months,
    add_seconds,
    add_weeks,
    add_years,
    compare,
)
from tock_dates.construct import from_millis, get_millis, now, parse_instant, system_time
from tock_dates.durations import (
    duration_in_days,
    duration_in_hours,
    duration_in_minutes,
    duration_in_seconds,
    duration_in_weeks,
    make_duration,
)
from tock_dates.fields import (
    day_of_month,
    hour,
    minute,
    month,
    month_name,
    second,
    weekday,
    weekday_name,
    year,
)
from tock_dates.formatting import format_date, format_date_time, format_time
from tock_dates.types import ArgumentError, DurationUnit, FormatError, Instant

__all__ = [
    "Instant",
    "DurationUnit",
    "FormatError",
    "ArgumentError",
    "parse_instant",
    "from_millis",
    "now",
    "system_time",
    "get_millis",
    "add_duration",
    "add_seconds",
    "add_minutes",
    "add_hours",
    "add_days",
    "add_weeks",
    "add_months",
    "add_years",
    "compare",
    "make_duration",
    "duration_in_seconds",
    "duration_in_minutes",
    "duration_in_hours",
    "duration_in_days",
    "duration_in_weeks",
    "second",
    "minute",
    "hour",
    "day_of_month",
    "weekday",
    "weekday_name",
    "month",
    "month_name",
    "year",
    "format_date_time",
    "format_date",
    "format_time",
]
