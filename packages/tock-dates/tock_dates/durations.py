"""Millisecond durations: construction from a unit and conversion to whole units."""
from __future__ import annotations

from tock_dates.types import ArgumentError, DurationUnit

_UNIT_MILLIS: dict[DurationUnit, int] = {
    DurationUnit.WEEKS: 7 * 24 * 3600 * 1000,
    DurationUnit.DAYS: 24 * 3600 * 1000,
    DurationUnit.HOURS: 3600 * 1000,
    DurationUnit.MINUTES: 60 * 1000,
    DurationUnit.SECONDS: 1000,
    DurationUnit.MILLISECONDS: 1,
}


def make_duration(unit: int, count: int) -> int:
    """Return *count* units as milliseconds.

    *unit* follows DurationUnit: 0 weeks, 1 days, 2 hours, 3 minutes,
    4 seconds, 5 milliseconds. Raises ArgumentError for anything else.
    """
    try:
        key = DurationUnit(unit)
    except ValueError:
        raise ArgumentError(
            unit, f"illegal date/time interval kind {unit!r} in function MakeDuration()"
        ) from None
    return count * _UNIT_MILLIS[key]


def _whole(duration: int, unit: DurationUnit) -> int:
    # Truncate toward zero, so -1500 ms is -1 second rather than -2.
    size = _UNIT_MILLIS[unit]
    whole = abs(duration) // size
    return whole if duration >= 0 else -whole


def duration_in_seconds(duration: int) -> int:
    return _whole(duration, DurationUnit.SECONDS)


def duration_in_minutes(duration: int) -> int:
    return _whole(duration, DurationUnit.MINUTES)


def duration_in_hours(duration: int) -> int:
    return _whole(duration, DurationUnit.HOURS)


def duration_in_days(duration: int) -> int:
    return _whole(duration, DurationUnit.DAYS)


def duration_in_weeks(duration: int) -> int:
    return _whole(duration, DurationUnit.WEEKS)
