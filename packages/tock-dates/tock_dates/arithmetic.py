"""Instant arithmetic. Every function returns a new Instant.

Seconds, minutes, and hours add elapsed time. Days and larger units move
the wall-clock calendar fields in the instant's zone, so a day added
across a DST change keeps the time of day; a time that lands in a DST gap
moves forward by the gap's length. Month and year overflow clamps to the
last day of the target month.
"""
from __future__ import annotations

from dataclasses import replace

from dateutil import tz
from dateutil.relativedelta import relativedelta

from tock_dates.types import Instant

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE


def add_duration(instant: Instant, millis: int) -> Instant:
    return replace(instant, millis=instant.millis + millis)


def add_seconds(instant: Instant, seconds: int) -> Instant:
    return add_duration(instant, seconds * _MS_PER_SECOND)


def add_minutes(instant: Instant, minutes: int) -> Instant:
    return add_duration(instant, minutes * _MS_PER_MINUTE)


def add_hours(instant: Instant, hours: int) -> Instant:
    return add_duration(instant, hours * _MS_PER_HOUR)


def _shift_calendar(instant: Instant, delta: relativedelta) -> Instant:
    # A wall time inside a DST gap rolls forward past the gap.
    shifted = Instant.from_datetime(tz.resolve_imaginary(instant.datetime + delta))
    return replace(shifted, tz=instant.tz)


def add_days(instant: Instant, days: int) -> Instant:
    return _shift_calendar(instant, relativedelta(days=days))


def add_weeks(instant: Instant, weeks: int) -> Instant:
    return _shift_calendar(instant, relativedelta(weeks=weeks))


def add_months(instant: Instant, months: int) -> Instant:
    return _shift_calendar(instant, relativedelta(months=months))


def add_years(instant: Instant, years: int) -> Instant:
    return _shift_calendar(instant, relativedelta(years=years))


def compare(start: Instant, end: Instant) -> int:
    """Milliseconds from *start* to *end*; positive when *end* is later."""
    return end.millis - start.millis
