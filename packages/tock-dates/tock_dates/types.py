"""Instant value type, duration units, and date errors."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from enum import IntEnum

from dateutil import tz

EPOCH = dt.datetime(1970, 1, 1, tzinfo=dt.timezone.utc)
_ONE_MS = dt.timedelta(milliseconds=1)


@dataclass(frozen=True, slots=True)
class Instant:
    """A point in time with millisecond resolution.

    ``millis`` is the epoch offset; ``tz`` is the zone used for calendar
    fields, wall-clock arithmetic, and formatting. Hashing uses ``millis``
    only, since some zone objects (``tzlocal``) are unhashable.
    """

    millis: int
    tz: dt.tzinfo = field(default_factory=tz.tzlocal, hash=False)

    @classmethod
    def from_datetime(cls, value: dt.datetime) -> Instant:
        """Build an Instant from an aware datetime, keeping its zone."""
        if value.tzinfo is None:
            raise ValueError("datetime must be timezone-aware")
        return cls(millis=(value - EPOCH) // _ONE_MS, tz=value.tzinfo)

    @property
    def datetime(self) -> dt.datetime:
        return (EPOCH + dt.timedelta(milliseconds=self.millis)).astimezone(self.tz)


class DurationUnit(IntEnum):
    WEEKS = 0
    DAYS = 1
    HOURS = 2
    MINUTES = 3
    SECONDS = 4
    MILLISECONDS = 5


class FormatError(ValueError):
    """Raised when date/time text matches none of the accepted forms."""

    def __init__(self, text: str, message: str) -> None:
        self.text = text
        super().__init__(message)


class ArgumentError(ValueError):
    """Raised when a duration unit selector is outside 0-5."""

    def __init__(self, unit: int, message: str) -> None:
        self.unit = unit
        super().__init__(message)
