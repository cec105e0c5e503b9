"""Instant construction: parsing, epoch millis, and the current time."""
from __future__ import annotations

import datetime as dt
import time

from dateutil import tz as _tz

from tock_dates.types import Instant, FormatError

_TIME_ONLY = "%H:%M"

# Tried in order; first match wins.
_FORMATS = (
    "%m/%d/%Y %H:%M:%S",
    "%m/%d/%Y",
    _TIME_ONLY,
)

_FORMAT_MESSAGE = (
    "Argument to MakeInstant should have form MM/DD/YYYY hh:mm:ss, "
    "or MM/DD/YYYY or hh:mm"
)


def _zone(tz: dt.tzinfo | None) -> dt.tzinfo:
    return tz if tz is not None else _tz.tzlocal()


def parse_instant(text: str, tz: dt.tzinfo | None = None) -> Instant:
    """Parse ``MM/DD/YYYY hh:mm:ss``, ``MM/DD/YYYY`` or ``hh:mm``.

    Fields are wall-clock values in *tz* (local zone when omitted). A
    time-only value lands on 1970-01-01. A wall time skipped by a DST
    change rolls forward past the gap. Raises FormatError otherwise.
    """
    zone = _zone(tz)
    stripped = text.strip()
    for fmt in _FORMATS:
        try:
            parsed = dt.datetime.strptime(stripped, fmt)
        except ValueError:
            continue
        if fmt == _TIME_ONLY:
            # strptime defaults the date to 1900-01-01
            parsed = parsed.replace(year=1970, month=1, day=1)
        return Instant.from_datetime(_tz.resolve_imaginary(parsed.replace(tzinfo=zone)))
    raise FormatError(text, _FORMAT_MESSAGE)


def from_millis(millis: int, tz: dt.tzinfo | None = None) -> Instant:
    return Instant(millis=millis, tz=_zone(tz))


def now(tz: dt.tzinfo | None = None) -> Instant:
    """The current instant from the system wall clock."""
    return from_millis(system_time(), tz)


def system_time() -> int:
    """Wall-clock time in epoch milliseconds."""
    return time.time_ns() // 1_000_000


def get_millis(instant: Instant) -> int:
    return instant.millis
