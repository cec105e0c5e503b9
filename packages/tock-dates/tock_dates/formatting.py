"""Medium-style text rendering of instants.

``Jan 5, 2020 3:04:05 PM`` for date and time, and either half on its own.
Built from fields rather than ``strftime`` so the output does not depend
on the process locale.
"""
from __future__ import annotations

from tock_dates.fields import MONTH_NAMES
from tock_dates.types import Instant


def format_date(instant: Instant) -> str:
    value = instant.datetime
    return f"{MONTH_NAMES[value.month - 1][:3]} {value.day}, {value.year}"


def format_time(instant: Instant) -> str:
    value = instant.datetime
    hour12 = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return f"{hour12}:{value.minute:02d}:{value.second:02d} {meridiem}"


def format_date_time(instant: Instant) -> str:
    return f"{format_date(instant)} {format_time(instant)}"
