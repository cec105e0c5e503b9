"""Calendar field extraction, evaluated in the instant's own zone."""
from __future__ import annotations

from tock_dates.types import Instant

# Names are fixed English; localization is left to the host.
WEEKDAY_NAMES = (
    "Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday",
)
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def second(instant: Instant) -> int:
    return instant.datetime.second


def minute(instant: Instant) -> int:
    return instant.datetime.minute


def hour(instant: Instant) -> int:
    """Hour of day, 0-23."""
    return instant.datetime.hour


def day_of_month(instant: Instant) -> int:
    return instant.datetime.day


def weekday(instant: Instant) -> int:
    """Day of week from 1 (Sunday) to 7 (Saturday)."""
    # isoweekday: Monday=1 .. Sunday=7
    return instant.datetime.isoweekday() % 7 + 1


def weekday_name(instant: Instant) -> str:
    return WEEKDAY_NAMES[weekday(instant) - 1]


def month(instant: Instant) -> int:
    """Month from 1 (January) to 12 (December)."""
    return instant.datetime.month


def month_name(instant: Instant) -> str:
    return MONTH_NAMES[month(instant) - 1]


def year(instant: Instant) -> int:
    return instant.datetime.year
