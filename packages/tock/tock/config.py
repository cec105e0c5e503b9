"""Clock configuration dataclass."""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass

from dateutil import tz


@dataclass(frozen=True)
class ClockConfig:
    """Immutable initial settings for a Clock component.

    Attributes:
        interval_ms: Milliseconds between timer firings.
        enabled: Whether the timer runs from construction.
        always_fires: Fire even while the host is in the background.
        start_visible: Treat the host as on screen from construction, for
            hosts (live-reload, REPL) that never deliver an initial resume.
        timezone: IANA zone name for instants the clock creates; the
            machine's local zone when None or unknown.
    """

    interval_ms: int = 1000
    enabled: bool = True
    always_fires: bool = True
    start_visible: bool = False
    timezone: str | None = None

    def __post_init__(self) -> None:
        if self.interval_ms < 0:
            raise ValueError("interval_ms must be non-negative")

    def resolve_timezone(self) -> dt.tzinfo:
        if self.timezone:
            resolved = tz.gettz(self.timezone)
            if resolved is not None:
                return resolved
        return tz.tzlocal()
