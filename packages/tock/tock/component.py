"""Clock - non-visible component with a periodic timer and date functions."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import tock_dates
from tock_dates import ArgumentError, FormatError, Instant

from tock.config import ClockConfig
from tock.lifecycle import TimerLifecycle
from tock.result import Err, Ok, Result
from tock.scheduler import SchedulerFactory

if TYPE_CHECKING:
    from tock.host import HostApp

logger = logging.getLogger(__name__)

TIMER_EVENT = "Timer"


class Clock:
    """Timer plus date/time utilities for a visual programming runtime.

    The component registers for the host's resume, stop, and destroy
    notifications and hands ``"Timer"`` events to the host dispatcher. The
    date functions are stateless and delegate to ``tock_dates``.
    """

    def __init__(
        self,
        host: HostApp,
        config: ClockConfig | None = None,
        scheduler_factory: SchedulerFactory | None = None,
    ) -> None:
        self.config: ClockConfig = config if config is not None else ClockConfig()
        self._host = host
        self._tz = self.config.resolve_timezone()
        self._timer = TimerLifecycle(
            on_fire=self._dispatch_timer,
            interval_ms=self.config.interval_ms,
            enabled=self.config.enabled,
            always_fires=self.config.always_fires,
            on_screen=self.config.start_visible or host.always_on_screen,
            scheduler_factory=scheduler_factory,
        )
        host.register_for_on_resume(self._timer.on_resume)
        host.register_for_on_stop(self._timer.on_stop)
        host.register_for_on_destroy(self._timer.on_destroy)

    @property
    def host(self) -> HostApp:
        return self._host

    @property
    def lifecycle(self) -> TimerLifecycle:
        return self._timer

    # --- Properties ---

    @property
    def timer_interval(self) -> int:
        """Interval between timer events in ms."""
        return self._timer.interval_ms

    @timer_interval.setter
    def timer_interval(self, interval: int) -> None:
        self._timer.interval_ms = interval

    @property
    def timer_enabled(self) -> bool:
        return self._timer.enabled

    @timer_enabled.setter
    def timer_enabled(self, enabled: bool) -> None:
        self._timer.enabled = enabled

    @property
    def timer_always_fires(self) -> bool:
        """Fire even when the application is not on screen."""
        return self._timer.always_fires

    @timer_always_fires.setter
    def timer_always_fires(self, always: bool) -> None:
        self._timer.always_fires = always

    @property
    def on_screen(self) -> bool:
        return self._timer.on_screen

    # --- Events ---

    def timer(self) -> None:
        """Timer has gone off."""
        self._timer.alarm()

    def _dispatch_timer(self) -> None:
        self._host.dispatcher.dispatch(self, TIMER_EVENT)

    # --- Deletion ---

    def delete(self) -> None:
        """Remove the component from its container; the timer stops for good."""
        self._timer.on_delete()
        self._host.unregister(self._timer.on_resume)
        self._host.unregister(self._timer.on_stop)
        self._host.unregister(self._timer.on_destroy)

    # --- Instants in the configured zone ---

    def now_here(self) -> Instant:
        """The current instant in the clock's configured zone."""
        return tock_dates.now(self._tz)

    def instant_here(self, text: str) -> Result[Instant, FormatError]:
        """Like ``make_instant``, reading wall-clock fields in the configured zone."""
        return _try_parse(text, self._tz)

    # --- Stateless functions ---

    system_time = staticmethod(tock_dates.system_time)
    now = staticmethod(tock_dates.now)
    make_instant_from_millis = staticmethod(tock_dates.from_millis)
    get_millis = staticmethod(tock_dates.get_millis)

    add_duration = staticmethod(tock_dates.add_duration)
    add_seconds = staticmethod(tock_dates.add_seconds)
    add_minutes = staticmethod(tock_dates.add_minutes)
    add_hours = staticmethod(tock_dates.add_hours)
    add_days = staticmethod(tock_dates.add_days)
    add_weeks = staticmethod(tock_dates.add_weeks)
    add_months = staticmethod(tock_dates.add_months)
    add_years = staticmethod(tock_dates.add_years)
    compare = staticmethod(tock_dates.compare)

    duration_in_seconds = staticmethod(tock_dates.duration_in_seconds)
    duration_in_minutes = staticmethod(tock_dates.duration_in_minutes)
    duration_in_hours = staticmethod(tock_dates.duration_in_hours)
    duration_in_days = staticmethod(tock_dates.duration_in_days)
    duration_in_weeks = staticmethod(tock_dates.duration_in_weeks)

    second = staticmethod(tock_dates.second)
    minute = staticmethod(tock_dates.minute)
    hour = staticmethod(tock_dates.hour)
    day_of_month = staticmethod(tock_dates.day_of_month)
    weekday = staticmethod(tock_dates.weekday)
    weekday_name = staticmethod(tock_dates.weekday_name)
    month = staticmethod(tock_dates.month)
    month_name = staticmethod(tock_dates.month_name)
    year = staticmethod(tock_dates.year)

    format_date_time = staticmethod(tock_dates.format_date_time)
    format_date = staticmethod(tock_dates.format_date)
    format_time = staticmethod(tock_dates.format_time)

    @staticmethod
    def make_instant(text: str) -> Result[Instant, FormatError]:
        """An instant specified by MM/DD/YYYY hh:mm:ss or MM/DD/YYYY or hh:mm."""
        return _try_parse(text, None)

    @staticmethod
    def make_duration(unit: int, count: int) -> Result[int, ArgumentError]:
        try:
            return Ok(tock_dates.make_duration(unit, count))
        except ArgumentError as exc:
            logger.debug("make_duration rejected unit %r", unit)
            return Err(exc)


def _try_parse(text: str, tz) -> Result[Instant, FormatError]:
    try:
        return Ok(tock_dates.parse_instant(text, tz))
    except FormatError as exc:
        logger.debug("make_instant rejected %r", text)
        return Err(exc)
