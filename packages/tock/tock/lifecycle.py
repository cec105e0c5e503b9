"""TimerLifecycle - periodic timer gated on enablement and host visibility."""
from __future__ import annotations

import logging
import threading
from typing import Callable

from tock.scheduler import Scheduler, SchedulerFactory, ThreadScheduler

logger = logging.getLogger(__name__)


class TimerLifecycle:
    """Owns the timer state and decides whether a tick reaches the sink.

    Two independent axes, ``enabled`` (scheduler running or stopped) and
    ``on_screen`` (host foreground or background), are combined with the
    ``always_fires`` policy. A tick is delivered iff the timer is enabled
    and ``always_fires or on_screen`` holds.

    ``always_fires`` and ``on_screen`` share one lock so ``alarm`` reads
    them as a consistent pair. ``enabled`` and ``interval_ms`` belong to the
    scheduler, which is never called while that lock is held.
    """

    def __init__(
        self,
        on_fire: Callable[[], None],
        interval_ms: int = 1000,
        enabled: bool = True,
        always_fires: bool = True,
        on_screen: bool = False,
        scheduler_factory: SchedulerFactory | None = None,
    ) -> None:
        self._on_fire = on_fire
        self._lock = threading.Lock()
        self._always_fires = always_fires
        self._on_screen = on_screen
        self._destroyed = False
        factory = scheduler_factory if scheduler_factory is not None else ThreadScheduler
        # Built stopped so the first alarm cannot race this assignment.
        self._scheduler = factory(self.alarm, False, interval_ms)
        if enabled:
            self._scheduler.enabled = True

    @property
    def scheduler(self) -> Scheduler:
        return self._scheduler

    # --- Timer state ---

    @property
    def interval_ms(self) -> int:
        return self._scheduler.interval_ms

    @interval_ms.setter
    def interval_ms(self, ms: int) -> None:
        self._scheduler.interval_ms = ms

    @property
    def enabled(self) -> bool:
        return self._scheduler.enabled

    @enabled.setter
    def enabled(self, flag: bool) -> None:
        self._scheduler.enabled = flag

    @property
    def always_fires(self) -> bool:
        with self._lock:
            return self._always_fires

    @always_fires.setter
    def always_fires(self, flag: bool) -> None:
        with self._lock:
            self._always_fires = flag

    @property
    def on_screen(self) -> bool:
        with self._lock:
            return self._on_screen

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    # --- Host notifications ---

    def on_resume(self) -> None:
        with self._lock:
            self._on_screen = True
        logger.debug("timer host resumed")

    def on_stop(self) -> None:
        with self._lock:
            self._on_screen = False
        logger.debug("timer host stopped")

    def on_destroy(self) -> None:
        self._shutdown("destroy")

    def on_delete(self) -> None:
        self._shutdown("delete")

    def _shutdown(self, reason: str) -> None:
        self._destroyed = True
        self._scheduler.enabled = False
        logger.debug("timer disabled on %s", reason)

    # --- Scheduler callback ---

    def should_fire(self) -> bool:
        """Evaluate the gating predicate against the current state."""
        if not self._scheduler.enabled:
            return False
        with self._lock:
            return self._always_fires or self._on_screen

    def alarm(self) -> None:
        """Scheduler entry point: deliver the tick if the gate is open."""
        if self.should_fire():
            self._on_fire()
        else:
            logger.debug("timer tick suppressed")
