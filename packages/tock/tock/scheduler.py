"""Repeating alarm schedulers.

A scheduler calls its handler every ``interval_ms`` while enabled. An
interval change applies from the next cycle; a wait already in progress
keeps the interval it started with.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

AlarmHandler = Callable[[], None]


@runtime_checkable
class Scheduler(Protocol):
    """Protocol for the timer primitive behind a TimerLifecycle."""

    @property
    def enabled(self) -> bool: ...

    @enabled.setter
    def enabled(self, flag: bool) -> None: ...

    @property
    def interval_ms(self) -> int: ...

    @interval_ms.setter
    def interval_ms(self, ms: int) -> None: ...


SchedulerFactory = Callable[[AlarmHandler, bool, int], Scheduler]


class ThreadScheduler:
    """Fires the handler from a background daemon thread.

    Each enable starts a worker tagged with a new generation. The handler
    runs under the scheduler lock and only if the worker's generation is
    still current, so once ``enabled = False`` returns no further handler
    call begins.
    """

    def __init__(
        self,
        handler: AlarmHandler,
        enabled: bool = True,
        interval_ms: int = 1000,
        name: str = "tock-timer",
    ) -> None:
        self._handler = handler
        self._interval_ms = interval_ms
        self._name = name
        self._lock = threading.RLock()
        self._generation = 0
        self._stop: threading.Event | None = None
        self._thread: threading.Thread | None = None
        if enabled:
            self.enabled = True

    @property
    def enabled(self) -> bool:
        return self._stop is not None

    @enabled.setter
    def enabled(self, flag: bool) -> None:
        with self._lock:
            if flag == self.enabled:
                return
            self._generation += 1
            if flag:
                self._stop = threading.Event()
                self._thread = threading.Thread(
                    target=self._run,
                    args=(self._generation, self._stop),
                    name=self._name,
                    daemon=True,
                )
                self._thread.start()
                logger.debug("%s started (interval=%dms)", self._name, self._interval_ms)
            else:
                assert self._stop is not None
                self._stop.set()
                self._stop = None
                logger.debug("%s stopped", self._name)

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @interval_ms.setter
    def interval_ms(self, ms: int) -> None:
        self._interval_ms = ms

    def join(self, timeout: float | None = None) -> None:
        """Wait for the most recent worker thread to exit."""
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)

    def _run(self, generation: int, stop: threading.Event) -> None:
        while not stop.wait(max(self._interval_ms, 0) / 1000):
            with self._lock:
                if generation != self._generation:
                    return
                try:
                    self._handler()
                except Exception:
                    # Logged; the worker stays alive and keeps firing.
                    logger.exception("%s alarm handler raised", self._name)


class ManualScheduler:
    """Deterministic scheduler driven by explicit ``advance`` calls.

    Suits tests and hosts that already own a frame or tick loop. A zero
    or negative interval fires once per ``advance`` call.
    """

    def __init__(
        self,
        handler: AlarmHandler,
        enabled: bool = True,
        interval_ms: int = 1000,
    ) -> None:
        self._handler = handler
        self._interval_ms = interval_ms
        self._cycle_ms = interval_ms
        self._elapsed_ms = 0
        self._enabled = enabled
        self._fired = 0

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, flag: bool) -> None:
        if flag and not self._enabled:
            self._elapsed_ms = 0
            self._cycle_ms = self._interval_ms
        self._enabled = flag

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @interval_ms.setter
    def interval_ms(self, ms: int) -> None:
        self._interval_ms = ms

    @property
    def elapsed_ms(self) -> int:
        """Time spent in the current cycle."""
        return self._elapsed_ms

    @property
    def fired(self) -> int:
        """Total handler calls so far."""
        return self._fired

    def advance(self, ms: int) -> int:
        """Move time forward by *ms*, firing for each completed cycle.

        Returns the number of handler calls made.
        """
        if ms < 0:
            raise ValueError("cannot advance by a negative amount")
        remaining = ms
        fired = 0
        while self._enabled:
            # A negative interval is treated as zero.
            due = max(self._cycle_ms - self._elapsed_ms, 0)
            if remaining < due:
                self._elapsed_ms += remaining
                break
            remaining -= due
            self._elapsed_ms = 0
            zero_cycle = self._cycle_ms <= 0
            self._cycle_ms = self._interval_ms
            fired += 1
            self._fired += 1
            self._handler()
            # Zero-length cycles fire at most once per advance.
            if zero_cycle or self._cycle_ms <= 0:
                break
        return fired
