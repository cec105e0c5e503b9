"""tock - A Clock component: gated periodic timer plus date utilities."""
from __future__ import annotations

from tock.component import TIMER_EVENT, Clock
from tock.config import ClockConfig
from tock.host import EventDispatcher, HostApp, HostState
from tock.lifecycle import TimerLifecycle
from tock.result import Err, Ok, Result
from tock.scheduler import ManualScheduler, Scheduler, ThreadScheduler

__all__ = [
    "Clock",
    "ClockConfig",
    "TIMER_EVENT",
    "HostApp",
    "HostState",
    "EventDispatcher",
    "TimerLifecycle",
    "Scheduler",
    "ThreadScheduler",
    "ManualScheduler",
    "Result",
    "Ok",
    "Err",
]
