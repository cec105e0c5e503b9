"""Host application bindings: lifecycle notifications and the event sink."""
from __future__ import annotations

import enum
import logging
import threading
from typing import Any, Callable

logger = logging.getLogger(__name__)

Listener = Callable[[], None]
_Handler = Callable[[Any, str, dict[str, Any]], None]


class EventDispatcher:
    """Queued event sink with per-flush delivery.

    ``dispatch`` may be called from any thread; ``flush`` delivers queued
    events to subscribers on the calling thread, in dispatch order.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[tuple[Any, str, dict[str, Any]]] = []
        self._lock = threading.Lock()

    def subscribe(self, event_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(event_name, []).append(handler)

    def unsubscribe(self, event_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(event_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def dispatch(self, component: Any, event_name: str, **args: Any) -> None:
        with self._lock:
            self._queue.append((component, event_name, args))

    def pending(self) -> int:
        with self._lock:
            return len(self._queue)

    def flush(self) -> int:
        """Deliver queued events. Returns the number of events delivered."""
        with self._lock:
            snapshot = self._queue
            self._queue = []
        for component, event_name, args in snapshot:
            for handler in list(self._subscribers.get(event_name, [])):
                handler(component, event_name, args)
        return len(snapshot)

    def clear(self) -> None:
        with self._lock:
            self._queue.clear()


class HostState(enum.Enum):
    CREATED = "created"
    RESUMED = "resumed"
    STOPPED = "stopped"
    DESTROYED = "destroyed"


class HostApp:
    """The app runtime a component lives in.

    Transition methods notify registered listeners at most once per real
    transition: ``resume`` while already resumed, ``stop`` while not
    resumed, and anything after ``destroy`` are no-ops.

    Args:
        always_on_screen: The host never delivers an initial resume (for
            example a live-reload or REPL session) and should be treated as
            foreground from the start.
    """

    def __init__(self, always_on_screen: bool = False) -> None:
        self.always_on_screen = always_on_screen
        self.dispatcher = EventDispatcher()
        self._state = HostState.CREATED
        self._on_resume: list[Listener] = []
        self._on_stop: list[Listener] = []
        self._on_destroy: list[Listener] = []

    @property
    def state(self) -> HostState:
        return self._state

    # --- Registration ---

    def register_for_on_resume(self, listener: Listener) -> None:
        self._on_resume.append(listener)

    def register_for_on_stop(self, listener: Listener) -> None:
        self._on_stop.append(listener)

    def register_for_on_destroy(self, listener: Listener) -> None:
        self._on_destroy.append(listener)

    def unregister(self, listener: Listener) -> None:
        """Remove *listener* from every notification it was registered for."""
        for listeners in (self._on_resume, self._on_stop, self._on_destroy):
            while listener in listeners:
                listeners.remove(listener)

    # --- Transitions ---

    def resume(self) -> bool:
        if self._state in (HostState.RESUMED, HostState.DESTROYED):
            self._ignored("resume")
            return False
        self._state = HostState.RESUMED
        _notify(self._on_resume)
        return True

    def stop(self) -> bool:
        if self._state is not HostState.RESUMED:
            self._ignored("stop")
            return False
        self._state = HostState.STOPPED
        _notify(self._on_stop)
        return True

    def destroy(self) -> bool:
        if self._state is HostState.DESTROYED:
            self._ignored("destroy")
            return False
        self._state = HostState.DESTROYED
        _notify(self._on_destroy)
        return True

    def _ignored(self, transition: str) -> None:
        if self._state is HostState.DESTROYED:
            logger.warning("%s ignored: host already destroyed", transition)
        else:
            logger.debug("%s ignored in state %s", transition, self._state.value)


def _notify(listeners: list[Listener]) -> None:
    for listener in list(listeners):
        listener()
