"""Tests for HostApp transitions and the EventDispatcher sink."""
from __future__ import annotations

import logging

from tock import EventDispatcher, HostApp, HostState


class TestEventDispatcher:

    def test_dispatch_is_queued_until_flush(self):
        """Test dispatched events wait in the queue until flush."""
        dispatcher = EventDispatcher()
        received = []
        dispatcher.subscribe("Timer", lambda c, n, a: received.append((c, n, a)))

        dispatcher.dispatch("clock1", "Timer")
        assert received == []
        assert dispatcher.pending() == 1

        assert dispatcher.flush() == 1
        assert received == [("clock1", "Timer", {})]
        assert dispatcher.pending() == 0

    def test_args_delivered(self):
        """Test dispatch keyword args reach the handler."""
        dispatcher = EventDispatcher()
        received = []
        dispatcher.subscribe("Changed", lambda c, n, a: received.append(a))
        dispatcher.dispatch(None, "Changed", value=3)
        dispatcher.flush()
        assert received == [{"value": 3}]

    def test_handlers_in_subscription_order(self):
        """Test handlers run in the order they subscribed."""
        dispatcher = EventDispatcher()
        order = []
        dispatcher.subscribe("Timer", lambda c, n, a: order.append("a"))
        dispatcher.subscribe("Timer", lambda c, n, a: order.append("b"))
        dispatcher.dispatch(None, "Timer")
        dispatcher.flush()
        assert order == ["a", "b"]

    def test_unsubscribe(self):
        """Test unsubscribed handlers are skipped and repeat unsubscribes are harmless."""
        dispatcher = EventDispatcher()
        received = []

        def handler(c, n, a):
            received.append(n)

        dispatcher.subscribe("Timer", handler)
        dispatcher.unsubscribe("Timer", handler)
        dispatcher.unsubscribe("Timer", handler)
        dispatcher.unsubscribe("Other", handler)
        dispatcher.dispatch(None, "Timer")
        dispatcher.flush()
        assert received == []

    def test_dispatch_during_flush_waits_for_next_flush(self):
        """Test an event dispatched from a handler waits for the next flush."""
        dispatcher = EventDispatcher()
        received = []

        def handler(c, n, a):
            received.append(n)
            if len(received) == 1:
                dispatcher.dispatch(None, "Timer")

        dispatcher.subscribe("Timer", handler)
        dispatcher.dispatch(None, "Timer")
        dispatcher.flush()
        assert len(received) == 1
        dispatcher.flush()
        assert len(received) == 2

    def test_clear_drops_pending(self):
        """Test clear discards queued events."""
        dispatcher = EventDispatcher()
        dispatcher.dispatch(None, "Timer")
        dispatcher.clear()
        assert dispatcher.flush() == 0


class TestHostApp:

    def test_initial_state(self):
        """Test a new host is in the created state and not always on screen."""
        host = HostApp()
        assert host.state is HostState.CREATED
        assert host.always_on_screen is False

    def test_notifications_once_per_transition(self):
        """Test listeners hear each real transition exactly once."""
        host = HostApp()
        calls = []
        host.register_for_on_resume(lambda: calls.append("resume"))
        host.register_for_on_stop(lambda: calls.append("stop"))
        host.register_for_on_destroy(lambda: calls.append("destroy"))

        assert host.resume() is True
        assert host.resume() is False
        assert host.stop() is True
        assert host.stop() is False
        assert host.resume() is True
        assert host.destroy() is True
        assert host.destroy() is False

        assert calls == ["resume", "stop", "resume", "destroy"]

    def test_stop_before_resume_ignored(self):
        """Test stop before any resume notifies nobody."""
        host = HostApp()
        calls = []
        host.register_for_on_stop(lambda: calls.append("stop"))
        assert host.stop() is False
        assert calls == []

    def test_nothing_after_destroy(self, caplog):
        """Test transitions after destroy are ignored with a warning."""
        host = HostApp()
        calls = []
        host.register_for_on_resume(lambda: calls.append("resume"))
        host.destroy()
        with caplog.at_level(logging.WARNING, logger="tock.host"):
            assert host.resume() is False
        assert calls == []
        assert "already destroyed" in caplog.text

    def test_unregister_removes_everywhere(self):
        """Test unregister removes a listener from every notification."""
        host = HostApp()
        calls = []

        def listener():
            calls.append(1)

        host.register_for_on_resume(listener)
        host.register_for_on_destroy(listener)
        host.unregister(listener)
        host.resume()
        host.destroy()
        assert calls == []
