"""Stopwatch -- a Clock driven by a real background timer.

Demonstrates:
- Subscribing to the Timer event on the host dispatcher
- Host resume/stop gating with timer_always_fires off
- Date helpers: make_instant, add_minutes, compare, format_time

Run: python -m examples.stopwatch
"""

import time

from tock import TIMER_EVENT, Clock, ClockConfig, HostApp


def main() -> None:
    host = HostApp()
    clock = Clock(host, ClockConfig(interval_ms=200, always_fires=False))
    ticks: list[int] = []

    def on_timer(component: Clock, event_name: str, args: dict) -> None:
        ticks.append(Clock.system_time())
        print(f"  {event_name} #{len(ticks)} at {Clock.format_time(Clock.now())}")

    host.dispatcher.subscribe(TIMER_EVENT, on_timer)

    print("Background (no ticks expected):")
    for _ in range(5):
        time.sleep(0.2)
        host.dispatcher.flush()

    print("Foreground:")
    host.resume()
    for _ in range(5):
        time.sleep(0.2)
        host.dispatcher.flush()

    host.destroy()
    host.dispatcher.flush()

    start = Clock.make_instant("08:00").unwrap()
    finish = Clock.add_minutes(start, 95)
    elapsed = Clock.compare(start, finish)
    print(f"\n{Clock.format_time(start)} -> {Clock.format_time(finish)}: "
          f"{Clock.duration_in_hours(elapsed)}h {Clock.duration_in_minutes(elapsed) % 60}m")
    print(f"Ticks delivered while on screen: {len(ticks)}")


if __name__ == "__main__":
    main()
