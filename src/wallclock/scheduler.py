from __future__ import annotations

from typing import Callable, Protocol
import threading
import time

TICK_INTERVAL = 10.0

class Ticker(Protocol):
    def next(self) -> bool:
        """Block until the next tick; False once the ticker has stopped."""
        ...

class IntervalTicker:
    """Fixed-interval ticker anchored at creation time.

    Ticks fall on ``start + n * interval``. When a caller comes back after a
    deadline has already passed, the missed ticks are dropped and the next one
    fires right away.
    """

    def __init__(
        self,
        interval: float = TICK_INTERVAL,
        stop_event: threading.Event | None = None,
        monotonic: Callable[[], float] = time.monotonic,
        wait: Callable[[float], bool] | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self.interval = interval
        self.stop_event = stop_event or threading.Event()
        self._monotonic = monotonic
        self._wait = wait or self.stop_event.wait
        self._deadline = monotonic() + interval

    def next(self) -> bool:
        if self.stop_event.is_set():
            return False
        now = self._monotonic()
        if now >= self._deadline:
            missed = int((now - self._deadline) // self.interval)
            self._deadline += missed * self.interval
        else:
            if self._wait(self._deadline - now):
                return False
        self._deadline += self.interval
        return not self.stop_event.is_set()

    def stop(self) -> None:
        self.stop_event.set()

def run(step: Callable[[], object], ticker: Ticker) -> int:
    """Call ``step`` now and on every tick; return how many times it ran."""
    renders = 0
    while True:
        step()
        renders += 1
        if not ticker.next():
            return renders
