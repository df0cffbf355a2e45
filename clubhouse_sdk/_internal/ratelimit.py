"""Blocking rate limiters."""

import threading
import time
from typing import Protocol


class RateLimiter(Protocol):
    """Anything with a blocking ``take()``."""

    def take(self) -> float:
        """Block until the next request may be sent; return the current time."""
        ...


class IntervalLimiter:
    """Spaces calls to ``take()`` at least ``1 / rate`` seconds apart.

    Safe to share between threads. There is no timeout: ``take()`` sleeps for
    as long as needed.
    """

    def __init__(self, rate: int, *, clock=time.monotonic, sleep=time.sleep) -> None:
        if rate <= 0:
            raise ValueError("rate must be > 0")
        self._interval = 1.0 / rate
        self._clock = clock
        self._sleep = sleep
        self._lock = threading.Lock()
        self._last: float | None = None

    @property
    def interval(self) -> float:
        return self._interval

    def take(self) -> float:
        with self._lock:
            now = self._clock()
            if self._last is not None:
                wait = self._last + self._interval - now
                if wait > 0:
                    self._sleep(wait)
                    now = self._last + self._interval
            self._last = now
            return now


class UnlimitedLimiter:
    """Never blocks."""

    def __init__(self, *, clock=time.monotonic) -> None:
        self._clock = clock

    def take(self) -> float:
        return self._clock()


def new_rate_limiter(rate: int) -> RateLimiter:
    """Create a limiter allowing ``rate`` requests per second (0 = unlimited)."""
    if rate == 0:
        return UnlimitedLimiter()
    return IntervalLimiter(rate)
