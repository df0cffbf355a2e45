"""Tests for the rate limiters."""

import threading

import pytest

from clubhouse_sdk._internal.ratelimit import (
    IntervalLimiter,
    UnlimitedLimiter,
    new_rate_limiter,
)


class FakeClock:
    """Clock whose sleep advances time instead of blocking."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start
        self.sleeps: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


class TestIntervalLimiter:
    """Tests for IntervalLimiter."""

    def test_rejects_non_positive_rate(self):
        """A rate of zero or less is not a valid interval."""
        with pytest.raises(ValueError):
            IntervalLimiter(0)
        with pytest.raises(ValueError):
            IntervalLimiter(-3)

    def test_interval(self):
        assert IntervalLimiter(4).interval == 0.25

    def test_first_take_does_not_sleep(self):
        """The first request should go out immediately."""
        clock = FakeClock()
        limiter = IntervalLimiter(3, clock=clock, sleep=clock.sleep)
        assert limiter.take() == 100.0
        assert clock.sleeps == []

    def test_back_to_back_takes_are_spaced(self):
        """Consecutive takes should be one interval apart."""
        clock = FakeClock()
        limiter = IntervalLimiter(2, clock=clock, sleep=clock.sleep)
        times = [limiter.take() for _ in range(4)]
        assert times == [100.0, 100.5, 101.0, 101.5]
        assert clock.sleeps == [0.5, 0.5, 0.5]

    def test_partial_wait(self):
        """Only the remainder of the interval should be slept."""
        clock = FakeClock()
        limiter = IntervalLimiter(1, clock=clock, sleep=clock.sleep)
        limiter.take()
        clock.now += 0.75
        limiter.take()
        assert clock.sleeps == [pytest.approx(0.25)]

    def test_no_wait_after_idle(self):
        """Takes after a long gap should not sleep."""
        clock = FakeClock()
        limiter = IntervalLimiter(3, clock=clock, sleep=clock.sleep)
        limiter.take()
        clock.now += 10
        assert limiter.take() == 110.0
        assert clock.sleeps == []

    def test_thread_safe(self):
        """Concurrent takes should all be spaced by the interval."""
        clock = FakeClock()
        limiter = IntervalLimiter(10, clock=clock, sleep=clock.sleep)
        results: list[float] = []
        lock = threading.Lock()

        def worker():
            value = limiter.take()
            with lock:
                results.append(value)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        results.sort()
        gaps = [b - a for a, b in zip(results, results[1:], strict=False)]
        assert len(results) == 8
        assert all(gap == pytest.approx(0.1) for gap in gaps)


class TestUnlimitedLimiter:
    def test_never_blocks(self):
        clock = FakeClock()
        limiter = UnlimitedLimiter(clock=clock)
        assert [limiter.take() for _ in range(3)] == [100.0, 100.0, 100.0]


class TestNewRateLimiter:
    """Tests for new_rate_limiter."""

    def test_zero_is_unlimited(self):
        assert isinstance(new_rate_limiter(0), UnlimitedLimiter)

    def test_positive_rate(self):
        limiter = new_rate_limiter(3)
        assert isinstance(limiter, IntervalLimiter)
        assert limiter.interval == pytest.approx(1 / 3)
