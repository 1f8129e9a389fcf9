"""
Tests for batch pacing.
"""

import pytest

from pinata_sdk.rate_limit import (
    DEFAULT_BATCH_INTERVAL,
    IntervalRateLimiter,
    NoopRateLimiter,
)


class FakeClock:
    """Manually advanced clock whose sleep moves time forward."""

    def __init__(self, start: float = 100.0):
        self.now = start
        self.sleeps = []

    def __call__(self) -> float:
        return self.now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.mark.asyncio
class TestIntervalRateLimiter:
    async def test_first_acquire_does_not_wait(self, clock):
        limiter = IntervalRateLimiter(clock=clock, sleep=clock.sleep)

        await limiter.acquire()

        assert clock.sleeps == []

    async def test_back_to_back_acquires_wait_full_interval(self, clock):
        limiter = IntervalRateLimiter(interval=0.5, clock=clock, sleep=clock.sleep)

        await limiter.acquire()
        await limiter.acquire()
        await limiter.acquire()

        assert clock.sleeps == [0.5, 0.5]

    async def test_elapsed_time_counts_towards_interval(self, clock):
        limiter = IntervalRateLimiter(interval=0.5, clock=clock, sleep=clock.sleep)

        await limiter.acquire()
        clock.now += 0.2
        await limiter.acquire()

        assert clock.sleeps == [pytest.approx(0.3)]

    async def test_no_wait_after_long_request(self, clock):
        limiter = IntervalRateLimiter(interval=0.5, clock=clock, sleep=clock.sleep)

        await limiter.acquire()
        clock.now += 2.0
        await limiter.acquire()

        assert clock.sleeps == []

    async def test_reset(self, clock):
        limiter = IntervalRateLimiter(clock=clock, sleep=clock.sleep)

        await limiter.acquire()
        limiter.reset()
        await limiter.acquire()

        assert clock.sleeps == []

    async def test_default_interval(self):
        assert IntervalRateLimiter().interval == DEFAULT_BATCH_INTERVAL == 0.3

    async def test_noop(self):
        assert await NoopRateLimiter().acquire() is None


def test_negative_interval_rejected():
    with pytest.raises(ValueError):
        IntervalRateLimiter(interval=-1)
