"""
Client-side pacing for batch operations.

Batch calls (delete files, revoke keys, group membership) send one request per
item. A rate limiter is awaited between items so the service is not flooded.
"""

import asyncio
import logging
import time
from typing import Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

# Pause between batch items used by the service's own SDKs
DEFAULT_BATCH_INTERVAL = 0.3


class NoopRateLimiter:
    """Rate limiter that never waits."""

    async def acquire(self) -> None:
        return None


class IntervalRateLimiter:
    """
    Enforce a minimum spacing between consecutive acquisitions.

    The first acquisition returns immediately. Later ones sleep for whatever
    remains of ``interval`` since the previous acquisition, so time spent
    on the request itself counts towards the pause.
    """

    def __init__(
        self,
        interval: float = DEFAULT_BATCH_INTERVAL,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """
        Initialize the rate limiter.

        Args:
            interval: Minimum seconds between two acquisitions
            clock: Monotonic clock returning seconds
            sleep: Coroutine function used to wait
        """
        if interval < 0:
            raise ValueError("interval must not be negative")
        self.interval = interval
        self._clock = clock
        self._sleep = sleep
        self._last: Optional[float] = None

    async def acquire(self) -> None:
        now = self._clock()
        if self._last is not None:
            remaining = self.interval - (now - self._last)
            if remaining > 0:
                logger.debug(f"Rate limiter waiting {remaining:.3f}s")
                await self._sleep(remaining)
                now = self._clock()
        self._last = now

    def reset(self) -> None:
        """Forget the previous acquisition."""
        self._last = None
