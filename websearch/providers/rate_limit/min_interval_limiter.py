"""Minimum-interval rate limiter implementing IRateLimiter.

Admits one request slot at a time, spacing slots at least
``min_interval`` seconds apart.  Waiters queue on an ``asyncio.Lock`` so a
single instance can be shared by several providers.
"""

from __future__ import annotations

import asyncio
import time

from websearch.interfaces.rate_limiter import IRateLimiter
from websearch.models.provider_config import ProviderConfig
from websearch.utils.logging import get_logger


class MinIntervalRateLimiter(IRateLimiter):
    """Fixed-spacing limiter backed by ``time.monotonic()``.

    Parameters
    ----------
    min_interval:
        Minimum seconds between admitted slots.  ``0`` disables waiting.
    """

    def __init__(self, min_interval: float) -> None:
        if min_interval < 0:
            raise ValueError(f"min_interval must be >= 0, got {min_interval}")
        self._min_interval = float(min_interval)
        self._last_slot_time: float | None = None
        self._lock = asyncio.Lock()
        self._logger = get_logger(__name__)

    @classmethod
    def from_config(cls, config: ProviderConfig) -> MinIntervalRateLimiter:
        return cls(config.min_interval_s)

    @property
    def min_interval(self) -> float:
        return self._min_interval

    async def wait_for_next_slot(self) -> None:
        """Block until ``min_interval`` has passed since the previous slot."""
        async with self._lock:
            if self._last_slot_time is not None:
                elapsed = time.monotonic() - self._last_slot_time
                if elapsed < self._min_interval:
                    delay = self._min_interval - elapsed
                    self._logger.debug("rate_limiter_waiting", delay_s=round(delay, 3))
                    await asyncio.sleep(delay)
            self._last_slot_time = time.monotonic()
