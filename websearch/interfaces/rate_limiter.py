"""Abstract base class for outbound-call rate limiters."""

from __future__ import annotations

from abc import ABC, abstractmethod


class IRateLimiter(ABC):
    """Contract for enforcing a minimum spacing between outbound calls.

    ``wait_for_next_slot`` returns once the caller may issue its request.
    The first slot is admitted immediately; every later slot is admitted no
    sooner than ``min_interval`` seconds after the previous one.

    Implementations must serialize concurrent waiters so that several
    providers can share one limiter instance and still respect the spacing.
    """

    @property
    @abstractmethod
    def min_interval(self) -> float:
        """Minimum spacing between admitted slots, in seconds."""

    @abstractmethod
    async def wait_for_next_slot(self) -> None:
        """Block until the next request slot is available, then claim it."""
