"""websearch domain models.

    - attempt.py          -- tagged outcome of one outbound search call
    - provider_config.py  -- immutable credential + retry/rate-limit tuning
"""

from __future__ import annotations

from websearch.models.attempt import AttemptOutcome, AttemptStatus
from websearch.models.provider_config import ProviderConfig

__all__ = [
    "AttemptOutcome",
    "AttemptStatus",
    "ProviderConfig",
]
