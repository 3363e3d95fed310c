"""Rate limiter implementations shared by search providers."""

from websearch.providers.rate_limit.min_interval_limiter import MinIntervalRateLimiter

__all__ = ["MinIntervalRateLimiter"]
