"""Utility modules for websearch.

- **errors** -- exception hierarchy rooted at :class:`SearchError`; every
  failure carries a kind tag and the name of the provider that raised it.
- **logging** -- structlog setup with coloured console output in
  development and structured JSON in production.
"""

from websearch.utils.errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    RateLimitError,
    SearchError,
    SearchErrorKind,
    UnsupportedProviderError,
)
from websearch.utils.logging import configure_logging, get_logger

__all__ = [
    "ApiError",
    "AuthenticationError",
    "ConfigurationError",
    "RateLimitError",
    "SearchError",
    "SearchErrorKind",
    "UnsupportedProviderError",
    "configure_logging",
    "get_logger",
]
