"""websearch -- a rate-limited, retrying Brave web-search client.

Typical use::

    from websearch import create_provider

    async with create_provider("web") as provider:
        results = await provider.search("history of detroit techno")
"""

from websearch.interfaces import IRateLimiter, IWebSearchProvider, SearchResult
from websearch.models import ProviderConfig
from websearch.providers.rate_limit import MinIntervalRateLimiter
from websearch.providers.search import BraveSearchProvider, create_provider
from websearch.utils.errors import SearchError, SearchErrorKind

__version__ = "0.1.0"

__all__ = [
    "BraveSearchProvider",
    "IRateLimiter",
    "IWebSearchProvider",
    "MinIntervalRateLimiter",
    "ProviderConfig",
    "SearchError",
    "SearchErrorKind",
    "SearchResult",
    "create_provider",
]
