"""Public interface definitions for websearch's pluggable collaborators.

Concrete adapters live in ``websearch/providers/`` and are injected at
construction time, so tests can pass fakes without any network access.

    Interface            ->  Concrete implementations
    ---------------------------------------------------------------
    IWebSearchProvider   ->  BraveSearchProvider
    IRateLimiter         ->  MinIntervalRateLimiter
"""

from websearch.interfaces.rate_limiter import IRateLimiter
from websearch.interfaces.web_search_provider import IWebSearchProvider, SearchResult

__all__ = [
    "IRateLimiter",
    "IWebSearchProvider",
    "SearchResult",
]
