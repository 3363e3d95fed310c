"""Abstract base class for web-search service providers.

Defines the contract for a rate-limited, retrying web search.  The only
implementation today wraps Brave Search (``websearch.providers.search``);
callers depend on :class:`IWebSearchProvider` so a second backend can be
added without touching them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class SearchResult:
    """A single normalized web-search result.

    Attributes
    ----------
    title:
        The page title, ``"Untitled"`` when the provider omitted it.
    content:
        The result snippet, ``"No description available"`` when missing.
    source:
        The URL the snippet came from (same value as ``url``).
    type:
        Result category.  Always ``"web"`` for now.
    url:
        The result URL, empty string when missing.
    """

    title: str
    content: str
    source: str
    type: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class IWebSearchProvider(ABC):
    """Contract for web-search services.

    Implementations return a list of :class:`SearchResult` items for a
    free-text query, in provider order.
    """

    @abstractmethod
    async def search(self, query: str) -> list[SearchResult]:
        """Execute a web search and return the results.

        Parameters
        ----------
        query:
            Free-text query.  Implementations trim it, skip queries shorter
            than 3 characters and truncate anything past 1000 characters.

        Returns
        -------
        list[SearchResult]
            Zero or more results in provider order.

        Raises
        ------
        websearch.utils.errors.SearchError
            ``AuthenticationError`` for a rejected credential,
            ``RateLimitError`` once retries are exhausted, ``ApiError`` for
            any other request failure.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier for this provider, e.g. ``"brave"``."""

    @abstractmethod
    def is_available(self) -> bool:
        """Return ``True`` if the provider is configured with a credential."""

    async def aclose(self) -> None:
        """Release network resources.  No-op unless overridden."""

    async def __aenter__(self) -> IWebSearchProvider:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()
