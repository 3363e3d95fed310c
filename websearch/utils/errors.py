"""Exception hierarchy for the websearch client.

Every error raised by a search provider inherits from :class:`SearchError`,
which carries a ``kind`` tag, a human-readable ``message`` and an optional
``provider_name`` identifying which search backend produced the failure.

    SearchError                    (base -- catch-all for any search failure)
    +-- ConfigurationError         (construction time: missing credential)
    +-- AuthenticationError        (HTTP 401, never retried)
    +-- RateLimitError             (HTTP 429, retried with backoff)
    +-- ApiError                   (any other request-level failure)
    +-- UnsupportedProviderError   (factory asked for an unknown type)

Callers may branch either on the subclass or on ``err.kind``.
"""

from __future__ import annotations

from enum import Enum


class SearchErrorKind(str, Enum):
    """Tag identifying which failure category a :class:`SearchError` is."""

    CONFIG_ERROR = "ConfigError"
    RATE_LIMIT = "RateLimit"
    API_ERROR = "ApiError"
    AUTH_ERROR = "AuthError"
    UNSUPPORTED_PROVIDER = "UnsupportedProvider"


class SearchError(Exception):
    """Base exception for all search failures.

    ``__str__`` prefixes the provider name in brackets for log scanning,
    e.g. ``[brave] Rate-limited by Brave``.
    """

    def __init__(
        self,
        message: str = "Search request failed",
        provider_name: str | None = None,
        kind: SearchErrorKind = SearchErrorKind.API_ERROR,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        self._kind = kind
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    @property
    def kind(self) -> SearchErrorKind:
        return self._kind

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


class ConfigurationError(SearchError):
    """Raised when a provider cannot be constructed (e.g. no API key)."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message, provider_name, SearchErrorKind.CONFIG_ERROR)


class AuthenticationError(SearchError):
    """Raised when the search API rejects the credential (HTTP 401)."""

    def __init__(
        self,
        message: str = "Invalid API key",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message, provider_name, SearchErrorKind.AUTH_ERROR)


class RateLimitError(SearchError):
    """Raised when the search API rate limit is exceeded (HTTP 429).

    Inside the invoker this is retried with exponential backoff; it only
    reaches the caller once the retry budget is spent.
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message, provider_name, SearchErrorKind.RATE_LIMIT)


class ApiError(SearchError):
    """Raised for any other request failure (HTTP 422, 5xx, transport errors)."""

    def __init__(
        self,
        message: str = "Search API request failed",
        provider_name: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, provider_name, SearchErrorKind.API_ERROR)
        self._status_code = status_code

    @property
    def status_code(self) -> int | None:
        return self._status_code


class UnsupportedProviderError(SearchError):
    """Raised by the provider factory for an unknown provider type."""

    def __init__(
        self,
        message: str = "Unsupported search provider",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message, provider_name, SearchErrorKind.UNSUPPORTED_PROVIDER)
