"""Brave Search provider implementing IWebSearchProvider.

Calls the Brave Web Search API (``GET /res/v1/web/search``) with the
subscription token in the ``X-Subscription-Token`` header.  Every attempt,
including retries of the same query, first waits for a slot from the
injected rate limiter.  HTTP 429 responses are retried with exponential
backoff; 401 and every other failure abort immediately.

Docs: https://api.search.brave.com/app/documentation/web-search
"""

from __future__ import annotations

import asyncio
from typing import Any

import httpx
import structlog

from websearch.interfaces.rate_limiter import IRateLimiter
from websearch.interfaces.web_search_provider import IWebSearchProvider, SearchResult
from websearch.models.attempt import AttemptOutcome, AttemptStatus
from websearch.models.provider_config import BRAVE_PROVIDER_NAME, ProviderConfig
from websearch.providers.rate_limit.min_interval_limiter import MinIntervalRateLimiter
from websearch.utils.errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    RateLimitError,
)
from websearch.utils.logging import get_logger

_BASE_URL = "https://api.search.brave.com/res/v1"
_SEARCH_URL = f"{_BASE_URL}/web/search"
_USER_AGENT = "websearch/0.1.0"

_MIN_QUERY_LENGTH = 3
_MAX_QUERY_LENGTH = 1000

_RESULT_TYPE = "web"
_DEFAULT_TITLE = "Untitled"
_DEFAULT_CONTENT = "No description available"

# Fixed request parameters; only ``q`` varies per call.
_SEARCH_PARAMS: dict[str, Any] = {
    "count": 10,
    "offset": 0,
    "language": "en",
    "country": "US",
    "safesearch": "moderate",
    "format": "json",
}


class BraveSearchProvider(IWebSearchProvider):
    """Rate-limited, retrying Brave web search.

    Parameters
    ----------
    config:
        Credential and retry tuning.  Construction fails without a key.
    rate_limiter:
        Shared limiter consulted before every outbound call.  Defaults to a
        private :class:`MinIntervalRateLimiter` built from ``config``.
    http_client:
        Injected ``httpx.AsyncClient``.  When omitted the provider creates
        one and closes it in :meth:`aclose`.
    logger:
        structlog logger for progress and error events.  Defaults to the
        module logger.
    """

    def __init__(
        self,
        config: ProviderConfig,
        rate_limiter: IRateLimiter | None = None,
        http_client: httpx.AsyncClient | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self._logger = logger or get_logger(__name__)
        if not config.api_key_present:
            self._logger.error("brave_provider_missing_api_key")
            raise ConfigurationError("Missing BRAVE_API_KEY", provider_name=BRAVE_PROVIDER_NAME)

        self._config = config
        self._rate_limiter = rate_limiter or MinIntervalRateLimiter.from_config(config)
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=config.request_timeout_s)

        self._logger.info(
            "brave_provider_initialized",
            credential_source=config.credential_source,
            max_retries=config.max_retries,
            base_retry_delay_s=config.base_retry_delay_s,
            min_interval_s=self._rate_limiter.min_interval,
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the HTTP client if this provider created it."""
        if self._owns_client:
            await self._http.aclose()

    # ------------------------------------------------------------------
    # IWebSearchProvider implementation
    # ------------------------------------------------------------------

    @property
    def provider_type(self) -> str:
        return _RESULT_TYPE

    @property
    def config(self) -> ProviderConfig:
        return self._config

    def get_provider_name(self) -> str:
        """Return the provider identifier."""
        return BRAVE_PROVIDER_NAME

    def is_available(self) -> bool:
        return self._config.api_key_present

    async def search(self, query: str) -> list[SearchResult]:
        """Search Brave for *query*, retrying on rate limits.

        Returns an empty list for queries shorter than 3 characters (after
        trimming) without contacting the API, and for well-formed responses
        that carry no results.
        """
        normalized = query.strip()
        if len(normalized) < _MIN_QUERY_LENGTH:
            self._logger.info("brave_query_too_short", query=normalized, min_length=_MIN_QUERY_LENGTH)
            return []

        if len(normalized) > _MAX_QUERY_LENGTH:
            self._logger.info(
                "brave_query_truncated",
                original_length=len(normalized),
                truncated_length=_MAX_QUERY_LENGTH,
            )
            normalized = normalized[:_MAX_QUERY_LENGTH]

        max_retries = self._config.max_retries
        last_error: RateLimitError | None = None

        for attempt in range(max_retries + 1):
            outcome = await self._attempt(normalized)

            if outcome.status is AttemptStatus.SUCCESS:
                if not outcome.results:
                    self._logger.warning("brave_zero_results", query=normalized)
                return list(outcome.results)

            if outcome.status is AttemptStatus.FATAL:
                self._logger.error(
                    "brave_search_aborted",
                    kind=outcome.error.kind.value,
                    error=str(outcome.error),
                    attempt=attempt + 1,
                )
                raise outcome.error

            last_error = outcome.error
            if attempt < max_retries:
                delay = self._config.retry_delay_s(attempt)
                self._logger.warning(
                    "brave_rate_limited_backing_off",
                    delay_s=delay,
                    attempt=attempt + 1,
                    max_retries=max_retries,
                )
                await asyncio.sleep(delay)

        self._logger.error("brave_retries_exhausted", query=normalized, attempts=max_retries + 1)
        raise RateLimitError(
            "Exceeded maximum retries due to rate limiting",
            provider_name=BRAVE_PROVIDER_NAME,
        ) from last_error

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _attempt(self, query: str) -> AttemptOutcome:
        """Issue one rate-limited request and classify the response."""
        await self._rate_limiter.wait_for_next_slot()
        self._logger.info("brave_search_started", query=query)

        headers = {
            "Accept": "application/json",
            "User-Agent": _USER_AGENT,
            "X-Subscription-Token": self._config.api_key.get_secret_value(),
        }
        params = {"q": query, **_SEARCH_PARAMS}

        try:
            response = await self._http.get(
                _SEARCH_URL,
                headers=headers,
                params=params,
                timeout=self._config.request_timeout_s,
            )
        except httpx.HTTPError as exc:
            self._logger.error("brave_request_failed", error=str(exc), error_type=type(exc).__name__)
            error = ApiError(str(exc) or "Brave request failed", provider_name=BRAVE_PROVIDER_NAME)
            error.__cause__ = exc
            return AttemptOutcome.fatal(error)

        status = response.status_code
        if status == 429:
            self._logger.warning("brave_rate_limited", status=status)
            return AttemptOutcome.retryable(
                RateLimitError("Rate-limited by Brave", provider_name=BRAVE_PROVIDER_NAME)
            )
        if status == 422:
            self._logger.error("brave_unprocessable_query", status=status, body=response.text[:500])
            return AttemptOutcome.fatal(
                ApiError("Received HTTP 422 from Brave", provider_name=BRAVE_PROVIDER_NAME, status_code=status)
            )
        if status == 401:
            self._logger.error("brave_unauthorized", status=status)
            return AttemptOutcome.fatal(
                AuthenticationError("Invalid Brave API key", provider_name=BRAVE_PROVIDER_NAME)
            )
        if not response.is_success:
            self._logger.error("brave_unexpected_status", status=status, body=response.text[:500])
            return AttemptOutcome.fatal(
                ApiError(f"Brave returned HTTP {status}", provider_name=BRAVE_PROVIDER_NAME, status_code=status)
            )

        return AttemptOutcome.success(self._parse_results(response))

    def _parse_results(self, response: httpx.Response) -> list[SearchResult]:
        """Map ``web.results`` to :class:`SearchResult` items.

        A body that is not JSON or lacks a ``web.results`` list counts as
        zero results.
        """
        try:
            data = response.json()
        except ValueError:
            self._logger.warning("brave_malformed_response", body=response.text[:500])
            return []

        web = data.get("web") if isinstance(data, dict) else None
        raw_results = web.get("results") if isinstance(web, dict) else None
        if not isinstance(raw_results, list):
            self._logger.warning(
                "brave_unexpected_response_shape",
                keys=sorted(data) if isinstance(data, dict) else type(data).__name__,
            )
            return []

        results: list[SearchResult] = []
        for item in raw_results:
            if not isinstance(item, dict):
                continue
            url = item.get("url") or ""
            results.append(
                SearchResult(
                    title=item.get("title") or _DEFAULT_TITLE,
                    content=item.get("description") or _DEFAULT_CONTENT,
                    source=url,
                    type=_RESULT_TYPE,
                    url=url,
                )
            )

        self._logger.debug("brave_search_complete", result_count=len(results))
        return results
