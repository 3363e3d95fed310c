"""Search provider factory.

Dispatches on a provider *type* tag.  Only ``"web"`` (Brave Search) exists
today; any other tag raises :class:`UnsupportedProviderError`.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from websearch.config.settings import Settings
from websearch.interfaces.rate_limiter import IRateLimiter
from websearch.interfaces.web_search_provider import IWebSearchProvider
from websearch.models.provider_config import ProviderConfig
from websearch.providers.search.brave_provider import BraveSearchProvider
from websearch.utils.errors import SearchError, UnsupportedProviderError
from websearch.utils.logging import get_logger

SUPPORTED_PROVIDER_TYPES: tuple[str, ...] = ("web",)


def create_provider(
    provider_type: str,
    *,
    api_key: str | None = None,
    settings: Settings | None = None,
    overrides: dict[str, Any] | None = None,
    http_client: httpx.AsyncClient | None = None,
    rate_limiter: IRateLimiter | None = None,
    logger: structlog.BoundLogger | None = None,
) -> IWebSearchProvider:
    """Build the search provider registered for *provider_type*.

    Parameters
    ----------
    provider_type:
        Provider tag, currently only ``"web"``.
    api_key:
        Explicit credential; ``BRAVE_API_KEY`` is used when omitted.
    settings:
        Settings to resolve defaults from (a fresh ``Settings()`` otherwise).
    overrides:
        Retry/rate-limit values replacing the settings, e.g. the ``search``
        section of ``load_config()``.
    http_client, rate_limiter, logger:
        Passed through to the provider.

    Raises
    ------
    UnsupportedProviderError
        For an unknown ``provider_type``.
    ConfigurationError
        If no credential can be resolved.
    """
    log = logger or get_logger(__name__)

    if provider_type == "web":
        try:
            config = ProviderConfig.resolve(api_key=api_key, settings=settings, overrides=overrides)
            return BraveSearchProvider(
                config,
                rate_limiter=rate_limiter,
                http_client=http_client,
                logger=logger,
            )
        except SearchError as exc:
            log.error("provider_creation_failed", provider_type=provider_type, error=str(exc))
            raise

    log.error("provider_type_unsupported", provider_type=provider_type, supported=SUPPORTED_PROVIDER_TYPES)
    raise UnsupportedProviderError(f"No provider for type: {provider_type}", provider_name="")
