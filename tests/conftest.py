"""Shared pytest fixtures for the websearch test suite."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from websearch.interfaces.rate_limiter import IRateLimiter
from websearch.models.provider_config import ProviderConfig

BRAVE_SEARCH_URL = "https://api.search.brave.com/res/v1/web/search"


def make_response(
    status_code: int = 200,
    json_body: Any = None,
    text: str | None = None,
) -> httpx.Response:
    """Build an ``httpx.Response`` bound to a Brave search request."""
    request = httpx.Request("GET", BRAVE_SEARCH_URL)
    if text is not None:
        return httpx.Response(status_code, text=text, request=request)
    if json_body is not None:
        return httpx.Response(status_code, json=json_body, request=request)
    return httpx.Response(status_code, request=request)


def brave_payload(*results: dict[str, Any]) -> dict[str, Any]:
    """Wrap result items in the ``{"web": {"results": [...]}}`` envelope."""
    return {"type": "search", "web": {"type": "search", "results": list(results)}}


@pytest.fixture(autouse=True)
def _no_ambient_brave_key(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's real BRAVE_API_KEY out of the tests."""
    monkeypatch.delenv("BRAVE_API_KEY", raising=False)


@pytest.fixture
def provider_config() -> ProviderConfig:
    """Config with the documented defaults and a dummy key."""
    return ProviderConfig(
        api_key="test-brave-key",
        max_retries=3,
        base_retry_delay_ms=5000,
        min_interval_ms=10000,
    )


@pytest.fixture
def mock_rate_limiter() -> MagicMock:
    """Rate limiter that admits every slot immediately and records calls."""
    limiter = MagicMock(spec=IRateLimiter)
    limiter.wait_for_next_slot = AsyncMock(return_value=None)
    limiter.min_interval = 10.0
    return limiter


@pytest.fixture
def mock_http_client() -> AsyncMock:
    """``httpx.AsyncClient`` stand-in; tests set ``get`` return values."""
    client = AsyncMock(spec=httpx.AsyncClient)
    client.get = AsyncMock(return_value=make_response(json_body=brave_payload()))
    return client


@pytest.fixture
def mock_logger() -> MagicMock:
    """structlog-like logger capturing every event call."""
    return MagicMock()
