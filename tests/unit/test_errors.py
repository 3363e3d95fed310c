"""Unit tests for the SearchError hierarchy."""

from __future__ import annotations

import pytest

from websearch.utils.errors import (
    ApiError,
    AuthenticationError,
    ConfigurationError,
    RateLimitError,
    SearchError,
    SearchErrorKind,
    UnsupportedProviderError,
)


@pytest.mark.parametrize(
    "cls,kind",
    [
        (ConfigurationError, SearchErrorKind.CONFIG_ERROR),
        (AuthenticationError, SearchErrorKind.AUTH_ERROR),
        (RateLimitError, SearchErrorKind.RATE_LIMIT),
        (ApiError, SearchErrorKind.API_ERROR),
        (UnsupportedProviderError, SearchErrorKind.UNSUPPORTED_PROVIDER),
    ],
)
def test_subclass_kind_tags(cls, kind) -> None:
    err = cls("boom", provider_name="brave")
    assert isinstance(err, SearchError)
    assert err.kind is kind
    assert err.message == "boom"
    assert err.provider_name == "brave"


def test_str_prefixes_provider() -> None:
    assert str(RateLimitError("Rate-limited by Brave", provider_name="brave")) == "[brave] Rate-limited by Brave"


def test_str_without_provider() -> None:
    assert str(UnsupportedProviderError("No provider for type: news", provider_name="")) == "No provider for type: news"


def test_kind_values_match_wire_names() -> None:
    assert {k.value for k in SearchErrorKind} == {
        "ConfigError",
        "RateLimit",
        "ApiError",
        "AuthError",
        "UnsupportedProvider",
    }


def test_api_error_carries_status_code() -> None:
    err = ApiError("Received HTTP 422 from Brave", provider_name="brave", status_code=422)
    assert err.status_code == 422
