"""Immutable configuration for a search provider instance.

A :class:`ProviderConfig` always holds a credential: the model refuses to
build without one, so a provider that received a config never has to
re-check its key at request time.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr, model_validator

from websearch.config.settings import Settings
from websearch.utils.errors import ConfigurationError

BRAVE_PROVIDER_NAME = "brave"
BRAVE_API_KEY_ENV = "BRAVE_API_KEY"

# Keys of the YAML ``search`` section that map straight onto model fields.
_TUNABLE_FIELDS = ("max_retries", "base_retry_delay_ms", "min_interval_ms", "request_timeout_s")


class ProviderConfig(BaseModel):
    """Credential plus retry/rate-limit tuning for one provider.

    Delays are stored in milliseconds to match the Brave documentation and
    the environment variables; use the ``*_s`` properties when sleeping.
    """

    model_config = ConfigDict(frozen=True)

    api_key: SecretStr
    # "explicit" when passed by the caller, "environment" when read from BRAVE_API_KEY.
    credential_source: Literal["explicit", "environment"] = "explicit"
    max_retries: int = Field(default=3, ge=0)
    base_retry_delay_ms: int = Field(default=5000, ge=0)
    min_interval_ms: int = Field(default=10000, ge=0)
    request_timeout_s: float = Field(default=15.0, gt=0)

    @model_validator(mode="after")
    def _require_credential(self) -> ProviderConfig:
        if not self.api_key.get_secret_value().strip():
            raise ConfigurationError(f"Missing {BRAVE_API_KEY_ENV}", provider_name=BRAVE_PROVIDER_NAME)
        return self

    @property
    def api_key_present(self) -> bool:
        return bool(self.api_key.get_secret_value())

    @property
    def base_retry_delay_s(self) -> float:
        return self.base_retry_delay_ms / 1000.0

    @property
    def min_interval_s(self) -> float:
        return self.min_interval_ms / 1000.0

    def retry_delay_s(self, attempt: int) -> float:
        """Backoff before retry number ``attempt + 1`` (attempt counts from 0)."""
        return self.base_retry_delay_s * (2 ** attempt)

    @classmethod
    def resolve(
        cls,
        api_key: str | None = None,
        settings: Settings | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> ProviderConfig:
        """Build a config from an explicit key or the environment.

        The explicit ``api_key`` wins; otherwise ``BRAVE_API_KEY`` is read
        through :class:`Settings` (environment or ``.env``).  Tuning values
        come from ``settings`` and may be replaced by ``overrides`` (for
        example the ``search`` section returned by ``load_config``).

        Raises
        ------
        ConfigurationError
            If no credential can be found.
        """
        settings = settings or Settings()
        key = api_key or settings.brave_api_key
        if not key:
            raise ConfigurationError(f"Missing {BRAVE_API_KEY_ENV}", provider_name=BRAVE_PROVIDER_NAME)

        values: dict[str, Any] = {
            "max_retries": settings.search_max_retries,
            "base_retry_delay_ms": settings.search_retry_base_delay_ms,
            "min_interval_ms": settings.search_min_interval_ms,
            "request_timeout_s": settings.search_request_timeout,
        }
        for name, value in (overrides or {}).items():
            if name in _TUNABLE_FIELDS and value is not None:
                values[name] = value

        return cls(
            api_key=SecretStr(key),
            credential_source="explicit" if api_key else "environment",
            **values,
        )
