"""Application settings loaded from environment variables via pydantic-settings.

Values are read from two sources, environment variables first and then a
``.env`` file in the working directory.  Field ``brave_api_key`` maps to the
``BRAVE_API_KEY`` variable, ``search_max_retries`` to ``SEARCH_MAX_RETRIES``
and so on.  Defaults apply when neither source sets a field.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """websearch settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # === Brave Search ===
    # Empty string = "not configured"; ProviderConfig.resolve() refuses it.
    brave_api_key: str = ""

    # === Retry / rate limiting ===
    search_max_retries: int = 3
    search_retry_base_delay_ms: int = 5000
    search_min_interval_ms: int = 10000
    search_request_timeout: float = 15.0

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
