"""YAML configuration loader with environment variable overrides.

Configuration is layered, later layers winning:

  1. config/config.yaml  -- static defaults checked into the repo
  2. .env file           -- local overrides (not committed)
  3. Environment vars    -- set at deploy time

An environment value only overrides the YAML when it differs from the
``Settings`` default or the YAML leaves the key unset, so a tuned
``config.yaml`` is not reset by a variable nobody exported.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from websearch.config.settings import Settings

# (section, yaml key, Settings field)
_ENV_FIELDS: tuple[tuple[str, str, str], ...] = (
    ("app", "env", "app_env"),
    ("logging", "level", "log_level"),
    ("search", "max_retries", "search_max_retries"),
    ("search", "base_retry_delay_ms", "search_retry_base_delay_ms"),
    ("search", "min_interval_ms", "search_min_interval_ms"),
    ("search", "request_timeout_s", "search_request_timeout"),
)


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict[str, Any]:
    """Load YAML config and merge with environment-based Settings.

    Args:
        path: Path to the YAML configuration file.  A missing file is treated
              as an empty mapping.
        settings: Pre-built settings; a fresh ``Settings()`` is read otherwise.

    Returns:
        Fully resolved configuration dictionary with ``app``, ``search`` and
        ``logging`` sections.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    settings = settings or Settings()
    defaults = Settings.model_fields

    env_overrides: dict[str, dict[str, Any]] = {"app": {}, "search": {}, "logging": {}}
    for section, key, field in _ENV_FIELDS:
        value = getattr(settings, field)
        yaml_section = yaml_config.get(section) or {}
        if value != defaults[field].default or key not in yaml_section:
            env_overrides[section][key] = value

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
