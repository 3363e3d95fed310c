"""Configuration module -- exports Settings and load_config."""

from websearch.config.loader import load_config
from websearch.config.settings import Settings

__all__ = ["Settings", "load_config"]
