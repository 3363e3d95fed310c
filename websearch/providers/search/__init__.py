"""Web-search provider implementations.

Currently only Brave Search.  Callers should go through
:func:`create_provider` so a new backend only needs a new branch there.
"""

from websearch.providers.search.brave_provider import BraveSearchProvider
from websearch.providers.search.factory import SUPPORTED_PROVIDER_TYPES, create_provider

__all__ = ["BraveSearchProvider", "SUPPORTED_PROVIDER_TYPES", "create_provider"]
