"""Concrete adapters for the interfaces in ``websearch.interfaces``."""
