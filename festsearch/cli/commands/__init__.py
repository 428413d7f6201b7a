"""CLI command modules."""

from . import catalog, search

__all__ = ["catalog", "search"]
