"""Output formatters for the CLI."""

from .json import format_json
from .table import (
    format_categories_table,
    format_contributors_table,
    format_dates_table,
    format_hits_table,
    format_shortlist_day_table,
    format_venues_table,
)

__all__ = [
    "format_json",
    "format_categories_table",
    "format_contributors_table",
    "format_dates_table",
    "format_hits_table",
    "format_shortlist_day_table",
    "format_venues_table",
]
