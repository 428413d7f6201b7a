"""Core domain models and text helpers for festival events."""

from festsearch.core.models import (
    DEFAULT_FESTIVAL_YEAR,
    UNKNOWN_DATE,
    Contributor,
    Event,
    Feed,
    Venue,
)
from festsearch.core.strings import contains, normalize

__all__ = [
    "DEFAULT_FESTIVAL_YEAR",
    "UNKNOWN_DATE",
    "Contributor",
    "Event",
    "Feed",
    "Venue",
    "contains",
    "normalize",
]
