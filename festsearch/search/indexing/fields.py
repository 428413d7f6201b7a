"""Searchable event fields and their scoring weights."""

from enum import Enum
from types import MappingProxyType

from ...core.models import Event

DEFAULT_FIELD_WEIGHT = 1


class SearchField(str, Enum):
    """Event fields indexed for free-text search.

    Declaration order is the order fields are concatenated into the
    search blobs.
    """

    NAME = "name"
    CATEGORY = "category"
    VENUE = "venue"
    EVENT_TYPE = "event_type"
    CONTRIBUTORS = "contributors"

    def extract(self, event: Event) -> str:
        """Raw text of this field for an event."""
        if self is SearchField.NAME:
            return event.name or ""
        if self is SearchField.CATEGORY:
            return event.category or ""
        if self is SearchField.VENUE:
            return event.venue_name or ""
        if self is SearchField.EVENT_TYPE:
            return event.event_type or ""
        return " ".join(event.contributor_names)


FIELD_WEIGHTS = MappingProxyType(
    {
        SearchField.NAME: 5,
        SearchField.CONTRIBUTORS: 4,
        SearchField.CATEGORY: 2,
        SearchField.VENUE: 2,
        SearchField.EVENT_TYPE: 2,
    }
)


class FieldWeights:
    """Per-field score contribution for a query token hit."""

    def __init__(self, weights: dict[SearchField, int] | None = None):
        """Initialize field weights.

        Args:
            weights: Optional overrides keyed by field
        """
        self.weights = dict(FIELD_WEIGHTS)
        if weights:
            self.weights.update(weights)

    def get_weight(self, field: SearchField) -> int:
        """Get weight for a field."""
        return self.weights.get(field, DEFAULT_FIELD_WEIGHT)
