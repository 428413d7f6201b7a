"""Structured event filters applied before free-text matching."""

from dataclasses import dataclass

from ..core.models import Event
from ..core.strings import contains


@dataclass(frozen=True)
class EventFilter:
    """Equality and substring filters over event attributes.

    ``date`` and ``event_type`` must match exactly. ``category``, ``venue``
    and ``contributor`` are case-insensitive substring tests; ``contributor``
    passes when any contributor name contains it. Unset or empty values do
    not filter.
    """

    date: str | None = None
    category: str | None = None
    venue: str | None = None
    event_type: str | None = None
    contributor: str | None = None

    @property
    def is_empty(self) -> bool:
        return not any(
            (self.date, self.category, self.venue, self.event_type, self.contributor)
        )

    def matches(self, event: Event) -> bool:
        """Check whether an event passes every set filter."""
        if self.date and event.date != self.date:
            return False
        if self.event_type and event.event_type != self.event_type:
            return False
        if self.category and not contains(event.category, self.category):
            return False
        if self.venue and not contains(event.venue_name, self.venue):
            return False
        if self.contributor and not any(
            contains(name, self.contributor) for name in event.contributor_names
        ):
            return False
        return True

    def apply(self, events) -> list[Event]:
        """Events passing the filter, in input order."""
        if self.is_empty:
            return list(events)
        return [event for event in events if self.matches(event)]
