"""Core data models for festival events.

This module defines the event records consumed by the search engine. The
records mirror the slim schedule feed: a handful of display fields plus the
venue and contributor blocks that search and ranking read.

Key components:
- Event: Immutable event record from the schedule feed
- Venue: Where an event takes place
- Contributor: Speaker, performer or other named participant
"""

import msgspec

UNKNOWN_DATE = "unknown"
DEFAULT_FESTIVAL_YEAR = 2026


class Contributor(msgspec.Struct, frozen=True, kw_only=True):
    """Named participant of an event."""

    name: str | None = None
    type: str | None = None


class Venue(msgspec.Struct, frozen=True, kw_only=True):
    """Event venue with optional coordinates."""

    id: str | None = None
    name: str | None = None
    lat: float | None = None
    lon: float | None = None


class Event(msgspec.Struct, frozen=True, kw_only=True):
    """Immutable festival event.

    The feed calls the identifier ``event_id``; it is exposed as ``id``.
    Text fields may be null in the feed and are treated as empty strings
    by search. ``start_time`` and ``end_time`` are ISO-8601 strings, absent
    while the schedule is still TBD. ``date`` is ``YYYY-MM-DD`` or the
    ``"unknown"`` sentinel.
    """

    id: str = msgspec.field(name="event_id")
    name: str | None = None
    date: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    event_type: str | None = None
    format: str | None = None
    category: str | None = None
    reservable: bool | None = None
    official_url: str | None = None
    status: str | None = None
    venue: Venue | None = None
    contributors: tuple[Contributor, ...] = ()

    @property
    def venue_name(self) -> str | None:
        """Display name of the venue, if any."""
        return self.venue.name if self.venue else None

    @property
    def contributor_names(self) -> tuple[str, ...]:
        """Contributor names in feed order, missing names as empty strings."""
        return tuple(c.name or "" for c in self.contributors)

    @property
    def has_known_date(self) -> bool:
        """Whether the event is scheduled on a concrete calendar date."""
        return bool(self.date) and self.date != UNKNOWN_DATE

    def to_dict(self) -> dict:
        """Convert to the feed's wire representation."""
        return msgspec.to_builtins(self)


class Feed(msgspec.Struct, kw_only=True):
    """Schedule feed envelope as published by the data pipeline."""

    events: tuple[Event, ...] = ()
    schema_version: str | None = None
    generated_at: str | None = None
    festival_year: int | None = None
    event_count: int | None = None

    def __post_init__(self):
        if not self.festival_year:
            self.festival_year = DEFAULT_FESTIVAL_YEAR
        if self.event_count is None:
            self.event_count = len(self.events)

    @property
    def index_timestamp(self) -> str | None:
        """When the underlying index was generated."""
        return self.generated_at
