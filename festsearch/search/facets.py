"""Catalog facets over the event list.

Aggregations used to browse the schedule: events per date, venue and
category, contributor lookup, and event lookup by id.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from ..core.models import Event, Venue
from ..core.strings import contains, normalize
from .errors import QueryError


@dataclass(frozen=True)
class DateCount:
    """Number of events scheduled on a date."""

    date: str
    event_count: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "event_count": self.event_count,
            "slim_shard": f"/events/by-date/{self.date}.slim.json",
            "full_shard": f"/events/by-date/{self.date}.ndjson",
        }


@dataclass
class VenueCount:
    """Venue with the number of events held there."""

    venue: Venue
    event_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.venue.id,
            "name": self.venue.name,
            "lat": self.venue.lat,
            "lon": self.venue.lon,
            "event_count": self.event_count,
        }


@dataclass(frozen=True)
class CategoryCount:
    """Number of events in a category."""

    category: str
    event_count: int

    def to_dict(self) -> dict[str, Any]:
        return {"category": self.category, "event_count": self.event_count}


@dataclass
class ContributorAppearances:
    """A contributor and the events they appear in."""

    name: str
    type: str | None = None
    events: list[Event] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "events": [
                {
                    "event_id": event.id,
                    "name": event.name,
                    "date": event.date,
                    "start_time": event.start_time,
                    "venue": event.venue_name,
                }
                for event in self.events
            ],
        }


def date_counts(events: list[Event]) -> list[DateCount]:
    """Events per known date, ascending by date."""
    counts = Counter(event.date for event in events if event.has_known_date)
    return [DateCount(date, counts[date]) for date in sorted(counts)]


def venue_counts(events: list[Event], name: str | None = None) -> list[VenueCount]:
    """Events per venue, most used first.

    Args:
        events: Event list
        name: Optional substring filter on the venue name

    Returns:
        Venue counts grouped by venue id, ties in first-seen order
    """
    by_id: dict[str | None, VenueCount] = {}
    for event in events:
        if not event.venue_name:
            continue
        venue_count = by_id.setdefault(event.venue.id, VenueCount(event.venue))
        venue_count.event_count += 1

    venues = sorted(by_id.values(), key=lambda v: v.event_count, reverse=True)
    if name:
        venues = [v for v in venues if contains(v.venue.name, name)]
    return venues


def category_counts(events: list[Event]) -> list[CategoryCount]:
    """Events per non-empty category, most common first."""
    counts = Counter(event.category for event in events if event.category)
    ordered = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [CategoryCount(category, count) for category, count in ordered]


def find_contributors(events: list[Event], name: str) -> list[ContributorAppearances]:
    """Contributors whose name contains ``name``, most active first.

    Raises:
        QueryError: If name is blank
    """
    if not normalize(name):
        raise QueryError("Contributor name is required, e.g. 'carmen simon'")

    found: dict[str, ContributorAppearances] = {}
    for event in events:
        for contributor in event.contributors:
            if not contributor.name or not contains(contributor.name, name):
                continue
            appearances = found.setdefault(
                contributor.name,
                ContributorAppearances(contributor.name, contributor.type),
            )
            appearances.events.append(event)
    return sorted(found.values(), key=lambda c: len(c.events), reverse=True)


def get_event(events: list[Event], event_id: str) -> Event | None:
    """Find an event by id."""
    for event in events:
        if event.id == event_id:
            return event
    return None
