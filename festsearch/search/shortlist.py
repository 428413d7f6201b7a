"""Daily shortlist ranking.

For each calendar date in the event list the ranker runs a topic's primary
query over that day's events, falls back to the topic's fallback query once
if nothing matched, adds a ranking-term boost to every match score, and
keeps the top ``per_day`` events.

Boost per ranking term: +3 when the term occurs in the event name, else +1
when it occurs anywhere in name, category, type, venue or contributor
names. Panels get a flat +2.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from ..core.models import Event
from ..core.strings import normalize
from .errors import QueryError
from .query.matcher import MatchResult, QueryMatcher
from .query.modes import QueryMode, parse_mode
from .ranking import result_sort_key

logger = logging.getLogger(__name__)

DEFAULT_TOPIC = "ai-developer-tooling"
DEFAULT_FALLBACK_QUERY = "AI"

NAME_TERM_BOOST = 3
BLOB_TERM_BOOST = 1
PANEL_BOOST = 2
PANEL_EVENT_TYPE = "panel"

GENERIC_RANKING_TERMS = (
    "developer",
    "tooling",
    "agent",
    "api",
    "platform",
    "code",
    "llm",
    "infrastructure",
)


@dataclass(frozen=True)
class TopicPreset:
    """Query strategy and ranking terms for a shortlist topic."""

    slug: str
    primary_query: str
    primary_mode: QueryMode = QueryMode.ANY
    fallback_query: str | None = None
    fallback_mode: QueryMode = QueryMode.ANY
    ranking_terms: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, slug: str, data: Mapping[str, Any]) -> "TopicPreset":
        """Build a preset from configuration data.

        Raises:
            QueryError: If the primary query is missing or a mode is invalid
        """
        primary_query = data.get("primary_query")
        if not primary_query:
            raise QueryError(f"Topic {slug!r} has no primary_query")
        return cls(
            slug=slug,
            primary_query=str(primary_query),
            primary_mode=parse_mode(data.get("primary_mode")),
            fallback_query=data.get("fallback_query"),
            fallback_mode=parse_mode(data.get("fallback_mode")),
            ranking_terms=tuple(str(t) for t in data.get("ranking_terms") or ()),
        )

    @classmethod
    def generic(cls, topic: str) -> "TopicPreset":
        """Preset for a topic with no configured strategy."""
        return cls(
            slug=topic or "custom",
            primary_query=(topic or "ai").replace("-", " "),
            fallback_query=DEFAULT_FALLBACK_QUERY,
            ranking_terms=GENERIC_RANKING_TERMS,
        )


TOPIC_PRESETS: Mapping[str, TopicPreset] = MappingProxyType(
    {
        DEFAULT_TOPIC: TopicPreset(
            slug=DEFAULT_TOPIC,
            primary_query="AI developer tooling",
            fallback_query=DEFAULT_FALLBACK_QUERY,
            ranking_terms=(
                "developer",
                "tooling",
                "agent",
                "api",
                "platform",
                "engineering",
                "software",
                "code",
                "coding",
                "llm",
                "infrastructure",
                "devops",
                "mlops",
                "sdk",
                "framework",
            ),
        ),
    }
)


def resolve_preset(
    topic: str | None,
    presets: Mapping[str, TopicPreset] = TOPIC_PRESETS,
) -> TopicPreset:
    """Look up a topic preset, degrading to a generic one.

    Args:
        topic: Topic slug or free text; None selects the default topic
        presets: Known presets keyed by slug

    Returns:
        The configured preset, or a generic preset built from the topic
    """
    slug = normalize(topic or DEFAULT_TOPIC)
    preset = presets.get(slug)
    if preset is None:
        logger.debug("No preset for topic %r, using generic query", slug)
        return TopicPreset.generic(slug)
    return preset


def shortlist_boost(event: Event, ranking_terms: Iterable[str]) -> int:
    """Secondary ranking boost for an event.

    Args:
        event: Candidate event
        ranking_terms: Terms rewarded when present in the event text

    Returns:
        Boost to add to the match score
    """
    name = normalize(event.name)
    blob = normalize(
        " ".join(
            [
                event.name or "",
                event.category or "",
                event.event_type or "",
                event.venue_name or "",
                *event.contributor_names,
            ]
        )
    )

    boost = 0
    for term in ranking_terms:
        term = normalize(term)
        if not term:
            continue
        if term in name:
            boost += NAME_TERM_BOOST
        elif term in blob:
            boost += BLOB_TERM_BOOST

    if event.event_type == PANEL_EVENT_TYPE:
        boost += PANEL_BOOST
    return boost


@dataclass(frozen=True)
class ShortlistItem:
    """A ranked shortlist entry."""

    event: Event
    match: MatchResult
    rank_score: int

    def to_dict(self) -> dict[str, Any]:
        event = self.event
        return {
            "event_id": event.id,
            "name": event.name,
            "date": event.date,
            "start_time": event.start_time,
            "end_time": event.end_time,
            "event_type": event.event_type,
            "category": event.category,
            "venue": event.to_dict()["venue"],
            "official_url": event.official_url,
            "score": self.rank_score,
            "matched_terms": list(self.match.matched_terms),
            "matched_fields": list(self.match.matched_fields),
        }


@dataclass(frozen=True)
class ShortlistDay:
    """Ranked shortlist for one calendar date.

    Attributes:
        date: Bucket date, YYYY-MM-DD
        query_used: Query that produced the candidates (primary or fallback)
        mode_used: Mode that query ran with
        total_candidates: Matching events before truncation
        results: Top ranked items
    """

    date: str
    query_used: str
    mode_used: QueryMode
    total_candidates: int
    results: tuple[ShortlistItem, ...] = ()

    @property
    def count(self) -> int:
        return len(self.results)

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date,
            "query_used": self.query_used,
            "q_mode_used": self.mode_used.value,
            "total_candidates": self.total_candidates,
            "count": self.count,
            "results": [item.to_dict() for item in self.results],
        }


@dataclass(frozen=True)
class Shortlist:
    """Per-day shortlists for one topic."""

    topic: str
    topic_label: str
    per_day: int
    days: tuple[ShortlistDay, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "topic": self.topic,
            "topic_label": self.topic_label,
            "per_day": self.per_day,
            "days": [day.to_dict() for day in self.days],
        }


def bucket_dates(events: Iterable[Event]) -> list[str]:
    """Distinct known dates in ascending order."""
    return sorted({event.date for event in events if event.has_known_date})


class ShortlistRanker:
    """Builds per-day shortlists from an event list."""

    def __init__(self, matcher: QueryMatcher | None = None):
        self.matcher = matcher or QueryMatcher()

    def rank(
        self, events: list[Event], preset: TopicPreset, per_day: int
    ) -> list[ShortlistDay]:
        """Rank every date bucket.

        Args:
            events: Full event list
            preset: Topic strategy
            per_day: Maximum results kept per date

        Returns:
            One ShortlistDay per known date, ascending

        Raises:
            ValueError: If per_day is less than 1
        """
        if per_day < 1:
            raise ValueError(f"per_day must be at least 1, got {per_day}")

        days = []
        for date in bucket_dates(events):
            bucket = [event for event in events if event.date == date]
            days.append(self.rank_day(date, bucket, preset, per_day))
        return days

    def rank_day(
        self,
        date: str,
        bucket: list[Event],
        preset: TopicPreset,
        per_day: int,
    ) -> ShortlistDay:
        """Rank one date bucket with primary/fallback query selection."""
        query_used = preset.primary_query
        mode_used = preset.primary_mode
        hits = self._match(bucket, query_used, mode_used)

        if not hits and preset.fallback_query:
            logger.debug(
                "No matches for %r on %s, falling back to %r",
                preset.primary_query,
                date,
                preset.fallback_query,
            )
            query_used = preset.fallback_query
            mode_used = preset.fallback_mode
            hits = self._match(bucket, query_used, mode_used)

        ranked = sorted(
            (
                ShortlistItem(
                    event=event,
                    match=match,
                    rank_score=match.score
                    + shortlist_boost(event, preset.ranking_terms),
                )
                for event, match in hits
            ),
            key=lambda item: (
                -item.rank_score,
                *result_sort_key(item.event, item.match.score),
            ),
        )

        return ShortlistDay(
            date=date,
            query_used=query_used,
            mode_used=mode_used,
            total_candidates=len(ranked),
            results=tuple(ranked[:per_day]),
        )

    def _match(
        self, events: list[Event], query: str, mode: QueryMode
    ) -> list[tuple[Event, MatchResult]]:
        hits = []
        for event in events:
            match = self.matcher.analyze(event, query, mode)
            if match.matches:
                hits.append((event, match))
        return hits
