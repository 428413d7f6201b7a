"""Search engine for festival events."""

import logging
import time
from collections.abc import Mapping

from ..core.models import Event
from ..core.strings import normalize
from .filters import EventFilter
from .indexing.analyzers import SynonymCanonicalizer
from .indexing.fields import FieldWeights
from .query.matcher import QueryMatcher
from .query.modes import QueryMode, parse_mode
from .ranking import Scorer, order_results
from .results import SearchHit, SearchResults
from .shortlist import (
    DEFAULT_TOPIC,
    TOPIC_PRESETS,
    Shortlist,
    ShortlistRanker,
    TopicPreset,
    resolve_preset,
)

logger = logging.getLogger(__name__)

DEFAULT_PER_DAY = 5


class SearchEngine:
    """Search engine for festival events.

    Coordinates filtering, query matching, scoring and ordering over an
    event list supplied per call. The engine keeps no per-query state, so
    one instance can serve concurrent callers.
    """

    def __init__(
        self,
        canonicalizer: SynonymCanonicalizer | None = None,
        field_weights: FieldWeights | None = None,
        presets: Mapping[str, TopicPreset] | None = None,
    ):
        """Initialize search engine.

        Args:
            canonicalizer: Synonym table to use (default: built-in groups)
            field_weights: Field weights for scoring (default: built-in)
            presets: Extra shortlist topic presets, merged over the built-ins
        """
        self.matcher = QueryMatcher(
            canonicalizer=canonicalizer, scorer=Scorer(field_weights)
        )
        self.ranker = ShortlistRanker(self.matcher)
        self.presets = {**TOPIC_PRESETS, **(presets or {})}

    def search(
        self,
        events: list[Event],
        query: str | None = None,
        mode: str | QueryMode | None = QueryMode.ANY,
        filters: EventFilter | None = None,
    ) -> SearchResults:
        """Filter events and rank them against a free-text query.

        Args:
            events: Event list to search
            query: Optional query text; None or "" means filter only, while
                whitespace-only text matches every candidate with score 0
            mode: Match mode name or QueryMode
            filters: Optional structured filters applied before matching

        Returns:
            Hits ordered by relevance when queried, else in filter order

        Raises:
            QueryError: If mode is not a valid match mode
        """
        start_time = time.time()
        mode = parse_mode(mode)
        candidates = (filters or EventFilter()).apply(events)

        if not query:
            hits = [SearchHit(event) for event in candidates]
        else:
            hits = []
            for event in candidates:
                match = self.matcher.analyze(event, query, mode)
                if match.matches:
                    hits.append(SearchHit(event, match))
            hits = order_results(hits, lambda hit: (hit.event, hit.score))

        logger.debug(
            "Search %r (%s): %d of %d events in %.1f ms",
            query,
            mode.value,
            len(hits),
            len(events),
            (time.time() - start_time) * 1000,
        )
        return SearchResults(hits=hits, query=query, mode=mode)

    def shortlist(
        self,
        events: list[Event],
        topic: str | None = None,
        per_day: int = DEFAULT_PER_DAY,
    ) -> Shortlist:
        """Build per-day shortlists for a topic.

        Args:
            events: Event list
            topic: Topic slug or free text (default: ai-developer-tooling)
            per_day: Maximum results per date

        Returns:
            Shortlist with one day per known date
        """
        preset = resolve_preset(topic, self.presets)
        days = self.ranker.rank(events, preset, per_day)
        logger.debug(
            "Shortlist %r: %d days, %d results",
            preset.slug,
            len(days),
            sum(day.count for day in days),
        )
        return Shortlist(
            topic=preset.slug,
            topic_label=normalize(topic or DEFAULT_TOPIC),
            per_day=per_day,
            days=tuple(days),
        )
