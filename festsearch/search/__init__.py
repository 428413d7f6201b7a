"""Search functionality for festival events.

This module provides free-text search with synonym canonicalization,
field-weighted relevance scoring, deterministic result ordering, daily
shortlists and catalog facets over an in-memory event list.

Main components:
- SearchEngine: Search and shortlist orchestrator
- QueryMatcher: any / all / phrase matching against per-event indexes
- Scorer: Field-weighted token overlap scoring
- ShortlistRanker: Per-date ranking with primary/fallback queries
"""

from .engine import SearchEngine
from .errors import QueryError, SearchError
from .facets import (
    CategoryCount,
    ContributorAppearances,
    DateCount,
    VenueCount,
    category_counts,
    date_counts,
    find_contributors,
    get_event,
    venue_counts,
)
from .filters import EventFilter
from .indexing import (
    FieldWeights,
    SearchField,
    SearchIndex,
    SynonymCanonicalizer,
    build_index,
    canonicalize,
    canonicalize_text,
    tokenize,
)
from .query import MatchResult, QueryMatcher, QueryMode, evaluate, parse_mode
from .ranking import Scorer, TokenScore, order_results, result_sort_key
from .results import SearchHit, SearchResults
from .shortlist import (
    DEFAULT_TOPIC,
    TOPIC_PRESETS,
    Shortlist,
    ShortlistDay,
    ShortlistItem,
    ShortlistRanker,
    TopicPreset,
    resolve_preset,
    shortlist_boost,
)

__all__ = [
    # Main classes
    "SearchEngine",
    "SearchError",
    "QueryError",
    # Analysis and indexing
    "tokenize",
    "canonicalize",
    "canonicalize_text",
    "SynonymCanonicalizer",
    "SearchField",
    "FieldWeights",
    "SearchIndex",
    "build_index",
    # Matching and ranking
    "QueryMode",
    "parse_mode",
    "MatchResult",
    "QueryMatcher",
    "evaluate",
    "Scorer",
    "TokenScore",
    "result_sort_key",
    "order_results",
    # Results
    "EventFilter",
    "SearchHit",
    "SearchResults",
    # Shortlist
    "DEFAULT_TOPIC",
    "TOPIC_PRESETS",
    "TopicPreset",
    "resolve_preset",
    "shortlist_boost",
    "Shortlist",
    "ShortlistDay",
    "ShortlistItem",
    "ShortlistRanker",
    # Facets
    "DateCount",
    "VenueCount",
    "CategoryCount",
    "ContributorAppearances",
    "date_counts",
    "venue_counts",
    "category_counts",
    "find_contributors",
    "get_event",
]
