"""Query modes and matching."""

from .matcher import (
    ALL_MODE_BONUS,
    NO_MATCH,
    PASS_THROUGH,
    PHRASE_BONUS,
    MatchResult,
    QueryMatcher,
    evaluate,
)
from .modes import DEFAULT_MODE, QUERY_MODES, QueryMode, parse_mode

__all__ = [
    "ALL_MODE_BONUS",
    "DEFAULT_MODE",
    "NO_MATCH",
    "PASS_THROUGH",
    "PHRASE_BONUS",
    "QUERY_MODES",
    "MatchResult",
    "QueryMatcher",
    "QueryMode",
    "evaluate",
    "parse_mode",
]
