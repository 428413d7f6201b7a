"""Query evaluation against per-event search indexes.

Three match modes are supported:

- any: at least one query token appears in some field
- all: every distinct query token appears in some field (+3 on success)
- phrase: the normalized query is a substring of the raw blob, or its
  canonicalized form is a substring of the canonical blob (+4 on success)

A blank query matches every event with a zero score so that filter-only
searches share the same code path.
"""

from dataclasses import dataclass

from ...core.models import Event
from ...core.strings import normalize
from ..indexing.analyzers import SynonymCanonicalizer, default_canonicalizer, tokenize
from ..indexing.indexer import EventIndexer, SearchIndex
from ..ranking import Scorer
from .modes import QueryMode

ALL_MODE_BONUS = 3
PHRASE_BONUS = 4


@dataclass(frozen=True)
class MatchResult:
    """Outcome of evaluating one query against one event."""

    matches: bool
    score: int = 0
    matched_terms: tuple[str, ...] = ()
    matched_fields: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "matched_terms": list(self.matched_terms),
            "matched_fields": list(self.matched_fields),
        }


NO_MATCH = MatchResult(matches=False)
PASS_THROUGH = MatchResult(matches=True)


class QueryMatcher:
    """Evaluates query text against search indexes."""

    def __init__(
        self,
        canonicalizer: SynonymCanonicalizer | None = None,
        scorer: Scorer | None = None,
    ):
        self.canonicalizer = canonicalizer or default_canonicalizer
        self.scorer = scorer or Scorer()
        self.indexer = EventIndexer(self.canonicalizer)

    def query_tokens(self, query: str) -> list[str]:
        """Canonical query tokens, de-duplicated in first-occurrence order."""
        tokens = self.canonicalizer.canonicalize_tokens(tokenize(query))
        return list(dict.fromkeys(tokens))

    def evaluate(self, index: SearchIndex, query: str, mode: QueryMode) -> MatchResult:
        """Evaluate a query against an index.

        Args:
            index: Event search index
            query: Raw query text
            mode: Validated match mode

        Returns:
            Match outcome with score and contributing terms and fields
        """
        normalized = normalize(query)
        if not normalized:
            return PASS_THROUGH

        mode = QueryMode(mode)
        tokens = self.query_tokens(normalized)

        if mode is QueryMode.PHRASE:
            if not self._phrase_matches(index, normalized):
                return NO_MATCH
            scored = self.scorer.score(index, tokens)
            return MatchResult(
                matches=True,
                score=scored.score + PHRASE_BONUS,
                matched_terms=scored.matched_terms,
                matched_fields=scored.matched_fields,
            )

        # Punctuation-only queries have no tokens to require
        if not tokens:
            return NO_MATCH

        scored = self.scorer.score(index, tokens)

        if mode is QueryMode.ALL:
            if len(scored.matched_terms) != len(tokens):
                return NO_MATCH
            return MatchResult(
                matches=True,
                score=scored.score + ALL_MODE_BONUS,
                matched_terms=scored.matched_terms,
                matched_fields=scored.matched_fields,
            )

        if not scored.matched_terms:
            return NO_MATCH
        return MatchResult(
            matches=True,
            score=scored.score,
            matched_terms=scored.matched_terms,
            matched_fields=scored.matched_fields,
        )

    def analyze(self, event: Event, query: str | None, mode: QueryMode) -> MatchResult:
        """Index an event and evaluate a query against it.

        Blank queries pass through without building an index.
        """
        if not normalize(query):
            return PASS_THROUGH
        return self.evaluate(self.indexer.build_index(event), query, mode)

    def _phrase_matches(self, index: SearchIndex, normalized_query: str) -> bool:
        if normalized_query in index.raw_blob:
            return True
        canonical_query = self.canonicalizer.canonicalize_text(normalized_query)
        return bool(canonical_query) and canonical_query in index.canonical_blob


_default_matcher = QueryMatcher()


def evaluate(index: SearchIndex, query: str, mode: QueryMode) -> MatchResult:
    """Evaluate a query with the default synonym table and weights."""
    return _default_matcher.evaluate(index, query, mode)
