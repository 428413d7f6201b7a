"""Relevance scoring and result ordering.

Scoring is additive over field hits: every query token found in a field's
token set contributes that field's weight, and every query token found in
at least one field adds a flat term bonus of 1. Match modes layer their own
flat bonuses on top (see ``query.matcher``).

Ordering is a total order shared by plain search and the shortlist ranker:
score descending, then start time ascending (absent start times first),
then event id ascending.
"""

from dataclasses import dataclass

from ..core.models import Event
from .indexing.fields import FieldWeights
from .indexing.indexer import SearchIndex

TERM_BONUS = 1


@dataclass(frozen=True)
class TokenScore:
    """Outcome of scanning query tokens against an index."""

    score: int
    matched_terms: tuple[str, ...]
    matched_fields: tuple[str, ...]


class Scorer:
    """Field-weighted token overlap scorer."""

    def __init__(self, field_weights: FieldWeights | None = None):
        """Initialize scorer.

        Args:
            field_weights: Field-specific weights
        """
        self.field_weights = field_weights or FieldWeights()

    def score(self, index: SearchIndex, query_tokens: list[str]) -> TokenScore:
        """Score de-duplicated canonical query tokens against an index.

        Args:
            index: Event search index
            query_tokens: Canonical query tokens, unique, in query order

        Returns:
            Score with matched terms in query order and matched field names
            sorted lexicographically
        """
        score = 0
        matched_terms: list[str] = []
        matched_fields: set[str] = set()

        for token in query_tokens:
            hit_fields = index.fields_containing(token)
            for field in hit_fields:
                score += self.field_weights.get_weight(field)
                matched_fields.add(field.value)
            if hit_fields and token not in matched_terms:
                matched_terms.append(token)

        score += TERM_BONUS * len(matched_terms)

        return TokenScore(
            score=score,
            matched_terms=tuple(matched_terms),
            matched_fields=tuple(sorted(matched_fields)),
        )


def result_sort_key(event: Event, score: float) -> tuple[float, str, str]:
    """Sort key for display order of a matched event."""
    return (-score, event.start_time or "", event.id or "")


def order_results(items: list, key_fn) -> list:
    """Sort items by the shared result order.

    Args:
        items: Items to order
        key_fn: Maps an item to its ``(event, score)`` pair

    Returns:
        New list in display order
    """
    return sorted(items, key=lambda item: result_sort_key(*key_fn(item)))
