"""Per-event search index construction."""

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ...core.models import Event
from ...core.strings import normalize
from .analyzers import SynonymCanonicalizer, default_canonicalizer, tokenize
from .fields import SearchField


@dataclass(frozen=True)
class SearchIndex:
    """Searchable view of one event.

    Attributes:
        fields: Normalized text per field
        tokens_by_field: Canonical token set per field
        raw_blob: Normalized concatenation of all field texts
        canonical_blob: Same concatenation with every token canonicalized
    """

    fields: Mapping[SearchField, str]
    tokens_by_field: Mapping[SearchField, frozenset[str]]
    raw_blob: str
    canonical_blob: str

    def fields_containing(self, token: str) -> list[SearchField]:
        """Fields whose token set contains ``token``, in field order."""
        return [
            field for field, tokens in self.tokens_by_field.items() if token in tokens
        ]


class EventIndexer:
    """Builds a SearchIndex for an event.

    Indexing is a pure function of the event: building twice from the same
    event yields equal indexes.
    """

    def __init__(self, canonicalizer: SynonymCanonicalizer | None = None):
        self.canonicalizer = canonicalizer or default_canonicalizer

    def build_index(self, event: Event) -> SearchIndex:
        """Index one event.

        Args:
            event: Event to index

        Returns:
            Index with per-field canonical token sets and search blobs
        """
        fields = {field: normalize(field.extract(event)) for field in SearchField}

        tokens_by_field = {
            field: frozenset(self.canonicalizer.canonicalize_tokens(tokenize(text)))
            for field, text in fields.items()
        }

        raw_blob = normalize(" ".join(fields.values()))
        canonical_blob = normalize(
            " ".join(self.canonicalizer.canonicalize_text(t) for t in fields.values())
        )

        return SearchIndex(
            fields=MappingProxyType(fields),
            tokens_by_field=MappingProxyType(tokens_by_field),
            raw_blob=raw_blob,
            canonical_blob=canonical_blob,
        )


_default_indexer = EventIndexer()


def build_index(event: Event) -> SearchIndex:
    """Index an event with the default synonym table."""
    return _default_indexer.build_index(event)
