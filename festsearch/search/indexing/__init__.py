"""Indexing subsystem for search."""

from .analyzers import (
    SYNONYM_GROUPS,
    SynonymCanonicalizer,
    canonicalize,
    canonicalize_text,
    default_canonicalizer,
    tokenize,
)
from .fields import DEFAULT_FIELD_WEIGHT, FIELD_WEIGHTS, FieldWeights, SearchField
from .indexer import EventIndexer, SearchIndex, build_index

__all__ = [
    "DEFAULT_FIELD_WEIGHT",
    "FIELD_WEIGHTS",
    "SYNONYM_GROUPS",
    "EventIndexer",
    "FieldWeights",
    "SearchField",
    "SearchIndex",
    "SynonymCanonicalizer",
    "build_index",
    "canonicalize",
    "canonicalize_text",
    "default_canonicalizer",
    "tokenize",
]
