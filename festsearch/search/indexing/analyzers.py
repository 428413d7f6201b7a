"""Text analysis for event search.

This module provides tokenization and synonym canonicalization. Analysis is
deliberately shallow: lowercasing and whitespace collapse only, with no
stemming, stopwords or accent folding, so that field tokens and query
tokens stay directly comparable.
"""

import re
from collections.abc import Mapping
from types import MappingProxyType

from ...core.strings import normalize

_TOKEN = re.compile(r"[a-z0-9]+")

# (canonical term, surface variants)
SYNONYM_GROUPS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("ai", ("ai", "llm", "genai", "gpt", "ml")),
    (
        "developer",
        (
            "developer",
            "developers",
            "dev",
            "engineer",
            "engineering",
            "software",
            "coder",
            "coding",
            "programmer",
            "programming",
        ),
    ),
    (
        "tooling",
        (
            "tooling",
            "tool",
            "tools",
            "sdk",
            "framework",
            "frameworks",
            "platform",
            "platforms",
            "stack",
            "workflow",
            "workflows",
            "ide",
        ),
    ),
    ("agent", ("agent", "agents", "agentic", "assistant", "assistants")),
    ("api", ("api", "apis")),
    (
        "infrastructure",
        ("infrastructure", "infra", "devops", "mlops", "deployment", "deploy"),
    ),
)


def tokenize(text: str | None) -> list[str]:
    """Split text into lowercase alphanumeric tokens.

    Args:
        text: Input text, None is treated as empty

    Returns:
        Tokens in order of appearance

    Examples:
        >>> tokenize("GenAI & the Dev-Stack, 2026")
        ['genai', 'the', 'dev', 'stack', '2026']
        >>> tokenize("")
        []
    """
    return _TOKEN.findall(normalize(text))


class SynonymCanonicalizer:
    """Maps surface tokens to the canonical term of their synonym group.

    The group table is flattened into a read-only token lookup when the
    canonicalizer is built. Unknown tokens map to themselves.
    """

    def __init__(
        self,
        groups: tuple[tuple[str, tuple[str, ...]], ...] = SYNONYM_GROUPS,
    ):
        """Build the lookup from synonym groups.

        Args:
            groups: Pairs of canonical term and its surface variants
        """
        lookup: dict[str, str] = {}
        for canonical, variants in groups:
            lookup[canonical] = canonical
            for variant in variants:
                lookup[variant] = canonical
        self.lookup: Mapping[str, str] = MappingProxyType(lookup)

    def canonicalize(self, token: str) -> str:
        """Canonical form of a single token."""
        return self.lookup.get(token, token)

    def canonicalize_tokens(self, tokens: list[str]) -> list[str]:
        """Canonicalize each token, keeping order and duplicates."""
        return [self.lookup.get(token, token) for token in tokens]

    def canonicalize_text(self, text: str | None) -> str:
        """Tokenize, canonicalize and rejoin text with single spaces.

        Examples:
            >>> SynonymCanonicalizer().canonicalize_text("LLM Engineering Tools")
            'ai developer tooling'
        """
        return " ".join(self.canonicalize_tokens(tokenize(text)))


default_canonicalizer = SynonymCanonicalizer()


def canonicalize(token: str) -> str:
    """Canonicalize a token with the default synonym table."""
    return default_canonicalizer.canonicalize(token)


def canonicalize_text(text: str | None) -> str:
    """Canonicalize text with the default synonym table."""
    return default_canonicalizer.canonicalize_text(text)
