"""String normalization helpers shared by search and filtering."""

import re

_WHITESPACE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Lowercase text and collapse runs of whitespace.

    Args:
        text: Input text, None is treated as empty

    Returns:
        Lowercased text with single spaces and no surrounding whitespace

    Examples:
        >>> normalize("  AI   and\\tthe Future ")
        'ai and the future'
        >>> normalize(None)
        ''
    """
    if not text:
        return ""
    return _WHITESPACE.sub(" ", str(text).lower()).strip()


def contains(haystack: str | None, needle: str | None) -> bool:
    """Case and whitespace insensitive substring test.

    An empty needle matches everything.
    """
    if not needle:
        return True
    return normalize(needle) in normalize(haystack)
