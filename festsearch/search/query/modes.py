"""Query match modes."""

from enum import Enum

from ...core.strings import normalize
from ..errors import QueryError


class QueryMode(str, Enum):
    """How query tokens must be present for an event to match."""

    ANY = "any"
    ALL = "all"
    PHRASE = "phrase"


DEFAULT_MODE = QueryMode.ANY
QUERY_MODES = frozenset(mode.value for mode in QueryMode)


def parse_mode(value: str | QueryMode | None) -> QueryMode:
    """Validate a caller-supplied mode.

    Args:
        value: Mode name (case and surrounding whitespace ignored), a
            QueryMode, or None for the default

    Returns:
        The corresponding QueryMode

    Raises:
        QueryError: If the mode is not one of any, all, phrase
    """
    if isinstance(value, QueryMode):
        return value

    name = normalize(value) or DEFAULT_MODE.value
    try:
        return QueryMode(name)
    except ValueError:
        raise QueryError(
            f"Invalid q_mode {value!r}. Use one of: any, all, phrase"
        ) from None
