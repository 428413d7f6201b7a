"""Search result types."""

from dataclasses import dataclass, field
from typing import Any

from ..core.models import Event
from .query.matcher import MatchResult
from .query.modes import QueryMode


@dataclass(frozen=True)
class SearchHit:
    """An event returned by search, with its match record when queried."""

    event: Event
    match: MatchResult | None = None

    @property
    def score(self) -> int:
        return self.match.score if self.match else 0

    def to_dict(self) -> dict[str, Any]:
        """Event wire dict, augmented with match details when present."""
        data = self.event.to_dict()
        if self.match is not None:
            data.update(self.match.to_dict())
        return data


@dataclass
class SearchResults:
    """Ordered search hits for one query."""

    hits: list[SearchHit] = field(default_factory=list)
    query: str | None = None
    mode: QueryMode = QueryMode.ANY

    @property
    def total(self) -> int:
        return len(self.hits)

    def __len__(self) -> int:
        return len(self.hits)

    def __iter__(self):
        return iter(self.hits)

    def to_list(self) -> list[dict[str, Any]]:
        return [hit.to_dict() for hit in self.hits]

