"""Event feed loading and snapshot caching."""

from .feed import FeedError, decode_feed, decode_ndjson, load_feed
from .snapshot import DEFAULT_TTL, SnapshotCache

__all__ = [
    "DEFAULT_TTL",
    "FeedError",
    "SnapshotCache",
    "decode_feed",
    "decode_ndjson",
    "load_feed",
]
