"""Schedule feed loading.

Accepts the formats published by the schedule pipeline:

- JSON object with an ``events`` array and feed metadata
- bare JSON array of events
- NDJSON, one event per line
"""

import logging
from pathlib import Path

import msgspec

from ..core.models import Event, Feed

logger = logging.getLogger(__name__)


class FeedError(Exception):
    """Feed could not be read or decoded."""


def decode_feed(data: bytes | str) -> Feed:
    """Decode a JSON feed document.

    Args:
        data: JSON text of a feed object or an event array

    Returns:
        Decoded feed

    Raises:
        FeedError: If the document is not valid JSON or does not match the
            event schema
    """
    try:
        raw = msgspec.json.decode(data)
        if isinstance(raw, list):
            return Feed(events=msgspec.convert(raw, tuple[Event, ...]))
        if isinstance(raw, dict):
            return msgspec.convert(raw, Feed)
    except (msgspec.DecodeError, msgspec.ValidationError) as e:
        raise FeedError(f"Invalid feed: {e}") from e
    raise FeedError("Invalid feed: expected an array or an object with 'events'")


def decode_ndjson(data: bytes | str) -> Feed:
    """Decode a newline-delimited event stream.

    Raises:
        FeedError: If any non-blank line is not a valid event
    """
    if isinstance(data, bytes):
        try:
            data = data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FeedError(f"Invalid feed: {e}") from e

    decoder = msgspec.json.Decoder(Event)
    events = []
    for lineno, line in enumerate(data.splitlines(), start=1):
        if not line.strip():
            continue
        try:
            events.append(decoder.decode(line))
        except (msgspec.DecodeError, msgspec.ValidationError) as e:
            raise FeedError(f"Invalid event on line {lineno}: {e}") from e
    return Feed(events=tuple(events))


def load_feed(path: Path) -> Feed:
    """Load a feed file, choosing NDJSON by the ``.ndjson`` suffix.

    Raises:
        FeedError: If the file cannot be read or decoded
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FeedError(f"Failed to read feed {path}: {e}") from e

    if path.suffix == ".ndjson":
        feed = decode_ndjson(data)
    else:
        feed = decode_feed(data)

    logger.info("Loaded %d events from %s", len(feed.events), path)
    return feed
