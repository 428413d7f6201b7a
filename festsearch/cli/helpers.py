"""Shared helpers for CLI commands."""

from datetime import datetime, timezone
from typing import Any

import click

from festsearch.core.models import Event, Feed


def get_feed(ctx: click.Context) -> Feed:
    """Current feed snapshot from the CLI context."""
    if ctx.obj.snapshots is None:
        raise click.UsageError(
            "No event feed configured. Pass --feed, set FESTSEARCH_FEED "
            "or add 'feed' to the config file."
        )
    return ctx.obj.snapshots.get()


def get_events(ctx: click.Context) -> list[Event]:
    """Current event list from the CLI context."""
    return list(get_feed(ctx).events)


def paginate(items: list, limit: int, offset: int = 0) -> dict[str, Any]:
    """Slice a result list into a page envelope.

    Args:
        items: Full ordered result list
        limit: Page size
        offset: Number of items to skip

    Returns:
        Dict with total, offset, limit, count and results
    """
    page = items[offset : offset + limit]
    return {
        "total": len(items),
        "offset": offset,
        "limit": limit,
        "count": len(page),
        "results": page,
    }


def utc_now_iso() -> str:
    """Current UTC time as ISO-8601 with millisecond precision."""
    return (
        datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace(
            "+00:00", "Z"
        )
    )
