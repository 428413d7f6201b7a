"""Search and shortlist CLI commands."""

import click
from rich.console import Console

from festsearch.cli.config import get_setting
from festsearch.cli.formatters import (
    format_hits_table,
    format_json,
    format_shortlist_day_table,
)
from festsearch.cli.helpers import get_events, get_feed, paginate, utc_now_iso
from festsearch.search import EventFilter, SearchResults
from festsearch.search.engine import DEFAULT_PER_DAY
from festsearch.search.query import QUERY_MODES

DEFAULT_LIMIT = 50
MAX_LIMIT = 200
MAX_PER_DAY = 20


@click.command()
@click.argument("query", required=False)
@click.option(
    "--mode",
    "-m",
    type=click.Choice(sorted(QUERY_MODES), case_sensitive=False),
    default=None,
    help="How query tokens must match (default: any)",
)
@click.option("--date", help="Exact date, YYYY-MM-DD")
@click.option("--category", help="Partial match on category")
@click.option("--venue", help="Partial match on venue name")
@click.option("--type", "event_type", help="Exact event type, e.g. panel")
@click.option("--contributor", help="Partial match on contributor name")
@click.option(
    "--limit",
    "-n",
    type=click.IntRange(1, MAX_LIMIT, clamp=True),
    default=None,
    help="Maximum results to show",
)
@click.option(
    "--offset", type=click.IntRange(min=0), default=0, help="Skip first N results"
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.pass_context
def search(ctx: click.Context, query: str | None, **kwargs) -> None:
    """Search and filter events.

    QUERY is matched against event name, category, venue, type and
    contributors, with synonyms folded (llm → ai, devops → infrastructure).
    Without QUERY only the filters apply and feed order is kept.
    """
    console = ctx.obj.console
    config = ctx.obj.config

    mode = kwargs["mode"] or get_setting(config, "search", "mode", "any")
    limit = kwargs["limit"] or min(
        int(get_setting(config, "search", "limit", DEFAULT_LIMIT)), MAX_LIMIT
    )

    filters = EventFilter(
        date=kwargs["date"],
        category=kwargs["category"],
        venue=kwargs["venue"],
        event_type=kwargs["event_type"],
        contributor=kwargs["contributor"],
    )

    results = ctx.obj.engine.search(
        get_events(ctx), query=query, mode=mode, filters=filters
    )
    page = paginate(results.hits, limit, kwargs["offset"])

    if kwargs["output_format"] == "json":
        page["results"] = [hit.to_dict() for hit in page["results"]]
        click.echo(format_json(page))
        return

    _display_results(console, results, page, query)


@click.command()
@click.option("--topic", "-t", default=None, help="Topic preset or free-text topic")
@click.option(
    "--per-day",
    "-n",
    type=click.IntRange(1, MAX_PER_DAY, clamp=True),
    default=None,
    help=f"Results per date (default: {DEFAULT_PER_DAY})",
)
@click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)
@click.pass_context
def shortlist(
    ctx: click.Context, topic: str | None, per_day: int | None, output_format: str
) -> None:
    """Build a ranked shortlist of events for each festival day."""
    console = ctx.obj.console
    config = ctx.obj.config

    topic = topic or get_setting(config, "shortlist", "topic", None)
    per_day = per_day or min(
        int(get_setting(config, "shortlist", "per_day", DEFAULT_PER_DAY)), MAX_PER_DAY
    )

    feed = get_feed(ctx)
    result = ctx.obj.engine.shortlist(list(feed.events), topic=topic, per_day=per_day)

    if output_format == "json":
        data = result.to_dict()
        data["festival_year"] = feed.festival_year
        data["index_timestamp"] = feed.index_timestamp
        data["generated_at"] = utc_now_iso()
        click.echo(format_json(data))
        return

    console.print(
        f"\n[bold]Shortlist[/bold] [cyan]{result.topic}[/cyan] "
        f"(top {result.per_day} per day)\n"
    )
    if not result.days:
        console.print("[yellow]No dated events in feed[/yellow]")
        return
    for day in result.days:
        console.print(format_shortlist_day_table(day))


def _display_results(
    console: Console, results: SearchResults, page: dict, query: str | None
) -> None:
    """Display a page of search results."""
    if not page["count"]:
        if query:
            console.print(f"[yellow]No events found for '{query}'[/yellow]")
        else:
            console.print("[yellow]No events match the filters[/yellow]")
        return

    title = f"Results for '{query}' ({results.mode.value})" if query else "Events"
    console.print(format_hits_table(page["results"], title=title))

    first = page["offset"] + 1
    last = page["offset"] + page["count"]
    console.print(f"\n[dim]Showing {first}-{last} of {results.total}[/dim]")
