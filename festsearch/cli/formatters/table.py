"""Table formatters for Rich console output.

Provides table formatting for search hits, shortlist days and catalog
facets.
"""

from rich.box import ROUNDED
from rich.table import Table

from festsearch.search.facets import (
    CategoryCount,
    ContributorAppearances,
    DateCount,
    VenueCount,
)
from festsearch.search.results import SearchHit
from festsearch.search.shortlist import ShortlistDay


def _table(title: str | None = None) -> Table:
    return Table(
        title=title,
        box=ROUNDED,
        show_header=True,
        header_style="bold cyan",
        title_style="bold",
        row_styles=["none", "dim"],
    )


def _time_label(start_time: str | None) -> str:
    """HH:MM from an ISO-8601 timestamp, TBD when absent."""
    if not start_time:
        return "[dim]TBD[/dim]"
    _, _, clock = start_time.partition("T")
    return clock[:5] or start_time


def format_hits_table(
    hits: list[SearchHit], title: str | None = None, show_index: bool = True
) -> Table:
    """Format search hits as a Rich table.

    Args:
        hits: Hits to display
        title: Table title
        show_index: Whether to show row numbers

    Returns:
        Rich Table object
    """
    table = _table(title)
    scored = any(hit.match is not None for hit in hits)

    if show_index:
        table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Date", style="yellow", width=10)
    table.add_column("Time", width=5)
    table.add_column("Name")
    table.add_column("Venue", overflow="ellipsis")
    if scored:
        table.add_column("Score", justify="right", style="green")
        table.add_column("Matched", style="magenta")

    for i, hit in enumerate(hits, start=1):
        event = hit.event
        row = []
        if show_index:
            row.append(str(i))
        row.extend(
            [
                event.id,
                event.date or "[dim]-[/dim]",
                _time_label(event.start_time),
                event.name or "[dim]Untitled[/dim]",
                event.venue_name or "[dim]-[/dim]",
            ]
        )
        if scored:
            row.append(str(hit.score))
            row.append(", ".join(hit.match.matched_terms) if hit.match else "")
        table.add_row(*row)

    return table


def format_shortlist_day_table(day: ShortlistDay) -> Table:
    """Format one shortlist day as a Rich table."""
    title = (
        f"{day.date} · {day.count} of {day.total_candidates} "
        f"· {day.query_used!r} ({day.mode_used.value})"
    )
    table = _table(title)
    table.add_column("#", style="dim", width=4, justify="right")
    table.add_column("Time", width=5)
    table.add_column("Name")
    table.add_column("Type", style="magenta")
    table.add_column("Score", justify="right", style="green")
    table.add_column("Matched")

    for i, item in enumerate(day.results, start=1):
        table.add_row(
            str(i),
            _time_label(item.event.start_time),
            item.event.name or "[dim]Untitled[/dim]",
            item.event.event_type or "",
            str(item.rank_score),
            ", ".join(item.match.matched_terms),
        )
    return table


def format_dates_table(dates: list[DateCount]) -> Table:
    table = _table("Festival dates")
    table.add_column("Date", style="yellow")
    table.add_column("Events", justify="right")
    for entry in dates:
        table.add_row(entry.date, str(entry.event_count))
    return table


def format_venues_table(venues: list[VenueCount]) -> Table:
    table = _table("Venues")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Events", justify="right")
    for entry in venues:
        table.add_row(entry.venue.id or "", entry.venue.name or "", str(entry.event_count))
    return table


def format_categories_table(categories: list[CategoryCount]) -> Table:
    table = _table("Categories")
    table.add_column("Category")
    table.add_column("Events", justify="right")
    for entry in categories:
        table.add_row(entry.category, str(entry.event_count))
    return table


def format_contributors_table(contributors: list[ContributorAppearances]) -> Table:
    table = _table("Contributors")
    table.add_column("Name", style="cyan")
    table.add_column("Type", style="magenta")
    table.add_column("Events", justify="right")
    table.add_column("Appears in")
    for entry in contributors:
        table.add_row(
            entry.name,
            entry.type or "",
            str(len(entry.events)),
            "; ".join(event.name or event.id for event in entry.events),
        )
    return table
