"""Catalog browsing CLI commands."""

import click
from rich.panel import Panel

from festsearch.cli.formatters import (
    format_categories_table,
    format_contributors_table,
    format_dates_table,
    format_json,
    format_venues_table,
)
from festsearch.cli.helpers import get_events
from festsearch.core.models import Event
from festsearch.search import (
    category_counts,
    date_counts,
    find_contributors,
    get_event,
    venue_counts,
)

format_option = click.option(
    "--format",
    "-f",
    "output_format",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Output format",
)


@click.command()
@format_option
@click.pass_context
def dates(ctx: click.Context, output_format: str) -> None:
    """List festival dates with event counts."""
    result = date_counts(get_events(ctx))
    if output_format == "json":
        click.echo(format_json({"dates": [d.to_dict() for d in result]}))
        return
    ctx.obj.console.print(format_dates_table(result))


@click.command()
@click.option("--name", help="Partial match on venue name")
@format_option
@click.pass_context
def venues(ctx: click.Context, name: str | None, output_format: str) -> None:
    """List venues by number of events."""
    result = venue_counts(get_events(ctx), name=name)
    if output_format == "json":
        data = {"total": len(result), "venues": [v.to_dict() for v in result]}
        click.echo(format_json(data))
        return
    ctx.obj.console.print(format_venues_table(result))


@click.command()
@format_option
@click.pass_context
def categories(ctx: click.Context, output_format: str) -> None:
    """List categories by number of events."""
    result = category_counts(get_events(ctx))
    if output_format == "json":
        data = {"total": len(result), "categories": [c.to_dict() for c in result]}
        click.echo(format_json(data))
        return
    ctx.obj.console.print(format_categories_table(result))


@click.command()
@click.argument("name")
@format_option
@click.pass_context
def contributors(ctx: click.Context, name: str, output_format: str) -> None:
    """Find contributors by name and the events they appear in."""
    result = find_contributors(get_events(ctx), name)
    if output_format == "json":
        data = {"total": len(result), "contributors": [c.to_dict() for c in result]}
        click.echo(format_json(data))
        return
    if not result:
        ctx.obj.console.print(f"[yellow]No contributors matching '{name}'[/yellow]")
        return
    ctx.obj.console.print(format_contributors_table(result))


@click.command()
@click.argument("event_id")
@format_option
@click.pass_context
def show(ctx: click.Context, event_id: str, output_format: str) -> None:
    """Show a single event."""
    console = ctx.obj.console
    event = get_event(get_events(ctx), event_id)

    if event is None:
        console.print(f"[red]Event not found:[/red] {event_id}")
        ctx.exit(1)

    if output_format == "json":
        click.echo(format_json(event.to_dict()))
        return
    console.print(_event_panel(event))


def _event_panel(event: Event) -> Panel:
    lines = [
        f"[bold]Date:[/bold] {event.date or 'unknown'}",
        f"[bold]Time:[/bold] {event.start_time or 'TBD'} - {event.end_time or 'TBD'}",
        f"[bold]Type:[/bold] {event.event_type or 'n/a'}",
        f"[bold]Category:[/bold] {event.category or 'n/a'}",
        f"[bold]Venue:[/bold] {event.venue_name or 'n/a'}",
    ]
    if event.contributors:
        names = ", ".join(
            f"{c.name} ({c.type})" if c.type else c.name or ""
            for c in event.contributors
        )
        lines.append(f"[bold]Contributors:[/bold] {names}")
    if event.official_url:
        lines.append(f"[bold]URL:[/bold] {event.official_url}")

    return Panel(
        "\n".join(lines),
        title=f"[cyan]{event.id}[/cyan] {event.name or ''}",
        expand=False,
    )
