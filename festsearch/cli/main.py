"""Main CLI entry point and application setup."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import click
from click.exceptions import Exit
from rich.console import Console

from festsearch import __version__
from festsearch.cli.commands import catalog, search
from festsearch.cli.config import load_config, topic_presets
from festsearch.cli.helpers import get_feed
from festsearch.search import SearchEngine
from festsearch.storage import DEFAULT_TTL, SnapshotCache, load_feed


@dataclass
class Context:
    """CLI context that holds shared resources."""

    engine: SearchEngine
    snapshots: SnapshotCache | None
    console: Console
    config: dict[str, Any] = field(default_factory=dict)
    debug: bool = False


def setup_logging(
    verbose: bool = False, quiet: bool = False, debug: bool = False
) -> None:
    """Configure logging based on CLI flags."""
    if quiet:
        level = logging.WARNING
    elif verbose or debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s"
        if not debug
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def create_console(no_color: bool = False, width: int | None = None) -> Console:
    """Create Rich console with appropriate settings."""
    return Console(
        no_color=no_color,
        width=width or 120,
        highlight=not no_color,
        color_system=None if no_color else "auto",
    )


def create_snapshot_cache(
    feed_path: Path | None, ttl: float = DEFAULT_TTL
) -> SnapshotCache | None:
    """Snapshot cache reading the feed file, or None without a feed."""
    if feed_path is None:
        return None
    return SnapshotCache(lambda: load_feed(feed_path), ttl=ttl)


class FestsearchGroup(click.Group):
    """Custom group that handles KeyboardInterrupt and unexpected errors."""

    def invoke(self, ctx):
        try:
            return super().invoke(ctx)
        except KeyboardInterrupt:
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print("[yellow]Interrupted[/yellow]")
            ctx.exit(130)
        except (click.ClickException, click.Abort, Exit, SystemExit):
            raise
        except Exception as e:
            debug = getattr(ctx.obj, "debug", False) if ctx.obj else False
            if debug:
                raise
            console = getattr(ctx.obj, "console", None) if ctx.obj else None
            if console:
                console.print(f"[red]Error:[/red] {e}")
            else:
                click.echo(f"Error: {e}", err=True)
            ctx.exit(1)


@click.group(cls=FestsearchGroup)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--quiet", "-q", is_flag=True, help="Suppress non-error output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
@click.option("--debug", is_flag=True, help="Enable debug mode with full tracebacks")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to configuration file",
)
@click.option(
    "--feed",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Schedule feed file (.json or .ndjson)",
)
@click.version_option(
    version=__version__,
    prog_name="festsearch",
    message="festsearch version %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    quiet: bool,
    no_color: bool,
    debug: bool,
    config: Path | None,
    feed: Path | None,
) -> None:
    """Festival schedule search.

    Search events with synonym-aware relevance ranking, build daily
    shortlists for a topic and browse dates, venues, categories and
    contributors.
    """
    setup_logging(verbose=verbose, quiet=quiet, debug=debug)
    console = create_console(no_color=no_color)

    try:
        config_data = load_config(config)
        presets = topic_presets(config_data)
    except Exception as e:
        if debug:
            raise
        click.echo(f"Error loading config file: {e}", err=True)
        ctx.exit(1)

    feed_path = feed or config_data.get("feed")
    ttl = float(config_data.get("cache_ttl", DEFAULT_TTL))

    ctx.obj = Context(
        engine=SearchEngine(presets=presets),
        snapshots=create_snapshot_cache(
            Path(feed_path) if feed_path else None, ttl=ttl
        ),
        console=console,
        config=config_data,
        debug=debug,
    )


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show feed status and statistics."""
    console = ctx.obj.console
    feed = get_feed(ctx)

    console.print("\n[bold]Feed Status[/bold]\n")
    console.print(f"Festival year: {feed.festival_year}")
    console.print(f"Events: {len(feed.events)}")
    console.print(f"Index timestamp: {feed.index_timestamp or 'unknown'}")
    console.print(f"Cache TTL: {ctx.obj.snapshots.ttl:g}s")


cli.add_command(search.search)
cli.add_command(search.shortlist)
cli.add_command(catalog.dates)
cli.add_command(catalog.venues)
cli.add_command(catalog.categories)
cli.add_command(catalog.contributors)
cli.add_command(catalog.show)


def main() -> None:
    """Main entry point for the CLI application."""
    try:
        cli()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        if "--debug" in sys.argv:
            raise
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
