"""Command-line interface for festival schedule search."""

from festsearch.cli.main import cli, main

__all__ = ["cli", "main"]
