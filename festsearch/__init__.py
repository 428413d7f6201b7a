"""Festival schedule search and ranking."""

__version__ = "1.0.0"
