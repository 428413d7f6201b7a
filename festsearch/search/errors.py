"""Search exceptions."""


class SearchError(Exception):
    """Base exception for search-related errors."""


class QueryError(SearchError):
    """Invalid query input such as an unknown match mode."""
