"""
Endpoint routing for the Gyazo API.

An empty or whitespace-only query goes to the list endpoint; anything
else goes to the search endpoint. The two endpoints take different
page size parameter names, so each parameter set is built on its own.
"""

from __future__ import annotations

from ..config import (
    LIST_ENDPOINT,
    SEARCH_ENDPOINT,
    LIST_PER_PAGE_PARAM,
    SEARCH_PER_PAGE_PARAM,
)


def is_list_query(query: str) -> bool:
    """True if the query should be served by the list endpoint."""
    return not query or query.strip() == ''


def list_params(access_token: str, page: int, per_page: int) -> dict[str, str]:
    """Query parameters for GET /api/images."""
    return {
        'access_token': access_token,
        'page': str(page),
        LIST_PER_PAGE_PARAM: str(per_page),
    }


def search_params(access_token: str, query: str, page: int, per_page: int) -> dict[str, str]:
    """Query parameters for GET /api/search."""
    return {
        'access_token': access_token,
        'query': query,
        'page': str(page),
        SEARCH_PER_PAGE_PARAM: str(per_page),
    }


def route(access_token: str, query: str, page: int, per_page: int) -> tuple[str, dict[str, str]]:
    """
    Pick the endpoint path and parameters for a query.

    Returns:
        Tuple of (endpoint path, query parameters)

    Examples:
        >>> route('t', '  ', 1, 20)[0]
        '/api/images'
        >>> route('t', 'cat', 2, 20)
        ('/api/search', {'access_token': 't', 'query': 'cat', 'page': '2', 'per': '20'})
    """
    if is_list_query(query):
        return LIST_ENDPOINT, list_params(access_token, page, per_page)
    return SEARCH_ENDPOINT, search_params(access_token, query, page, per_page)


__all__ = ['is_list_query', 'list_params', 'search_params', 'route']
