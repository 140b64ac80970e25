"""
API client package for Gyazo Search.

Public API:
- GyazoClient: list/search requests with token redaction
- route: endpoint routing for a query
"""

from __future__ import annotations

from .api import GyazoClient
from .endpoints import route, is_list_query

__all__ = ['GyazoClient', 'route', 'is_list_query']
