"""
Search package for Gyazo Search.

Public API:
- SearchSession: stateful coordinator used by the GUI and CLI
- SearchState, FetchRequest and the pure transition functions
- Debouncer, TimerDebouncer: search box debouncing
"""

from __future__ import annotations

from .debounce import Debouncer, TimerDebouncer
from .state import (
    RequestKind,
    FetchRequest,
    SearchState,
    on_input_changed,
    on_query_committed,
    on_load_more,
    on_fetch_completed,
    on_fetch_abandoned,
    is_stale,
)
from .session import SearchSession

__all__ = [
    'Debouncer',
    'TimerDebouncer',
    'RequestKind',
    'FetchRequest',
    'SearchState',
    'on_input_changed',
    'on_query_committed',
    'on_load_more',
    'on_fetch_completed',
    'on_fetch_abandoned',
    'is_stale',
    'SearchSession',
]
