"""
Search session for Gyazo Search.

SearchSession ties together the API client, the debouncer and the
search state. Front ends (the Flask routes and the CLI) talk only to a
session.
"""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import Callable, Optional

from ..config import DEFAULT_DEBOUNCE_MS, DEFAULT_PER_PAGE
from ..models import FetchResult, ImageRecord, Notice
from .debounce import TimerDebouncer
from .state import (
    FetchRequest,
    SearchState,
    on_fetch_abandoned,
    on_fetch_completed,
    on_input_changed,
    on_load_more,
    on_query_committed,
)

_logger = logging.getLogger(__name__)

# Notices kept for the web page to pick up
MAX_QUEUED_NOTICES = 50


class SearchSession:
    """
    Owns the state of one search UI.

    State updates happen under a lock; network calls happen outside it,
    so keystrokes keep arriving while a fetch is in flight. Responses
    for superseded queries are discarded by the state transitions.
    """

    def __init__(
        self,
        client,
        per_page: int = DEFAULT_PER_PAGE,
        debounce_ms: float = DEFAULT_DEBOUNCE_MS,
        on_notice: Optional[Callable[[Notice], None]] = None,
    ):
        """
        Initialize the session.

        Args:
            client: GyazoClient (anything with fetch(query, page, per_page))
            per_page: Page size for every fetch
            debounce_ms: Quiet window before typed input is committed
            on_notice: Optional callback invoked for each notice
        """
        if per_page <= 0:
            raise ValueError(f"per_page must be > 0, got {per_page}")
        self.client = client
        self.per_page = per_page
        self.on_notice = on_notice
        self._lock = threading.Lock()
        self._state = SearchState()
        self._notices: deque = deque(maxlen=MAX_QUEUED_NOTICES)
        self._debouncer = TimerDebouncer(debounce_ms, self.commit)

    @property
    def state(self) -> SearchState:
        with self._lock:
            return self._state

    def snapshot(self) -> SearchState:
        """Return the current state (immutable)."""
        return self.state

    # -------------------------------------------------------------------------
    # Events
    # -------------------------------------------------------------------------

    def start(self) -> SearchState:
        """Load the first page of the account's recent images."""
        return self.load_initial(self.state.committed_query)

    def input_changed(self, text: str) -> None:
        """Record a keystroke; the query is committed after the debounce window."""
        with self._lock:
            self._state = on_input_changed(self._state, text)
        self._debouncer.push(text)

    def commit(self, query: str) -> Optional[SearchState]:
        """
        Commit a settled query.

        A value equal to the current committed query is ignored once a
        load has been issued, so retyping the same text doesn't reset
        the loaded pages.

        Returns:
            The new state, or None if the commit was ignored
        """
        with self._lock:
            unchanged = query == self._state.committed_query and self._state.generation > 0
        if unchanged:
            _logger.debug(f"Ignoring commit of unchanged query {query!r}")
            return None
        return self.load_initial(query)

    def flush_input(self) -> None:
        """Commit pending input now instead of waiting for the window."""
        self._debouncer.flush()

    def load_initial(self, query: str) -> SearchState:
        """Fetch page 1 of a query and replace the results with it."""
        with self._lock:
            self._state, request = on_query_committed(self._state, query)
        _logger.info(f"Loading results for {query!r}" if query.strip() else "Loading recent images")
        return self._run(request)

    def load_more(self) -> bool:
        """
        Fetch the next page of the committed query and append it.

        Returns:
            False if a fetch was already in flight, True otherwise
        """
        with self._lock:
            self._state, request = on_load_more(self._state)
        if request is None:
            _logger.debug("Load more ignored: a fetch is already in flight")
            return False
        self._run(request)
        return True

    def _run(self, request: FetchRequest) -> SearchState:
        result: Optional[FetchResult] = None
        try:
            result = self.client.fetch(request.query, page=request.page, per_page=self.per_page)
        finally:
            if result is None:
                with self._lock:
                    self._state = on_fetch_abandoned(self._state, request)

        with self._lock:
            self._state, notices = on_fetch_completed(self._state, request, result)
            state = self._state
        for notice in notices:
            self.notify(notice)
        return state

    # -------------------------------------------------------------------------
    # Notices
    # -------------------------------------------------------------------------

    def notify(self, notice: Notice) -> None:
        """Queue a notice and pass it to the on_notice callback."""
        with self._lock:
            self._notices.append(notice)
        if self.on_notice is not None:
            self.on_notice(notice)

    def drain_notices(self) -> list[Notice]:
        """Return and clear all queued notices."""
        with self._lock:
            notices = list(self._notices)
            self._notices.clear()
        return notices

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_image(self, image_id: str) -> Optional[ImageRecord]:
        """Return an already loaded image; never fetches."""
        return self.state.find(image_id)

    def set_access_token(self, token: str) -> None:
        """Swap in a new access token (after the settings screen saves one)."""
        self.client.access_token = token

    def to_status_dict(self) -> dict:
        """Return current status for API response."""
        state = self.state
        return {
            'raw_input': state.raw_input,
            'committed_query': state.committed_query,
            'page': state.page,
            'loading': state.loading,
            'result_count': state.result_count,
            'generation': state.generation,
            'per_page': self.per_page,
            'has_token': bool(getattr(self.client, 'has_access_token', True)),
        }

    def to_images_dict(self, state: Optional[SearchState] = None) -> dict:
        """Return loaded images for API response, from one snapshot."""
        if state is None:
            state = self.state
        return {
            'committed_query': state.committed_query,
            'page': state.page,
            'generation': state.generation,
            'images': [image.to_dict() for image in state.results],
        }

    def close(self) -> None:
        """Stop the debouncer and close the client."""
        self._debouncer.cancel()
        close = getattr(self.client, 'close', None)
        if close is not None:
            close()


__all__ = ['SearchSession', 'MAX_QUEUED_NOTICES']
