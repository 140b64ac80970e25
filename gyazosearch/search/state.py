"""
Search state and its transitions.

SearchState is immutable. Each user or network event is a pure function
from the old state to a new one, plus whatever work the event produces
(a FetchRequest to send, or Notices to show).

Every initial load bumps `generation`. A response is only applied if it
was requested under the current generation, so a slow response for an
older query can never overwrite the results of a newer one.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from ..errors import ConfigurationError
from ..models import FetchResult, ImageRecord, Notice

_logger = logging.getLogger(__name__)


class RequestKind(str, Enum):
    INITIAL = 'initial'
    MORE = 'more'


@dataclass(frozen=True)
class FetchRequest:
    """
    A fetch to perform on behalf of the state.

    Attributes:
        query: Committed query the fetch was issued for
        page: 1-based page to fetch
        generation: State generation at issue time (staleness tag)
        kind: Initial load (replace) or load more (append)
    """
    query: str
    page: int
    generation: int
    kind: RequestKind


@dataclass(frozen=True)
class SearchState:
    """
    State of one search session.

    Attributes:
        raw_input: Latest unconfirmed search box contents
        committed_query: Last debounced query actually sent to the API
        page: Pages of committed_query loaded so far (1-based)
        results: Loaded images in arrival order
        loading: True while a fetch is in flight
        generation: Incremented on every initial load
    """
    raw_input: str = ""
    committed_query: str = ""
    page: int = 1
    results: tuple = ()
    loading: bool = False
    generation: int = 0

    @property
    def result_count(self) -> int:
        return len(self.results)

    def find(self, image_id: str) -> Optional[ImageRecord]:
        """Return a loaded image by id."""
        for image in self.results:
            if image.image_id == image_id:
                return image
        return None


def on_input_changed(state: SearchState, text: str) -> SearchState:
    """Record new search box contents; nothing is fetched until they settle."""
    return replace(state, raw_input=text)


def on_query_committed(state: SearchState, query: str) -> tuple[SearchState, FetchRequest]:
    """
    Start the initial load for a committed query.

    Resets the page to 1 and tags the request with a fresh generation.
    Results are replaced when the response arrives.
    """
    generation = state.generation + 1
    new_state = replace(
        state,
        committed_query=query,
        page=1,
        loading=True,
        generation=generation,
    )
    return new_state, FetchRequest(query=query, page=1, generation=generation, kind=RequestKind.INITIAL)


def on_load_more(state: SearchState) -> tuple[SearchState, Optional[FetchRequest]]:
    """
    Request the next page of the committed query.

    Returns:
        (state, None) if a fetch is already in flight, otherwise the
        loading state and the request for page + 1
    """
    if state.loading:
        return state, None
    request = FetchRequest(
        query=state.committed_query,
        page=state.page + 1,
        generation=state.generation,
        kind=RequestKind.MORE,
    )
    return replace(state, loading=True), request


def _failure_notice(result: FetchResult) -> Notice:
    if isinstance(result.error, ConfigurationError):
        return Notice.configuration_missing()
    return Notice.fetch_failed(str(result.error) if result.error else "")


def _append_unique(existing: tuple, incoming: tuple) -> tuple:
    seen = {image.image_id for image in existing}
    appended = []
    for image in incoming:
        if image.image_id in seen:
            _logger.debug(f"Dropping duplicate image {image.image_id} from next page")
            continue
        seen.add(image.image_id)
        appended.append(image)
    return existing + tuple(appended)


def is_stale(state: SearchState, request: FetchRequest) -> bool:
    """True if the request was issued for a query that is no longer current."""
    return request.generation != state.generation


def on_fetch_completed(
    state: SearchState,
    request: FetchRequest,
    result: FetchResult,
) -> tuple[SearchState, list[Notice]]:
    """
    Apply a fetch result.

    Initial loads replace the results (with nothing, on failure). Load
    more appends a non-empty page and advances the page counter; an
    empty page leaves everything as it was and reports the end of the
    results. A failed load more also leaves everything as it was, but
    reports the failure instead of the end of the results.

    Returns:
        (new state, notices to show)
    """
    if is_stale(state, request):
        _logger.debug(
            f"Discarding stale {request.kind.value} response for {request.query!r} "
            f"(generation {request.generation}, current {state.generation})"
        )
        return state, []

    notices: list[Notice] = []

    if request.kind is RequestKind.INITIAL:
        if not result.ok:
            notices.append(_failure_notice(result))
        # Unique ids hold within the first page too
        results = _append_unique((), result.images)
        return replace(state, results=results, page=1, loading=False), notices

    if not result.ok:
        notices.append(_failure_notice(result))
        return replace(state, loading=False), notices

    if result.is_empty:
        notices.append(Notice.end_of_results())
        return replace(state, loading=False), notices

    return replace(
        state,
        results=_append_unique(state.results, result.images),
        page=request.page,
        loading=False,
    ), notices


def on_fetch_abandoned(state: SearchState, request: FetchRequest) -> SearchState:
    """Clear the loading flag after a fetch that ended without a result."""
    if is_stale(state, request):
        return state
    return replace(state, loading=False)


__all__ = [
    'RequestKind',
    'FetchRequest',
    'SearchState',
    'on_input_changed',
    'on_query_committed',
    'on_load_more',
    'on_fetch_completed',
    'on_fetch_abandoned',
    'is_stale',
]
