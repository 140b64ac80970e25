"""
Result formatting and display for the CLI interface.

Provides functions to print loaded images, detail views and notices in
a human-readable format.
"""

from __future__ import annotations

import json
import sys
from typing import TextIO

from ..detail import render_detail_markdown
from ..models import ImageRecord, Notice
from ..search import SearchState
from ..utils.formatters import format_date, truncate


def _format_result_line(index: int, image: ImageRecord) -> str:
    """
    Format one result row.

    Args:
        index: 1-based position in the result list
        image: The image to describe

    Returns:
        Formatted row
    """
    return f"{index:>4}. {truncate(image.title, 40):<40}  {format_date(image):<10}  {image.permalink_url}"


def print_results(state: SearchState, out: TextIO = None) -> None:
    """Print the loaded results of a search state."""
    out = out or sys.stdout
    label = f'"{state.committed_query}"' if state.committed_query.strip() else "recent images"

    print("\n" + "=" * 70, file=out)
    print(f"GYAZO SEARCH: {label}", file=out)
    print("=" * 70, file=out)

    if not state.results:
        print("\nNo Images Found", file=out)
        return

    for index, image in enumerate(state.results, 1):
        print(_format_result_line(index, image), file=out)

    print("-" * 70, file=out)
    print(f"{len(state.results)} images, {state.page} page(s) loaded", file=out)


def print_detail(image: ImageRecord, out: TextIO = None) -> None:
    """Print the detail view of one image."""
    out = out or sys.stdout
    print(render_detail_markdown(image), file=out)


def print_notice(notice: Notice, out: TextIO = None) -> None:
    """Print a notice, failures to stderr."""
    if out is None:
        out = sys.stderr if notice.style == 'failure' else sys.stdout
    marker = "✗" if notice.style == 'failure' else "✓"
    line = f"{marker} {notice.title}"
    if notice.message:
        line += f": {notice.message}"
    print(line, file=out)


def results_json(state: SearchState) -> str:
    """Serialize the loaded results as JSON."""
    return json.dumps({
        'query': state.committed_query,
        'page': state.page,
        'images': [image.to_dict() for image in state.results],
    }, indent=2, ensure_ascii=False)


__all__ = [
    'print_results',
    'print_detail',
    'print_notice',
    'results_json',
]
