"""
Input validation for Gyazo Search.

Provides validators for pagination parameters and user input coming
from the web interface and the CLI.
"""

from __future__ import annotations

from typing import Any

from ..config import GRID_SIZES

# Gyazo caps page sizes at 100
MAX_PER_PAGE = 100


def validate_page(page: Any) -> tuple[bool, str]:
    """
    Validate a 1-based page number.

    Examples:
        >>> validate_page(1)
        (True, '')
        >>> validate_page(0)
        (False, 'Page must be 1 or greater')
    """
    if isinstance(page, bool) or not isinstance(page, int):
        return False, "Page must be an integer"
    if page < 1:
        return False, "Page must be 1 or greater"
    return True, ""


def validate_per_page(per_page: Any) -> tuple[bool, str]:
    """
    Validate a page size.

    Examples:
        >>> validate_per_page(20)
        (True, '')
        >>> validate_per_page(0)
        (False, 'Page size must be between 1 and 100')
    """
    if isinstance(per_page, bool) or not isinstance(per_page, int):
        return False, "Page size must be an integer"
    if not 1 <= per_page <= MAX_PER_PAGE:
        return False, f"Page size must be between 1 and {MAX_PER_PAGE}"
    return True, ""


def validate_grid_columns(columns: Any) -> tuple[bool, str]:
    """Validate a grid column count against the offered grid sizes."""
    allowed = sorted(GRID_SIZES.values())
    if columns not in allowed:
        return False, f"Grid columns must be one of {allowed}"
    return True, ""


def validate_text(value: Any, field_name: str = 'text') -> tuple[bool, str]:
    """Validate a free-text request field (search box contents)."""
    if not isinstance(value, str):
        return False, f"'{field_name}' must be a string"
    return True, ""


__all__ = [
    'MAX_PER_PAGE',
    'validate_page',
    'validate_per_page',
    'validate_grid_columns',
    'validate_text',
]
