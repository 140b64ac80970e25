"""
Utility package for Gyazo Search.

Provides:
- formatters: Human-readable image dates and titles
- validators: Pagination and request input checks
- redaction: Keeping the access token out of logs and messages
"""

from __future__ import annotations

from . import formatters
from . import validators
from . import redaction

from .formatters import format_date, format_datetime, truncate
from .validators import (
    validate_page,
    validate_per_page,
    validate_grid_columns,
    validate_text,
)
from .redaction import redact_token, TokenRedactingFilter, token_filter, install_token_filter

__all__ = [
    # Submodules
    'formatters',
    'validators',
    'redaction',
    # Formatters
    'format_date',
    'format_datetime',
    'truncate',
    # Validators
    'validate_page',
    'validate_per_page',
    'validate_grid_columns',
    'validate_text',
    # Redaction
    'redact_token',
    'TokenRedactingFilter',
    'token_filter',
    'install_token_filter',
]
