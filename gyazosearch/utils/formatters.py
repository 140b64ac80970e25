"""
Formatting utilities for Gyazo Search.

Provides human-readable formatting for image timestamps and titles.
"""

from __future__ import annotations

from ..models import ImageRecord


def format_date(image: ImageRecord) -> str:
    """
    Format an image's upload date in local time.

    Falls back to the raw API value when it can't be parsed.

    Examples:
        >>> format_date(ImageRecord(image_id='a', created_at='not a date'))
        'not a date'
    """
    created = image.created_datetime
    if created is None:
        return image.created_at
    if created.tzinfo is not None:
        created = created.astimezone()
    return created.strftime('%Y-%m-%d')


def format_datetime(image: ImageRecord) -> str:
    """Format an image's upload date and time in local time."""
    created = image.created_datetime
    if created is None:
        return image.created_at
    if created.tzinfo is not None:
        created = created.astimezone()
    return created.strftime('%Y-%m-%d %H:%M:%S')


def truncate(text: str, width: int) -> str:
    """
    Shorten text to width characters, marking the cut with an ellipsis.

    Examples:
        >>> truncate('screenshot of the dashboard', 12)
        'screenshot …'
    """
    if width <= 0:
        return ''
    if len(text) <= width:
        return text
    return text[:width - 1] + '…'


__all__ = ['format_date', 'format_datetime', 'truncate']
