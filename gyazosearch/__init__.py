"""
Gyazo Search
============
Browse and search your Gyazo images from a web GUI or the command line.

Features:
- Recent images (list API) or full-text search (search API)
- Debounced search box
- Paging with "load more"
- Detail view with capture metadata and OCR text
- Access token kept out of every log line and error message
"""

__version__ = "1.0.0"

from .models import ImageRecord, ImageMetadata, OcrText, FetchResult, FetchStatus, Notice, NoticeKind
from .errors import GyazoSearchError, ConfigurationError, ApiError, TransportError
from .client import GyazoClient
from .search import (
    Debouncer,
    TimerDebouncer,
    SearchState,
    FetchRequest,
    SearchSession,
)
from .detail import render_detail_markdown

__all__ = [
    "ImageRecord",
    "ImageMetadata",
    "OcrText",
    "FetchResult",
    "FetchStatus",
    "Notice",
    "NoticeKind",
    "GyazoSearchError",
    "ConfigurationError",
    "ApiError",
    "TransportError",
    "GyazoClient",
    "Debouncer",
    "TimerDebouncer",
    "SearchState",
    "FetchRequest",
    "SearchSession",
    "render_detail_markdown",
]
