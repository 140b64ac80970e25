"""
Exception hierarchy for Gyazo Search.

Every error raised by the API client derives from GyazoSearchError.
Messages never contain the access token.
"""

from __future__ import annotations

from typing import Optional


class GyazoSearchError(Exception):
    """Base class for all Gyazo Search errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(GyazoSearchError):
    """The access token is missing or unusable. Fixed by the user, never retried."""


class ApiError(GyazoSearchError):
    """
    The Gyazo API answered with a non-success status or an unreadable body.

    Attributes:
        status_code: HTTP status code of the response
        body: Response body text (redacted)
    """

    def __init__(self, status_code: int, body: str, message: Optional[str] = None):
        super().__init__(message or f"API request failed with status {status_code}")
        self.status_code = status_code
        self.body = body


class TransportError(GyazoSearchError):
    """DNS, connection or timeout failure before a response arrived."""
