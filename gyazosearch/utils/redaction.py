"""
Access token redaction for Gyazo Search.

Provides helpers that keep the Gyazo access token out of log output,
exception messages and anything shown to the user.
"""

from __future__ import annotations

import logging
import re
import threading
from typing import Iterable

from ..config import TOKEN_PLACEHOLDER

# Matches the value of an access_token query parameter in any URL
_TOKEN_PARAM_RE = re.compile(r'(access_token=)[^&\s"\']+')


def redact_token(text: str, token: str = '') -> str:
    """
    Replace an access token in text with a placeholder.

    Both the literal token (if given) and any access_token=... query
    parameter value are replaced.

    Args:
        text: Text that may contain the token
        token: The secret to hide

    Returns:
        Redacted text

    Examples:
        >>> redact_token('https://api.gyazo.com/api/images?access_token=abc&page=1', 'abc')
        'https://api.gyazo.com/api/images?access_token=ACCESS_TOKEN_HIDDEN&page=1'
    """
    if not text:
        return text
    if token:
        text = text.replace(token, TOKEN_PLACEHOLDER)
    return _TOKEN_PARAM_RE.sub(rf'\g<1>{TOKEN_PLACEHOLDER}', text)


class TokenRedactingFilter(logging.Filter):
    """
    Logging filter that redacts registered secrets from every record.

    The record message is rendered once, redacted, and stored back so
    handlers never see the original arguments.
    """

    def __init__(self, secrets: Iterable[str] = ()):
        super().__init__()
        self._lock = threading.Lock()
        self._secrets = {s for s in secrets if s}

    def add_secret(self, secret: str) -> None:
        if secret:
            with self._lock:
                self._secrets.add(secret)

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        with self._lock:
            secrets = list(self._secrets)
        redacted = redact_token(message, '')
        for secret in secrets:
            redacted = redacted.replace(secret, TOKEN_PLACEHOLDER)
        if redacted != message:
            record.msg = redacted
            record.args = None
        return True


# Shared filter installed by setup_logging(); clients register their tokens here
token_filter = TokenRedactingFilter()


def install_token_filter(logger: logging.Logger = None) -> None:
    """Attach the shared token filter to every handler of a logger (root by default)."""
    target = logger or logging.getLogger()
    for handler in target.handlers:
        if token_filter not in handler.filters:
            handler.addFilter(token_filter)


__all__ = ['redact_token', 'TokenRedactingFilter', 'token_filter', 'install_token_filter']
