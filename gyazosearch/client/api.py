"""
HTTP client for the Gyazo API.

Provides GyazoClient, which builds list/search requests, performs them
with httpx and parses the JSON array of images. fetch() is the error
boundary: it turns every client error into a FetchResult instead of
raising.
"""

from __future__ import annotations

import json
import logging
from typing import Optional

import httpx

from ..config import API_BASE_URL, DEFAULT_TIMEOUT
from ..errors import ApiError, ConfigurationError, GyazoSearchError, TransportError
from ..models import FetchResult, ImageRecord
from ..utils.redaction import redact_token, token_filter
from ..utils.validators import validate_page, validate_per_page
from .endpoints import route

# Module logger
_logger = logging.getLogger(__name__)


class GyazoClient:
    """
    Client for the Gyazo list and search endpoints.

    The access token is sent as a query parameter and is redacted from
    every log line and error message this client produces.

    Example:
        with GyazoClient(token) as client:
            result = client.fetch('cat', page=1, per_page=20)
    """

    def __init__(
        self,
        access_token: Optional[str],
        base_url: str = API_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            access_token: Gyazo access token (may be empty; requests then fail
                with ConfigurationError)
            base_url: API base URL
            timeout: Request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self._access_token = ''
        self.access_token = access_token or ''
        self._http = httpx.Client(timeout=timeout, transport=transport)

    @property
    def access_token(self) -> str:
        return self._access_token

    @access_token.setter
    def access_token(self, value: Optional[str]) -> None:
        self._access_token = (value or '').strip()
        token_filter.add_secret(self._access_token)

    @property
    def has_access_token(self) -> bool:
        return bool(self._access_token)

    def __enter__(self) -> 'GyazoClient':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection pool."""
        self._http.close()

    def redact(self, text: str) -> str:
        """Hide this client's access token in text."""
        return redact_token(text, self._access_token)

    def describe_request(self, request: httpx.Request) -> str:
        """Return 'METHOD url' with the access token hidden."""
        return self.redact(f"{request.method} {request.url}")

    def build_request(self, query: str, page: int = 1, per_page: int = 20) -> httpx.Request:
        """
        Build the request for a query without sending it.

        Args:
            query: Search text; empty or whitespace-only lists recent images
            page: 1-based page number
            per_page: Page size

        Returns:
            httpx.Request for the list or search endpoint

        Raises:
            ConfigurationError: If no access token is configured
            ValueError: If page < 1 or per_page is outside 1..100
        """
        if not self._access_token:
            raise ConfigurationError("Gyazo access token is not configured")
        for is_valid, error in (validate_page(page), validate_per_page(per_page)):
            if not is_valid:
                raise ValueError(error)

        path, params = route(self._access_token, query, page, per_page)
        return self._http.build_request('GET', f"{self.base_url}{path}", params=params)

    def fetch_images(self, query: str, page: int = 1, per_page: int = 20) -> list[ImageRecord]:
        """
        Fetch one page of images.

        Raises:
            ConfigurationError: If no access token is configured (no request is sent)
            ApiError: On a non-2xx status or an unreadable body
            TransportError: On DNS, connection or timeout failures
        """
        request = self.build_request(query, page, per_page)
        _logger.info(f"Sending request to: {self.describe_request(request)}")

        try:
            response = self._http.send(request)
        except httpx.HTTPError as e:
            message = self.redact(str(e)) or type(e).__name__
            raise TransportError(f"Request failed: {message}") from None

        if not response.is_success:
            body = self.redact(response.text)
            _logger.error(f"API request failed with status {response.status_code}")
            _logger.debug(f"Error response: {body}")
            raise ApiError(response.status_code, body)

        return self._parse_images(response)

    def _parse_images(self, response: httpx.Response) -> list[ImageRecord]:
        """Parse a JSON array of image objects."""
        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError):
            raise ApiError(response.status_code, self.redact(response.text[:500]),
                           "API returned a body that is not JSON") from None

        if not isinstance(data, list):
            raise ApiError(response.status_code, self.redact(response.text[:500]),
                           "API returned JSON that is not a list of images")

        images = []
        for item in data:
            if not isinstance(item, dict):
                raise ApiError(response.status_code, '', "API returned a non-object image entry")
            try:
                images.append(ImageRecord.from_dict(item))
            except KeyError:
                raise ApiError(response.status_code, '', "API returned an image without image_id") from None
            except TypeError as e:
                raise ApiError(response.status_code, '', f"API returned a malformed image entry: {e}") from None
        return images

    def fetch(self, query: str, page: int = 1, per_page: int = 20) -> FetchResult:
        """
        Fetch one page of images, converting client errors into a result.

        Returns:
            FetchResult.success with the images, or FetchResult.failure
            carrying the ConfigurationError/ApiError/TransportError
        """
        try:
            images = self.fetch_images(query, page, per_page)
        except ConfigurationError as e:
            _logger.warning(f"Cannot fetch images: {e}")
            return FetchResult.failure(e)
        except GyazoSearchError as e:
            _logger.error(f"Failed to fetch images: {self.redact(str(e))}")
            return FetchResult.failure(e)

        _logger.debug(f"Fetched {len(images)} images (page {page})")
        return FetchResult.success(images)


__all__ = ['GyazoClient']
