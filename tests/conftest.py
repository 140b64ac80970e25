"""
Pytest configuration and shared fixtures for test suite.
"""

import shutil
import tempfile
from pathlib import Path

import httpx
import pytest

from gyazosearch.client import GyazoClient
from gyazosearch.models import ImageRecord

TEST_TOKEN = "s3cr3t-test-token-0123456789"


def make_payload(image_id: str, title=None, ocr_text=None, created_at="2024-05-01 10:00:00+0900") -> dict:
    """Build one image object as the Gyazo API returns it."""
    payload = {
        "image_id": image_id,
        "permalink_url": f"https://gyazo.com/{image_id}",
        "thumb_url": f"https://thumb.gyazo.com/thumb/200/{image_id}.png",
        "url": f"https://i.gyazo.com/{image_id}.png",
        "type": "png",
        "created_at": created_at,
        "metadata": {"app": "Chrome", "title": title, "url": None, "desc": ""},
    }
    if ocr_text is not None:
        payload["ocr"] = {"locale": "en", "description": ocr_text}
    return payload


def make_page(prefix: str, count: int, start: int = 0) -> list:
    """Build a page of `count` image objects with ids prefix-<n>."""
    return [make_payload(f"{prefix}-{n}") for n in range(start, start + count)]


def make_records(prefix: str, count: int, start: int = 0) -> tuple:
    return tuple(ImageRecord.from_dict(p) for p in make_page(prefix, count, start))


class FakeGyazoAPI:
    """
    In-memory stand-in for the Gyazo API, served through httpx.MockTransport.

    Pages are registered per query ('' for the list endpoint). Every
    request is recorded so tests can inspect URLs and parameters.
    """

    def __init__(self):
        self.pages: dict[str, list] = {}
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.error_body = '{"message": "server error"}'
        self.raise_transport_error = False

    def set_pages(self, query: str, *pages) -> None:
        self.pages[query] = list(pages)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raise_transport_error:
            raise httpx.ConnectError("Name or service not known", request=request)
        if self.status_code != 200:
            return httpx.Response(self.status_code, text=self.error_body)

        params = request.url.params
        page = int(params.get("page", "1"))
        if request.url.path == "/api/images":
            query = ""
        else:
            query = params.get("query", "")
        pages = self.pages.get(query, [])
        body = pages[page - 1] if 0 < page <= len(pages) else []
        return httpx.Response(200, json=body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def fake_api():
    return FakeGyazoAPI()


@pytest.fixture
def client(fake_api):
    """GyazoClient with a token, talking to the fake API."""
    with GyazoClient(TEST_TOKEN, transport=fake_api.transport) as c:
        yield c


@pytest.fixture
def tokenless_client(fake_api):
    with GyazoClient("", transport=fake_api.transport) as c:
        yield c


@pytest.fixture
def isolated_config(temp_dir, monkeypatch):
    """Point the user config at an empty temporary directory."""
    from gyazosearch.user_config import get_user_config

    for var in (
        "GYAZO_ACCESS_TOKEN",
        "GYAZOSEARCH_PER_PAGE",
        "GYAZOSEARCH_DEBOUNCE_MS",
        "GYAZOSEARCH_GRID_COLUMNS",
        "GYAZOSEARCH_TIMEOUT",
        "GYAZOSEARCH_API_BASE_URL",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("GYAZOSEARCH_CONFIG_DIR", str(temp_dir / "config"))

    config = get_user_config()
    config.reload()
    yield config
    config.reload()
