"""
Unit tests for the Gyazo API client.
"""

import logging

import httpx
import pytest

from gyazosearch.client import GyazoClient, route
from gyazosearch.config import TOKEN_PLACEHOLDER
from gyazosearch.errors import ApiError, ConfigurationError, TransportError
from gyazosearch.models import FetchStatus

from conftest import TEST_TOKEN, make_page, make_payload


class TestRouting:
    """Test list/search endpoint selection."""

    @pytest.mark.parametrize("query", ["cat", " cat ", "スクリーンショット", "a b", "0"])
    def test_non_empty_query_uses_search(self, client, query):
        request = client.build_request(query, page=1, per_page=20)
        assert request.url.path == "/api/search"
        assert request.url.params["query"] == query
        assert request.url.params["per"] == "20"
        assert "per_page" not in request.url.params

    @pytest.mark.parametrize("query", ["", " ", "   ", "\t", "\n "])
    def test_blank_query_uses_list(self, client, query):
        request = client.build_request(query, page=1, per_page=20)
        assert request.url.path == "/api/images"
        assert request.url.params["per_page"] == "20"
        assert "per" not in request.url.params
        assert "query" not in request.url.params

    def test_common_parameters(self, client):
        request = client.build_request("dog", page=3, per_page=50)
        assert request.method == "GET"
        assert request.url.host == "api.gyazo.com"
        assert request.url.params["access_token"] == TEST_TOKEN
        assert request.url.params["page"] == "3"

    def test_route_function(self):
        path, params = route("t", "", 2, 10)
        assert path == "/api/images"
        assert params == {"access_token": "t", "page": "2", "per_page": "10"}

    def test_custom_base_url(self, fake_api):
        with GyazoClient(TEST_TOKEN, base_url="http://localhost:9999/", transport=fake_api.transport) as c:
            request = c.build_request("", 1, 20)
        assert str(request.url).startswith("http://localhost:9999/api/images?")

    @pytest.mark.parametrize("page,per_page", [(0, 20), (-1, 20), (1, 0), (1, -5), (1, 101)])
    def test_invalid_paging_rejected(self, client, page, per_page):
        with pytest.raises(ValueError):
            client.build_request("cat", page=page, per_page=per_page)


class TestFetchImages:
    """Test fetching and parsing."""

    def test_parses_image_records(self, client, fake_api):
        fake_api.set_pages("cat", [make_payload("abc", title="Cat", ocr_text="meow")])
        images = client.fetch_images("cat", page=1, per_page=20)
        assert len(images) == 1
        assert images[0].image_id == "abc"
        assert images[0].title == "Cat"
        assert images[0].ocr_text == "meow"

    def test_list_endpoint_results(self, client, fake_api):
        fake_api.set_pages("", make_page("recent", 3))
        images = client.fetch_images("", page=1, per_page=3)
        assert [i.image_id for i in images] == ["recent-0", "recent-1", "recent-2"]
        assert fake_api.last_request.url.path == "/api/images"

    def test_empty_page(self, client, fake_api):
        assert client.fetch_images("nothing", page=1, per_page=20) == []

    def test_http_error_raises_api_error(self, client, fake_api):
        fake_api.status_code = 500
        with pytest.raises(ApiError) as exc_info:
            client.fetch_images("cat")
        assert exc_info.value.status_code == 500
        assert "server error" in exc_info.value.body

    def test_unauthorized_raises_api_error(self, client, fake_api):
        fake_api.status_code = 401
        fake_api.error_body = '{"message": "You are not authorized."}'
        with pytest.raises(ApiError) as exc_info:
            client.fetch_images("")
        assert exc_info.value.status_code == 401

    def test_non_list_json_raises_api_error(self):
        transport = httpx.MockTransport(lambda r: httpx.Response(200, json={"images": []}))
        with GyazoClient(TEST_TOKEN, transport=transport) as c:
            with pytest.raises(ApiError):
                c.fetch_images("cat")

    def test_invalid_json_raises_api_error(self):
        transport = httpx.MockTransport(lambda r: httpx.Response(200, text="<html>oops</html>"))
        with GyazoClient(TEST_TOKEN, transport=transport) as c:
            with pytest.raises(ApiError) as exc_info:
                c.fetch_images("cat")
        assert exc_info.value.status_code == 200

    def test_record_without_id_raises_api_error(self):
        transport = httpx.MockTransport(lambda r: httpx.Response(200, json=[{"url": "x"}]))
        with GyazoClient(TEST_TOKEN, transport=transport) as c:
            with pytest.raises(ApiError):
                c.fetch_images("cat")

    def test_transport_failure_raises_transport_error(self, client, fake_api):
        fake_api.raise_transport_error = True
        with pytest.raises(TransportError):
            client.fetch_images("cat")

    def test_missing_token_makes_no_request(self, tokenless_client, fake_api):
        with pytest.raises(ConfigurationError):
            tokenless_client.fetch_images("cat")
        assert fake_api.requests == []

    def test_whitespace_token_counts_as_missing(self, fake_api):
        with GyazoClient("   ", transport=fake_api.transport) as c:
            assert not c.has_access_token
            with pytest.raises(ConfigurationError):
                c.build_request("cat")


class TestFetchBoundary:
    """Test that fetch() converts errors into tagged results."""

    def test_success_with_data(self, client, fake_api):
        fake_api.set_pages("cat", make_page("cat", 2))
        result = client.fetch("cat", 1, 20)
        assert result.status is FetchStatus.OK
        assert result.kind == "data"
        assert len(result.images) == 2

    def test_success_empty(self, client):
        result = client.fetch("cat", 1, 20)
        assert result.ok
        assert result.kind == "empty"

    def test_api_failure(self, client, fake_api):
        fake_api.status_code = 503
        result = client.fetch("cat", 1, 20)
        assert not result.ok
        assert result.kind == "failed"
        assert isinstance(result.error, ApiError)

    def test_transport_failure(self, client, fake_api):
        fake_api.raise_transport_error = True
        result = client.fetch("cat", 1, 20)
        assert isinstance(result.error, TransportError)
        assert result.images == ()

    def test_configuration_failure(self, tokenless_client, fake_api):
        result = tokenless_client.fetch("cat", 1, 20)
        assert isinstance(result.error, ConfigurationError)
        assert fake_api.requests == []

    @pytest.mark.parametrize("entry", [
        {"image_id": "a", "metadata": "oops"},
        {"image_id": "a", "ocr": ["not", "an", "object"]},
    ])
    def test_malformed_entry_is_failure(self, entry):
        transport = httpx.MockTransport(lambda r: httpx.Response(200, json=[entry]))
        with GyazoClient(TEST_TOKEN, transport=transport) as c:
            result = c.fetch("cat", 1, 20)
        assert result.kind == "failed"
        assert isinstance(result.error, ApiError)
        assert result.error.status_code == 200


class TestTokenRedaction:
    """Test that the access token never reaches logs or messages."""

    def test_describe_request_hides_token(self, client):
        request = client.build_request("cat", 1, 20)
        described = client.describe_request(request)
        assert TEST_TOKEN not in described
        assert f"access_token={TOKEN_PLACEHOLDER}" in described
        assert "/api/search" in described

    def test_logs_never_contain_token(self, client, fake_api, caplog):
        caplog.set_level(logging.DEBUG)
        fake_api.set_pages("", make_page("r", 1))
        client.fetch("", 1, 20)
        client.fetch("cat", 1, 20)
        fake_api.status_code = 500
        fake_api.error_body = f"bad token {TEST_TOKEN}"
        client.fetch("cat", 2, 20)
        fake_api.status_code = 200
        fake_api.raise_transport_error = True
        client.fetch("cat", 3, 20)

        assert caplog.records
        for record in caplog.records:
            assert TEST_TOKEN not in record.getMessage()
        assert TEST_TOKEN not in caplog.text

    def test_api_error_body_is_redacted(self, client, fake_api):
        fake_api.status_code = 400
        fake_api.error_body = f"invalid access_token={TEST_TOKEN}"
        with pytest.raises(ApiError) as exc_info:
            client.fetch_images("cat")
        assert TEST_TOKEN not in exc_info.value.body
        assert TEST_TOKEN not in str(exc_info.value)

    def test_transport_error_message_is_redacted(self):
        def handler(request):
            raise httpx.ConnectError(f"cannot reach {request.url}", request=request)

        with GyazoClient(TEST_TOKEN, transport=httpx.MockTransport(handler)) as c:
            with pytest.raises(TransportError) as exc_info:
                c.fetch_images("cat")
        assert TEST_TOKEN not in str(exc_info.value)
        assert TOKEN_PLACEHOLDER in str(exc_info.value)
