"""
Unit tests for data models (ImageRecord, FetchResult, Notice).
"""

from datetime import timedelta

import pytest

from gyazosearch.errors import ApiError
from gyazosearch.models import (
    FetchResult,
    FetchStatus,
    ImageMetadata,
    ImageRecord,
    Notice,
    NoticeKind,
    OcrText,
    parse_timestamp,
)

from conftest import make_payload


class TestParseTimestamp:
    """Test the parse_timestamp utility function."""

    def test_gyazo_format(self):
        parsed = parse_timestamp("2024-05-01 10:00:00+0900")
        assert parsed.year == 2024
        assert parsed.hour == 10
        assert parsed.utcoffset() == timedelta(hours=9)

    def test_iso_format(self):
        parsed = parse_timestamp("2024-05-01T10:00:00+00:00")
        assert parsed.utcoffset() == timedelta(0)

    def test_zulu_suffix(self):
        parsed = parse_timestamp("2024-05-01T10:00:00Z")
        assert parsed.utcoffset() == timedelta(0)

    def test_empty(self):
        assert parse_timestamp("") is None

    def test_garbage(self):
        assert parse_timestamp("yesterday") is None


class TestImageRecord:
    """Test ImageRecord data class."""

    def test_from_dict(self):
        record = ImageRecord.from_dict(make_payload("abc", title="Dashboard", ocr_text="Revenue"))
        assert record.image_id == "abc"
        assert record.permalink_url == "https://gyazo.com/abc"
        assert record.url == "https://i.gyazo.com/abc.png"
        assert record.thumb_url.endswith("abc.png")
        assert record.type == "png"
        assert record.metadata.app == "Chrome"
        assert record.metadata.title == "Dashboard"
        assert record.ocr == OcrText(locale="en", description="Revenue")

    def test_minimal_record(self):
        record = ImageRecord.from_dict({"image_id": "x"})
        assert record.title == "Untitled"
        assert record.metadata.is_empty
        assert record.ocr is None
        assert record.ocr_text == ""
        assert record.created_datetime is None

    def test_null_metadata(self):
        record = ImageRecord.from_dict({"image_id": "x", "metadata": None, "ocr": None})
        assert record.metadata == ImageMetadata()

    def test_non_object_metadata_rejected(self):
        with pytest.raises(TypeError):
            ImageRecord.from_dict({"image_id": "x", "metadata": "oops"})

    def test_missing_id_rejected(self):
        with pytest.raises(KeyError):
            ImageRecord.from_dict({"url": "https://i.gyazo.com/x.png"})

    def test_empty_id_rejected(self):
        with pytest.raises(KeyError):
            ImageRecord.from_dict({"image_id": ""})

    def test_to_dict(self):
        data = ImageRecord.from_dict(make_payload("abc", title="Dashboard")).to_dict()
        assert data["image_id"] == "abc"
        assert data["title"] == "Dashboard"
        assert data["metadata"]["app"] == "Chrome"
        assert data["ocr"] is None

    def test_created_datetime(self):
        record = ImageRecord.from_dict(make_payload("abc"))
        assert record.created_datetime.day == 1


class TestFetchResult:
    """Test the tagged fetch result."""

    def test_data(self):
        result = FetchResult.success([ImageRecord(image_id="a")])
        assert result.status is FetchStatus.OK
        assert result.ok
        assert result.kind == "data"
        assert isinstance(result.images, tuple)

    def test_empty(self):
        result = FetchResult.success([])
        assert result.ok
        assert result.is_empty
        assert result.kind == "empty"

    def test_failure(self):
        error = ApiError(500, "boom")
        result = FetchResult.failure(error)
        assert not result.ok
        assert result.is_empty
        assert result.kind == "failed"
        assert result.error is error


class TestNotice:

    def test_end_of_results(self):
        notice = Notice.end_of_results()
        assert notice.kind is NoticeKind.END_OF_RESULTS
        assert notice.title == "No more images"

    def test_copied_is_success(self):
        notice = Notice.copied("Permalink")
        assert notice.style == "success"
        assert notice.title == "Permalink Copied to Clipboard"

    def test_to_dict(self):
        data = Notice.configuration_missing().to_dict()
        assert data["kind"] == "configuration_missing"
        assert data["style"] == "failure"
        assert data["title"] == "Access Token Missing"
