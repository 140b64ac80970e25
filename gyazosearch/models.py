"""
Data models for Gyazo Search.

Contains dataclasses for image records returned by the Gyazo API,
the tagged result of a fetch, and user-visible notices.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


def parse_timestamp(value: str) -> Optional[datetime]:
    """
    Parse a Gyazo timestamp.

    Accepts ISO 8601 ('2024-05-01T10:00:00+00:00', '...Z') and the
    '2024-05-01 10:00:00+0900' form used by the API.

    Returns:
        Parsed datetime, or None if the value is empty or unrecognised
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for fmt in ('%Y-%m-%d %H:%M:%S%z', '%Y-%m-%dT%H:%M:%S%z', '%Y-%m-%dT%H:%M:%S.%f%z'):
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


@dataclass(frozen=True)
class ImageMetadata:
    """
    Capture metadata attached to an image.

    Attributes:
        app: Application the capture was taken in
        title: Window or page title
        url: Source URL of the captured page
        desc: Free-form description
    """
    app: Optional[str] = None
    title: Optional[str] = None
    url: Optional[str] = None
    desc: str = ""

    @property
    def is_empty(self) -> bool:
        return not (self.app or self.title or self.url or self.desc)

    def to_dict(self) -> dict:
        return {'app': self.app, 'title': self.title, 'url': self.url, 'desc': self.desc}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> 'ImageMetadata':
        if data is not None and not isinstance(data, dict):
            raise TypeError(f"metadata must be an object, got {type(data).__name__}")
        data = data or {}
        return cls(
            app=data.get('app') or None,
            title=data.get('title') or None,
            url=data.get('url') or None,
            desc=data.get('desc') or "",
        )


@dataclass(frozen=True)
class OcrText:
    """Text recognised in an image by Gyazo."""
    locale: str = ""
    description: str = ""

    def to_dict(self) -> dict:
        return {'locale': self.locale, 'description': self.description}

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> Optional['OcrText']:
        if not data:
            return None
        if not isinstance(data, dict):
            raise TypeError(f"ocr must be an object, got {type(data).__name__}")
        return cls(locale=data.get('locale') or "", description=data.get('description') or "")


@dataclass(frozen=True)
class ImageRecord:
    """
    One image from the Gyazo list or search endpoint.

    Attributes:
        image_id: Unique identifier of the image
        permalink_url: Gyazo page for the image
        url: Raw image URL
        thumb_url: Thumbnail URL
        type: Image format tag (png, jpg, gif...)
        created_at: Upload timestamp as sent by the API
        metadata: Capture metadata
        ocr: Recognised text, if Gyazo computed it
    """
    image_id: str
    permalink_url: str = ""
    url: str = ""
    thumb_url: str = ""
    type: str = ""
    created_at: str = ""
    metadata: ImageMetadata = field(default_factory=ImageMetadata)
    ocr: Optional[OcrText] = None

    @property
    def title(self) -> str:
        """Metadata title, or 'Untitled'."""
        return self.metadata.title or "Untitled"

    @property
    def created_datetime(self) -> Optional[datetime]:
        return parse_timestamp(self.created_at)

    @property
    def ocr_text(self) -> str:
        return self.ocr.description if self.ocr else ""

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'image_id': self.image_id,
            'permalink_url': self.permalink_url,
            'url': self.url,
            'thumb_url': self.thumb_url,
            'type': self.type,
            'created_at': self.created_at,
            'title': self.title,
            'metadata': self.metadata.to_dict(),
            'ocr': self.ocr.to_dict() if self.ocr else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'ImageRecord':
        """
        Create an ImageRecord from a Gyazo API object.

        Raises:
            KeyError: If 'image_id' is missing
            TypeError: If metadata or ocr is not an object
        """
        image_id = data['image_id']
        if not image_id:
            raise KeyError('image_id')
        return cls(
            image_id=str(image_id),
            permalink_url=data.get('permalink_url') or "",
            url=data.get('url') or "",
            thumb_url=data.get('thumb_url') or "",
            type=data.get('type') or "",
            created_at=data.get('created_at') or "",
            metadata=ImageMetadata.from_dict(data.get('metadata')),
            ocr=OcrText.from_dict(data.get('ocr')),
        )


class FetchStatus(str, Enum):
    """Outcome of one API fetch."""
    OK = 'ok'
    FAILED = 'failed'


@dataclass(frozen=True)
class FetchResult:
    """
    Tagged result of a fetch.

    Keeps "the API returned nothing" apart from "the request failed",
    which both used to surface as an empty list.
    """
    status: FetchStatus
    images: tuple = ()
    error: Optional[Exception] = None

    @classmethod
    def success(cls, images) -> 'FetchResult':
        return cls(status=FetchStatus.OK, images=tuple(images))

    @classmethod
    def failure(cls, error: Exception) -> 'FetchResult':
        return cls(status=FetchStatus.FAILED, error=error)

    @property
    def ok(self) -> bool:
        return self.status is FetchStatus.OK

    @property
    def is_empty(self) -> bool:
        return not self.images

    @property
    def kind(self) -> str:
        """'data', 'empty' or 'failed'."""
        if not self.ok:
            return 'failed'
        return 'empty' if self.is_empty else 'data'


class NoticeKind(str, Enum):
    CONFIGURATION_MISSING = 'configuration_missing'
    FETCH_FAILED = 'fetch_failed'
    END_OF_RESULTS = 'end_of_results'
    COPIED = 'copied'


@dataclass(frozen=True)
class Notice:
    """
    A transient user-visible message.

    Attributes:
        kind: What happened
        title: Short headline
        message: Optional detail line
        style: 'failure' or 'success'
    """
    kind: NoticeKind
    title: str
    message: str = ""
    style: str = 'failure'

    def to_dict(self) -> dict:
        return {
            'kind': self.kind.value,
            'title': self.title,
            'message': self.message,
            'style': self.style,
        }

    @classmethod
    def configuration_missing(cls) -> 'Notice':
        return cls(
            kind=NoticeKind.CONFIGURATION_MISSING,
            title="Access Token Missing",
            message="Please set your Gyazo access token in settings",
        )

    @classmethod
    def fetch_failed(cls, detail: str = "") -> 'Notice':
        return cls(
            kind=NoticeKind.FETCH_FAILED,
            title="Failed to fetch images",
            message=detail or "Unknown error",
        )

    @classmethod
    def end_of_results(cls) -> 'Notice':
        return cls(
            kind=NoticeKind.END_OF_RESULTS,
            title="No more images",
            message="You've reached the end of the results",
        )

    @classmethod
    def copied(cls, what: str) -> 'Notice':
        return cls(kind=NoticeKind.COPIED, title=f"{what} Copied to Clipboard", style='success')
