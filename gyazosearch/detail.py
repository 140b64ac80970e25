"""
Detail view rendering for Gyazo Search.

Builds the markdown shown when an image is selected, and the short
labels shown under each grid item. Everything is rendered from an
already loaded ImageRecord; nothing here talks to the API.
"""

from __future__ import annotations

from .models import ImageRecord
from .utils.formatters import format_date, format_datetime


def grid_title(image: ImageRecord) -> str:
    """Title shown under a grid item."""
    return image.title


def grid_subtitle(image: ImageRecord) -> str:
    """Upload date shown under a grid item."""
    return format_date(image)


def metadata_lines(image: ImageRecord) -> list[str]:
    """Non-empty metadata fields as 'Label: value' lines."""
    lines = []
    if image.metadata.app:
        lines.append(f"App: {image.metadata.app}")
    if image.metadata.url:
        lines.append(f"Source URL: {image.metadata.url}")
    if image.metadata.desc:
        lines.append(f"Description: {image.metadata.desc}")
    return lines


def render_detail_markdown(image: ImageRecord) -> str:
    """
    Render the detail view of an image as markdown.

    Sections: title and image, a Details list, then Metadata and OCR Text
    when the image has any.
    """
    title = image.metadata.title or "Untitled Image"
    parts = [
        f"# {title}",
        f"![{title}]({image.url})",
        "\n".join([
            "### Details",
            f"- **ID**: {image.image_id}",
            f"- **Type**: {image.type}",
            f"- **Created**: {format_datetime(image)}",
            f"- **URL**: {image.url}",
            f"- **Permalink**: {image.permalink_url}",
        ]),
    ]

    meta = metadata_lines(image)
    if meta:
        parts.append("### Metadata\n" + "\n".join(meta))

    if image.ocr_text:
        parts.append("### OCR Text\n" + image.ocr_text)

    return "\n\n".join(parts) + "\n"


def detail_dict(image: ImageRecord) -> dict:
    """Detail view payload for the web interface."""
    data = image.to_dict()
    data['navigation_title'] = image.metadata.title or "Untitled Image"
    data['created_formatted'] = format_datetime(image)
    data['metadata_lines'] = metadata_lines(image)
    data['markdown'] = render_detail_markdown(image)
    return data


__all__ = [
    'grid_title',
    'grid_subtitle',
    'metadata_lines',
    'render_detail_markdown',
    'detail_dict',
]
