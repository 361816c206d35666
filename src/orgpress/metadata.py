"""Per-document metadata records.

These records are what sibling documents know about each other: the
site build extracts one per source in its first phase and hands the
collection to the listing macro (and to sitemap/RSS generation outside
this package) in its second.

Thread Safety:
Records are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import PurePosixPath

from orgpress.errors import ExtractionError
from orgpress.nodes import Document
from orgpress.utils.text import split_tags

# Extensions of sources that are published as images
IMAGE_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".webm", ".gif"})


@dataclass(frozen=True, slots=True)
class ArticleMetadata:
    """What the rest of the site knows about one document.

    Attributes:
        title: ``#+TITLE:`` value, or the output file stem
        url: Absolute URL of the rendered page
        modified: Last modification time of the source, in UTC when the
            record comes from ``extract_metadata``
        author: ``#+AUTHOR:`` value
        description: ``#+DESC:`` value
        tags: ``#+TAGS:`` value split into tags

    """

    title: str
    url: str
    modified: datetime
    author: str | None = None
    description: str | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class ImageMetadata:
    """An image published alongside the documents."""

    url: str


SiteMetadata = ArticleMetadata | ImageMetadata


def page_url(site_url: str, relative_path: str | PurePosixPath) -> str:
    """Absolute URL of the HTML page produced from a source path.

    Example:
        >>> page_url("https://example.org", "blog/post.org")
        'https://example.org/blog/post.html'
    """
    return f"{site_url}/{PurePosixPath(relative_path).with_suffix('.html')}"


def as_utc(when: datetime) -> datetime:
    """Convert a datetime to aware UTC; naive values are taken to be UTC.

    Example:
        >>> as_utc(datetime(2024, 1, 1)).isoformat()
        '2024-01-01T00:00:00+00:00'
    """
    if when.tzinfo is None:
        return when.replace(tzinfo=timezone.utc)
    return when.astimezone(timezone.utc)


def extract_metadata(
    document: Document,
    *,
    relative_path: str | PurePosixPath,
    site_url: str,
    modified: datetime,
) -> ArticleMetadata:
    """Build the metadata record for a parsed document.

    Args:
        document: Parsed document (macros need not be expanded)
        relative_path: Source path relative to the site root
        site_url: Site base URL, without trailing slash
        modified: Last modification time of the source; a naive value
            is taken to be UTC

    Returns:
        ArticleMetadata for the document.
    """
    meta = document.metadata
    path = PurePosixPath(relative_path)
    tags = meta.get("tags")

    return ArticleMetadata(
        title=meta.get("title", path.stem),
        url=page_url(site_url, path),
        modified=as_utc(modified),
        author=meta.get("author"),
        description=meta.get("desc"),
        tags=split_tags(tags) if tags else (),
    )


def image_metadata(relative_path: str | PurePosixPath, site_url: str) -> ImageMetadata:
    """Build the metadata record for an image source.

    Raises:
        ExtractionError: If the path does not have an image extension.
    """
    path = PurePosixPath(relative_path)
    if not path.suffix:
        raise ExtractionError(f"{path} has no extension")
    if path.suffix.lower() not in IMAGE_EXTENSIONS:
        raise ExtractionError(f"{path}: file type {path.suffix} has no metadata")
    return ImageMetadata(url=f"{site_url}/{path}")
