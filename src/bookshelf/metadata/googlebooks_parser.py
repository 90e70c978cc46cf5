# ABOUTME: Pure parsing functions for Google Books volumes API JSON responses.
# ABOUTME: Converts raw search and detail payloads into immutable result records.

import re
from dataclasses import dataclass
from typing import Any

# Plain decimal integer: ASCII digits with an optional sign, no underscores.
_INTEGER_RE = re.compile(r"\s*[+-]?[0-9]+\s*")


@dataclass(frozen=True)
class ImageLinks:
    """Cover image URLs attached to a volume."""

    thumbnail: str | None = None
    small_thumbnail: str | None = None


@dataclass(frozen=True)
class VolumeInfo:
    """The `volumeInfo` block shared by search items and detail records."""

    title: str | None = None
    description: str | None = None
    published_date: str | None = None
    image_links: ImageLinks | None = None
    categories: tuple[str, ...] = ()
    average_rating: float | None = None
    authors: tuple[str, ...] = ()
    language: str | None = None
    publisher: str | None = None


@dataclass(frozen=True)
class BookResult:
    """A single volume: its opaque id plus optional volume info."""

    id: str | None = None
    volume_info: VolumeInfo | None = None


@dataclass(frozen=True)
class SearchResult:
    """Envelope returned by the search endpoint, items in remote order."""

    items: tuple[BookResult, ...] = ()
    total_items: int | None = None


def _str_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _str_tuple(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(v for v in value if isinstance(v, str))


def _float_or_none(value: Any) -> float | None:
    # bool is an int subclass; a JSON true is not a rating
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _parse_image_links(data: Any) -> ImageLinks | None:
    if not isinstance(data, dict):
        return None
    return ImageLinks(
        thumbnail=_str_or_none(data.get("thumbnail")),
        small_thumbnail=_str_or_none(data.get("smallThumbnail")),
    )


def parse_volume_info(data: Any) -> VolumeInfo | None:
    """Parse a `volumeInfo` object. Returns None when the block is absent."""
    if not isinstance(data, dict):
        return None
    return VolumeInfo(
        title=_str_or_none(data.get("title")),
        description=_str_or_none(data.get("description")),
        published_date=_str_or_none(data.get("publishedDate")),
        image_links=_parse_image_links(data.get("imageLinks")),
        categories=_str_tuple(data.get("categories")),
        average_rating=_float_or_none(data.get("averageRating")),
        authors=_str_tuple(data.get("authors")),
        language=_str_or_none(data.get("language")),
        publisher=_str_or_none(data.get("publisher")),
    )


def parse_book_response(data: dict[str, Any]) -> BookResult:
    """Parse a volume detail response (or one item of a search response)."""
    return BookResult(
        id=_str_or_none(data.get("id")),
        volume_info=parse_volume_info(data.get("volumeInfo")),
    )


def parse_search_response(data: dict[str, Any]) -> SearchResult:
    """Parse a search response envelope.

    The API omits `items` entirely when nothing matched; that yields an
    empty SearchResult rather than an error.
    """
    raw_items = data.get("items")
    items: list[BookResult] = []
    if isinstance(raw_items, list):
        items = [parse_book_response(item) for item in raw_items if isinstance(item, dict)]

    total = data.get("totalItems")
    return SearchResult(
        items=tuple(items),
        total_items=total if isinstance(total, int) and not isinstance(total, bool) else None,
    )


def year_from_published_date(published_date: str | None) -> int | None:
    """Extract the year from a `YYYY[-MM[-DD]]` published date.

    Strings longer than four characters are cut to their first four; shorter
    strings are parsed as-is. Returns None when the result is not a plain
    decimal integer.
    """
    if published_date is None:
        return None
    year_text = published_date[:4] if len(published_date) > 4 else published_date
    if not _INTEGER_RE.fullmatch(year_text):
        return None
    return int(year_text)
