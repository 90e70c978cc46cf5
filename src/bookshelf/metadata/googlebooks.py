# ABOUTME: Google Books metadata provider implementation.
# ABOUTME: Resolves a volume id from a file name, fetches the volume, and maps it to a Book.

import logging
from urllib.parse import quote_plus

import httpx

from bookshelf.metadata.comparable import comparable_name
from bookshelf.metadata.filename import apply_parsed_name, build_search_query, parse_book_name
from bookshelf.metadata.googlebooks_parser import (
    BookResult,
    SearchResult,
    VolumeInfo,
    parse_book_response,
    parse_search_response,
    year_from_published_date,
)
from bookshelf.metadata.http import HttpClient
from bookshelf.metadata.types import (
    Book,
    BookInfo,
    MetadataResult,
    PersonInfo,
    RemoteSearchResult,
)

logger = logging.getLogger(__name__)

PROVIDER_NAME = "Google Books"
PROVIDER_ID = "GoogleBooks"

_API_BASE = "https://www.googleapis.com/books/v1/volumes"
_SEARCH_URL = _API_BASE + "?q={query}&startIndex={start}&maxResults={limit}"
_DETAILS_URL = _API_BASE + "/{volume_id}"
_SEARCH_START = 0
_SEARCH_LIMIT = 20

# Google rates out of five, the host out of ten.
_RATING_SCALE = 2

# Dropped BISAC sub-category, it carries no information.
_GENERIC_CATEGORY = "General"

# Allowed distance between the file's year and the volume's published year.
_YEAR_TOLERANCE = 1


def split_categories(categories: tuple[str, ...] | list[str]) -> list[str]:
    """Flatten BISAC-style "A / B" categories into an ordered unique list.

    Segments are trimmed and "General" is dropped. The first entry is the
    most general category.
    """
    seen: dict[str, None] = {}
    for category in categories:
        for segment in category.split("/"):
            segment = segment.strip()
            if segment == _GENERIC_CATEGORY:
                continue
            seen.setdefault(segment, None)
    return list(seen)


class GoogleBooksProvider:
    """Metadata provider backed by the Google Books volumes API.

    Uses a dependency-injected HttpClient for testability. Transport errors
    from the client propagate to the caller unchanged.
    """

    def __init__(self, http_client: HttpClient) -> None:
        self._http = http_client

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    async def get_search_results(self, info: BookInfo) -> list[RemoteSearchResult]:
        """Search Google Books and summarize every item that has volume info."""
        search_result = await self._search(info)

        results: list[RemoteSearchResult] = []
        for item in search_result.items:
            volume = item.volume_info
            if volume is None:
                continue

            remote = RemoteSearchResult(
                name=volume.title,
                overview=volume.description,
                production_year=year_from_published_date(volume.published_date),
                search_provider_name=PROVIDER_NAME,
            )
            if item.id:
                remote.set_provider_id(PROVIDER_ID, item.id)
            if volume.image_links is not None and volume.image_links.thumbnail is not None:
                remote.image_url = volume.image_links.thumbnail
            results.append(remote)

        return results

    async def get_metadata(self, info: BookInfo) -> MetadataResult:
        """Fetch full metadata for a book.

        Uses the stored provider id when there is one, otherwise resolves it
        from the file name first. Returns a result with `has_metadata=False`
        when no volume can be found.
        """
        result = MetadataResult(queried_by_id=True)

        volume_id = info.get_provider_id(PROVIDER_ID)
        if volume_id is None:
            volume_id = await self.fetch_book_id(info)
            result.queried_by_id = False

        if volume_id is None:
            return result

        book_result = await self.fetch_book_data(volume_id)
        book = map_book(book_result)
        if book is None:
            logger.debug("Volume %s has no volume info", volume_id)
            return result

        map_people_and_language(result, book_result)
        result.item = book
        result.has_metadata = True
        return result

    async def get_image_response(self, url: str) -> httpx.Response:
        """Fetch a remote image and hand back the raw response."""
        return await self._http.get_response(url)

    async def fetch_book_id(self, info: BookInfo) -> str | None:
        """Resolve the Google Books volume id for a book file.

        Parses the file name (series, index, and year improve the search),
        searches, then walks the items in the order Google returned them. The
        first item whose comparable title equals the book's and whose year is
        within one year of the book's wins. Returns None when nothing passes.
        """
        lookup_info = apply_parsed_name(info, parse_book_name(info.name))

        search_result = await self._search(lookup_info)
        if not search_result.items:
            return None

        target = comparable_name(
            lookup_info.name, lookup_info.series_name, lookup_info.index_number
        )
        for item in search_result.items:
            volume = item.volume_info
            if volume is None:
                continue

            if comparable_name(volume.title) != target:
                logger.debug("Rejected %s: title %r does not match", item.id, volume.title)
                continue

            result_year = year_from_published_date(volume.published_date)
            if result_year is None:
                logger.debug("Rejected %s: unparsable date %r", item.id, volume.published_date)
                continue

            if not year_within_tolerance(result_year, lookup_info.year):
                logger.debug("Rejected %s: year %d vs %s", item.id, result_year, lookup_info.year)
                continue

            logger.debug("Resolved %r to volume %s", info.name, item.id)
            return item.id

        return None

    async def fetch_book_data(self, volume_id: str) -> BookResult:
        """Fetch a single volume record by id."""
        url = _DETAILS_URL.format(volume_id=volume_id)
        data = await self._http.get_json(url)
        return parse_book_response(data)

    async def _search(self, info: BookInfo) -> SearchResult:
        query = build_search_query(info)
        url = _SEARCH_URL.format(
            query=quote_plus(query), start=_SEARCH_START, limit=_SEARCH_LIMIT
        )
        logger.debug("Searching Google Books for %r", query)
        data = await self._http.get_json(url)
        return parse_search_response(data)


def year_within_tolerance(result_year: int, target_year: int | None) -> bool:
    """Whether a candidate's year is close enough to the book's year.

    Books without a known year accept every candidate year.
    """
    if target_year is None:
        return True
    return abs(result_year - target_year) <= _YEAR_TOLERANCE


def map_book(book_result: BookResult) -> Book | None:
    """Convert a volume record into a Book. Returns None without volume info."""
    volume: VolumeInfo | None = book_result.volume_info
    if volume is None:
        return None

    book = Book(
        name=volume.title,
        overview=volume.description,
        production_year=year_from_published_date(volume.published_date),
    )

    if volume.publisher and volume.publisher.strip():
        book.add_studio(volume.publisher)

    categories = split_categories(volume.categories)
    if categories:
        book.add_genre(categories[0])
        for category in categories[1:]:
            book.add_tag(category)

    if volume.average_rating is not None:
        book.community_rating = volume.average_rating * _RATING_SCALE

    if book_result.id and book_result.id.strip():
        book.set_provider_id(PROVIDER_ID, book_result.id)

    return book


def map_people_and_language(result: MetadataResult, book_result: BookResult) -> None:
    """Add author credits and the result language to a MetadataResult.

    MUTATES result in place.
    """
    volume = book_result.volume_info
    if volume is None:
        return

    for author in volume.authors:
        result.add_person(PersonInfo(name=author, type="Author"))

    if volume.language and volume.language.strip():
        result.result_language = volume.language
