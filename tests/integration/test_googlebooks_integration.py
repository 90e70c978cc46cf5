# ABOUTME: Integration tests running GoogleBooksProvider over the real async HTTP client.
# ABOUTME: Only the httpx transport is faked; URL building, JSON decoding, and mapping are real.

import httpx
import pytest

from bookshelf.metadata import BookInfo, GoogleBooksProvider
from bookshelf.metadata.googlebooks import PROVIDER_ID
from bookshelf.metadata.http import BookshelfHttpClient, MetadataFetchError
from tests.fixtures.transport import RoutingTransport


class TestGoogleBooksOverHttp:
    """End-to-end provider flows over BookshelfHttpClient."""

    async def test_file_name_to_metadata(self, routing_transport: RoutingTransport) -> None:
        async with BookshelfHttpClient(transport=routing_transport) as http_client:
            provider = GoogleBooksProvider(http_client=http_client)
            result = await provider.get_metadata(BookInfo(name="The Hobbit (2012)"))

        assert result.has_metadata
        assert result.item is not None
        assert result.item.provider_ids[PROVIDER_ID] == "pD6arNyKyi8C"
        assert result.item.genres == ["Fiction"]
        assert [str(r.url) for r in routing_transport.requests] == [
            "https://www.googleapis.com/books/v1/volumes?q=The+Hobbit+2012&startIndex=0&maxResults=20",
            "https://www.googleapis.com/books/v1/volumes/pD6arNyKyi8C",
        ]

    async def test_search_listing(self, routing_transport: RoutingTransport) -> None:
        async with BookshelfHttpClient(transport=routing_transport) as http_client:
            provider = GoogleBooksProvider(http_client=http_client)
            results = await provider.get_search_results(BookInfo(name="The Hobbit"))

        assert len(results) == 3

    async def test_unknown_id_raises(self) -> None:
        transport = RoutingTransport(volumes={})
        async with BookshelfHttpClient(transport=transport) as http_client:
            provider = GoogleBooksProvider(http_client=http_client)
            with pytest.raises(MetadataFetchError, match="404"):
                await provider.get_metadata(
                    BookInfo(name="x", provider_ids={PROVIDER_ID: "missing"})
                )

    async def test_image_passthrough(self) -> None:
        transport = RoutingTransport(image_bytes=b"cover-bytes")
        async with BookshelfHttpClient(transport=transport) as http_client:
            provider = GoogleBooksProvider(http_client=http_client)
            response = await provider.get_image_response(
                "http://books.google.com/books/content?id=pD6arNyKyi8C&zoom=1"
            )

        assert isinstance(response, httpx.Response)
        assert response.content == b"cover-bytes"
