# ABOUTME: Unit tests for the RemoteMetadataProvider protocol.
# ABOUTME: Validates the protocol contract and runtime_checkable behavior.

import httpx

from bookshelf.metadata import BookInfo, MetadataResult, RemoteSearchResult
from bookshelf.metadata.provider import RemoteMetadataProvider


class FakeProvider:
    """Minimal implementation of RemoteMetadataProvider for testing."""

    @property
    def name(self) -> str:
        return "fake"

    async def get_search_results(self, info: BookInfo) -> list[RemoteSearchResult]:
        return [RemoteSearchResult(name=info.name, search_provider_name=self.name)]

    async def get_metadata(self, info: BookInfo) -> MetadataResult:
        return MetadataResult()

    async def get_image_response(self, url: str) -> httpx.Response:
        return httpx.Response(204)


class NotAProvider:
    """Missing required methods - should not satisfy the protocol."""

    @property
    def name(self) -> str:
        return "broken"


class TestRemoteMetadataProvider:
    """Tests for RemoteMetadataProvider protocol."""

    def test_valid_implementation_is_instance(self) -> None:
        assert isinstance(FakeProvider(), RemoteMetadataProvider)

    def test_invalid_implementation_is_not_instance(self) -> None:
        assert not isinstance(NotAProvider(), RemoteMetadataProvider)

    async def test_search_returns_list(self) -> None:
        results = await FakeProvider().get_search_results(BookInfo(name="Dune"))
        assert results[0].name == "Dune"
