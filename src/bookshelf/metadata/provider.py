# ABOUTME: RemoteMetadataProvider protocol defining the contract the media server calls.
# ABOUTME: Any remote book catalog (Google Books, Comic Vine, ...) implements this.

from typing import Protocol, runtime_checkable

import httpx

from bookshelf.metadata.types import BookInfo, MetadataResult, RemoteSearchResult


@runtime_checkable
class RemoteMetadataProvider(Protocol):
    """Protocol for remote book metadata lookups.

    Implementations search for candidates, fetch full metadata for a book
    (resolving its provider id first when needed), and proxy image requests.
    """

    @property
    def name(self) -> str: ...

    async def get_search_results(self, info: BookInfo) -> list[RemoteSearchResult]: ...

    async def get_metadata(self, info: BookInfo) -> MetadataResult: ...

    async def get_image_response(self, url: str) -> httpx.Response: ...
