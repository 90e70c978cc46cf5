# ABOUTME: Async HTTP client abstraction for metadata provider API calls.
# ABOUTME: Wraps httpx.AsyncClient with an injectable transport for testing; no retries.

import logging
from types import TracebackType
from typing import Any, Protocol, runtime_checkable

import httpx

from bookshelf import __version__

logger = logging.getLogger(__name__)


class MetadataFetchError(Exception):
    """Raised when an HTTP request to a metadata provider fails."""


@runtime_checkable
class HttpClient(Protocol):
    """Protocol for the GET operations a metadata provider needs."""

    async def get_json(self, url: str) -> dict[str, Any]: ...

    async def get_response(self, url: str) -> httpx.Response: ...


class BookshelfHttpClient:
    """Thin async HTTP client for metadata API calls.

    A single failed request ends the caller's lookup: there is no retry and
    no rate limiting. Use as an async context manager, or call `aclose()`.
    """

    def __init__(
        self,
        *,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        client_kwargs: dict[str, Any] = {
            "headers": {"User-Agent": f"bookshelf/{__version__}"},
            "timeout": timeout,
            "follow_redirects": True,
        }
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.AsyncClient(**client_kwargs)

    async def get_json(self, url: str) -> dict[str, Any]:
        """Send a GET request and return the decoded JSON object.

        Raises:
            MetadataFetchError: On transport errors, non-200 responses, or a
                body that is not a JSON object.
        """
        response = await self._get(url)
        if response.status_code != 200:
            raise MetadataFetchError(f"HTTP {response.status_code} from {url}")

        try:
            data = response.json()
        except ValueError as exc:
            raise MetadataFetchError(f"Invalid JSON from {url}: {exc}") from exc

        if not isinstance(data, dict):
            raise MetadataFetchError(f"Expected a JSON object from {url}")
        return data

    async def get_response(self, url: str) -> httpx.Response:
        """Send a GET request and return the response untouched, whatever its status."""
        return await self._get(url)

    async def _get(self, url: str) -> httpx.Response:
        logger.debug("GET %s", url)
        try:
            return await self._client.get(url)
        except httpx.HTTPError as exc:
            raise MetadataFetchError(f"Request failed: {url}: {exc}") from exc

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "BookshelfHttpClient":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()
