# ABOUTME: Routing fake httpx transport serving canned Google Books responses.
# ABOUTME: Lets tests run the real BookshelfHttpClient without network access.

from typing import Any

import httpx

from tests.fixtures.googlebooks_responses import HOBBIT_VOLUME, SEARCH_RESPONSE


class RoutingTransport(httpx.AsyncBaseTransport):
    """Fake async transport that serves search, volume, and image requests.

    Search requests (those with a `q` parameter) get `search`, volume
    requests are looked up by id in `volumes`, and anything else gets
    `image_bytes`. Unknown volume ids answer 404.
    """

    def __init__(
        self,
        search: dict[str, Any] | None = None,
        volumes: dict[str, dict[str, Any]] | None = None,
        image_bytes: bytes = b"\xff\xd8\xff",
    ) -> None:
        self.search = search if search is not None else SEARCH_RESPONSE
        self.volumes = volumes if volumes is not None else {HOBBIT_VOLUME["id"]: HOBBIT_VOLUME}
        self.image_bytes = image_bytes
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path
        if path.endswith("/volumes") and "q" in request.url.params:
            return httpx.Response(200, json=self.search)
        if "/volumes/" in path:
            volume_id = path.rsplit("/", 1)[-1]
            if volume_id in self.volumes:
                return httpx.Response(200, json=self.volumes[volume_id])
            return httpx.Response(404, json={"error": {"code": 404}})
        return httpx.Response(200, content=self.image_bytes)
