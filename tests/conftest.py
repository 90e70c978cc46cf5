# ABOUTME: Shared pytest fixtures for Bookshelf tests.
# ABOUTME: Provides a routing fake httpx transport serving canned Google Books responses.

import pytest

from tests.fixtures.transport import RoutingTransport


@pytest.fixture
def routing_transport() -> RoutingTransport:
    """A transport serving the Hobbit search and volume fixtures."""
    return RoutingTransport()
