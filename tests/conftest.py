"""Shared test fixtures for gqlwire tests."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

import httpx
import pytest

from gqlwire import GraphQL, with_http_client
from gqlwire.options import Option

Handler = Callable[[httpx.Request], httpx.Response | Awaitable[httpx.Response]]

BASE_URL = "http://gql.test"


@pytest.fixture
def make_client() -> Callable[..., GraphQL]:
    """Factory building a client whose requests are answered by ``handler``."""

    def factory(handler: Handler, *options: Option, url: str = BASE_URL) -> GraphQL:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return GraphQL(url, with_http_client(http_client), *options)

    return factory


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    """Requests seen by a handler, in arrival order."""
    return []
