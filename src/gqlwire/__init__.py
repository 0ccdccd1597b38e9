"""Public API surface for gqlwire."""

from gqlwire.client import GraphQL
from gqlwire.config import ClientSettings
from gqlwire.exceptions import (
    GraphQLClientError,
    GraphQLDecodeError,
    GraphQLEncodeError,
    GraphQLHttpError,
    GraphQLReadError,
    GraphQLRequestError,
    GraphQLResponseError,
    GraphQLTransportError,
)
from gqlwire.models import GraphQLErrorEntry, GraphQLRequest, GraphQLResponse
from gqlwire.options import with_header, with_http_client, with_logging, with_variable
from gqlwire.transport import build_default_http_client

__all__ = [
    "ClientSettings",
    "GraphQL",
    "GraphQLClientError",
    "GraphQLDecodeError",
    "GraphQLEncodeError",
    "GraphQLErrorEntry",
    "GraphQLHttpError",
    "GraphQLReadError",
    "GraphQLRequest",
    "GraphQLRequestError",
    "GraphQLResponse",
    "GraphQLResponseError",
    "GraphQLTransportError",
    "build_default_http_client",
    "with_header",
    "with_http_client",
    "with_logging",
    "with_variable",
]
