"""Exception hierarchy for gqlwire.

Every failure raised by the client inherits from :class:`GraphQLClientError`,
so callers can catch any client error with a single ``except`` clause while
still handling specific failure modes. None of these are retried internally.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from gqlwire.models import GraphQLErrorEntry


class GraphQLClientError(Exception):
    """Base exception for all gqlwire errors."""


class GraphQLEncodeError(GraphQLClientError):
    """The query envelope could not be serialized."""


class GraphQLRequestError(GraphQLClientError):
    """The HTTP request could not be constructed."""


class GraphQLTransportError(GraphQLClientError):
    """The HTTP call failed before a response status was obtained."""


class GraphQLReadError(GraphQLClientError):
    """The response body could not be read."""


class GraphQLHttpError(GraphQLClientError):
    """The server answered with a status other than 200.

    Attributes:
        status_code: HTTP status code of the response.
        reason: Reason phrase of the response.
    """

    def __init__(self, status_code: int, reason: str) -> None:
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"graphql op error: status code: {status_code} {reason}".rstrip())


class GraphQLDecodeError(GraphQLClientError):
    """The response body could not be decoded into the destination."""

    def __init__(self, message: str, *, response: bytes) -> None:
        super().__init__(message)
        self.response = response


class GraphQLResponseError(GraphQLClientError):
    """The server returned one or more GraphQL errors.

    Only the first error's message is part of the exception message; the full
    ordered list is available on :attr:`errors`.

    Attributes:
        request: Exact request bytes that produced the errors.
        errors: Every error entry reported by the server, in order.
    """

    def __init__(self, *, request: bytes, errors: list[GraphQLErrorEntry]) -> None:
        self.request = request
        self.errors = errors
        first = errors[0].message if errors else ""
        text = request.decode("utf-8", errors="replace")
        super().__init__(f"graphql op error: request:[{text}] error:[{first}]")
