"""Construction options and variable binders.

An option is a callable applied to a :class:`~gqlwire.client.GraphQL` under
construction. A variable binder is a callable applied to the variables mapping
of a single operation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import httpx

if TYPE_CHECKING:
    from gqlwire.client import GraphQL

Option = Callable[["GraphQL"], None]
VariableBinder = Callable[[dict[str, Any]], None]
LogFunc = Callable[[str], None]


def with_http_client(http_client: httpx.AsyncClient) -> Option:
    """Use ``http_client`` for requests instead of the default client.

    The client stays owned by the caller and is never closed by gqlwire.
    """

    def apply(gql: GraphQL) -> None:
        gql._supplied_http_client = http_client

    return apply


def with_logging(log_func: LogFunc) -> Option:
    """Install a sink receiving the raw request and response of each call."""

    def apply(gql: GraphQL) -> None:
        gql._log_func = log_func

    return apply


def with_header(key: str, value: str) -> Option:
    """Add a header to every request. Empty keys are ignored."""

    def apply(gql: GraphQL) -> None:
        if key:
            gql._headers[key] = value

    return apply


def with_variable(key: str, value: Any) -> VariableBinder:
    """Bind a query variable."""

    def apply(variables: dict[str, Any]) -> None:
        variables[key] = value

    return apply
