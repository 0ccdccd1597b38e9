"""Async GraphQL-over-HTTP client."""

from __future__ import annotations

import logging
from collections.abc import Callable
from types import MappingProxyType, TracebackType
from typing import IO, Any

import httpx
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from gqlwire.config import DEFAULT_ENDPOINT, ClientSettings, normalize_url
from gqlwire.destination import populate
from gqlwire.exceptions import (
    GraphQLDecodeError,
    GraphQLEncodeError,
    GraphQLHttpError,
    GraphQLReadError,
    GraphQLRequestError,
    GraphQLResponseError,
    GraphQLTransportError,
)
from gqlwire.models import GraphQLRequest, GraphQLResponse
from gqlwire.options import LogFunc, Option, VariableBinder, with_header
from gqlwire.transport import DEFAULT_TIMEOUT, build_default_http_client

_LOG = logging.getLogger(__name__)

RequestBody = bytes | bytearray | memoryview | str | IO[bytes] | IO[str]

_FIXED_HEADERS = {
    "Cache-Control": "no-cache",
    "Content-Type": "application/json",
    "Accept": "application/json",
}


class GraphQL:
    """Client for executing queries and mutations against a GraphQL server.

    The client is configured once at construction and can be shared by any
    number of concurrent calls; it keeps no per-call state.

    Args:
        url: Base URL of the server, without the endpoint path.
        *options: Construction options such as
            :func:`~gqlwire.options.with_header`, applied in order.
    """

    def __init__(self, url: str, *options: Option) -> None:
        self._url = normalize_url(url)
        self._headers: dict[str, str] = {}
        self._supplied_http_client: httpx.AsyncClient | None = None
        self._log_func: LogFunc | None = None
        self._endpoint = DEFAULT_ENDPOINT
        self._default_timeout: float | None = DEFAULT_TIMEOUT

        for option in options:
            option(self)

        self._owns_http_client = self._supplied_http_client is None
        if self._supplied_http_client is None:
            self._http_client = build_default_http_client(timeout=self._default_timeout)
        else:
            self._http_client = self._supplied_http_client

    @classmethod
    def from_settings(cls, settings: ClientSettings, *options: Option) -> GraphQL:
        """Build a client from :class:`~gqlwire.config.ClientSettings`.

        Explicit options are applied after the settings and win over them.
        """

        def apply_settings(gql: GraphQL) -> None:
            gql._endpoint = settings.endpoint
            gql._default_timeout = settings.timeout

        header_options = [with_header(key, value) for key, value in settings.headers.items()]
        return cls(settings.url, apply_settings, *header_options, *options)

    @property
    def url(self) -> str:
        return self._url

    @property
    def headers(self) -> MappingProxyType[str, str]:
        return MappingProxyType(self._headers)

    @property
    def http_client(self) -> httpx.AsyncClient:
        return self._http_client

    async def __aenter__(self) -> GraphQL:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def execute(
        self,
        query: str,
        response: Any,
        *variables: VariableBinder,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> None:
        """Execute ``query`` against the default ``graphql`` endpoint.

        Args:
            query: GraphQL query or mutation text.
            response: Destination populated in place from the response ``data``.
            *variables: Variable binders from :func:`~gqlwire.options.with_variable`.
            timeout: Per-call timeout in seconds, overriding the HTTP client's.

        Raises:
            GraphQLClientError: On any encoding, transport, status, decoding or
                GraphQL-reported failure.
        """
        await self._query(self._endpoint, query, _bind_variables(variables), response, timeout=timeout)

    async def execute_on_endpoint(
        self,
        endpoint: str,
        query: str,
        response: Any,
        *variables: VariableBinder,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> None:
        """Execute ``query`` against ``endpoint`` relative to the base URL."""
        await self._query(endpoint, query, _bind_variables(variables), response, timeout=timeout)

    async def _query(
        self,
        endpoint: str,
        query: str,
        variables: dict[str, Any] | None,
        response: Any,
        *,
        timeout: Any,
    ) -> None:
        try:
            body = GraphQLRequest(query=query, variables=variables).to_bytes()
        except (PydanticSerializationError, ValidationError, TypeError, ValueError) as exc:
            raise GraphQLEncodeError(f"graphql encoding error: {exc}") from exc

        await self.raw_request(endpoint, body, response, timeout=timeout)

    async def raw_request(
        self,
        endpoint: str,
        body: RequestBody,
        response: Any,
        *,
        timeout: Any = httpx.USE_CLIENT_DEFAULT,
    ) -> None:
        """Send a pre-built JSON ``body`` to ``endpoint`` without wrapping it.

        Useful for introspection or non-standard payloads. The response is
        handled exactly as for :meth:`execute`.
        """
        try:
            content = _read_body(body)
            request = self.http_client.build_request(
                "POST",
                self._url + endpoint,
                content=content,
                headers={**_FIXED_HEADERS, **self._headers},
                timeout=timeout,
            )
        except (httpx.InvalidURL, OSError, TypeError, ValueError) as exc:
            raise GraphQLRequestError(f"graphql create request error: {exc}") from exc

        _LOG.debug("POST %s (%d bytes)", request.url, len(content))
        try:
            http_response = await self.http_client.send(request, stream=True)
        except httpx.RequestError as exc:
            raise GraphQLTransportError(f"graphql request error: {exc}") from exc

        try:
            try:
                data = await http_response.aread()
            except (httpx.RequestError, httpx.StreamError) as exc:
                raise GraphQLReadError(f"graphql copy error: {exc}") from exc
        finally:
            await http_response.aclose()

        _LOG.debug("Response %d from %s (%d bytes)", http_response.status_code, request.url, len(data))
        if http_response.status_code != httpx.codes.OK:
            raise GraphQLHttpError(http_response.status_code, http_response.reason_phrase)

        if self._log_func is not None:
            self._log_func(f"request:[{_text(content)}] data:[{_text(data)}]")

        try:
            result = GraphQLResponse.model_validate_json(data)
        except ValidationError as exc:
            raise GraphQLDecodeError(f"graphql decoding error: {exc} response: {_text(data)}", response=data) from exc

        if result.error_entries:
            raise GraphQLResponseError(request=content, errors=result.error_entries)

        try:
            populate(response, result.data)
        except (ValidationError, TypeError, ValueError) as exc:
            raise GraphQLDecodeError(f"graphql decoding error: {exc} response: {_text(data)}", response=data) from exc


def _bind_variables(variables: tuple[VariableBinder, ...]) -> dict[str, Any] | None:
    if not variables:
        return None
    bound: dict[str, Any] = {}
    for variable in variables:
        variable(bound)
    return bound


def _read_body(body: RequestBody) -> bytes:
    if isinstance(body, (bytes, bytearray, memoryview)):
        return bytes(body)
    if isinstance(body, str):
        return body.encode("utf-8")
    read: Callable[[], bytes | str] | None = getattr(body, "read", None)
    if read is None:
        raise TypeError(f"unsupported request body type: {type(body).__name__}")
    chunk = read()
    return chunk.encode("utf-8") if isinstance(chunk, str) else bytes(chunk)


def _text(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")
