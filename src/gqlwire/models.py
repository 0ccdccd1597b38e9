"""Wire models for GraphQL requests and responses."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


def _reject_constant(token: str) -> float:
    raise ValueError(f"unsupported value: {token}")


class GraphQLRequest(BaseModel):
    """Operation envelope sent as the POST body."""

    query: str
    variables: dict[str, Any] | None = None

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="constants")

    def to_bytes(self) -> bytes:
        """Serialize to compact JSON.

        Raises:
            ValueError: If a variable holds NaN or an infinity, which JSON
                cannot represent.
        """
        raw = self.model_dump_json()
        json.loads(raw, parse_constant=_reject_constant)
        return raw.encode("utf-8")


class GraphQLErrorEntry(BaseModel):
    """One entry of a response's ``errors`` array."""

    message: str = ""
    locations: list[dict[str, Any]] | None = None
    path: list[str | int] | None = None
    extensions: dict[str, Any] | None = None

    model_config = ConfigDict(extra="allow")

    @field_validator("message", mode="before")
    @classmethod
    def null_message_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class GraphQLResponse(BaseModel):
    """Decoded response body.

    ``data`` is kept undecoded here and bound onto the caller's destination
    afterwards by :func:`gqlwire.destination.populate`.
    """

    data: Any = None
    errors: list[GraphQLErrorEntry] | None = Field(default=None)

    @property
    def error_entries(self) -> list[GraphQLErrorEntry]:
        return self.errors or []
