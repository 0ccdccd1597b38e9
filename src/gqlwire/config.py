"""Declarative client settings."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from gqlwire.transport import DEFAULT_TIMEOUT

DEFAULT_ENDPOINT = "graphql"


def normalize_url(url: str) -> str:
    return url.rstrip("/") + "/"


class ClientSettings(BaseModel):
    url: str = Field(min_length=1)
    headers: dict[str, str] = Field(default_factory=dict)
    endpoint: str = Field(default=DEFAULT_ENDPOINT, min_length=1)
    timeout: float | None = Field(default=DEFAULT_TIMEOUT, gt=0)

    model_config = {"frozen": True}

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        if not value.strip().rstrip("/"):
            raise ValueError("url must not be empty")
        return normalize_url(value.strip())

    @field_validator("headers")
    @classmethod
    def drop_empty_header_keys(cls, value: dict[str, str]) -> dict[str, str]:
        return {key: item for key, item in value.items() if key}
