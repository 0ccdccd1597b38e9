"""In-place binding of decoded ``data`` onto a caller-supplied destination."""

from __future__ import annotations

import dataclasses
from typing import Any

from pydantic import BaseModel, TypeAdapter


def populate(destination: Any, data: Any) -> None:
    """Populate ``destination`` from decoded JSON ``data``.

    Supported destinations are ``dict``, ``list``, pydantic model instances and
    dataclass instances. A ``None`` destination discards the data, and ``None``
    data leaves the destination untouched.

    Raises:
        TypeError: If the destination type is unsupported or the data shape
            does not match a container destination.
        pydantic.ValidationError: If the data does not validate against the
            destination's model or dataclass.
    """
    if destination is None or data is None:
        return

    if isinstance(destination, BaseModel):
        decoded = type(destination).model_validate(data)
        for name in type(destination).model_fields:
            setattr(destination, name, getattr(decoded, name))
        return

    if dataclasses.is_dataclass(destination) and not isinstance(destination, type):
        decoded = TypeAdapter(type(destination)).validate_python(data)
        for field in dataclasses.fields(destination):
            setattr(destination, field.name, getattr(decoded, field.name))
        return

    if isinstance(destination, dict):
        if not isinstance(data, dict):
            raise TypeError(f"cannot decode {type(data).__name__} into dict")
        destination.clear()
        destination.update(data)
        return

    if isinstance(destination, list):
        if not isinstance(data, list):
            raise TypeError(f"cannot decode {type(data).__name__} into list")
        destination[:] = data
        return

    raise TypeError(f"unsupported destination type: {type(destination).__name__}")
