"""Validation entry point turning pydantic failures into ``DecodeError``.

Adapters are built once at import time; ``parse_wire`` is the only place the
codec layer touches pydantic's exception type.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..errors import DecodeError

T = TypeVar("T")


def parse_wire(adapter: TypeAdapter[T], value: Any, what: str) -> T:
    """Validate ``value`` with ``adapter`` or raise ``DecodeError``.

    Parameters:
        adapter: Prebuilt pydantic ``TypeAdapter`` for the expected shape.
        value: Decoded JSON value (dict, list, str, ...).
        what: Short noun used in the error message, e.g. ``"content part"``.

    Raises:
        DecodeError: The value does not match; ``raw`` carries the pydantic
            ``ValidationError``.
    """
    try:
        return adapter.validate_python(value)
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else {}
        loc = ".".join(str(p) for p in first.get("loc", ())) or "<root>"
        raise DecodeError(f"invalid {what} at {loc}: {first.get('msg', 'validation failed')}", raw=e) from e


__all__ = ["parse_wire"]
