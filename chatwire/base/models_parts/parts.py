"""
Parts sequence and its wire codec.

A message's ``content`` travels in one of two shapes: a bare JSON string or a
JSON array of part objects. In memory it is always a `Parts` sequence; the
string/array ambiguity is confined to `encode_parts` and `decode_parts`.

Collapse rule
-------------
A sequence holding exactly one text part is wire-equivalent to the bare string
of its text. The empty sequence is the empty string. A single text part whose
text is empty also encodes to the empty string, which decodes back to the
empty sequence rather than to that part.

Failure modes
-------------
`decode_parts` raises `DecodeError` for any wire value that is neither a string
nor an array of recognized part objects. `encode_parts` never raises.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import TypeAdapter

from ..dto import ContentPartDTO, TextPartDTO, parse_wire
from ..errors import DecodeError
from .content_part import ContentPart, image_part, text_part

WireContent = Union[str, List[Dict[str, Any]]]

_PART_ADAPTER: TypeAdapter[Any] = TypeAdapter(ContentPartDTO)


class Parts(tuple):
    """Immutable, ordered sequence of `ContentPart` in presentation order."""

    __slots__ = ()

    def __new__(cls, items: Iterable[ContentPart] = ()) -> "Parts":
        return super().__new__(cls, tuple(items))

    def single_text(self) -> Optional[str]:
        """Return the text when the sequence is exactly one text part, else None."""
        if len(self) == 1 and self[0].is_text():
            return self[0].text
        return None

    def __repr__(self) -> str:
        return f"Parts({list(self)!r})"


def encode_parts(parts: Iterable[ContentPart]) -> WireContent:
    """Encode a parts sequence into its wire value.

    Returns:
        ``""`` for an empty sequence, the bare text for a single text part
        (``""`` when that text is empty), otherwise a list of part objects.
    """
    items = list(parts)
    if not items:
        return ""
    if len(items) == 1 and items[0].is_text():
        return items[0].text
    return [p.to_dict() for p in items]


def _part_from_dto(dto: Any) -> ContentPart:
    if isinstance(dto, TextPartDTO):
        return text_part(dto.text)
    return image_part(dto.image_url)


def decode_parts(value: Any) -> Parts:
    """Decode a wire ``content`` value into a parts sequence.

    Parameters:
        value: Already JSON-decoded value of the ``content`` field.

    Returns:
        Empty `Parts` for ``""``; a single text part for any other string; one
        part per element, in order, for an array.

    Raises:
        DecodeError: Unknown discriminator, missing required field, non-object
            array element, or a wire value that is not a string or array.
    """
    if isinstance(value, str):
        if value == "":
            return Parts()
        return Parts([text_part(value)])
    if isinstance(value, list):
        decoded = []
        for idx, element in enumerate(value):
            dto = parse_wire(_PART_ADAPTER, element, f"content part [{idx}]")
            decoded.append(_part_from_dto(dto))
        return Parts(decoded)
    shape = "null" if value is None else type(value).__name__
    raise DecodeError(f"content must be a string or an array of parts, got {shape}")


__all__ = [
    "Parts",
    "WireContent",
    "encode_parts",
    "decode_parts",
]
