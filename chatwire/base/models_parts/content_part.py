"""
Content part model for chat messages.

This module defines the `ContentPart` dataclass and its `ContentType`
discriminator. A message's content is an ordered sequence of parts; each part
is either text or an image reference. The dataclass is frozen so a part can be
shared freely between requests and threads.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ContentType(str, Enum):
    """Wire discriminator values for content parts."""

    TEXT = "text"
    IMAGE_URL = "image_url"


@dataclass(frozen=True)
class ContentPart:
    """A single unit of message content.

    Attributes:
        type: Which kind of part this is; selects the meaningful field.
        text: Text payload, meaningful only for ``ContentType.TEXT``.
        image_url: Image reference (URL or data URI), meaningful only for
            ``ContentType.IMAGE_URL``.

    Empty strings are accepted for either field. Prefer the ``text_part`` and
    ``image_part`` constructors over building instances directly.
    """

    type: ContentType
    text: str = ""
    image_url: str = ""

    def is_text(self) -> bool:
        """Return True for text parts."""
        return self.type is ContentType.TEXT

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire object for this part.

        Only the field belonging to the part's kind is emitted. Text parts
        always carry ``text``, even when it is empty, so the array form decodes
        back to the same part.
        """
        if self.is_text():
            return {"type": ContentType.TEXT.value, "text": self.text}
        return {"type": ContentType.IMAGE_URL.value, "image_url": self.image_url}


def text_part(text: str) -> ContentPart:
    """Build a text part."""
    return ContentPart(type=ContentType.TEXT, text=text)


def image_part(url: str) -> ContentPart:
    """Build an image part referencing ``url``."""
    return ContentPart(type=ContentType.IMAGE_URL, image_url=url)


__all__ = [
    "ContentType",
    "ContentPart",
    "text_part",
    "image_part",
]
