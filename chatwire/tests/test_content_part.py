"""Unit tests for the content part model."""
from __future__ import annotations

import pytest

from chatwire.base.models import ContentPart, ContentType, image_part, text_part


def test_text_part_wire_object_carries_only_text():
    assert text_part("hi").to_dict() == {"type": "text", "text": "hi"}


def test_image_part_wire_object_carries_only_url():
    part = image_part("https://example.invalid/cat.png")
    assert part.to_dict() == {"type": "image_url", "image_url": "https://example.invalid/cat.png"}
    assert not part.is_text()


def test_empty_text_is_still_emitted():
    assert text_part("").to_dict() == {"type": "text", "text": ""}


def test_content_type_values_match_wire_discriminators():
    assert ContentType.TEXT.value == "text"
    assert ContentType.IMAGE_URL.value == "image_url"


def test_parts_are_frozen_and_comparable():
    part = text_part("a")
    assert part == ContentPart(type=ContentType.TEXT, text="a")
    with pytest.raises(AttributeError):
        part.text = "b"  # type: ignore[misc]
