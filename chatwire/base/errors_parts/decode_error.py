"""Response decoding error.

Raised when a wire value cannot be mapped onto the typed models: message
content that is neither a string nor an array of recognized part objects,
malformed JSON bodies, or envelope fields with the wrong shape.
"""
from __future__ import annotations

from dataclasses import dataclass

from .client_error import ClientError
from .error_code import ErrorCode


@dataclass
class DecodeError(ClientError):
    """The wire payload has a shape the client does not understand."""

    code: ErrorCode = ErrorCode.DECODE


__all__ = ["DecodeError"]
