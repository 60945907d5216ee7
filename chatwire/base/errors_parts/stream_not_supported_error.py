"""Streaming requested through the non-streaming call path."""
from __future__ import annotations

from dataclasses import dataclass

from ..constants import ERR_STREAM_NOT_SUPPORTED
from .client_error import ClientError
from .error_code import ErrorCode


@dataclass
class StreamNotSupportedError(ClientError):
    """The request asked for ``stream=True``; only complete responses are handled."""

    message: str = ERR_STREAM_NOT_SUPPORTED
    code: ErrorCode = ErrorCode.STREAM_UNSUPPORTED


__all__ = ["StreamNotSupportedError"]
