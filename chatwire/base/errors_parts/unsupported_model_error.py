"""Model not served by the chat completions endpoint."""
from __future__ import annotations

from dataclasses import dataclass

from ..constants import ERR_UNSUPPORTED_MODEL
from .client_error import ClientError
from .error_code import ErrorCode


@dataclass
class UnsupportedModelError(ClientError):
    """The target model is not compatible with the requested endpoint."""

    message: str = ERR_UNSUPPORTED_MODEL
    code: ErrorCode = ErrorCode.UNSUPPORTED_MODEL


__all__ = ["UnsupportedModelError"]
