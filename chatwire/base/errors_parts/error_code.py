"""
Normalized client error codes (taxonomy).

Defines the `ErrorCode` enumeration attached to every `ClientError`. Values are
lowercase snake_case and are considered a stable public contract for logging
and analytics. The first four codes describe failures detected by the client
itself before or after the network call; the rest classify transport failures.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    DECODE = "decode"
    INVALID_MESSAGE = "invalid_message"
    STREAM_UNSUPPORTED = "stream_unsupported"
    UNSUPPORTED_MODEL = "unsupported_model"
    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
