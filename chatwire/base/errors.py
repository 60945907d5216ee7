"""Unified client error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``chatwire.base.errors_parts`` to maintain a stable import path while
enforcing the one-class-per-file governance rule.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.client_error import ClientError
from .errors_parts.decode_error import DecodeError
from .errors_parts.invalid_message_error import InvalidMessageError
from .errors_parts.stream_not_supported_error import StreamNotSupportedError
from .errors_parts.unsupported_model_error import UnsupportedModelError
from .errors_parts.transport_error import TransportError
from .errors_parts.classification import classify_exception, status_to_code

__all__ = [
    "ErrorCode",
    "ClientError",
    "DecodeError",
    "InvalidMessageError",
    "StreamNotSupportedError",
    "UnsupportedModelError",
    "TransportError",
    "classify_exception",
    "status_to_code",
]
