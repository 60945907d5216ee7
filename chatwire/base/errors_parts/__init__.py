"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `chatwire.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .client_error import ClientError
from .decode_error import DecodeError
from .invalid_message_error import InvalidMessageError
from .stream_not_supported_error import StreamNotSupportedError
from .unsupported_model_error import UnsupportedModelError
from .transport_error import TransportError
from .classification import classify_exception, status_to_code

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
