"""
Base package.

Exports the typed chat models and their wire codecs, the error taxonomy, the
collaborator contracts, and the default HTTP transport:

- Models: content parts, parts codec, chat messages, request/response envelopes
- Errors: ``ClientError`` hierarchy and ``ErrorCode``
- Interfaces: ``Transport`` and ``ModelCompatibility`` protocols
- Infrastructure: pooled ``httpx`` transport, timeouts, cancellation
"""

from .errors import (
    ClientError,
    DecodeError,
    ErrorCode,
    InvalidMessageError,
    StreamNotSupportedError,
    TransportError,
    UnsupportedModelError,
    classify_exception,
)
from .models import (
    ChatCompletionChoice,
    ChatCompletionRequest,
    ChatCompletionResponse,
    ChatMessage,
    ContentPart,
    ContentType,
    FinishReason,
    FunctionCall,
    FunctionDefinition,
    Parts,
    ResponseFormat,
    ResponseFormatType,
    Role,
    Tool,
    ToolCall,
    ToolChoice,
    Usage,
    decode_parts,
    encode_parts,
    image_part,
    text_part,
)
from .interfaces import ModelCompatibility, Transport, TransportResponse
from .timeouts import TimeoutConfig, get_timeout_config
from .cancellation import CancellationToken, CancelledError
from .http import HttpxTransport

__all__ = [
    # Models
    "ContentType",
    "ContentPart",
    "text_part",
    "image_part",
    "Parts",
    "encode_parts",
    "decode_parts",
    "Role",
    "ChatMessage",
    "FunctionCall",
    "ToolCall",
    "FunctionDefinition",
    "Tool",
    "ToolChoice",
    "ResponseFormat",
    "ResponseFormatType",
    "ChatCompletionRequest",
    "ChatCompletionResponse",
    "ChatCompletionChoice",
    "FinishReason",
    "Usage",
    # Errors
    "ErrorCode",
    "ClientError",
    "DecodeError",
    "InvalidMessageError",
    "StreamNotSupportedError",
    "UnsupportedModelError",
    "TransportError",
    "classify_exception",
    # Interfaces
    "Transport",
    "TransportResponse",
    "ModelCompatibility",
    # Infrastructure
    "HttpxTransport",
    "TimeoutConfig",
    "get_timeout_config",
    "CancellationToken",
    "CancelledError",
]
