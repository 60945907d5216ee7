"""chatwire package

Typed client binding for chat completion HTTP APIs.

Purpose:
    Provide a small, stable API for building chat completion requests whose
    message content is either plain text or an ordered list of text and image
    parts, sending them with a single HTTP call, and decoding the answer into
    the same typed models.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`ChatClient`, :class:`DefaultModelCompatibility`
    - Models: :class:`ChatMessage`, :class:`ContentPart`, :class:`Parts`,
      request/response envelopes and tool descriptors
    - Codec: :func:`encode_parts`, :func:`decode_parts`
    - Exceptions: :class:`ClientError` and subclasses, :class:`ErrorCode`
    - Collaborators: :class:`Transport`, :class:`HttpxTransport`,
      :class:`CancellationToken`
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import (
    ClientError,
    DecodeError,
    ErrorCode,
    InvalidMessageError,
    StreamNotSupportedError,
    TransportError,
    UnsupportedModelError,
)
from .base.http import HttpxTransport
from .base.interfaces import ModelCompatibility, Transport, TransportResponse
from .base.models import (
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
from .openai import ChatClient, DefaultModelCompatibility

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Client
    "ChatClient",
    "DefaultModelCompatibility",
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
    # Exceptions
    "ErrorCode",
    "ClientError",
    "DecodeError",
    "InvalidMessageError",
    "StreamNotSupportedError",
    "UnsupportedModelError",
    "TransportError",
    # Collaborators
    "Transport",
    "TransportResponse",
    "ModelCompatibility",
    "HttpxTransport",
    "CancellationToken",
    "CancelledError",
]
