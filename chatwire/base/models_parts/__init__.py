"""Models parts package public surface.

Re-exports individual models so callers can import from
`chatwire.base.models_parts` if needed, while `chatwire.base.models` remains
the primary stable import path.
"""

from .content_part import ContentPart, ContentType, image_part, text_part
from .parts import Parts, WireContent, decode_parts, encode_parts
from .function_call import FunctionCall
from .tool import FunctionDefinition, Tool, ToolChoice, ToolType
from .tool_call import ToolCall
from .message import ChatMessage, Role
from .response_format import ResponseFormat, ResponseFormatType
from .chat_request import ChatCompletionRequest
from .chat_response import (
    ChatCompletionChoice,
    ChatCompletionResponse,
    ContentFilterResults,
    FilterResult,
    FinishReason,
    PromptAnnotation,
    Usage,
)

__all__ = [
    "ContentPart",
    "ContentType",
    "text_part",
    "image_part",
    "Parts",
    "WireContent",
    "encode_parts",
    "decode_parts",
    "FunctionCall",
    "ToolCall",
    "ToolType",
    "FunctionDefinition",
    "Tool",
    "ToolChoice",
    "Role",
    "ChatMessage",
    "ResponseFormatType",
    "ResponseFormat",
    "ChatCompletionRequest",
    "FinishReason",
    "Usage",
    "FilterResult",
    "ContentFilterResults",
    "PromptAnnotation",
    "ChatCompletionChoice",
    "ChatCompletionResponse",
]
