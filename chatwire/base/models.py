"""
Typed chat models public surface.

This module re-exports the one-class-per-file implementations under
``chatwire.base.models_parts``: content parts and their codec, chat messages,
tool descriptors, and the request/response envelopes.
"""

from .models_parts.content_part import ContentPart, ContentType, image_part, text_part
from .models_parts.parts import Parts, WireContent, decode_parts, encode_parts
from .models_parts.function_call import FunctionCall
from .models_parts.tool import FunctionDefinition, Tool, ToolChoice, ToolType
from .models_parts.tool_call import ToolCall
from .models_parts.message import ChatMessage, Role, assistant, system, user
from .models_parts.response_format import ResponseFormat, ResponseFormatType
from .models_parts.chat_request import ChatCompletionRequest
from .models_parts.chat_response import (
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
    "system",
    "user",
    "assistant",
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
