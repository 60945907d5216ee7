"""Wire validation DTOs for decoding server responses."""

from .chat import (
    Role,
    TextPartDTO,
    ImagePartDTO,
    ContentPartDTO,
    FunctionCallDTO,
    ToolCallDTO,
    MessageDTO,
    UsageDTO,
    FilterResultDTO,
    ContentFilterResultsDTO,
    PromptAnnotationDTO,
    ChoiceDTO,
    ChatCompletionResponseDTO,
)
from .wire import parse_wire

__all__ = [
    "Role",
    "TextPartDTO",
    "ImagePartDTO",
    "ContentPartDTO",
    "FunctionCallDTO",
    "ToolCallDTO",
    "MessageDTO",
    "UsageDTO",
    "FilterResultDTO",
    "ContentFilterResultsDTO",
    "PromptAnnotationDTO",
    "ChoiceDTO",
    "ChatCompletionResponseDTO",
    "parse_wire",
]
