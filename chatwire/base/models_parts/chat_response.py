"""
ChatCompletionResponse envelope and its nested records.

`ChatCompletionResponse.from_dict` validates the body against the wire DTOs and
decodes every returned message through the message codec. ``headers`` carries
the HTTP response headers handed over by the transport (rate-limit counters,
request ids).
"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import TypeAdapter

from ..dto import ChatCompletionResponseDTO, ContentFilterResultsDTO, parse_wire
from .message import ChatMessage


class FinishReason(str, Enum):
    """Why the model stopped generating.

    ``stop``: natural end or a stop sequence. ``length``: token limit.
    ``function_call``/``tool_calls``: the model wants a call executed.
    ``content_filter``: content omitted by a filter. ``null``: still in
    progress or incomplete.
    """

    STOP = "stop"
    LENGTH = "length"
    FUNCTION_CALL = "function_call"
    TOOL_CALLS = "tool_calls"
    CONTENT_FILTER = "content_filter"
    NULL = "null"


def _finish_reason(raw: Optional[str]) -> Union[FinishReason, str, None]:
    # Unknown values are kept verbatim so new server reasons do not fail decoding.
    if raw is None:
        return None
    try:
        return FinishReason(raw)
    except ValueError:
        return raw


@dataclass(frozen=True)
class Usage:
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "prompt_tokens": self.prompt_tokens,
            "completion_tokens": self.completion_tokens,
            "total_tokens": self.total_tokens,
        }


@dataclass(frozen=True)
class FilterResult:
    filtered: bool = False
    severity: str = ""


@dataclass(frozen=True)
class ContentFilterResults:
    """Per-category moderation verdicts reported by Azure deployments."""

    hate: FilterResult = FilterResult()
    self_harm: FilterResult = FilterResult()
    sexual: FilterResult = FilterResult()
    violence: FilterResult = FilterResult()

    @classmethod
    def from_dto(cls, dto: Optional[ContentFilterResultsDTO]) -> Optional["ContentFilterResults"]:
        if dto is None:
            return None
        return cls(
            hate=FilterResult(dto.hate.filtered, dto.hate.severity),
            self_harm=FilterResult(dto.self_harm.filtered, dto.self_harm.severity),
            sexual=FilterResult(dto.sexual.filtered, dto.sexual.severity),
            violence=FilterResult(dto.violence.filtered, dto.violence.severity),
        )


@dataclass(frozen=True)
class PromptAnnotation:
    prompt_index: int = 0
    content_filter_results: ContentFilterResults = ContentFilterResults()


@dataclass(frozen=True)
class ChatCompletionChoice:
    index: int
    message: ChatMessage
    finish_reason: Union[FinishReason, str, None] = None
    content_filter_results: Optional[ContentFilterResults] = None


_RESPONSE_ADAPTER: TypeAdapter[ChatCompletionResponseDTO] = TypeAdapter(ChatCompletionResponseDTO)


@dataclass
class ChatCompletionResponse:
    """Decoded chat completion response.

    Attributes:
        id: Server-assigned completion id.
        object: Object type tag (``"chat.completion"``).
        created: Unix timestamp.
        model: Model that served the request.
        choices: Generated choices in index order.
        usage: Token accounting.
        prompt_annotations: Prompt moderation results (Azure only).
        headers: HTTP response headers from the transport.
    """

    id: str = ""
    object: str = ""
    created: int = 0
    model: str = ""
    choices: List[ChatCompletionChoice] = field(default_factory=list)
    usage: Usage = field(default_factory=Usage)
    prompt_annotations: List[PromptAnnotation] = field(default_factory=list)
    headers: Dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any, headers: Optional[Mapping[str, str]] = None) -> "ChatCompletionResponse":
        """Decode a response body.

        Raises:
            DecodeError: The body or any message in it has an unexpected shape.
        """
        dto = parse_wire(_RESPONSE_ADAPTER, data, "chat completion response")
        choices = [
            ChatCompletionChoice(
                index=c.index,
                message=ChatMessage.from_dto(c.message),
                finish_reason=_finish_reason(c.finish_reason),
                content_filter_results=ContentFilterResults.from_dto(c.content_filter_results),
            )
            for c in dto.choices
        ]
        annotations = [
            PromptAnnotation(
                prompt_index=a.prompt_index,
                content_filter_results=ContentFilterResults.from_dto(a.content_filter_results)
                or ContentFilterResults(),
            )
            for a in dto.prompt_annotations
        ]
        return cls(
            id=dto.id,
            object=dto.object,
            created=dto.created,
            model=dto.model,
            choices=choices,
            usage=Usage(
                prompt_tokens=dto.usage.prompt_tokens,
                completion_tokens=dto.usage.completion_tokens,
                total_tokens=dto.usage.total_tokens,
            ),
            prompt_annotations=annotations,
            headers=dict(headers or {}),
        )

    def first_message(self) -> Optional[ChatMessage]:
        """Return the message of the first choice, if any."""
        return self.choices[0].message if self.choices else None

    def finish_reasons(self) -> List[Optional[str]]:
        """Return the finish reason of each choice as a plain string (``None`` for null)."""
        out: List[Optional[str]] = []
        for c in self.choices:
            reason = c.finish_reason
            if reason is None or reason == FinishReason.NULL:
                out.append(None)
            else:
                out.append(reason.value if isinstance(reason, FinishReason) else reason)
        return out


__all__ = [
    "FinishReason",
    "Usage",
    "FilterResult",
    "ContentFilterResults",
    "PromptAnnotation",
    "ChatCompletionChoice",
    "ChatCompletionResponse",
]
