"""
Pydantic DTOs validating the wire shapes returned by the chat endpoint.

Purpose
-------
The typed models in ``chatwire.base.models`` are plain frozen dataclasses.
Decoding first validates the raw JSON against the DTOs below so that shape
problems (unknown part discriminator, missing required field, wrong scalar
type) are caught in one place and surface as a single ``DecodeError``.

External dependencies: Pydantic only (no network calls).

Design
------
- Every DTO mirrors a dataclass in ``chatwire.base.models`` but with
  validation; conversion lives on the dataclasses.
- Message ``content`` is deliberately typed ``Any``: its string-or-array
  polymorphism is resolved by the parts codec, not by a union here.
- Unknown keys are ignored so new server fields do not break decoding.
"""

from __future__ import annotations

from typing import Annotated, Any, List, Literal, Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


Role = Literal["system", "user", "assistant", "function", "tool"]


class TextPartDTO(BaseModel):
    """Array element ``{"type": "text", "text": ...}``; ``text`` is required."""

    model_config = ConfigDict(frozen=True)

    type: Literal["text"]
    text: StrictStr


class ImagePartDTO(BaseModel):
    """Array element ``{"type": "image_url", "image_url": ...}``; ``image_url`` is required."""

    model_config = ConfigDict(frozen=True)

    type: Literal["image_url"]
    image_url: StrictStr


# Discriminated on ``type``: an unrecognized value fails validation outright
# instead of being matched against every member.
ContentPartDTO = Annotated[Union[TextPartDTO, ImagePartDTO], Field(discriminator="type")]


class FunctionCallDTO(BaseModel):
    """Function call descriptor; ``arguments`` is a JSON-encoded string."""

    name: StrictStr = ""
    arguments: StrictStr = ""


class ToolCallDTO(BaseModel):
    """Tool call descriptor attached to assistant messages."""

    id: StrictStr = ""
    type: StrictStr = "function"
    function: FunctionCallDTO = Field(default_factory=FunctionCallDTO)


class MessageDTO(BaseModel):
    """A chat message as returned by the server.

    ``content`` may be a string, an array of parts, or ``null``/absent for
    assistant messages that only carry tool calls.
    """

    role: Role
    content: Any = None
    name: Optional[StrictStr] = None
    function_call: Optional[FunctionCallDTO] = None
    tool_calls: Optional[List[ToolCallDTO]] = None
    tool_call_id: Optional[StrictStr] = None


class UsageDTO(BaseModel):
    prompt_tokens: StrictInt = 0
    completion_tokens: StrictInt = 0
    total_tokens: StrictInt = 0


class FilterResultDTO(BaseModel):
    filtered: StrictBool = False
    severity: StrictStr = ""


class ContentFilterResultsDTO(BaseModel):
    hate: FilterResultDTO = Field(default_factory=FilterResultDTO)
    self_harm: FilterResultDTO = Field(default_factory=FilterResultDTO)
    sexual: FilterResultDTO = Field(default_factory=FilterResultDTO)
    violence: FilterResultDTO = Field(default_factory=FilterResultDTO)


class PromptAnnotationDTO(BaseModel):
    prompt_index: StrictInt = 0
    content_filter_results: ContentFilterResultsDTO = Field(default_factory=ContentFilterResultsDTO)


class ChoiceDTO(BaseModel):
    index: StrictInt = 0
    message: MessageDTO
    finish_reason: Optional[StrictStr] = None
    content_filter_results: Optional[ContentFilterResultsDTO] = None


class ChatCompletionResponseDTO(BaseModel):
    """Top-level chat completion response body.

    Azure deployments have reported prompt filtering under both
    ``prompt_annotations`` and ``prompt_filter_results``; either is accepted.
    """

    id: StrictStr = ""
    object: StrictStr = ""
    created: StrictInt = 0
    model: StrictStr = ""
    choices: List[ChoiceDTO] = Field(default_factory=list)
    usage: UsageDTO = Field(default_factory=UsageDTO)
    prompt_annotations: List[PromptAnnotationDTO] = Field(
        default_factory=list,
        validation_alias=AliasChoices("prompt_annotations", "prompt_filter_results"),
    )


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
]
