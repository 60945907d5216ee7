"""
ChatCompletionRequest envelope.

Holds model selection, messages, sampling parameters, and tool definitions.
`to_dict` produces the JSON body, applying the message codec to every message.
Optional fields left at ``None`` (or empty collections, or ``False``) are
omitted from the body; explicit zeros such as ``temperature=0.0`` are sent.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from .message import ChatMessage
from .response_format import ResponseFormat
from .tool import FunctionDefinition, Tool, ToolChoice


@dataclass
class ChatCompletionRequest:
    """Request body for the chat completions endpoint.

    Attributes:
        model: Target model identifier.
        messages: Ordered conversation.
        max_tokens: Completion token cap.
        temperature: Sampling temperature.
        top_p: Nucleus sampling mass.
        n: Number of choices to generate.
        stream: Must stay ``False``; the client rejects streaming requests.
        stop: Stop sequences.
        presence_penalty: Presence penalty.
        frequency_penalty: Frequency penalty.
        response_format: Output format hint.
        seed: Sampling seed for reproducible outputs.
        logit_bias: Token id (as string) to bias; keys are tokenizer ids, not
            words.
        user: End-user identifier for abuse monitoring.
        functions: Deprecated; use ``tools``.
        function_call: Deprecated; use ``tool_choice``. ``"auto"``, ``"none"``
            or ``{"name": ...}``.
        tools: Tools the model may call.
        tool_choice: ``"auto"``, ``"none"`` or a `ToolChoice`.
    """

    model: str
    messages: List[ChatMessage] = field(default_factory=list)
    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    n: Optional[int] = None
    stream: bool = False
    stop: Optional[List[str]] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None
    response_format: Optional[ResponseFormat] = None
    seed: Optional[int] = None
    logit_bias: Optional[Dict[str, int]] = None
    user: Optional[str] = None
    functions: Optional[List[FunctionDefinition]] = None
    function_call: Union[str, Dict[str, Any], None] = None
    tools: Optional[List[Tool]] = None
    tool_choice: Union[str, ToolChoice, None] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON body for this request.

        Raises:
            InvalidMessageError: A message carries conflicting content views.
                Raised before anything is sent.
        """
        body: Dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
        }
        scalars = {
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "top_p": self.top_p,
            "n": self.n,
            "presence_penalty": self.presence_penalty,
            "frequency_penalty": self.frequency_penalty,
            "seed": self.seed,
            "user": self.user,
        }
        body.update({k: v for k, v in scalars.items() if v is not None})
        if self.stream:
            body["stream"] = True
        if self.stop:
            body["stop"] = list(self.stop)
        if self.response_format is not None:
            body["response_format"] = self.response_format.to_dict()
        if self.logit_bias:
            body["logit_bias"] = dict(self.logit_bias)
        if self.functions:
            body["functions"] = [f.to_dict() for f in self.functions]
        if self.function_call is not None:
            body["function_call"] = self.function_call
        if self.tools:
            body["tools"] = [t.to_dict() for t in self.tools]
        if self.tool_choice is not None:
            body["tool_choice"] = (
                self.tool_choice.to_dict() if isinstance(self.tool_choice, ToolChoice) else self.tool_choice
            )
        return body


__all__ = [
    "ChatCompletionRequest",
]
