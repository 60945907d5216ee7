"""Tool call descriptor carried by assistant messages."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from pydantic import TypeAdapter

from ..dto import ToolCallDTO, parse_wire
from .function_call import FunctionCall
from .tool import ToolType

_ADAPTER: TypeAdapter[ToolCallDTO] = TypeAdapter(ToolCallDTO)


@dataclass(frozen=True)
class ToolCall:
    """A tool invocation requested by the model; echo ``id`` in the tool reply."""

    id: str
    function: FunctionCall = field(default_factory=FunctionCall)
    type: str = ToolType.FUNCTION.value

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "type": self.type, "function": self.function.to_dict()}

    @classmethod
    def from_dto(cls, dto: ToolCallDTO) -> "ToolCall":
        return cls(
            id=dto.id,
            type=dto.type,
            function=FunctionCall(name=dto.function.name, arguments=dto.function.arguments),
        )

    @classmethod
    def from_dict(cls, data: Any) -> "ToolCall":
        return cls.from_dto(parse_wire(_ADAPTER, data, "tool call"))


__all__ = ["ToolCall"]
