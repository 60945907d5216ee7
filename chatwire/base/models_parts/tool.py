"""
Tool and function definitions sent with a chat request.

`FunctionDefinition` describes a callable the model may invoke; `Tool` wraps it
for the tools API and `ToolChoice` forces a specific function. The deprecated
``functions`` request field takes bare `FunctionDefinition` objects.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ToolType(str, Enum):
    FUNCTION = "function"


@dataclass(frozen=True)
class FunctionDefinition:
    """A function the model may call.

    Attributes:
        name: Function name.
        description: Optional human-readable description.
        parameters: JSON-serializable JSON Schema object describing the
            arguments. Always emitted, as ``null`` when unset.
    """

    name: str
    description: str = ""
    parameters: Any = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"name": self.name}
        if self.description:
            out["description"] = self.description
        out["parameters"] = self.parameters
        return out


@dataclass(frozen=True)
class Tool:
    function: FunctionDefinition
    type: ToolType = ToolType.FUNCTION

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "function": self.function.to_dict()}


@dataclass(frozen=True)
class ToolChoice:
    """Force the model to call ``function_name``."""

    function_name: str
    type: ToolType = ToolType.FUNCTION

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type.value, "function": {"name": self.function_name}}


__all__ = [
    "ToolType",
    "FunctionDefinition",
    "Tool",
    "ToolChoice",
]
