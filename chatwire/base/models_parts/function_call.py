"""Function call descriptor carried by assistant messages (legacy functions API)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from pydantic import TypeAdapter

from ..dto import FunctionCallDTO, parse_wire

_ADAPTER: TypeAdapter[FunctionCallDTO] = TypeAdapter(FunctionCallDTO)


@dataclass(frozen=True)
class FunctionCall:
    """A function invocation suggested by the model.

    Attributes:
        name: Function name.
        arguments: Call arguments as a JSON-encoded string; the client does
            not parse it.
    """

    name: str = ""
    arguments: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Return the wire object, omitting empty fields."""
        out: Dict[str, Any] = {}
        if self.name:
            out["name"] = self.name
        if self.arguments:
            out["arguments"] = self.arguments
        return out

    @classmethod
    def from_dto(cls, dto: Optional[FunctionCallDTO]) -> Optional["FunctionCall"]:
        if dto is None:
            return None
        return cls(name=dto.name, arguments=dto.arguments)

    @classmethod
    def from_dict(cls, data: Any) -> "FunctionCall":
        return cls.from_dto(parse_wire(_ADAPTER, data, "function call"))


__all__ = ["FunctionCall"]
