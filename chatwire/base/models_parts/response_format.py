"""Response format hint for chat requests."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class ResponseFormatType(str, Enum):
    JSON_OBJECT = "json_object"
    TEXT = "text"


@dataclass(frozen=True)
class ResponseFormat:
    type: ResponseFormatType = ResponseFormatType.TEXT

    def to_dict(self) -> Dict[str, Any]:
        return {"type": ResponseFormatType(self.type).value}


__all__ = ["ResponseFormatType", "ResponseFormat"]
