"""
Chat message model with a flat-text view and a structured-parts view.

Both views describe the same wire slot, ``content``. Callers set whichever is
convenient: ``content`` for plain text, ``parts`` for mixed or image content.
`ChatMessage.to_dict` reconciles the two before encoding and
`ChatMessage.from_dict` derives the flat view from the decoded parts, so the
two never silently diverge.

Encode precedence (evaluated in order):
    1. ``content`` set and ``parts`` is exactly ``[text_part(content)]``:
       encode ``parts``.
    2. ``content`` set and ``parts`` set to anything else:
       raise ``InvalidMessageError``.
    3. ``content`` set and ``parts`` empty: encode ``[text_part(content)]``.
    4. Otherwise: encode ``parts`` as-is (empty encodes to ``""``).

Rule 1 runs before rule 2 so a decoded message, which mirrors its single text
part into ``content``, re-encodes without error.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Optional, Tuple

from pydantic import TypeAdapter

from ..constants import ERR_PARTS_CONFLICT
from ..dto import MessageDTO, parse_wire
from ..errors import InvalidMessageError
from .content_part import text_part
from .function_call import FunctionCall
from .parts import Parts, decode_parts, encode_parts
from .tool_call import ToolCall


class Role(str, Enum):
    """Message author roles understood by the chat endpoint."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"
    FUNCTION = "function"
    TOOL = "tool"


_MESSAGE_ADAPTER: TypeAdapter[MessageDTO] = TypeAdapter(MessageDTO)


@dataclass(frozen=True)
class ChatMessage:
    """A single chat message.

    Attributes:
        role: Author role; plain strings are coerced to `Role`.
        content: Flat text view. Set this for plain-text messages.
        parts: Structured view. Set this for image or multi-part content.
            Lists are coerced to `Parts`.
        name: Optional author name (function name for ``function`` role).
        function_call: Legacy function call requested by the model.
        tool_calls: Tool calls requested by the model.
        tool_call_id: Id of the tool call a ``tool`` role message answers.

    Instances are immutable; build a new message to represent an edit.
    """

    role: Role
    content: str = ""
    parts: Parts = Parts()
    name: Optional[str] = None
    function_call: Optional[FunctionCall] = None
    tool_calls: Tuple[ToolCall, ...] = ()
    tool_call_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "role", Role(self.role))
        if not isinstance(self.parts, Parts):
            object.__setattr__(self, "parts", Parts(self.parts))
        if not isinstance(self.tool_calls, tuple):
            object.__setattr__(self, "tool_calls", tuple(self.tool_calls))

    def canonical_parts(self) -> Parts:
        """Return the reconciled parts sequence that will be sent.

        Raises:
            InvalidMessageError: ``content`` and ``parts`` are both set and
                disagree.
        """
        if not self.content:
            return self.parts
        if self.parts.single_text() == self.content:
            return self.parts
        if self.parts:
            raise InvalidMessageError(ERR_PARTS_CONFLICT)
        return Parts([text_part(self.content)])

    def to_dict(self) -> Dict[str, Any]:
        """Encode the message into its wire object.

        ``role`` and ``content`` are always present; the remaining keys only
        when set.

        Raises:
            InvalidMessageError: See :meth:`canonical_parts`.
        """
        out: Dict[str, Any] = {
            "role": self.role.value,
            "content": encode_parts(self.canonical_parts()),
        }
        if self.name:
            out["name"] = self.name
        if self.function_call is not None:
            out["function_call"] = self.function_call.to_dict()
        if self.tool_calls:
            out["tool_calls"] = [tc.to_dict() for tc in self.tool_calls]
        if self.tool_call_id:
            out["tool_call_id"] = self.tool_call_id
        return out

    @classmethod
    def from_dto(cls, dto: MessageDTO) -> "ChatMessage":
        parts = Parts() if dto.content is None else decode_parts(dto.content)
        return cls(
            role=Role(dto.role),
            content=parts.single_text() or "",
            parts=parts,
            name=dto.name,
            function_call=FunctionCall.from_dto(dto.function_call),
            tool_calls=tuple(ToolCall.from_dto(tc) for tc in dto.tool_calls or ()),
            tool_call_id=dto.tool_call_id,
        )

    @classmethod
    def from_dict(cls, data: Any) -> "ChatMessage":
        """Decode a wire message object.

        ``parts`` always reflects what the wire carried; ``content`` is the
        text of a lone text part and ``""`` otherwise. A missing or ``null``
        ``content`` decodes to empty parts.

        Raises:
            DecodeError: Not an object, missing or unknown ``role``, or a
                malformed ``content``.
        """
        return cls.from_dto(parse_wire(_MESSAGE_ADAPTER, data, "message"))

    def text(self) -> str:
        """Return a plain-text preview: the flat view, else joined text parts."""
        if self.content:
            return self.content
        return "\n".join(p.text for p in self.parts if p.is_text())


def system(content: str) -> ChatMessage:
    return ChatMessage(role=Role.SYSTEM, content=content)


def user(content: str = "", parts: Iterable[Any] = ()) -> ChatMessage:
    return ChatMessage(role=Role.USER, content=content, parts=Parts(parts))


def assistant(content: str) -> ChatMessage:
    return ChatMessage(role=Role.ASSISTANT, content=content)


__all__ = [
    "Role",
    "ChatMessage",
    "system",
    "user",
    "assistant",
]
