"""
Core message, part, and request types for the chat-completion adapter.

These primitives are provider-agnostic: callers build conversations out of
them, and the adapter emits the same part types back while streaming.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Union

if TYPE_CHECKING:
    from .tools import Tool


class Role(str, Enum):
    """Conversation role."""

    USER = "user"
    MODEL = "model"


@dataclass(frozen=True)
class Text:
    """A run of text, either written by the caller or streamed by the model."""

    text: str


@dataclass(frozen=True)
class ToolCall:
    """A request from the model to invoke a named tool with structured args."""

    id: str
    name: str
    args: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ToolResult:
    """
    The outcome of a tool call, sent back to the model in a follow-up request.

    When ``error`` is set, its string form replaces ``content`` on the wire and
    the result is flagged as an error.
    """

    id: str
    content: str = ""
    error: Optional[BaseException] = None


MessagePart = Union[Text, ToolCall, ToolResult]


@dataclass
class Message:
    """A conversation turn: a role plus an ordered list of parts."""

    role: Role
    parts: List[MessagePart] = field(default_factory=list)

    @classmethod
    def user_text(cls, text: str) -> "Message":
        return cls(role=Role.USER, parts=[Text(text)])

    @classmethod
    def model_text(cls, text: str) -> "Message":
        return cls(role=Role.MODEL, parts=[Text(text)])

    @classmethod
    def user_tool_result(cls, result: ToolResult) -> "Message":
        return cls(role=Role.USER, parts=[result])

    @property
    def text(self) -> str:
        """Concatenated text of all text parts, ignoring tool parts."""
        return "".join(part.text for part in self.parts if isinstance(part, Text))

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain-JSON-safe representation for logging or debugging."""
        parts: List[Dict[str, Any]] = []
        for part in self.parts:
            if isinstance(part, Text):
                parts.append({"type": "text", "text": part.text})
            elif isinstance(part, ToolCall):
                parts.append({"type": "tool_call", "id": part.id, "name": part.name, "args": part.args})
            elif isinstance(part, ToolResult):
                parts.append(
                    {
                        "type": "tool_result",
                        "id": part.id,
                        "content": part.content,
                        "error": str(part.error) if part.error is not None else None,
                    }
                )
        role = self.role.value if isinstance(self.role, Role) else str(self.role)
        return {"role": role, "parts": parts}


@dataclass
class ChatCompleteRequest:
    """
    A single chat-completion request.

    Attributes:
        messages: Conversation so far. Must not be empty.
        tools: Tools the model may call. Names must be unique.
        temperature: Optional sampling temperature in [0, 1].
        system: Optional system prompt.
    """

    messages: List[Message]
    tools: List["Tool"] = field(default_factory=list)
    temperature: Optional[float] = None
    system: Optional[str] = None


__all__ = [
    "Role",
    "Text",
    "ToolCall",
    "ToolResult",
    "MessagePart",
    "Message",
    "ChatCompleteRequest",
]
