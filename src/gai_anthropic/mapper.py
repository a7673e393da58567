"""
Translation between generic chat requests and Anthropic Messages API params.

Everything here is pure: no network, no logging. A request that cannot be
translated is rejected with InvalidRequestError before anything is sent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .exceptions import InvalidRequestError
from .types import ChatCompleteRequest, Message, MessagePart, Role, Text, ToolCall, ToolResult

Param = Dict[str, Any]

_ROLE_TO_WIRE = {
    Role.USER: "user",
    Role.MODEL: "assistant",
}
_WIRE_TO_ROLE = {wire: role for role, wire in _ROLE_TO_WIRE.items()}


@dataclass
class ProviderRequest:
    """
    A fully translated Messages API request.

    ``tool_names`` is sorted and exists for observability only.
    """

    model: str
    max_tokens: int
    messages: List[Param]
    tools: List[Param] = field(default_factory=list)
    tool_names: List[str] = field(default_factory=list)
    temperature: Optional[float] = None
    system: Optional[List[Param]] = None

    @property
    def system_prompt(self) -> Optional[str]:
        if not self.system:
            return None
        return "".join(block["text"] for block in self.system)

    def to_params(self) -> Param:
        """Return keyword arguments for ``client.messages.create``."""
        params: Param = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": self.messages,
        }
        if self.system is not None:
            params["system"] = self.system
        if self.temperature is not None:
            params["temperature"] = self.temperature
        if self.tools:
            params["tools"] = self.tools
        return params


def _part_to_block(part: MessagePart) -> Param:
    if isinstance(part, Text):
        return {"type": "text", "text": part.text}

    if isinstance(part, ToolCall):
        return {"type": "tool_use", "id": part.id, "name": part.name, "input": part.args}

    if isinstance(part, ToolResult):
        content = part.content
        is_error = part.error is not None
        if is_error:
            content = str(part.error)
        return {
            "type": "tool_result",
            "tool_use_id": part.id,
            "content": [{"type": "text", "text": content}],
            "is_error": is_error,
        }

    raise InvalidRequestError(f"unsupported part type {type(part).__name__}")


def to_provider_message(message: Message) -> Param:
    """Translate one Message into a Messages API message param."""
    try:
        role = _ROLE_TO_WIRE[Role(message.role)]
    except ValueError:
        raise InvalidRequestError(f"unknown role {message.role!r}") from None

    return {"role": role, "content": [_part_to_block(part) for part in message.parts]}


def to_provider_request(
    request: ChatCompleteRequest,
    *,
    model: str,
    max_tokens: int,
    require_user_last_message: bool = False,
) -> ProviderRequest:
    """
    Translate a ChatCompleteRequest into a ProviderRequest.

    Args:
        request: The generic request.
        model: Wire model identifier.
        max_tokens: Maximum output tokens.
        require_user_last_message: Reject conversations not ending on a user turn.

    Returns:
        The translated request.

    Raises:
        InvalidRequestError: On empty messages, a disallowed last role, an
            unknown role, an unsupported part, duplicate tool names, or a
            temperature outside [0, 1].
    """
    if not request.messages:
        raise InvalidRequestError("no messages")

    if require_user_last_message and request.messages[-1].role != Role.USER:
        raise InvalidRequestError(
            f"last message must have role {Role.USER.value!r}, got {request.messages[-1].role!r}"
        )

    if request.temperature is not None and not 0 <= request.temperature <= 1:
        raise InvalidRequestError(f"temperature must be between 0 and 1, got {request.temperature}")

    messages = [to_provider_message(message) for message in request.messages]

    tools: List[Param] = []
    seen = set()
    for tool in request.tools:
        if tool.name in seen:
            raise InvalidRequestError(f"duplicate tool name {tool.name!r}")
        seen.add(tool.name)
        tools.append(
            {
                "name": tool.name,
                "description": tool.description,
                "input_schema": tool.input_schema(),
            }
        )

    system = None
    if request.system is not None:
        system = [{"type": "text", "text": request.system}]

    return ProviderRequest(
        model=model,
        max_tokens=max_tokens,
        messages=messages,
        tools=tools,
        tool_names=sorted(seen),
        temperature=request.temperature,
        system=system,
    )


def _block_to_part(block: Param) -> MessagePart:
    block_type = block.get("type")
    if block_type == "text":
        return Text(block["text"])

    if block_type == "tool_use":
        return ToolCall(id=block["id"], name=block["name"], args=dict(block.get("input") or {}))

    if block_type == "tool_result":
        content = "".join(
            item.get("text", "") for item in block.get("content", []) if item.get("type") == "text"
        )
        if block.get("is_error"):
            return ToolResult(id=block["tool_use_id"], error=RuntimeError(content))
        return ToolResult(id=block["tool_use_id"], content=content)

    raise InvalidRequestError(f"unsupported content block type {block_type!r}")


def from_provider_message(param: Param) -> Message:
    """
    Translate a Messages API message param back into a Message.

    Error results come back as a generic RuntimeError carrying the error text,
    since the original exception type does not survive the wire.
    """
    try:
        role = _WIRE_TO_ROLE[param["role"]]
    except KeyError:
        raise InvalidRequestError(f"unknown role {param.get('role')!r}") from None

    content = param.get("content", [])
    if isinstance(content, str):
        return Message(role=role, parts=[Text(content)])
    return Message(role=role, parts=[_block_to_part(block) for block in content])


__all__ = [
    "ProviderRequest",
    "to_provider_request",
    "to_provider_message",
    "from_provider_message",
]
