"""
Closed set of streaming events the adapter understands.

The Anthropic SDK yields pydantic event objects; ``decode_event`` reads them by
attribute so anything shaped like an SDK event (including test doubles) can be
decoded. Event kinds the adapter has no use for decode to ``MessageEvent``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Union


@dataclass(frozen=True)
class TextDelta:
    text: str


@dataclass(frozen=True)
class InputJSONDelta:
    partial_json: str


@dataclass(frozen=True)
class OtherDelta:
    """A delta kind this adapter does not interpret (thinking, citations, ...)."""

    kind: str


Delta = Union[TextDelta, InputJSONDelta, OtherDelta]


@dataclass(frozen=True)
class BlockStart:
    index: int
    block_type: str
    id: Optional[str] = None
    name: Optional[str] = None
    text: str = ""
    input: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class BlockDelta:
    index: int
    delta: Delta


@dataclass(frozen=True)
class BlockStop:
    index: int


@dataclass(frozen=True)
class MessageEvent:
    """A message-level event (message_start, message_delta, message_stop, ping)."""

    type: str


ProviderEvent = Union[BlockStart, BlockDelta, BlockStop, MessageEvent]


def _decode_delta(delta: Any) -> Delta:
    kind = getattr(delta, "type", None)
    if kind == "text_delta":
        return TextDelta(text=getattr(delta, "text", "") or "")
    if kind == "input_json_delta":
        return InputJSONDelta(partial_json=getattr(delta, "partial_json", "") or "")
    return OtherDelta(kind=str(kind))


def decode_event(raw: Any) -> ProviderEvent:
    """Decode one SDK stream event into a ProviderEvent."""
    kind = getattr(raw, "type", None)

    if kind == "content_block_start":
        block = getattr(raw, "content_block", None)
        raw_input = getattr(block, "input", None)
        return BlockStart(
            index=raw.index,
            block_type=str(getattr(block, "type", None)),
            id=getattr(block, "id", None),
            name=getattr(block, "name", None),
            text=getattr(block, "text", "") or "",
            input=dict(raw_input) if isinstance(raw_input, dict) else {},
        )

    if kind == "content_block_delta":
        return BlockDelta(index=raw.index, delta=_decode_delta(getattr(raw, "delta", None)))

    if kind == "content_block_stop":
        return BlockStop(index=raw.index)

    return MessageEvent(type=str(kind))


__all__ = [
    "TextDelta",
    "InputJSONDelta",
    "OtherDelta",
    "Delta",
    "BlockStart",
    "BlockDelta",
    "BlockStop",
    "MessageEvent",
    "ProviderEvent",
    "decode_event",
]
