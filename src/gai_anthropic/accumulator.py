"""
Fold streaming events into the content blocks of the message being streamed.

Text is usable delta by delta, but a tool-use block only means something once
it closes and its JSON input can be parsed. The accumulator keeps just enough
state to get there. It belongs to one response and is reset after every
closed block.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .events import BlockDelta, BlockStart, BlockStop, InputJSONDelta, ProviderEvent, TextDelta
from .exceptions import AccumulationError

TEXT_BLOCK = "text"
TOOL_USE_BLOCK = "tool_use"


@dataclass
class AccumulatedBlock:
    """One content block, as assembled so far."""

    index: int
    type: str
    id: Optional[str] = None
    name: Optional[str] = None
    text: str = ""
    input: Dict[str, Any] = field(default_factory=dict)
    partial_json: str = ""
    closed: bool = False


@dataclass
class AccumulatedMessage:
    blocks: List[AccumulatedBlock] = field(default_factory=list)

    @property
    def open_block(self) -> Optional[AccumulatedBlock]:
        if self.blocks and not self.blocks[-1].closed:
            return self.blocks[-1]
        return None

    def tool_use_blocks(self) -> List[AccumulatedBlock]:
        return [block for block in self.blocks if block.type == TOOL_USE_BLOCK]


def _is_truncated_input(exc: json.JSONDecodeError) -> bool:
    # Errors at the end of the document, or inside a string that never closes,
    # mean the input stopped early. Anything else is a malformed payload.
    return exc.msg.startswith("Unterminated string") or exc.pos >= len(exc.doc.rstrip())


class StreamAccumulator:
    """
    Accumulates provider events for a single in-flight response.

    Example:
        >>> acc = StreamAccumulator()
        >>> for event in events:
        ...     acc.accumulate(event)
        >>> acc.message.blocks
    """

    def __init__(self) -> None:
        self.message = AccumulatedMessage()

    def reset(self) -> None:
        self.message = AccumulatedMessage()

    def accumulate(self, event: ProviderEvent) -> None:
        """
        Fold one event into the current message.

        Raises:
            AccumulationError: If the event does not fit the accumulated state.
        """
        if isinstance(event, BlockStart):
            self._start(event)
        elif isinstance(event, BlockDelta):
            self._delta(event)
        elif isinstance(event, BlockStop):
            self._stop(event)

    def _start(self, event: BlockStart) -> None:
        if self.message.open_block is not None:
            raise AccumulationError(
                f"content block {event.index} started while block "
                f"{self.message.open_block.index} is still open"
            )
        self.message.blocks.append(
            AccumulatedBlock(
                index=event.index,
                type=event.block_type,
                id=event.id,
                name=event.name,
                text=event.text,
                input=dict(event.input),
            )
        )

    def _current(self, index: int, event_type: str) -> AccumulatedBlock:
        block = self.message.open_block
        if block is None:
            raise AccumulationError(f"received {event_type} but there was no open content block")
        if block.index != index:
            raise AccumulationError(
                f"received {event_type} for content block {index}, but block {block.index} is open"
            )
        return block

    def _delta(self, event: BlockDelta) -> None:
        block = self._current(event.index, "content_block_delta")
        delta = event.delta

        if isinstance(delta, TextDelta):
            if block.type != TEXT_BLOCK:
                raise AccumulationError(f"text delta for {block.type} block {block.index}")
            block.text += delta.text
        elif isinstance(delta, InputJSONDelta):
            if block.type != TOOL_USE_BLOCK:
                raise AccumulationError(f"input JSON delta for {block.type} block {block.index}")
            block.partial_json += delta.partial_json

    def _stop(self, event: BlockStop) -> None:
        block = self._current(event.index, "content_block_stop")
        block.closed = True

        if block.type != TOOL_USE_BLOCK or not block.partial_json.strip():
            return

        try:
            parsed = json.loads(block.partial_json)
        except json.JSONDecodeError as exc:
            if _is_truncated_input(exc):
                return
            raise AccumulationError(f"invalid tool input JSON for block {block.index}: {exc}") from exc

        if not isinstance(parsed, dict):
            raise AccumulationError(
                f"tool input for block {block.index} must be a JSON object, got {type(parsed).__name__}"
            )
        block.input = parsed


__all__ = ["AccumulatedBlock", "AccumulatedMessage", "StreamAccumulator"]
