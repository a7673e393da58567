"""
Turn raw stream events into provider-agnostic message parts.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, List, Mapping, Optional

from .accumulator import AccumulatedBlock, StreamAccumulator
from .events import BlockDelta, BlockStop, TextDelta, decode_event
from .exceptions import ToolNotFoundError
from .tools import Tool
from .types import MessagePart, Text, ToolCall

logger = logging.getLogger(__name__)


class ResponseNormalizer:
    """
    Per-response state machine from stream events to message parts.

    Text deltas are yielded as soon as they arrive. Tool calls are yielded when
    their block closes, after the accumulator has the complete input, and only
    if the tool was declared in the request.

    Args:
        tools: Tools declared in the request.
        log: Logger for per-call debug output. Defaults to the module logger.
    """

    def __init__(self, tools: Iterable[Tool], *, log: Optional[logging.Logger] = None):
        self._tools: Mapping[str, Tool] = {tool.name: tool for tool in tools}
        self._accumulator = StreamAccumulator()
        self._log = log or logger

    def feed(self, raw_event: Any) -> Iterator[MessagePart]:
        """
        Decode and accumulate one SDK event, returning the parts it completes.

        Raises:
            AccumulationError: If the event does not fit the accumulated state.
            ToolNotFoundError: While iterating, if a closed tool-use block names
                an undeclared tool. Calls preceding it are yielded first.
        """
        event = decode_event(raw_event)
        self._accumulator.accumulate(event)

        if isinstance(event, BlockStop):
            # Text was already streamed delta by delta; only tool calls remain.
            completed = self._accumulator.message.tool_use_blocks()
            self._accumulator.reset()
            return self._tool_calls(completed)

        if isinstance(event, BlockDelta) and isinstance(event.delta, TextDelta):
            return iter([Text(event.delta.text)])

        return iter(())

    def _tool_calls(self, blocks: List[AccumulatedBlock]) -> Iterator[MessagePart]:
        for block in blocks:
            self._log.debug("Tool call id=%s name=%s input=%s", block.id, block.name, block.input)
            if block.name not in self._tools:
                raise ToolNotFoundError(block.name or "", self._tools)
            yield ToolCall(id=block.id or "", name=block.name, args=block.input)


__all__ = ["ResponseNormalizer"]
