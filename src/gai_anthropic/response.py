"""
Lazy, single-pass chat-completion responses.

A response wraps the generator that drives the provider stream. Nothing is
sent until the first part is pulled. Closing the response (explicitly, by
leaving a ``with`` block, or by dropping it) releases the stream.
"""

from __future__ import annotations

from typing import AsyncGenerator, AsyncIterator, Generator, Iterator, Optional

from .exceptions import ResponseConsumedError
from .types import MessagePart


class ChatCompleteResponse:
    """
    Single-pass sequence of message parts.

    Errors end the sequence: they are raised from iteration at the point they
    occur, and nothing is yielded after them.

    Example:
        >>> with completer.chat_complete(request) as response:
        ...     for part in response:
        ...         print(part)
    """

    def __init__(self, producer: Generator[MessagePart, None, None]):
        self._producer = producer
        self._consumed = False

    def parts(self) -> Iterator[MessagePart]:
        """Return the parts iterator. May be called once per response."""
        if self._consumed:
            raise ResponseConsumedError()
        self._consumed = True
        return self._producer

    def __iter__(self) -> Iterator[MessagePart]:
        return self.parts()

    def close(self) -> None:
        """Stop production early and release the provider stream."""
        self._consumed = True
        self._producer.close()

    def __enter__(self) -> "ChatCompleteResponse":
        return self

    def __exit__(self, exc_type, exc, tb) -> Optional[bool]:
        self.close()
        return None


class AsyncChatCompleteResponse:
    """Async twin of ChatCompleteResponse, consumed with ``async for``."""

    def __init__(self, producer: AsyncGenerator[MessagePart, None]):
        self._producer = producer
        self._consumed = False

    def parts(self) -> AsyncIterator[MessagePart]:
        if self._consumed:
            raise ResponseConsumedError()
        self._consumed = True
        return self._producer

    def __aiter__(self) -> AsyncIterator[MessagePart]:
        return self.parts()

    async def aclose(self) -> None:
        """Stop production early and release the provider stream."""
        self._consumed = True
        await self._producer.aclose()

    async def __aenter__(self) -> "AsyncChatCompleteResponse":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> Optional[bool]:
        await self.aclose()
        return None


__all__ = ["ChatCompleteResponse", "AsyncChatCompleteResponse"]
