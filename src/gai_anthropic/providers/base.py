"""
Chat-completer abstraction shared by provider adapters.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..response import AsyncChatCompleteResponse, ChatCompleteResponse
from ..types import ChatCompleteRequest


@runtime_checkable
class ChatCompleter(Protocol):
    """
    Interface every chat-completion adapter must satisfy.

    ``chat_complete`` validates the request synchronously and returns a lazy
    response; no network traffic happens until the caller pulls the first
    part. Adapters with native asyncio support also implement
    ``achat_complete``.
    """

    name: str
    supports_streaming: bool
    supports_async: bool = False

    def chat_complete(self, request: ChatCompleteRequest) -> ChatCompleteResponse:
        """
        Start a chat completion.

        Raises:
            InvalidRequestError: If the request breaks the caller contract.
        """
        ...

    def achat_complete(self, request: ChatCompleteRequest) -> AsyncChatCompleteResponse:
        """Async version of chat_complete()."""
        ...


__all__ = ["ChatCompleter"]
