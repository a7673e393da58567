"""Chat-completer implementations."""

from .anthropic_provider import AnthropicChatCompleter
from .base import ChatCompleter

__all__ = ["AnthropicChatCompleter", "ChatCompleter"]
