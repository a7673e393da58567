"""Public exports for the gai_anthropic package."""

from .client import Client
from .config import DEFAULT_MAX_TOKENS, ChatCompleterConfig, Revision
from .exceptions import (
    AccumulationError,
    GaiAnthropicError,
    InvalidRequestError,
    ProviderConfigurationError,
    ResponseConsumedError,
    ToolNotFoundError,
    ToolValidationError,
)
from .models import MODELS, MODELS_BY_ID, ChatCompleteModel, ModelInfo, wire_model_id
from .providers.anthropic_provider import AnthropicChatCompleter
from .providers.base import ChatCompleter
from .response import AsyncChatCompleteResponse, ChatCompleteResponse
from .tools import Tool, ToolParameter
from .types import ChatCompleteRequest, Message, MessagePart, Role, Text, ToolCall, ToolResult

__all__ = [
    "Client",
    "ChatCompleter",
    "AnthropicChatCompleter",
    "ChatCompleterConfig",
    "Revision",
    "DEFAULT_MAX_TOKENS",
    # Models
    "ChatCompleteModel",
    "ModelInfo",
    "MODELS",
    "MODELS_BY_ID",
    "wire_model_id",
    # Types
    "ChatCompleteRequest",
    "ChatCompleteResponse",
    "AsyncChatCompleteResponse",
    "Message",
    "MessagePart",
    "Role",
    "Text",
    "ToolCall",
    "ToolResult",
    "Tool",
    "ToolParameter",
    # Exceptions
    "GaiAnthropicError",
    "InvalidRequestError",
    "AccumulationError",
    "ToolNotFoundError",
    "ResponseConsumedError",
    "ToolValidationError",
    "ProviderConfigurationError",
]
