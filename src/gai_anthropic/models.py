"""
Registry of the Anthropic chat models this adapter knows by name.

Callers may pass either a ``ChatCompleteModel`` member or any model id
string. Members, and strings equal to a member value, are resolved through
``MODELS``. Any other string is an opaque wire identifier forwarded unchanged.

Example:
    >>> from gai_anthropic.models import ChatCompleteModel, wire_model_id
    >>> wire_model_id(ChatCompleteModel.CLAUDE_3_5_HAIKU_LATEST)
    'claude-3-5-haiku-latest'
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Union


@dataclass(frozen=True)
class ModelInfo:
    """
    Metadata for an Anthropic chat model.

    Attributes:
        id: Wire identifier sent to the Messages API.
        provider: Provider name, always "anthropic" here.
        max_tokens: Maximum output tokens per request.
        context_window: Maximum context length in tokens.
    """

    id: str
    provider: str
    max_tokens: int
    context_window: int


class ChatCompleteModel(str, Enum):
    """Models selectable by name when creating a chat completer."""

    CLAUDE_3_5_HAIKU_LATEST = "claude-3-5-haiku-latest"
    CLAUDE_3_7_SONNET_LATEST = "claude-3-7-sonnet-latest"
    CLAUDE_4_OPUS_LATEST = "claude-4-opus-latest"
    CLAUDE_4_SONNET_LATEST = "claude-4-sonnet-latest"


MODELS: Dict[ChatCompleteModel, ModelInfo] = {
    ChatCompleteModel.CLAUDE_3_5_HAIKU_LATEST: ModelInfo(
        id="claude-3-5-haiku-latest",
        provider="anthropic",
        max_tokens=8192,
        context_window=200000,
    ),
    ChatCompleteModel.CLAUDE_3_7_SONNET_LATEST: ModelInfo(
        id="claude-3-7-sonnet-latest",
        provider="anthropic",
        max_tokens=64000,
        context_window=200000,
    ),
    ChatCompleteModel.CLAUDE_4_OPUS_LATEST: ModelInfo(
        id="claude-opus-4-20250514",
        provider="anthropic",
        max_tokens=32000,
        context_window=200000,
    ),
    ChatCompleteModel.CLAUDE_4_SONNET_LATEST: ModelInfo(
        id="claude-sonnet-4-20250514",
        provider="anthropic",
        max_tokens=64000,
        context_window=200000,
    ),
}

MODELS_BY_ID: Dict[str, ModelInfo] = {info.id: info for info in MODELS.values()}
"""Lookup from wire identifier to ModelInfo."""

DEFAULT_MODEL = ChatCompleteModel.CLAUDE_3_5_HAIKU_LATEST

ModelName = Union[ChatCompleteModel, str]


def _as_member(model: ModelName) -> ModelName:
    """Resolve a string naming a member (by value) to that member."""
    if isinstance(model, ChatCompleteModel):
        return model
    try:
        return ChatCompleteModel(model)
    except ValueError:
        return model


def model_info(model: ModelName) -> Optional[ModelInfo]:
    """Return the known metadata for a model, or None for unknown ids."""
    model = _as_member(model)
    if isinstance(model, ChatCompleteModel):
        return MODELS[model]
    return MODELS_BY_ID.get(model)


def wire_model_id(model: ModelName) -> str:
    """Map a model name to the identifier the Messages API expects."""
    info = model_info(model)
    return info.id if info else model


def max_output_tokens(model: ModelName) -> Optional[int]:
    """Return the known output-token limit for a model, if any."""
    info = model_info(model)
    return info.max_tokens if info else None


def context_window(model: ModelName) -> Optional[int]:
    """Return the known context length for a model, if any."""
    info = model_info(model)
    return info.context_window if info else None


__all__ = [
    "ModelInfo",
    "ModelName",
    "ChatCompleteModel",
    "MODELS",
    "MODELS_BY_ID",
    "DEFAULT_MODEL",
    "model_info",
    "wire_model_id",
    "max_output_tokens",
    "context_window",
]
