"""
Configuration options for chat completers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional

from .models import DEFAULT_MODEL, ModelName

DEFAULT_MAX_TOKENS = 1024

# Hook type definitions
HookCallable = Callable[..., None]
Hooks = Dict[str, HookCallable]


class Revision(str, Enum):
    """
    Request-validation revision.

    V1 requires the conversation to end with a user message; V2 drops that
    check and lets the conversation end on a model turn (prefill).
    """

    V1 = "v1"
    V2 = "v2"

    @property
    def requires_user_last_message(self) -> bool:
        return _USER_LAST_REQUIRED[self]


_USER_LAST_REQUIRED: Dict[Revision, bool] = {
    Revision.V1: True,
    Revision.V2: False,
}


@dataclass
class ChatCompleterConfig:
    """
    Configuration for a ChatCompleter.

    Attributes:
        model: Model to complete with, a ChatCompleteModel or an opaque model id string.
        max_tokens: Maximum output tokens per response. None uses DEFAULT_MAX_TOKENS.
        revision: Request-validation revision. Default: Revision.V2.
        hooks: Optional dict of lifecycle hooks for observability. Default: None.
               Available hooks:
               - 'on_chat_start': Called when the stream is about to open with (request_params,)
               - 'on_part': Called for each part handed to the caller with (part,)
               - 'on_chat_error': Called when the response ends with an error with (error,)
               - 'on_chat_end': Called once after the stream has been released with ()
    """

    model: ModelName = DEFAULT_MODEL
    max_tokens: Optional[int] = None
    revision: Revision = Revision.V2
    hooks: Optional[Hooks] = None

    @property
    def effective_max_tokens(self) -> int:
        return self.max_tokens if self.max_tokens is not None else DEFAULT_MAX_TOKENS


__all__ = ["ChatCompleterConfig", "Revision", "DEFAULT_MAX_TOKENS", "Hooks", "HookCallable"]
