"""
Anthropic client wrapper and chat-completer factory.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from anthropic import Anthropic, AsyncAnthropic

from .config import ChatCompleterConfig, Hooks, Revision
from .env import API_KEY_ENV_VAR, api_key_from_env, load_default_env
from .exceptions import ProviderConfigurationError
from .models import DEFAULT_MODEL, ModelName, max_output_tokens, wire_model_id
from .providers.anthropic_provider import AnthropicChatCompleter


class Client:
    """
    Holds the Anthropic SDK clients and the logger shared by chat completers.

    Args:
        api_key: Anthropic API key. Falls back to ANTHROPIC_API_KEY (a .env
            file in the working directory is loaded first).
        base_url: Optional API base URL override.
        logger: Logger handed to every chat completer. Defaults to this module's logger.
        client: Pre-built sync SDK client. Skips key lookup when given.
        async_client: Pre-built async SDK client.

    Raises:
        ProviderConfigurationError: If no API key is available and no client is injected.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        logger: Optional[logging.Logger] = None,
        client: Any = None,
        async_client: Any = None,
    ):
        self.log = logger or logging.getLogger(__name__)

        if client is None:
            load_default_env()
            api_key = api_key or api_key_from_env()
            if not api_key:
                raise ProviderConfigurationError("Anthropic", "API key", API_KEY_ENV_VAR)
            client = Anthropic(api_key=api_key, base_url=base_url)
            if async_client is None:
                async_client = AsyncAnthropic(api_key=api_key, base_url=base_url)

        self.client = client
        self.async_client = async_client

    def new_chat_completer(
        self,
        model: ModelName = DEFAULT_MODEL,
        *,
        max_tokens: Optional[int] = None,
        revision: Revision = Revision.V2,
        hooks: Optional[Hooks] = None,
    ) -> AnthropicChatCompleter:
        """
        Create a chat completer for one model.

        Args:
            model: A ChatCompleteModel member or an opaque model id.
            max_tokens: Output-token limit. None uses the adapter default.
            revision: Request-validation revision.
            hooks: Optional lifecycle hooks (see ChatCompleterConfig).

        Raises:
            ValueError: If max_tokens is below 1 or above the model's known limit.
        """
        if max_tokens is not None:
            limit = max_output_tokens(model)
            if max_tokens < 1:
                raise ValueError(f"max_tokens must be at least 1, got {max_tokens}")
            if limit is not None and max_tokens > limit:
                raise ValueError(
                    f"max_tokens {max_tokens} exceeds the {limit} output tokens "
                    f"{wire_model_id(model)} allows"
                )

        config = ChatCompleterConfig(
            model=model,
            max_tokens=max_tokens,
            revision=revision,
            hooks=hooks,
        )
        return AnthropicChatCompleter(
            self.client,
            config,
            async_client=self.async_client,
            log=self.log,
        )


__all__ = ["Client"]
