"""
Anthropic chat-completion adapter.

Ties together request mapping, stream accumulation and normalization behind
``chat_complete``. The Messages API is always called with ``stream=True``;
the stream is opened on the first pull and closed exactly once, whatever
ends the response.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncGenerator, Generator, List, Optional

from opentelemetry.trace import Span

from ..config import ChatCompleterConfig
from ..exceptions import AccumulationError, ProviderConfigurationError, ToolNotFoundError
from ..mapper import ProviderRequest, from_provider_message, to_provider_request
from ..models import wire_model_id
from ..normalizer import ResponseNormalizer
from ..response import AsyncChatCompleteResponse, ChatCompleteResponse
from ..telemetry import call_hook, current_span, record_span_error, start_chat_span
from ..tools import Tool
from ..types import ChatCompleteRequest, MessagePart

logger = logging.getLogger(__name__)


def _error_description(error: BaseException) -> str:
    if isinstance(error, AccumulationError):
        return "message accumulation failed"
    if isinstance(error, ToolNotFoundError):
        return "tool not found"
    return "stream error"


class AnthropicChatCompleter:
    """
    Streaming chat completions over the Anthropic Messages API.

    Usually created through ``Client.new_chat_completer``.

    Args:
        client: An ``anthropic.Anthropic`` client, or anything exposing
            ``messages.create(**params)`` that returns a closeable event stream.
        config: Model, output limit, revision and hooks.
        async_client: Optional ``anthropic.AsyncAnthropic`` client for ``achat_complete``.
        log: Logger for stream lifecycle messages. Defaults to the module logger.
    """

    name = "anthropic"
    supports_streaming = True
    supports_async = True

    def __init__(
        self,
        client: Any,
        config: Optional[ChatCompleterConfig] = None,
        *,
        async_client: Any = None,
        log: Optional[logging.Logger] = None,
    ):
        self.client = client
        self.async_client = async_client
        self.config = config or ChatCompleterConfig()
        self._log = log or logger

    @property
    def model(self) -> str:
        return wire_model_id(self.config.model)

    def build_request(self, request: ChatCompleteRequest) -> ProviderRequest:
        """
        Translate and validate a request without sending it.

        Raises:
            InvalidRequestError: If the request breaks the caller contract.
        """
        return to_provider_request(
            request,
            model=self.model,
            max_tokens=self.config.effective_max_tokens,
            require_user_last_message=self.config.revision.requires_user_last_message,
        )

    def chat_complete(self, request: ChatCompleteRequest) -> ChatCompleteResponse:
        """
        Start a streaming chat completion.

        Args:
            request: The conversation, tools, temperature and system prompt.

        Returns:
            A lazy response. The first pull opens the stream.

        Raises:
            InvalidRequestError: If the request breaks the caller contract.
        """
        provider_request = self.build_request(request)
        return ChatCompleteResponse(self._produce(provider_request, list(request.tools)))

    def achat_complete(self, request: ChatCompleteRequest) -> AsyncChatCompleteResponse:
        """Async version of chat_complete() using the AsyncAnthropic client."""
        if self.async_client is None:
            raise ProviderConfigurationError("Anthropic", "async client (AsyncAnthropic)")
        provider_request = self.build_request(request)
        return AsyncChatCompleteResponse(self._aproduce(provider_request, list(request.tools)))

    def _fail(self, span: Span, error: Exception) -> None:
        description = _error_description(error)
        if description == "stream error":
            self._log.warning("Stream error: %s", error)
        record_span_error(span, error, description)
        call_hook(self.config.hooks, "on_chat_error", error)

    def _release(self, stream: Any) -> None:
        try:
            stream.close()
        except Exception as exc:
            self._log.info("Error closing stream: %s", exc)
        else:
            self._log.debug("Stream closed")

    async def _arelease(self, stream: Any) -> None:
        try:
            await stream.close()
        except Exception as exc:
            self._log.info("Error closing stream: %s", exc)
        else:
            self._log.debug("Stream closed")

    def _log_open(self, provider_request: ProviderRequest) -> None:
        self._log.debug(
            "Opening stream model=%s messages=%d tools=%s",
            provider_request.model,
            len(provider_request.messages),
            provider_request.tool_names,
        )
        if self._log.isEnabledFor(logging.DEBUG):
            for param in provider_request.messages:
                self._log.debug("Request message: %s", from_provider_message(param).to_dict())

    def _produce(
        self, provider_request: ProviderRequest, tools: List[Tool]
    ) -> Generator[MessagePart, None, None]:
        hooks = self.config.hooks
        params = provider_request.to_params()
        span = start_chat_span(provider_request)
        normalizer = ResponseNormalizer(tools, log=self._log)
        stream = None

        call_hook(hooks, "on_chat_start", params)
        try:
            self._log_open(provider_request)
            with current_span(span):
                stream = self.client.messages.create(**params, stream=True)
            for raw_event in stream:
                for part in normalizer.feed(raw_event):
                    call_hook(hooks, "on_part", part)
                    yield part
        except Exception as exc:
            self._fail(span, exc)
            raise
        finally:
            if stream is not None:
                self._release(stream)
            span.end()
            call_hook(hooks, "on_chat_end")

    async def _aproduce(
        self, provider_request: ProviderRequest, tools: List[Tool]
    ) -> AsyncGenerator[MessagePart, None]:
        hooks = self.config.hooks
        params = provider_request.to_params()
        span = start_chat_span(provider_request)
        normalizer = ResponseNormalizer(tools, log=self._log)
        stream = None

        call_hook(hooks, "on_chat_start", params)
        try:
            self._log_open(provider_request)
            with current_span(span):
                stream = await self.async_client.messages.create(**params, stream=True)
            async for raw_event in stream:
                for part in normalizer.feed(raw_event):
                    call_hook(hooks, "on_part", part)
                    yield part
        except Exception as exc:
            self._fail(span, exc)
            raise
        finally:
            if stream is not None:
                await self._arelease(stream)
            span.end()
            call_hook(hooks, "on_chat_end")


__all__ = ["AnthropicChatCompleter"]
