"""
Tracing and lifecycle hooks for chat completions.

Spans go through the OpenTelemetry API, which is a no-op until the
application installs an SDK tracer provider. Hooks are plain callables keyed
by name. Neither can change what a response yields.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from opentelemetry import trace
from opentelemetry.trace import Span, SpanKind, Status, StatusCode

from .config import Hooks
from .mapper import ProviderRequest
from .models import context_window

TRACER_NAME = "gai-anthropic"
SPAN_NAME = "anthropic.chat_complete"

logger = logging.getLogger(__name__)


def start_chat_span(request: ProviderRequest) -> Span:
    """Start the client span describing one chat completion."""
    tracer = trace.get_tracer(TRACER_NAME)
    span = tracer.start_span(
        SPAN_NAME,
        kind=SpanKind.CLIENT,
        attributes={
            "ai.model": request.model,
            "ai.message_count": len(request.messages),
            "ai.tool_count": len(request.tool_names),
            "ai.tools": request.tool_names,
        },
    )
    window = context_window(request.model)
    if window is not None:
        span.set_attribute("ai.context_window", window)
    if request.temperature is not None:
        span.set_attribute("ai.temperature", float(request.temperature))
    system_prompt = request.system_prompt
    span.set_attribute("ai.has_system_prompt", system_prompt is not None)
    if system_prompt is not None:
        span.set_attribute("ai.system_prompt", system_prompt)
    return span


def current_span(span: Span):
    """
    Make ``span`` current for the block, so SDK and HTTP spans nest under it.

    The span is neither ended nor marked on error; callers own both.
    """
    return trace.use_span(span, end_on_exit=False, record_exception=False, set_status_on_exception=False)


def record_span_error(span: Span, error: BaseException, description: str) -> None:
    span.record_exception(error)
    span.set_status(Status(StatusCode.ERROR, description))


def call_hook(hooks: Optional[Hooks], hook_name: str, *args: Any, **kwargs: Any) -> None:
    """Call a hook if it exists, logging and discarding any exception it raises."""
    if not hooks or hook_name not in hooks:
        return
    try:
        hooks[hook_name](*args, **kwargs)
    except Exception:
        logger.debug("Hook %s failed", hook_name, exc_info=True)


__all__ = ["TRACER_NAME", "SPAN_NAME", "start_chat_span", "current_span", "record_span_error", "call_hook"]
