"""
Custom exceptions with helpful error messages and suggestions.

Configuration and tool-definition errors carry banner-formatted messages with:
- Clear explanations of what went wrong
- Concrete suggestions for fixes
- Relevant context (tool names, parameter names, env vars)

Errors raised while a response is streaming stay terse, because they are
usually logged or shown next to partial model output.
"""

from __future__ import annotations

import difflib
from typing import Iterable, List


class GaiAnthropicError(Exception):
    """Base exception for all gai_anthropic errors."""

    pass


class InvalidRequestError(GaiAnthropicError, ValueError):
    """Raised before any network call when a request breaks the caller contract."""

    pass


class AccumulationError(GaiAnthropicError):
    """Raised when a stream event does not fit the message accumulated so far."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"error accumulating message: {reason}")


class ToolNotFoundError(GaiAnthropicError):
    """Raised when the model calls a tool that was not declared in the request."""

    def __init__(self, tool_name: str, available: Iterable[str] = ()):
        self.tool_name = tool_name
        self.available: List[str] = sorted(available)

        message = f"tool not found: {tool_name}"
        matches = difflib.get_close_matches(tool_name, self.available, n=1, cutoff=0.6)
        if matches:
            message += f" (did you mean '{matches[0]}'?)"
        super().__init__(message)


class ResponseConsumedError(GaiAnthropicError, RuntimeError):
    """Raised when the parts of a response are requested a second time."""

    def __init__(self) -> None:
        super().__init__(
            "response parts can only be consumed once; issue a new request to get a fresh response"
        )


class ToolValidationError(GaiAnthropicError):
    """Raised when a tool definition is invalid."""

    def __init__(self, tool_name: str, param_name: str, issue: str, suggestion: str = ""):
        self.tool_name = tool_name
        self.param_name = param_name
        self.issue = issue
        self.suggestion = suggestion

        message = f"\n{'='*60}\n"
        message += f"❌ Tool Validation Error: '{tool_name}'\n"
        message += f"{'='*60}\n\n"
        message += f"Parameter: {param_name}\n"
        message += f"Issue: {issue}\n"
        if suggestion:
            message += f"\n💡 Suggestion: {suggestion}\n"
        message += f"\n{'='*60}\n"

        super().__init__(message)


class ProviderConfigurationError(GaiAnthropicError):
    """Raised when the Anthropic client cannot be configured."""

    def __init__(self, provider_name: str, missing_config: str, env_var: str = ""):
        self.provider_name = provider_name
        self.missing_config = missing_config
        self.env_var = env_var

        message = f"\n{'='*60}\n"
        message += f"❌ Provider Configuration Error: '{provider_name}'\n"
        message += f"{'='*60}\n\n"
        message += f"Missing: {missing_config}\n"
        if env_var:
            message += f"\n💡 How to fix:\n"
            message += f"  1. Set the environment variable:\n"
            message += f"     export {env_var}='your-api-key'\n"
            message += f"  2. Or pass it directly:\n"
            message += f"     client = Client(api_key='your-api-key')\n"
        message += f"\n{'='*60}\n"

        super().__init__(message)


__all__ = [
    "GaiAnthropicError",
    "InvalidRequestError",
    "AccumulationError",
    "ToolNotFoundError",
    "ResponseConsumedError",
    "ToolValidationError",
    "ProviderConfigurationError",
]
