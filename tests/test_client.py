"""Tests for the Client wrapper and chat-completer factory."""

from __future__ import annotations

import logging
import os

import pytest
from anthropic import Anthropic, AsyncAnthropic

from gai_anthropic import (
    AnthropicChatCompleter,
    ChatCompleteModel,
    Client,
    ProviderConfigurationError,
    Revision,
)
from tests.fakes import FakeAnthropic


@pytest.fixture(autouse=True)
def no_api_key(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Isolate from real keys and any .env in the working directory."""
    monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)


class TestNewClient:
    def test_can_create_a_new_client_with_a_key(self) -> None:
        client = Client(api_key="sk-ant-test")
        assert isinstance(client.client, Anthropic)
        assert isinstance(client.async_client, AsyncAnthropic)

    def test_key_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant-env")
        assert Client().client.api_key == "sk-ant-env"

    def test_key_from_dotenv(self, tmp_path) -> None:
        (tmp_path / ".env").write_text("ANTHROPIC_API_KEY=sk-ant-dotenv\n")
        try:
            assert Client().client.api_key == "sk-ant-dotenv"
        finally:
            os.environ.pop("ANTHROPIC_API_KEY", None)

    def test_missing_key(self) -> None:
        with pytest.raises(ProviderConfigurationError) as exc_info:
            Client()
        assert "ANTHROPIC_API_KEY" in str(exc_info.value)

    def test_injected_client_skips_key_lookup(self) -> None:
        fake = FakeAnthropic()
        client = Client(client=fake)
        assert client.client is fake
        assert client.async_client is None

    def test_custom_logger(self) -> None:
        log = logging.getLogger("test.gai_anthropic")
        client = Client(client=FakeAnthropic(), logger=log)
        assert client.log is log


class TestNewChatCompleter:
    def test_defaults(self) -> None:
        cc = Client(client=FakeAnthropic()).new_chat_completer()
        assert isinstance(cc, AnthropicChatCompleter)
        assert cc.model == "claude-3-5-haiku-latest"
        assert cc.config.effective_max_tokens == 1024
        assert cc.config.revision is Revision.V2

    def test_model_mapped_to_wire_id(self) -> None:
        cc = Client(client=FakeAnthropic()).new_chat_completer(ChatCompleteModel.CLAUDE_4_SONNET_LATEST)
        assert cc.model == "claude-sonnet-4-20250514"

    def test_max_tokens_within_model_limit(self) -> None:
        cc = Client(client=FakeAnthropic()).new_chat_completer(max_tokens=8192)
        assert cc.config.effective_max_tokens == 8192

    def test_max_tokens_above_model_limit(self) -> None:
        with pytest.raises(ValueError, match="exceeds the 8192 output tokens claude-3-5-haiku-latest"):
            Client(client=FakeAnthropic()).new_chat_completer(max_tokens=9000)

    def test_max_tokens_checked_for_member_value_string(self) -> None:
        client = Client(client=FakeAnthropic())
        with pytest.raises(ValueError, match="exceeds the 32000 output tokens claude-opus-4-20250514"):
            client.new_chat_completer("claude-4-opus-latest", max_tokens=10**9)
        assert client.new_chat_completer("claude-4-opus-latest").model == "claude-opus-4-20250514"

    def test_max_tokens_below_one(self) -> None:
        with pytest.raises(ValueError, match="at least 1"):
            Client(client=FakeAnthropic()).new_chat_completer(max_tokens=0)

    def test_unknown_model_has_no_limit_check(self) -> None:
        cc = Client(client=FakeAnthropic()).new_chat_completer("claude-next", max_tokens=100000)
        assert cc.model == "claude-next"

    def test_shares_client_and_logger(self) -> None:
        log = logging.getLogger("test.gai_anthropic")
        client = Client(client=FakeAnthropic(), logger=log)
        cc = client.new_chat_completer()
        assert cc.client is client.client
        assert cc._log is log
