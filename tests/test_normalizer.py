"""Unit tests for turning stream events into message parts."""

from __future__ import annotations

from typing import Any, Iterable, List

import pytest

from gai_anthropic import AccumulationError, Text, Tool, ToolCall, ToolNotFoundError
from gai_anthropic.normalizer import ResponseNormalizer
from tests.fakes import (
    block_stop,
    json_delta,
    load_transcript,
    message_start,
    message_stop,
    text_block,
    text_delta,
    text_start,
    tool_block,
    tool_start,
)

READ_FILE = Tool(name="read_file", description="Read a file")
LIST_DIR = Tool(name="list_dir", description="List a directory")


def _normalize(events: Iterable[Any], tools=(READ_FILE, LIST_DIR)) -> List[Any]:
    normalizer = ResponseNormalizer(tools)
    parts: List[Any] = []
    for event in events:
        parts.extend(normalizer.feed(event))
    return parts


class TestText:
    def test_each_delta_is_a_part(self) -> None:
        parts = _normalize([text_start(), text_delta("Hel"), text_delta("lo"), block_stop()])
        assert parts == [Text("Hel"), Text("lo")]

    def test_text_not_repeated_on_stop(self) -> None:
        normalizer = ResponseNormalizer([])
        list(normalizer.feed(text_start()))
        list(normalizer.feed(text_delta("Hello")))
        assert list(normalizer.feed(block_stop())) == []

    def test_block_start_and_message_events_yield_nothing(self) -> None:
        assert _normalize([message_start(), text_start(), message_stop()]) == []

    def test_recorded_greeting(self) -> None:
        parts = _normalize(load_transcript("hi"))
        assert all(isinstance(part, Text) for part in parts)
        assert "".join(part.text for part in parts) == (
            "Hello! How are you doing today? Is there anything I can help you with?"
        )


class TestToolCalls:
    def test_tool_call_only_after_stop(self) -> None:
        normalizer = ResponseNormalizer([READ_FILE])
        assert list(normalizer.feed(tool_start("toolu_1", "read_file"))) == []
        assert list(normalizer.feed(json_delta('{"path": "readme.txt"}'))) == []
        assert list(normalizer.feed(block_stop())) == [
            ToolCall(id="toolu_1", name="read_file", args={"path": "readme.txt"})
        ]

    def test_text_then_tool_call_order(self) -> None:
        parts = _normalize(load_transcript("read_file"))
        assert parts == [
            Text("I'll read the contents of the readme.txt file for you."),
            ToolCall(id="toolu_01Kx9fLQ2vRzN1hnUpiT3sWd", name="read_file", args={"path": "readme.txt"}),
        ]

    def test_tool_without_args(self) -> None:
        [*_, call] = _normalize(load_transcript("list_dir"))
        assert call == ToolCall(id="toolu_01QmZ7dCkEv2WnYb4Hs9TgRx", name="list_dir", args={})

    def test_consecutive_tool_blocks_each_emitted_once(self) -> None:
        events = [
            *tool_block("toolu_1", "read_file", '{"path": "a.txt"}', index=0),
            *tool_block("toolu_2", "read_file", '{"path": "b.txt"}', index=1),
        ]
        parts = _normalize(events)
        assert [part.id for part in parts] == ["toolu_1", "toolu_2"]

    def test_unknown_tool_raises(self) -> None:
        normalizer = ResponseNormalizer([READ_FILE])
        list(normalizer.feed(tool_start("toolu_1", "delete_file")))
        with pytest.raises(ToolNotFoundError, match="tool not found: delete_file") as exc_info:
            list(normalizer.feed(block_stop()))
        assert exc_info.value.tool_name == "delete_file"
        assert exc_info.value.available == ["read_file"]

    def test_unknown_tool_suggests_close_match(self) -> None:
        with pytest.raises(ToolNotFoundError, match="did you mean 'read_file'"):
            _normalize(tool_block("toolu_1", "read_files", "{}"), tools=[READ_FILE])

    def test_unknown_tool_after_text(self) -> None:
        parts: List[Any] = []
        normalizer = ResponseNormalizer([READ_FILE])
        with pytest.raises(ToolNotFoundError):
            for event in [*text_block("Let me look."), *tool_block("toolu_1", "nope", "{}", index=1)]:
                parts.extend(normalizer.feed(event))
        assert parts == [Text("Let me look.")]


class TestErrors:
    def test_accumulation_error_raised_from_feed(self) -> None:
        normalizer = ResponseNormalizer([])
        with pytest.raises(AccumulationError):
            normalizer.feed(text_delta("orphan"))

    def test_separate_normalizers_do_not_share_state(self) -> None:
        first = ResponseNormalizer([READ_FILE])
        second = ResponseNormalizer([READ_FILE])
        list(first.feed(tool_start("toolu_1", "read_file")))
        with pytest.raises(AccumulationError):
            list(second.feed(block_stop()))
        assert list(first.feed(block_stop())) == [ToolCall(id="toolu_1", name="read_file", args={})]
