"""Tests for stream aggregation and response adaptation."""

import pytest

from v0_mcp.adapter import NO_CONTENT_MESSAGE, V0RequestAdapter
from v0_mcp.errors import EmptyResponseError
from v0_mcp.schemas import ChatMessage
from v0_mcp.stream_utils import aggregate_stream_text, chunk_text

from fakes import make_chunk, make_completion, stream_of


async def test_fragments_joined_in_arrival_order():
    assert await aggregate_stream_text(stream_of("a", "b", None, "c")) == "abc"


async def test_empty_stream():
    assert await aggregate_stream_text(stream_of()) == ""


def test_chunk_without_choices():
    chunk = make_chunk("x").model_copy(update={"choices": []})
    assert chunk_text(chunk) == ""


class TestV0RequestAdapter:
    @pytest.fixture
    def adapter(self):
        return V0RequestAdapter()

    def test_prompt_messages(self, adapter):
        assert adapter.prompt_messages("sys", "user") == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "user"},
        ]

    def test_to_provider_preserves_order_and_duplicates(self, adapter):
        messages = [
            ChatMessage(role="system", content="You are a helpful UI designer"),
            ChatMessage(role="user", content="again"),
            ChatMessage(role="user", content="again"),
        ]

        result = adapter.to_provider(messages)

        assert [m["role"] for m in result] == ["system", "user", "user"]
        assert result[2] == {"role": "user", "content": "again"}

    def test_from_provider_strips_and_reads_usage(self, adapter):
        result = adapter.from_provider(make_completion("  <div/>\n"), "v0-1.5-md")

        assert result.content == "<div/>"
        assert result.usage.prompt_tokens == 5
        assert result.usage.completion_tokens == 10

    @pytest.mark.parametrize("content", [None, "", "   "])
    def test_from_provider_rejects_empty(self, adapter, content):
        with pytest.raises(EmptyResponseError, match=NO_CONTENT_MESSAGE):
            adapter.from_provider(make_completion(content), "v0-1.5-md")

    def test_from_stream_text_has_no_usage(self, adapter):
        result = adapter.from_stream_text("Generated", "v0-1.5-md")

        assert result.success is True
        assert result.usage is None
