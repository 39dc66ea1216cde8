"""Streaming helpers for chat-completion responses."""
from __future__ import annotations

from typing import Any, AsyncIterable

from openai.types.chat import ChatCompletionChunk

__all__ = ["chunk_text", "aggregate_stream_text"]


def chunk_text(chunk: ChatCompletionChunk | Any) -> str:
    """Return the text fragment carried by one streaming chunk, or ''."""
    choices = getattr(chunk, "choices", None)
    if not choices:
        return ""
    delta = getattr(choices[0], "delta", None)
    if delta is None:
        return ""
    return getattr(delta, "content", None) or ""


async def aggregate_stream_text(chunks: AsyncIterable[ChatCompletionChunk]) -> str:
    """
    Consume *chunks* to exhaustion and join their text in arrival order.

    Nothing is handed back until the stream ends. The stream is single-use.
    """
    parts: list[str] = []
    async for chunk in chunks:
        text = chunk_text(chunk)
        if text:
            parts.append(text)
    return "".join(parts)
