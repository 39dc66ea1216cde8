"""Pure request/response transformations for the v0 chat-completions API."""

from __future__ import annotations

from typing import Any, Optional, Sequence

from openai.types.chat import ChatCompletion

from v0_mcp.errors import EmptyResponseError
from v0_mcp.schemas import ChatMessage
from v0_mcp.types import ServiceResult, Usage

__all__ = ["V0RequestAdapter", "NO_CONTENT_MESSAGE"]

NO_CONTENT_MESSAGE = "No content generated from v0 API"


class V0RequestAdapter:
    """Adapter for converting between tool inputs and the OpenAI wire format."""

    def prompt_messages(self, system_prompt: str, user_prompt: str) -> list[dict[str, str]]:
        return [
            {"role": "system", "content": system_prompt},
            {"role": "user", "content": user_prompt},
        ]

    def to_provider(
        self, messages: Sequence[ChatMessage | dict[str, Any]]
    ) -> list[dict[str, str]]:
        """Convert conversation history to OpenAI messages, keeping order."""
        converted: list[dict[str, str]] = []
        for msg in messages:
            if isinstance(msg, ChatMessage):
                converted.append({"role": msg.role, "content": msg.content})
            else:
                converted.append({"role": msg["role"], "content": msg["content"]})
        return converted

    def usage_from(self, raw: ChatCompletion) -> Optional[Usage]:
        usage = getattr(raw, "usage", None)
        if usage is None:
            return None
        return Usage(
            prompt_tokens=usage.prompt_tokens,
            completion_tokens=usage.completion_tokens,
            total_tokens=usage.total_tokens,
        )

    def from_provider(self, raw: ChatCompletion, model: str) -> ServiceResult:
        """Convert a complete response into a successful ServiceResult.

        Raises:
            EmptyResponseError: The first choice carries no content.
        """
        content: Optional[str] = None
        if raw.choices and raw.choices[0].message:
            content = raw.choices[0].message.content

        if not content or not content.strip():
            raise EmptyResponseError(NO_CONTENT_MESSAGE)

        return ServiceResult.ok(content.strip(), model, self.usage_from(raw))

    def from_stream_text(self, text: str, model: str) -> ServiceResult:
        """Wrap aggregated stream text. Streams never report usage."""
        if not text.strip():
            raise EmptyResponseError(NO_CONTENT_MESSAGE)
        return ServiceResult.ok(text.strip(), model)
