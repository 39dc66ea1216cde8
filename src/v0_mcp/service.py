"""
v0 API service using the OpenAI-compatible chat-completions endpoint.
"""

from __future__ import annotations

import logging
import time
from typing import Any, AsyncIterable, Final, Optional, Self, Sequence

import openai
from openai import AsyncOpenAI
from openai.types.chat import ChatCompletion, ChatCompletionChunk
from pydantic import ValidationError

from v0_mcp.adapter import V0RequestAdapter
from v0_mcp.config import V0Config
from v0_mcp.errors import EmptyResponseError, V0Error, classify_error
from v0_mcp.log import log_api_call
from v0_mcp.schemas import ChatMessage, V0Model
from v0_mcp.stream_utils import aggregate_stream_text
from v0_mcp.types import ServiceResult

__all__ = ["V0Service"]

UI_SYSTEM_PROMPT: Final[str] = (
    "You are a skilled UI/UX developer. Generate clean, modern, and functional UI "
    "components based on the user's requirements. Use React with TypeScript and "
    "Tailwind CSS unless specified otherwise."
)

IMAGE_SYSTEM_PROMPT: Final[str] = (
    "You are a skilled UI/UX developer. Analyze the provided image and generate "
    "corresponding UI components. Use React with TypeScript and Tailwind CSS."
)

# Faults that belong to the error taxonomy; anything else propagates.
_HANDLED_ERRORS: Final[tuple[type[BaseException], ...]] = (
    openai.OpenAIError,
    ValidationError,
    V0Error,
    EmptyResponseError,
    ConnectionError,
    TimeoutError,
)


class V0Service:
    """
    Request executor for the v0 backend (async-only).

    Every public operation returns a `ServiceResult`; backend faults are
    classified and returned with ``success=False`` rather than raised.

    Use ``V0Service.from_client`` when you already have an ``AsyncOpenAI`` instance.
    """

    def __init__(
        self,
        config: V0Config,
        *,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
    ) -> None:
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.name = name if name is not None else self.__class__.__name__
        self._client = AsyncOpenAI(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            max_retries=config.max_retries,
        )
        self._adapter = V0RequestAdapter()

    @classmethod
    def from_client(
        cls,
        client: AsyncOpenAI,
        config: V0Config,
        *,
        logger: Optional[logging.Logger] = None,
        name: Optional[str] = None,
    ) -> Self:
        """
        Build a ``V0Service`` around an already-configured client.
        """
        self = cls.__new__(cls)  # bypass __init__
        self.config = config
        self.logger = logger or logging.getLogger(__name__)
        self.name = name if name is not None else cls.__name__
        self._client = client
        self._adapter = V0RequestAdapter()
        return self

    # --- operations --------------------------------------------------------
    async def generate_ui(
        self,
        prompt: str,
        model: Optional[V0Model | str] = None,
        stream: bool = False,
        context: Optional[str] = None,
    ) -> ServiceResult:
        """Generate a UI component from a text prompt."""
        model_name = self._model_name(model)
        self._log(
            f"Starting UI generation (model={model_name}, stream={stream}, "
            f"has_context={context is not None}, prompt_length={len(prompt)})"
        )
        user_prompt = f"Context: {context}\n\nRequest: {prompt}" if context else prompt
        messages = self._adapter.prompt_messages(UI_SYSTEM_PROMPT, user_prompt)
        return await self._execute("generate_ui", model_name, messages, stream)

    async def generate_from_image(
        self,
        image_url: str,
        model: Optional[V0Model | str] = None,
        prompt: Optional[str] = None,
    ) -> ServiceResult:
        """Generate UI components from an image reference. Never streams."""
        model_name = self._model_name(model)
        if prompt:
            user_prompt = f"Based on this image: {image_url}\nAdditional requirements: {prompt}"
        else:
            user_prompt = f"Generate UI components based on this image: {image_url}"
        messages = self._adapter.prompt_messages(IMAGE_SYSTEM_PROMPT, user_prompt)
        return await self._execute("generate_from_image", model_name, messages, False)

    async def chat_complete(
        self,
        messages: Sequence[ChatMessage | dict[str, Any]],
        model: Optional[V0Model | str] = None,
        stream: bool = False,
    ) -> ServiceResult:
        """Continue a conversation; the history is sent exactly as given."""
        model_name = self._model_name(model)
        return await self._execute(
            "chat_complete", model_name, self._adapter.to_provider(messages), stream
        )

    # --- execution paths ---------------------------------------------------
    async def _execute(
        self,
        operation: str,
        model: str,
        messages: list[dict[str, str]],
        stream: bool,
    ) -> ServiceResult:
        start = time.perf_counter()
        try:
            if stream:
                result = await self._stream_response(model, messages)
            else:
                result = await self._sync_response(model, messages)
        except _HANDLED_ERRORS as exc:
            return ServiceResult.failed(classify_error(exc, operation, self.logger))

        if result.usage is not None:
            log_api_call(
                self.logger,
                operation,
                model,
                result.usage.prompt_tokens,
                result.usage.completion_tokens,
                (time.perf_counter() - start) * 1000,
            )
        return result

    async def _sync_response(
        self, model: str, messages: list[dict[str, str]]
    ) -> ServiceResult:
        self._log(f"Sending request to v0 model {model} (Stream: False)", logging.DEBUG)
        response: ChatCompletion = await self._client.chat.completions.create(
            model=model,
            messages=messages,
        )
        return self._adapter.from_provider(response, model)

    async def _stream_response(
        self, model: str, messages: list[dict[str, str]]
    ) -> ServiceResult:
        self._log(f"Sending request to v0 model {model} (Stream: True)", logging.DEBUG)
        chunks: AsyncIterable[ChatCompletionChunk] = await self._client.chat.completions.create(
            model=model,
            messages=messages,
            stream=True,
        )
        text = await aggregate_stream_text(chunks)
        return self._adapter.from_stream_text(text, model)

    def _model_name(self, model: Optional[V0Model | str]) -> str:
        return str(model or self.config.default_model)

    def _log(self, message: str, level: int = logging.INFO) -> None:
        self.logger.log(level, f"[{self.name}] {message}")

    # --- lifecycle ---------------------------------------------------------
    async def aclose(self) -> None:
        """
        Close the underlying HTTP client. Safe to call multiple times.
        """
        close = getattr(self._client, "close", None)
        if close:
            await close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()
