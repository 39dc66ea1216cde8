"""
Tool catalogue and dispatcher for v0 API integration.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Awaitable, Callable, Final, Optional

from v0_mcp.errors import classify_error, user_message
from v0_mcp.log import log_tool_call
from v0_mcp.schemas import (
    CHAT_COMPLETE_SCHEMA,
    GENERATE_FROM_IMAGE_SCHEMA,
    GENERATE_UI_SCHEMA,
    SETUP_CHECK_SCHEMA,
    ChatCompleteInput,
    GenerateFromImageInput,
    GenerateUIInput,
    SetupCheckInput,
    V0Model,
)
from v0_mcp.service import V0Service
from v0_mcp.types import ToolCallResult, ToolDescriptor

__all__ = ["V0Tools", "TOOL_DESCRIPTORS"]

Handler = Callable[[Any], Awaitable[ToolCallResult]]

SETUP_CHECK_PROMPT: Final[str] = "Generate a simple hello world div"

TOOL_DESCRIPTORS: Final[tuple[ToolDescriptor, ...]] = (
    ToolDescriptor(
        name="v0_generate_ui",
        description=(
            "Generate UI components using v0 AI. Creates React components with "
            "TypeScript and Tailwind CSS based on natural language descriptions."
        ),
        input_schema=GENERATE_UI_SCHEMA,
    ),
    ToolDescriptor(
        name="v0_generate_from_image",
        description=(
            "Generate UI components from an image reference. Analyzes the provided "
            "image and creates corresponding React components."
        ),
        input_schema=GENERATE_FROM_IMAGE_SCHEMA,
    ),
    ToolDescriptor(
        name="v0_chat_complete",
        description=(
            "Have a conversation with v0 for iterative UI development. Allows "
            "back-and-forth refinement of UI components."
        ),
        input_schema=CHAT_COMPLETE_SCHEMA,
    ),
    ToolDescriptor(
        name="v0_setup_check",
        description=(
            "Check v0 API configuration and connectivity. Validates API key and "
            "endpoint accessibility."
        ),
        input_schema=SETUP_CHECK_SCHEMA,
    ),
)


class V0Tools:
    """Routes tool calls from the host to `V0Service` operations."""

    def __init__(
        self,
        service: V0Service,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.service = service
        self.logger = logger or logging.getLogger(__name__)
        self._handlers: dict[str, Handler] = {
            "v0_generate_ui": self._generate_ui,
            "v0_generate_from_image": self._generate_from_image,
            "v0_chat_complete": self._chat_complete,
            "v0_setup_check": self._setup_check,
        }

    def list_tools(self) -> tuple[ToolDescriptor, ...]:
        return TOOL_DESCRIPTORS

    async def call_tool(self, name: str, arguments: Any) -> ToolCallResult:
        """
        Execute a tool call. Never raises: every failure comes back as a
        result with ``is_error=True``.
        """
        start = time.perf_counter()
        self.logger.info(
            f"Tool call started: {name} (has_arguments={bool(arguments)})"
        )

        handler = self._handlers.get(name)
        if handler is None:
            log_tool_call(self.logger, name, False, _elapsed_ms(start), error_type="UNKNOWN_TOOL")
            return ToolCallResult.error(f"Unknown tool: {name}")

        try:
            result = await handler(arguments if arguments is not None else {})
        except Exception as exc:
            error = classify_error(exc, f"tool:{name}", self.logger)
            log_tool_call(
                self.logger,
                name,
                False,
                _elapsed_ms(start),
                error_type=error.kind.value,
                error_message=error.message,
            )
            return ToolCallResult.error(user_message(error))

        log_tool_call(self.logger, name, not result.is_error, _elapsed_ms(start))
        return result

    # --- handlers ----------------------------------------------------------
    async def _generate_ui(self, arguments: Any) -> ToolCallResult:
        params = GenerateUIInput.model_validate(arguments)
        result = await self.service.generate_ui(
            params.prompt, params.model, params.stream, params.context
        )
        result.raise_for_error()
        return ToolCallResult.success(
            f"# Generated UI Component\n\n"
            f"**Model**: {result.model}\n"
            f"**Prompt**: {params.prompt}\n\n"
            f"{result.content}"
        )

    async def _generate_from_image(self, arguments: Any) -> ToolCallResult:
        params = GenerateFromImageInput.model_validate(arguments)
        image_url = params.imageUrl
        result = await self.service.generate_from_image(image_url, params.model, params.prompt)
        result.raise_for_error()
        extra = f"**Additional Prompt**: {params.prompt}\n" if params.prompt else ""
        return ToolCallResult.success(
            f"# Generated UI from Image\n\n"
            f"**Image**: {image_url}\n"
            f"**Model**: {result.model}\n"
            f"{extra}\n"
            f"{result.content}"
        )

    async def _chat_complete(self, arguments: Any) -> ToolCallResult:
        params = ChatCompleteInput.model_validate(arguments)
        result = await self.service.chat_complete(params.messages, params.model, params.stream)
        result.raise_for_error()
        return ToolCallResult.success(result.content or "")

    async def _setup_check(self, arguments: Any) -> ToolCallResult:
        SetupCheckInput.model_validate(arguments)
        try:
            result = await self.service.generate_ui(
                SETUP_CHECK_PROMPT, V0Model.V0_1_5_MD, False
            )
        except Exception as exc:
            self.logger.exception("Setup check raised")
            return _setup_failed(str(exc) or exc.__class__.__name__)

        if not result.success:
            return _setup_failed(result.error or "API test failed")

        usage = f"{result.usage.total_tokens} tokens" if result.usage else "N/A"
        return ToolCallResult.success(
            "✅ v0 API Setup Check Passed\n\n"
            "**Status**: Connected\n"
            f"**Model**: {result.model}\n"
            f"**Usage**: {usage}\n\n"
            "v0 MCP server is ready for use!"
        )


def _setup_failed(message: str) -> ToolCallResult:
    return ToolCallResult(
        text=(
            "❌ v0 API Setup Check Failed\n\n"
            f"**Error**: {message}\n\n"
            "Please check:\n"
            "1. V0_API_KEY environment variable is set\n"
            "2. API key is valid\n"
            "3. Network connectivity to v0 API"
        ),
        is_error=True,
    )


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000
