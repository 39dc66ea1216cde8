"""Logging helpers shared by the service, the tools and the entry point."""

from __future__ import annotations

import logging
import sys
from typing import Any

__all__ = ["configure_logging", "log_tool_call", "log_api_call"]

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Route package logs to stderr.

    stdout carries the MCP stdio transport, so nothing may be logged there.
    """
    root = logging.getLogger("v0_mcp")
    root.setLevel(level)
    for handler in list(root.handlers):
        if not isinstance(handler, logging.NullHandler):
            root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root.addHandler(handler)
    root.propagate = False


def log_tool_call(
    logger: logging.Logger,
    tool: str,
    success: bool,
    duration_ms: float,
    **details: Any,
) -> None:
    outcome = "succeeded" if success else "failed"
    extra = "".join(f" {k}={v}" for k, v in details.items())
    logger.log(
        logging.INFO if success else logging.ERROR,
        f"Tool call {outcome}: {tool} ({duration_ms:.0f}ms){extra}",
    )


def log_api_call(
    logger: logging.Logger,
    operation: str,
    model: str,
    prompt_tokens: int,
    completion_tokens: int,
    duration_ms: float,
) -> None:
    logger.info(
        f"API call {operation} model={model} prompt_tokens={prompt_tokens} "
        f"completion_tokens={completion_tokens} ({duration_ms:.0f}ms)"
    )
