"""MCP server wiring: exposes `V0Tools` over the Model Context Protocol."""

from __future__ import annotations

import logging
from typing import Any

import mcp.types as mcp_types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from v0_mcp.config import V0Config
from v0_mcp.service import V0Service
from v0_mcp.tools import V0Tools
from v0_mcp.types import ToolCallResult, ToolDescriptor

__all__ = ["create_server", "run_stdio"]

logger = logging.getLogger(__name__)


def _to_mcp_tool(descriptor: ToolDescriptor) -> mcp_types.Tool:
    return mcp_types.Tool(
        name=descriptor.name,
        description=descriptor.description,
        inputSchema=descriptor.as_dict()["inputSchema"],
    )


def _to_mcp_result(result: ToolCallResult) -> mcp_types.CallToolResult:
    return mcp_types.CallToolResult(
        content=[mcp_types.TextContent(type="text", text=result.text)],
        isError=result.is_error,
    )


def create_server(tools: V0Tools, config: V0Config) -> Server:
    """Build a low-level MCP server whose handlers delegate to *tools*."""
    server: Server = Server(config.server_name, version=config.server_version)

    @server.list_tools()
    async def list_tools() -> list[mcp_types.Tool]:
        return [_to_mcp_tool(d) for d in tools.list_tools()]

    # Input is validated by V0Tools so schema faults share the error pipeline.
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any]) -> mcp_types.CallToolResult:
        return _to_mcp_result(await tools.call_tool(name, arguments))

    return server


async def run_stdio(config: V0Config) -> None:
    """Serve the v0 tools over stdio until the host disconnects."""
    async with V0Service(config) as service:
        server = create_server(V0Tools(service), config)
        logger.info(f"Starting {config.server_name} v{config.server_version} on stdio")
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
