"""Tests for the MCP server wiring."""

from importlib.metadata import version
from unittest.mock import AsyncMock

import mcp.types as mcp_types
import pytest

from v0_mcp.server import create_server
from v0_mcp.service import V0Service
from v0_mcp.tools import V0Tools
from v0_mcp.types import ServiceResult


@pytest.fixture
def mock_service():
    return AsyncMock(spec=V0Service)


@pytest.fixture
def server(mock_service, config):
    return create_server(V0Tools(mock_service), config)


def test_installed_mcp_has_decorator_api():
    from mcp.server.lowlevel import Server

    assert int(version("mcp").split(".")[0]) == 1
    assert callable(getattr(Server, "list_tools", None))
    assert callable(getattr(Server, "call_tool", None))


def test_server_identity(server, config):
    assert server.name == config.server_name == "v0-mcp"


async def test_list_tools_handler(server):
    handler = server.request_handlers[mcp_types.ListToolsRequest]

    result = await handler(mcp_types.ListToolsRequest(method="tools/list"))

    tools = result.root.tools
    assert [t.name for t in tools] == [
        "v0_generate_ui",
        "v0_generate_from_image",
        "v0_chat_complete",
        "v0_setup_check",
    ]
    assert tools[0].inputSchema["required"] == ["prompt"]


async def _call(server, name, arguments):
    handler = server.request_handlers[mcp_types.CallToolRequest]
    request = mcp_types.CallToolRequest(
        method="tools/call",
        params=mcp_types.CallToolRequestParams(name=name, arguments=arguments),
    )
    return (await handler(request)).root


async def test_call_tool_success(server, mock_service):
    mock_service.chat_complete.return_value = ServiceResult.ok("Chat response", "v0-1.5-md")

    result = await _call(
        server, "v0_chat_complete", {"messages": [{"role": "user", "content": "hi"}]}
    )

    assert result.isError is False
    assert result.content[0].text == "Chat response"


async def test_call_tool_validation_goes_through_classifier(server, mock_service):
    result = await _call(server, "v0_generate_ui", {})

    assert result.isError is True
    assert result.content[0].text.startswith("Error: Invalid input:")
    mock_service.generate_ui.assert_not_awaited()


async def test_call_unknown_tool(server):
    result = await _call(server, "nonexistent", {})

    assert result.isError is True
    assert "Unknown tool: nonexistent" in result.content[0].text
