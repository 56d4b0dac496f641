"""MCP tools for spaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.types import Tool

from clickup_mcp.mcp_tools.common import ToolHandler, _id

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings


def register() -> tuple[list[Tool], dict[str, ToolHandler]]:
    """Return (tool_definitions, handler_map) for space tools."""
    tools = [
        Tool(
            name="get_spaces",
            description="Get the spaces in a workspace",
            inputSchema={
                "type": "object",
                "properties": {"workspace_id": _id("The ID of the workspace to get spaces from")},
                "required": ["workspace_id"],
            },
        ),
        Tool(
            name="get_space",
            description="Get details of a specific space",
            inputSchema={
                "type": "object",
                "properties": {"space_id": _id("The ID of the space to get")},
                "required": ["space_id"],
            },
        ),
    ]

    handlers = {
        "get_spaces": ToolHandler(_handle_get_spaces, "getting spaces"),
        "get_space": ToolHandler(_handle_get_space, "getting space"),
    }
    return tools, handlers


async def _handle_get_spaces(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.spaces.get_spaces(arguments["workspace_id"])


async def _handle_get_space(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.spaces.get_space(arguments["space_id"])
