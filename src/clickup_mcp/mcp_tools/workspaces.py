"""MCP tools for workspaces, seats and the authorized user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.types import Tool

from clickup_mcp.mcp_tools.common import ToolHandler, _id

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings


def register() -> tuple[list[Tool], dict[str, ToolHandler]]:
    """Return (tool_definitions, handler_map) for workspace tools."""
    tools = [
        Tool(
            name="get_workspaces",
            description="Get the workspaces (teams) the authorized user belongs to",
            inputSchema={"type": "object", "properties": {}},
        ),
        Tool(
            name="get_workspace_seats",
            description="Get member and guest seat usage for a workspace",
            inputSchema={
                "type": "object",
                "properties": {
                    "workspace_id": _id("The ID of the workspace to get seats information for"),
                },
                "required": ["workspace_id"],
            },
        ),
        Tool(
            name="get_authorized_user",
            description="Get the user the API token belongs to",
            inputSchema={"type": "object", "properties": {}},
        ),
    ]

    handlers = {
        "get_workspaces": ToolHandler(_handle_get_workspaces, "getting workspaces"),
        "get_workspace_seats": ToolHandler(_handle_get_workspace_seats, "getting workspace seats"),
        "get_authorized_user": ToolHandler(_handle_get_authorized_user, "getting authorized user"),
    }
    return tools, handlers


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def _handle_get_workspaces(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    result = await bindings.auth.get_workspaces()
    return result.get("teams", [])


async def _handle_get_workspace_seats(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.auth.get_workspace_seats(arguments["workspace_id"])


async def _handle_get_authorized_user(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.auth.get_authorized_user()
