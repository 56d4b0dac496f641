"""MCP tools for folders."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.types import Tool

from clickup_mcp.mcp_tools.common import ToolHandler, _id, _rest

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings


def register() -> tuple[list[Tool], dict[str, ToolHandler]]:
    """Return (tool_definitions, handler_map) for folder tools."""
    tools = [
        Tool(
            name="get_folders",
            description="Get the folders in a space",
            inputSchema={
                "type": "object",
                "properties": {
                    "space_id": _id("The ID of the space"),
                    "archived": {"type": "boolean", "description": "Include archived folders"},
                },
                "required": ["space_id"],
            },
        ),
        Tool(
            name="get_folder",
            description="Get details of a folder, including its lists",
            inputSchema={
                "type": "object",
                "properties": {"folder_id": _id("The ID of the folder")},
                "required": ["folder_id"],
            },
        ),
        Tool(
            name="create_folder",
            description="Create a folder in a space",
            inputSchema={
                "type": "object",
                "properties": {
                    "space_id": _id("The ID of the space to create the folder in"),
                    "name": {"type": "string", "description": "Folder name"},
                },
                "required": ["space_id", "name"],
            },
        ),
        Tool(
            name="update_folder",
            description="Rename a folder",
            inputSchema={
                "type": "object",
                "properties": {
                    "folder_id": _id("The ID of the folder to update"),
                    "name": {"type": "string", "description": "New folder name"},
                },
                "required": ["folder_id", "name"],
            },
        ),
        Tool(
            name="delete_folder",
            description="Delete a folder and everything in it",
            inputSchema={
                "type": "object",
                "properties": {"folder_id": _id("The ID of the folder to delete")},
                "required": ["folder_id"],
            },
        ),
    ]

    handlers = {
        "get_folders": ToolHandler(_handle_get_folders, "getting folders"),
        "get_folder": ToolHandler(_handle_get_folder, "getting folder"),
        "create_folder": ToolHandler(_handle_create_folder, "creating folder"),
        "update_folder": ToolHandler(_handle_update_folder, "updating folder"),
        "delete_folder": ToolHandler(_handle_delete_folder, "deleting folder"),
    }
    return tools, handlers


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def _handle_get_folders(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.folders.get_folders_from_space(arguments["space_id"], _rest(arguments, "space_id"))


async def _handle_get_folder(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.folders.get_folder(arguments["folder_id"])


async def _handle_create_folder(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.folders.create_folder(arguments["space_id"], _rest(arguments, "space_id"))


async def _handle_update_folder(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.folders.update_folder(arguments["folder_id"], _rest(arguments, "folder_id"))


async def _handle_delete_folder(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    await bindings.folders.delete_folder(arguments["folder_id"])
    return {"status": "deleted", "folder_id": arguments["folder_id"]}
