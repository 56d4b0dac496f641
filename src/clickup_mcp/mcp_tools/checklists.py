"""MCP tools for checklists and checklist items."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.types import Tool

from clickup_mcp.mcp_tools.common import ToolHandler, _id, _rest

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings

_ITEM_FIELDS: dict[str, Any] = {
    "assignee": {"type": "number", "description": "User ID to assign the item to"},
    "resolved": {"type": "boolean", "description": "Whether the item is checked off"},
}


def register() -> tuple[list[Tool], dict[str, ToolHandler]]:
    """Return (tool_definitions, handler_map) for checklist tools."""
    tools = [
        Tool(
            name="create_checklist",
            description="Create a checklist on a task",
            inputSchema={
                "type": "object",
                "properties": {
                    "task_id": _id("The ID of the task to create the checklist in"),
                    "name": {"type": "string", "description": "Checklist name"},
                },
                "required": ["task_id", "name"],
            },
        ),
        Tool(
            name="update_checklist",
            description="Rename or reorder a checklist",
            inputSchema={
                "type": "object",
                "properties": {
                    "checklist_id": _id("The ID of the checklist to update"),
                    "name": {"type": "string", "description": "New checklist name"},
                    "position": {"type": "number", "description": "Order of the checklist on the task"},
                },
                "required": ["checklist_id"],
            },
        ),
        Tool(
            name="delete_checklist",
            description="Delete a checklist",
            inputSchema={
                "type": "object",
                "properties": {"checklist_id": _id("The ID of the checklist to delete")},
                "required": ["checklist_id"],
            },
        ),
        Tool(
            name="create_checklist_item",
            description="Add an item to a checklist",
            inputSchema={
                "type": "object",
                "properties": {
                    "checklist_id": _id("The ID of the checklist to create the item in"),
                    "name": {"type": "string", "description": "Item name"},
                    **_ITEM_FIELDS,
                },
                "required": ["checklist_id", "name"],
            },
        ),
        Tool(
            name="update_checklist_item",
            description="Update a checklist item",
            inputSchema={
                "type": "object",
                "properties": {
                    "checklist_id": _id("The ID of the checklist containing the item"),
                    "checklist_item_id": _id("The ID of the checklist item to update"),
                    "name": {"type": "string", "description": "New item name"},
                    **_ITEM_FIELDS,
                    "parent": {"type": "string", "description": "ID of another item to nest this one under"},
                },
                "required": ["checklist_id", "checklist_item_id"],
            },
        ),
        Tool(
            name="delete_checklist_item",
            description="Delete a checklist item",
            inputSchema={
                "type": "object",
                "properties": {
                    "checklist_id": _id("The ID of the checklist containing the item"),
                    "checklist_item_id": _id("The ID of the checklist item to delete"),
                },
                "required": ["checklist_id", "checklist_item_id"],
            },
        ),
    ]

    handlers = {
        "create_checklist": ToolHandler(_handle_create_checklist, "creating checklist"),
        "update_checklist": ToolHandler(_handle_update_checklist, "updating checklist"),
        "delete_checklist": ToolHandler(_handle_delete_checklist, "deleting checklist"),
        "create_checklist_item": ToolHandler(_handle_create_checklist_item, "creating checklist item"),
        "update_checklist_item": ToolHandler(_handle_update_checklist_item, "updating checklist item"),
        "delete_checklist_item": ToolHandler(_handle_delete_checklist_item, "deleting checklist item"),
    }
    return tools, handlers


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def _handle_create_checklist(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.checklists.create_checklist(arguments["task_id"], _rest(arguments, "task_id"))


async def _handle_update_checklist(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.checklists.update_checklist(arguments["checklist_id"], _rest(arguments, "checklist_id"))


async def _handle_delete_checklist(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    await bindings.checklists.delete_checklist(arguments["checklist_id"])
    return {"status": "deleted", "checklist_id": arguments["checklist_id"]}


async def _handle_create_checklist_item(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.checklists.create_checklist_item(arguments["checklist_id"], _rest(arguments, "checklist_id"))


async def _handle_update_checklist_item(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.checklists.update_checklist_item(
        arguments["checklist_id"],
        arguments["checklist_item_id"],
        _rest(arguments, "checklist_id", "checklist_item_id"),
    )


async def _handle_delete_checklist_item(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    await bindings.checklists.delete_checklist_item(arguments["checklist_id"], arguments["checklist_item_id"])
    return {
        "status": "deleted",
        "checklist_id": arguments["checklist_id"],
        "checklist_item_id": arguments["checklist_item_id"],
    }
