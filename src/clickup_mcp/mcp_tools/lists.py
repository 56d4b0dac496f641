"""MCP tools for lists, list templates and multi-list task membership."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.types import Tool

from clickup_mcp.mcp_tools.common import ToolHandler, _container_type, _id, _rest

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings

LIST_CONTAINERS = ("folder", "space")

_ARCHIVED = {"type": "boolean", "description": "Include archived lists"}
_LIST_FIELDS: dict[str, Any] = {
    "content": {"type": "string", "description": "List description"},
    "due_date": {"type": "number", "description": "Due date (Unix ms)"},
    "priority": {"type": "number", "description": "Priority 1 (urgent) to 4 (low)"},
    "assignee": {"type": "number", "description": "User ID of the list owner"},
    "status": {"type": "string", "description": "List color status"},
}


def _schema(properties: dict[str, Any], required: list[str]) -> dict[str, Any]:
    return {"type": "object", "properties": properties, "required": required}


def register() -> tuple[list[Tool], dict[str, ToolHandler]]:
    """Return (tool_definitions, handler_map) for list tools."""
    container = {
        "container_type": {
            "type": "string",
            "enum": list(LIST_CONTAINERS),
            "description": "Kind of container holding the lists",
        },
        "container_id": _id("The ID of the folder or space"),
    }
    tools = [
        Tool(
            name="get_lists",
            description="Get the lists in a folder, or the folderless lists of a space",
            inputSchema=_schema({**container, "archived": _ARCHIVED}, ["container_type", "container_id"]),
        ),
        Tool(
            name="get_folderless_lists",
            description="Get the lists of a space that are not in any folder",
            inputSchema=_schema(
                {"space_id": _id("The ID of the space"), "archived": _ARCHIVED},
                ["space_id"],
            ),
        ),
        Tool(
            name="create_list",
            description="Create a list in a folder, or a folderless list in a space",
            inputSchema=_schema(
                {**container, "name": {"type": "string", "description": "List name"}, **_LIST_FIELDS},
                ["container_type", "container_id", "name"],
            ),
        ),
        Tool(
            name="create_folderless_list",
            description="Create a list directly in a space",
            inputSchema=_schema(
                {
                    "space_id": _id("The ID of the space to create the list in"),
                    "name": {"type": "string", "description": "List name"},
                    **_LIST_FIELDS,
                },
                ["space_id", "name"],
            ),
        ),
        Tool(
            name="get_list",
            description="Get details of a list",
            inputSchema=_schema({"list_id": _id("The ID of the list")}, ["list_id"]),
        ),
        Tool(
            name="update_list",
            description="Update a list",
            inputSchema=_schema(
                {
                    "list_id": _id("The ID of the list to update"),
                    "name": {"type": "string", "description": "New list name"},
                    **_LIST_FIELDS,
                },
                ["list_id"],
            ),
        ),
        Tool(
            name="delete_list",
            description="Delete a list",
            inputSchema=_schema({"list_id": _id("The ID of the list to delete")}, ["list_id"]),
        ),
        Tool(
            name="add_task_to_list",
            description="Add a task to an additional list (requires the Tasks in Multiple Lists ClickApp)",
            inputSchema=_schema(
                {"list_id": _id("The ID of the list"), "task_id": _id("The ID of the task")},
                ["list_id", "task_id"],
            ),
        ),
        Tool(
            name="remove_task_from_list",
            description="Remove a task from an additional list (not its home list)",
            inputSchema=_schema(
                {"list_id": _id("The ID of the list"), "task_id": _id("The ID of the task")},
                ["list_id", "task_id"],
            ),
        ),
        Tool(
            name="create_list_from_template_in_folder",
            description="Create a list in a folder from a list template",
            inputSchema=_schema(
                {
                    "folder_id": _id("The ID of the folder"),
                    "template_id": _id("The ID of the list template"),
                    "name": {"type": "string", "description": "List name"},
                },
                ["folder_id", "template_id", "name"],
            ),
        ),
        Tool(
            name="create_list_from_template_in_space",
            description="Create a folderless list in a space from a list template",
            inputSchema=_schema(
                {
                    "space_id": _id("The ID of the space"),
                    "template_id": _id("The ID of the list template"),
                    "name": {"type": "string", "description": "List name"},
                },
                ["space_id", "template_id", "name"],
            ),
        ),
    ]

    handlers = {
        "get_lists": ToolHandler(_handle_get_lists, "getting lists"),
        "get_folderless_lists": ToolHandler(_handle_get_folderless_lists, "getting folderless lists"),
        "create_list": ToolHandler(_handle_create_list, "creating list"),
        "create_folderless_list": ToolHandler(_handle_create_folderless_list, "creating folderless list"),
        "get_list": ToolHandler(_handle_get_list, "getting list"),
        "update_list": ToolHandler(_handle_update_list, "updating list"),
        "delete_list": ToolHandler(_handle_delete_list, "deleting list"),
        "add_task_to_list": ToolHandler(_handle_add_task_to_list, "adding task to list"),
        "remove_task_from_list": ToolHandler(_handle_remove_task_from_list, "removing task from list"),
        "create_list_from_template_in_folder": ToolHandler(
            _handle_create_list_from_template_in_folder, "creating list from template in folder"
        ),
        "create_list_from_template_in_space": ToolHandler(
            _handle_create_list_from_template_in_space, "creating list from template in space"
        ),
    }
    return tools, handlers


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def _handle_get_lists(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    container_type = _container_type(arguments, LIST_CONTAINERS)
    params = _rest(arguments, "container_type", "container_id")
    if container_type == "folder":
        return await bindings.lists.get_lists_from_folder(arguments["container_id"], params)
    return await bindings.lists.get_lists_from_space(arguments["container_id"], params)


async def _handle_get_folderless_lists(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.lists.get_lists_from_space(arguments["space_id"], _rest(arguments, "space_id"))


async def _handle_create_list(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    container_type = _container_type(arguments, LIST_CONTAINERS)
    body = _rest(arguments, "container_type", "container_id")
    if container_type == "folder":
        return await bindings.lists.create_list_in_folder(arguments["container_id"], body)
    return await bindings.lists.create_folderless_list(arguments["container_id"], body)


async def _handle_create_folderless_list(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.lists.create_folderless_list(arguments["space_id"], _rest(arguments, "space_id"))


async def _handle_get_list(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.lists.get_list(arguments["list_id"])


async def _handle_update_list(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.lists.update_list(arguments["list_id"], _rest(arguments, "list_id"))


async def _handle_delete_list(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    await bindings.lists.delete_list(arguments["list_id"])
    return {"status": "deleted", "list_id": arguments["list_id"]}


async def _handle_add_task_to_list(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    await bindings.lists.add_task_to_list(arguments["list_id"], arguments["task_id"])
    return {"status": "added", "list_id": arguments["list_id"], "task_id": arguments["task_id"]}


async def _handle_remove_task_from_list(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    await bindings.lists.remove_task_from_list(arguments["list_id"], arguments["task_id"])
    return {"status": "removed", "list_id": arguments["list_id"], "task_id": arguments["task_id"]}


async def _handle_create_list_from_template_in_folder(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    body = _rest(arguments, "folder_id", "template_id")
    return await bindings.lists.create_list_from_template_in_folder(arguments["folder_id"], arguments["template_id"], body)


async def _handle_create_list_from_template_in_space(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    body = _rest(arguments, "space_id", "template_id")
    return await bindings.lists.create_list_from_template_in_space(arguments["space_id"], arguments["template_id"], body)
