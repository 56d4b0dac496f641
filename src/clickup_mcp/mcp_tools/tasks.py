"""MCP tools for tasks."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.types import Tool

from clickup_mcp.mcp_tools.common import ToolHandler, _container_type, _id, _rest

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings

TASK_CONTAINERS = ("list", "folder", "space")

_TASK_FIELDS: dict[str, Any] = {
    "description": {"type": "string", "description": "Task description (markdown)"},
    "assignees": {"type": "array", "items": {"type": "number"}, "description": "User IDs to assign"},
    "tags": {"type": "array", "items": {"type": "string"}, "description": "Tag names"},
    "status": {"type": "string", "description": "Status name"},
    "priority": {"type": "number", "description": "Priority 1 (urgent) to 4 (low)"},
    "due_date": {"type": "number", "description": "Due date (Unix ms)"},
    "due_date_time": {"type": "boolean", "description": "Whether the due date includes a time"},
    "time_estimate": {"type": "number", "description": "Time estimate in milliseconds"},
    "start_date": {"type": "number", "description": "Start date (Unix ms)"},
    "start_date_time": {"type": "boolean", "description": "Whether the start date includes a time"},
}


def register() -> tuple[list[Tool], dict[str, ToolHandler]]:
    """Return (tool_definitions, handler_map) for task tools."""
    tools = [
        Tool(
            name="get_tasks",
            description="Get tasks from a list, or from every list in a folder or space",
            inputSchema={
                "type": "object",
                "properties": {
                    "container_type": {
                        "type": "string",
                        "enum": list(TASK_CONTAINERS),
                        "description": "Kind of container to read tasks from",
                    },
                    "container_id": _id("The ID of the list, folder or space"),
                    "include_closed": {"type": "boolean", "description": "Include closed tasks"},
                    "subtasks": {"type": "boolean", "description": "Include subtasks"},
                    "page": {"type": "number", "description": "Page number (0-based)"},
                    "order_by": {"type": "string", "description": "Field to order by"},
                    "reverse": {"type": "boolean", "description": "Reverse the order"},
                },
                "required": ["container_type", "container_id"],
            },
        ),
        Tool(
            name="get_task_details",
            description="Get a single task",
            inputSchema={
                "type": "object",
                "properties": {
                    "task_id": _id("The ID of the task to get"),
                    "include_subtasks": {"type": "boolean", "description": "Include subtasks in the details"},
                },
                "required": ["task_id"],
            },
        ),
        Tool(
            name="create_task",
            description="Create a task in a list",
            inputSchema={
                "type": "object",
                "properties": {
                    "list_id": _id("The ID of the list to create the task in"),
                    "name": {"type": "string", "description": "Task name"},
                    **_TASK_FIELDS,
                    "notify_all": {"type": "boolean", "description": "Notify all assignees"},
                    "parent": {"type": "string", "description": "Parent task ID (creates a subtask)"},
                },
                "required": ["list_id", "name"],
            },
        ),
        Tool(
            name="update_task",
            description="Update fields of a task",
            inputSchema={
                "type": "object",
                "properties": {
                    "task_id": _id("The ID of the task to update"),
                    "name": {"type": "string", "description": "New task name"},
                    **_TASK_FIELDS,
                },
                "required": ["task_id"],
            },
        ),
        Tool(
            name="delete_task",
            description="Delete a task",
            inputSchema={
                "type": "object",
                "properties": {"task_id": _id("The ID of the task to delete")},
                "required": ["task_id"],
            },
        ),
        Tool(
            name="get_subtasks",
            description="Get the direct subtasks of a task",
            inputSchema={
                "type": "object",
                "properties": {"task_id": _id("The ID of the parent task")},
                "required": ["task_id"],
            },
        ),
    ]

    handlers = {
        "get_tasks": ToolHandler(_handle_get_tasks, "getting tasks"),
        "get_task_details": ToolHandler(_handle_get_task_details, "getting task details"),
        "create_task": ToolHandler(_handle_create_task, "creating task"),
        "update_task": ToolHandler(_handle_update_task, "updating task"),
        "delete_task": ToolHandler(_handle_delete_task, "deleting task"),
        "get_subtasks": ToolHandler(_handle_get_subtasks, "getting subtasks"),
    }
    return tools, handlers


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def _handle_get_tasks(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    container_type = _container_type(arguments, TASK_CONTAINERS)
    container_id = arguments["container_id"]
    params = _rest(arguments, "container_type", "container_id")
    if container_type == "list":
        return await bindings.tasks.get_tasks_from_list(container_id, params)
    if container_type == "folder":
        return await bindings.tasks.get_tasks_from_folder(container_id, params)
    return await bindings.tasks.get_tasks_from_space(container_id, params)


async def _handle_get_task_details(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.tasks.get_task(arguments["task_id"], _rest(arguments, "task_id"))


async def _handle_create_task(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.tasks.create_task(arguments["list_id"], _rest(arguments, "list_id"))


async def _handle_update_task(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.tasks.update_task(arguments["task_id"], _rest(arguments, "task_id"))


async def _handle_delete_task(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    await bindings.tasks.delete_task(arguments["task_id"])
    return {"status": "deleted", "task_id": arguments["task_id"]}


async def _handle_get_subtasks(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.tasks.get_subtasks(arguments["task_id"])
