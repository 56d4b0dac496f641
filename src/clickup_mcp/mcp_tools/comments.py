"""MCP tools for task, chat view and list comments, and threaded replies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.types import Tool

from clickup_mcp.mcp_tools.common import ToolHandler, _id, _rest

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings

_PAGINATION: dict[str, Any] = {
    "start": {"type": "number", "description": "Pagination start (Unix ms of the oldest comment seen)"},
    "start_id": {"type": "string", "description": "Pagination start comment ID"},
}
_TEXT = {"type": "string", "description": "The text content of the comment"}
_ASSIGNEE = {"type": "number", "description": "User ID to assign the comment to"}
_NOTIFY = {"type": "boolean", "description": "Notify all assignees"}


def _read_tool(name: str, key: str, what: str) -> Tool:
    return Tool(
        name=name,
        description=f"Get the comments on a {what}, newest first",
        inputSchema={
            "type": "object",
            "properties": {key: _id(f"The ID of the {what}"), **_PAGINATION},
            "required": [key],
        },
    )


def _create_tool(name: str, key: str, what: str, *, assignable: bool) -> Tool:
    properties: dict[str, Any] = {key: _id(f"The ID of the {what} to comment on"), "comment_text": _TEXT}
    if assignable:
        properties["assignee"] = _ASSIGNEE
    properties["notify_all"] = _NOTIFY
    return Tool(
        name=name,
        description=f"Add a comment to a {what}",
        inputSchema={"type": "object", "properties": properties, "required": [key, "comment_text"]},
    )


def register() -> tuple[list[Tool], dict[str, ToolHandler]]:
    """Return (tool_definitions, handler_map) for comment tools."""
    tools = [
        _read_tool("get_task_comments", "task_id", "task"),
        _create_tool("create_task_comment", "task_id", "task", assignable=True),
        _read_tool("get_chat_view_comments", "view_id", "chat view"),
        _create_tool("create_chat_view_comment", "view_id", "chat view", assignable=False),
        _read_tool("get_list_comments", "list_id", "list"),
        _create_tool("create_list_comment", "list_id", "list", assignable=True),
        Tool(
            name="update_comment",
            description="Edit, reassign or resolve a comment",
            inputSchema={
                "type": "object",
                "properties": {
                    "comment_id": _id("The ID of the comment to update"),
                    "comment_text": {"type": "string", "description": "The new text content of the comment"},
                    "assignee": _ASSIGNEE,
                    "resolved": {"type": "boolean", "description": "Whether the comment is resolved"},
                },
                "required": ["comment_id", "comment_text"],
            },
        ),
        Tool(
            name="delete_comment",
            description="Delete a comment",
            inputSchema={
                "type": "object",
                "properties": {"comment_id": _id("The ID of the comment to delete")},
                "required": ["comment_id"],
            },
        ),
        Tool(
            name="get_threaded_comments",
            description="Get the replies to a comment",
            inputSchema={
                "type": "object",
                "properties": {"comment_id": _id("The ID of the parent comment")},
                "required": ["comment_id"],
            },
        ),
        Tool(
            name="create_threaded_comment",
            description="Reply to a comment",
            inputSchema={
                "type": "object",
                "properties": {
                    "comment_id": _id("The ID of the parent comment"),
                    "comment_text": _TEXT,
                    "notify_all": _NOTIFY,
                },
                "required": ["comment_id", "comment_text"],
            },
        ),
    ]

    handlers = {
        "get_task_comments": ToolHandler(_handle_get_task_comments, "getting task comments"),
        "create_task_comment": ToolHandler(_handle_create_task_comment, "creating task comment"),
        "get_chat_view_comments": ToolHandler(_handle_get_chat_view_comments, "getting chat view comments"),
        "create_chat_view_comment": ToolHandler(_handle_create_chat_view_comment, "creating chat view comment"),
        "get_list_comments": ToolHandler(_handle_get_list_comments, "getting list comments"),
        "create_list_comment": ToolHandler(_handle_create_list_comment, "creating list comment"),
        "update_comment": ToolHandler(_handle_update_comment, "updating comment"),
        "delete_comment": ToolHandler(_handle_delete_comment, "deleting comment"),
        "get_threaded_comments": ToolHandler(_handle_get_threaded_comments, "getting threaded comments"),
        "create_threaded_comment": ToolHandler(_handle_create_threaded_comment, "creating threaded comment"),
    }
    return tools, handlers


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def _handle_get_task_comments(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.comments.get_task_comments(arguments["task_id"], _rest(arguments, "task_id"))


async def _handle_create_task_comment(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.comments.create_task_comment(arguments["task_id"], _rest(arguments, "task_id"))


async def _handle_get_chat_view_comments(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.comments.get_chat_view_comments(arguments["view_id"], _rest(arguments, "view_id"))


async def _handle_create_chat_view_comment(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.comments.create_chat_view_comment(arguments["view_id"], _rest(arguments, "view_id"))


async def _handle_get_list_comments(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.comments.get_list_comments(arguments["list_id"], _rest(arguments, "list_id"))


async def _handle_create_list_comment(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.comments.create_list_comment(arguments["list_id"], _rest(arguments, "list_id"))


async def _handle_update_comment(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.comments.update_comment(arguments["comment_id"], _rest(arguments, "comment_id"))


async def _handle_delete_comment(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    await bindings.comments.delete_comment(arguments["comment_id"])
    return {"status": "deleted", "comment_id": arguments["comment_id"]}


async def _handle_get_threaded_comments(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.comments.get_threaded_comments(arguments["comment_id"])


async def _handle_create_threaded_comment(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.comments.create_threaded_comment(arguments["comment_id"], _rest(arguments, "comment_id"))
