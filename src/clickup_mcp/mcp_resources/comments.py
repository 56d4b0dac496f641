"""Comment resources for tasks, chat views and lists, plus threaded replies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clickup_mcp.mcp_resources.common import ResourceRoute, _route

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings


def register() -> list[ResourceRoute]:
    return [
        _route(
            "task/{task_id}/comments",
            "Task comments",
            "Comments on a task",
            _read_task_comments,
            "fetching task comments",
        ),
        _route(
            "view/{view_id}/comments",
            "Chat view comments",
            "Messages in a chat view",
            _read_chat_view_comments,
            "fetching chat view comments",
        ),
        _route(
            "list/{list_id}/comments",
            "List comments",
            "Comments on a list",
            _read_list_comments,
            "fetching list comments",
        ),
        _route(
            "comment/{comment_id}/reply",
            "Threaded comments",
            "Replies to a comment",
            _read_threaded_comments,
            "fetching threaded comments",
        ),
    ]


async def _read_task_comments(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.comments.get_task_comments(variables["task_id"])


async def _read_chat_view_comments(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.comments.get_chat_view_comments(variables["view_id"])


async def _read_list_comments(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.comments.get_list_comments(variables["list_id"])


async def _read_threaded_comments(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.comments.get_threaded_comments(variables["comment_id"])
