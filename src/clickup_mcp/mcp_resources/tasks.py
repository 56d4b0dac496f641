"""Task resources: a task, its subtasks, and the tasks of a list."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clickup_mcp.mcp_resources.common import ResourceRoute, _route

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings


def register() -> list[ResourceRoute]:
    return [
        _route("task/{task_id}", "Task", "A task with its details", _read_task, "fetching task"),
        _route(
            "task/{task_id}/subtasks",
            "Task subtasks",
            "Direct subtasks of a task",
            _read_subtasks,
            "fetching subtasks",
        ),
        _route("list/{list_id}/tasks", "List tasks", "Tasks in a list", _read_list_tasks, "fetching list tasks"),
    ]


async def _read_task(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.tasks.get_task(variables["task_id"])


async def _read_subtasks(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.tasks.get_subtasks(variables["task_id"])


async def _read_list_tasks(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.tasks.get_tasks_from_list(variables["list_id"])
