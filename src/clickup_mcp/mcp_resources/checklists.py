"""Checklist resources. Checklists are only reachable through their task."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clickup_mcp.mcp_resources.common import ResourceRoute, _route

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings


def register() -> list[ResourceRoute]:
    return [
        _route(
            "task/{task_id}/checklist",
            "Task checklists",
            "Checklists (with items) on a task",
            _read_task_checklists,
            "fetching checklists",
        ),
    ]


async def _read_task_checklists(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.checklists.get_task_checklists(variables["task_id"])
