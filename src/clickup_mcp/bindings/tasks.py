"""Task CRUD plus the container-wide and subtask reads that ClickUp has no endpoint for."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from clickup_mcp.client import ClickUpClient, path_id
from clickup_mcp.errors import ClickUpAPIError

logger = logging.getLogger(__name__)


def _list_ids(payload: Any) -> list[str]:
    lists = payload.get("lists", []) if isinstance(payload, dict) else []
    return [str(item["id"]) for item in lists if isinstance(item, dict) and item.get("id") is not None]


class TasksBinding:
    def __init__(self, client: ClickUpClient) -> None:
        self._client = client

    async def get_tasks_from_list(self, list_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/list/{path_id(list_id)}/task", params)
        return result

    async def _collect(self, list_ids: list[str], params: Mapping[str, Any] | None) -> dict[str, Any]:
        tasks: list[Any] = []
        for list_id in list_ids:
            page = await self.get_tasks_from_list(list_id, params)
            tasks.extend(page.get("tasks", []))
        return {"tasks": tasks}

    async def get_tasks_from_folder(self, folder_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Tasks of every list in a folder, in list order."""
        lists = await self._client.get(f"/folder/{path_id(folder_id)}/list")
        return await self._collect(_list_ids(lists), params)

    async def get_tasks_from_space(self, space_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Tasks of every list in a space: folderless lists first, then each folder's lists."""
        list_ids = _list_ids(await self._client.get(f"/space/{path_id(space_id)}/list"))
        folders = await self._client.get(f"/space/{path_id(space_id)}/folder")
        for folder in folders.get("folders", []) if isinstance(folders, dict) else []:
            list_ids.extend(_list_ids(folder))
        return await self._collect(list_ids, params)

    async def get_task(self, task_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/task/{path_id(task_id)}", params)
        return result

    async def create_task(self, list_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.post(f"/list/{path_id(list_id)}/task", dict(body))
        return result

    async def update_task(self, task_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.put(f"/task/{path_id(task_id)}", dict(body))
        return result

    async def delete_task(self, task_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.delete(f"/task/{path_id(task_id)}")
        return result

    async def get_subtasks(self, task_id: str) -> list[dict[str, Any]]:
        """Subtasks of a task.

        ClickUp has no subtask endpoint: read the parent to find its list, read
        that list with ``subtasks=true`` and keep the tasks whose ``parent`` is
        the given task. A parent with no resolvable list yields ``[]``.
        """
        try:
            task = await self.get_task(task_id)
        except ClickUpAPIError as exc:
            logger.warning("Cannot resolve task %s for subtasks: %s", task_id, exc)
            return []

        task_list = task.get("list") if isinstance(task, dict) else None
        list_id = task_list.get("id") if isinstance(task_list, dict) else None
        if not list_id:
            logger.warning("Task %s has no list; returning no subtasks", task_id)
            return []

        try:
            page = await self.get_tasks_from_list(str(list_id), {"subtasks": True})
        except ClickUpAPIError as exc:
            logger.warning("Cannot read list %s for subtasks of %s: %s", list_id, task_id, exc)
            return []

        tasks = page.get("tasks") if isinstance(page, dict) else None
        if not isinstance(tasks, list):
            logger.warning("List %s returned no task array for subtasks of %s", list_id, task_id)
            return []
        parent_id = str(task_id)
        return [t for t in tasks if isinstance(t, dict) and t.get("parent") is not None and str(t["parent"]) == parent_id]
