"""Checklists and checklist items. ClickUp only exposes checklists through their task."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from clickup_mcp.client import ClickUpClient, path_id


class ChecklistsBinding:
    def __init__(self, client: ClickUpClient) -> None:
        self._client = client

    async def get_task_checklists(self, task_id: str) -> dict[str, Any]:
        task = await self._client.get(f"/task/{path_id(task_id)}")
        return {
            "task_id": task_id,
            "task_name": task.get("name"),
            "checklists": task.get("checklists", []),
        }

    async def create_checklist(self, task_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.post(f"/task/{path_id(task_id)}/checklist", dict(body))
        return result

    async def update_checklist(self, checklist_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.put(f"/checklist/{path_id(checklist_id)}", dict(body))
        return result

    async def delete_checklist(self, checklist_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.delete(f"/checklist/{path_id(checklist_id)}")
        return result

    async def create_checklist_item(self, checklist_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.post(f"/checklist/{path_id(checklist_id)}/checklist_item", dict(body))
        return result

    async def update_checklist_item(
        self, checklist_id: str, checklist_item_id: str, body: Mapping[str, Any]
    ) -> dict[str, Any]:
        path = f"/checklist/{path_id(checklist_id)}/checklist_item/{path_id(checklist_item_id)}"
        result: dict[str, Any] = await self._client.put(path, dict(body))
        return result

    async def delete_checklist_item(self, checklist_id: str, checklist_item_id: str) -> dict[str, Any]:
        path = f"/checklist/{path_id(checklist_id)}/checklist_item/{path_id(checklist_item_id)}"
        result: dict[str, Any] = await self._client.delete(path)
        return result
