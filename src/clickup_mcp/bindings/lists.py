"""List CRUD, list templates, and multi-list task membership."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from clickup_mcp.client import ClickUpClient, path_id


class ListsBinding:
    def __init__(self, client: ClickUpClient) -> None:
        self._client = client

    async def get_lists_from_folder(self, folder_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/folder/{path_id(folder_id)}/list", params)
        return result

    async def get_lists_from_space(self, space_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        """Folderless lists of a space."""
        result: dict[str, Any] = await self._client.get(f"/space/{path_id(space_id)}/list", params)
        return result

    async def get_list(self, list_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/list/{path_id(list_id)}")
        return result

    async def create_list_in_folder(self, folder_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.post(f"/folder/{path_id(folder_id)}/list", dict(body))
        return result

    async def create_folderless_list(self, space_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.post(f"/space/{path_id(space_id)}/list", dict(body))
        return result

    async def update_list(self, list_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.put(f"/list/{path_id(list_id)}", dict(body))
        return result

    async def delete_list(self, list_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.delete(f"/list/{path_id(list_id)}")
        return result

    async def add_task_to_list(self, list_id: str, task_id: str) -> dict[str, Any]:
        """Requires the Tasks in Multiple Lists ClickApp on the workspace."""
        result: dict[str, Any] = await self._client.post(f"/list/{path_id(list_id)}/task/{path_id(task_id)}")
        return result

    async def remove_task_from_list(self, list_id: str, task_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.delete(f"/list/{path_id(list_id)}/task/{path_id(task_id)}")
        return result

    async def create_list_from_template_in_folder(
        self, folder_id: str, template_id: str, body: Mapping[str, Any]
    ) -> dict[str, Any]:
        path = f"/folder/{path_id(folder_id)}/list/template/{path_id(template_id)}"
        result: dict[str, Any] = await self._client.post(path, dict(body))
        return result

    async def create_list_from_template_in_space(
        self, space_id: str, template_id: str, body: Mapping[str, Any]
    ) -> dict[str, Any]:
        path = f"/space/{path_id(space_id)}/list/template/{path_id(template_id)}"
        result: dict[str, Any] = await self._client.post(path, dict(body))
        return result
