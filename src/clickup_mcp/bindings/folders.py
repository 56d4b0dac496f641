"""Folder CRUD."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from clickup_mcp.client import ClickUpClient, path_id


class FoldersBinding:
    def __init__(self, client: ClickUpClient) -> None:
        self._client = client

    async def get_folders_from_space(self, space_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/space/{path_id(space_id)}/folder", params)
        return result

    async def get_folder(self, folder_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/folder/{path_id(folder_id)}")
        return result

    async def get_lists_from_folder(self, folder_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/folder/{path_id(folder_id)}/list", params)
        return result

    async def create_folder(self, space_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.post(f"/space/{path_id(space_id)}/folder", dict(body))
        return result

    async def update_folder(self, folder_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.put(f"/folder/{path_id(folder_id)}", dict(body))
        return result

    async def delete_folder(self, folder_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.delete(f"/folder/{path_id(folder_id)}")
        return result
