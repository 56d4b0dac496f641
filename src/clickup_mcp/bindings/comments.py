"""Task, chat view and list comments, plus threaded replies."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from clickup_mcp.client import ClickUpClient, path_id


class CommentsBinding:
    def __init__(self, client: ClickUpClient) -> None:
        self._client = client

    async def get_task_comments(self, task_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/task/{path_id(task_id)}/comment", params)
        return result

    async def create_task_comment(self, task_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.post(f"/task/{path_id(task_id)}/comment", dict(body))
        return result

    async def get_chat_view_comments(self, view_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/view/{path_id(view_id)}/comment", params)
        return result

    async def create_chat_view_comment(self, view_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.post(f"/view/{path_id(view_id)}/comment", dict(body))
        return result

    async def get_list_comments(self, list_id: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/list/{path_id(list_id)}/comment", params)
        return result

    async def create_list_comment(self, list_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.post(f"/list/{path_id(list_id)}/comment", dict(body))
        return result

    async def update_comment(self, comment_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.put(f"/comment/{path_id(comment_id)}", dict(body))
        return result

    async def delete_comment(self, comment_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.delete(f"/comment/{path_id(comment_id)}")
        return result

    async def get_threaded_comments(self, comment_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/comment/{path_id(comment_id)}/reply")
        return result

    async def create_threaded_comment(self, comment_id: str, body: Mapping[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.post(f"/comment/{path_id(comment_id)}/reply", dict(body))
        return result
