"""Authorized user and workspace (team) lookups."""

from __future__ import annotations

from typing import Any

from clickup_mcp.client import ClickUpClient, path_id


class AuthBinding:
    def __init__(self, client: ClickUpClient) -> None:
        self._client = client

    async def get_authorized_user(self) -> dict[str, Any]:
        """Return the user the API token belongs to."""
        result: dict[str, Any] = await self._client.get("/user")
        return result

    async def get_workspaces(self) -> dict[str, Any]:
        """Return ``{"teams": [...]}``. ClickUp calls workspaces "teams" in v2."""
        result: dict[str, Any] = await self._client.get("/team")
        return result

    async def get_workspace_seats(self, workspace_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/team/{path_id(workspace_id)}/seats")
        return result
