"""Space lookups."""

from __future__ import annotations

from typing import Any

from clickup_mcp.client import ClickUpClient, path_id


class SpacesBinding:
    def __init__(self, client: ClickUpClient) -> None:
        self._client = client

    async def get_spaces(self, workspace_id: str) -> list[dict[str, Any]]:
        """Return the spaces of a workspace (the ``spaces`` array, unwrapped)."""
        response = await self._client.get(f"/team/{path_id(workspace_id)}/space")
        spaces: list[dict[str, Any]] = response.get("spaces", []) if isinstance(response, dict) else []
        return spaces

    async def get_space(self, space_id: str) -> dict[str, Any]:
        result: dict[str, Any] = await self._client.get(f"/space/{path_id(space_id)}")
        return result
