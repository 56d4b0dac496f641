"""Space resources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clickup_mcp.mcp_resources.common import ResourceRoute, _route

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings


def register() -> list[ResourceRoute]:
    return [
        _route(
            "workspace/{workspace_id}/spaces",
            "Workspace spaces",
            "Spaces in a workspace",
            _read_spaces,
            "fetching spaces",
        ),
        _route("space/{space_id}", "Space", "A space with its details", _read_space, "fetching space"),
    ]


async def _read_spaces(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.spaces.get_spaces(variables["workspace_id"])


async def _read_space(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.spaces.get_space(variables["space_id"])
