"""Folder resources."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clickup_mcp.mcp_resources.common import ResourceRoute, _route

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings


def register() -> list[ResourceRoute]:
    return [
        _route(
            "space/{space_id}/folders",
            "Space folders",
            "Folders in a space",
            _read_space_folders,
            "fetching space folders",
        ),
        _route("folder/{folder_id}", "Folder", "A folder with its lists", _read_folder, "fetching folder"),
    ]


async def _read_space_folders(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.folders.get_folders_from_space(variables["space_id"])


async def _read_folder(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.folders.get_folder(variables["folder_id"])
