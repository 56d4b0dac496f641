"""List resources: lists of a folder or space, and a single list."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clickup_mcp.mcp_resources.common import ResourceRoute, _route

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings


def register() -> list[ResourceRoute]:
    return [
        _route(
            "folder/{folder_id}/lists",
            "Folder lists",
            "Lists in a folder",
            _read_folder_lists,
            "fetching folder lists",
        ),
        _route(
            "space/{space_id}/lists",
            "Space lists",
            "Folderless lists in a space",
            _read_space_lists,
            "fetching space lists",
        ),
        _route("list/{list_id}", "List", "A list with its details", _read_list, "fetching list"),
    ]


async def _read_folder_lists(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.lists.get_lists_from_folder(variables["folder_id"])


async def _read_space_lists(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.lists.get_lists_from_space(variables["space_id"])


async def _read_list(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.lists.get_list(variables["list_id"])
