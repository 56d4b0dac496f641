"""Doc resources: the combined text of every page, served as markdown."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from clickup_mcp.mcp_resources.common import MARKDOWN_MIME, ResourceRoute, _route

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings


def register() -> list[ResourceRoute]:
    return [
        _route(
            "workspace/{workspace_id}/doc/{doc_id}",
            "Doc content",
            "All pages of a doc joined in reading order",
            _read_doc,
            "fetching doc",
            mime_type=MARKDOWN_MIME,
        ),
    ]


async def _read_doc(bindings: Bindings, variables: dict[str, str]) -> Any:
    return await bindings.docs.get_doc_content(variables["workspace_id"], variables["doc_id"])
