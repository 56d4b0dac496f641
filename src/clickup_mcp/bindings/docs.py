"""Docs (v3 API for listing and pages, v2 for search)."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from clickup_mcp.client import ClickUpClient, path_id

NO_DOC_CONTENT = "No content found in this doc."
SPACE_QUERY_PREFIX = "space:"


def _walk(pages: Iterable[Any]) -> Iterable[str]:
    for page in pages:
        if not isinstance(page, dict):
            continue
        content = page.get("content")
        if isinstance(content, str) and content:
            yield content
        children = page.get("pages")
        if isinstance(children, list):
            yield from _walk(children)


def combine_doc_pages(pages: Any) -> str:
    """Join the ``content`` of every page, depth-first, with a blank line between pages."""
    if isinstance(pages, dict):
        pages = pages.get("pages", [])
    if not isinstance(pages, list):
        return NO_DOC_CONTENT
    combined = "\n\n".join(_walk(pages))
    return combined or NO_DOC_CONTENT


class DocsBinding:
    def __init__(self, client: ClickUpClient) -> None:
        self._client = client

    async def get_docs_from_workspace(
        self, workspace_id: str, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        query: dict[str, Any] = {"deleted": False, "archived": False, "limit": 50}
        query.update({k: v for k, v in (params or {}).items() if v is not None})
        response = await self._client.get(f"/workspaces/{path_id(workspace_id)}/docs", query, api="v3")
        docs: list[dict[str, Any]] = response.get("docs", []) if isinstance(response, dict) else []
        return docs

    async def get_doc_pages(self, workspace_id: str, doc_id: str, content_format: str = "text/md") -> Any:
        params = {"max_page_depth": -1, "content_format": content_format}
        return await self._client.get(f"/workspaces/{path_id(workspace_id)}/docs/{path_id(doc_id)}/pages", params, api="v3")

    async def search_docs(self, workspace_id: str, query: str, cursor: str | None = None) -> list[dict[str, Any]]:
        """Search docs by name, or list a space's docs with ``space:<space_id>``."""
        params: dict[str, Any] = {"cursor": cursor}
        if query.startswith(SPACE_QUERY_PREFIX):
            params["space_id"] = query[len(SPACE_QUERY_PREFIX) :]
        else:
            params["doc_name"] = query
        response = await self._client.get(f"/team/{path_id(workspace_id)}/docs/search", params)
        docs: list[dict[str, Any]] = response.get("docs", []) if isinstance(response, dict) else []
        return docs

    async def get_doc_content(self, workspace_id: str, doc_id: str) -> str:
        pages = await self.get_doc_pages(workspace_id, doc_id)
        return combine_doc_pages(pages)
