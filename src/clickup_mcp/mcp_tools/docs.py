"""MCP tools for docs."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.types import Tool

from clickup_mcp.mcp_tools.common import ToolHandler, _id, _rest

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings

CONTENT_FORMATS = ("text/md", "text/plain")


def register() -> tuple[list[Tool], dict[str, ToolHandler]]:
    """Return (tool_definitions, handler_map) for doc tools."""
    doc_ref = {
        "workspace_id": _id("The ID of the workspace containing the doc"),
        "doc_id": _id("The ID of the doc"),
    }
    tools = [
        Tool(
            name="get_doc_content",
            description="Get the full text of a doc, all pages joined in reading order",
            inputSchema={"type": "object", "properties": doc_ref, "required": ["doc_id", "workspace_id"]},
        ),
        Tool(
            name="search_docs",
            description="Search docs in a workspace by name; use 'space:<space_id>' to list a space's docs",
            inputSchema={
                "type": "object",
                "properties": {
                    "workspace_id": _id("The ID of the workspace to search in"),
                    "query": {"type": "string", "description": "Doc name, or space:<space_id>"},
                    "cursor": {"type": "string", "description": "Cursor for pagination"},
                },
                "required": ["workspace_id", "query"],
            },
        ),
        Tool(
            name="get_docs_from_workspace",
            description="Get all docs from a workspace",
            inputSchema={
                "type": "object",
                "properties": {
                    "workspace_id": _id("The ID of the workspace to get docs from"),
                    "cursor": {"type": "string", "description": "Cursor for pagination"},
                    "deleted": {"type": "boolean", "description": "Include deleted docs"},
                    "archived": {"type": "boolean", "description": "Include archived docs"},
                    "limit": {"type": "number", "description": "Maximum number of docs to return"},
                },
                "required": ["workspace_id"],
            },
        ),
        Tool(
            name="get_doc_pages",
            description="Get the page tree of a doc",
            inputSchema={
                "type": "object",
                "properties": {
                    **doc_ref,
                    "content_format": {
                        "type": "string",
                        "enum": list(CONTENT_FORMATS),
                        "description": "Format of page content (default text/md)",
                    },
                },
                "required": ["doc_id", "workspace_id"],
            },
        ),
    ]

    handlers = {
        "get_doc_content": ToolHandler(_handle_get_doc_content, "getting doc content"),
        "search_docs": ToolHandler(_handle_search_docs, "searching docs"),
        "get_docs_from_workspace": ToolHandler(_handle_get_docs_from_workspace, "getting docs from workspace"),
        "get_doc_pages": ToolHandler(_handle_get_doc_pages, "getting doc pages"),
    }
    return tools, handlers


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


async def _handle_get_doc_content(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.docs.get_doc_content(arguments["workspace_id"], arguments["doc_id"])


async def _handle_search_docs(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.docs.search_docs(arguments["workspace_id"], arguments["query"], arguments.get("cursor"))


async def _handle_get_docs_from_workspace(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    return await bindings.docs.get_docs_from_workspace(arguments["workspace_id"], _rest(arguments, "workspace_id"))


async def _handle_get_doc_pages(bindings: Bindings, arguments: dict[str, Any]) -> Any:
    content_format = arguments.get("content_format") or "text/md"
    return await bindings.docs.get_doc_pages(arguments["workspace_id"], arguments["doc_id"], content_format)
