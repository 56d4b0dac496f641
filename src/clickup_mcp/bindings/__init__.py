"""Backend Operation Bindings: one adapter per ClickUp resource category.

Bindings are stateless wrappers around a shared :class:`ClickUpClient`.
They are built once at startup by :func:`create_bindings` and handed to the
routers; no binding holds per-request state.
"""

from __future__ import annotations

from dataclasses import dataclass

from clickup_mcp.bindings.auth import AuthBinding
from clickup_mcp.bindings.checklists import ChecklistsBinding
from clickup_mcp.bindings.comments import CommentsBinding
from clickup_mcp.bindings.docs import NO_DOC_CONTENT, DocsBinding, combine_doc_pages
from clickup_mcp.bindings.folders import FoldersBinding
from clickup_mcp.bindings.lists import ListsBinding
from clickup_mcp.bindings.spaces import SpacesBinding
from clickup_mcp.bindings.tasks import TasksBinding
from clickup_mcp.client import ClickUpClient


@dataclass(frozen=True)
class Bindings:
    auth: AuthBinding
    tasks: TasksBinding
    lists: ListsBinding
    folders: FoldersBinding
    spaces: SpacesBinding
    docs: DocsBinding
    comments: CommentsBinding
    checklists: ChecklistsBinding


def create_bindings(client: ClickUpClient) -> Bindings:
    """Build every binding around one shared client."""
    return Bindings(
        auth=AuthBinding(client),
        tasks=TasksBinding(client),
        lists=ListsBinding(client),
        folders=FoldersBinding(client),
        spaces=SpacesBinding(client),
        docs=DocsBinding(client),
        comments=CommentsBinding(client),
        checklists=ChecklistsBinding(client),
    )


__all__ = [
    "NO_DOC_CONTENT",
    "AuthBinding",
    "Bindings",
    "ChecklistsBinding",
    "CommentsBinding",
    "DocsBinding",
    "FoldersBinding",
    "ListsBinding",
    "SpacesBinding",
    "TasksBinding",
    "combine_doc_pages",
    "create_bindings",
]
