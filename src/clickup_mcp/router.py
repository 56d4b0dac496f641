"""Tool and resource dispatch.

Both routers are built once at startup from the per-category ``register()``
functions. Construction validates the catalogs (unique tool names, one
handler per tool, unambiguous URI templates) and raises ConfigurationError
on any defect, so a bad catalog never reaches the transport.

Tool calls never raise: every outcome, including unknown tools and backend
failures, comes back as a CallToolResult. Resource reads raise McpError,
which the SDK turns into a JSON-RPC error response.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Any

from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    CallToolResult,
    ErrorData,
    ReadResourceResult,
    Resource,
    ResourceTemplate,
    TextResourceContents,
    Tool,
)

from clickup_mcp.errors import ConfigurationError, InvalidParamsError
from clickup_mcp.mcp_resources import checklists as checklist_resources
from clickup_mcp.mcp_resources import comments as comment_resources
from clickup_mcp.mcp_resources import docs as doc_resources
from clickup_mcp.mcp_resources import folders as folder_resources
from clickup_mcp.mcp_resources import lists as list_resources
from clickup_mcp.mcp_resources import spaces as space_resources
from clickup_mcp.mcp_resources import tasks as task_resources
from clickup_mcp.mcp_resources.common import ResourceRoute, compile_template, template_variables
from clickup_mcp.mcp_tools import checklists, comments, docs, folders, lists, spaces, tasks, workspaces
from clickup_mcp.mcp_tools.common import ToolHandler, _missing_required, _text

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings

logger = logging.getLogger(__name__)

# JSON-RPC code used by MCP servers for an unknown resource URI.
RESOURCE_NOT_FOUND = -32002

ToolRegistration = tuple[list[Tool], dict[str, ToolHandler]]

TOOL_MODULES = (workspaces, tasks, lists, folders, spaces, docs, comments, checklists)
RESOURCE_MODULES = (
    task_resources,
    comment_resources,
    checklist_resources,
    doc_resources,
    space_resources,
    folder_resources,
    list_resources,
)


def default_tool_registrations() -> list[ToolRegistration]:
    return [mod.register() for mod in TOOL_MODULES]


def default_resource_routes() -> list[ResourceRoute]:
    return [route for mod in RESOURCE_MODULES for route in mod.register()]


def _error_result(message: str) -> CallToolResult:
    return CallToolResult(content=_text(message), isError=True)


def _serialize(payload: Any) -> str:
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, indent=2, default=str)


# ---------------------------------------------------------------------------
# Tools
# ---------------------------------------------------------------------------


class ToolRouter:
    """Maps tool names to handlers and wraps every outcome in a CallToolResult."""

    def __init__(self, bindings: Bindings, registrations: Iterable[ToolRegistration] | None = None) -> None:
        self._bindings = bindings
        self._tools: list[Tool] = []
        self._handlers: dict[str, ToolHandler] = {}
        self._required: dict[str, tuple[str, ...]] = {}

        for tools, handlers in default_tool_registrations() if registrations is None else registrations:
            tool_names = {t.name for t in tools}
            if tool_names != set(handlers):
                msg = (
                    f"Tool/handler mismatch: tools without handlers={sorted(tool_names - set(handlers))}, "
                    f"handlers without tools={sorted(set(handlers) - tool_names)}"
                )
                raise ConfigurationError(msg)
            for tool in tools:
                if tool.name in self._handlers:
                    msg = f"Duplicate tool name: {tool.name}"
                    raise ConfigurationError(msg)
                self._tools.append(tool)
                self._handlers[tool.name] = handlers[tool.name]
                self._required[tool.name] = tuple(tool.inputSchema.get("required", ()))

    def list_tools(self) -> list[Tool]:
        return list(self._tools)

    def has_tool(self, name: str) -> bool:
        return name in self._handlers

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> CallToolResult:
        handler = self._handlers.get(name)
        if handler is None:
            return _error_result(f"Unknown tool: {name}")

        args = dict(arguments or {})
        missing = _missing_required(self._required[name], args)
        if missing is not None:
            return _error_result(f"{missing} is required")

        try:
            payload = await handler.func(self._bindings, args)
        except InvalidParamsError as exc:
            return _error_result(str(exc))
        except Exception as exc:
            logger.debug("Tool %s failed", name, exc_info=True)
            return _error_result(f"Error {handler.action}: {exc}")
        return CallToolResult(content=_text(payload), isError=False)


# ---------------------------------------------------------------------------
# Resources
# ---------------------------------------------------------------------------


def _segments_overlap(a: str, b: str) -> bool:
    """Whether some path segment could satisfy both template segments."""
    if a == b:
        return True
    a_vars, b_vars = template_variables(a), template_variables(b)
    if a_vars and b_vars:
        # Treated as overlapping even when their literal parts differ.
        return True
    if a_vars:
        return compile_template(a).match(b) is not None
    if b_vars:
        return compile_template(b).match(a) is not None
    return False


def templates_overlap(a: str, b: str) -> bool:
    """Whether some concrete URI matches both templates.

    Variables never span a ``/``, so templates are compared segment by segment:
    they overlap when they have as many segments and every pair can agree.
    """
    a_parts, b_parts = a.split("/"), b.split("/")
    if len(a_parts) != len(b_parts):
        return False
    return all(_segments_overlap(x, y) for x, y in zip(a_parts, b_parts))


def check_unambiguous(routes: Sequence[ResourceRoute]) -> None:
    """Raise ConfigurationError if two templates can match the same concrete URI."""
    seen: set[str] = set()
    for route in routes:
        if route.uri_template in seen:
            msg = f"Duplicate resource template: {route.uri_template}"
            raise ConfigurationError(msg)
        seen.add(route.uri_template)

    for i, route in enumerate(routes):
        for other in routes[i + 1 :]:
            if templates_overlap(route.uri_template, other.uri_template):
                msg = f"Ambiguous resource templates: {route.uri_template} and {other.uri_template} can match the same URI"
                raise ConfigurationError(msg)


class ResourceRouter:
    """Resolves ``clickup://`` URIs against the template catalog, first match wins."""

    def __init__(self, bindings: Bindings, routes: Iterable[ResourceRoute] | None = None) -> None:
        self._bindings = bindings
        self._routes = list(default_resource_routes() if routes is None else routes)
        check_unambiguous(self._routes)

    def list_resource_templates(self) -> list[ResourceTemplate]:
        return [route.template for route in self._routes]

    def list_resources(self) -> list[Resource]:
        return []

    def resolve(self, uri: str) -> tuple[ResourceRoute, dict[str, str]] | None:
        for route in self._routes:
            variables = route.match(uri)
            if variables is not None:
                return route, variables
        return None

    async def read_resource(self, uri: str) -> ReadResourceResult:
        """Read one resource. Raises McpError for unknown URIs and backend failures."""
        resolved = self.resolve(uri)
        if resolved is None:
            raise McpError(ErrorData(code=RESOURCE_NOT_FOUND, message=f"Unknown resource: {uri}"))

        route, variables = resolved
        try:
            payload = await route.reader(self._bindings, variables)
        except Exception as exc:
            logger.debug("Resource %s failed", uri, exc_info=True)
            raise McpError(ErrorData(code=INTERNAL_ERROR, message=f"Error {route.action}: {exc}")) from exc

        contents = TextResourceContents(uri=uri, mimeType=route.mime_type, text=_serialize(payload))  # type: ignore[arg-type]
        return ReadResourceResult(contents=[contents])
