"""Pure helpers and types shared across MCP tool modules.

Nothing here touches ``mcp_server`` or the router, so tool modules can
import it without circular-import issues.
"""

from __future__ import annotations

import json
from collections.abc import Awaitable, Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from mcp.types import TextContent

from clickup_mcp.errors import InvalidParamsError

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings

ToolFunc = Callable[["Bindings", dict[str, Any]], Awaitable[Any]]


@dataclass(frozen=True)
class ToolHandler:
    """An async tool implementation plus the gerund used in its error messages."""

    func: ToolFunc
    action: str


def _text(content: object) -> list[TextContent]:
    if isinstance(content, str):
        return [TextContent(type="text", text=content)]
    return [TextContent(type="text", text=json.dumps(content, indent=2, default=str))]


def _is_missing(value: Any) -> bool:
    return value is None or value == ""


def _missing_required(required: Iterable[str], arguments: Mapping[str, Any]) -> str | None:
    """Return the first required argument that is absent, ``None`` or ``""``."""
    for name in required:
        if _is_missing(arguments.get(name)):
            return name
    return None


def _rest(arguments: Mapping[str, Any], *path_params: str) -> dict[str, Any]:
    """Arguments minus the identifying path parameters and any ``None`` values."""
    return {k: v for k, v in arguments.items() if k not in path_params and v is not None}


def _container_type(arguments: Mapping[str, Any], allowed: tuple[str, ...]) -> str:
    value = arguments.get("container_type")
    if value not in allowed:
        msg = f"Invalid container_type: {value}. Must be one of: {', '.join(allowed)}"
        raise InvalidParamsError(msg)
    return str(value)


def _id(description: str) -> dict[str, str]:
    return {"type": "string", "description": description}
