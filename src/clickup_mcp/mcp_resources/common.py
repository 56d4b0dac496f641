"""Shared types for resource modules: a template descriptor bound to its reader."""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from mcp.types import ResourceTemplate

from clickup_mcp.errors import ConfigurationError

if TYPE_CHECKING:
    from clickup_mcp.bindings import Bindings

SCHEME = "clickup://"
JSON_MIME = "application/json"
MARKDOWN_MIME = "text/markdown"

ResourceReader = Callable[["Bindings", dict[str, str]], Awaitable[Any]]

_VARIABLE = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")


def template_variables(uri_template: str) -> list[str]:
    return _VARIABLE.findall(uri_template)


def compile_template(uri_template: str) -> re.Pattern[str]:
    """Compile ``clickup://task/{task_id}`` into an anchored pattern with one named group per variable.

    Raises ConfigurationError if a variable name repeats.
    """
    names = template_variables(uri_template)
    if len(names) != len(set(names)):
        msg = f"Duplicate variable in resource template: {uri_template}"
        raise ConfigurationError(msg)
    parts: list[str] = []
    pos = 0
    for match in _VARIABLE.finditer(uri_template):
        parts.append(re.escape(uri_template[pos : match.start()]))
        parts.append(f"(?P<{match.group(1)}>[^/]+)")
        pos = match.end()
    parts.append(re.escape(uri_template[pos:]))
    return re.compile("^" + "".join(parts) + "$")


@dataclass(frozen=True)
class ResourceRoute:
    template: ResourceTemplate
    reader: ResourceReader
    action: str
    pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "pattern", compile_template(self.template.uriTemplate))

    @property
    def uri_template(self) -> str:
        return self.template.uriTemplate

    @property
    def mime_type(self) -> str:
        return self.template.mimeType or JSON_MIME

    def match(self, uri: str) -> dict[str, str] | None:
        m = self.pattern.match(uri)
        return m.groupdict() if m else None


def _route(
    path: str,
    name: str,
    description: str,
    reader: ResourceReader,
    action: str,
    *,
    mime_type: str = JSON_MIME,
) -> ResourceRoute:
    template = ResourceTemplate(
        uriTemplate=SCHEME + path,
        name=name,
        description=description,
        mimeType=mime_type,
    )
    return ResourceRoute(template=template, reader=reader, action=action)
