"""Error taxonomy shared by the client, bindings and routers.

This module imports nothing from the rest of the package so every layer
can raise these without circular imports.
"""

from __future__ import annotations

from typing import Literal

StatusClass = Literal["4xx", "5xx", "network"]


class ClickUpAPIError(Exception):
    """A remote ClickUp call failed.

    ``status_class`` is ``"4xx"``/``"5xx"`` for HTTP errors and ``"network"``
    for transport failures (DNS, refused connections, timeouts, bad bodies).
    ``str(exc)`` is the human-readable message forwarded to MCP clients.
    """

    def __init__(self, message: str, status_class: StatusClass, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_class = status_class
        self.status_code = status_code

    @classmethod
    def from_status(cls, status_code: int, detail: str) -> ClickUpAPIError:
        status_class: StatusClass = "5xx" if status_code >= 500 else "4xx"
        return cls(f"ClickUp API Error ({status_code}): {detail}", status_class, status_code)


class InvalidParamsError(ValueError):
    """A tool call is missing a required argument or carries a bad discriminant."""


class ConfigurationError(Exception):
    """The tool or resource catalog is inconsistent. Fatal at startup."""


class CredentialsError(ConfigurationError):
    """No ClickUp API token could be resolved."""
