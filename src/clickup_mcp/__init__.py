"""clickup-mcp: ClickUp exposed as MCP tools and resources."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("clickup-mcp")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"

from clickup_mcp.client import ClickUpClient
from clickup_mcp.errors import ClickUpAPIError, ConfigurationError, CredentialsError, InvalidParamsError

__all__ = [
    "ClickUpAPIError",
    "ClickUpClient",
    "ConfigurationError",
    "CredentialsError",
    "InvalidParamsError",
    "__version__",
]
