"""MCP server exposing ClickUp as tools and resources.

Usage:
    clickup-mcp-server                      # token from CLICKUP_API_TOKEN or ~/.clickup-mcp/config.json
    clickup-mcp-server --log-dir /tmp/logs  # write clickup-mcp.log somewhere else
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from mcp.server import Server
from mcp.server.lowlevel.helper_types import ReadResourceContents
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import CallToolResult, Resource, ResourceTemplate, TextContent, TextResourceContents, Tool

from clickup_mcp import __version__
from clickup_mcp.bindings import Bindings, create_bindings
from clickup_mcp.client import ClickUpClient
from clickup_mcp.config import load_settings
from clickup_mcp.errors import ConfigurationError
from clickup_mcp.logging import elapsed_ms, log_resource_read, log_tool_call, setup_logging
from clickup_mcp.router import ResourceRouter, ToolRouter

SERVER_NAME = "clickup-mcp"


def _first_text(result: CallToolResult) -> str:
    for block in result.content:
        if isinstance(block, TextContent):
            return block.text
    return ""


async def _call_tool_logged(
    router: ToolRouter, name: str, arguments: dict[str, Any] | None, logger: logging.Logger | None
) -> CallToolResult:
    started = time.monotonic()
    result = await router.call_tool(name, arguments)
    if logger:
        error = _first_text(result) if result.isError else None
        log_tool_call(logger, name, arguments, elapsed_ms(started), error=error)
    return result


async def _read_resource_logged(router: ResourceRouter, uri: str, logger: logging.Logger | None) -> list[ReadResourceContents]:
    started = time.monotonic()
    try:
        result = await router.read_resource(uri)
    except McpError as exc:
        if logger:
            log_resource_read(logger, uri, elapsed_ms(started), error=exc.error.message)
        raise
    if logger:
        log_resource_read(logger, uri, elapsed_ms(started))
    return [ReadResourceContents(content=c.text, mime_type=c.mimeType) for c in result.contents if isinstance(c, TextResourceContents)]


def build_server(bindings: Bindings, *, logger: logging.Logger | None = None) -> Server:
    """Wire both routers into a low-level MCP server.

    Raises ConfigurationError if the tool or resource catalog is inconsistent.
    """
    tool_router = ToolRouter(bindings)
    resource_router = ResourceRouter(bindings)
    server: Server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()  # type: ignore[untyped-decorator,no-untyped-call]
    async def list_tools() -> list[Tool]:
        return tool_router.list_tools()

    # Input validation is off so missing-argument messages come from the router.
    @server.call_tool(validate_input=False)  # type: ignore[untyped-decorator]
    async def call_tool(name: str, arguments: dict[str, Any]) -> CallToolResult:
        return await _call_tool_logged(tool_router, name, arguments, logger)

    @server.list_resources()  # type: ignore[untyped-decorator,no-untyped-call]
    async def list_resources() -> list[Resource]:
        return resource_router.list_resources()

    @server.list_resource_templates()  # type: ignore[untyped-decorator,no-untyped-call]
    async def list_resource_templates() -> list[ResourceTemplate]:
        return resource_router.list_resource_templates()

    @server.read_resource()  # type: ignore[untyped-decorator,no-untyped-call]
    async def read_resource(uri: Any) -> Iterable[ReadResourceContents]:
        return await _read_resource_logged(resource_router, str(uri), logger)

    return server


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


async def _run(log_dir: Path | None) -> None:
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    logger = setup_logging(log_dir or settings.log_dir)
    logger.info("mcp_server_start", extra={"tool": "server", "args_data": {"base_url": settings.base_url}})

    async with ClickUpClient.from_settings(settings) as client:
        server = build_server(create_bindings(client), logger=logger)
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())


def main() -> None:
    import asyncio

    parser = argparse.ArgumentParser(description="ClickUp MCP server (stdio)")
    parser.add_argument("--log-dir", type=Path, default=None, help="Directory for clickup-mcp.log (default: ~/.clickup-mcp)")
    args = parser.parse_args()

    asyncio.run(_run(args.log_dir))


if __name__ == "__main__":
    main()
