"""CLI for the ClickUp MCP server.

Usage:
    clickup-mcp serve                 # Run the MCP server on stdio
    clickup-mcp auth                  # Obtain and save a token via OAuth
    clickup-mcp tools [--json]        # List the MCP tools
    clickup-mcp templates [--json]    # List the resource URI templates
    clickup-mcp whoami                # Check the configured token
"""

from __future__ import annotations

import asyncio
import json as json_mod
import sys
from pathlib import Path
from typing import Any

import click

from clickup_mcp import __version__
from clickup_mcp.bindings.auth import AuthBinding
from clickup_mcp.client import ClickUpClient
from clickup_mcp.config import ENV_CLIENT_ID, ENV_CLIENT_SECRET, load_settings, resolve_home_dir
from clickup_mcp.errors import ClickUpAPIError, ConfigurationError
from clickup_mcp.oauth import DEFAULT_OAUTH_PORT, run_oauth_flow
from clickup_mcp.router import default_resource_routes, default_tool_registrations


@click.group()
@click.version_option(version=__version__, prog_name="clickup-mcp")
def cli() -> None:
    """ClickUp exposed as MCP tools and resources."""


@cli.command()
@click.option("--log-dir", type=click.Path(path_type=Path), default=None, help="Directory for clickup-mcp.log")
def serve(log_dir: Path | None) -> None:
    """Run the MCP server over stdio."""
    from clickup_mcp.mcp_server import _run

    asyncio.run(_run(log_dir))


@cli.command()
@click.option("--client-id", envvar=ENV_CLIENT_ID, required=True, help=f"OAuth app client ID (or ${ENV_CLIENT_ID})")
@click.option("--client-secret", envvar=ENV_CLIENT_SECRET, required=True, help=f"OAuth app secret (or ${ENV_CLIENT_SECRET})")
@click.option("--port", default=DEFAULT_OAUTH_PORT, type=int, help=f"Local callback port (default: {DEFAULT_OAUTH_PORT})")
@click.option("--no-browser", is_flag=True, help="Print the URL instead of opening a browser")
def auth(client_id: str, client_secret: str, port: int, no_browser: bool) -> None:
    """Authorize with ClickUp and save the token to config.json."""
    home_dir = resolve_home_dir()
    try:
        run_oauth_flow(client_id, client_secret, home_dir, port=port, no_browser=no_browser)
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Token saved to {home_dir / 'config.json'}")


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def tools(as_json: bool) -> None:
    """List the MCP tools in registration order."""
    catalog = [tool for defs, _ in default_tool_registrations() for tool in defs]
    if as_json:
        rows: list[dict[str, Any]] = [
            {"name": t.name, "description": t.description, "required": t.inputSchema.get("required", [])} for t in catalog
        ]
        click.echo(json_mod.dumps(rows, indent=2))
        return
    for t in catalog:
        click.echo(f"{t.name:<40} {t.description}")
    click.echo(f"\n{len(catalog)} tools")


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def templates(as_json: bool) -> None:
    """List the resource URI templates in match order."""
    routes = default_resource_routes()
    if as_json:
        rows = [{"uriTemplate": r.uri_template, "name": r.template.name, "mimeType": r.mime_type} for r in routes]
        click.echo(json_mod.dumps(rows, indent=2))
        return
    for r in routes:
        click.echo(f"{r.uri_template:<50} {r.mime_type}")


@cli.command()
def whoami() -> None:
    """Show the ClickUp user the configured token belongs to."""
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    async def _fetch() -> dict[str, Any]:
        async with ClickUpClient.from_settings(settings) as client:
            return await AuthBinding(client).get_authorized_user()

    try:
        result = asyncio.run(_fetch())
    except ClickUpAPIError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    user = result.get("user", result)
    click.echo(f"{user.get('username', '?')} <{user.get('email', '?')}> (id {user.get('id', '?')})")
