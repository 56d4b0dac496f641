"""One-shot OAuth flow for obtaining a ClickUp API token.

Serves a tiny local app: ``/`` links to ``/auth``, which redirects to
ClickUp's consent page; ClickUp redirects back to ``/auth/callback`` with a
code that is exchanged for an access token. The token is handed to
``on_token`` and the server shuts down.
"""

from __future__ import annotations

import html
import logging
import secrets
import webbrowser
from collections.abc import Callable
from pathlib import Path
from urllib.parse import urlencode

import httpx
from fastapi import FastAPI
from fastapi.responses import HTMLResponse, RedirectResponse

from clickup_mcp.config import save_api_token
from clickup_mcp.errors import ClickUpAPIError, ConfigurationError

logger = logging.getLogger(__name__)

AUTHORIZE_URL = "https://app.clickup.com/api"
TOKEN_URL = "https://api.clickup.com/api/v2/oauth/token"
DEFAULT_OAUTH_PORT = 4000


def authorize_url(client_id: str, redirect_uri: str, state: str) -> str:
    query = urlencode({"client_id": client_id, "redirect_uri": redirect_uri, "state": state})
    return f"{AUTHORIZE_URL}?{query}"


async def exchange_code(
    client_id: str,
    client_secret: str,
    code: str,
    *,
    token_url: str = TOKEN_URL,
    transport: httpx.AsyncBaseTransport | None = None,
) -> str:
    """Trade an authorization code for an access token."""
    params = {"client_id": client_id, "client_secret": client_secret, "code": code}
    try:
        async with httpx.AsyncClient(transport=transport, timeout=30.0) as http:
            response = await http.post(token_url, params=params)
            response.raise_for_status()
            body = response.json()
    except httpx.HTTPStatusError as exc:
        raise ClickUpAPIError.from_status(exc.response.status_code, exc.response.text or exc.response.reason_phrase) from exc
    except (httpx.HTTPError, ValueError) as exc:
        msg = f"ClickUp API request failed: {exc}"
        raise ClickUpAPIError(msg, "network") from exc

    token = body.get("access_token") if isinstance(body, dict) else None
    if not token:
        msg = "ClickUp token response did not include access_token"
        raise ClickUpAPIError(msg, "network", response.status_code)
    return str(token)


def _page(title: str, message: str, status_code: int = 200) -> HTMLResponse:
    body = f"<!doctype html><title>{html.escape(title)}</title><h1>{html.escape(title)}</h1><p>{message}</p>"
    return HTMLResponse(body, status_code=status_code)


def create_oauth_app(
    client_id: str,
    client_secret: str,
    redirect_uri: str,
    on_token: Callable[[str], None],
    *,
    state: str | None = None,
    token_url: str = TOKEN_URL,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Create the FastAPI app that drives one authorization round trip."""
    expected_state = state or secrets.token_urlsafe(16)
    app = FastAPI(title="ClickUp MCP authorization", docs_url=None, redoc_url=None, openapi_url=None)

    @app.get("/", response_class=HTMLResponse)
    async def index() -> HTMLResponse:
        return _page("ClickUp MCP", '<a href="/auth">Authorize with ClickUp</a>')

    @app.get("/auth")
    async def auth() -> RedirectResponse:
        return RedirectResponse(authorize_url(client_id, redirect_uri, expected_state))

    @app.get("/auth/callback", response_class=HTMLResponse)
    async def callback(code: str | None = None, state: str | None = None) -> HTMLResponse:
        if state != expected_state:
            logger.warning("OAuth callback with mismatched state")
            return _page("Authorization failed", "State mismatch. Start again from /auth.", 400)
        if not code:
            return _page("Authorization failed", "No authorization code received.", 400)
        try:
            token = await exchange_code(client_id, client_secret, code, token_url=token_url, transport=transport)
        except ClickUpAPIError as exc:
            logger.error("OAuth token exchange failed: %s", exc)
            return _page("Authorization failed", html.escape(str(exc)), 500)
        on_token(token)
        return _page("Authorization complete", "The token was saved. You can close this window.")

    return app


def run_oauth_flow(
    client_id: str,
    client_secret: str,
    home_dir: Path,
    *,
    port: int = DEFAULT_OAUTH_PORT,
    no_browser: bool = False,
) -> str:
    """Run the local authorization server until a token arrives, then save it to config.json."""
    import threading

    import uvicorn

    received: list[str] = []

    def on_token(token: str) -> None:
        received.append(token)
        server.should_exit = True

    redirect_uri = f"http://localhost:{port}/auth/callback"
    app = create_oauth_app(client_id, client_secret, redirect_uri, on_token)
    server = uvicorn.Server(uvicorn.Config(app, host="127.0.0.1", port=port, log_level="warning"))

    if not no_browser:
        threading.Timer(0.5, lambda: webbrowser.open(f"http://localhost:{port}/auth")).start()

    print(f"Waiting for ClickUp authorization on http://localhost:{port}/auth")
    server.run()

    if not received:
        msg = "Authorization did not complete; no token was received"
        raise ConfigurationError(msg)
    save_api_token(home_dir, received[0])
    return received[0]
