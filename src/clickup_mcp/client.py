"""Async HTTP client for the ClickUp REST API (v2 and v3).

A thin passthrough: one method per HTTP verb, every failure translated into
:class:`~clickup_mcp.errors.ClickUpAPIError` so bindings never see httpx
exceptions.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Literal
from urllib.parse import quote

import httpx

from clickup_mcp.config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT_SECONDS, DEFAULT_V3_BASE_URL, Settings
from clickup_mcp.errors import ClickUpAPIError, CredentialsError

logger = logging.getLogger(__name__)

ApiVersion = Literal["v2", "v3"]


def _error_detail(response: httpx.Response) -> str:
    """Pull ClickUp's ``err`` field out of an error body, falling back to the reason phrase."""
    try:
        body = response.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None
    if isinstance(body, dict):
        for key in ("err", "error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return response.reason_phrase or "Unknown error"


def path_id(value: object) -> str:
    """Percent-encode an identifier as a single path segment.

    ``/``, ``?`` and ``#`` are escaped, so an id can never reach a different endpoint.
    """
    return quote(str(value), safe="")


def _clean_params(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    if not params:
        return None
    return {k: v for k, v in params.items() if v is not None}


class ClickUpClient:
    """Shared connection to ClickUp. Construct once per process; bindings hold a reference."""

    def __init__(
        self,
        api_token: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        v3_base_url: str = DEFAULT_V3_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not api_token:
            msg = "ClickUp API token is required"
            raise CredentialsError(msg)
        self._base_urls: dict[ApiVersion, str] = {
            "v2": base_url.rstrip("/"),
            "v3": v3_base_url.rstrip("/"),
        }
        self._http = httpx.AsyncClient(
            headers={
                "Authorization": api_token,
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, *, transport: httpx.AsyncBaseTransport | None = None) -> ClickUpClient:
        return cls(
            settings.api_token,
            base_url=settings.base_url,
            v3_base_url=settings.v3_base_url,
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> ClickUpClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    def url_for(self, path: str, api: ApiVersion = "v2") -> str:
        return f"{self._base_urls[api]}/{path.lstrip('/')}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        json_body: Any = None,
        api: ApiVersion = "v2",
    ) -> Any:
        """Issue one request and return the decoded JSON body (``{}`` when empty)."""
        url = self.url_for(path, api)
        try:
            response = await self._http.request(method, url, params=_clean_params(params), json=json_body)
        except httpx.TimeoutException as exc:
            msg = f"ClickUp API request failed: timed out ({method} {path})"
            raise ClickUpAPIError(msg, "network") from exc
        except httpx.HTTPError as exc:
            msg = f"ClickUp API request failed: {exc}"
            raise ClickUpAPIError(msg, "network") from exc

        if response.is_error:
            detail = _error_detail(response)
            logger.debug("ClickUp %s %s -> %d: %s", method, path, response.status_code, detail)
            raise ClickUpAPIError.from_status(response.status_code, detail)

        if not response.content:
            return {}
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            msg = "Invalid JSON response from ClickUp API"
            raise ClickUpAPIError(msg, "network", response.status_code) from exc

    async def get(self, path: str, params: Mapping[str, Any] | None = None, *, api: ApiVersion = "v2") -> Any:
        return await self.request("GET", path, params=params, api=api)

    async def post(self, path: str, body: Any = None, *, api: ApiVersion = "v2") -> Any:
        return await self.request("POST", path, json_body=body, api=api)

    async def put(self, path: str, body: Any = None, *, api: ApiVersion = "v2") -> Any:
        return await self.request("PUT", path, json_body=body, api=api)

    async def delete(self, path: str, *, api: ApiVersion = "v2") -> Any:
        return await self.request("DELETE", path, api=api)
