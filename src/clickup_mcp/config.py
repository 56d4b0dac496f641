"""Settings resolution: environment first, then ``~/.clickup-mcp/config.json``, then defaults."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from clickup_mcp.errors import CredentialsError

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.json"
DEFAULT_HOME_DIR = Path.home() / ".clickup-mcp"
DEFAULT_BASE_URL = "https://api.clickup.com/api/v2"
DEFAULT_V3_BASE_URL = "https://api.clickup.com/api/v3"
DEFAULT_TIMEOUT_SECONDS = 30.0

ENV_API_TOKEN = "CLICKUP_API_TOKEN"
ENV_BASE_URL = "CLICKUP_API_BASE_URL"
ENV_V3_BASE_URL = "CLICKUP_API_V3_BASE_URL"
ENV_TIMEOUT = "CLICKUP_TIMEOUT_SECONDS"
ENV_HOME = "CLICKUP_MCP_HOME"
ENV_LOG_DIR = "CLICKUP_MCP_LOG_DIR"
ENV_CLIENT_ID = "CLICKUP_CLIENT_ID"
ENV_CLIENT_SECRET = "CLICKUP_CLIENT_SECRET"


@dataclass(frozen=True)
class Settings:
    api_token: str
    base_url: str = DEFAULT_BASE_URL
    v3_base_url: str = DEFAULT_V3_BASE_URL
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    home_dir: Path = DEFAULT_HOME_DIR
    log_dir: Path = DEFAULT_HOME_DIR


def read_config(home_dir: Path) -> dict[str, Any]:
    """Read config.json. Returns an empty dict if missing or corrupt."""
    config_path = home_dir / CONFIG_FILENAME
    if not config_path.exists():
        return {}
    try:
        data = json.loads(config_path.read_text())
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Failed to read %s, ignoring it: %s", config_path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring %s: expected a JSON object", config_path)
        return {}
    return data


def write_config(home_dir: Path, config: Mapping[str, Any]) -> Path:
    """Write config.json (owner-only permissions, it may hold the API token)."""
    home_dir.mkdir(parents=True, exist_ok=True)
    config_path = home_dir / CONFIG_FILENAME
    config_path.write_text(json.dumps(dict(config), indent=2) + "\n")
    try:
        config_path.chmod(0o600)
    except OSError:
        logger.debug("Could not restrict permissions on %s", config_path, exc_info=True)
    return config_path


def save_api_token(home_dir: Path, token: str) -> Path:
    """Persist an API token obtained out-of-band (e.g. the OAuth flow)."""
    config = read_config(home_dir)
    config["api_token"] = token
    return write_config(home_dir, config)


def resolve_home_dir(environ: Mapping[str, str] | None = None) -> Path:
    env = os.environ if environ is None else environ
    raw = env.get(ENV_HOME)
    return Path(raw).expanduser() if raw else DEFAULT_HOME_DIR


def _parse_timeout(raw: Any) -> float:
    if raw is None or raw == "":
        return DEFAULT_TIMEOUT_SECONDS
    try:
        value = float(raw)
    except (TypeError, ValueError):
        logger.warning("Invalid timeout %r, using %s", raw, DEFAULT_TIMEOUT_SECONDS)
        return DEFAULT_TIMEOUT_SECONDS
    return value if value > 0 else DEFAULT_TIMEOUT_SECONDS


def load_settings(
    environ: Mapping[str, str] | None = None,
    *,
    home_dir: Path | None = None,
    require_token: bool = True,
) -> Settings:
    """Resolve settings from the environment and config.json.

    Raises CredentialsError when ``require_token`` is set and no token is found.
    """
    env = os.environ if environ is None else environ
    home = home_dir or resolve_home_dir(env)
    file_config = read_config(home)

    def pick(env_key: str, file_key: str, default: Any) -> Any:
        value = env.get(env_key)
        if value:
            return value
        return file_config.get(file_key) or default

    token = pick(ENV_API_TOKEN, "api_token", "")
    if require_token and not token:
        msg = f"{ENV_API_TOKEN} is not set and no api_token found in {home / CONFIG_FILENAME}. Run 'clickup-mcp auth' or export the variable."
        raise CredentialsError(msg)

    log_dir_raw = pick(ENV_LOG_DIR, "log_dir", None)
    return Settings(
        api_token=str(token),
        base_url=str(pick(ENV_BASE_URL, "base_url", DEFAULT_BASE_URL)).rstrip("/"),
        v3_base_url=str(pick(ENV_V3_BASE_URL, "v3_base_url", DEFAULT_V3_BASE_URL)).rstrip("/"),
        timeout_seconds=_parse_timeout(pick(ENV_TIMEOUT, "timeout_seconds", None)),
        home_dir=home,
        log_dir=Path(log_dir_raw).expanduser() if log_dir_raw else home,
    )
