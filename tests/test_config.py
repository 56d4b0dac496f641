"""Settings resolution: environment, config.json, defaults."""

from __future__ import annotations

import json
import stat
from pathlib import Path

import pytest

from clickup_mcp.config import (
    CONFIG_FILENAME,
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT_SECONDS,
    load_settings,
    read_config,
    resolve_home_dir,
    save_api_token,
    write_config,
)
from clickup_mcp.errors import ConfigurationError, CredentialsError


class TestConfigFile:
    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        assert read_config(tmp_path) == {}

    def test_round_trip_and_permissions(self, tmp_path: Path) -> None:
        path = write_config(tmp_path / "home", {"api_token": "pk_1"})
        assert read_config(tmp_path / "home") == {"api_token": "pk_1"}
        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_corrupt_file_is_ignored(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("{not json")
        assert read_config(tmp_path) == {}
        assert any("Failed to read" in r.getMessage() for r in caplog.records)

    def test_non_object_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("[1, 2]")
        assert read_config(tmp_path) == {}

    def test_save_token_keeps_other_keys(self, tmp_path: Path) -> None:
        write_config(tmp_path, {"timeout_seconds": 5})
        save_api_token(tmp_path, "pk_new")
        assert json.loads((tmp_path / CONFIG_FILENAME).read_text()) == {"timeout_seconds": 5, "api_token": "pk_new"}


class TestLoadSettings:
    def test_env_token_wins_over_file(self, tmp_path: Path) -> None:
        write_config(tmp_path, {"api_token": "pk_file"})
        settings = load_settings({"CLICKUP_API_TOKEN": "pk_env"}, home_dir=tmp_path)
        assert settings.api_token == "pk_env"

    def test_file_token_used_when_env_empty(self, tmp_path: Path) -> None:
        write_config(tmp_path, {"api_token": "pk_file", "base_url": "https://eu.test/api/v2/"})
        settings = load_settings({"CLICKUP_API_TOKEN": ""}, home_dir=tmp_path)
        assert settings.api_token == "pk_file"
        assert settings.base_url == "https://eu.test/api/v2"

    def test_defaults(self, tmp_path: Path) -> None:
        settings = load_settings({"CLICKUP_API_TOKEN": "pk"}, home_dir=tmp_path)
        assert settings.base_url == DEFAULT_BASE_URL
        assert settings.timeout_seconds == DEFAULT_TIMEOUT_SECONDS
        assert settings.log_dir == tmp_path
        assert settings.home_dir == tmp_path

    def test_missing_token_raises(self, tmp_path: Path) -> None:
        with pytest.raises(CredentialsError, match="clickup-mcp auth"):
            load_settings({}, home_dir=tmp_path)

    def test_credentials_error_is_configuration_error(self) -> None:
        assert issubclass(CredentialsError, ConfigurationError)

    def test_token_optional_when_not_required(self, tmp_path: Path) -> None:
        assert load_settings({}, home_dir=tmp_path, require_token=False).api_token == ""

    @pytest.mark.parametrize(("raw", "expected"), [("12.5", 12.5), ("abc", DEFAULT_TIMEOUT_SECONDS), ("-1", DEFAULT_TIMEOUT_SECONDS)])
    def test_timeout_parsing(self, tmp_path: Path, raw: str, expected: float) -> None:
        settings = load_settings({"CLICKUP_API_TOKEN": "pk", "CLICKUP_TIMEOUT_SECONDS": raw}, home_dir=tmp_path)
        assert settings.timeout_seconds == expected

    def test_log_dir_override(self, tmp_path: Path) -> None:
        settings = load_settings({"CLICKUP_API_TOKEN": "pk", "CLICKUP_MCP_LOG_DIR": str(tmp_path / "logs")}, home_dir=tmp_path)
        assert settings.log_dir == tmp_path / "logs"

    def test_home_from_environment(self, tmp_path: Path) -> None:
        assert resolve_home_dir({"CLICKUP_MCP_HOME": str(tmp_path)}) == tmp_path
        write_config(tmp_path, {"api_token": "pk_home"})
        assert load_settings({"CLICKUP_MCP_HOME": str(tmp_path)}).api_token == "pk_home"
