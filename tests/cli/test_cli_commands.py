"""CLI commands (click CliRunner)."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from click.testing import CliRunner

from clickup_mcp.cli import cli
from clickup_mcp.errors import ClickUpAPIError, ConfigurationError


class TestCatalogCommands:
    def test_tools_lists_every_tool(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tools"])
        assert result.exit_code == 0
        assert "create_task" in result.output
        assert "47 tools" in result.output

    def test_tools_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["tools", "--json"])
        assert result.exit_code == 0
        rows = json.loads(result.output)
        create = next(r for r in rows if r["name"] == "create_task")
        assert create["required"] == ["list_id", "name"]

    def test_templates_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["templates", "--json"])
        assert result.exit_code == 0
        rows = json.loads(result.output)
        assert rows[0] == {"uriTemplate": "clickup://task/{task_id}", "name": "Task", "mimeType": "application/json"}

    def test_templates_plain(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["templates"])
        assert "clickup://workspace/{workspace_id}/doc/{doc_id}" in result.output
        assert "text/markdown" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "clickup-mcp" in result.output


class TestWhoami:
    def test_without_token(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["whoami"])
        assert result.exit_code == 1
        assert "CLICKUP_API_TOKEN" in result.output

    def test_prints_user(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLICKUP_API_TOKEN", "pk_test")
        fake = AsyncMock(return_value={"user": {"id": 7, "username": "ada", "email": "ada@example.com"}})
        with patch("clickup_mcp.cli.AuthBinding.get_authorized_user", fake):
            result = cli_runner.invoke(cli, ["whoami"])
        assert result.exit_code == 0
        assert "ada <ada@example.com> (id 7)" in result.output

    def test_api_error(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLICKUP_API_TOKEN", "pk_bad")
        fake = AsyncMock(side_effect=ClickUpAPIError.from_status(401, "Token invalid"))
        with patch("clickup_mcp.cli.AuthBinding.get_authorized_user", fake):
            result = cli_runner.invoke(cli, ["whoami"])
        assert result.exit_code == 1
        assert "ClickUp API Error (401): Token invalid" in result.output


class TestAuth:
    def test_requires_client_credentials(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("CLICKUP_CLIENT_ID", raising=False)
        monkeypatch.delenv("CLICKUP_CLIENT_SECRET", raising=False)
        result = cli_runner.invoke(cli, ["auth"])
        assert result.exit_code == 2
        assert "client-id" in result.output

    def test_runs_flow_with_env_credentials(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("CLICKUP_CLIENT_ID", "cid")
        monkeypatch.setenv("CLICKUP_CLIENT_SECRET", "secret")
        monkeypatch.setenv("CLICKUP_MCP_HOME", str(tmp_path))
        with patch("clickup_mcp.cli.run_oauth_flow", return_value="tok") as flow:
            result = cli_runner.invoke(cli, ["auth", "--port", "4100", "--no-browser"])
        assert result.exit_code == 0, result.output
        flow.assert_called_once_with("cid", "secret", tmp_path, port=4100, no_browser=True)
        assert str(tmp_path / "config.json") in result.output

    def test_flow_failure(self, cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CLICKUP_CLIENT_ID", "cid")
        monkeypatch.setenv("CLICKUP_CLIENT_SECRET", "secret")
        with patch("clickup_mcp.cli.run_oauth_flow", side_effect=ConfigurationError("no token")):
            result = cli_runner.invoke(cli, ["auth", "--no-browser"])
        assert result.exit_code == 1
        assert "no token" in result.output


class TestServe:
    def test_serve_runs_server(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        fake_run = AsyncMock()
        with patch("clickup_mcp.mcp_server._run", fake_run):
            result = cli_runner.invoke(cli, ["serve", "--log-dir", str(tmp_path)])
        assert result.exit_code == 0, result.output
        fake_run.assert_awaited_once_with(tmp_path)
