"""Shared pytest fixtures for clickup-mcp tests."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from click.testing import CliRunner

from clickup_mcp.bindings import Bindings
from clickup_mcp.config import ENV_API_TOKEN, ENV_HOME, ENV_LOG_DIR
from tests._fakes import make_stub_bindings


@pytest.fixture
def stub_bindings() -> Bindings:
    """Bindings whose every operation is an AsyncMock returning ``{}``."""
    return make_stub_bindings()


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory) -> Generator[None, None, None]:
    """Keep tests away from the developer's real token and ~/.clickup-mcp."""
    home = tmp_path_factory.mktemp("clickup-home")
    monkeypatch.delenv(ENV_API_TOKEN, raising=False)
    monkeypatch.delenv(ENV_LOG_DIR, raising=False)
    monkeypatch.setenv(ENV_HOME, str(home))
    yield
