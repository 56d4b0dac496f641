"""Fixtures for MCP router and server tests."""

from __future__ import annotations

import pytest

from clickup_mcp.bindings import Bindings
from clickup_mcp.router import ResourceRouter, ToolRouter


@pytest.fixture
def tool_router(stub_bindings: Bindings) -> ToolRouter:
    return ToolRouter(stub_bindings)


@pytest.fixture
def resource_router(stub_bindings: Bindings) -> ResourceRouter:
    return ResourceRouter(stub_bindings)
