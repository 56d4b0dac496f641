"""Resource dispatch: template matching, URI echo, payload shaping and errors."""

from __future__ import annotations

import pytest
from mcp.shared.exceptions import McpError
from mcp.types import INTERNAL_ERROR

from clickup_mcp.bindings import Bindings, create_bindings
from clickup_mcp.errors import ClickUpAPIError
from clickup_mcp.router import RESOURCE_NOT_FOUND, ResourceRouter
from tests._fakes import FakeClickUp
from tests.mcp._helpers import concrete_uri

EXPECTED_TEMPLATES = [
    "clickup://task/{task_id}",
    "clickup://task/{task_id}/subtasks",
    "clickup://list/{list_id}/tasks",
    "clickup://task/{task_id}/comments",
    "clickup://view/{view_id}/comments",
    "clickup://list/{list_id}/comments",
    "clickup://comment/{comment_id}/reply",
    "clickup://task/{task_id}/checklist",
    "clickup://workspace/{workspace_id}/doc/{doc_id}",
    "clickup://workspace/{workspace_id}/spaces",
    "clickup://space/{space_id}",
    "clickup://space/{space_id}/folders",
    "clickup://folder/{folder_id}",
    "clickup://folder/{folder_id}/lists",
    "clickup://space/{space_id}/lists",
    "clickup://list/{list_id}",
]


class TestCatalog:
    def test_templates_in_registration_order(self, resource_router: ResourceRouter) -> None:
        assert [t.uriTemplate for t in resource_router.list_resource_templates()] == EXPECTED_TEMPLATES

    def test_no_static_resources(self, resource_router: ResourceRouter) -> None:
        assert resource_router.list_resources() == []

    def test_doc_is_markdown_everything_else_json(self, resource_router: ResourceRouter) -> None:
        mimes = {t.uriTemplate: t.mimeType for t in resource_router.list_resource_templates()}
        assert mimes.pop("clickup://workspace/{workspace_id}/doc/{doc_id}") == "text/markdown"
        assert set(mimes.values()) == {"application/json"}


class TestResolve:
    def test_extracts_variables(self, resource_router: ResourceRouter) -> None:
        resolved = resource_router.resolve("clickup://workspace/W1/doc/D9")
        assert resolved is not None
        route, variables = resolved
        assert route.uri_template == "clickup://workspace/{workspace_id}/doc/{doc_id}"
        assert variables == {"workspace_id": "W1", "doc_id": "D9"}

    def test_exact_match_only(self, resource_router: ResourceRouter) -> None:
        assert resource_router.resolve("clickup://task/abc/comments/extra") is None
        assert resource_router.resolve("prefix-clickup://task/abc") is None
        assert resource_router.resolve("clickup://task/") is None

    def test_variables_do_not_span_segments(self, resource_router: ResourceRouter) -> None:
        resolved = resource_router.resolve("clickup://task/a/b")
        assert resolved is None

    def test_sub_collection_not_shadowed_by_parent(self, resource_router: ResourceRouter) -> None:
        resolved = resource_router.resolve("clickup://list/L1/comments")
        assert resolved is not None
        assert resolved[0].uri_template == "clickup://list/{list_id}/comments"


class TestReadResource:
    async def test_every_template_echoes_uri(self, resource_router: ResourceRouter) -> None:
        for template in resource_router.list_resource_templates():
            uri = concrete_uri(template.uriTemplate)
            result = await resource_router.read_resource(uri)
            assert len(result.contents) == 1
            assert str(result.contents[0].uri) == uri
            assert result.contents[0].mimeType == template.mimeType

    async def test_task_comments_scenario(self, resource_router: ResourceRouter, stub_bindings: Bindings) -> None:
        stub_bindings.comments.get_task_comments.return_value = {"comments": []}  # type: ignore[attr-defined]
        result = await resource_router.read_resource("clickup://task/868czp2t3/comments")
        content = result.contents[0]
        assert str(content.uri) == "clickup://task/868czp2t3/comments"
        assert content.mimeType == "application/json"
        assert content.text == '{\n  "comments": []\n}'  # type: ignore[union-attr]
        stub_bindings.comments.get_task_comments.assert_awaited_once_with("868czp2t3")  # type: ignore[attr-defined]

    async def test_unknown_uri_is_resource_not_found(self, resource_router: ResourceRouter) -> None:
        with pytest.raises(McpError) as exc_info:
            await resource_router.read_resource("clickup://board/1")
        assert exc_info.value.error.code == RESOURCE_NOT_FOUND
        assert exc_info.value.error.message == "Unknown resource: clickup://board/1"

    async def test_backend_failure_is_internal_error(self, resource_router: ResourceRouter, stub_bindings: Bindings) -> None:
        stub_bindings.tasks.get_task.side_effect = ClickUpAPIError.from_status(404, "Task not found")  # type: ignore[attr-defined]
        with pytest.raises(McpError) as exc_info:
            await resource_router.read_resource("clickup://task/gone")
        assert exc_info.value.error.code == INTERNAL_ERROR
        assert exc_info.value.error.message == "Error fetching task: ClickUp API Error (404): Task not found"


class TestDocResource:
    async def test_doc_pages_joined_as_markdown(self) -> None:
        fake = FakeClickUp(
            {("GET", "/workspaces/W/docs/D/pages"): [{"content": "# One", "pages": [{"content": "Child"}]}, {"content": "Two"}]}
        )
        async with fake.client() as client:
            result = await ResourceRouter(create_bindings(client)).read_resource("clickup://workspace/W/doc/D")
        content = result.contents[0]
        assert content.mimeType == "text/markdown"
        assert content.text == "# One\n\nChild\n\nTwo"  # type: ignore[union-attr]

    async def test_empty_doc_fallback_text(self) -> None:
        fake = FakeClickUp({("GET", "/workspaces/W/docs/D/pages"): [{"content": ""}, {"id": "p2"}]})
        async with fake.client() as client:
            result = await ResourceRouter(create_bindings(client)).read_resource("clickup://workspace/W/doc/D")
        assert result.contents[0].text == "No content found in this doc."  # type: ignore[union-attr]

    async def test_subtasks_resource_swallows_missing_list(self) -> None:
        fake = FakeClickUp({("GET", "/task/p1"): {"id": "p1", "list": None}})
        async with fake.client() as client:
            result = await ResourceRouter(create_bindings(client)).read_resource("clickup://task/p1/subtasks")
        assert result.contents[0].text == "[]"  # type: ignore[union-attr]
