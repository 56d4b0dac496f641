"""Tests for DocsBinding and page combination."""

from __future__ import annotations

from clickup_mcp.bindings.docs import NO_DOC_CONTENT, DocsBinding, combine_doc_pages
from tests._fakes import FakeClickUp


class TestCombineDocPages:
    def test_joins_pages_depth_first_with_blank_line(self) -> None:
        pages = [
            {"id": "1", "content": "# Intro", "pages": [{"id": "1a", "content": "Nested"}]},
            {"id": "2", "content": "Second"},
        ]
        assert combine_doc_pages(pages) == "# Intro\n\nNested\n\nSecond"

    def test_skips_empty_content(self) -> None:
        pages = [{"content": ""}, {"content": "Only"}, {"name": "no content key"}]
        assert combine_doc_pages(pages) == "Only"

    def test_no_content_falls_back(self) -> None:
        assert combine_doc_pages([{"content": ""}, {"content": None}]) == NO_DOC_CONTENT
        assert combine_doc_pages([]) == NO_DOC_CONTENT

    def test_whitespace_only_page_is_kept(self) -> None:
        assert combine_doc_pages([{"content": "   "}]) == "   "
        assert combine_doc_pages([{"content": "a"}, {"content": "\n"}, {"content": "b"}]) == "a\n\n\n\n\nb"

    def test_accepts_wrapped_pages(self) -> None:
        assert combine_doc_pages({"pages": [{"content": "x"}]}) == "x"

    def test_fallback_text_is_exact(self) -> None:
        assert NO_DOC_CONTENT == "No content found in this doc."


class TestDocsBinding:
    async def test_doc_pages_requests_full_depth_markdown(self) -> None:
        fake = FakeClickUp({("GET", "/workspaces/W/docs/D/pages"): [{"content": "hi"}]})
        async with fake.client() as client:
            await DocsBinding(client).get_doc_pages("W", "D")
        params = fake.requests[0].url.params
        assert params["max_page_depth"] == "-1"
        assert params["content_format"] == "text/md"
        assert fake.requests[0].url.path == "/api/v3/workspaces/W/docs/D/pages"

    async def test_doc_content_combines_pages(self) -> None:
        fake = FakeClickUp({("GET", "/workspaces/W/docs/D/pages"): [{"content": "a"}, {"content": "b"}]})
        async with fake.client() as client:
            assert await DocsBinding(client).get_doc_content("W", "D") == "a\n\nb"

    async def test_search_by_name(self) -> None:
        fake = FakeClickUp({("GET", "/team/W/docs/search"): {"docs": [{"id": "D"}]}})
        async with fake.client() as client:
            result = await DocsBinding(client).search_docs("W", "Roadmap")
        assert result == [{"id": "D"}]
        params = fake.requests[0].url.params
        assert params["doc_name"] == "Roadmap"
        assert "space_id" not in params
        assert "cursor" not in params

    async def test_search_by_space_prefix(self) -> None:
        fake = FakeClickUp({("GET", "/team/W/docs/search"): {"docs": []}})
        async with fake.client() as client:
            await DocsBinding(client).search_docs("W", "space:S9", cursor="c1")
        params = fake.requests[0].url.params
        assert params["space_id"] == "S9"
        assert params["cursor"] == "c1"
        assert "doc_name" not in params

    async def test_workspace_docs_defaults(self) -> None:
        fake = FakeClickUp({("GET", "/workspaces/W/docs"): {"docs": [{"id": "D"}]}})
        async with fake.client() as client:
            result = await DocsBinding(client).get_docs_from_workspace("W", {"limit": 10})
        assert result == [{"id": "D"}]
        params = fake.requests[0].url.params
        assert params["deleted"] == "false"
        assert params["archived"] == "false"
        assert params["limit"] == "10"
