"""Tests for TasksBinding: container aggregation and the derived subtasks read."""

from __future__ import annotations

import logging

import httpx
import pytest

from clickup_mcp.bindings.tasks import TasksBinding
from tests._fakes import FakeClickUp


def _task(task_id: str, parent: str | None = None) -> dict[str, object]:
    return {"id": task_id, "name": f"Task {task_id}", "parent": parent}


class TestGetSubtasks:
    async def test_filters_list_tasks_by_parent(self) -> None:
        fake = FakeClickUp(
            {
                ("GET", "/task/p1"): {"id": "p1", "list": {"id": "L1"}},
                ("GET", "/list/L1/task"): {
                    "tasks": [_task("p1"), _task("c1", "p1"), _task("c2", "p1"), _task("x", "other")],
                },
            }
        )
        async with fake.client() as client:
            result = await TasksBinding(client).get_subtasks("p1")
        assert [t["id"] for t in result] == ["c1", "c2"]

    async def test_reads_list_with_subtasks_flag(self) -> None:
        fake = FakeClickUp(
            {
                ("GET", "/task/p1"): {"id": "p1", "list": {"id": "L1"}},
                ("GET", "/list/L1/task"): {"tasks": []},
            }
        )
        async with fake.client() as client:
            await TasksBinding(client).get_subtasks("p1")
        assert fake.paths() == ["GET /task/p1", "GET /list/L1/task"]
        assert fake.requests[1].url.params["subtasks"] == "true"

    async def test_task_without_list_returns_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        fake = FakeClickUp({("GET", "/task/p1"): {"id": "p1"}})
        with caplog.at_level(logging.WARNING, logger="clickup_mcp"):
            async with fake.client() as client:
                result = await TasksBinding(client).get_subtasks("p1")
        assert result == []
        assert len(fake.requests) == 1
        assert any("has no list" in r.getMessage() for r in caplog.records)

    async def test_failed_task_lookup_returns_empty(self) -> None:
        fake = FakeClickUp()
        async with fake.client() as client:
            result = await TasksBinding(client).get_subtasks("gone")
        assert result == []

    async def test_failed_list_lookup_returns_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        fake = FakeClickUp(
            {
                ("GET", "/task/p1"): {"id": "p1", "list": {"id": "L1"}},
                ("GET", "/list/L1/task"): httpx.Response(500, json={"err": "boom"}),
            }
        )
        with caplog.at_level(logging.WARNING, logger="clickup_mcp"):
            async with fake.client() as client:
                result = await TasksBinding(client).get_subtasks("p1")
        assert result == []
        assert any("Cannot read list L1" in r.getMessage() for r in caplog.records)


    async def test_malformed_list_payload_returns_empty(self, caplog: pytest.LogCaptureFixture) -> None:
        fake = FakeClickUp(
            {
                ("GET", "/task/p1"): {"id": "p1", "list": {"id": "L1"}},
                ("GET", "/list/L1/task"): ["not", "a", "page"],
            }
        )
        with caplog.at_level(logging.WARNING, logger="clickup_mcp"):
            async with fake.client() as client:
                result = await TasksBinding(client).get_subtasks("p1")
        assert result == []
        assert any("no task array" in r.getMessage() for r in caplog.records)

    async def test_page_without_tasks_returns_empty(self) -> None:
        fake = FakeClickUp(
            {
                ("GET", "/task/p1"): {"id": "p1", "list": {"id": "L1"}},
                ("GET", "/list/L1/task"): {"tasks": None},
            }
        )
        async with fake.client() as client:
            assert await TasksBinding(client).get_subtasks("p1") == []

    async def test_numeric_task_id_matches_string_parent(self) -> None:
        fake = FakeClickUp(
            {
                ("GET", "/task/123"): {"id": "123", "list": {"id": "L1"}},
                ("GET", "/list/L1/task"): {"tasks": [_task("c1", "123"), _task("c2", "456"), _task("c3")]},
            }
        )
        async with fake.client() as client:
            result = await TasksBinding(client).get_subtasks(123)  # type: ignore[arg-type]
        assert [t["id"] for t in result] == ["c1"]


class TestContainerTasks:
    async def test_folder_aggregates_every_list(self) -> None:
        fake = FakeClickUp(
            {
                ("GET", "/folder/F1/list"): {"lists": [{"id": "L1"}, {"id": "L2"}]},
                ("GET", "/list/L1/task"): {"tasks": [_task("a")]},
                ("GET", "/list/L2/task"): {"tasks": [_task("b"), _task("c")]},
            }
        )
        async with fake.client() as client:
            result = await TasksBinding(client).get_tasks_from_folder("F1", {"include_closed": True})
        assert [t["id"] for t in result["tasks"]] == ["a", "b", "c"]
        assert all(r.url.params.get("include_closed") == "true" for r in fake.requests[1:])

    async def test_space_reads_folderless_lists_first(self) -> None:
        fake = FakeClickUp(
            {
                ("GET", "/space/S1/list"): {"lists": [{"id": "L0"}]},
                ("GET", "/space/S1/folder"): {"folders": [{"id": "F1", "lists": [{"id": "L1"}]}]},
                ("GET", "/list/L0/task"): {"tasks": [_task("loose")]},
                ("GET", "/list/L1/task"): {"tasks": [_task("filed")]},
            }
        )
        async with fake.client() as client:
            result = await TasksBinding(client).get_tasks_from_space("S1")
        assert [t["id"] for t in result["tasks"]] == ["loose", "filed"]

    async def test_empty_folder_yields_no_tasks(self) -> None:
        fake = FakeClickUp({("GET", "/folder/F1/list"): {"lists": []}})
        async with fake.client() as client:
            assert await TasksBinding(client).get_tasks_from_folder("F1") == {"tasks": []}


class TestTaskCrud:
    async def test_create_posts_to_list(self) -> None:
        fake = FakeClickUp({("POST", "/list/901/task"): {"id": "t1", "name": "Test"}})
        async with fake.client() as client:
            result = await TasksBinding(client).create_task("901", {"name": "Test"})
        assert result["id"] == "t1"
        assert fake.paths() == ["POST /list/901/task"]

    async def test_update_and_delete_paths(self) -> None:
        fake = FakeClickUp({("PUT", "/task/t1"): {"id": "t1"}, ("DELETE", "/task/t1"): httpx.Response(204)})
        async with fake.client() as client:
            binding = TasksBinding(client)
            await binding.update_task("t1", {"status": "done"})
            await binding.delete_task("t1")
        assert fake.paths() == ["PUT /task/t1", "DELETE /task/t1"]
