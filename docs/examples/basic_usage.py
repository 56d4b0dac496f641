#!/usr/bin/env python3
"""Drive the ClickUp MCP server from an MCP client.

Starts ``clickup-mcp-server`` over stdio, lists the tools, then walks the
first workspace: its spaces, and the tasks of the first folderless list.

How to run:
    export CLICKUP_API_TOKEN=pk_...
    python docs/examples/basic_usage.py
"""

from __future__ import annotations

import asyncio
import json
import os
from typing import Any

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


async def call(session: ClientSession, name: str, **arguments: Any) -> Any:
    result = await session.call_tool(name, arguments)
    text = result.content[0].text  # type: ignore[union-attr]
    if result.isError:
        raise RuntimeError(text)
    return json.loads(text)


async def main() -> None:
    params = StdioServerParameters(
        command="clickup-mcp-server",
        env={"CLICKUP_API_TOKEN": os.environ.get("CLICKUP_API_TOKEN", ""), "PATH": os.environ.get("PATH", "")},
    )
    async with stdio_client(params) as (read, write), ClientSession(read, write) as session:
        await session.initialize()

        tools = await session.list_tools()
        print(f"{len(tools.tools)} tools:", ", ".join(t.name for t in tools.tools))

        workspaces = await call(session, "get_workspaces")
        if not workspaces:
            print("No workspaces visible to this token")
            return
        workspace = workspaces[0]
        print(f"\nWorkspace: {workspace['name']} ({workspace['id']})")

        spaces = await call(session, "get_spaces", workspace_id=workspace["id"])
        for space in spaces:
            print(f"  Space: {space['name']} ({space['id']})")
        if not spaces:
            return

        lists = await call(session, "get_folderless_lists", space_id=spaces[0]["id"])
        if lists.get("lists"):
            first = lists["lists"][0]
            tasks = await call(session, "get_tasks", container_type="list", container_id=first["id"])
            print(f"\nList {first['name']}: {len(tasks.get('tasks', []))} tasks")
            for task in tasks.get("tasks", [])[:10]:
                print(f"  - [{task['status']['status']}] {task['name']}")

        # Resources are addressed by URI instead of tool name.
        space_uri = f"clickup://space/{spaces[0]['id']}/folders"
        folders = await session.read_resource(space_uri)  # type: ignore[arg-type]
        print(f"\n{space_uri}:")
        print(folders.contents[0].text[:500])  # type: ignore[union-attr]


if __name__ == "__main__":
    asyncio.run(main())
