"""Talk to the skills.sh MCP server over stdio.

This script spawns ``python -m skillssh_mcp`` as a subprocess and drives
it with the MCP Python client, the same way an agent host would.

Flow:
    1. Spawn the server subprocess (stdio transport)
    2. List the advertised tools
    3. Call each tool once and print the text it returns

Requirements:
    pip install skillssh-mcp

Usage:
    python examples/stdio_client.py
    python examples/stdio_client.py "mapbox"
"""

import asyncio
import sys

from mcp import ClientSession, StdioServerParameters
from mcp.client.stdio import stdio_client


async def main(query: str) -> None:
    params = StdioServerParameters(command=sys.executable, args=["-m", "skillssh_mcp"])

    async with stdio_client(params) as (read, write), ClientSession(read, write) as session:
        await session.initialize()

        # ------------------------------------------------------------------
        # 1. Discover tools
        # ------------------------------------------------------------------
        tools = await session.list_tools()
        print(f"=== MCP Tools ({len(tools.tools)}) ===")
        for tool in tools.tools:
            print(f"  - {tool.name}: {tool.description}")
        print()

        # ------------------------------------------------------------------
        # 2. Call them
        # ------------------------------------------------------------------
        calls = [
            ("search_skills", {"query": query, "limit": 5}),
            ("get_popular_skills", {"limit": 5}),
            ("get_install_command", {"owner": "vercel-labs", "repo": "agent-skills"}),
        ]
        for name, arguments in calls:
            result = await session.call_tool(name, arguments)
            flag = " [error]" if result.isError else ""
            print(f"=== {name}{flag} ===")
            for block in result.content:
                print(getattr(block, "text", block))
            print()


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else "react"))
