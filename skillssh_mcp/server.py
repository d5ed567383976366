"""MCP server builder for the skills.sh adapter.

This module creates a `FastMCP <https://pypi.org/project/mcp/>`_ server
that exposes the skills.sh discovery service as four MCP tools:

==============================  =============================================
Tool name                       Description
==============================  =============================================
``search_skills``               Search skills by query term.
``get_skill_details``           Installs, weekly/platform stats, links.
``get_popular_skills``          Approximate leaderboard of popular skills.
``get_install_command``         The ``npx skills add`` command for a repo.
==============================  =============================================

Each tool is a thin shim over :class:`~skillssh_mcp.tools.ToolDispatcher`,
which owns argument casting and the uniform error boundary.  Results are
returned as :class:`~mcp.types.CallToolResult` so that failures carry an
explicit ``isError`` flag and an ``Error:`` text block.

Example::

    from skillssh_mcp import SkillsShClient, create_mcp_server

    server = create_mcp_server(SkillsShClient())
    server.run()  # stdio by default
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Annotated, Literal

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult
from pydantic import Field

from skillssh_mcp.aggregator import PROBE_LIMIT, PROBE_TERMS
from skillssh_mcp.client import SkillsShClient
from skillssh_mcp.config import ServerConfig
from skillssh_mcp.extraction import KNOWN_PLATFORMS
from skillssh_mcp.tools import ToolDispatcher

DEFAULT_SERVER_NAME = "skills-sh"

_Owner = Annotated[str, Field(description="GitHub owner/username")]
_Repo = Annotated[str, Field(description="Repository name")]


def create_mcp_server(
    client: SkillsShClient,
    *,
    name: str = DEFAULT_SERVER_NAME,
    instructions: str | None = None,
    probe_terms: Sequence[str] = PROBE_TERMS,
    probe_limit: int = PROBE_LIMIT,
    platforms: Sequence[str] = KNOWN_PLATFORMS,
) -> FastMCP:
    """Build an MCP server backed by a :class:`SkillsShClient`.

    The returned :class:`~mcp.server.fastmcp.FastMCP` server is
    transport-agnostic.  Call ``server.run()`` to start with the
    default stdio transport, or ``server.run(transport="streamable-http")``
    for HTTP.

    Args:
        client: Client used for every outbound skills.sh request.  The
            server does not close it.
        name: Display name for the MCP server.
        instructions: Optional server-level instructions sent to the
            MCP client during initialization.
        probe_terms: Search terms sampled by ``get_popular_skills``.
        probe_limit: Results requested per probe term.
        platforms: Platform substrings reported by ``get_skill_details``.

    Returns:
        A configured :class:`~mcp.server.fastmcp.FastMCP` server
        instance, ready for ``server.run()``.
    """
    mcp = FastMCP(name, instructions=instructions)
    dispatcher = ToolDispatcher(
        client,
        probe_terms=probe_terms,
        probe_limit=probe_limit,
        platforms=platforms,
    )

    @mcp.tool(structured_output=False)
    async def search_skills(
        query: Annotated[str, Field(description="Search query term")],
        limit: Annotated[int, Field(description="Maximum number of results (default: 50)")] = 50,
    ) -> CallToolResult:
        """Search for skills on skills.sh by query term (e.g., "mapbox", "react", "gis")."""
        return await dispatcher.call("search_skills", {"query": query, "limit": limit})

    @mcp.tool(structured_output=False)
    async def get_skill_details(
        owner: _Owner,
        repo: _Repo,
        skillId: Annotated[str, Field(description="Skill ID")],  # noqa: N803
    ) -> CallToolResult:
        """Get detailed information about a specific skill by owner/repo/skillId."""
        return await dispatcher.call(
            "get_skill_details", {"owner": owner, "repo": repo, "skillId": skillId}
        )

    @mcp.tool(structured_output=False)
    async def get_popular_skills(
        limit: Annotated[int, Field(description="Number of results (default: 20)")] = 20,
        timeframe: Annotated[
            Literal["all", "trending", "hot"],
            Field(description='Timeframe: "all", "trending", or "hot"'),
        ] = "all",
    ) -> CallToolResult:
        """Get popular skills from the leaderboard."""
        return await dispatcher.call("get_popular_skills", {"limit": limit, "timeframe": timeframe})

    @mcp.tool(structured_output=False)
    async def get_install_command(owner: _Owner, repo: _Repo) -> CallToolResult:
        """Get the npx install command for a skill."""
        return await dispatcher.call("get_install_command", {"owner": owner, "repo": repo})

    return mcp


def create_mcp_server_from_config(config: ServerConfig) -> FastMCP:
    """Build a client and server from a :class:`~skillssh_mcp.config.ServerConfig`."""
    client = SkillsShClient(
        config.api_base,
        config.site_base,
        user_agent=config.user_agent,
        timeout=config.timeout,
    )
    return create_mcp_server(
        client,
        name=config.name,
        instructions=config.instructions,
        probe_terms=config.probe_terms,
        probe_limit=config.probe_limit,
        platforms=config.platforms,
    )
