"""MCP server exposing the skills.sh skill directory.

This package bridges `skills.sh <https://skills.sh>`_ and the `Model
Context Protocol <https://modelcontextprotocol.io>`_, providing:

* :class:`SkillsShClient` -- async client for the skills.sh search API
  and skill detail pages.
* :func:`create_mcp_server` -- builds a FastMCP server with the
  ``search_skills``, ``get_skill_details``, ``get_popular_skills`` and
  ``get_install_command`` tools.
* :class:`ToolDispatcher` -- tool routing with a uniform error boundary,
  usable without any MCP transport.
* CLI entry-point (``python -m skillssh_mcp``) for zero-code startup.

Quick start (programmatic)::

    from skillssh_mcp import SkillsShClient, create_mcp_server

    server = create_mcp_server(SkillsShClient(), name="skills-sh")
    server.run()  # stdio by default

Install::

    pip install skillssh-mcp
"""

from skillssh_mcp.aggregator import collect_popular_skills
from skillssh_mcp.client import SkillsShClient
from skillssh_mcp.config import ServerConfig, load_config
from skillssh_mcp.exceptions import (
    SkillsShError,
    UnknownToolError,
    UpstreamError,
    UpstreamHTTPError,
)
from skillssh_mcp.extraction import extract_details, extract_field
from skillssh_mcp.models import DetailExtraction, PlatformInstalls, SearchResult, SkillRecord
from skillssh_mcp.server import create_mcp_server, create_mcp_server_from_config
from skillssh_mcp.tools import ToolDispatcher

__version__ = "1.0.0"

__all__ = [
    "DetailExtraction",
    "PlatformInstalls",
    "SearchResult",
    "ServerConfig",
    "SkillRecord",
    "SkillsShClient",
    "SkillsShError",
    "ToolDispatcher",
    "UnknownToolError",
    "UpstreamError",
    "UpstreamHTTPError",
    "collect_popular_skills",
    "create_mcp_server",
    "create_mcp_server_from_config",
    "extract_details",
    "extract_field",
    "load_config",
]
