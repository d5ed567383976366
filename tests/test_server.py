"""Tests for the MCP server builder."""

import pytest
import respx
from conftest import API, search_json, skill_json
from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult

from skillssh_mcp import ServerConfig, create_mcp_server, create_mcp_server_from_config


def _tool_text(result) -> str:
    """Extract the text of the first content block of a call_tool result.

    Tools return :class:`CallToolResult`, which ``FastMCP.call_tool``
    passes through unchanged; older releases wrap content in a
    ``(content_list, structured_content)`` tuple.
    """
    if isinstance(result, CallToolResult):
        return result.content[0].text
    return result[0][0].text


@pytest.fixture()
def server(client):
    return create_mcp_server(client, name="Test Server")


class TestCreateMCPServer:
    async def test_returns_fastmcp_instance(self, server):
        assert isinstance(server, FastMCP)

    async def test_server_name(self, server):
        assert server.name == "Test Server"

    async def test_default_name(self, client):
        assert create_mcp_server(client).name == "skills-sh"

    async def test_instructions(self, client):
        server = create_mcp_server(client, instructions="Find skills")
        assert server.instructions == "Find skills"

    def test_from_config(self):
        server = create_mcp_server_from_config(ServerConfig(name="Configured"))
        assert server.name == "Configured"

    async def test_registers_4_tools(self, server):
        tools = await server.list_tools()
        assert {t.name for t in tools} == {
            "search_skills",
            "get_skill_details",
            "get_popular_skills",
            "get_install_command",
        }


class TestToolSchemas:
    async def _schema(self, server, name):
        tools = {t.name: t for t in await server.list_tools()}
        return tools[name].inputSchema

    async def test_search_skills(self, server):
        schema = await self._schema(server, "search_skills")
        assert schema["required"] == ["query"]
        assert schema["properties"]["limit"]["default"] == 50

    async def test_get_skill_details(self, server):
        schema = await self._schema(server, "get_skill_details")
        assert sorted(schema["required"]) == ["owner", "repo", "skillId"]

    async def test_get_popular_skills(self, server):
        schema = await self._schema(server, "get_popular_skills")
        assert schema.get("required", []) == []
        assert schema["properties"]["limit"]["default"] == 20
        assert schema["properties"]["timeframe"]["enum"] == ["all", "trending", "hot"]
        assert schema["properties"]["timeframe"]["default"] == "all"

    async def test_get_install_command(self, server):
        schema = await self._schema(server, "get_install_command")
        assert sorted(schema["required"]) == ["owner", "repo"]


class TestMCPTools:
    async def test_get_install_command(self, server):
        result = await server.call_tool("get_install_command", {"owner": "foo", "repo": "bar"})
        assert "npx skills add foo/bar" in _tool_text(result)

    @respx.mock
    async def test_search_skills(self, server):
        respx.get(f"{API}/search").respond(json=search_json("pdf", [skill_json("pdf", 9)]))
        result = await server.call_tool("search_skills", {"query": "pdf"})
        assert _tool_text(result).startswith('Found 1 skills for "pdf"')

    @respx.mock
    async def test_upstream_failure_is_error_result(self, server):
        respx.get(f"{API}/search").respond(status_code=503)
        result = await server.call_tool("search_skills", {"query": "pdf"})
        assert isinstance(result, CallToolResult)
        assert result.isError is True
        assert _tool_text(result).startswith("Error: Failed to search skills: HTTP 503")

    async def test_invalid_owner_is_error_result(self, server):
        result = await server.call_tool("get_install_command", {"owner": "../x", "repo": "r"})
        assert isinstance(result, CallToolResult)
        assert result.isError is True
        assert _tool_text(result).startswith("Error: Invalid arguments: owner: Invalid owner")
