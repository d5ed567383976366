"""Tests for the ``python -m skillssh_mcp`` entry point."""

import json
from unittest.mock import patch

import pytest

from skillssh_mcp.__main__ import main


class TestMain:
    def test_missing_config_exits(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as info:
            main(["--config", str(tmp_path / "missing.json")])
        assert info.value.code == 1
        assert "config file not found" in capsys.readouterr().err

    def test_invalid_config_exits(self, tmp_path, capsys):
        path = tmp_path / "server.json"
        path.write_text(json.dumps({"timeout": "soon"}))
        with pytest.raises(SystemExit) as info:
            main(["--config", str(path)])
        assert info.value.code == 1
        assert "invalid config file" in capsys.readouterr().err

    def test_runs_server_with_transport(self, tmp_path):
        path = tmp_path / "server.json"
        path.write_text(json.dumps({"name": "CLI"}))
        with patch("mcp.server.fastmcp.FastMCP.run") as run:
            main(["--config", str(path), "--transport", "streamable-http"])
        run.assert_called_once_with(transport="streamable-http")

    def test_defaults_to_stdio(self):
        with patch("mcp.server.fastmcp.FastMCP.run") as run:
            main([])
        run.assert_called_once_with(transport="stdio")
