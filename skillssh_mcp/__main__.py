"""Run the skills.sh MCP server.

Usage::

    python -m skillssh_mcp
    python -m skillssh_mcp --config server.json
    python -m skillssh_mcp --config server.yaml --log-level DEBUG
    python -m skillssh_mcp --transport streamable-http

The optional config file is a JSON or YAML document conforming to
:class:`~skillssh_mcp.config.ServerConfig`.  String values may contain
``${VAR}`` placeholders that are resolved from environment variables at
load time.

MCP client integration (stdio transport)::

    {
        "command": "python",
        "args": ["-m", "skillssh_mcp"]
    }

Logs go to stderr; stdout is reserved for the MCP stream.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError
from yaml import YAMLError

from skillssh_mcp.config import load_config
from skillssh_mcp.server import create_mcp_server_from_config


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, load config, and start the MCP server."""
    parser = argparse.ArgumentParser(
        prog="skillssh_mcp",
        description="Expose skills.sh search and skill details as MCP tools.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a JSON or YAML configuration file.",
    )
    parser.add_argument(
        "--transport",
        default="stdio",
        choices=["stdio", "streamable-http"],
        help="MCP transport type (default: stdio).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level for messages written to stderr (default: WARNING).",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # ------------------------------------------------------------------
    # Load config file
    # ------------------------------------------------------------------
    config_path: Path | None = args.config
    if config_path is not None and not config_path.exists():
        print(f"Error: config file not found: {config_path}", file=sys.stderr)
        sys.exit(1)

    try:
        config = load_config(config_path)
    except (json.JSONDecodeError, YAMLError, ValidationError) as exc:
        print(f"Error: invalid config file {config_path}: {exc}", file=sys.stderr)
        sys.exit(1)

    # ------------------------------------------------------------------
    # Build and run
    # ------------------------------------------------------------------
    server = create_mcp_server_from_config(config)
    logging.getLogger(__name__).info("Skills.sh MCP server running on %s", args.transport)
    server.run(transport=args.transport)


if __name__ == "__main__":
    main()
