"""Pydantic configuration models for the skills.sh MCP server.

This module defines the declarative configuration schema used by the
CLI (``python -m skillssh_mcp --config server.json``).  Every key is
optional; an empty file (or no ``--config`` at all) yields the defaults.

String values may contain ``${VAR}`` placeholders that are resolved
from environment variables at load time.  Unset variables resolve to
an empty string and emit a warning.

Example config (JSON)::

    {
        "name": "skills-sh",
        "api_base": "${SKILLS_SH_API}",
        "timeout": 10,
        "probe_terms": ["js", "py", "ai"]
    }
"""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from skillssh_mcp.aggregator import PROBE_LIMIT, PROBE_TERMS
from skillssh_mcp.client import (
    DEFAULT_API_BASE,
    DEFAULT_SITE_BASE,
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
)
from skillssh_mcp.extraction import KNOWN_PLATFORMS

_logger = logging.getLogger(__name__)


class ServerConfig(BaseModel):
    """Top-level configuration for the skills.sh MCP server.

    Attributes:
        name: Display name shown to MCP clients during initialization.
        instructions: Optional server-level instructions sent to the
            client during the MCP handshake.
        api_base: Root of the skills.sh JSON API.
        site_base: Root of the skills.sh website (detail pages).
        user_agent: ``User-Agent`` header sent with every request.
        timeout: HTTP timeout in seconds.
        probe_terms: Search terms sampled by ``get_popular_skills``.
        probe_limit: Results requested per probe term.
        platforms: Platform substrings reported by ``get_skill_details``.
    """

    name: str = Field("skills-sh", description="Display name for the MCP server")
    instructions: str | None = Field(None, description="Optional server-level instructions")
    api_base: str = Field(DEFAULT_API_BASE, description="skills.sh API root")
    site_base: str = Field(DEFAULT_SITE_BASE, description="skills.sh website root")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1)
    timeout: float = Field(DEFAULT_TIMEOUT_SECONDS, gt=0, description="HTTP timeout in seconds")
    probe_terms: list[str] = Field(default_factory=lambda: list(PROBE_TERMS), min_length=1)
    probe_limit: int = Field(PROBE_LIMIT, ge=1, le=100)
    platforms: list[str] = Field(default_factory=lambda: list(KNOWN_PLATFORMS))


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------


def load_config(path: Path | None = None) -> ServerConfig:
    """Load a :class:`ServerConfig` from a JSON or YAML file.

    YAML is used when the suffix is ``.yaml`` or ``.yml``; anything else
    is parsed as JSON.  ``${VAR}`` placeholders are resolved before
    validation.

    Args:
        path: Config file location, or ``None`` for the defaults.

    Raises:
        FileNotFoundError: If *path* does not exist.
        pydantic.ValidationError: If the document does not match the
            schema.
    """
    if path is None:
        return ServerConfig()

    raw = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(raw)
    else:
        data = json.loads(raw) if raw.strip() else None

    return ServerConfig(**resolve_env_vars(data or {}))


# ------------------------------------------------------------------
# Environment variable resolution
# ------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def resolve_env_vars(data: Any) -> Any:
    """Recursively resolve ``${VAR}`` placeholders in config data.

    Walks dicts, lists, and strings.  Non-string scalars (``int``,
    ``float``, ``bool``, ``None``) are returned as-is.

    Unset environment variables resolve to an empty string and a
    warning is logged.
    """
    if isinstance(data, str):
        return _resolve_env_vars_in_string(data)
    if isinstance(data, dict):
        return {k: resolve_env_vars(v) for k, v in data.items()}
    if isinstance(data, list):
        return [resolve_env_vars(item) for item in data]
    return data


def _resolve_env_vars_in_string(value: str) -> str:
    """Replace ``${VAR_NAME}`` tokens in *value* with ``os.environ``."""

    def _replace(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name, "")
        if not env_value:
            _logger.warning(
                "Environment variable '%s' is not set or empty",
                var_name,
            )
        return env_value

    return _ENV_VAR_RE.sub(_replace, value)
