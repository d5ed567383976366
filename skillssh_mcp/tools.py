"""Tool dispatch for the skills.sh MCP adapter.

:class:`ToolDispatcher` maps a tool name and its raw argument mapping to
a handler, and wraps every handler in the same failure boundary: an
exception becomes an error-flagged :class:`~mcp.types.CallToolResult`
whose single text block starts with ``Error:``.  One call in, one result
out.

==============================  =============================================
Tool name                       Description
==============================  =============================================
``search_skills``               Search skills.sh by query term.
``get_skill_details``           Install stats and links for one skill.
``get_popular_skills``          Approximate most-installed skills.
``get_install_command``         ``npx skills add owner/repo``.
==============================  =============================================
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any, Literal

from mcp.types import CallToolResult, TextContent
from pydantic import BaseModel, Field, ValidationError, ValidationInfo, field_validator

from skillssh_mcp.aggregator import PROBE_LIMIT, PROBE_TERMS, collect_popular_skills
from skillssh_mcp.client import SkillsShClient, validate_identifier
from skillssh_mcp.exceptions import SkillsShError, UnknownToolError
from skillssh_mcp.extraction import KNOWN_PLATFORMS, extract_details
from skillssh_mcp.formatting import (
    format_install_command,
    format_popular_skills,
    format_search_results,
    format_skill_details,
    format_skill_details_fallback,
)
from skillssh_mcp.models import SkillRecord

_logger = logging.getLogger(__name__)

#: Results requested when looking up a single skill's basic info.
DETAIL_LOOKUP_LIMIT: int = 50


# ------------------------------------------------------------------
# Argument models
# ------------------------------------------------------------------


class SearchSkillsArgs(BaseModel):
    query: str
    limit: int = 50


class RepoArgs(BaseModel):
    owner: str
    repo: str

    @field_validator("owner", "repo")
    @classmethod
    def _safe_segment(cls, value: str, info: ValidationInfo) -> str:
        return validate_identifier(value, info.field_name)


class SkillDetailsArgs(RepoArgs):
    skill_id: str = Field(..., alias="skillId")

    @field_validator("skill_id")
    @classmethod
    def _safe_skill_id(cls, value: str) -> str:
        return validate_identifier(value, "skillId")


class PopularSkillsArgs(BaseModel):
    limit: int = 20
    timeframe: Literal["all", "trending", "hot"] = "all"


# ------------------------------------------------------------------
# Result helpers
# ------------------------------------------------------------------


def text_result(text: str) -> CallToolResult:
    return CallToolResult(content=[TextContent(type="text", text=text)])


def error_result(message: str) -> CallToolResult:
    return CallToolResult(
        content=[TextContent(type="text", text=f"Error: {message}")],
        isError=True,
    )


def describe_validation_error(exc: ValidationError) -> str:
    """Condense *exc* to its first error, e.g. ``Invalid arguments: query: Field required``."""
    first = exc.errors()[0]
    loc = ".".join(str(part) for part in first["loc"])
    message = first["msg"].removeprefix("Value error, ")
    return f"Invalid arguments: {loc}: {message}" if loc else f"Invalid arguments: {message}"


def find_basic_info(
    skills: Sequence[SkillRecord],
    owner: str,
    repo: str,
    skill_id: str,
) -> SkillRecord | None:
    """Pick the search record describing ``owner/repo/skill_id``.

    An exact ``skillId`` + ``source`` match wins; otherwise the first record
    with the same ``skillId`` in API order; otherwise ``None``.
    """
    source = f"{owner}/{repo}"
    same_id = [s for s in skills if s.skill_id == skill_id]
    for skill in same_id:
        if skill.source == source:
            return skill
    return same_id[0] if same_id else None


class ToolDispatcher:
    """Route tool calls to skills.sh operations.

    Args:
        client: The :class:`~skillssh_mcp.client.SkillsShClient` used for
            every outbound request.
        probe_terms: Search terms sampled by ``get_popular_skills``.
        probe_limit: Results requested per probe.
        platforms: Platform substrings reported by ``get_skill_details``.

    Example::

        dispatcher = ToolDispatcher(client)
        result = await dispatcher.call("search_skills", {"query": "react"})
        print(result.content[0].text)
    """

    def __init__(
        self,
        client: SkillsShClient,
        *,
        probe_terms: Sequence[str] = PROBE_TERMS,
        probe_limit: int = PROBE_LIMIT,
        platforms: Sequence[str] = KNOWN_PLATFORMS,
    ) -> None:
        self._client = client
        self._probe_terms = tuple(probe_terms)
        self._probe_limit = probe_limit
        self._platforms = tuple(platforms)
        self._handlers: dict[str, Callable[[Mapping[str, Any]], Awaitable[str]]] = {
            "search_skills": self._search_skills,
            "get_skill_details": self._get_skill_details,
            "get_popular_skills": self._get_popular_skills,
            "get_install_command": self._get_install_command,
        }

    @property
    def tool_names(self) -> list[str]:
        return list(self._handlers)

    async def call(self, name: str, arguments: Mapping[str, Any] | None = None) -> CallToolResult:
        """Invoke tool *name* and return its result.

        Never raises: failures are returned as error-flagged results
        carrying the exception message.
        """
        try:
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownToolError(f"Unknown tool: {name}")
            return text_result(await handler(arguments or {}))
        except ValidationError as exc:
            _logger.warning("Tool %r rejected arguments: %s", name, exc)
            return error_result(describe_validation_error(exc))
        except Exception as exc:
            _logger.exception("Tool %r failed", name)
            return error_result(str(exc))

    # ------------------------------------------------------------------
    # Handlers
    # ------------------------------------------------------------------

    async def _search_skills(self, arguments: Mapping[str, Any]) -> str:
        args = SearchSkillsArgs.model_validate(arguments)
        try:
            result = await self._client.search(args.query, limit=args.limit)
        except SkillsShError as exc:
            raise SkillsShError(f"Failed to search skills: {exc}") from exc
        return format_search_results(result, args.query, args.limit)

    async def _get_skill_details(self, arguments: Mapping[str, Any]) -> str:
        args = SkillDetailsArgs.model_validate(arguments)
        owner, repo, skill_id = args.owner, args.repo, args.skill_id
        page_url = self._client.skill_page_url(owner, repo, skill_id)

        try:
            basic: SkillRecord | None = None
            try:
                lookup = await self._client.search(skill_id, limit=DETAIL_LOOKUP_LIMIT)
                basic = find_basic_info(lookup.skills, owner, repo, skill_id)
            except SkillsShError as exc:
                _logger.debug("Basic info lookup for %r failed: %s", skill_id, exc)

            html = await self._client.fetch_skill_page(owner, repo, skill_id)
            stats = extract_details(html, self._platforms)
            return format_skill_details(owner, repo, skill_id, page_url, basic, stats)
        except Exception as exc:
            _logger.warning("Falling back to basic details for %s: %s", page_url, exc)
            return format_skill_details_fallback(owner, repo, skill_id, page_url, str(exc))

    async def _get_popular_skills(self, arguments: Mapping[str, Any]) -> str:
        args = PopularSkillsArgs.model_validate(arguments)
        popular = await collect_popular_skills(
            self._client,
            args.limit,
            probe_terms=self._probe_terms,
            probe_limit=self._probe_limit,
        )
        return format_popular_skills(popular, args.limit, args.timeframe)

    async def _get_install_command(self, arguments: Mapping[str, Any]) -> str:
        args = RepoArgs.model_validate(arguments)
        return format_install_command(args.owner, args.repo)
