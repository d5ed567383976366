"""Shared fixtures and builders for the skillssh_mcp tests."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import httpx
import pytest

from skillssh_mcp import SkillsShClient

API = "https://skills.sh/api"
SITE = "https://skills.sh"


def skill_json(
    id: str,
    installs: int = 0,
    *,
    skill_id: str | None = None,
    name: str | None = None,
    source: str = "acme/skills",
) -> dict[str, Any]:
    """Build one skill record as the search API returns it."""
    return {
        "id": id,
        "skillId": skill_id or id,
        "name": name or id,
        "installs": installs,
        "source": source,
    }


def search_json(query: str, skills: list[dict[str, Any]], count: int | None = None) -> dict[str, Any]:
    return {
        "query": query,
        "searchType": "fuzzy",
        "skills": skills,
        "count": len(skills) if count is None else count,
        "duration_ms": 12,
    }


def search_router(
    pages: Mapping[str, Any],
) -> Callable[[httpx.Request], httpx.Response]:
    """Return a respx side effect that answers ``/search`` by query term.

    Values in *pages* may be a list of skill dicts (200 response), an
    ``int`` status code, or an exception instance to raise.  Unknown
    terms get an empty result.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        term = request.url.params["q"]
        page = pages.get(term, [])
        if isinstance(page, Exception):
            raise page
        if isinstance(page, int):
            return httpx.Response(page)
        return httpx.Response(200, json=search_json(term, page))

    return handler


@pytest.fixture()
async def client():
    async with SkillsShClient(API, SITE) as c:
        yield c
