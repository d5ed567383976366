"""Popular-skills approximation.

skills.sh has no public leaderboard endpoint.  :func:`collect_popular_skills`
samples the search index with a fixed set of short probe terms, merges the
results by skill ``id`` and ranks them by install count.  The ranking is a
statistical proxy, not the site's real leaderboard.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Iterable, Sequence

from skillssh_mcp.client import SkillsShClient
from skillssh_mcp.exceptions import SkillsShError
from skillssh_mcp.models import PopularSkills, SearchResult, SkillRecord

_logger = logging.getLogger(__name__)

#: Short queries that together cover a broad slice of the index.
PROBE_TERMS: tuple[str, ...] = (
    # languages
    "js", "ts", "py", "go", "rb",
    # frameworks
    "re", "vu", "nx", "ex", "dx",
    # concepts
    "ai", "ml", "db", "api", "ui",
    # common prefixes
    "co", "de", "te", "se", "cl",
)  # fmt: skip

#: Results requested per probe query.
PROBE_LIMIT: int = 50


class _SkillAccumulator:
    """Order-preserving merge of skill records, unique by ``id``."""

    def __init__(self) -> None:
        self._seen: set[str] = set()
        self._skills: list[SkillRecord] = []

    def __len__(self) -> int:
        return len(self._skills)

    def add_all(self, skills: Iterable[SkillRecord]) -> None:
        for skill in skills:
            if skill.id not in self._seen:
                self._seen.add(skill.id)
                self._skills.append(skill)

    def ranked(self) -> list[SkillRecord]:
        # sorted() is stable: equal install counts keep merge order.
        return sorted(self._skills, key=lambda s: s.installs, reverse=True)


async def _probe(client: SkillsShClient, term: str, limit: int) -> SearchResult | None:
    try:
        return await client.search(term, limit=limit)
    except SkillsShError as exc:
        _logger.debug("Probe %r skipped: %s", term, exc)
        return None


async def collect_popular_skills(
    client: SkillsShClient,
    limit: int,
    *,
    probe_terms: Sequence[str] = PROBE_TERMS,
    probe_limit: int = PROBE_LIMIT,
) -> PopularSkills:
    """Approximate the most-installed skills on skills.sh.

    Every probe term is searched (concurrently); failed probes are
    skipped.  Results are merged in probe order, so the outcome does not
    depend on which response arrives first.

    Args:
        client: The :class:`~skillssh_mcp.client.SkillsShClient` to query.
        limit: Maximum number of skills to return.
        probe_terms: Search terms used to sample the index.
        probe_limit: Results requested per probe.

    Returns:
        A :class:`~skillssh_mcp.models.PopularSkills` holding at most
        *limit* skills sorted by installs descending, plus the number of
        unique skills seen before truncation.  Both are empty/zero if
        every probe failed.
    """
    results = await asyncio.gather(*(_probe(client, term, probe_limit) for term in probe_terms))

    merged = _SkillAccumulator()
    for result in results:
        if result is not None:
            merged.add_all(result.skills)

    top = merged.ranked()[: max(limit, 0)]
    return PopularSkills(skills=tuple(top), unique_count=len(merged))
