"""Markdown rendering of skills.sh data for agent consumption."""

from __future__ import annotations

from collections.abc import Sequence

from skillssh_mcp.models import DetailExtraction, PopularSkills, SearchResult, SkillRecord

TIMEFRAME_LABELS: dict[str, str] = {
    "all": "All Time",
    "trending": "Trending (24h)",
    "hot": "Hot",
}


def install_command(owner: str, repo: str) -> str:
    """Return the CLI command that installs the skills of ``owner/repo``."""
    return f"npx skills add {owner}/{repo}"


def github_url(owner: str, repo: str) -> str:
    return f"https://github.com/{owner}/{repo}"


def _bash_block(command: str) -> str:
    return f"```bash\n{command}\n```"


def format_skill_list(skills: Sequence[SkillRecord]) -> str:
    """Render a numbered list of skills, one block per skill."""
    return "\n\n".join(
        f"{index}. **{skill.name}**\n"
        f"   - Source: `{skill.source}`\n"
        f"   - Installs: {skill.installs:,}\n"
        f"   - Install: `npx skills add {skill.source}`"
        for index, skill in enumerate(skills, start=1)
    )


def format_search_results(result: SearchResult, query: str, limit: int) -> str:
    """Render at most *limit* search hits in API order."""
    skills = result.skills[: max(limit, 0)]
    if not skills:
        return f'No skills found for query: "{query}"'
    return f'Found {result.count} skills for "{query}":\n\n{format_skill_list(skills)}'


def format_popular_skills(popular: PopularSkills, limit: int, timeframe: str) -> str:
    if not popular.skills:
        return f'No skills found for timeframe: "{timeframe}"'
    label = TIMEFRAME_LABELS.get(timeframe, timeframe)
    return (
        f"Top {limit} {label} Skills ({popular.unique_count} unique skills found):\n\n"
        f"{format_skill_list(popular.skills)}"
    )


def _links(owner: str, repo: str, page_url: str) -> str:
    return f"**Links:**\n- skills.sh: {page_url}\n- GitHub: {github_url(owner, repo)}"


def format_skill_details(
    owner: str,
    repo: str,
    skill_id: str,
    page_url: str,
    basic: SkillRecord | None,
    stats: DetailExtraction,
) -> str:
    """Render the full detail view of a skill.

    Extracted statistics that are absent are omitted rather than shown
    as placeholders; only the total install count falls back to ``N/A``.
    """
    installs = f"{basic.installs:,}" if basic and basic.installs else "N/A"
    facts = [f"- Total Installs: {installs}"]
    if stats.weekly_installs:
        facts.append(f"- Weekly Installs: {stats.weekly_installs}")
    if stats.first_seen:
        facts.append(f"- First Seen: {stats.first_seen}")

    text = (
        f"## {skill_id}\n\n"
        f"**Source:** `{owner}/{repo}`\n"
        + "\n".join(facts)
        + "\n\n"
        + _links(owner, repo, page_url)
        + "\n\n**Install Command:**\n"
        + _bash_block(install_command(owner, repo))
    )
    if stats.platform_installs:
        text += "\n\n**Installs by Platform:**\n" + "\n".join(
            f"- {p.platform}: {p.count}" for p in stats.platform_installs
        )
    return text


def format_skill_details_fallback(
    owner: str,
    repo: str,
    skill_id: str,
    page_url: str,
    error: str,
) -> str:
    """Render the reduced detail view used when the page cannot be scraped."""
    return (
        f"## {skill_id}\n\n"
        f"**Source:** `{owner}/{repo}`\n\n"
        f"{_links(owner, repo, page_url)}\n\n"
        f"**Install Command:**\n"
        f"{_bash_block(install_command(owner, repo))}\n\n"
        f"(Error fetching additional details: {error})"
    )


def format_install_command(owner: str, repo: str) -> str:
    return f"Install command:\n{_bash_block(install_command(owner, repo))}"
