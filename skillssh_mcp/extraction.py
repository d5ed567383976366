"""Best-effort scraping of skill detail pages.

The skills.sh detail page is rendered HTML with no stable schema.  This
module recovers three loosely structured values from it:

* weekly installs -- a ``NN.NK`` token next to the "Weekly installs" label,
* per-platform installs -- ``<span>platform</span><span>NN.NK</span>`` pairs,
* first-seen date -- a ``Mon D, YYYY`` token next to the "First Seen" label.

Single-value fields are described by :class:`FieldPattern` objects so
that markup changes only require editing the pattern table, never the
control flow.  Nothing in this module raises on unexpected markup: a
value that cannot be found is simply absent.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from skillssh_mcp.models import DetailExtraction, PlatformInstalls

_COUNT = r"\d{2,3}\.\dK"
_DATE = r"[A-Za-z]{3}\s+\d{1,2},?\s*\d{4}"


@dataclass(frozen=True)
class FieldPattern:
    """Ordered regex alternatives for one scraped field.

    The first pattern that matches wins; its first capture group is the
    extracted value.
    """

    name: str
    patterns: tuple[re.Pattern[str], ...]

    @classmethod
    def compile(cls, name: str, *sources: str, flags: int = re.IGNORECASE) -> FieldPattern:
        return cls(name, tuple(re.compile(src, flags) for src in sources))


WEEKLY_INSTALLS = FieldPattern.compile(
    "weekly_installs",
    rf"({_COUNT})\s*<[^>]*>\s*Weekly\s+installs",
    rf"({_COUNT})[^\d]*installs",
)

FIRST_SEEN = FieldPattern.compile(
    "first_seen",
    rf"First\s+Seen</span></div><div[^>]*>({_DATE})",
    rf"First\s+Seen[\s\S]*?<div[^>]*>({_DATE})</div>",
)

_PLATFORM_PAIR_RE = re.compile(
    rf"<span[^>]*>([\w-]+)</span>\s*<span[^>]*>({_COUNT})</span>",
    re.IGNORECASE,
)

#: Substrings identifying the agent platforms worth reporting.
KNOWN_PLATFORMS: tuple[str, ...] = (
    "opencode",
    "codex",
    "gemini",
    "copilot",
    "amp",
    "kimi",
    "cursor",
    "claude",
    "windsurf",
    "github-copilot",
    "gemini-cli",
    "kimi-cli",
)


def extract_field(html: str, spec: FieldPattern) -> str | None:
    """Return the first capture of the first matching pattern in *spec*."""
    for pattern in spec.patterns:
        match = pattern.search(html)
        if match:
            return match.group(1)
    return None


def extract_platform_installs(
    html: str,
    platforms: Iterable[str] = KNOWN_PLATFORMS,
) -> tuple[PlatformInstalls, ...]:
    """Collect per-platform install counts from *html*.

    Platform names are lower-cased and kept only when they contain one of
    the *platforms* substrings.  The first count seen for a platform wins.
    """
    allowed = tuple(p.lower() for p in platforms)
    found: dict[str, str] = {}
    for match in _PLATFORM_PAIR_RE.finditer(html):
        platform = match.group(1).lower()
        if platform in found:
            continue
        if any(p in platform for p in allowed):
            found[platform] = match.group(2)
    return tuple(PlatformInstalls(platform=p, count=c) for p, c in found.items())


def extract_details(
    html: str,
    platforms: Iterable[str] = KNOWN_PLATFORMS,
) -> DetailExtraction:
    """Run every extractor over a detail page.

    Example::

        stats = extract_details(await client.fetch_skill_page("o", "r", "s"))
        if stats.weekly_installs:
            print(stats.weekly_installs)
    """
    return DetailExtraction(
        weekly_installs=extract_field(html, WEEKLY_INSTALLS),
        platform_installs=extract_platform_installs(html, platforms),
        first_seen=extract_field(html, FIRST_SEEN),
    )
