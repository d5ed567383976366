"""Async HTTP client for the skills.sh service.

This module implements :class:`SkillsShClient`, a thin wrapper over
:class:`httpx.AsyncClient` that talks to the two skills.sh surfaces the
adapter consumes:

* ``GET {api_base}/search?q=<query>&limit=<n>`` -- JSON search API.
* ``GET {site_base}/<owner>/<repo>/<skillId>`` -- rendered HTML detail
  page, used for best-effort statistics scraping.

Every request carries a fixed ``User-Agent`` identifying the adapter
and an ``Accept`` header matching the expected payload.
"""

from __future__ import annotations

import logging
import re
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from skillssh_mcp.exceptions import UpstreamError, UpstreamHTTPError
from skillssh_mcp.models import SearchResult

_logger = logging.getLogger(__name__)

# Identifiers (owner, repo, skillId) are interpolated into URL paths and
# into the rendered ``npx`` command.  GitHub names use the same alphabet
# and may start with any of it (``.github``, ``_private``).
_SAFE_IDENTIFIER_RE = re.compile(r"[a-zA-Z0-9._-]+")
_RELATIVE_SEGMENTS = frozenset({".", ".."})

#: Default JSON search API root.
DEFAULT_API_BASE: str = "https://skills.sh/api"

#: Default site root serving the HTML detail pages.
DEFAULT_SITE_BASE: str = "https://skills.sh"

#: User-Agent sent with every outbound request.
DEFAULT_USER_AGENT: str = "MCP-Skills-Sh/1.0.0"

#: Default HTTP request timeout in seconds.
DEFAULT_TIMEOUT_SECONDS: float = 30.0


def validate_identifier(value: str, label: str) -> str:
    """Return *value* if it is a safe URL path segment, else raise.

    Raises:
        ValueError: If *value* is empty, is ``.`` or ``..``, or contains
            characters outside ``[a-zA-Z0-9._-]``.
    """
    if not _SAFE_IDENTIFIER_RE.fullmatch(value) or value in _RELATIVE_SEGMENTS:
        raise ValueError(
            f"Invalid {label}: {value!r} must be a single path segment "
            f"made of alphanumeric characters, hyphens, dots, and underscores"
        )
    return value


class SkillsShClient:
    """Client for the skills.sh search API and detail pages.

    The client owns an :class:`httpx.AsyncClient` for connection
    pooling.  If you supply your own client it is used as-is and is not
    closed by :meth:`aclose`.

    Args:
        api_base: Root of the JSON API.  A trailing slash is stripped.
        site_base: Root of the website serving detail pages.  A
            trailing slash is stripped.
        client: Optional pre-configured :class:`httpx.AsyncClient`.
            When provided, the caller is responsible for closing it.
        user_agent: Value of the ``User-Agent`` header.
        timeout: Request timeout in seconds.  Ignored when *client* is
            supplied.

    Example::

        async with SkillsShClient() as client:
            result = await client.search("react", limit=10)
            for skill in result.skills:
                print(skill.source, skill.installs)
    """

    def __init__(
        self,
        api_base: str = DEFAULT_API_BASE,
        site_base: str = DEFAULT_SITE_BASE,
        *,
        client: httpx.AsyncClient | None = None,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._api_base = api_base.rstrip("/")
        self._site_base = site_base.rstrip("/")
        self._user_agent = user_agent
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout),
            follow_redirects=True,
        )

    async def aclose(self) -> None:
        """Close the underlying HTTP client if it is owned by this instance."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> SkillsShClient:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # URLs
    # ------------------------------------------------------------------

    def skill_page_url(self, owner: str, repo: str, skill_id: str) -> str:
        """Return the public detail page URL of a skill."""
        segments = (quote(part, safe="") for part in (owner, repo, skill_id))
        return f"{self._site_base}/{'/'.join(segments)}"

    # ------------------------------------------------------------------
    # Search API
    # ------------------------------------------------------------------

    async def search(self, query: str, limit: int = 50) -> SearchResult:
        """Run a search query against the skills.sh API.

        Args:
            query: Free-text search term.
            limit: Maximum number of records the API should return.

        Returns:
            The parsed :class:`~skillssh_mcp.models.SearchResult`, with
            skills in the relevance order chosen by the API.

        Raises:
            UpstreamHTTPError: On a non-success status code.
            UpstreamError: On connection failures or an unparseable
                response body.
        """
        resp = await self._get(
            f"{self._api_base}/search",
            params={"q": query, "limit": str(limit)},
            accept="application/json",
        )
        try:
            return SearchResult.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            raise UpstreamError(f"Invalid search response for {query!r}") from exc

    # ------------------------------------------------------------------
    # Detail pages
    # ------------------------------------------------------------------

    async def fetch_skill_page(self, owner: str, repo: str, skill_id: str) -> str:
        """Fetch the rendered HTML detail page of a skill.

        Raises:
            UpstreamHTTPError: On a non-success status code.
            UpstreamError: On connection failures.
        """
        resp = await self._get(self.skill_page_url(owner, repo, skill_id), accept="text/html")
        return resp.text

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _get(
        self,
        url: str,
        *,
        accept: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        headers = {"Accept": accept, "User-Agent": self._user_agent}
        try:
            resp = await self._client.get(url, params=params, headers=headers)
        except httpx.HTTPError as exc:
            raise UpstreamError(f"HTTP request failed: {exc}") from exc
        if not resp.is_success:
            _logger.debug("GET %s -> %s", resp.request.url, resp.status_code)
            raise UpstreamHTTPError(resp.status_code, resp.reason_phrase)
        return resp
