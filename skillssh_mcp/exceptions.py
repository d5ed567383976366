"""Exception hierarchy for the skills.sh MCP adapter.

All exceptions raised by :mod:`skillssh_mcp` inherit from
:class:`SkillsShError`, allowing callers to catch the entire family
with a single ``except`` clause.

* :class:`UpstreamError` -- a request to skills.sh failed (connection
  error, malformed payload).
* :class:`UpstreamHTTPError` -- skills.sh answered with a non-success
  status code.
* :class:`UnknownToolError` -- the dispatcher was asked for a tool it
  does not register.

None of these ever cross the MCP transport: the tool dispatcher turns
them into error-flagged results.
"""


class SkillsShError(Exception):
    """Base exception for all skills.sh adapter errors."""


class UpstreamError(SkillsShError):
    """A request to skills.sh failed before a usable response arrived."""


class UpstreamHTTPError(UpstreamError):
    """skills.sh answered with a non-success HTTP status.

    Example::

        try:
            await client.search("react")
        except UpstreamHTTPError as exc:
            print(exc.status_code, exc.reason)
    """

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"HTTP {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class UnknownToolError(SkillsShError, LookupError):
    """A tool name that is not registered with the dispatcher."""
