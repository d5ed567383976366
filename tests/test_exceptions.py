"""Tests for the exception hierarchy."""

import pytest

from skillssh_mcp import SkillsShError, UnknownToolError, UpstreamError, UpstreamHTTPError


class TestExceptionHierarchy:
    def test_upstream_error_is_skills_sh_error(self):
        assert issubclass(UpstreamError, SkillsShError)

    def test_http_error_is_upstream_error(self):
        assert issubclass(UpstreamHTTPError, UpstreamError)

    def test_unknown_tool_is_lookup_error(self):
        assert issubclass(UnknownToolError, SkillsShError)
        assert issubclass(UnknownToolError, LookupError)

    def test_http_error_message(self):
        err = UpstreamHTTPError(503, "Service Unavailable")
        assert str(err) == "HTTP 503: Service Unavailable"
        assert err.status_code == 503
        assert err.reason == "Service Unavailable"

    def test_catch_base_catches_http_error(self):
        with pytest.raises(SkillsShError):
            raise UpstreamHTTPError(500, "Internal Server Error")
