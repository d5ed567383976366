"""Tests for detail-page extraction."""

import re

import pytest

from skillssh_mcp.extraction import (
    FIRST_SEEN,
    WEEKLY_INSTALLS,
    FieldPattern,
    extract_details,
    extract_field,
    extract_platform_installs,
)
from skillssh_mcp.models import PlatformInstalls

DETAIL_HTML = """\
<main>
  <div class="stat">123.4K <span class="label">Weekly installs</span></div>
  <div class="platforms">
    <div><span class="p">claude-code</span> <span class="c">45.6K</span></div>
    <div><span class="p">Cursor</span><span class="c">12.3K</span></div>
    <div><span class="p">claude-code</span><span class="c">99.9K</span></div>
    <div><span class="p">vscode</span><span class="c">11.1K</span></div>
  </div>
  <div><div><span>First Seen</span></div><div class="v">Jan 26, 2026</div></div>
</main>
"""

PLAIN_HTML = "<html><body><h1>pdf</h1><p>Nothing to see here.</p></body></html>"


class TestExtractField:
    def test_first_pattern_wins(self):
        spec = FieldPattern.compile("n", r"a(\d)", r"b(\d)")
        assert extract_field("b2 a1", spec) == "1"

    def test_falls_through_to_later_pattern(self):
        spec = FieldPattern.compile("n", r"a(\d)", r"b(\d)")
        assert extract_field("b2", spec) == "2"

    def test_no_match_is_none(self):
        spec = FieldPattern.compile("n", r"a(\d)")
        assert extract_field("zzz", spec) is None

    def test_compile_is_case_insensitive_by_default(self):
        spec = FieldPattern.compile("n", r"x(\d)")
        assert spec.patterns[0].flags & re.IGNORECASE


class TestWeeklyInstalls:
    def test_label_after_token(self):
        assert extract_field(DETAIL_HTML, WEEKLY_INSTALLS) == "123.4K"

    def test_loose_fallback(self):
        html = "<div>98.7K</div><div>Weekly Installs</div>"
        assert extract_field(html, WEEKLY_INSTALLS) == "98.7K"

    @pytest.mark.parametrize("token", ["1.2K", "1234K", "12K"])
    def test_rejects_other_number_shapes(self, token):
        html = f"<div>{token} <span>Weekly installs</span></div>"
        assert extract_field(html, WEEKLY_INSTALLS) is None


class TestFirstSeen:
    def test_adjacent_markup(self):
        assert extract_field(DETAIL_HTML, FIRST_SEEN) == "Jan 26, 2026"

    def test_loose_fallback(self):
        html = "<p>First Seen</p><section><div>Mar 3, 2025</div></section>"
        assert extract_field(html, FIRST_SEEN) == "Mar 3, 2025"

    def test_missing(self):
        assert extract_field(PLAIN_HTML, FIRST_SEEN) is None


class TestPlatformInstalls:
    def test_allow_list_and_first_match_wins(self):
        result = extract_platform_installs(DETAIL_HTML)
        assert result == (
            PlatformInstalls(platform="claude-code", count="45.6K"),
            PlatformInstalls(platform="cursor", count="12.3K"),
        )

    def test_never_repeats_a_platform(self):
        html = "".join(f"<span>codex</span><span>{n}.0K</span>" for n in range(10, 20))
        result = extract_platform_installs(html)
        assert [p.platform for p in result] == ["codex"]
        assert result[0].count == "10.0K"

    def test_custom_platforms(self):
        result = extract_platform_installs(DETAIL_HTML, platforms=["vscode"])
        assert result == (PlatformInstalls(platform="vscode", count="11.1K"),)

    def test_no_pairs(self):
        assert extract_platform_installs(PLAIN_HTML) == ()


class TestExtractDetails:
    def test_full_page(self):
        stats = extract_details(DETAIL_HTML)
        assert stats.weekly_installs == "123.4K"
        assert stats.first_seen == "Jan 26, 2026"
        assert len(stats.platform_installs) == 2

    @pytest.mark.parametrize("html", ["", PLAIN_HTML, "<span>", "<<<>>>", "First Seen"])
    def test_unrecognised_markup_yields_empty(self, html):
        stats = extract_details(html)
        assert stats.weekly_installs is None
        assert stats.platform_installs == ()
        assert stats.first_seen is None
