#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for mrkdwn escaping."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2blocks.utils.escape import escape_mrkdwn


@pytest.mark.unit
class TestEscapeMrkdwn:
    """Test that exactly &, < and > are escaped."""

    def test_reserved_characters(self):
        assert escape_mrkdwn("<>&'\"\"'&><") == "&lt;&gt;&amp;'\"\"'&amp;&gt;&lt;"

    def test_quotes_untouched(self):
        text = "I've just completed the 'Research Report' workflow"
        assert escape_mrkdwn(text) == text

    def test_markers_untouched(self):
        assert escape_mrkdwn("*bold* _it_ ~s~ `c`") == "*bold* _it_ ~s~ `c`"

    def test_existing_entities_escaped(self):
        assert escape_mrkdwn("a &amp; b &lt; c &gt; d") == "a &amp;amp; b &amp;lt; c &amp;gt; d"

    def test_other_entities_escaped(self):
        assert escape_mrkdwn("&#39;") == "&amp;#39;"
        assert escape_mrkdwn("&quot;") == "&amp;quot;"

    def test_entity_without_semicolon_escaped(self):
        assert escape_mrkdwn("&amp") == "&amp;amp"

    def test_empty(self):
        assert escape_mrkdwn("") == ""


@pytest.mark.unit
@pytest.mark.fuzzing
class TestEscapeMrkdwnProperties:
    """Property-based checks for escaping."""

    @given(st.text(alphabet="ab '\"<>&"))
    def test_only_three_characters_change(self, text):
        escaped = escape_mrkdwn(text)
        assert "<" not in escaped
        assert ">" not in escaped
        assert escaped.count("'") == text.count("'")
        assert escaped.count('"') == text.count('"')
        assert escaped.replace("&lt;", "<").replace("&gt;", ">").replace("&amp;", "&") == text

    @given(st.text())
    def test_every_ampersand_starts_an_entity(self, text):
        escaped = escape_mrkdwn(text)
        assert escaped.count("&") == escaped.count("&amp;") + escaped.count("&lt;") + escaped.count("&gt;")
        assert len(escaped) == len(text) + 4 * text.count("&") + 3 * (text.count("<") + text.count(">"))
