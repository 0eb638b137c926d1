#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for inline rendering to mrkdwn, plain text and rich text."""

import logging

import pytest

from md2blocks.ast import (
    Code,
    Emphasis,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    Paragraph,
    Strikethrough,
    Strong,
    Text,
)
from md2blocks.exceptions import ParseError, RecursionLimitError
from md2blocks.renderers import InlineRenderer


def bold_italic_chain(levels):
    """Build ``**_..._**`` nested ``levels`` times around one word."""
    node = Text("x")
    for _ in range(levels):
        node = Strong([Emphasis([node])])
    return node


def strong_chain(levels):
    node = Text("x")
    for _ in range(levels):
        node = Strong([node])
    return node


@pytest.mark.unit
class TestMrkdwn:
    """Test the mrkdwn target."""

    def setup_method(self):
        self.renderer = InlineRenderer("mrkdwn")

    def test_plain_text_escaped(self):
        assert self.renderer.render([Text("a < b & c > d 'q'")]) == "a &lt; b &amp; c &gt; d 'q'"

    def test_strong_and_emphasis(self):
        nodes = [Text("a "), Strong([Text("b")]), Text(" "), Emphasis([Text("c")])]
        assert self.renderer.render(nodes) == "a *b* _c_"

    def test_nested_styles(self):
        nodes = [Strong([Emphasis([Text("d")]), Text(" e")])]
        assert self.renderer.render(nodes) == "*_d_ e*"

    def test_repeated_style_collapses(self):
        assert self.renderer.render([Strong([Strong([Text("x")])])]) == "*x*"

    def test_strikethrough(self):
        assert self.renderer.render([Strikethrough([Text("gone")])]) == "~gone~"

    def test_code_span(self):
        assert self.renderer.render([Code("a*b")]) == "`a*b`"

    def test_code_span_escaped(self):
        assert self.renderer.render([Code("<x>")]) == "`&lt;x&gt;`"

    def test_link(self):
        nodes = [Link(url="https://apple.com", content=[Text("link")])]
        assert self.renderer.render(nodes) == "<https://apple.com|link>"

    def test_link_without_label_uses_url(self):
        nodes = [Link(url="https://apple.com", content=[])]
        assert self.renderer.render(nodes) == "<https://apple.com|https://apple.com>"

    def test_invalid_link_renders_label(self):
        nodes = [Text("see "), Link(url="http://", content=[Text("text")])]
        assert self.renderer.render(nodes) == "see text"

    def test_link_inside_bold(self):
        nodes = [Strong([Text("see "), Link(url="https://a.com", content=[Text("x")]), Text(" now")])]
        assert self.renderer.render(nodes) == "*see <https://a.com|x> now*"

    def test_styled_link_label(self):
        nodes = [Link(url="https://a.com", content=[Strong([Text("bold")]), Text(" plain")])]
        assert self.renderer.render(nodes) == "<https://a.com|*bold* plain>"

    def test_line_break(self):
        nodes = [Text("one"), LineBreak(soft=True), Text("two")]
        assert self.renderer.render(nodes) == "one\ntwo"

    def test_line_break_closes_markers(self):
        nodes = [Strong([Text("a"), LineBreak(), Text("b")])]
        assert self.renderer.render(nodes) == "*a*\n*b*"

    def test_html_line_break(self):
        nodes = [Text("a"), HTMLInline("<br/>"), Text("b")]
        assert self.renderer.render(nodes) == "a\nb"

    def test_other_inline_html_is_literal(self):
        assert self.renderer.render([HTMLInline("<span>")]) == "&lt;span&gt;"

    def test_nested_image_skipped(self, caplog):
        nodes = [Strong([Text("a"), Image(url="https://x.com/a.png", alt_text="img")])]
        with caplog.at_level(logging.DEBUG, logger="md2blocks.renderers._inline"):
            assert self.renderer.render(nodes) == "*a*"
        assert any("Skipping inline image" in record.message for record in caplog.records)

    def test_empty(self):
        assert self.renderer.render([]) == ""

    def test_block_node_rejected(self):
        with pytest.raises(ParseError, match="Unexpected node in inline content: Paragraph"):
            self.renderer.render([Paragraph([Text("x")])])


@pytest.mark.unit
class TestPlainText:
    """Test the plain_text target used for headers and table cells."""

    def test_markers_dropped(self):
        renderer = InlineRenderer("plain_text")
        nodes = [Text("heading "), Strong([Text("a")])]
        assert renderer.render(nodes) == "heading a"

    def test_not_escaped(self):
        assert InlineRenderer("plain_text").render([Text("a < b")]) == "a < b"

    def test_link_label_only(self):
        nodes = [Link(url="https://a.com", content=[Text("label")])]
        assert InlineRenderer("plain_text").render(nodes) == "label"


@pytest.mark.unit
class TestRichText:
    """Test the rich_text target."""

    def setup_method(self):
        self.renderer = InlineRenderer("rich_text")

    def test_bold(self):
        assert self.renderer.render([Strong([Text("b")])]) == [
            {"type": "text", "text": "b", "style": {"bold": True}}
        ]

    def test_plain_runs_merged(self):
        assert self.renderer.render([Text("a"), Text("b")]) == [{"type": "text", "text": "ab"}]

    def test_combined_styles(self):
        nodes = [Text("a "), Strong([Emphasis([Text("b")])]), Code("c")]
        assert self.renderer.render(nodes) == [
            {"type": "text", "text": "a "},
            {"type": "text", "text": "b", "style": {"bold": True, "italic": True}},
            {"type": "text", "text": "c", "style": {"code": True}},
        ]

    def test_link(self):
        nodes = [Link(url="https://a.com", content=[Text("label")])]
        assert self.renderer.render(nodes) == [{"type": "link", "url": "https://a.com", "text": "label"}]

    def test_adjacent_links_stay_separate(self):
        nodes = [
            Link(url="https://a.com", content=[Text("one")]),
            Link(url="https://a.com", content=[Text("two")]),
        ]
        assert len(self.renderer.render(nodes)) == 2

    def test_text_not_escaped(self):
        assert self.renderer.render([Text("a < b")]) == [{"type": "text", "text": "a < b"}]

    def test_is_plain(self):
        assert self.renderer.is_plain([Text("a"), Text("b")])
        assert not self.renderer.is_plain([Strong([Text("a")])])
        assert not self.renderer.is_plain([Link(url="https://a.com", content=[Text("a")])])


@pytest.mark.unit
class TestNestingDepth:
    """Test the recursion ceiling for nested formatting."""

    def test_forty_bold_italic_levels(self):
        assert InlineRenderer("mrkdwn").render([bold_italic_chain(40)]) == "*_x_*"

    def test_sixty_bold_italic_levels_rejected(self):
        with pytest.raises(RecursionLimitError) as exc_info:
            InlineRenderer("mrkdwn").render([bold_italic_chain(60)])
        assert exc_info.value.depth == 51
        assert exc_info.value.max_depth == 50

    def test_fifty_levels_at_limit(self):
        InlineRenderer("rich_text").render([strong_chain(50)])

    def test_fifty_one_levels_rejected(self):
        with pytest.raises(RecursionLimitError):
            InlineRenderer("rich_text").render([strong_chain(51)])

    def test_caller_depth_counts(self):
        with pytest.raises(RecursionLimitError):
            InlineRenderer("mrkdwn").render([strong_chain(11)], depth=40)

    def test_custom_ceiling(self):
        renderer = InlineRenderer("mrkdwn", max_depth=3)
        renderer.render([strong_chain(3)])
        with pytest.raises(RecursionLimitError):
            renderer.render([strong_chain(4)])

    def test_links_count_as_a_level(self):
        renderer = InlineRenderer("mrkdwn", max_depth=1)
        with pytest.raises(RecursionLimitError):
            renderer.render([Strong([Link(url="https://a.com", content=[Text("x")])])])


@pytest.mark.unit
def test_unknown_target():
    with pytest.raises(ValueError, match="Unknown inline target"):
        InlineRenderer("html")
