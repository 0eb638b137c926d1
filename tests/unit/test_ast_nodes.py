#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for AST nodes and the visitor pattern."""

import pytest

from md2blocks.ast import (
    BLOCK_NODE_TYPES,
    INLINE_NODE_TYPES,
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    NodeVisitor,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)


VISIT_METHODS = sorted(name for name in dir(NodeVisitor) if name.startswith("visit_"))


def _recorder(name):
    def visit(self, node):
        self.calls.append(name)
        return name

    return visit


def _init(self):
    self.calls = []


# Visitor that records the name of every visit method called
RecordingVisitor = type(
    "RecordingVisitor",
    (NodeVisitor,),
    {"__init__": _init, **{name: _recorder(name) for name in VISIT_METHODS}},
)


@pytest.mark.unit
class TestNodeConstruction:
    """Test node defaults and validation."""

    def test_heading_level_range(self):
        Heading(level=1)
        Heading(level=6)
        with pytest.raises(ValueError, match="Heading level must be 1-6"):
            Heading(level=7)
        with pytest.raises(ValueError):
            Heading(level=0)

    def test_list_start_non_negative(self):
        assert List(ordered=True, start=0).start == 0
        with pytest.raises(ValueError, match="List start must be >= 0"):
            List(ordered=True, start=-1)

    def test_list_item_checked(self):
        assert ListItem().checked is None
        assert ListItem(task_status="checked").checked is True
        assert ListItem(task_status="unchecked").checked is False

    def test_defaults_are_independent(self):
        first, second = Paragraph(), Paragraph()
        first.content.append(Text("x"))
        assert second.content == []

    def test_type_groups(self):
        assert Paragraph in BLOCK_NODE_TYPES
        assert Text in INLINE_NODE_TYPES
        assert not set(BLOCK_NODE_TYPES) & set(INLINE_NODE_TYPES)


@pytest.mark.unit
class TestVisitorDispatch:
    """Every node dispatches to its own visit method."""

    @pytest.mark.parametrize(
        "node, method",
        [
            (Document(), "visit_document"),
            (Heading(level=2), "visit_heading"),
            (Paragraph(), "visit_paragraph"),
            (CodeBlock(content="x"), "visit_code_block"),
            (BlockQuote(), "visit_block_quote"),
            (List(ordered=False), "visit_list"),
            (ListItem(), "visit_list_item"),
            (Table(), "visit_table"),
            (TableRow(), "visit_table_row"),
            (TableCell(), "visit_table_cell"),
            (ThematicBreak(), "visit_thematic_break"),
            (HTMLBlock(content="<div></div>"), "visit_html_block"),
            (Text("x"), "visit_text"),
            (Emphasis(), "visit_emphasis"),
            (Strong(), "visit_strong"),
            (Strikethrough(), "visit_strikethrough"),
            (Code("x"), "visit_code"),
            (Link(url="https://example.com"), "visit_link"),
            (Image(url="/a.png"), "visit_image"),
            (LineBreak(), "visit_line_break"),
            (HTMLInline(content="<br>"), "visit_html_inline"),
        ],
    )
    def test_accept(self, node, method):
        visitor = RecordingVisitor()
        assert node.accept(visitor) == method
        assert visitor.calls == [method]

    def test_visitor_covers_every_node_type(self):
        assert len(VISIT_METHODS) == 21
