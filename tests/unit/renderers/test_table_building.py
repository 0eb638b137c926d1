#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for table normalization and table block construction."""

import pytest

from md2blocks.ast import Code, Link, Strong, Table, TableCell, TableRow, Text
from md2blocks.exceptions import ValidationError
from md2blocks.parsers.html import HtmlCellRecord, HtmlTableRecord
from md2blocks.renderers import (
    TableModel,
    TableModelCell,
    build_table,
    column_settings_for,
    table_model_from_html,
    table_model_from_node,
)


def cell(*nodes, alignment=None):
    return TableCell(content=list(nodes), alignment=alignment)


def md_table(header, rows, alignments):
    return Table(
        header=TableRow(cells=[cell(Text(text)) for text in header], is_header=True),
        rows=[TableRow(cells=[cell(Text(text)) for text in row]) for row in rows],
        alignments=alignments,
    )


@pytest.mark.unit
class TestColumnSettings:
    """Test column_settings_for."""

    @pytest.mark.parametrize(
        "alignments, expected",
        [
            (["left", "center", "right"], [{"align": "center"}, {"align": "right"}]),
            ([None, None], None),
            ([], None),
            (["right"], None),
            ([None, "left"], None),
            ([None, "left", "center"], [{}, {"align": "center"}]),
            ([None, "center", "left"], [{"align": "center"}, {"align": "left"}]),
            ([None, None, "right"], [{}, {"align": "right"}]),
            ([None, "right", None, None], [{"align": "right"}]),
        ],
    )
    def test_settings(self, alignments, expected):
        assert column_settings_for(alignments) == expected


@pytest.mark.unit
class TestTableModels:
    """Test normalizing Markdown and HTML tables."""

    def test_markdown_header_is_first_row(self):
        model = table_model_from_node(md_table(["A", "B"], [["1", "2"]], ["left", "right"]))
        assert [[c.text for c in row] for row in model.rows] == [["A", "B"], ["1", "2"]]
        assert model.alignments == ["left", "right"]

    def test_markdown_cell_text_is_plain(self):
        tbl = Table(rows=[TableRow(cells=[cell(Strong([Text("a < b")]))])])
        model = table_model_from_node(tbl)
        assert model.rows[0][0].text == "a < b"
        assert model.rows[0][0].content == [Strong([Text("a < b")])]

    def test_alignments_from_header_cells(self):
        tbl = Table(header=TableRow(cells=[cell(Text("A")), cell(Text("B"), alignment="center")], is_header=True))
        assert table_model_from_node(tbl).alignments == [None, "center"]

    def test_html_alignment_first_explicit_wins(self):
        record = HtmlTableRecord(
            head_rows=[[HtmlCellRecord("A"), HtmlCellRecord("B")]],
            body_rows=[
                [HtmlCellRecord("1"), HtmlCellRecord("2", "right")],
                [HtmlCellRecord("3", "center"), HtmlCellRecord("4", "left")],
            ],
        )
        model = table_model_from_html(record)
        assert model.alignments == ["center", "right"]
        assert model.rows[0][0] == TableModelCell("A")

    def test_html_ragged_rows(self):
        record = HtmlTableRecord(body_rows=[[HtmlCellRecord("1")], [HtmlCellRecord("2"), HtmlCellRecord("3", "right")]])
        assert table_model_from_html(record).alignments == [None, "right"]


@pytest.mark.unit
class TestBuildTable:
    """Test build_table."""

    def test_plain_cells_are_raw_text(self):
        block = build_table(table_model_from_node(md_table(["A"], [["1"]], [None])))
        assert block.rows == [[{"type": "raw_text", "text": "A"}], [{"type": "raw_text", "text": "1"}]]
        assert block.column_settings is None
        assert "column_settings" not in block.to_dict()

    def test_styled_cells_are_rich_text(self):
        tbl = Table(rows=[TableRow(cells=[cell(Text("plain")), cell(Strong([Text("b")])), cell(Code("c"))])])
        block = build_table(table_model_from_node(tbl))
        first, second, third = block.rows[0]
        assert first == {"type": "raw_text", "text": "plain"}
        assert second == {
            "type": "rich_text",
            "elements": [
                {"type": "rich_text_section", "elements": [{"type": "text", "text": "b", "style": {"bold": True}}]}
            ],
        }
        assert third["elements"][0]["elements"] == [{"type": "text", "text": "c", "style": {"code": True}}]

    def test_link_cell_is_rich_text(self):
        tbl = Table(rows=[TableRow(cells=[cell(Link(url="https://a.com", content=[Text("a")]))])])
        block = build_table(table_model_from_node(tbl))
        assert block.rows[0][0]["elements"][0]["elements"] == [{"type": "link", "url": "https://a.com", "text": "a"}]

    def test_empty_cell(self):
        tbl = Table(rows=[TableRow(cells=[cell(), cell(Text("x"))])])
        block = build_table(table_model_from_node(tbl))
        assert block.rows[0][0] == {"type": "raw_text", "text": ""}

    def test_alignment_settings(self):
        block = build_table(table_model_from_node(md_table(["A", "B", "C"], [], ["left", "center", "right"])))
        assert block.column_settings == [{"align": "center"}, {"align": "right"}]

    def test_markdown_and_html_agree(self):
        md_block = build_table(table_model_from_node(md_table(["A", "B"], [["1", "2"]], [None, "right"])))
        record = HtmlTableRecord(
            head_rows=[[HtmlCellRecord("A"), HtmlCellRecord("B", "right")]],
            body_rows=[[HtmlCellRecord("1"), HtmlCellRecord("2", "right")]],
        )
        html_block = build_table(table_model_from_html(record))
        assert md_block == html_block

    def test_row_ceiling(self):
        model = TableModel(rows=[[TableModelCell("x")]] * 101)
        with pytest.raises(ValidationError, match="more than 100 rows"):
            build_table(model)
