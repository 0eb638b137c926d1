#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for HTML table and image decomposition."""

import pytest

from md2blocks.parsers.html import HtmlCellRecord, parse_html_image, parse_html_table


def texts(rows):
    return [[cell.text for cell in row] for row in rows]


@pytest.mark.unit
class TestParseHtmlTable:
    """Test parse_html_table."""

    def test_thead_rows_are_header(self):
        record = parse_html_table(
            "<table><thead><tr><th>Header 1</th><th>Header 2</th></tr></thead>"
            "<tbody><tr><td>a</td><td>b</td></tr><tr><td>c</td><td>d</td></tr></tbody></table>"
        )
        assert texts(record.head_rows) == [["Header 1", "Header 2"]]
        assert texts(record.body_rows) == [["a", "b"], ["c", "d"]]
        assert len(record.rows) == 3
        assert record.rows[0][0].text == "Header 1"

    def test_all_th_row_is_header(self):
        record = parse_html_table("<table><tr><th>A</th></tr><tr><td>1</td></tr></table>")
        assert texts(record.head_rows) == [["A"]]
        assert texts(record.body_rows) == [["1"]]

    def test_all_th_row_after_body_keeps_position(self):
        record = parse_html_table("<table><tr><td>a</td></tr><tr><th>H</th></tr></table>")
        assert record.head_rows == []
        assert texts(record.rows) == [["a"], ["H"]]

    def test_leading_all_th_rows_are_header(self):
        record = parse_html_table(
            "<table><tr><th>A</th></tr><tr><th>B</th></tr><tr><td>1</td></tr><tr><th>C</th></tr></table>"
        )
        assert texts(record.head_rows) == [["A"], ["B"]]
        assert texts(record.body_rows) == [["1"], ["C"]]

    def test_no_header(self):
        record = parse_html_table("<table><tr><td>a</td><td>b</td></tr><tr><td>c</td><td>d</td></tr></table>")
        assert record.head_rows == []
        assert texts(record.rows) == [["a", "b"], ["c", "d"]]

    def test_mixed_th_td_row_is_body(self):
        record = parse_html_table("<table><tr><th>Key</th><td>Value</td></tr></table>")
        assert record.head_rows == []
        assert texts(record.body_rows) == [["Key", "Value"]]

    def test_align_attribute(self):
        record = parse_html_table(
            '<table><tr><td>a</td><td align="center">b</td><td align="RIGHT">c</td></tr></table>'
        )
        assert [cell.align for cell in record.rows[0]] == [None, "center", "right"]

    def test_text_align_style(self):
        record = parse_html_table('<table><tr><td style="color: red; text-align: right">a</td></tr></table>')
        assert record.rows[0][0] == HtmlCellRecord(text="a", align="right")

    def test_nested_formatting_flattened(self):
        record = parse_html_table(
            "<table><tr><td><b>Bold</b> and <i>italic</i></td><td><code>x = 1</code></td></tr></table>"
        )
        assert texts(record.rows) == [["Bold and italic", "x = 1"]]

    def test_whitespace_collapsed(self):
        record = parse_html_table("<table>\n  <tr>\n    <td>\n      spaced\n      out\n    </td>\n  </tr>\n</table>")
        assert texts(record.rows) == [["spaced out"]]

    def test_nested_table_rows_skipped(self):
        record = parse_html_table(
            "<table><tr><td>outer<table><tr><td>inner</td></tr></table></td></tr></table>"
        )
        assert len(record.rows) == 1
        assert record.rows[0][0].text == "outer inner"

    def test_empty_table(self):
        assert parse_html_table("<table></table>") is None

    def test_no_table(self):
        assert parse_html_table("<div>no table here</div>") is None

    def test_malformed_html_does_not_raise(self):
        record = parse_html_table("<table><tr><td>unclosed<tr><td>next")
        assert record is not None
        assert record.rows


@pytest.mark.unit
class TestParseHtmlImage:
    """Test parse_html_image."""

    def test_src_and_alt(self):
        record = parse_html_image('<img src="https://example.com/a.png" alt="59953191-480px"/>')
        assert record.url == "https://example.com/a.png"
        assert record.alt_text == "59953191-480px"
        assert record.title is None

    def test_title(self):
        record = parse_html_image('<img src="/a.png" title="Caption">')
        assert record.alt_text == ""
        assert record.title == "Caption"

    def test_first_image_with_src(self):
        record = parse_html_image('<p><img alt="no source"><img src="/second.png"></p>')
        assert record.url == "/second.png"

    def test_no_image(self):
        assert parse_html_image("<p>text</p>") is None
