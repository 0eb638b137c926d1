#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers that turn Markdown text and HTML fragments into engine input."""

from md2blocks.parsers.base import BaseParser
from md2blocks.parsers.html import (
    HtmlCellRecord,
    HtmlImageRecord,
    HtmlTableRecord,
    parse_html_image,
    parse_html_table,
)
from md2blocks.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = [
    "BaseParser",
    "HtmlCellRecord",
    "HtmlImageRecord",
    "HtmlTableRecord",
    "MarkdownToAstConverter",
    "markdown_to_ast",
    "parse_html_image",
    "parse_html_table",
]
