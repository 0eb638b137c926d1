#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/parsers/markdown.py
"""Markdown to AST converter.

This module provides conversion from Markdown text to the md2blocks AST
using the mistune tokenizer. mistune's token dictionaries are mapped onto the
closed node hierarchy in :mod:`md2blocks.ast`; token kinds the block engine
has no use for (blank lines, footnotes, math) are dropped here.

"""

from __future__ import annotations

import logging
from typing import Any, Literal

from md2blocks.ast import (
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
    Node,
    Paragraph,
    Strikethrough,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
)
from md2blocks.constants import DEPS_MARKDOWN, VALID_ALIGNMENTS
from md2blocks.exceptions import ParseError
from md2blocks.options.markdown import MarkdownParserOptions
from md2blocks.parsers.base import BaseParser
from md2blocks.utils.decorators import requires_dependencies
from md2blocks.utils.validation import validate_input

logger = logging.getLogger(__name__)


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    This converter uses mistune to tokenize Markdown and builds the AST
    consumed by :class:`md2blocks.renderers.blocks.BlockKitRenderer`.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    With options:

        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> converter = MarkdownToAstConverter(options)
        >>> doc = converter.parse(markdown_text)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: str) -> Document:
        """Parse Markdown text into an AST Document.

        Parameters
        ----------
        input_data : str
            Markdown text to parse

        Returns
        -------
        Document
            AST document node

        Raises
        ------
        ValidationError
            If the input is None, not a string, empty, or too long
        ParseError
            If mistune returns a token structure that cannot be interpreted

        """
        markdown_content = validate_input(input_data, self.options.max_input_length)

        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_task_lists:
            plugins.append("task_lists")

        # renderer=None makes mistune return the raw token list
        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        tokens, _state = markdown.parse(markdown_content)

        if not isinstance(tokens, list):
            raise ParseError(f"Expected a token list from mistune, received {type(tokens).__name__}")

        return Document(children=self._process_tokens(tokens))

    def _process_tokens(self, tokens: Any) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries

        Returns
        -------
        list of Node
            AST nodes

        Raises
        ------
        ParseError
            If ``tokens`` is not a list of dictionaries

        """
        if not isinstance(tokens, list):
            raise ParseError(f"Expected a list of tokens, received {type(tokens).__name__}")

        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _process_token(self, token: Any) -> Node | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, or None for token kinds that are dropped

        """
        if not isinstance(token, dict):
            raise ParseError(f"Malformed token: expected a mapping, received {type(token).__name__}")

        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return self._process_paragraph(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))

        if token_type != "blank_line":
            logger.debug(f"Dropping unsupported block token: {token_type!r}")
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token."""
        attrs = token.get("attrs") or {}
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1

        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        """Process paragraph token."""
        return Paragraph(content=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        Parameters
        ----------
        token : dict
            Code block token with 'raw' and optional 'attrs'

        Returns
        -------
        CodeBlock
            Code block AST node

        """
        code_content = token.get("raw", "")
        attrs = token.get("attrs") or {}
        info_string = attrs.get("info") if isinstance(attrs, dict) else None

        language = None
        if info_string and info_string.strip():
            # Language is the first word of the info string
            language = info_string.strip().split(maxsplit=1)[0]

        return CodeBlock(content=code_content, language=language)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children', 'attrs' (ordered, start) and 'tight'

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs") or {}
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        # mistune only records start when it differs from 1
        start = attrs.get("start", 1)
        if not isinstance(start, int) or start < 0:
            start = 1
        tight = token.get("tight", attrs.get("tight", True))

        children = token.get("children", [])
        if not isinstance(children, list):
            raise ParseError("List token children must be a list", token_type="list")

        items = [self._process_list_item(child) for child in children]

        return List(ordered=ordered, items=items, start=start, tight=bool(tight))

    def _process_list_item(self, token: Any) -> ListItem:
        """Process list_item or task_list_item token.

        Parameters
        ----------
        token : dict
            List item token with 'children'

        Returns
        -------
        ListItem
            List item AST node

        """
        if not isinstance(token, dict) or token.get("type") not in ("list_item", "task_list_item"):
            raise ParseError("List children must be list_item tokens", token_type="list")

        task_status: Literal["checked", "unchecked"] | None = None
        attrs = token.get("attrs") or {}
        if token.get("type") == "task_list_item" or (isinstance(attrs, dict) and "checked" in attrs):
            task_status = "checked" if attrs.get("checked") else "unchecked"

        return ListItem(children=self._process_tokens(token.get("children", [])), task_status=task_status)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        Parameters
        ----------
        token : dict
            Table token with 'children' (table_head, table_body)

        Returns
        -------
        Table
            Table AST node

        """
        header = None
        rows = []
        alignments: list[Any] = []

        for row_token in token.get("children", []):
            if not isinstance(row_token, dict):
                raise ParseError("Malformed table token", token_type="table")

            row_type = row_token.get("type", "")
            if row_type == "table_head":
                # Header cells are direct children of table_head
                cells = self._process_table_row_cells(row_token)
                header = TableRow(cells=cells, is_header=True)
                alignments = [cell.alignment for cell in cells]

            elif row_type == "table_body":
                for body_row_token in row_token.get("children", []):
                    cells = self._process_table_row_cells(body_row_token)
                    rows.append(TableRow(cells=cells, is_header=False))

        return Table(header=header, rows=rows, alignments=alignments)

    def _process_table_row_cells(self, row_token: Any) -> list[TableCell]:
        """Process the table_cell children of a table_head or table_row token."""
        if not isinstance(row_token, dict):
            raise ParseError("Malformed table row token", token_type="table_row")

        cells = []
        for cell_token in row_token.get("children", []):
            if not isinstance(cell_token, dict):
                raise ParseError("Malformed table cell token", token_type="table_cell")

            attrs = cell_token.get("attrs") or {}
            alignment = attrs.get("align") if isinstance(attrs, dict) else None
            if alignment not in VALID_ALIGNMENTS:
                alignment = None

            content = self._process_inline_tokens(cell_token.get("children", []))
            cells.append(TableCell(content=content, alignment=alignment))

        return cells

    def _process_inline_tokens(self, tokens: Any) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        if not isinstance(tokens, list):
            raise ParseError(f"Expected a list of inline tokens, received {type(tokens).__name__}")

        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token, decoding entity and numeric character references."""
        return Text(content=_decode_entities(token.get("raw", "")))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        """Handle strong token."""
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token."""
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        """Handle codespan token."""
        return Code(content=token.get("raw", ""))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs") or {}
        if not isinstance(attrs, dict):
            attrs = {}
        url = attrs.get("url", "")
        title = attrs.get("title", None)
        content = self._process_inline_tokens(token.get("children", []))
        return Link(url=url, content=content, title=title)

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token."""
        attrs = token.get("attrs") or {}
        if not isinstance(attrs, dict):
            attrs = {}
        url = attrs.get("url", "")
        title = attrs.get("title", None)
        # Alt text lives in the children, which may themselves be styled
        alt_text = _flatten_token_text(token.get("children", []))
        return Image(url=url, alt_text=alt_text, title=title)

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle linebreak token."""
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle softbreak token."""
        return LineBreak(soft=True)

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Strikethrough:
        """Handle strikethrough token."""
        return Strikethrough(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        """Handle inline_html token."""
        return HTMLInline(content=token.get("raw", ""))

    def _process_inline_token(self, token: Any) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node

        """
        if not isinstance(token, dict):
            raise ParseError(f"Malformed inline token: expected a mapping, received {type(token).__name__}")

        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "strikethrough": self._handle_strikethrough_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug(f"Dropping unsupported inline token: {token_type!r}")
        return None


def _decode_entities(text: str) -> str:
    """Decode character references the way CommonMark does in text.

    Code spans and code blocks keep their references literally; only text
    tokens go through here.
    """
    from mistune.util import unescape

    return unescape(text)


def _flatten_token_text(tokens: Any) -> str:
    """Concatenate the raw text of a token subtree."""
    if not isinstance(tokens, list):
        return ""

    parts = []
    for token in tokens:
        if not isinstance(token, dict):
            continue
        if token.get("type") == "text":
            parts.append(_decode_entities(token.get("raw", "")))
        elif "raw" in token:
            parts.append(token["raw"])
        parts.append(_flatten_token_text(token.get("children", [])))
    return "".join(parts)


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown string to AST.

    This is a convenience function that creates a converter and parses
    the markdown in one step.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> from md2blocks.parsers.markdown import markdown_to_ast
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    converter = MarkdownToAstConverter(options)
    return converter.parse(markdown_content)
