#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/blocks.py
"""Message block rendering from AST.

This module provides the BlockKitRenderer class, which walks the top-level
nodes of a document and turns them into an ordered list of output blocks.

Adjacent paragraphs (and bare inline nodes) are accumulated into one open
section, joined by a newline. Every other node first closes the open
section and then emits its own block: headings become headers, lists and
quotes become sections (or rich-text blocks), tables become native table
blocks, thematic breaks become dividers, and images become image blocks.

"""

from __future__ import annotations

import logging
import re
from typing import Any, Sequence

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
from md2blocks.blocks import (
    Block,
    ImageBlock,
    RichTextBlock,
    divider,
    header,
    image,
    rich_text_code,
    rich_text_list_element,
    section,
)
from md2blocks.constants import MAX_HEADER_TEXT_LENGTH, MAX_SECTION_TEXT_LENGTH, MRKDWN_CODE_FENCE, MRKDWN_QUOTE_PREFIX
from md2blocks.exceptions import ParseError, ValidationError
from md2blocks.options.blocks import BlockKitOptions
from md2blocks.parsers.html import parse_html_image, parse_html_table
from md2blocks.renderers._inline import InlineRenderer
from md2blocks.renderers._tables import build_table, table_model_from_html, table_model_from_node
from md2blocks.renderers.base import BaseRenderer
from md2blocks.utils.escape import escape_mrkdwn
from md2blocks.utils.security import is_valid_url
from md2blocks.utils.validation import validate_block_count, validate_recursion_depth

logger = logging.getLogger(__name__)

_HTML_TABLE = re.compile(r"<table[\s>/]", re.IGNORECASE)
_HTML_IMG = re.compile(r"<img[\s>/]", re.IGNORECASE)


def _as_elements(rendered: str | list[dict[str, Any]]) -> list[dict[str, Any]]:
    return rendered if isinstance(rendered, list) else []


def _join_rich_parts(parts: Sequence[list[dict[str, Any]]]) -> list[dict[str, Any]]:
    """Concatenate non-empty element lists, separated by newline text elements."""
    elements: list[dict[str, Any]] = []
    for part in parts:
        if not part:
            continue
        if elements:
            elements.append({"type": "text", "text": "\n"})
        elements.extend(part)
    return elements


class BlockKitRenderer(NodeVisitor, BaseRenderer):
    """Render AST to a list of message blocks.

    A renderer holds per-call accumulation state, so one instance should not
    be shared between threads. :func:`md2blocks.to_blocks` creates a fresh
    renderer for every call.

    Parameters
    ----------
    options : BlockKitOptions or None, default = None
        Rendering options

    Examples
    --------
        >>> from md2blocks.parsers.markdown import markdown_to_ast
        >>> renderer = BlockKitRenderer()
        >>> renderer.render_to_dicts(markdown_to_ast("a **b** _c_"))
        [{'type': 'section', 'text': {'type': 'mrkdwn', 'text': 'a *b* _c_'}}]

    """

    def __init__(self, options: BlockKitOptions | None = None):
        """Initialize the renderer with options."""
        BaseRenderer._validate_options_type(options, BlockKitOptions, "blocks")
        options = options or BlockKitOptions()
        BaseRenderer.__init__(self, options)
        self.options: BlockKitOptions = options

        self._mrkdwn = InlineRenderer("mrkdwn", options.max_recursion_depth)
        self._plain = InlineRenderer("plain_text", options.max_recursion_depth)
        self._rich = InlineRenderer("rich_text", options.max_recursion_depth)

        self._blocks: list[Block] = []
        self._buffer: list[str] = []

    def render_blocks(self, doc: Document) -> list[Block]:
        """Render a document to blocks.

        Parameters
        ----------
        doc : Document
            AST document

        Returns
        -------
        list of Block
            Output blocks in document order

        Raises
        ------
        ValidationError
            If ``doc`` is not a Document
        BlockLimitError
            If more than ``options.max_blocks`` blocks would be emitted

        """
        if not isinstance(doc, Document):
            raise ValidationError(
                f"Expected a Document, received {type(doc).__name__}",
                parameter_name="doc",
                parameter_value=type(doc),
            )
        return self.assemble(doc.children)

    def assemble(self, nodes: Sequence[Node]) -> list[Block]:
        """Turn a sequence of top-level nodes into blocks.

        Parameters
        ----------
        nodes : sequence of Node
            Top-level document nodes

        Returns
        -------
        list of Block
            Output blocks in document order

        Raises
        ------
        ParseError
            If an entry is not an AST node or cannot appear at the top level
        BlockLimitError
            If more than ``options.max_blocks`` blocks would be emitted
        RecursionLimitError
            If nesting exceeds ``options.max_recursion_depth``

        """
        self._blocks = []
        self._buffer = []

        for node in nodes:
            if not isinstance(node, Node):
                raise ParseError(f"Expected an AST node, received {type(node).__name__}")
            node.accept(self)

        self._flush()

        blocks = self._blocks
        self._blocks = []
        logger.debug(f"Assembled {len(blocks)} blocks from {len(nodes)} top-level nodes")
        return blocks

    # Accumulation

    def _emit(self, block: Block) -> None:
        self._blocks.append(block)
        validate_block_count(len(self._blocks), self.options.max_blocks)

    def _accumulate(self, text: str) -> None:
        """Append a line of mrkdwn to the open section."""
        if not text.strip():
            return

        if self._buffer:
            pending = sum(len(part) + 1 for part in self._buffer) - 1
            if pending + 1 + len(text) > MAX_SECTION_TEXT_LENGTH:
                self._flush()

        self._buffer.append(text)

    def _flush(self) -> None:
        """Close the open section, if any."""
        if self._buffer:
            self._emit(section("\n".join(self._buffer)))
            self._buffer = []

    # Helpers

    def _image_block(self, url: str, alt_text: str, title: str | None) -> ImageBlock | None:
        if not is_valid_url(url):
            logger.debug(f"Skipping image with invalid URL: {url[:50]!r}")
            return None
        return image(url, alt_text, title or None)

    def _inline_image(self, node: Node) -> tuple[bool, ImageBlock | None]:
        """Classify an inline node as an image and build its block."""
        if isinstance(node, Image):
            return True, self._image_block(node.url, node.alt_text, node.title)
        if isinstance(node, HTMLInline) and _HTML_IMG.search(node.content):
            record = parse_html_image(node.content)
            if record is None:
                return False, None
            return True, self._image_block(record.url, record.alt_text, record.title)
        return False, None

    def _fence(self, code: str) -> str:
        body = escape_mrkdwn(code.rstrip("\n"))
        return f"{MRKDWN_CODE_FENCE}\n{body}\n{MRKDWN_CODE_FENCE}"

    def _render_mrkdwn_block(self, node: Node, depth: int) -> str:
        """Render a block node nested inside a quote or list item to mrkdwn."""
        if isinstance(node, Paragraph):
            return str(self._mrkdwn.render(node.content, depth))
        elif isinstance(node, Heading):
            return str(self._mrkdwn.render([Strong(content=node.content)], depth))
        elif isinstance(node, CodeBlock):
            return self._fence(node.content)
        elif isinstance(node, List):
            return self._render_mrkdwn_list(node, depth + 1, 0)
        elif isinstance(node, BlockQuote):
            return self._render_quote(node, depth + 1)
        elif isinstance(node, ThematicBreak):
            return "---"
        elif isinstance(node, Table):
            model = table_model_from_node(node, self.options.max_recursion_depth)
            return "\n".join(" | ".join(escape_mrkdwn(cell.text) for cell in row) for row in model.rows)
        elif isinstance(node, HTMLBlock):
            return escape_mrkdwn(node.content.strip())
        elif isinstance(node, (Text, Strong, Emphasis, Strikethrough, Code, Link, Image, LineBreak, HTMLInline)):
            return str(self._mrkdwn.render([node], depth))

        raise ParseError(f"Unexpected nested node: {type(node).__name__}", token_type=type(node).__name__)

    def _render_quote(self, node: BlockQuote, depth: int) -> str:
        """Render a block quote, prefixing every line with one quote marker."""
        validate_recursion_depth(depth, self.options.max_recursion_depth)

        parts = [self._render_mrkdwn_block(child, depth) for child in node.children]
        text = "\n".join(part for part in parts if part)
        if not text:
            return ""

        return "\n".join(
            f"{MRKDWN_QUOTE_PREFIX}{line}" if line else MRKDWN_QUOTE_PREFIX.rstrip() for line in text.split("\n")
        )

    def _item_prefix(self, node: List, item: ListItem, index: int) -> str:
        if item.checked is not None:
            return self.options.lists.checkbox_prefix(item.checked)
        if node.ordered:
            return f"{node.start + index}. "
        return f"{self.options.lists.bullet} "

    def _render_mrkdwn_list(self, node: List, depth: int, level: int) -> str:
        """Render a list as prefixed lines, nested lists indented one level deeper."""
        validate_recursion_depth(depth, self.options.max_recursion_depth)

        indent = self.options.lists.indent * level
        lines: list[str] = []

        for index, item in enumerate(node.items):
            body_parts: list[str] = []
            nested: list[str] = []
            for child in item.children:
                if isinstance(child, List):
                    nested.append(self._render_mrkdwn_list(child, depth + 1, level + 1))
                else:
                    body_parts.append(self._render_mrkdwn_block(child, depth))

            body = "\n".join(part for part in body_parts if part)
            first, *rest = body.split("\n")
            lines.append(f"{indent}{self._item_prefix(node, item, index)}{first}")
            lines.extend(f"{indent}{self.options.lists.indent}{line}" for line in rest)
            lines.extend(text for text in nested if text)

        return "\n".join(lines)

    def _render_rich_block(self, node: Node, depth: int) -> list[dict[str, Any]]:
        """Render a block node nested inside a rich-text list item to rich-text elements.

        Styling is carried by ``style`` flags, never by mrkdwn markers, and
        text is not entity-escaped.
        """
        if isinstance(node, Paragraph):
            return _as_elements(self._rich.render(node.content, depth))
        elif isinstance(node, Heading):
            return _as_elements(self._rich.render([Strong(content=node.content)], depth))
        elif isinstance(node, CodeBlock):
            code = node.content.rstrip("\n")
            return [{"type": "text", "text": code, "style": {"code": True}}] if code else []
        elif isinstance(node, BlockQuote):
            validate_recursion_depth(depth + 1, self.options.max_recursion_depth)
            return _join_rich_parts([self._render_rich_block(child, depth + 1) for child in node.children])
        elif isinstance(node, List):
            validate_recursion_depth(depth + 1, self.options.max_recursion_depth)
            lines = []
            for index, item in enumerate(node.items):
                body = _join_rich_parts([self._render_rich_block(child, depth + 1) for child in item.children])
                lines.append([{"type": "text", "text": self._item_prefix(node, item, index)}] + body)
            return _join_rich_parts(lines)
        elif isinstance(node, ThematicBreak):
            return [{"type": "text", "text": "---"}]
        elif isinstance(node, Table):
            model = table_model_from_node(node, self.options.max_recursion_depth)
            text = "\n".join(" | ".join(cell.text for cell in row) for row in model.rows)
            return [{"type": "text", "text": text}] if text else []
        elif isinstance(node, HTMLBlock):
            text = node.content.strip()
            return [{"type": "text", "text": text}] if text else []
        elif isinstance(node, (Text, Strong, Emphasis, Strikethrough, Code, Link, Image, LineBreak, HTMLInline)):
            return _as_elements(self._rich.render([node], depth))

        raise ParseError(f"Unexpected nested node: {type(node).__name__}", token_type=type(node).__name__)

    def _rich_item_section(self, item: ListItem, depth: int) -> dict[str, Any]:
        elements: list[dict[str, Any]] = []
        if item.checked is not None:
            elements.append({"type": "text", "text": self.options.lists.checkbox_prefix(item.checked)})

        parts = [self._render_rich_block(child, depth) for child in item.children if not isinstance(child, List)]
        elements.extend(_join_rich_parts(parts))

        if not elements:
            elements.append({"type": "text", "text": " "})
        return {"type": "rich_text_section", "elements": elements}

    def _render_rich_list(self, node: List, depth: int, indent: int) -> list[dict[str, Any]]:
        """Render a list as rich_text_list elements.

        Nested lists are emitted as separate list elements with ``indent``
        one higher; an outer list that continues after a nested one carries
        an ``offset`` so ordered numbering resumes where it left off.
        """
        validate_recursion_depth(depth, self.options.max_recursion_depth)

        style = "ordered" if node.ordered else "bullet"
        # The platform numbers from offset + 1 and rejects negative offsets
        base_offset = max(node.start - 1, 0) if node.ordered else 0

        elements: list[dict[str, Any]] = []
        pending: list[dict[str, Any]] = []
        run_offset = base_offset

        for index, item in enumerate(node.items):
            pending.append(self._rich_item_section(item, depth))
            for child in item.children:
                if not isinstance(child, List):
                    continue
                if pending:
                    offset = run_offset if node.ordered else 0
                    elements.append(rich_text_list_element(pending, style, indent, offset))
                    pending = []
                elements.extend(self._render_rich_list(child, depth + 1, indent + 1))
                run_offset = base_offset + index + 1

        if pending:
            elements.append(rich_text_list_element(pending, style, indent, run_offset if node.ordered else 0))

        return elements

    # Visitor methods: block nodes

    def visit_document(self, node: Document) -> None:
        """Reject a document nested inside another document."""
        raise ParseError("Document nodes cannot be nested", token_type="Document")

    def visit_heading(self, node: Heading) -> None:
        """Emit a header, or a bold section when the text is too long for one."""
        self._flush()

        plain = str(self._plain.render(node.content, 0)).strip()
        if not plain:
            return

        if len(plain) > MAX_HEADER_TEXT_LENGTH and self.options.header_fallback:
            logger.debug("Heading exceeds header ceiling; rendering as bold section")
            self._emit(section(str(self._mrkdwn.render([Strong(content=node.content)], 0))))
        else:
            self._emit(header(plain))

    def visit_paragraph(self, node: Paragraph) -> None:
        """Accumulate paragraph text, splitting around direct-child images."""
        segment: list[Node] = []

        for child in node.content:
            is_image, block = self._inline_image(child)
            if not is_image:
                segment.append(child)
                continue

            if segment:
                self._accumulate(str(self._mrkdwn.render(segment, 0)).strip())
                segment = []
            if block is not None:
                self._flush()
                self._emit(block)

        if segment:
            self._accumulate(str(self._mrkdwn.render(segment, 0)).strip())

    def visit_code_block(self, node: CodeBlock) -> None:
        """Emit a fenced section or a rich-text preformatted block."""
        self._flush()
        if self.options.code_blocks == "rich_text":
            self._emit(rich_text_code(node.content.rstrip("\n")))
        else:
            self._emit(section(self._fence(node.content)))

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Emit a block quote as one section of quote-prefixed lines."""
        self._flush()
        text = self._render_quote(node, 1)
        if text:
            self._emit(section(text))

    def visit_list(self, node: List) -> None:
        """Emit a list as a section of prefixed lines or a rich-text list block."""
        self._flush()
        if not node.items:
            return

        if self.options.lists.mode == "rich_text":
            self._emit(RichTextBlock(elements=self._render_rich_list(node, 1, 0)))
        else:
            text = self._render_mrkdwn_list(node, 1, 0)
            if text.strip():
                self._emit(section(text))

    def visit_list_item(self, node: ListItem) -> None:
        """Reject a list item outside a list."""
        raise ParseError("List items can only appear inside a list", token_type="ListItem")

    def visit_table(self, node: Table) -> None:
        """Emit a native table block."""
        self._flush()
        model = table_model_from_node(node, self.options.max_recursion_depth)
        if not model.rows:
            logger.debug("Skipping table with no rows")
            return
        self._emit(build_table(model, self.options.max_recursion_depth))

    def visit_table_row(self, node: TableRow) -> None:
        """Reject a table row outside a table."""
        raise ParseError("Table rows can only appear inside a table", token_type="TableRow")

    def visit_table_cell(self, node: TableCell) -> None:
        """Reject a table cell outside a table."""
        raise ParseError("Table cells can only appear inside a table", token_type="TableCell")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Emit a divider."""
        self._flush()
        self._emit(divider())

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Emit a table or image block for ``<table>``/``<img>`` fragments; ignore anything else."""
        content = node.content.strip()

        if _HTML_TABLE.search(content):
            self._flush()
            record = parse_html_table(content)
            if record is None:
                logger.warning("Skipping HTML table that could not be decomposed")
                return
            self._emit(build_table(table_model_from_html(record), self.options.max_recursion_depth))

        elif _HTML_IMG.search(content):
            self._flush()
            record = parse_html_image(content)
            if record is None:
                logger.debug("Skipping <img> fragment without a src")
                return
            block = self._image_block(record.url, record.alt_text, record.title)
            if block is not None:
                self._emit(block)

        else:
            logger.debug(f"Ignoring HTML fragment: {content[:50]!r}")

    # Visitor methods: inline nodes at the top level

    def _accumulate_inline(self, node: Node) -> None:
        self._accumulate(str(self._mrkdwn.render([node], 0)).strip())

    def visit_text(self, node: Text) -> None:
        """Accumulate bare text."""
        self._accumulate_inline(node)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Accumulate bare emphasis."""
        self._accumulate_inline(node)

    def visit_strong(self, node: Strong) -> None:
        """Accumulate bare strong text."""
        self._accumulate_inline(node)

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Accumulate bare strikethrough text."""
        self._accumulate_inline(node)

    def visit_code(self, node: Code) -> None:
        """Accumulate a bare code span."""
        self._accumulate_inline(node)

    def visit_link(self, node: Link) -> None:
        """Accumulate a bare link."""
        self._accumulate_inline(node)

    def visit_image(self, node: Image) -> None:
        """Emit a bare image as an image block."""
        self._flush()
        block = self._image_block(node.url, node.alt_text, node.title)
        if block is not None:
            self._emit(block)

    def visit_line_break(self, node: LineBreak) -> None:
        """Ignore a bare line break; accumulated lines are already newline-separated."""
        pass

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Accumulate bare inline HTML, or emit it as an image block for ``<img>``."""
        is_image, block = self._inline_image(node)
        if not is_image:
            self._accumulate_inline(node)
        elif block is not None:
            self._flush()
            self._emit(block)
