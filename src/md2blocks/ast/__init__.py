#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The Markdown tokenizer adapter (:mod:`md2blocks.parsers.markdown`) produces
these nodes; the block renderer (:mod:`md2blocks.renderers.blocks`) consumes
them through the visitor pattern.

Examples
--------
    >>> from md2blocks.ast import Document, Heading, Paragraph, Text
    >>> from md2blocks.renderers.blocks import BlockKitRenderer
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> blocks = BlockKitRenderer().render_blocks(doc)

"""

from __future__ import annotations

from md2blocks.ast.nodes import (
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
from md2blocks.ast.visitors import NodeVisitor

__all__ = [
    "BLOCK_NODE_TYPES",
    "INLINE_NODE_TYPES",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "Strikethrough",
    "Strong",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
]
