"""md2blocks - Convert Markdown into chat platform message blocks.

md2blocks parses GitHub-Flavoured Markdown with mistune, builds a small
document AST, and renders it into the block structures a chat platform's
message API accepts: sections of mrkdwn text, headers, dividers, images,
native tables and rich-text lists.

The platform imposes hard ceilings (3000 characters per section, 150 per
header, 50 blocks per message, 100 rows per table, and so on). Text fields
are truncated without splitting characters; structural ceilings raise
:class:`~md2blocks.exceptions.ValidationError` subclasses.

Examples
--------
Basic usage:

    >>> from md2blocks import to_block_dicts
    >>> to_block_dicts("a **b** _c_")
    [{'type': 'section', 'text': {'type': 'mrkdwn', 'text': 'a *b* _c_'}}]

Working with the AST directly:

    >>> from md2blocks import ast_to_blocks, to_ast
    >>> doc = to_ast("# Title\\n\\nBody")
    >>> blocks = ast_to_blocks(doc)

See Also
--------
md2blocks.blocks : Block types and validating builders
md2blocks.ast : AST node definitions

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from md2blocks.api import ast_to_blocks, to_ast, to_block_dicts, to_blocks
from md2blocks.blocks import Block
from md2blocks.exceptions import (
    BlockLimitError,
    DependencyError,
    InvalidOptionsError,
    Md2BlocksError,
    ParseError,
    RecursionLimitError,
    SecurityError,
    ValidationError,
)
from md2blocks.options import BlockKitOptions, ListOptions, MarkdownParserOptions

__all__ = [
    "Block",
    "BlockKitOptions",
    "BlockLimitError",
    "DependencyError",
    "InvalidOptionsError",
    "ListOptions",
    "MarkdownParserOptions",
    "Md2BlocksError",
    "ParseError",
    "RecursionLimitError",
    "SecurityError",
    "ValidationError",
    "__version__",
    "ast_to_blocks",
    "to_ast",
    "to_block_dicts",
    "to_blocks",
]
