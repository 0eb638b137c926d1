"""The major exported API functions for Markdown to message block conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/md2blocks/api.py
import logging
from typing import Any, Optional

from md2blocks.ast.nodes import Document
from md2blocks.blocks import Block
from md2blocks.exceptions import Md2BlocksError, ParseError
from md2blocks.options.blocks import BlockKitOptions
from md2blocks.options.markdown import MarkdownParserOptions
from md2blocks.parsers.markdown import MarkdownToAstConverter
from md2blocks.renderers.blocks import BlockKitRenderer
from md2blocks.utils.decorators import debug_timer

logger = logging.getLogger(__name__)


def to_ast(markdown: str, *, parser_options: Optional[MarkdownParserOptions] = None) -> Document:
    """Parse Markdown text into an AST Document.

    Parameters
    ----------
    markdown : str
        Markdown text, at most ``parser_options.max_input_length`` characters
    parser_options : MarkdownParserOptions, optional
        Tokenizer settings

    Returns
    -------
    Document
        AST Document node

    Raises
    ------
    ValidationError
        If the input is None, not a string, empty or too long
    ParseError
        If tokenizing fails
    DependencyError
        If mistune is not installed

    """
    parser = MarkdownToAstConverter(parser_options)

    try:
        with debug_timer(logger, "Parsing (markdown)"):
            return parser.parse(markdown)
    except Md2BlocksError:
        raise
    except Exception as e:
        raise ParseError(f"Markdown tokenizing failed: {e!r}", original_error=e) from e


def ast_to_blocks(doc: Document, options: Optional[BlockKitOptions] = None, **kwargs: Any) -> list[Block]:
    """Render an AST Document into message blocks.

    Parameters
    ----------
    doc : Document
        AST document, e.g. from :func:`to_ast`
    options : BlockKitOptions, optional
        Rendering options
    kwargs : Any
        Individual rendering options that override settings in ``options``

    Returns
    -------
    list of Block
        Output blocks in document order

    Raises
    ------
    BlockLimitError
        If more than ``options.max_blocks`` blocks would be emitted
    RecursionLimitError
        If nesting exceeds ``options.max_recursion_depth``

    """
    if kwargs:
        options = (options or BlockKitOptions()).create_updated(**kwargs)

    renderer = BlockKitRenderer(options)
    with debug_timer(logger, "Rendering (blocks)"):
        return renderer.render_blocks(doc)


def to_blocks(
    markdown: str,
    options: Optional[BlockKitOptions] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> list[Block]:
    """Convert Markdown text into message blocks.

    Parameters
    ----------
    markdown : str
        Markdown (GitHub-Flavoured) text
    options : BlockKitOptions, optional
        Rendering options
    parser_options : MarkdownParserOptions, optional
        Tokenizer settings
    kwargs : Any
        Individual rendering options that override settings in ``options``

    Returns
    -------
    list of Block
        Output blocks in document order

    Raises
    ------
    ValidationError
        If the input is None, not a string, empty or longer than 1,000,000
        characters, or a table exceeds its ceilings
    BlockLimitError
        If more than ``options.max_blocks`` blocks would be emitted
    RecursionLimitError
        If nesting exceeds ``options.max_recursion_depth``

    Examples
    --------
        >>> from md2blocks import to_blocks
        >>> [block.to_dict() for block in to_blocks("# hi")]
        [{'type': 'header', 'text': {'type': 'plain_text', 'text': 'hi'}}]

    With custom list options:

        >>> from md2blocks.options import BlockKitOptions, ListOptions
        >>> options = BlockKitOptions(lists=ListOptions(checkbox_prefix=lambda checked: "[x] " if checked else "[ ] "))
        >>> blocks = to_blocks("- [x] done", options)

    """
    doc = to_ast(markdown, parser_options=parser_options)
    return ast_to_blocks(doc, options, **kwargs)


def to_block_dicts(
    markdown: str,
    options: Optional[BlockKitOptions] = None,
    *,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> list[dict[str, Any]]:
    """Convert Markdown text into JSON-ready block dictionaries.

    Takes the same arguments as :func:`to_blocks`.
    """
    return [block.to_dict() for block in to_blocks(markdown, options, parser_options=parser_options, **kwargs)]
