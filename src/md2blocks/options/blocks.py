#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/options/blocks.py
"""Configuration options for rendering an AST into message blocks.

This module defines options for the block renderer, including the nested
list options that control bullets, indentation and checkbox prefixes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable

from md2blocks.constants import (
    DEFAULT_CHECKBOX_CHECKED,
    DEFAULT_CHECKBOX_UNCHECKED,
    DEFAULT_CODE_BLOCK_MODE,
    DEFAULT_HEADER_FALLBACK,
    DEFAULT_LIST_BULLET,
    DEFAULT_LIST_INDENT,
    DEFAULT_LIST_MODE,
    MAX_BLOCKS,
    MAX_RECURSION_DEPTH,
    CodeBlockRenderMode,
    ListRenderMode,
)
from md2blocks.options.base import BaseRendererOptions, CloneFrozenMixin


def default_checkbox_prefix(checked: bool) -> str:
    """Return the default checkbox glyph prefix for a task list item."""
    return DEFAULT_CHECKBOX_CHECKED if checked else DEFAULT_CHECKBOX_UNCHECKED


@dataclass(frozen=True)
class ListOptions(CloneFrozenMixin):
    """Options controlling how lists are rendered.

    Parameters
    ----------
    mode : {"mrkdwn", "rich_text"}, default "mrkdwn"
        ``"mrkdwn"`` renders a list as bullet/number-prefixed lines in a
        section block. ``"rich_text"`` renders a native rich-text list block.
    bullet : str, default "•"
        Glyph used for unordered items in mrkdwn mode
    indent : str, default four spaces
        Indentation added per nesting level in mrkdwn mode
    checkbox_prefix : callable, default default_checkbox_prefix
        Function mapping a task item's checked state to its line prefix

    """

    mode: ListRenderMode = field(
        default=DEFAULT_LIST_MODE,
        metadata={"help": "List rendering mode", "choices": ["mrkdwn", "rich_text"], "importance": "core"},
    )
    bullet: str = field(
        default=DEFAULT_LIST_BULLET,
        metadata={"help": "Bullet glyph for unordered list items", "type": str, "importance": "advanced"},
    )
    indent: str = field(
        default=DEFAULT_LIST_INDENT,
        metadata={"help": "Indentation per nesting level", "type": str, "importance": "advanced"},
    )
    checkbox_prefix: Callable[[bool], str] = field(
        default=default_checkbox_prefix,
        metadata={"help": "Function returning the prefix for a checked/unchecked task item", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate list options.

        Raises
        ------
        ValueError
            If the mode is unknown or the checkbox prefix is not callable.

        """
        if self.mode not in ("mrkdwn", "rich_text"):
            raise ValueError(f"Invalid list mode: {self.mode!r}. Must be 'mrkdwn' or 'rich_text'")
        if not callable(self.checkbox_prefix):
            raise ValueError("checkbox_prefix must be callable")


@dataclass(frozen=True)
class BlockKitOptions(BaseRendererOptions):
    """Configuration options for rendering an AST into message blocks.

    Parameters
    ----------
    max_blocks : int, default 50
        Maximum number of blocks one transform may emit
    max_recursion_depth : int, default 50
        Maximum nesting depth for inline, list and quote rendering
    lists : ListOptions, default ListOptions()
        List rendering options
    code_blocks : {"mrkdwn", "rich_text"}, default "mrkdwn"
        ``"mrkdwn"`` renders fenced code as a section with triple backticks;
        ``"rich_text"`` renders a rich-text preformatted block
    header_fallback : bool, default True
        When a heading's plain text is longer than the header ceiling, emit a
        section with bold mrkdwn instead of a truncated header

    Examples
    --------
        >>> options = BlockKitOptions(lists=ListOptions(mode="rich_text"))
        >>> blocks = BlockKitRenderer(options).render_blocks(doc)

    """

    max_blocks: int = field(
        default=MAX_BLOCKS,
        metadata={"help": "Maximum number of blocks per transform", "type": int, "importance": "core"},
    )
    max_recursion_depth: int = field(
        default=MAX_RECURSION_DEPTH,
        metadata={"help": "Maximum nesting depth while rendering", "type": int, "importance": "security"},
    )
    lists: ListOptions = field(
        default_factory=ListOptions,
        metadata={"help": "List rendering options", "importance": "core"},
    )
    code_blocks: CodeBlockRenderMode = field(
        default=DEFAULT_CODE_BLOCK_MODE,
        metadata={"help": "Code block rendering mode", "choices": ["mrkdwn", "rich_text"], "importance": "core"},
    )
    header_fallback: bool = field(
        default=DEFAULT_HEADER_FALLBACK,
        metadata={
            "help": "Render over-long headings as bold sections instead of truncated headers",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and modes.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.max_blocks <= 0:
            raise ValueError(f"max_blocks must be positive, got {self.max_blocks}")
        if self.max_recursion_depth <= 0:
            raise ValueError(f"max_recursion_depth must be positive, got {self.max_recursion_depth}")
        if self.code_blocks not in ("mrkdwn", "rich_text"):
            raise ValueError(f"Invalid code block mode: {self.code_blocks!r}. Must be 'mrkdwn' or 'rich_text'")
