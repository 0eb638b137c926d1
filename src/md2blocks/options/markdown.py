#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

This module defines the options that control which GFM extensions the
Markdown tokenizer enables.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2blocks.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    parse_tables : bool, default True
        Parse GFM pipe tables into Table nodes
    parse_strikethrough : bool, default True
        Parse ``~~text~~`` into Strikethrough nodes
    parse_task_lists : bool, default True
        Parse ``- [ ]`` / ``- [x]`` list items into checkbox items

    Examples
    --------
        >>> options = MarkdownParserOptions(parse_tables=False)
        >>> doc = markdown_to_ast("| a |\\n|---|\\n| b |", options)

    """

    parse_tables: bool = field(
        default=True,
        metadata={"help": "Parse GFM tables", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=True,
        metadata={"help": "Parse ~~strikethrough~~ syntax", "importance": "core"},
    )
    parse_task_lists: bool = field(
        default=True,
        metadata={"help": "Parse - [ ] task list checkboxes", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
