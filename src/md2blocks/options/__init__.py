#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2blocks parsers and renderers."""

from md2blocks.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2blocks.options.blocks import BlockKitOptions, ListOptions, default_checkbox_prefix
from md2blocks.options.markdown import MarkdownParserOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "BlockKitOptions",
    "CloneFrozenMixin",
    "ListOptions",
    "MarkdownParserOptions",
    "default_checkbox_prefix",
]
