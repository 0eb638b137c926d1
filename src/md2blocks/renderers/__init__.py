#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers that turn the md2blocks AST into message blocks."""

from md2blocks.renderers._inline import InlineRenderer, InlineTarget
from md2blocks.renderers._tables import (
    TableModel,
    TableModelCell,
    build_table,
    column_settings_for,
    table_model_from_html,
    table_model_from_node,
)
from md2blocks.renderers.base import BaseRenderer
from md2blocks.renderers.blocks import BlockKitRenderer

__all__ = [
    "BaseRenderer",
    "BlockKitRenderer",
    "InlineRenderer",
    "InlineTarget",
    "TableModel",
    "TableModelCell",
    "build_table",
    "column_settings_for",
    "table_model_from_html",
    "table_model_from_node",
]
