#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/_tables.py
"""Table block construction.

Markdown tables (``Table`` AST nodes) and HTML tables (``HtmlTableRecord``)
are first normalized into one :class:`TableModel`, then turned into a native
table block by :func:`build_table`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from md2blocks.ast import Node, Table
from md2blocks.blocks import TableBlock, table
from md2blocks.constants import MAX_RECURSION_DEPTH, Alignment
from md2blocks.parsers.html import HtmlTableRecord
from md2blocks.renderers._inline import InlineRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TableModelCell:
    """One table cell.

    Parameters
    ----------
    text : str
        Plain text of the cell
    content : list of Node or None
        Inline content when the cell came from Markdown; None for cells that
        only ever carry plain text (HTML tables)

    """

    text: str
    content: Optional[list[Node]] = None


@dataclass(frozen=True)
class TableModel:
    """Rows of cells plus one alignment per column (None when unspecified)."""

    rows: list[list[TableModelCell]] = field(default_factory=list)
    alignments: list[Optional[Alignment]] = field(default_factory=list)


def table_model_from_node(node: Table, max_depth: int = MAX_RECURSION_DEPTH) -> TableModel:
    """Normalize a Markdown table node; the header row becomes row 0."""
    plain = InlineRenderer("plain_text", max_depth)

    source_rows = ([node.header] if node.header is not None else []) + list(node.rows)
    rows = [
        [TableModelCell(text=str(plain.render(cell.content)), content=list(cell.content)) for cell in row.cells]
        for row in source_rows
    ]

    alignments: list[Optional[Alignment]] = list(node.alignments)
    if not alignments and node.header is not None:
        alignments = [cell.alignment for cell in node.header.cells]

    return TableModel(rows=rows, alignments=alignments)


def table_model_from_html(record: HtmlTableRecord) -> TableModel:
    """Normalize an HTML table record.

    Each column's alignment is the first explicit ``align`` found in that
    column, scanning rows top to bottom.
    """
    rows = [[TableModelCell(text=cell.text) for cell in row] for row in record.rows]

    column_count = max((len(row) for row in record.rows), default=0)
    alignments: list[Optional[Alignment]] = [None] * column_count
    for row in record.rows:
        for index, cell in enumerate(row):
            if alignments[index] is None and cell.align is not None:
                alignments[index] = cell.align

    return TableModel(rows=rows, alignments=alignments)


def column_settings_for(alignments: list[Optional[Alignment]]) -> list[dict[str, Any]] | None:
    """Derive column settings from per-column alignments.

    The first column always uses the platform default (left) and gets no
    entry. For the remaining columns, center and right are always emitted;
    left is emitted only after an earlier non-left setting; unspecified
    columns get an empty setting. Trailing empty settings are dropped.

    Parameters
    ----------
    alignments : list of {"left", "center", "right", None}
        One alignment per column

    Returns
    -------
    list of dict or None
        Column settings, or None when every column uses the default

    Examples
    --------
        >>> column_settings_for(["left", "center", "right"])
        [{'align': 'center'}, {'align': 'right'}]
        >>> column_settings_for([None, None]) is None
        True

    """
    settings: list[dict[str, Any]] = []
    overridden = False

    for align in alignments[1:]:
        if align in ("center", "right"):
            settings.append({"align": align})
            overridden = True
        elif align == "left" and overridden:
            settings.append({"align": "left"})
        else:
            settings.append({})

    while settings and not settings[-1]:
        settings.pop()

    return settings or None


def _build_cell(cell: TableModelCell, rich: InlineRenderer) -> dict[str, Any]:
    if cell.content is None or rich.is_plain(cell.content):
        return {"type": "raw_text", "text": cell.text}

    elements = rich.render(cell.content)
    if not elements:
        return {"type": "raw_text", "text": cell.text}

    return {"type": "rich_text", "elements": [{"type": "rich_text_section", "elements": elements}]}


def build_table(model: TableModel, max_depth: int = MAX_RECURSION_DEPTH) -> TableBlock:
    """Build a native table block from a table model.

    Cells whose content is plain text become ``raw_text`` cells; cells with
    any styling or a link become ``rich_text`` cells.

    Parameters
    ----------
    model : TableModel
        Normalized table
    max_depth : int, default 50
        Recursion ceiling for rendering cell content

    Returns
    -------
    TableBlock

    Raises
    ------
    ValidationError
        If the table exceeds the row, cell or column-setting ceilings

    """
    rich = InlineRenderer("rich_text", max_depth)
    rows = [[_build_cell(cell, rich) for cell in row] for row in model.rows]
    return table(rows, column_settings_for(model.alignments))
