#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/parsers/html.py
"""HTML fragment decomposition.

Raw HTML found in a Markdown document reaches the block renderer as an
opaque string. This module uses BeautifulSoup to decompose the two kinds of
fragment the renderer can turn into blocks, ``<table>`` and ``<img>``, into
small structural records. It never builds blocks itself.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional

from md2blocks.constants import DEFAULT_HTML_PARSER, DEPS_HTML, Alignment
from md2blocks.utils.decorators import requires_dependencies

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HtmlCellRecord:
    """One ``<td>``/``<th>`` cell.

    Parameters
    ----------
    text : str
        Whitespace-collapsed text of the cell and all of its descendants
    align : {"left", "center", "right"} or None
        Alignment from the ``align`` attribute or a ``text-align`` style

    """

    text: str
    align: Optional[Alignment] = None


@dataclass(frozen=True)
class HtmlTableRecord:
    """Rows of an HTML table, split into header and body rows.

    Parameters
    ----------
    head_rows : list of list of HtmlCellRecord
        Rows inside ``<thead>`` or leading rows made up entirely of ``<th>`` cells
    body_rows : list of list of HtmlCellRecord
        All other rows, in document order

    """

    head_rows: list[list[HtmlCellRecord]] = field(default_factory=list)
    body_rows: list[list[HtmlCellRecord]] = field(default_factory=list)

    @property
    def rows(self) -> list[list[HtmlCellRecord]]:
        """Header rows followed by body rows."""
        return self.head_rows + self.body_rows


@dataclass(frozen=True)
class HtmlImageRecord:
    """Source, alt text and title of an ``<img>`` element."""

    url: str
    alt_text: str = ""
    title: Optional[str] = None


def _get_alignment(cell: Any) -> Alignment | None:
    """Get table cell alignment.

    Parameters
    ----------
    cell : Any
        Table cell element

    Returns
    -------
    str or None
        Alignment ('left', 'center', 'right') or None

    """
    align = (cell.get("align") or "").strip().lower()
    if align == "left":
        return "left"
    elif align == "center":
        return "center"
    elif align == "right":
        return "right"

    style = (cell.get("style") or "").lower()
    if "text-align" in style:
        declaration = style.split("text-align", 1)[1]
        if "left" in declaration:
            return "left"
        elif "center" in declaration:
            return "center"
        elif "right" in declaration:
            return "right"

    return None


def _cell_text(cell: Any) -> str:
    """Flatten a cell's text, collapsing runs of whitespace."""
    return " ".join(cell.get_text(" ").split())


@requires_dependencies("html", DEPS_HTML)
def parse_html_table(fragment: str) -> HtmlTableRecord | None:
    """Decompose the first ``<table>`` in an HTML fragment.

    Parameters
    ----------
    fragment : str
        Raw HTML text

    Returns
    -------
    HtmlTableRecord or None
        The table's rows, or None when the fragment holds no table or the
        table holds no cells

    Examples
    --------
        >>> record = parse_html_table("<table><tr><th>A</th></tr><tr><td>1</td></tr></table>")
        >>> [[c.text for c in row] for row in record.rows]
        [['A'], ['1']]

    """
    from bs4 import BeautifulSoup

    soup = BeautifulSoup(fragment, DEFAULT_HTML_PARSER)
    table = soup.find("table")
    if table is None:
        logger.debug("HTML fragment contains no <table> element")
        return None

    head_rows: list[list[HtmlCellRecord]] = []
    body_rows: list[list[HtmlCellRecord]] = []

    for tr in table.find_all("tr"):
        # Rows of nested tables belong to the inner table
        if tr.find_parent("table") is not table:
            continue

        cell_tags = [cell for cell in tr.find_all(["th", "td"]) if cell.find_parent("tr") is tr]
        if not cell_tags:
            continue

        cells = [HtmlCellRecord(text=_cell_text(cell), align=_get_alignment(cell)) for cell in cell_tags]

        thead = tr.find_parent("thead")
        in_thead = thead is not None and thead.find_parent("table") is table
        all_th = all(cell.name == "th" for cell in cell_tags)
        # An all-<th> row only counts as a header before any body row
        if in_thead or (all_th and not body_rows):
            head_rows.append(cells)
        else:
            body_rows.append(cells)

    if not head_rows and not body_rows:
        logger.debug("HTML table has no cells")
        return None

    return HtmlTableRecord(head_rows=head_rows, body_rows=body_rows)


@requires_dependencies("html", DEPS_HTML)
def parse_html_image(fragment: str) -> HtmlImageRecord | None:
    """Extract the first ``<img>`` with a ``src`` from an HTML fragment.

    Parameters
    ----------
    fragment : str
        Raw HTML text

    Returns
    -------
    HtmlImageRecord or None
        The image's source, alt text and title, or None when there is none

    """
    from bs4 import BeautifulSoup

    soup = BeautifulSoup(fragment, DEFAULT_HTML_PARSER)
    for img in soup.find_all("img"):
        src = img.get("src")
        if src:
            title = img.get("title")
            return HtmlImageRecord(url=str(src).strip(), alt_text=str(img.get("alt") or ""), title=title)

    return None
