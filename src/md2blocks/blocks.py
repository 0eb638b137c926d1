#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/blocks.py
"""Output block types and their validating builders.

Every block the engine emits is one of the frozen dataclasses below. Blocks
are constructed through the builder functions (``section``, ``header``,
``image`` and so on), which check argument types, enforce the platform's
structural ceilings and truncate text fields with
:func:`md2blocks.utils.text.safe_truncate`. ``Block.to_dict()`` produces the
exact JSON-ready shape the platform accepts.

Examples
--------
    >>> section("Hello *world*").to_dict()
    {'type': 'section', 'text': {'type': 'mrkdwn', 'text': 'Hello *world*'}}
    >>> divider().to_dict()
    {'type': 'divider'}

"""

from __future__ import annotations

import copy
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Sequence

from md2blocks.constants import (
    MAX_COLUMN_SETTINGS,
    MAX_HEADER_TEXT_LENGTH,
    MAX_IMAGE_ALT_TEXT_LENGTH,
    MAX_IMAGE_TITLE_LENGTH,
    MAX_SECTION_TEXT_LENGTH,
    MAX_TABLE_CELLS_PER_ROW,
    MAX_TABLE_ROWS,
    MAX_VIDEO_AUTHOR_NAME_LENGTH,
    MAX_VIDEO_DESCRIPTION_LENGTH,
    MAX_VIDEO_TITLE_LENGTH,
    VALID_ALIGNMENTS,
    RichTextListStyle,
)
from md2blocks.exceptions import SecurityError, ValidationError
from md2blocks.utils.security import is_absolute_url, is_url_scheme_dangerous, is_valid_url
from md2blocks.utils.text import safe_truncate

logger = logging.getLogger(__name__)


def _plain_text(text: str, emoji: bool = False) -> dict[str, Any]:
    obj: dict[str, Any] = {"type": "plain_text", "text": text}
    if emoji:
        obj["emoji"] = True
    return obj


@dataclass(frozen=True)
class Block(ABC):
    """Base class for all output blocks."""

    block_type: ClassVar[str] = ""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the block as a JSON-ready dictionary."""
        raise NotImplementedError


@dataclass(frozen=True)
class SectionBlock(Block):
    """Section block holding mrkdwn text."""

    block_type: ClassVar[str] = "section"

    text: str

    def to_dict(self) -> dict[str, Any]:
        """Return the block as a JSON-ready dictionary."""
        return {"type": self.block_type, "text": {"type": "mrkdwn", "text": self.text}}


@dataclass(frozen=True)
class HeaderBlock(Block):
    """Header block holding plain text."""

    block_type: ClassVar[str] = "header"

    text: str

    def to_dict(self) -> dict[str, Any]:
        """Return the block as a JSON-ready dictionary."""
        return {"type": self.block_type, "text": _plain_text(self.text)}


@dataclass(frozen=True)
class DividerBlock(Block):
    """Horizontal divider."""

    block_type: ClassVar[str] = "divider"

    def to_dict(self) -> dict[str, Any]:
        """Return the block as a JSON-ready dictionary."""
        return {"type": self.block_type}


@dataclass(frozen=True)
class ImageBlock(Block):
    """Image block.

    Parameters
    ----------
    image_url : str
        Image source
    alt_text : str
        Alternative text
    title : str or None
        Optional plain-text title

    """

    block_type: ClassVar[str] = "image"

    image_url: str
    alt_text: str
    title: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the block as a JSON-ready dictionary."""
        result: dict[str, Any] = {"type": self.block_type, "image_url": self.image_url, "alt_text": self.alt_text}
        if self.title:
            result["title"] = _plain_text(self.title)
        return result


@dataclass(frozen=True)
class TableBlock(Block):
    """Native table block.

    Parameters
    ----------
    rows : list of list of dict
        Cells as ``{"type": "raw_text", "text": ...}`` or
        ``{"type": "rich_text", "elements": [...]}`` dictionaries
    column_settings : list of dict or None
        Per-column settings, omitted from the output when None

    """

    block_type: ClassVar[str] = "table"

    rows: list[list[dict[str, Any]]] = field(default_factory=list)
    column_settings: Optional[list[dict[str, Any]]] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the block as a JSON-ready dictionary."""
        result: dict[str, Any] = {"type": self.block_type, "rows": copy.deepcopy(self.rows)}
        if self.column_settings is not None:
            result["column_settings"] = copy.deepcopy(self.column_settings)
        return result


@dataclass(frozen=True)
class RichTextBlock(Block):
    """Rich-text container holding list, section, preformatted or quote elements."""

    block_type: ClassVar[str] = "rich_text"

    elements: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the block as a JSON-ready dictionary."""
        return {"type": self.block_type, "elements": copy.deepcopy(self.elements)}


@dataclass(frozen=True)
class VideoBlock(Block):
    """Embedded video block."""

    block_type: ClassVar[str] = "video"

    alt_text: str
    title: str
    thumbnail_url: str
    video_url: str
    author_name: Optional[str] = None
    description: Optional[str] = None
    provider_icon_url: Optional[str] = None
    provider_name: Optional[str] = None
    title_url: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the block as a JSON-ready dictionary."""
        result: dict[str, Any] = {
            "type": self.block_type,
            "alt_text": self.alt_text,
            "title": _plain_text(self.title, emoji=True),
            "thumbnail_url": self.thumbnail_url,
            "video_url": self.video_url,
        }
        if self.author_name:
            result["author_name"] = self.author_name
        if self.description:
            result["description"] = _plain_text(self.description, emoji=True)
        if self.provider_icon_url:
            result["provider_icon_url"] = self.provider_icon_url
        if self.provider_name:
            result["provider_name"] = self.provider_name
        if self.title_url:
            result["title_url"] = self.title_url
        return result


@dataclass(frozen=True)
class FileBlock(Block):
    """Remote file block."""

    block_type: ClassVar[str] = "file"

    external_id: str

    def to_dict(self) -> dict[str, Any]:
        """Return the block as a JSON-ready dictionary."""
        return {"type": self.block_type, "external_id": self.external_id, "source": "remote"}


def _require_string(value: Any, what: str) -> None:
    if not isinstance(value, str):
        raise ValidationError(
            f"{what} must be a string, received {type(value).__name__}",
            parameter_value=type(value),
        )


def _require_non_empty_string(value: Any, what: str) -> None:
    if not isinstance(value, str) or not value:
        raise ValidationError(f"{what} must be a non-empty string", parameter_value=value)


def _check_url(url: str, what: str) -> None:
    """Reject dangerous schemes and malformed absolute URLs.

    Relative paths and strings that do not look like URLs at all pass
    through unchanged.
    """
    if is_url_scheme_dangerous(url):
        raise SecurityError(f"{what} uses a disallowed scheme: {url[:50]}")
    if is_absolute_url(url) and not is_valid_url(url):
        raise ValidationError(f"Invalid {what}: {url}", parameter_value=url)


def section(text: str) -> SectionBlock:
    """Build a section block, truncating text to 3000 characters.

    Raises
    ------
    ValidationError
        If ``text`` is not a string

    """
    _require_string(text, "Section text")
    return SectionBlock(text=safe_truncate(text, MAX_SECTION_TEXT_LENGTH))


def header(text: str) -> HeaderBlock:
    """Build a header block, truncating text to 150 characters.

    Raises
    ------
    ValidationError
        If ``text`` is not a string

    """
    _require_string(text, "Header text")
    return HeaderBlock(text=safe_truncate(text, MAX_HEADER_TEXT_LENGTH))


def divider() -> DividerBlock:
    """Build a divider block."""
    return DividerBlock()


def image(url: str, alt_text: str, title: str | None = None) -> ImageBlock:
    """Build an image block.

    Parameters
    ----------
    url : str
        Image source. Absolute ``http``/``https``/``data:`` URLs must pass
        URL validation; relative paths are accepted unchanged.
    alt_text : str
        Alternative text, truncated to 2000 characters
    title : str, optional
        Title, truncated to 2000 characters

    Returns
    -------
    ImageBlock

    Raises
    ------
    ValidationError
        If the URL is empty or a malformed absolute URL, or ``alt_text`` is
        not a string
    SecurityError
        If the URL uses a dangerous scheme such as ``javascript:``

    """
    _require_non_empty_string(url, "Image URL")
    _check_url(url, "image URL")
    _require_string(alt_text, "Image alt text")
    if title is not None:
        _require_string(title, "Image title")

    return ImageBlock(
        image_url=url,
        alt_text=safe_truncate(alt_text, MAX_IMAGE_ALT_TEXT_LENGTH),
        title=safe_truncate(title, MAX_IMAGE_TITLE_LENGTH) if title else None,
    )


def video(
    alt_text: str,
    title: str,
    thumbnail_url: str,
    video_url: str,
    author_name: str | None = None,
    description: str | None = None,
    provider_icon_url: str | None = None,
    provider_name: str | None = None,
    title_url: str | None = None,
) -> VideoBlock:
    """Build a video block.

    Parameters
    ----------
    alt_text : str
        Alternative text, truncated to 2000 characters
    title : str
        Title, truncated to 200 characters
    thumbnail_url : str
        Thumbnail image URL
    video_url : str
        Embeddable video URL
    author_name : str, optional
        Author, truncated to 50 characters
    description : str, optional
        Description, truncated to 200 characters
    provider_icon_url : str, optional
        Provider icon URL
    provider_name : str, optional
        Provider name
    title_url : str, optional
        URL the title links to

    Returns
    -------
    VideoBlock

    Raises
    ------
    ValidationError
        If a required field is empty or any URL is a malformed absolute URL
    SecurityError
        If any URL uses a dangerous scheme

    """
    _require_non_empty_string(alt_text, "Video alt text")
    _require_non_empty_string(title, "Video title")
    _require_non_empty_string(thumbnail_url, "Video thumbnail URL")
    _require_non_empty_string(video_url, "Video URL")

    _check_url(thumbnail_url, "thumbnail URL")
    _check_url(video_url, "video URL")
    if title_url:
        _check_url(title_url, "title URL")
    if provider_icon_url:
        _check_url(provider_icon_url, "provider icon URL")

    return VideoBlock(
        alt_text=safe_truncate(alt_text, MAX_IMAGE_ALT_TEXT_LENGTH),
        title=safe_truncate(title, MAX_VIDEO_TITLE_LENGTH),
        thumbnail_url=thumbnail_url,
        video_url=video_url,
        author_name=safe_truncate(author_name, MAX_VIDEO_AUTHOR_NAME_LENGTH) if author_name else None,
        description=safe_truncate(description, MAX_VIDEO_DESCRIPTION_LENGTH) if description else None,
        provider_icon_url=provider_icon_url or None,
        provider_name=provider_name or None,
        title_url=title_url or None,
    )


def file(external_id: str) -> FileBlock:
    """Build a remote file block.

    Raises
    ------
    ValidationError
        If ``external_id`` is empty or not a string

    """
    _require_non_empty_string(external_id, "File external_id")
    return FileBlock(external_id=external_id)


def rich_text_list(
    items: Sequence[dict[str, Any]], style: RichTextListStyle = "bullet", indent: int = 0, offset: int = 0
) -> RichTextBlock:
    """Build a rich-text block holding one list.

    Parameters
    ----------
    items : sequence of dict
        ``rich_text_section`` elements, one per list item
    style : {"bullet", "ordered"}, default "bullet"
        List style
    indent : int, default 0
        Nesting level
    offset : int, default 0
        Number of items before the first one (``start - 1`` for ordered lists)

    Raises
    ------
    ValidationError
        If ``items`` is empty or ``style`` is unknown

    """
    return RichTextBlock(elements=[rich_text_list_element(items, style, indent, offset)])


def rich_text_list_element(
    items: Sequence[dict[str, Any]], style: RichTextListStyle = "bullet", indent: int = 0, offset: int = 0
) -> dict[str, Any]:
    """Build one ``rich_text_list`` element; see :func:`rich_text_list`."""
    if not isinstance(items, (list, tuple)) or len(items) == 0:
        raise ValidationError("Rich text list must have at least one item", parameter_name="items")
    if style not in ("bullet", "ordered"):
        raise ValidationError(f"Rich text list style must be 'bullet' or 'ordered', got {style!r}")
    if offset < 0:
        raise ValidationError(f"Rich text list offset must be non-negative, got {offset}", parameter_name="offset")

    element: dict[str, Any] = {"type": "rich_text_list", "style": style, "indent": indent, "elements": list(items)}
    if offset:
        element["offset"] = offset
    return element


def rich_text_code(code: str) -> RichTextBlock:
    """Build a rich-text block holding one preformatted element.

    Raises
    ------
    ValidationError
        If ``code`` is not a string

    """
    _require_string(code, "Code text")
    return RichTextBlock(
        elements=[{"type": "rich_text_preformatted", "elements": [{"type": "text", "text": code}]}],
    )


def rich_text_quote(elements: Sequence[dict[str, Any]]) -> RichTextBlock:
    """Build a rich-text block holding one quote element.

    Raises
    ------
    ValidationError
        If ``elements`` is empty

    """
    if not isinstance(elements, (list, tuple)) or len(elements) == 0:
        raise ValidationError("Rich text quote must have at least one element", parameter_name="elements")
    return RichTextBlock(elements=[{"type": "rich_text_quote", "elements": list(elements)}])


def _validate_cell(cell: Any, row_index: int, col_index: int) -> None:
    where = f"Table cell at row {row_index}, column {col_index}"
    if not isinstance(cell, dict):
        raise ValidationError(f"{where} must be an object")

    cell_type = cell.get("type")
    if cell_type not in ("raw_text", "rich_text"):
        raise ValidationError(f"{where} must have type 'raw_text' or 'rich_text'")
    if cell_type == "raw_text" and not isinstance(cell.get("text"), str):
        raise ValidationError(f"{where} with type 'raw_text' must have a text property")
    if cell_type == "rich_text":
        elements = cell.get("elements")
        if not isinstance(elements, list) or not elements:
            raise ValidationError(f"{where} with type 'rich_text' must have an elements array")


def table(
    rows: Sequence[Sequence[dict[str, Any]]], column_settings: Sequence[dict[str, Any]] | None = None
) -> TableBlock:
    """Build a native table block.

    Parameters
    ----------
    rows : sequence of sequence of dict
        Table rows; each cell is a ``raw_text`` or ``rich_text`` dictionary
    column_settings : sequence of dict, optional
        Per-column settings such as ``{"align": "center"}``

    Returns
    -------
    TableBlock

    Raises
    ------
    ValidationError
        If there are no rows, more than 100 rows, more than 20 cells in a row,
        a malformed cell, more than 20 column settings, or an unknown alignment

    """
    if not isinstance(rows, (list, tuple)):
        raise ValidationError("Table rows must be an array", parameter_name="rows")
    if len(rows) == 0:
        raise ValidationError("Table must have at least one row", parameter_name="rows")
    if len(rows) > MAX_TABLE_ROWS:
        raise ValidationError(
            f"Table cannot have more than {MAX_TABLE_ROWS} rows", parameter_name="rows", parameter_value=len(rows)
        )

    for i, row in enumerate(rows):
        if not isinstance(row, (list, tuple)):
            raise ValidationError(f"Table row {i} must be an array")
        if len(row) > MAX_TABLE_CELLS_PER_ROW:
            raise ValidationError(f"Table row {i} cannot have more than {MAX_TABLE_CELLS_PER_ROW} cells")
        for j, cell in enumerate(row):
            _validate_cell(cell, i, j)

    settings = None
    if column_settings is not None:
        if not isinstance(column_settings, (list, tuple)):
            raise ValidationError("Column settings must be an array", parameter_name="column_settings")
        if len(column_settings) > MAX_COLUMN_SETTINGS:
            raise ValidationError(f"Cannot have more than {MAX_COLUMN_SETTINGS} column settings")
        for setting in column_settings:
            if setting and setting.get("align") and setting["align"] not in VALID_ALIGNMENTS:
                raise ValidationError(
                    "Column alignment must be left, center, or right", parameter_value=setting["align"]
                )
        settings = [dict(setting or {}) for setting in column_settings]

    return TableBlock(rows=[[dict(cell) for cell in row] for row in rows], column_settings=settings)
