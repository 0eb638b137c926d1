#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2blocks library.

This module centralizes the hard ceilings imposed by the target platform's
block schema along with the library's default configuration values.

Constants are organized by category:
1. Type Definitions - All Literal types and type aliases
2. Input and Assembly Limits - Input size, block count, recursion depth
3. Block Field Limits - Per-field text length ceilings
4. Table Limits - Row, cell and column-setting ceilings
5. URL Handling - Accepted and dangerous URL schemes
6. Rendering Defaults - mrkdwn markers, list glyphs
7. Dependencies - Third-party packages used by the parsers
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

Alignment = Literal["left", "center", "right"]
InlineTargetType = Literal["mrkdwn", "plain_text", "rich_text"]
ListRenderMode = Literal["mrkdwn", "rich_text"]
CodeBlockRenderMode = Literal["mrkdwn", "rich_text"]
RichTextListStyle = Literal["bullet", "ordered"]

# =============================================================================
# Input and Assembly Limits
# =============================================================================

MAX_INPUT_LENGTH = 1_000_000  # characters
MAX_BLOCKS = 50
MAX_RECURSION_DEPTH = 50

# =============================================================================
# Block Field Limits
# =============================================================================

MAX_SECTION_TEXT_LENGTH = 3000
MAX_HEADER_TEXT_LENGTH = 150
MAX_IMAGE_ALT_TEXT_LENGTH = 2000
MAX_IMAGE_TITLE_LENGTH = 2000
MAX_VIDEO_TITLE_LENGTH = 200
MAX_VIDEO_DESCRIPTION_LENGTH = 200
MAX_VIDEO_AUTHOR_NAME_LENGTH = 50

# =============================================================================
# Table Limits
# =============================================================================

MAX_TABLE_ROWS = 100
MAX_TABLE_CELLS_PER_ROW = 20
MAX_COLUMN_SETTINGS = 20

VALID_ALIGNMENTS = frozenset({"left", "center", "right"})

# =============================================================================
# URL Handling
# =============================================================================

ABSOLUTE_URL_PREFIXES = ("http://", "https://", "data:")
RELATIVE_URL_PREFIXES = ("/", ".")
IMAGE_DATA_URL_PREFIX = "data:image/"

# Characters permitted after the scheme of an absolute http(s) URL (RFC 3986 unreserved + reserved)
HTTP_URL_PATTERN = r"^https?://[a-zA-Z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+$"

DANGEROUS_SCHEMES = {
    "javascript:",
    "vbscript:",
    "data:text/html",
    "data:text/javascript",
    "data:application/javascript",
    "data:application/x-javascript",
}

# =============================================================================
# Rendering Defaults
# =============================================================================

MRKDWN_BOLD = "*"
MRKDWN_ITALIC = "_"
MRKDWN_STRIKE = "~"
MRKDWN_CODE = "`"
MRKDWN_CODE_FENCE = "```"
MRKDWN_QUOTE_PREFIX = "> "

DEFAULT_LIST_BULLET = "•"
DEFAULT_LIST_INDENT = "    "
DEFAULT_CHECKBOX_CHECKED = "☑ "
DEFAULT_CHECKBOX_UNCHECKED = "☐ "
DEFAULT_LIST_MODE: ListRenderMode = "mrkdwn"
DEFAULT_CODE_BLOCK_MODE: CodeBlockRenderMode = "mrkdwn"
DEFAULT_HEADER_FALLBACK = True

DEFAULT_HTML_PARSER = "html.parser"

# =============================================================================
# Dependencies
# =============================================================================

DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]
DEPS_HTML = [("beautifulsoup4", "bs4", ">=4.12.0")]
