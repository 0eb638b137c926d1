#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/_inline.py
"""Inline content rendering.

Inline nodes are first flattened into a list of styled runs, then the runs
are serialized for the requested target:

``"mrkdwn"``
    A formatted string with ``*bold*``, ``_italic_``, ``~strike~``,
    ```code``` markers and ``<url|label>`` links. Text is escaped for
    ``&``, ``<`` and ``>`` only.
``"plain_text"``
    The bare text with no markers and no escaping (header blocks).
``"rich_text"``
    A list of ``{"type": "text" | "link", ...}`` elements with ``style``
    flags, as used in rich-text sections, lists and table cells.

Nesting depth is passed explicitly through every recursive call and checked
against the recursion ceiling. A chain of directly nested, single-child style
nodes with distinct styles (``**_x_**``) counts as one level; applying a style
that is already active in the chain starts a new level.

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Union

from md2blocks.ast import (
    Code,
    Emphasis,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    Node,
    Strikethrough,
    Strong,
    Text,
)
from md2blocks.constants import (
    MAX_RECURSION_DEPTH,
    MRKDWN_BOLD,
    MRKDWN_CODE,
    MRKDWN_ITALIC,
    MRKDWN_STRIKE,
    InlineTargetType,
)
from md2blocks.exceptions import ParseError
from md2blocks.utils.escape import escape_mrkdwn
from md2blocks.utils.security import is_valid_url
from md2blocks.utils.validation import validate_recursion_depth

logger = logging.getLogger(__name__)

InlineTarget = InlineTargetType

RenderedText = Union[str, list[dict[str, Any]]]

_STYLE_MARKERS = {
    "bold": MRKDWN_BOLD,
    "italic": MRKDWN_ITALIC,
    "strike": MRKDWN_STRIKE,
    "code": MRKDWN_CODE,
}

# Order of keys in a rich-text style object
_STYLE_ORDER = ("bold", "italic", "strike", "code")

_NODE_STYLES: dict[type, str] = {
    Strong: "bold",
    Emphasis: "italic",
    Strikethrough: "strike",
}

_HTML_LINE_BREAK = re.compile(r"^<br\s*/?>$", re.IGNORECASE)


@dataclass(frozen=True)
class _Run:
    """A span of text sharing one set of styles and at most one link.

    ``styles`` is ordered outermost first. ``link`` is ``(identity, url)``
    so that two adjacent links to the same URL stay separate.
    """

    text: str
    styles: tuple[str, ...] = ()
    link: Optional[tuple[int, str]] = None

    @property
    def is_line_break(self) -> bool:
        return self.text == "\n" and not self.styles


class InlineRenderer:
    """Render inline AST nodes to mrkdwn, plain text or rich-text elements.

    Parameters
    ----------
    target : {"mrkdwn", "plain_text", "rich_text"}, default "mrkdwn"
        Output shape
    max_depth : int, default 50
        Recursion ceiling for nested inline formatting

    Examples
    --------
        >>> from md2blocks.ast import Strong, Text
        >>> InlineRenderer().render([Text("a "), Strong([Text("b")])])
        'a *b*'
        >>> InlineRenderer("rich_text").render([Strong([Text("b")])])
        [{'type': 'text', 'text': 'b', 'style': {'bold': True}}]

    """

    def __init__(self, target: InlineTarget = "mrkdwn", max_depth: int = MAX_RECURSION_DEPTH):
        """Initialize the renderer for one output target."""
        if target not in ("mrkdwn", "plain_text", "rich_text"):
            raise ValueError(f"Unknown inline target: {target!r}")
        self.target: InlineTarget = target
        self.max_depth = max_depth

    def render(self, nodes: Sequence[Node], depth: int = 0) -> RenderedText:
        """Render a sequence of sibling inline nodes.

        Parameters
        ----------
        nodes : sequence of Node
            Inline nodes
        depth : int, default 0
            Nesting depth of the caller

        Returns
        -------
        str or list of dict
            A string for the ``mrkdwn`` and ``plain_text`` targets, a list of
            rich-text elements for ``rich_text``

        Raises
        ------
        RecursionLimitError
            If nesting exceeds ``max_depth``
        ParseError
            If a node is not an inline node

        """
        runs = self._collect_runs(nodes, depth, frozenset(), (), None, False)

        if self.target == "mrkdwn":
            return _runs_to_mrkdwn(runs)
        elif self.target == "plain_text":
            return "".join(run.text for run in runs)
        return _runs_to_rich_text(runs)

    def is_plain(self, nodes: Sequence[Node]) -> bool:
        """Return True if ``nodes`` render to unstyled, unlinked text."""
        runs = self._collect_runs(nodes, 0, frozenset(), (), None, False)
        return all(not run.styles and run.link is None for run in runs)

    def _collect_runs(
        self,
        nodes: Sequence[Node],
        depth: int,
        group: frozenset[str],
        styles: tuple[str, ...],
        link: Optional[tuple[int, str]],
        parent_is_style: bool,
    ) -> list[_Run]:
        runs: list[_Run] = []
        chained = parent_is_style and len(nodes) == 1

        for node in nodes:
            if isinstance(node, Text):
                if node.content:
                    runs.append(_Run(node.content, styles, link))

            elif isinstance(node, (Strong, Emphasis, Strikethrough)):
                style = _NODE_STYLES[type(node)]
                if chained and style not in group:
                    child_depth, child_group = depth, group | {style}
                else:
                    child_depth, child_group = depth + 1, frozenset({style})
                validate_recursion_depth(child_depth, self.max_depth)

                child_styles = styles if style in styles else styles + (style,)
                runs.extend(self._collect_runs(node.content, child_depth, child_group, child_styles, link, True))

            elif isinstance(node, Code):
                if node.content:
                    code_styles = styles if "code" in styles else styles + ("code",)
                    runs.append(_Run(node.content, code_styles, link))

            elif isinstance(node, Link):
                validate_recursion_depth(depth + 1, self.max_depth)
                if link is None and is_valid_url(node.url):
                    child_link: Optional[tuple[int, str]] = (id(node), node.url)
                else:
                    if link is None:
                        logger.debug(f"Rendering link with invalid URL as plain label: {node.url[:50]!r}")
                    child_link = link
                label_runs = self._collect_runs(node.content, depth + 1, frozenset(), styles, child_link, False)
                if not label_runs and child_link is not None and child_link is not link:
                    label_runs = [_Run(node.url, styles, child_link)]
                runs.extend(label_runs)

            elif isinstance(node, LineBreak):
                runs.append(_Run("\n"))

            elif isinstance(node, HTMLInline):
                if _HTML_LINE_BREAK.match(node.content.strip()):
                    runs.append(_Run("\n"))
                elif node.content:
                    runs.append(_Run(node.content, styles, link))

            elif isinstance(node, Image):
                logger.debug(f"Skipping inline image nested in formatted content: {node.url[:50]!r}")

            else:
                raise ParseError(
                    f"Unexpected node in inline content: {type(node).__name__}",
                    token_type=type(node).__name__,
                )

        return runs


def _common_prefix(style_lists: list[tuple[str, ...]]) -> tuple[str, ...]:
    prefix = style_lists[0]
    for styles in style_lists[1:]:
        n = 0
        while n < len(prefix) and n < len(styles) and prefix[n] == styles[n]:
            n += 1
        prefix = prefix[:n]
    return prefix


def _runs_to_mrkdwn(runs: list[_Run]) -> str:
    """Serialize runs to mrkdwn, opening and closing markers as styles change."""
    out: list[str] = []
    stack: list[str] = []

    def move_to(target: tuple[str, ...]) -> None:
        common = 0
        while common < len(stack) and common < len(target) and stack[common] == target[common]:
            common += 1
        for style in reversed(stack[common:]):
            out.append(_STYLE_MARKERS[style])
        del stack[common:]
        for style in target[common:]:
            out.append(_STYLE_MARKERS[style])
            stack.append(style)

    i = 0
    while i < len(runs):
        run = runs[i]
        if run.link is None:
            if run.is_line_break:
                move_to(())
                out.append("\n")
            else:
                move_to(run.styles)
                out.append(escape_mrkdwn(run.text))
            i += 1
            continue

        j = i
        while j < len(runs) and runs[j].link == run.link:
            j += 1
        segment = runs[i:j]

        # Markers may not cross the link boundary
        outer = _common_prefix([r.styles for r in segment])
        move_to(outer)
        out.append(f"<{run.link[1]}|")
        for label_run in segment:
            move_to(label_run.styles)
            out.append(" " if label_run.is_line_break else escape_mrkdwn(label_run.text))
        move_to(outer)
        out.append(">")
        i = j

    move_to(())
    return "".join(out)


def _runs_to_rich_text(runs: list[_Run]) -> list[dict[str, Any]]:
    """Serialize runs to rich-text section elements, merging equal neighbours."""
    merged: list[_Run] = []
    for run in runs:
        if merged and set(merged[-1].styles) == set(run.styles) and merged[-1].link == run.link:
            merged[-1] = _Run(merged[-1].text + run.text, merged[-1].styles, run.link)
        else:
            merged.append(run)

    elements: list[dict[str, Any]] = []
    for run in merged:
        element: dict[str, Any]
        if run.link is not None:
            element = {"type": "link", "url": run.link[1], "text": run.text}
        else:
            element = {"type": "text", "text": run.text}
        if run.styles:
            element["style"] = {style: True for style in _STYLE_ORDER if style in run.styles}
        elements.append(element)

    return elements
