#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/utils/escape.py
"""Escaping utilities for the platform's mrkdwn text format.

mrkdwn reserves exactly three characters: ``&``, ``<`` and ``>``. Everything
else, including quote characters, is passed through untouched.

"""

from __future__ import annotations

import re

_MRKDWN_RESERVED = re.compile(r"[&<>]")

_MRKDWN_ENTITIES = {"&": "&amp;", "<": "&lt;", ">": "&gt;"}


def escape_mrkdwn(text: str) -> str:
    """Escape text for inclusion in an mrkdwn string.

    Parameters
    ----------
    text : str
        Text to escape

    Returns
    -------
    str
        Text with ``&``, ``<`` and ``>`` replaced by entities

    Examples
    --------
        >>> escape_mrkdwn("<>&'\\"")
        '&lt;&gt;&amp;\\'"'
        >>> escape_mrkdwn("x &lt; y")
        'x &amp;lt; y'

    Notes
    -----
    Every ``&`` is escaped, including one that already starts an entity, so
    the platform shows exactly the characters that were passed in. Entities
    written in Markdown text are decoded by the parser before they get here.

    """
    if not text:
        return text

    return _MRKDWN_RESERVED.sub(lambda m: _MRKDWN_ENTITIES[m.group(0)], text)
