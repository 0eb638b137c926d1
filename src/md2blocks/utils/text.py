#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/utils/text.py
"""Text helpers shared by the block builders and renderers."""

from __future__ import annotations

import unicodedata

_ZERO_WIDTH_JOINER = "\u200d"
_KEYCAP = "\u20e3"


def _is_cluster_continuation(char: str) -> bool:
    """Return True if ``char`` only makes sense attached to the character before it."""
    if char in (_ZERO_WIDTH_JOINER, _KEYCAP):
        return True
    if unicodedata.combining(char):
        return True
    codepoint = ord(char)
    # Variation selectors and emoji skin-tone modifiers
    if 0xFE00 <= codepoint <= 0xFE0F or 0x1F3FB <= codepoint <= 0x1F3FF:
        return True
    # Low surrogate (only present in strings decoded with surrogatepass)
    return 0xDC00 <= codepoint <= 0xDFFF


def safe_truncate(text: str, max_length: int) -> str:
    """Truncate text to at most ``max_length`` characters without splitting a character.

    Python strings are sequences of code points, so a plain slice never cuts
    a code point in half. What a slice can do is separate a base character
    from the marks, selectors, modifiers or joined characters that belong to
    it (for example the second half of a ZWJ emoji sequence). When the cut
    lands inside such a cluster, the whole cluster is dropped.

    Parameters
    ----------
    text : str
        Text to truncate
    max_length : int
        Maximum number of characters to keep

    Returns
    -------
    str
        ``text`` unchanged when it already fits, otherwise a prefix of at most
        ``max_length`` characters that ends on a cluster boundary

    Examples
    --------
    >>> safe_truncate("abcdef", 3)
    'abc'
    >>> safe_truncate("\\U0001F600" * 5, 3) == "\\U0001F600" * 3
    True

    """
    if max_length < 0:
        raise ValueError(f"max_length must be non-negative, got {max_length}")
    if len(text) <= max_length:
        return text

    cut = max_length
    while 0 < cut and (_is_cluster_continuation(text[cut]) or text[cut - 1] == _ZERO_WIDTH_JOINER):
        cut -= 1
    if cut > 0 and 0xD800 <= ord(text[cut - 1]) <= 0xDBFF:
        # Dangling high surrogate
        cut -= 1

    return text[:cut]
