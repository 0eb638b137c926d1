#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/utils/security.py
"""URL validation utilities.

The platform accepts links and images from three families of URL: relative
paths, absolute ``http``/``https`` URLs, and (for images only) ``data:image/``
URIs. Everything else is rejected by :func:`is_valid_url`.

"""

from __future__ import annotations

import logging
import re
from urllib.parse import urlparse

from md2blocks.constants import (
    ABSOLUTE_URL_PREFIXES,
    DANGEROUS_SCHEMES,
    HTTP_URL_PATTERN,
    IMAGE_DATA_URL_PREFIX,
    RELATIVE_URL_PREFIXES,
)

logger = logging.getLogger(__name__)

_HTTP_URL_RE = re.compile(HTTP_URL_PATTERN)


def is_relative_url(url: str) -> bool:
    """Check if a URL is a relative path.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL starts with ``/`` or ``.``

    Examples
    --------
    >>> is_relative_url("/path/to/file")
    True
    >>> is_relative_url("./file.png")
    True
    >>> is_relative_url("https://example.com")
    False

    """
    return bool(url) and url.startswith(RELATIVE_URL_PREFIXES)


def is_absolute_url(url: str) -> bool:
    """Check if a URL claims an absolute scheme the validator understands.

    Strings that are neither absolute (by this definition) nor relative are
    treated as opaque identifiers by the block builders and accepted as-is.

    """
    return bool(url) and url.startswith(ABSOLUTE_URL_PREFIXES)


def is_valid_url(url: object) -> bool:
    """Classify a URL as acceptable or rejected.

    Parameters
    ----------
    url : object
        Candidate URL; anything other than a non-empty string is rejected

    Returns
    -------
    bool
        True for relative URLs, well-formed ``http(s)`` URLs and
        ``data:image/`` URIs; False otherwise

    Examples
    --------
    >>> is_valid_url("https://example.com/a.png")
    True
    >>> is_valid_url("http://")
    False
    >>> is_valid_url("data:image/png;base64,iVBORw0KGgo=")
    True
    >>> is_valid_url("data:text/plain;base64,aGVsbG8=")
    False
    >>> is_valid_url("mailto:someone@example.com")
    False

    """
    if not isinstance(url, str) or not url:
        return False

    if url.startswith("data:"):
        return url.startswith(IMAGE_DATA_URL_PREFIX)

    if is_relative_url(url):
        return True

    return _HTTP_URL_RE.match(url) is not None


def is_url_scheme_dangerous(url: str) -> bool:
    """Check if a URL uses a dangerous scheme.

    Dangerous schemes include javascript:, vbscript:, data:text/html, and others
    that can be used for XSS attacks or malicious code execution.

    Parameters
    ----------
    url : str
        URL to check

    Returns
    -------
    bool
        True if URL uses a dangerous scheme, False otherwise

    Examples
    --------
    >>> is_url_scheme_dangerous("https://example.com")
    False
    >>> is_url_scheme_dangerous("javascript:alert('xss')")
    True
    >>> is_url_scheme_dangerous("/relative/path")
    False

    """
    if not url or not url.strip():
        return False

    url_lower = url.lower().strip()

    if is_relative_url(url_lower):
        return False

    for dangerous_scheme in DANGEROUS_SCHEMES:
        if url_lower.startswith(dangerous_scheme):
            return True

    try:
        scheme = urlparse(url_lower).scheme
    except ValueError:
        logger.debug("Unparseable URL treated as dangerous: %s", url[:50])
        return True

    return scheme in ("javascript", "vbscript", "about")
