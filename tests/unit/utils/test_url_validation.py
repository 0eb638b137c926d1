#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for URL classification helpers."""

import pytest

from md2blocks.utils.security import (
    is_absolute_url,
    is_relative_url,
    is_url_scheme_dangerous,
    is_valid_url,
)


@pytest.mark.unit
class TestIsValidUrl:
    """Test the accept/reject classification used for links and images."""

    @pytest.mark.parametrize(
        "url",
        [
            "https://example.com",
            "http://example.com/path?q=1&r=2#frag",
            "https://example.com/59953191-480px.jpg",
            "https://user@example.com:8080/a/b",
            "/absolute/path.png",
            "./relative.png",
            "../parent.png",
            "data:image/png;base64,iVBORw0KGgo=",
        ],
    )
    def test_accepted(self, url):
        """Relative paths, http(s) URLs and image data URIs are accepted."""
        assert is_valid_url(url) is True

    @pytest.mark.parametrize(
        "url",
        [
            "",
            "http://",
            "https://",
            "https://example.com/a b",
            "data:text/plain;base64,aGVsbG8=",
            "mailto:someone@example.com",
            "ftp://example.com/file",
            "javascript:alert(1)",
            "example.com",
        ],
    )
    def test_rejected(self, url):
        """Incomplete URLs, other schemes and bare hosts are rejected."""
        assert is_valid_url(url) is False

    @pytest.mark.parametrize("value", [None, 42, b"https://example.com", ["https://example.com"]])
    def test_non_string_rejected(self, value):
        """Anything other than a string is rejected without raising."""
        assert is_valid_url(value) is False


@pytest.mark.unit
class TestUrlShape:
    """Test relative and absolute URL detection."""

    def test_relative(self):
        assert is_relative_url("/a")
        assert is_relative_url("./a")
        assert not is_relative_url("https://a.com")
        assert not is_relative_url("")

    def test_absolute(self):
        assert is_absolute_url("http://a.com")
        assert is_absolute_url("data:image/png;base64,AA==")
        assert not is_absolute_url("/a")
        assert not is_absolute_url("custom-url-string")


@pytest.mark.unit
class TestDangerousSchemes:
    """Test detection of script-bearing URL schemes."""

    @pytest.mark.parametrize(
        "url",
        [
            "javascript:alert(1)",
            "JavaScript:alert(1)",
            "  javascript:alert(1)",
            "vbscript:msgbox(1)",
            "data:text/html,<script>alert(1)</script>",
        ],
    )
    def test_dangerous(self, url):
        assert is_url_scheme_dangerous(url) is True

    @pytest.mark.parametrize(
        "url",
        ["https://example.com", "/relative/path", "./a.png", "data:image/png;base64,AA==", "", "   "],
    )
    def test_safe(self, url):
        assert is_url_scheme_dangerous(url) is False
