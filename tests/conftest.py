"""Pytest configuration and shared fixtures for the md2blocks test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from md2blocks.ast import Document, Paragraph, Text, ThematicBreak

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")
    config.addinivalue_line("markers", "fuzzing: Property-based tests driven by Hypothesis")


@pytest.fixture
def paragraph():
    """Build a Paragraph holding a single Text node."""

    def _make(text: str) -> Paragraph:
        return Paragraph(content=[Text(content=text)])

    return _make


@pytest.fixture
def divided_document():
    """Build a Document of ``count`` dividers.

    Each ThematicBreak produces exactly one block, which makes block-count
    boundaries easy to hit precisely.
    """

    def _make(count: int) -> Document:
        return Document(children=[ThematicBreak() for _ in range(count)])

    return _make
