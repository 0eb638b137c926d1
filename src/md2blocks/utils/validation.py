#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/utils/validation.py
"""Limit predicates for transform input and output.

These helpers enforce the ceilings defined in :mod:`md2blocks.constants` and
raise the matching :mod:`md2blocks.exceptions` error when a ceiling is crossed.

"""

from __future__ import annotations

from md2blocks.constants import MAX_BLOCKS, MAX_INPUT_LENGTH, MAX_RECURSION_DEPTH
from md2blocks.exceptions import BlockLimitError, RecursionLimitError, ValidationError


def validate_input(markdown: object, max_length: int = MAX_INPUT_LENGTH) -> str:
    """Validate Markdown input before tokenizing.

    Parameters
    ----------
    markdown : object
        Candidate Markdown text
    max_length : int, default MAX_INPUT_LENGTH
        Maximum accepted length in characters

    Returns
    -------
    str
        The validated input

    Raises
    ------
    ValidationError
        If the input is None, not a string, empty, or longer than ``max_length``

    """
    if markdown is None:
        raise ValidationError("Input cannot be None", parameter_name="markdown")

    if not isinstance(markdown, str):
        raise ValidationError(
            f"Expected string input, received {type(markdown).__name__}",
            parameter_name="markdown",
            parameter_value=type(markdown),
        )

    if len(markdown) == 0:
        raise ValidationError("Input cannot be empty", parameter_name="markdown")

    if len(markdown) > max_length:
        raise ValidationError(
            f"Input size {len(markdown)} exceeds maximum of {max_length} characters",
            parameter_name="markdown",
            parameter_value=len(markdown),
        )

    return markdown


def validate_block_count(block_count: int, max_blocks: int = MAX_BLOCKS) -> None:
    """Raise BlockLimitError if ``block_count`` exceeds ``max_blocks``."""
    if block_count > max_blocks:
        raise BlockLimitError(block_count, max_blocks)


def validate_recursion_depth(depth: int, max_depth: int = MAX_RECURSION_DEPTH) -> None:
    """Raise RecursionLimitError if ``depth`` exceeds ``max_depth``."""
    if depth > max_depth:
        raise RecursionLimitError(depth, max_depth)
