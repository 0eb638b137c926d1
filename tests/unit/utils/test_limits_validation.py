#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for input and limit validation helpers."""

import pytest

from md2blocks.constants import MAX_INPUT_LENGTH
from md2blocks.exceptions import BlockLimitError, RecursionLimitError, ValidationError
from md2blocks.utils.validation import validate_block_count, validate_input, validate_recursion_depth


@pytest.mark.unit
class TestValidateInput:
    """Test validate_input."""

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="Input cannot be None"):
            validate_input(None)

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError, match="Expected string input, received int"):
            validate_input(42)

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="Input cannot be empty") as exc_info:
            validate_input("")
        assert exc_info.value.parameter_name == "markdown"

    def test_whitespace_only_accepted(self):
        """Whitespace-only input is not empty; it simply renders to nothing."""
        assert validate_input("   \n") == "   \n"

    def test_at_maximum_accepted(self):
        text = "a" * MAX_INPUT_LENGTH
        assert validate_input(text) == text

    def test_over_maximum_rejected(self):
        with pytest.raises(ValidationError, match="exceeds maximum"):
            validate_input("a" * (MAX_INPUT_LENGTH + 1))

    def test_custom_maximum(self):
        with pytest.raises(ValidationError, match="Input size 11 exceeds maximum of 10 characters"):
            validate_input("a" * 11, max_length=10)


@pytest.mark.unit
class TestValidateLimits:
    """Test block count and recursion depth ceilings."""

    def test_block_count_at_limit(self):
        validate_block_count(50, 50)

    def test_block_count_over_limit(self):
        with pytest.raises(BlockLimitError, match="Block count 51 exceeds maximum of 50 blocks") as exc_info:
            validate_block_count(51, 50)
        assert exc_info.value.block_count == 51
        assert exc_info.value.max_blocks == 50

    def test_block_limit_is_validation_error(self):
        with pytest.raises(ValidationError):
            validate_block_count(3, 2)

    def test_depth_at_limit(self):
        validate_recursion_depth(50, 50)

    def test_depth_over_limit(self):
        with pytest.raises(RecursionLimitError) as exc_info:
            validate_recursion_depth(51, 50)
        assert exc_info.value.depth == 51
        assert exc_info.value.max_depth == 50
