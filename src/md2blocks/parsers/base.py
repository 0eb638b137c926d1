#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/parsers/base.py
"""Base classes for document parsers.

This module defines the abstract base class that the Markdown parser inherits
from. A parser turns input text into the md2blocks AST (Abstract Syntax Tree)
that the block renderer consumes.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from md2blocks.ast import Document
from md2blocks.exceptions import InvalidOptionsError
from md2blocks.options.base import BaseParserOptions

logger = logging.getLogger(__name__)


class BaseParser(ABC):
    """Abstract base class for document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Parameters
        ----------
        options : BaseParserOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        parser_name : str
            Name of the parser (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: str) -> Document:
        """Parse the input text into an AST.

        Parameters
        ----------
        input_data : str
            The text to parse

        Returns
        -------
        Document
            AST Document node representing the parsed document structure

        Raises
        ------
        ValidationError
            If the input is missing, empty or too long
        ParseError
            If the tokenizer produces a structure that cannot be interpreted
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError
