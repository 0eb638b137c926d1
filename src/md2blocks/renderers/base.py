#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2blocks/renderers/base.py
"""Base classes for AST renderers.

This module defines the abstract base class that block renderers inherit
from. A renderer converts the md2blocks AST into a sequence of output
blocks, and from there into JSON-ready dictionaries or a JSON string.

"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

from md2blocks.ast import Document
from md2blocks.blocks import Block
from md2blocks.exceptions import InvalidOptionsError
from md2blocks.options.base import BaseRendererOptions


class BaseRenderer(ABC):
    """Abstract base class for AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> from md2blocks.blocks import section
        >>> from md2blocks.renderers.base import BaseRenderer
        >>>
        >>> class FirstLineRenderer(BaseRenderer):
        ...     def render_blocks(self, doc):
        ...         return [section("first line")]

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_blocks(self, doc: Document) -> list[Block]:
        """Render the AST to a list of blocks.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        list of Block
            Output blocks in document order

        """
        pass

    def render_to_dicts(self, doc: Document) -> list[dict[str, Any]]:
        """Render the AST to JSON-ready block dictionaries."""
        return [block.to_dict() for block in self.render_blocks(doc)]

    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a JSON array of blocks.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            JSON text, with non-ASCII characters kept as-is

        """
        return json.dumps(self.render_to_dicts(doc), ensure_ascii=False)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Parameters
        ----------
        options : BaseRendererOptions or None
            The options object to validate
        expected_type : type
            The expected options class type
        renderer_name : str
            Name of the renderer (for error messages)

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
