"""Base classes for parser and renderer options.

This module defines the foundation classes for the options used throughout
the md2blocks pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2blocks.constants import MAX_INPUT_LENGTH


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities.

    This mixin adds the ability to create modified copies of frozen dataclass
    instances, which is useful for immutable configuration objects.
    """

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen dataclass fields.

    """

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
        pass


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Parameters
    ----------
    max_input_length : int
        Maximum accepted input length in characters

    """

    max_input_length: int = field(
        default=MAX_INPUT_LENGTH,
        metadata={"help": "Maximum accepted input length in characters", "type": int, "importance": "security"},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for base parser options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.max_input_length <= 0:
            raise ValueError(f"max_input_length must be positive, got {self.max_input_length}")
