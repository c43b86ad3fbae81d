#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering.

This module defines options for rendering richtext documents to Markdown.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from richtext.constants import DEFAULT_ESCAPE_SPECIAL, DEFAULT_INDENT, DEFAULT_MARGIN
from richtext.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    """Markdown rendering options.

    Parameters
    ----------
    margin : int, default 80
        Target line width. Advisory only: lines are never wrapped.
    indent : int, default 4
        Spaces added per list nesting level.
    escape_special : bool, default True
        Backslash-escape reserved Markdown characters in literal text.

    """

    margin: int = field(
        default=DEFAULT_MARGIN,
        metadata={
            "help": "Target line width (advisory, no wrapping is performed)",
            "type": int,
            "importance": "advanced",
        },
    )
    indent: int = field(
        default=DEFAULT_INDENT,
        metadata={"help": "Spaces of indentation per nested list level", "type": int, "importance": "core"},
    )
    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={
            "help": "Escape special Markdown characters (e.g. asterisks) in text content",
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for markdown options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if self.margin <= 0:
            raise ValueError(f"margin must be positive, got {self.margin}")

        if self.indent < 0:
            raise ValueError(f"indent must be non-negative, got {self.indent}")
