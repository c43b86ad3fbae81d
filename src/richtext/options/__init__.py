#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer option classes for richtext."""

from richtext.options.base import BaseRendererOptions, CloneFrozenMixin
from richtext.options.markdown import MarkdownRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownRendererOptions",
]
