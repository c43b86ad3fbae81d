#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/richtext/renderers/__init__.py
"""Renderers converting richtext documents to output formats.

Available renderers:
- MarkdownRenderer: Render to Markdown text

Examples
--------
Render a document to a file:

    >>> from richtext.ast import Document, Paragraph
    >>> from richtext.renderers import MarkdownRenderer
    >>> MarkdownRenderer().render(Document("Notes").add(Paragraph("Hello")), "notes.md")

"""

from richtext.renderers.base import BaseRenderer, InlineContentMixin
from richtext.renderers.markdown import MarkdownRenderer

__all__ = [
    "BaseRenderer",
    "InlineContentMixin",
    "MarkdownRenderer",
]
