#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext/ast/__init__.py
"""Document model and traversal engine.

The module consists of three components:

- nodes: the closed set of document node classes and their composition rules
- visitors: the callback contract formatters implement
- renderer: the traversal engine driving a visitor over a document

Examples
--------
Basic usage:

    >>> from richtext.ast import Document, Paragraph, Section, SpanStyle
    >>> from richtext.renderers.markdown import MarkdownRenderer
    >>>
    >>> doc = (
    ...     Document("Title")
    ...     .add(Paragraph().add("Plain ").add(SpanStyle.STRONG, "bold"))
    ...     .add(Section("Details").add(Paragraph("More text")))
    ... )
    >>> markdown = MarkdownRenderer().render_to_string(doc)

"""

from richtext.ast.nodes import (
    Document,
    DocumentItem,
    Fragment,
    ListItem,
    Node,
    NodeKind,
    OrderedList,
    Paragraph,
    Section,
    SectionItem,
    Span,
    SpanStyle,
    Subsection,
    Table,
    TableRow,
    Text,
    UnorderedList,
    coerce_text,
    node_kind,
)
from richtext.ast.renderer import render
from richtext.ast.visitors import DocumentVisitor

__all__ = [
    # Nodes
    "Document",
    "Node",
    "NodeKind",
    "OrderedList",
    "Paragraph",
    "Section",
    "Span",
    "SpanStyle",
    "Subsection",
    "Table",
    "TableRow",
    "Text",
    "UnorderedList",
    # Unions
    "DocumentItem",
    "Fragment",
    "ListItem",
    "SectionItem",
    # Helpers
    "coerce_text",
    "node_kind",
    # Traversal
    "DocumentVisitor",
    "render",
]
