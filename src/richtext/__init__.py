"""richtext - structured documents with a pluggable rendering pipeline.

richtext models a document as a tree of headers, paragraphs, styled text
spans, tables, ordered and unordered lists, sections and subsections, and
renders it through a generic traversal engine that drives formatter callbacks.
The reference formatter produces Markdown.

Key Features
------------
- Closed set of node kinds with build-time composition checks
- Chainable ``add`` composition; composition order is output order
- Traversal engine with strict begin/content/end callback ordering
- Markdown formatter with escaping, nested list indentation and aligned tables

Requirements
------------
- Python 3.10+

Examples
--------
Build and render a document:

    >>> from richtext import Document, MarkdownRenderer, Paragraph, Table
    >>> doc = (
    ...     Document("Report")
    ...     .add(Paragraph("Summary"))
    ...     .add(Table(["Name", "Value"]).add(["a", "1"]))
    ... )
    >>> print(MarkdownRenderer().render_to_string(doc))

See Also
--------
richtext.ast : Document model and traversal engine
richtext.renderers : Output formatters

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

from richtext.ast import (
    Document,
    DocumentVisitor,
    NodeKind,
    OrderedList,
    Paragraph,
    Section,
    Span,
    SpanStyle,
    Subsection,
    Table,
    TableRow,
    Text,
    UnorderedList,
    render,
)
from richtext.exceptions import (
    InvalidOptionsError,
    OutputWriteError,
    RenderingError,
    RichTextError,
    StructureError,
    TableShapeError,
    ValidationError,
)
from richtext.options import MarkdownRendererOptions
from richtext.renderers import MarkdownRenderer
from richtext.utils.escape import escape_markdown

__version__ = "1.0.0"

__all__ = [
    "Document",
    "DocumentVisitor",
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
    "render",
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    "escape_markdown",
    "RichTextError",
    "ValidationError",
    "InvalidOptionsError",
    "StructureError",
    "TableShapeError",
    "RenderingError",
    "OutputWriteError",
    "__version__",
]
