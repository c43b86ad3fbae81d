#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext/renderers/markdown.py
"""Markdown rendering of richtext documents.

This module provides the MarkdownRenderer class, the reference formatter for
the traversal engine. It receives callbacks in engine order and appends
Markdown to an internal buffer, keeping just enough state to lay the output
out: a list indentation counter and a stack of table column widths.

Output conventions
------------------
- ATX headers (``#``, ``##``, ``###``) with a blank line above and below
- ``- `` bullets and ``N. `` numbers, nested items indented by ``indent`` spaces
- Pipe tables whose first column is left-aligned and others right-aligned
- ``*x*``, ``**x**`` and ``***x***`` for emphasis, strong, strong emphasis
- Reserved Markdown characters backslash-escaped in all literal text

"""

from __future__ import annotations

import logging
from typing import Optional

from richtext.ast.nodes import (
    Document,
    ListItem,
    NodeKind,
    Paragraph,
    Span,
    SpanStyle,
    Table,
    TableRow,
    Text,
    node_kind,
)
from richtext.ast.renderer import render as render_document
from richtext.ast.visitors import AnyList, DocumentVisitor
from richtext.constants import (
    EMPHASIS_DELIMITER,
    STRONG_DELIMITER,
    STRONG_EMPHASIS_DELIMITER,
    TABLE_ALIGN_MARKER,
    UNORDERED_LIST_MARKER,
)
from richtext.exceptions import OutputWriteError, RenderingError
from richtext.options.markdown import MarkdownRendererOptions
from richtext.renderers.base import BaseRenderer, InlineContentMixin
from richtext.utils.escape import escape_markdown
from richtext.utils.io_utils import OutputSink, OutputTarget

logger = logging.getLogger(__name__)

_STYLE_DELIMITERS = {
    SpanStyle.NORMAL: "",
    SpanStyle.EMPHASIS: EMPHASIS_DELIMITER,
    SpanStyle.STRONG: STRONG_DELIMITER,
    SpanStyle.STRONG_EMPHASIS: STRONG_EMPHASIS_DELIMITER,
}


class MarkdownRenderer(DocumentVisitor, InlineContentMixin, BaseRenderer):
    """Render documents to Markdown text.

    A renderer instance keeps per-render state and is not reentrant; use one
    instance per concurrent render. Documents themselves are only read.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
    Basic usage:

        >>> from richtext.ast import Document, Paragraph
        >>> renderer = MarkdownRenderer()
        >>> renderer.render_to_string(Document("Title").add(Paragraph("Hello")))
        '\\n# Title\\n\\nHello\\n\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self._output: list[str] = []
        self._depth: int = 0
        self._list_nesting: int = 0
        self._list_start: int = 0
        self._table_widths: list[list[int]] = []
        self._result: Optional[str] = None
        self._sink: Optional[OutputSink] = None
        self._sink_error: Optional[OSError] = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_to_string(self, doc: Document) -> str:
        """Render a document to a Markdown string.

        Parameters
        ----------
        doc : Document
            The document to render

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        RenderingError
            If the traversal was aborted

        """
        self._sink = None
        if not render_document(doc, self):
            raise RenderingError("Markdown rendering was aborted", rendering_stage="traversal")
        assert self._result is not None
        logger.debug("Rendered markdown document (%d characters)", len(self._result))
        return self._result

    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render a document to a file path or stream.

        The output is acquired before rendering starts; if it cannot be opened
        nothing is rendered. The Markdown is written in one piece when the
        document is complete, so an aborted render writes nothing.

        Parameters
        ----------
        doc : Document
            The document to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the output cannot be opened or written
        RenderingError
            If the traversal was aborted

        """
        with OutputSink(output) as sink:
            if not sink.is_open:
                raise OutputWriteError(sink.name, original_error=sink.error)
            self._sink = sink
            try:
                succeeded = render_document(doc, self)
            finally:
                self._sink = None

        if self._sink_error is not None:
            raise OutputWriteError(sink.name, original_error=self._sink_error)
        if not succeeded:
            raise RenderingError("Markdown rendering was aborted", rendering_stage="traversal")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _current_indent(self) -> str:
        return " " * self._depth

    def _render_literal(self, text: str) -> str:
        if self.options.escape_special:
            return escape_markdown(text)
        return text

    def _render_span(self, span: Span) -> str:
        if not span.text:
            return ""
        delimiter = _STYLE_DELIMITERS[span.style]
        return f"{delimiter}{self._render_literal(span.text)}{delimiter}"

    def _write_text(self, text: Text) -> None:
        for span in text:
            self._output.append(self._render_span(span))

    def _tail(self, size: int = 2) -> str:
        tail = ""
        for chunk in reversed(self._output):
            tail = chunk + tail
            if len(tail) >= size:
                break
        return tail[-size:]

    def _ensure_blank_line(self) -> None:
        """Make the next line start after a blank line."""
        tail = self._tail()
        if not tail:
            self._output.append("\n")
        elif tail.endswith("\n\n"):
            return
        elif tail.endswith("\n"):
            self._output.append("\n")
        else:
            self._output.append("\n\n")

    def _write_header(self, level: int, text: Text) -> None:
        self._ensure_blank_line()
        self._output.append(f"{'#' * level} {self._render_inline_content(text)}\n\n")

    def _align(self, index: int, content: str) -> str:
        """Pad a cell: the first column is left-aligned, the others right-aligned."""
        width = self._table_widths[-1][index]
        if index == 0:
            return content.ljust(width)
        return content.rjust(width)

    def _separator_row(self, widths: list[int]) -> str:
        segments = []
        for index, width in enumerate(widths):
            dashes = "-" * (width + 1)
            if index == 0:
                segments.append(f"{TABLE_ALIGN_MARKER}{dashes}")
            else:
                segments.append(f"{dashes}{TABLE_ALIGN_MARKER}")
        return "|" + "|".join(segments) + "|\n"

    def _column_widths(self, table: Table) -> list[int]:
        """Compute the rendered width of every column of a table.

        Cells are rendered into a scratch buffer so that escapes and style
        delimiters are counted exactly as they will be written.

        """
        widths = [len(self._render_literal(name)) for name in table.header]
        for row in table.rows:
            for index, cell in enumerate(row.cells):
                widths[index] = max(widths[index], len(self._render_inline_content(cell)))
        return widths

    # ------------------------------------------------------------------
    # Document
    # ------------------------------------------------------------------

    def on_document_begin(self, document: Document) -> bool:
        self._output = []
        self._depth = 0
        self._list_nesting = 0
        self._list_start = 0
        self._table_widths = []
        self._result = None
        self._sink_error = None

        if self._sink is not None and not self._sink.is_open:
            logger.error("Refusing to render into closed output %s", self._sink.name)
            return False
        return True

    def on_document_header(self, text: Text) -> None:
        self._write_header(1, text)

    def on_document_end(self, document: Document) -> bool:
        self._result = "".join(self._output)
        self._output = []

        if self._sink is not None:
            try:
                self._sink.write(self._result)
            except OSError as exc:
                logger.error("Could not write markdown to %s: %s", self._sink.name, exc)
                self._sink_error = exc
                return False
        return True

    def on_text(self, text: Text) -> None:
        self._write_text(text)

    # ------------------------------------------------------------------
    # Paragraphs
    # ------------------------------------------------------------------

    def on_paragraph_begin(self, paragraph: Paragraph) -> bool:
        self._output.append(self._current_indent())
        return True

    def on_paragraph_end(self, paragraph: Paragraph) -> bool:
        self._output.append("\n\n")
        return True

    # ------------------------------------------------------------------
    # Sections
    # ------------------------------------------------------------------

    def on_section_header(self, text: Text) -> None:
        self._write_header(2, text)

    def on_subsection_header(self, text: Text) -> None:
        self._write_header(3, text)

    # ------------------------------------------------------------------
    # Lists
    # ------------------------------------------------------------------

    def on_list_begin(self, lst: AnyList) -> bool:
        if self._list_nesting == 0:
            self._list_start = len(self._output)
        self._list_nesting += 1
        return True

    def on_list_header(self, lst: AnyList, header: str) -> None:
        self._output.append(f"{self._current_indent()}{self._render_literal(header)}\n")

    def on_list_item_begin(self, lst: AnyList, index: int, item: ListItem) -> bool:
        # Nested lists carry their own markers one level deeper
        if node_kind(item) is NodeKind.PARAGRAPH:
            marker = f"{index}. " if lst.ordered else UNORDERED_LIST_MARKER
            self._output.append(f"{self._current_indent()}{marker}")
        self._depth += self.options.indent
        return True

    def on_list_item_end(self, lst: AnyList, index: int, item: ListItem) -> bool:
        self._depth -= self.options.indent
        if node_kind(item) is NodeKind.PARAGRAPH:
            self._output.append("\n")
        return True

    def on_list_end(self, lst: AnyList) -> bool:
        self._list_nesting -= 1
        # Lists that produced no lines leave no blank line behind
        if self._list_nesting == 0 and len(self._output) > self._list_start:
            self._output.append("\n")
        return True

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def on_table_begin(self, table: Table) -> bool:
        self._table_widths.append(self._column_widths(table))
        return True

    def on_table_header_begin(self, table: Table) -> bool:
        self._output.append("|")
        return True

    def on_table_header_cell(self, index: int, name: str) -> None:
        self._output.append(f" {self._align(index, self._render_literal(name))} |")

    def on_table_header_end(self, table: Table) -> bool:
        self._output.append("\n")
        self._output.append(self._separator_row(self._table_widths[-1]))
        return True

    def on_table_row_begin(self, row: TableRow) -> bool:
        if self._table_widths[-1]:
            self._output.append("|")
        return True

    def on_table_cell_text(self, index: int, cell: Text) -> None:
        self._output.append(f" {self._align(index, self._render_inline_content(cell))} |")

    def on_table_row_end(self, row: TableRow) -> bool:
        if self._table_widths[-1]:
            self._output.append("\n")
        return True

    def on_table_end(self, table: Table) -> bool:
        widths = self._table_widths.pop()
        if widths:
            self._output.append("\n")
        return True
