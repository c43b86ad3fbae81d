#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext/ast/visitors.py
"""Callback contract between the traversal engine and formatters.

A formatter subclasses :class:`DocumentVisitor` and receives ordered
begin/content/end callbacks from :func:`richtext.ast.renderer.render`. The
engine owns the traversal order; a visitor never walks the tree itself.

Hooks named ``*_begin`` and ``*_end`` return a bool. Returning ``False`` makes
the engine abort the walk immediately and report failure. Content hooks return
nothing.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from richtext.ast.nodes import (
    Document,
    ListItem,
    OrderedList,
    Paragraph,
    Section,
    Subsection,
    Table,
    TableRow,
    Text,
    UnorderedList,
)

AnyList = Union[UnorderedList, OrderedList]


class DocumentVisitor(ABC):
    """Abstract base class for document formatters.

    Subclasses must implement the document begin/end hooks and :meth:`on_text`.
    Every other hook defaults to a no-op that lets traversal continue.

    Examples
    --------
    Visitor collecting the plain text of every paragraph:

        >>> class PlainText(DocumentVisitor):
        ...     def __init__(self):
        ...         self.parts = []
        ...
        ...     def on_document_begin(self, document):
        ...         return True
        ...
        ...     def on_document_end(self, document):
        ...         return True
        ...
        ...     def on_text(self, text):
        ...         self.parts.append(text.plain_text)

    """

    @abstractmethod
    def on_document_begin(self, document: Document) -> bool:
        """Start rendering a document.

        Parameters
        ----------
        document : Document
            The document about to be traversed

        Returns
        -------
        bool
            False to abort before anything is emitted

        """

    @abstractmethod
    def on_document_end(self, document: Document) -> bool:
        """Finish rendering a document.

        Returns
        -------
        bool
            False to report the render as failed

        """

    @abstractmethod
    def on_text(self, text: Text) -> None:
        """Emit the content of a paragraph or a paragraph list item."""

    def on_document_header(self, text: Text) -> None:
        """Emit the document header; called only for a non-empty header."""

    # Paragraphs

    def on_paragraph_begin(self, paragraph: Paragraph) -> bool:
        return True

    def on_paragraph_end(self, paragraph: Paragraph) -> bool:
        return True

    # Tables

    def on_table_begin(self, table: Table) -> bool:
        return True

    def on_table_end(self, table: Table) -> bool:
        return True

    def on_table_header_begin(self, table: Table) -> bool:
        return True

    def on_table_header_cell(self, index: int, name: str) -> None:
        """Emit the header cell of column ``index`` (0-based)."""

    def on_table_header_end(self, table: Table) -> bool:
        return True

    def on_table_row_begin(self, row: TableRow) -> bool:
        return True

    def on_table_row_end(self, row: TableRow) -> bool:
        return True

    def on_table_cell_begin(self, index: int, cell: Text) -> bool:
        return True

    def on_table_cell_text(self, index: int, cell: Text) -> None:
        """Emit the content of the body cell in column ``index`` (0-based)."""

    def on_table_cell_end(self, index: int, cell: Text) -> bool:
        return True

    # Lists

    def on_list_begin(self, lst: AnyList) -> bool:
        return True

    def on_list_header(self, lst: AnyList, header: str) -> None:
        """Emit the header line of a list; called only for a non-empty header."""

    def on_list_item_begin(self, lst: AnyList, index: int, item: ListItem) -> bool:
        """Start a list item.

        Parameters
        ----------
        lst : UnorderedList or OrderedList
            The list owning the item
        index : int
            1-based position of the item in the list
        item : Paragraph, UnorderedList or OrderedList
            The item itself

        """
        return True

    def on_list_item_end(self, lst: AnyList, index: int, item: ListItem) -> bool:
        return True

    def on_list_end(self, lst: AnyList) -> bool:
        return True

    # Sections

    def on_subsection_begin(self, subsection: Subsection) -> bool:
        return True

    def on_subsection_header(self, text: Text) -> None:
        pass

    def on_subsection_end(self, subsection: Subsection) -> bool:
        return True

    def on_section_begin(self, section: Section) -> bool:
        return True

    def on_section_header(self, text: Text) -> None:
        pass

    def on_section_end(self, section: Section) -> bool:
        return True
