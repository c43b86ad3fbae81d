#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext/ast/renderer.py
"""Traversal engine driving a :class:`DocumentVisitor` over a document.

The engine is the single source of truth for traversal order. It walks the
document depth-first and, for every block, emits a begin callback, the content
callbacks, the children in insertion order and finally the matching end
callback.

Any begin/end hook returning ``False`` or any item of unknown kind ends the
walk at once; the outcome is reported as a single boolean.

"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from richtext.ast.nodes import (
    DOCUMENT_ITEM_KINDS,
    FRAGMENT_KINDS,
    SECTION_ITEM_KINDS,
    Document,
    NodeKind,
    Paragraph,
    Section,
    Subsection,
    Table,
    node_kind,
)
from richtext.ast.visitors import AnyList, DocumentVisitor

logger = logging.getLogger(__name__)


def render(document: Document, visitor: DocumentVisitor) -> bool:
    """Walk ``document`` and drive the visitor's callbacks.

    Parameters
    ----------
    document : Document
        Document to traverse; it is only read
    visitor : DocumentVisitor
        Formatter receiving the callbacks

    Returns
    -------
    bool
        True when the whole document was traversed and every hook agreed,
        False otherwise

    """
    logger.debug("Rendering document with %d items using %s", len(document), type(visitor).__name__)
    return _DocumentWalker(visitor).walk(document)


class _DocumentWalker:
    """Per-render traversal state: just the visitor being driven."""

    def __init__(self, visitor: DocumentVisitor):
        self.visitor = visitor

    def _proceed(self, hook: Callable[..., Any], *args: Any) -> bool:
        if hook(*args) is False:
            logger.debug("Render aborted by %s", hook.__name__)
            return False
        return True

    def walk(self, document: Document) -> bool:
        if not self._proceed(self.visitor.on_document_begin, document):
            return False

        if not document.header.is_empty:
            self.visitor.on_document_header(document.header)

        if not self._items(document.items, DOCUMENT_ITEM_KINDS, "document"):
            return False

        return self._proceed(self.visitor.on_document_end, document)

    def _items(self, items: Iterable[Any], allowed: frozenset[NodeKind], owner: str) -> bool:
        for item in items:
            if not self._dispatch(item, allowed, owner):
                return False
        return True

    def _dispatch(self, item: Any, allowed: frozenset[NodeKind], owner: str) -> bool:
        kind = node_kind(item)
        if kind not in allowed:
            logger.error("Unrecognized %s item of type %s; aborting render", owner, type(item).__name__)
            return False
        if kind is NodeKind.PARAGRAPH:
            return self._paragraph(item)
        elif kind is NodeKind.TABLE:
            return self._table(item)
        elif kind is NodeKind.UNORDERED_LIST or kind is NodeKind.ORDERED_LIST:
            return self._list(item)
        elif kind is NodeKind.SUBSECTION:
            return self._subsection(item)
        elif kind is NodeKind.SECTION:
            return self._section(item)
        raise AssertionError(f"Unhandled node kind: {kind}")

    def _paragraph(self, paragraph: Paragraph) -> bool:
        if not self._proceed(self.visitor.on_paragraph_begin, paragraph):
            return False
        self.visitor.on_text(paragraph.text)
        return self._proceed(self.visitor.on_paragraph_end, paragraph)

    def _table(self, table: Table) -> bool:
        if not self._proceed(self.visitor.on_table_begin, table):
            return False

        if table.header:
            if not self._proceed(self.visitor.on_table_header_begin, table):
                return False
            for index, name in enumerate(table.header):
                self.visitor.on_table_header_cell(index, name)
            if not self._proceed(self.visitor.on_table_header_end, table):
                return False

        for row in table.rows:
            if not self._proceed(self.visitor.on_table_row_begin, row):
                return False
            for index, cell in enumerate(row.cells):
                if not self._proceed(self.visitor.on_table_cell_begin, index, cell):
                    return False
                self.visitor.on_table_cell_text(index, cell)
                if not self._proceed(self.visitor.on_table_cell_end, index, cell):
                    return False
            if not self._proceed(self.visitor.on_table_row_end, row):
                return False

        return self._proceed(self.visitor.on_table_end, table)

    def _list(self, lst: AnyList) -> bool:
        if not self._proceed(self.visitor.on_list_begin, lst):
            return False

        if lst.header:
            self.visitor.on_list_header(lst, lst.header)

        for index, item in enumerate(lst.items, start=1):
            if not self._proceed(self.visitor.on_list_item_begin, lst, index, item):
                return False

            kind = node_kind(item)
            if kind is NodeKind.PARAGRAPH:
                self.visitor.on_text(item.text)
            elif kind is NodeKind.UNORDERED_LIST or kind is NodeKind.ORDERED_LIST:
                if not self._list(item):
                    return False
            else:
                logger.error("Unrecognized list item of type %s; aborting render", type(item).__name__)
                return False

            if not self._proceed(self.visitor.on_list_item_end, lst, index, item):
                return False

        return self._proceed(self.visitor.on_list_end, lst)

    def _subsection(self, subsection: Subsection) -> bool:
        if not self._proceed(self.visitor.on_subsection_begin, subsection):
            return False

        if not subsection.header.is_empty:
            self.visitor.on_subsection_header(subsection.header)

        if not self._items(subsection.items, FRAGMENT_KINDS, "subsection"):
            return False

        return self._proceed(self.visitor.on_subsection_end, subsection)

    def _section(self, section: Section) -> bool:
        if not self._proceed(self.visitor.on_section_begin, section):
            return False

        if not section.header.is_empty:
            self.visitor.on_section_header(section.header)

        if not self._items(section.items, SECTION_ITEM_KINDS, "section"):
            return False

        return self._proceed(self.visitor.on_section_end, section)


__all__ = ["render"]
