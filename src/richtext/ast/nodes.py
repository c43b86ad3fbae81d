#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext/ast/nodes.py
"""Node classes for document representation.

This module defines the closed set of node types a richtext document is built
from. Documents are composed bottom-up with chainable ``add`` calls; every
``add`` appends in place and returns the receiving node, so composition order
is output order.

Node Hierarchy
--------------
Inline values (not dispatchable by the traversal engine):
    - Span, Text, TableRow

Blocks (the "fragments"):
    - Paragraph, Table, UnorderedList, OrderedList

Containers:
    - Subsection (fragments only)
    - Section (fragments and subsections)
    - Document (fragments, subsections and sections)

Each block and container exposes a ``kind`` property returning a
:class:`NodeKind`. Containers only accept children whose kind belongs to their
union; subsections therefore never nest and sections only appear at the top
level of a document.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Iterator, Optional, Sequence, Union

from richtext.exceptions import StructureError, TableShapeError

logger = logging.getLogger(__name__)


class SpanStyle(Enum):
    """Inline style applied to the literal text of a span."""

    NORMAL = "normal"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    STRONG_EMPHASIS = "strong_emphasis"


class NodeKind(Enum):
    """Closed set of block and container kinds understood by the traversal engine."""

    PARAGRAPH = "paragraph"
    TABLE = "table"
    UNORDERED_LIST = "unordered_list"
    ORDERED_LIST = "ordered_list"
    SUBSECTION = "subsection"
    SECTION = "section"


LIST_ITEM_KINDS = frozenset({NodeKind.PARAGRAPH, NodeKind.UNORDERED_LIST, NodeKind.ORDERED_LIST})
FRAGMENT_KINDS = frozenset({NodeKind.PARAGRAPH, NodeKind.TABLE, NodeKind.UNORDERED_LIST, NodeKind.ORDERED_LIST})
SECTION_ITEM_KINDS = FRAGMENT_KINDS | {NodeKind.SUBSECTION}
DOCUMENT_ITEM_KINDS = SECTION_ITEM_KINDS | {NodeKind.SECTION}


# ============================================================================
# Inline values
# ============================================================================


@dataclass(frozen=True)
class Span:
    """Smallest styled unit of text.

    Parameters
    ----------
    style : SpanStyle, default = SpanStyle.NORMAL
        Inline style of the span
    text : str, default = ""
        Literal text. An empty span renders as nothing.

    """

    style: SpanStyle = SpanStyle.NORMAL
    text: str = ""

    def __post_init__(self) -> None:
        """Validate the span style and text types."""
        if not isinstance(self.style, SpanStyle):
            raise TypeError(f"Span style must be a SpanStyle, got {type(self.style).__name__}")
        if not isinstance(self.text, str):
            raise TypeError(f"Span text must be a str, got {type(self.text).__name__}")


def _coerce_span(value: Any, text: Optional[str] = None) -> Span:
    if isinstance(value, Span):
        if text is not None:
            raise TypeError("Cannot combine a Span with additional text")
        return value
    if isinstance(value, SpanStyle):
        return Span(value, text if text is not None else "")
    if isinstance(value, str) and text is None:
        return Span(SpanStyle.NORMAL, value)
    raise TypeError(f"Cannot build a Span from {type(value).__name__}")


@dataclass
class Text:
    """Ordered sequence of spans.

    Insertion order is rendering order. A text may be empty, in which case any
    header it represents is treated as absent.

    Parameters
    ----------
    spans : list of Span, default = empty list
        Spans in rendering order

    Examples
    --------
    >>> text = Text().add("This ").add(SpanStyle.STRONG, "is").add(" text")
    >>> text.plain_text
    'This is text'

    """

    spans: list[Span] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Coerce any raw span values given at construction."""
        self.spans = [_coerce_span(span) for span in self.spans]

    def add(self, value: Union[Span, SpanStyle, str], text: Optional[str] = None) -> Text:
        """Append a span and return this text.

        Parameters
        ----------
        value : Span, SpanStyle or str
            A ready-made span, a style (combined with ``text``), or a plain
            string that becomes a NORMAL span
        text : str or None, default = None
            Literal text when ``value`` is a style

        Returns
        -------
        Text
            This text, for chaining

        """
        self.spans.append(_coerce_span(value, text))
        return self

    @property
    def is_empty(self) -> bool:
        """Whether the text holds no spans.

        Only the span count matters: a text made of empty spans is not empty,
        so a header such as ``Text([Span(SpanStyle.NORMAL, "")])`` is still
        emitted (as a bare ``# ``).

        """
        return not self.spans

    @property
    def plain_text(self) -> str:
        """Concatenated literal text of all spans, without styling."""
        return "".join(span.text for span in self.spans)

    def __iter__(self) -> Iterator[Span]:
        return iter(self.spans)

    def __len__(self) -> int:
        return len(self.spans)


def coerce_text(value: Union[Text, Span, str, None]) -> Text:
    """Convert a header or cell value into a :class:`Text`.

    Parameters
    ----------
    value : Text, Span, str or None
        Value to convert. The empty string and None both become an empty text.

    Returns
    -------
    Text
        The value itself when it already is a Text, otherwise a new Text

    Raises
    ------
    TypeError
        If the value cannot be converted

    """
    if value is None:
        return Text()
    if isinstance(value, Text):
        return value
    if isinstance(value, Span):
        return Text([value])
    if isinstance(value, str):
        return Text([Span(SpanStyle.NORMAL, value)]) if value else Text()
    raise TypeError(f"Cannot build a Text from {type(value).__name__}")


@dataclass
class TableRow:
    """Ordered sequence of cells, one per table column.

    Parameters
    ----------
    cells : list of Text, default = empty list
        Cell contents; plain strings are converted to Text

    """

    cells: list[Text] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Coerce raw cell values to Text."""
        if isinstance(self.cells, (str, Text)):
            raise TypeError("Table row cells must be a sequence, not a single str or Text")
        self.cells = [coerce_text(cell) for cell in self.cells]

    def __iter__(self) -> Iterator[Text]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)


# ============================================================================
# Blocks and containers
# ============================================================================


class Node(ABC):
    """Base class for every node the traversal engine can dispatch on."""

    @property
    @abstractmethod
    def kind(self) -> NodeKind:
        """Kind tag used for exhaustive dispatch."""


def node_kind(value: Any) -> Optional[NodeKind]:
    """Return the kind of a node, or None for anything that is not a node.

    Parameters
    ----------
    value : Any
        Object to inspect

    Returns
    -------
    NodeKind or None
        The kind tag, or None when ``value`` is not a recognised node

    """
    if isinstance(value, Node):
        kind = value.kind
        if isinstance(kind, NodeKind):
            return kind
    return None


class _Container:
    """Shared child handling for nodes holding an ordered item list."""

    accepted_kinds: ClassVar[frozenset[NodeKind]] = frozenset()
    items: list[Any]

    def _check_item(self, item: Any) -> Any:
        if node_kind(item) not in self.accepted_kinds:
            raise StructureError(type(self).__name__, item)
        return item

    def _append(self, item: Any) -> None:
        self.items.append(self._check_item(item))

    def __iter__(self) -> Iterator[Any]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class Paragraph(Node):
    """Paragraph wrapping a single text.

    Parameters
    ----------
    text : Text or str, default = empty Text
        Paragraph content

    """

    text: Text = field(default_factory=Text)

    def __post_init__(self) -> None:
        """Coerce a plain string into a Text."""
        self.text = coerce_text(self.text)

    @property
    def kind(self) -> NodeKind:
        """Return ``NodeKind.PARAGRAPH``."""
        return NodeKind.PARAGRAPH

    def add(self, value: Union[Span, SpanStyle, str], text: Optional[str] = None) -> Paragraph:
        """Append a span to the paragraph text and return the paragraph.

        Accepts the same arguments as :meth:`Text.add`.

        """
        self.text.add(value, text)
        return self


@dataclass
class Table(Node):
    """Table with a fixed header and a body of rows.

    The header defines the column count. Every accepted row has exactly that
    many cells; a row of any other width is rejected without modifying the
    table. By default a rejected row is dropped with a warning; a strict table
    raises :class:`TableShapeError` instead.

    Parameters
    ----------
    header : list of str, default = empty list
        Column names, fixed at construction
    rows : list of TableRow, default = empty list
        Initial body rows, subject to the same width check as :meth:`add`
    strict : bool, default = False
        Raise on mismatched rows instead of dropping them

    Examples
    --------
    >>> table = Table(["Column A", "Column B"]).add(["1", "2"]).add(["x"])
    >>> table.row_count
    1

    """

    header: list[str] = field(default_factory=list)
    rows: list[TableRow] = field(default_factory=list)
    strict: bool = False

    def __post_init__(self) -> None:
        """Validate the header and filter initial rows."""
        if isinstance(self.header, str):
            raise TypeError("Table header must be a sequence of column names, not a str")
        header = list(self.header)
        for name in header:
            if not isinstance(name, str):
                raise TypeError(f"Table header cells must be str, got {type(name).__name__}")
        self.header = header
        initial_rows, self.rows = self.rows, []
        for row in initial_rows:
            self.add(row)

    @property
    def kind(self) -> NodeKind:
        """Return ``NodeKind.TABLE``."""
        return NodeKind.TABLE

    @property
    def column_count(self) -> int:
        """Number of columns defined by the header."""
        return len(self.header)

    @property
    def row_count(self) -> int:
        """Number of accepted body rows."""
        return len(self.rows)

    def add(self, row: Union[TableRow, Sequence[Union[Text, str]]]) -> Table:
        """Append a body row and return the table.

        Parameters
        ----------
        row : TableRow or sequence of Text/str
            Row to append

        Returns
        -------
        Table
            This table, for chaining

        Raises
        ------
        TableShapeError
            If the table is strict and the row width does not match the header
        TypeError
            If the row is a single str or Text instead of a sequence of cells

        """
        if not isinstance(row, TableRow):
            if isinstance(row, (str, Text)):
                raise TypeError(f"Table row must be a sequence of cells, got {type(row).__name__}")
            row = TableRow(list(row))
        if len(row) != self.column_count:
            if self.strict:
                raise TableShapeError(self.column_count, len(row), row)
            logger.warning(
                "Dropping table row with %d cells; header defines %d columns", len(row), self.column_count
            )
            return self
        self.rows.append(row)
        return self

    def __iter__(self) -> Iterator[TableRow]:
        return iter(self.rows)


@dataclass
class _ListNode(_Container, Node):
    header: str = ""
    items: list[Any] = field(default_factory=list)

    accepted_kinds: ClassVar[frozenset[NodeKind]] = LIST_ITEM_KINDS
    ordered: ClassVar[bool] = False

    def __post_init__(self) -> None:
        if not isinstance(self.header, str):
            raise TypeError(f"List header must be a str, got {type(self.header).__name__}")
        self.items = [self._check_item(self._coerce_item(item)) for item in self.items]

    @staticmethod
    def _coerce_item(item: Any) -> Any:
        if isinstance(item, (str, Text)):
            return Paragraph(item)
        return item


@dataclass
class UnorderedList(_ListNode):
    """Bulleted list of paragraphs and nested lists.

    Parameters
    ----------
    header : str, default = ""
        Optional line rendered above the items
    items : list, default = empty list
        Paragraph, UnorderedList or OrderedList items

    """

    @property
    def kind(self) -> NodeKind:
        """Return ``NodeKind.UNORDERED_LIST``."""
        return NodeKind.UNORDERED_LIST

    def add(self, item: Union[Paragraph, UnorderedList, OrderedList, Text, str]) -> UnorderedList:
        """Append an item and return the list.

        Plain strings and texts are wrapped in a Paragraph.

        Raises
        ------
        StructureError
            If the item is not a paragraph or a list

        """
        self._append(self._coerce_item(item))
        return self


@dataclass
class OrderedList(_ListNode):
    """Numbered list; an item's number is its 1-based position.

    Parameters
    ----------
    header : str, default = ""
        Optional line rendered above the items
    items : list, default = empty list
        Paragraph, UnorderedList or OrderedList items

    """

    ordered: ClassVar[bool] = True

    @property
    def kind(self) -> NodeKind:
        """Return ``NodeKind.ORDERED_LIST``."""
        return NodeKind.ORDERED_LIST

    def add(self, item: Union[Paragraph, UnorderedList, OrderedList, Text, str]) -> OrderedList:
        """Append an item and return the list.

        Plain strings and texts are wrapped in a Paragraph.

        Raises
        ------
        StructureError
            If the item is not a paragraph or a list

        """
        self._append(self._coerce_item(item))
        return self


@dataclass
class _HeadedContainer(_Container, Node):
    header: Text = field(default_factory=Text)
    items: list[Any] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.header = coerce_text(self.header)
        self.items = [self._check_item(item) for item in self.items]


@dataclass
class Subsection(_HeadedContainer):
    """Header plus fragments; subsections do not nest.

    Parameters
    ----------
    header : Text or str, default = empty Text
        Optional subsection header
    items : list, default = empty list
        Paragraph, Table, UnorderedList or OrderedList children

    """

    accepted_kinds: ClassVar[frozenset[NodeKind]] = FRAGMENT_KINDS

    @property
    def kind(self) -> NodeKind:
        """Return ``NodeKind.SUBSECTION``."""
        return NodeKind.SUBSECTION

    def add(self, item: Fragment) -> Subsection:
        """Append a fragment and return the subsection."""
        self._append(item)
        return self


@dataclass
class Section(_HeadedContainer):
    """Header plus fragments and subsections.

    Parameters
    ----------
    header : Text or str, default = empty Text
        Optional section header
    items : list, default = empty list
        Fragment or Subsection children

    """

    accepted_kinds: ClassVar[frozenset[NodeKind]] = SECTION_ITEM_KINDS

    @property
    def kind(self) -> NodeKind:
        """Return ``NodeKind.SECTION``."""
        return NodeKind.SECTION

    def add(self, item: SectionItem) -> Section:
        """Append a fragment or subsection and return the section."""
        self._append(item)
        return self


@dataclass
class Document(_Container):
    """Root of the document tree.

    Parameters
    ----------
    header : Text or str, default = empty Text
        Optional document title
    items : list, default = empty list
        Fragment, Subsection or Section children

    Examples
    --------
    >>> doc = (
    ...     Document("Document Header")
    ...     .add(Paragraph("This is paragraph"))
    ...     .add(Section("Section Header").add(UnorderedList("Items:").add("Item 1")))
    ... )
    >>> len(doc)
    2

    """

    header: Text = field(default_factory=Text)
    items: list[Any] = field(default_factory=list)

    accepted_kinds: ClassVar[frozenset[NodeKind]] = DOCUMENT_ITEM_KINDS

    def __post_init__(self) -> None:
        """Coerce the header and validate initial items."""
        self.header = coerce_text(self.header)
        self.items = [self._check_item(item) for item in self.items]

    def add(self, item: DocumentItem) -> Document:
        """Append a fragment, subsection or section and return the document.

        Raises
        ------
        StructureError
            If the item is not one of the accepted kinds

        """
        self._append(item)
        return self


ListItem = Union[Paragraph, UnorderedList, OrderedList]
Fragment = Union[Paragraph, Table, UnorderedList, OrderedList]
SectionItem = Union[Fragment, Subsection]
DocumentItem = Union[SectionItem, Section]
