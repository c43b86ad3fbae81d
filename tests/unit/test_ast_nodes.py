#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_ast_nodes.py
"""Unit tests for the document model.

Tests cover:
- Span and Text construction and coercion
- Table row width checking (dropping and strict mode)
- Container composition rules for lists, subsections, sections and documents
- Node kind tags

"""

import logging

import pytest

from richtext.ast import (
    Document,
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
    coerce_text,
    node_kind,
)
from richtext.exceptions import StructureError, TableShapeError, ValidationError


@pytest.mark.unit
class TestSpanAndText:
    """Tests for inline values."""

    def test_span_defaults(self):
        span = Span()
        assert span.style is SpanStyle.NORMAL
        assert span.text == ""

    def test_span_rejects_unknown_style(self):
        with pytest.raises(TypeError):
            Span("bold", "x")  # type: ignore[arg-type]

    def test_text_add_preserves_order(self):
        text = Text().add("This ").add(SpanStyle.STRONG, "is").add(Span(SpanStyle.EMPHASIS, " it"))
        assert [span.style for span in text] == [SpanStyle.NORMAL, SpanStyle.STRONG, SpanStyle.EMPHASIS]
        assert text.plain_text == "This is it"
        assert len(text) == 3

    def test_text_add_style_without_text_gives_empty_span(self):
        text = Text().add(SpanStyle.EMPHASIS)
        assert text.spans == [Span(SpanStyle.EMPHASIS, "")]

    def test_text_rejects_span_with_extra_text(self):
        with pytest.raises(TypeError):
            Text().add(Span(SpanStyle.STRONG, "a"), "b")

    def test_empty_text(self):
        assert Text().is_empty
        assert not Text().add("").is_empty
        assert not Text([Span(SpanStyle.NORMAL, "")]).is_empty

    def test_coerce_text(self):
        assert coerce_text(None).is_empty
        assert coerce_text("").is_empty
        assert coerce_text("abc").spans == [Span(SpanStyle.NORMAL, "abc")]
        existing = Text().add("x")
        assert coerce_text(existing) is existing
        with pytest.raises(TypeError):
            coerce_text(42)  # type: ignore[arg-type]


@pytest.mark.unit
class TestParagraph:
    """Tests for paragraphs."""

    def test_paragraph_from_string(self):
        paragraph = Paragraph("This is paragraph")
        assert paragraph.kind is NodeKind.PARAGRAPH
        assert paragraph.text.plain_text == "This is paragraph"

    def test_paragraph_add_returns_paragraph(self):
        paragraph = Paragraph()
        assert paragraph.add("a") is paragraph
        assert paragraph.add(SpanStyle.STRONG, "b") is paragraph
        assert paragraph.text.plain_text == "ab"


@pytest.mark.unit
class TestTable:
    """Tests for table row width checking."""

    def test_header_defines_column_count(self):
        table = Table(["Column A", "Column B"])
        assert table.kind is NodeKind.TABLE
        assert table.column_count == 2
        assert table.row_count == 0

    def test_matching_rows_are_accepted(self):
        table = Table(["A", "B"]).add(["1", "2"]).add(TableRow(["3", Text().add(SpanStyle.STRONG, "4")]))
        assert table.row_count == 2
        assert all(len(row) == table.column_count for row in table)

    def test_mismatched_row_is_dropped(self, caplog):
        table = Table(["Column A", "Column B"])
        with caplog.at_level(logging.WARNING, logger="richtext.ast.nodes"):
            result = table.add(["x"])
        assert result is table
        assert table.row_count == 0
        assert "Dropping table row with 1 cells" in caplog.text

    def test_too_wide_row_is_dropped(self):
        table = Table(["A"]).add(["1", "2"])
        assert table.row_count == 0

    def test_initial_rows_are_checked(self):
        table = Table(["A", "B"], rows=[TableRow(["1", "2"]), TableRow(["3"])])
        assert table.row_count == 1

    def test_strict_table_raises(self):
        table = Table(["A", "B"], strict=True)
        with pytest.raises(TableShapeError) as exc_info:
            table.add(["x"])
        assert exc_info.value.expected == 2
        assert exc_info.value.received == 1
        assert isinstance(exc_info.value, ValidationError)
        assert table.row_count == 0

    def test_header_must_be_strings(self):
        with pytest.raises(TypeError):
            Table([Text().add("A")])  # type: ignore[list-item]

    def test_header_must_not_be_a_single_string(self):
        with pytest.raises(TypeError):
            Table("ab")  # type: ignore[arg-type]

    @pytest.mark.parametrize("row", ["xy", Text().add("x").add("y")])
    def test_row_must_not_be_a_single_value(self, row):
        table = Table(["a", "b"])
        with pytest.raises(TypeError):
            table.add(row)  # type: ignore[arg-type]
        assert table.row_count == 0

    def test_single_string_row_rejected_by_strict_table(self):
        with pytest.raises(TypeError):
            Table(["a", "b"], strict=True).add("xy")  # type: ignore[arg-type]

    def test_table_row_rejects_single_string(self):
        with pytest.raises(TypeError):
            TableRow("xy")  # type: ignore[arg-type]

    def test_initial_rows_as_strings_are_rejected(self):
        with pytest.raises(TypeError):
            Table(["a", "b"], rows=["xy"])  # type: ignore[list-item]


@pytest.mark.unit
class TestLists:
    """Tests for list composition."""

    def test_list_kinds(self):
        assert UnorderedList().kind is NodeKind.UNORDERED_LIST
        assert OrderedList().kind is NodeKind.ORDERED_LIST
        assert OrderedList.ordered and not UnorderedList.ordered

    def test_lists_accept_paragraphs_and_lists(self):
        nested = OrderedList().add("deep")
        lst = UnorderedList("Header").add(Paragraph("a")).add(nested).add(UnorderedList())
        assert len(lst) == 3
        assert lst.items[1] is nested

    def test_string_items_become_paragraphs(self):
        lst = OrderedList().add("Item 1")
        assert isinstance(lst.items[0], Paragraph)
        assert lst.items[0].text.plain_text == "Item 1"

    def test_lists_reject_tables(self):
        with pytest.raises(StructureError):
            UnorderedList().add(Table(["A"]))  # type: ignore[arg-type]

    def test_lists_reject_sections(self):
        with pytest.raises(StructureError):
            OrderedList(items=[Section("S")])


@pytest.mark.unit
class TestContainers:
    """Tests for subsection, section and document composition."""

    def test_subsection_accepts_fragments(self):
        subsection = (
            Subsection("Sub")
            .add(Paragraph("p"))
            .add(Table(["A"]))
            .add(UnorderedList())
            .add(OrderedList())
        )
        assert subsection.kind is NodeKind.SUBSECTION
        assert len(subsection) == 4
        assert subsection.header.plain_text == "Sub"

    def test_subsections_do_not_nest(self):
        with pytest.raises(StructureError):
            Subsection("Outer").add(Subsection("Inner"))  # type: ignore[arg-type]

    def test_section_accepts_subsections_but_not_sections(self):
        section = Section("S").add(Subsection("Sub")).add(Paragraph("p"))
        assert section.kind is NodeKind.SECTION
        assert len(section) == 2
        with pytest.raises(StructureError):
            section.add(Section("Nested"))  # type: ignore[arg-type]

    def test_document_accepts_every_item_kind(self):
        doc = (
            Document("Title")
            .add(Paragraph("p"))
            .add(Table(["A"]))
            .add(UnorderedList())
            .add(OrderedList())
            .add(Subsection())
            .add(Section())
        )
        assert [node_kind(item) for item in doc] == [
            NodeKind.PARAGRAPH,
            NodeKind.TABLE,
            NodeKind.UNORDERED_LIST,
            NodeKind.ORDERED_LIST,
            NodeKind.SUBSECTION,
            NodeKind.SECTION,
        ]

    def test_document_rejects_non_nodes(self):
        with pytest.raises(StructureError):
            Document().add("plain string")  # type: ignore[arg-type]
        with pytest.raises(StructureError):
            Document().add(Document())  # type: ignore[arg-type]

    def test_empty_header(self):
        assert Document().header.is_empty
        assert Document("").header.is_empty
        assert not Document("Title").header.is_empty

    def test_node_kind_of_non_node(self):
        assert node_kind("text") is None
        assert node_kind(Text()) is None
        assert node_kind(Document()) is None
