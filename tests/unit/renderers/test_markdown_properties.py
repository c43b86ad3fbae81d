#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/renderers/test_markdown_properties.py
"""Property-based tests for Markdown table layout and list indentation."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from richtext.ast import Document, Paragraph, Table, UnorderedList
from richtext.renderers.markdown import MarkdownRenderer
from richtext.utils.escape import escape_markdown

cell_text = st.text(alphabet=st.characters(blacklist_categories=("Cs", "Cc", "Zl", "Zp")), max_size=12)
words = st.text(alphabet="abcdefghijklmnopqrstuvwxyz ", min_size=1, max_size=10)


@st.composite
def tables(draw):
    columns = draw(st.integers(min_value=1, max_value=5))
    header = draw(st.lists(cell_text, min_size=columns, max_size=columns))
    rows = draw(st.lists(st.lists(cell_text, min_size=columns, max_size=columns), max_size=5))
    table = Table(header)
    for row in rows:
        table.add(row)
    return table


def _build_list(items):
    lst = UnorderedList()
    for item in items:
        lst.add(item)
    return lst


nested_items = st.recursive(
    words.map(Paragraph),
    lambda children: st.lists(children, max_size=4).map(_build_list),
    max_leaves=20,
)
nested_lists = st.lists(nested_items, min_size=1, max_size=4).map(_build_list)


def _expected_list(lst, depth, indent):
    out = []
    for item in lst:
        if isinstance(item, Paragraph):
            out.append(" " * depth + "- " + item.text.plain_text + "\n")
        else:
            out.append(_expected_list(item, depth + indent, indent))
    return "".join(out)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestTableLayoutProperties:
    """Every line of a rendered table has the same width."""

    @given(tables())
    def test_all_lines_equal_width(self, table):
        markdown = MarkdownRenderer().render_to_string(Document().add(table))
        assert markdown.endswith("\n\n")
        lines = markdown[:-2].split("\n")
        assert len(lines) == 2 + table.row_count
        assert len({len(line) for line in lines}) == 1

    @given(tables())
    def test_separator_dashes_exceed_width_by_one(self, table):
        renderer = MarkdownRenderer()
        markdown = renderer.render_to_string(Document().add(table))
        separator = markdown.split("\n")[1]
        segments = separator.strip("|").split("|")
        assert len(segments) == table.column_count

        for index, segment in enumerate(segments):
            width = len(escape_markdown(table.header[index]))
            for row in table.rows:
                width = max(width, len(renderer._render_inline_content(row.cells[index])))
            if index == 0:
                assert segment == ":" + "-" * (width + 1)
            else:
                assert segment == "-" * (width + 1) + ":"


@pytest.mark.unit
@pytest.mark.fuzzing
class TestListIndentationProperties:
    """Indentation is restored after every nested list."""

    @given(nested_lists, st.integers(min_value=0, max_value=6))
    def test_markers_at_nesting_depth(self, lst, indent):
        from richtext.options import MarkdownRendererOptions

        renderer = MarkdownRenderer(MarkdownRendererOptions(indent=indent))
        markdown = renderer.render_to_string(Document().add(lst))
        body = _expected_list(lst, 0, indent)
        assert markdown == (body + "\n" if body else "")
        assert renderer._depth == 0
        assert renderer._list_nesting == 0

    @given(nested_lists)
    def test_paragraph_after_list_is_not_indented(self, lst):
        renderer = MarkdownRenderer()
        markdown = renderer.render_to_string(Document().add(lst).add(Paragraph("after")))
        body = _expected_list(lst, 0, 4)
        assert markdown == (body + "\n" if body else "") + "after\n\n"
