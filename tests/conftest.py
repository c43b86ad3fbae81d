"""Pytest configuration and shared fixtures for the richtext test suite."""

import pytest

from richtext.ast import Document, OrderedList, Paragraph, Section, SpanStyle, Subsection, Table, UnorderedList
from richtext.renderers.markdown import MarkdownRenderer

# Configure Hypothesis for property-based testing
try:
    import os

    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, property tests will fail to import
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def renderer() -> MarkdownRenderer:
    """Provide a markdown renderer with default options."""
    return MarkdownRenderer()


@pytest.fixture
def sample_document() -> Document:
    """Build the document exercised by the end-to-end scenarios."""
    return (
        Document("Document Header")
        .add(Paragraph("This is paragraph"))
        .add(
            Paragraph()
            .add("This ")
            .add(SpanStyle.STRONG, "is")
            .add(" ")
            .add(SpanStyle.EMPHASIS, "formatted")
            .add(" ")
            .add(SpanStyle.STRONG_EMPHASIS, "text")
        )
        .add(
            Section("Section Header").add(
                UnorderedList("Unordered items:")
                .add(Paragraph("Item 1"))
                .add(Paragraph("Item 2"))
                .add(Paragraph("Item 3"))
            )
        )
        .add(
            Subsection("Subsection Header")
            .add(OrderedList("Ordered items:").add(Paragraph("Item 1")).add(Paragraph("Item 2")))
            .add(Table(["Column A", "Column B"]).add(["1", "2"]).add(["3", "4"]))
        )
    )
