#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext/renderers/base.py
"""Base classes for document renderers.

This module defines the abstract base class that all renderers inherit from.
The BaseRenderer provides a consistent interface for converting a richtext
Document into an output format, on top of the traversal engine's visitor
contract.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from io import BytesIO

from richtext.ast.nodes import Document, Text
from richtext.exceptions import InvalidOptionsError
from richtext.options.base import BaseRendererOptions
from richtext.utils.io_utils import OutputTarget


class BaseRenderer(ABC):
    """Abstract base class for all renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, doc: Document, output: OutputTarget) -> None:
        """Render the document to the specified output.

        Parameters
        ----------
        doc : Document
            Document to render
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        RenderingError
            If rendering fails
        OutputWriteError
            If the output cannot be opened or written

        """
        pass

    def render_to_string(self, doc: Document) -> str:
        """Render the document to a string (if applicable).

        Raises
        ------
        NotImplementedError
            If the renderer does not support string output

        """
        raise NotImplementedError(f"{self.__class__.__name__} does not support rendering to a string.")

    def render_to_bytes(self, doc: Document) -> bytes:
        """Render the document to bytes.

        Creates a BytesIO buffer, calls :meth:`render` with it, and returns
        the bytes.

        Returns
        -------
        bytes
            Rendered document as bytes

        """
        buffer = BytesIO()
        self.render(doc, buffer)
        return buffer.getvalue()

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )


class InlineContentMixin:
    """Mixin rendering a Text to a string through a scratch buffer.

    The implementing class must have:
    - A ``_output`` attribute (list[str]) for accumulating output
    - A ``_write_text(text)`` method that appends the rendered spans to ``_output``

    Rendering into a scratch buffer lets a renderer measure the exact output
    width of a text (escapes and style delimiters included) before deciding
    how to lay it out, then discard the buffer.

    """

    _output: list[str]

    def _render_inline_content(self, text: Text) -> str:
        """Render a text to a string without touching the main output.

        Parameters
        ----------
        text : Text
            Spans to render

        Returns
        -------
        str
            Rendered inline content

        """
        # Save current output state
        saved_output = self._output
        self._output = []

        self._write_text(text)

        # Capture result and restore output state
        result = "".join(self._output)
        self._output = saved_output
        return result
