#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext/utils/io_utils.py
"""I/O utilities for handling output destinations.

This module provides :class:`OutputSink`, the ordered text sink renderers
write to. A sink is acquired from a file path or wraps an already open
file-like object; whether acquisition succeeded is observable through
:attr:`OutputSink.is_open` before anything is rendered.

"""

from __future__ import annotations

import io
import logging
from io import BytesIO, StringIO
from pathlib import Path
from types import TracebackType
from typing import IO, Optional, Union, cast

from richtext.exceptions import OutputWriteError

logger = logging.getLogger(__name__)

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(output: object) -> bool:
    # Concrete types first, then io base classes, then the mode attribute
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


class OutputSink:
    """Text sink over a file path or a file-like object.

    Paths are opened for writing (UTF-8) when the sink is created and closed
    by :meth:`close`; streams passed in are written to but never closed.
    Failure to open a path does not raise: it leaves the sink closed and
    records the error in :attr:`error`, so callers can check the state and
    refuse to render.

    Parameters
    ----------
    target : str, Path, IO[bytes] or IO[str]
        Output destination

    Raises
    ------
    TypeError
        If ``target`` is neither a path nor a writable object

    Examples
    --------
        >>> from io import StringIO
        >>> buffer = StringIO()
        >>> with OutputSink(buffer) as sink:
        ...     sink.write("# Hello")
        >>> buffer.getvalue()
        '# Hello'

    """

    def __init__(self, target: OutputTarget):
        """Acquire the output destination."""
        self.target = target
        self.error: Optional[OSError] = None
        self._stream: Optional[IO] = None
        self._owns_stream = False
        self._binary = False

        if isinstance(target, (str, Path)):
            try:
                self._stream = open(Path(target), "w", encoding="utf-8", newline="")
                self._owns_stream = True
            except OSError as exc:
                logger.error("Could not open output %s: %s", target, exc)
                self.error = exc
        elif hasattr(target, "write"):
            self._stream = target
            self._binary = _is_binary_stream(target)
        else:
            raise TypeError(f"Unsupported output type: {type(target)}")

    @property
    def name(self) -> str:
        """Human readable description of the destination."""
        if isinstance(self.target, (str, Path)):
            return str(self.target)
        return getattr(self.target, "name", None) or type(self.target).__name__

    @property
    def is_open(self) -> bool:
        """Whether the sink can accept writes."""
        return self._stream is not None and not getattr(self._stream, "closed", False)

    def __bool__(self) -> bool:
        return self.is_open

    def write(self, text: str) -> None:
        """Append text to the destination.

        Raises
        ------
        OutputWriteError
            If the sink is not open
        OSError
            If the underlying stream fails

        """
        if not self.is_open:
            raise OutputWriteError(self.name, message=f"Output is not open: {self.name}", original_error=self.error)
        if self._binary:
            cast(IO[bytes], self._stream).write(text.encode("utf-8"))
        else:
            cast(IO[str], self._stream).write(text)

    def close(self) -> None:
        """Close the destination if the sink opened it."""
        if self._owns_stream and self._stream is not None:
            self._stream.close()
        self._stream = None

    def __enter__(self) -> OutputSink:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


__all__ = ["OutputSink", "OutputTarget"]
