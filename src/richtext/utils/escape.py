#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext/utils/escape.py
"""Markdown text escaping."""

from __future__ import annotations

from richtext.constants import MARKDOWN_RESERVED_CHARS


def escape_markdown(text: str) -> str:
    r"""Backslash-escape every reserved Markdown character in ``text``.

    Each character of the reserved set (backslash, backtick, ``*``, ``_``,
    braces, brackets, ``#``, ``+``, ``-`` and ``|``) is emitted as a backslash
    followed by the character; everything else passes through unchanged.
    The output is therefore ``len(text)`` plus the number of reserved
    characters long.

    Escaping is not idempotent: applying it to already escaped text escapes
    the inserted backslashes again, so callers must escape exactly once.

    Parameters
    ----------
    text : str
        Literal text to escape

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown("a*b [c]")
        'a\\*b \\[c\\]'

    """
    if not text:
        return text

    escaped_chars = []
    for char in text:
        if char in MARKDOWN_RESERVED_CHARS:
            escaped_chars.append("\\")
        escaped_chars.append(char)

    return "".join(escaped_chars)


__all__ = ["escape_markdown"]
