#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext/constants.py
"""Default values and shared constants for richtext.

This module centralizes the option defaults used by the renderer option
dataclasses and the reserved character set used by markdown escaping.

"""

from __future__ import annotations

# =============================================================================
# Markdown Renderer Defaults
# =============================================================================

DEFAULT_MARGIN = 80
DEFAULT_INDENT = 4
DEFAULT_ESCAPE_SPECIAL = True

# =============================================================================
# Markdown Syntax
# =============================================================================

# Characters that carry meaning somewhere in markdown inline or block syntax.
MARKDOWN_RESERVED_CHARS = frozenset("\\`*_{}[]#+-|")

UNORDERED_LIST_MARKER = "- "
TABLE_ALIGN_MARKER = ":"

EMPHASIS_DELIMITER = "*"
STRONG_DELIMITER = "**"
STRONG_EMPHASIS_DELIMITER = "***"
