#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/constants.py
"""Constants and default values for the md2nexus library.

Constants are organized by category:
1. Type Definitions - Literal types shared by options and the API
2. BBCode Output - Defaults for the NexusMods renderer
3. Markdown Parsing - Defaults for the mistune-backed parser
4. File Handling - Extensions and encodings used in batch mode
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

InputFormat = Literal["auto", "markdown", "mdast"]

# =============================================================================
# BBCode Output
# =============================================================================

DEFAULT_MONOSPACE_FONT = "Courier"
DEFAULT_HEADING_SIZE = 5
MIN_HEADING_SIZE = 1
MAX_HEADING_SIZE = 7

# Fixed markup fragments
LIST_ITEM_MARKER = "[*]"
THEMATIC_BREAK_TAG = "[line]"
FOOTNOTE_MARKER = "^"

# =============================================================================
# Markdown Parsing
# =============================================================================

DEFAULT_PARSE_TABLES = True
DEFAULT_PARSE_STRIKETHROUGH = True
DEFAULT_PARSE_FOOTNOTES = True
DEFAULT_PARSE_MATH = True
DEFAULT_PARSE_AUTOLINKS = True
DEFAULT_PARSE_FRONTMATTER = False
DEFAULT_MDAST_STRICT_MODE = True

# =============================================================================
# File Handling
# =============================================================================

MARKDOWN_EXTENSIONS: frozenset[str] = frozenset({".md", ".markdown", ".mdown", ".mkd", ".mkdn"})
MDAST_EXTENSIONS: frozenset[str] = frozenset({".json"})
OUTPUT_EXTENSION = ".bbcode"
DEFAULT_ENCODING = "utf-8"
SUPPORTED_INPUT_FORMATS: tuple[str, ...] = ("auto", "markdown", "mdast")
