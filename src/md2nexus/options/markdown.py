#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/options/markdown.py
"""Configuration options for Markdown parsing."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2nexus.constants import (
    DEFAULT_PARSE_AUTOLINKS,
    DEFAULT_PARSE_FOOTNOTES,
    DEFAULT_PARSE_FRONTMATTER,
    DEFAULT_PARSE_MATH,
    DEFAULT_PARSE_STRIKETHROUGH,
    DEFAULT_PARSE_TABLES,
)
from md2nexus.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Each flag enables one GitHub-flavored extension of the underlying
    mistune parser. Everything is on by default.

    Parameters
    ----------
    parse_tables : bool, default True
        Whether to parse table syntax (GFM pipe tables).
    parse_strikethrough : bool, default True
        Whether to parse strikethrough syntax (~~text~~).
    parse_footnotes : bool, default True
        Whether to parse footnote references and definitions.
    parse_math : bool, default True
        Whether to parse inline ($...$) and block ($$...$$) math.
    parse_autolinks : bool, default True
        Whether to turn bare URLs into links.
    parse_frontmatter : bool, default False
        Whether a leading ``---`` or ``+++`` block becomes a YAML or TOML
        front matter node; when off the block is ordinary Markdown.

    """

    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    parse_footnotes: bool = field(
        default=DEFAULT_PARSE_FOOTNOTES,
        metadata={"help": "Parse footnote references and definitions", "importance": "core"},
    )
    parse_math: bool = field(
        default=DEFAULT_PARSE_MATH,
        metadata={"help": "Parse inline and block math ($...$ and $$...$$)", "importance": "core"},
    )
    parse_autolinks: bool = field(
        default=DEFAULT_PARSE_AUTOLINKS,
        metadata={"help": "Turn bare URLs into links", "importance": "advanced"},
    )
    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={"help": "Parse YAML/TOML front matter at document start", "importance": "core"},
    )
