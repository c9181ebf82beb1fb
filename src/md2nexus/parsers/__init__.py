#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/parsers/__init__.py
"""Parsers that build the node tree from Markdown or mdast JSON."""

from md2nexus.parsers.base import BaseParser
from md2nexus.parsers.markdown import MarkdownParser, markdown_to_ast
from md2nexus.parsers.mdast_json import MdastJsonParser

__all__ = ["BaseParser", "MarkdownParser", "MdastJsonParser", "markdown_to_ast"]
