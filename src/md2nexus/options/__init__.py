#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/options/__init__.py
"""Configuration options for the md2nexus parsers and renderer.

Each component has its own frozen Options dataclass. Use
``CloneFrozenMixin.create_updated`` to derive a changed copy.
"""

from __future__ import annotations

from md2nexus.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2nexus.options.markdown import MarkdownParserOptions
from md2nexus.options.mdast_json import MdastJsonParserOptions
from md2nexus.options.nexus import NexusRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "MdastJsonParserOptions",
    "NexusRendererOptions",
]
