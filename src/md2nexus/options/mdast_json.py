#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/options/mdast_json.py
"""Configuration options for reading mdast JSON documents."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2nexus.constants import DEFAULT_MDAST_STRICT_MODE
from md2nexus.options.base import BaseParserOptions


@dataclass(frozen=True)
class MdastJsonParserOptions(BaseParserOptions):
    """Configuration options for mdast-JSON-to-AST parsing.

    Parameters
    ----------
    strict_mode : bool, default True
        Raise ParsingError on unknown node types. When False, unknown
        nodes are logged and dropped with their subtrees.

    """

    strict_mode: bool = field(
        default=DEFAULT_MDAST_STRICT_MODE,
        metadata={"help": "Fail on unknown mdast node types instead of dropping them", "importance": "advanced"},
    )
