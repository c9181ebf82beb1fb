#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/parsers/mdast_json.py
"""mdast JSON to AST converter.

This module reads the unist/mdast JSON documents produced by other Markdown
tool chains (remark, markdown-rs) into the node tree. It is the only input
path through which MDX constructs reach the renderer.
"""

from __future__ import annotations

import json
import logging

from md2nexus.ast import Root
from md2nexus.ast.serialization import json_to_ast
from md2nexus.exceptions import ParsingError
from md2nexus.options.mdast_json import MdastJsonParserOptions
from md2nexus.parsers.base import BaseParser, ParserInput

logger = logging.getLogger(__name__)


class MdastJsonParser(BaseParser):
    """Convert mdast JSON to a Root node.

    Parameters
    ----------
    options : MdastJsonParserOptions or None
        Parser options

    Examples
    --------
    Parse from a string:
        >>> parser = MdastJsonParser()
        >>> root = parser.parse('{"type": "root", "children": []}')

    Parse from a file, dropping node types this library does not know:
        >>> from pathlib import Path
        >>> parser = MdastJsonParser(MdastJsonParserOptions(strict_mode=False))
        >>> root = parser.parse(Path("document.json"))

    """

    def __init__(self, options: MdastJsonParserOptions | None = None):
        """Initialize the mdast JSON parser."""
        BaseParser._validate_options_type(options, MdastJsonParserOptions, "mdast")
        options = options or MdastJsonParserOptions()
        super().__init__(options)
        self.options: MdastJsonParserOptions = options

    def parse(self, input_data: ParserInput) -> Root:
        """Parse mdast JSON input into a Root node.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            JSON text, or a file/stream/bytes holding it

        Returns
        -------
        Root
            AST root node

        Raises
        ------
        ParsingError
            If the JSON is malformed, is not a root object, or (in strict
            mode) contains an unknown node type

        """
        json_str = self._load_text_content(input_data)

        try:
            root = json_to_ast(json_str, strict_mode=self.options.strict_mode)
        except json.JSONDecodeError as e:
            raise ParsingError(
                f"Invalid JSON in mdast input: {e}", parsing_stage="json_parsing", original_error=e
            ) from e
        except (ValueError, TypeError) as e:
            raise ParsingError(
                f"Invalid mdast structure: {e}", parsing_stage="ast_deserialization", original_error=e
            ) from e

        logger.debug("Read mdast tree with %d top-level nodes", len(root.children))
        return root
