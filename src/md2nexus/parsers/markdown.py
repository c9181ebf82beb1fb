#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/parsers/markdown.py
"""Markdown to AST converter.

This module builds the mdast-style tree from GitHub-flavored Markdown using
mistune in AST mode. mistune resolves reference links while parsing; the
converter keeps the reference identifiers so the renderer can emit its
placeholder forms, and turns the collected link definitions back into
:class:`Definition` nodes.

"""

from __future__ import annotations

import logging
from typing import Any, Callable

import mistune

from md2nexus.ast import (
    BlockQuote,
    Break,
    Code,
    Definition,
    Delete,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Html,
    Image,
    ImageReference,
    InlineCode,
    InlineMath,
    Link,
    LinkReference,
    List,
    ListItem,
    Math,
    Node,
    Paragraph,
    Root,
    Strong,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    Toml,
    Yaml,
)
from md2nexus.exceptions import ParsingError
from md2nexus.options.markdown import MarkdownParserOptions
from md2nexus.parsers.base import BaseParser, ParserInput

logger = logging.getLogger(__name__)

# Front matter fences and the node class each one produces
_FRONTMATTER_FENCES: tuple[tuple[str, type[Yaml] | type[Toml]], ...] = (("---", Yaml), ("+++", Toml))


class MarkdownParser(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> parser = MarkdownParser()
        >>> root = parser.parse("# Hello\\n\\nThis is **bold**.")

    Without tables:

        >>> parser = MarkdownParser(MarkdownParserOptions(parse_tables=False))
        >>> root = parser.parse("| a |\\n|---|\\n| b |")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    def _plugins(self) -> list[str]:
        """Return the mistune plugin names enabled by the options."""
        plugins = []
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_footnotes:
            plugins.append("footnotes")
        if self.options.parse_math:
            plugins.append("math")
        if self.options.parse_autolinks:
            plugins.append("url")
        return plugins

    def parse(self, input_data: ParserInput) -> Root:
        """Parse Markdown input into an AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markdown text, or a file/stream/bytes holding it

        Returns
        -------
        Root
            AST root node

        Raises
        ------
        ParsingError
            If mistune fails on the input

        """
        markdown_content = self._load_text_content(input_data)

        children: list[Node] = []
        frontmatter, markdown_content = self._extract_frontmatter(markdown_content)
        if frontmatter is not None:
            children.append(frontmatter)

        markdown = mistune.create_markdown(plugins=self._plugins(), renderer=None)
        try:
            tokens, state = markdown.parse(markdown_content)
        except Exception as e:
            raise ParsingError(f"Failed to parse Markdown: {e}", parsing_stage="tokenize", original_error=e) from e

        if isinstance(tokens, list):
            children.extend(self._process_tokens(tokens))

        children.extend(self._collect_definitions(state))
        logger.debug("Parsed Markdown into %d top-level nodes", len(children))
        return Root(children=children)

    def _extract_frontmatter(self, content: str) -> tuple[Yaml | Toml | None, str]:
        """Split a leading ``---`` or ``+++`` block off the content.

        Parameters
        ----------
        content : str
            Markdown content that may start with front matter

        Returns
        -------
        tuple
            (front matter node or None, remaining content)

        """
        if not self.options.parse_frontmatter:
            return None, content

        for fence, node_class in _FRONTMATTER_FENCES:
            if not (content.startswith(fence + "\n") or content.startswith(fence + "\r\n")):
                continue

            lines = content.splitlines(keepends=True)
            for end_index in range(1, len(lines)):
                if lines[end_index].rstrip("\r\n") == fence:
                    value = "".join(lines[1:end_index]).rstrip("\r\n")
                    remaining = "".join(lines[end_index + 1 :])
                    return node_class(value=value), remaining

        return None, content

    def _collect_definitions(self, state: Any) -> list[Definition]:
        """Turn the link reference definitions mistune collected into nodes.

        Parameters
        ----------
        state : mistune.BlockState
            Parser state returned by ``Markdown.parse``

        Returns
        -------
        list of Definition
            One node per definition, in order of appearance

        """
        env = getattr(state, "env", None) or {}
        ref_links = env.get("ref_links") or {}

        definitions = []
        for key, attrs in ref_links.items():
            if not isinstance(attrs, dict):
                continue
            definitions.append(
                Definition(
                    identifier=key.lower(),
                    url=attrs.get("url", ""),
                    title=attrs.get("title"),
                    label=attrs.get("label"),
                )
            )
        return definitions

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of block-level mistune tokens into AST nodes.

        Parameters
        ----------
        tokens : list of dict
            Mistune token dictionaries

        Returns
        -------
        list of Node
            AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                if isinstance(node, list):
                    nodes.extend(node)
                else:
                    nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single block-level mistune token.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node, list of Node, or None
            Resulting AST node(s)

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is used for tight list items
            return Paragraph(children=self._process_inline_tokens(token.get("children", [])))
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type in ("list_item", "task_list_item"):
            return ListItem(children=self._process_tokens(token.get("children", [])))
        elif token_type == "table":
            return self._process_table(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return Html(value=token.get("raw", ""))
        elif token_type == "block_math":
            return Math(value=token.get("raw", "").strip("\n"))
        elif token_type == "footnotes":
            return self._process_footnotes(token)
        elif token_type == "blank_line":
            return None

        logger.debug("Skipping unhandled block token type '%s'", token_type)
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token.

        Parameters
        ----------
        token : dict
            Heading token with 'attrs' (level) and 'children'

        Returns
        -------
        Heading
            Heading AST node

        """
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        return Heading(level=level, children=self._process_inline_tokens(token.get("children", [])))

    def _process_code_block(self, token: dict[str, Any]) -> Code:
        """Process a fenced or indented code block token."""
        raw = token.get("raw", "")
        if raw.endswith("\n"):
            raw = raw[:-1]

        attrs = token.get("attrs", {})
        info = attrs.get("info") if isinstance(attrs, dict) else None
        lang = info.strip().split(maxsplit=1)[0] if info and info.strip() else None

        return Code(value=raw, lang=lang)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token.

        Parameters
        ----------
        token : dict
            List token with 'children' and 'attrs' (ordered, start)

        Returns
        -------
        List
            List AST node

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = bool(attrs.get("ordered", False))
        start = attrs.get("start", 1) if ordered else None

        children = token.get("children", [])
        if not isinstance(children, list):
            children = []

        items: list[Node] = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in children
            if isinstance(child, dict)
        ]
        return List(ordered=ordered, start=start, children=items)

    def _process_table(self, token: dict[str, Any]) -> Table:
        """Process table token.

        The header row becomes the first TableRow; body rows follow.

        Parameters
        ----------
        token : dict
            Table token with 'table_head' and 'table_body' children

        Returns
        -------
        Table
            Table AST node

        """
        rows: list[Node] = []
        align: list[Any] = []

        for part in token.get("children", []):
            part_type = part.get("type", "")
            if part_type == "table_head":
                # Header cells are direct children of table_head
                head_cells = part.get("children", [])
                align = [cell.get("attrs", {}).get("align") for cell in head_cells]
                rows.append(TableRow(children=self._process_table_cells(head_cells)))
            elif part_type == "table_body":
                for row_token in part.get("children", []):
                    rows.append(TableRow(children=self._process_table_cells(row_token.get("children", []))))

        return Table(children=rows, align=align)

    def _process_table_cells(self, cell_tokens: list[dict[str, Any]]) -> list[Node]:
        return [
            TableCell(children=self._process_inline_tokens(cell.get("children", [])))
            for cell in cell_tokens
            if cell.get("type") == "table_cell"
        ]

    def _process_footnotes(self, token: dict[str, Any]) -> list[Node]:
        """Process the footnotes section mistune appends after the document.

        Parameters
        ----------
        token : dict
            The 'footnotes' token holding one 'footnote_item' per used footnote

        Returns
        -------
        list of Node
            FootnoteDefinition nodes in order of first reference

        """
        definitions: list[Node] = []
        for item in token.get("children", []):
            if item.get("type") != "footnote_item":
                continue
            attrs = item.get("attrs", {})
            definitions.append(
                FootnoteDefinition(
                    identifier=attrs.get("key", "").lower(),
                    children=self._process_tokens(item.get("children", [])),
                )
            )
        return definitions

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)

        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token."""
        return Text(value=token.get("raw", ""))

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Text:
        """Handle softbreak token."""
        return Text(value="\n")

    def _handle_linebreak_token(self, token: dict[str, Any]) -> Break:
        """Handle linebreak token."""
        return Break()

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        """Handle strong token."""
        return Strong(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token."""
        return Emphasis(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_strikethrough_token(self, token: dict[str, Any]) -> Delete:
        """Handle strikethrough token."""
        return Delete(children=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> InlineCode:
        """Handle codespan token."""
        return InlineCode(value=token.get("raw", ""))

    def _handle_inline_math_token(self, token: dict[str, Any]) -> InlineMath:
        """Handle inline_math token."""
        return InlineMath(value=token.get("raw", ""))

    def _handle_inline_html_token(self, token: dict[str, Any]) -> Html:
        """Handle inline_html token."""
        return Html(value=token.get("raw", ""))

    def _handle_footnote_ref_token(self, token: dict[str, Any]) -> FootnoteReference:
        """Handle footnote_ref token."""
        identifier = token.get("raw")
        if not identifier:
            attrs = token.get("attrs", {})
            identifier = attrs.get("label", "") if isinstance(attrs, dict) else ""
        return FootnoteReference(identifier=identifier.lower())

    def _handle_link_token(self, token: dict[str, Any]) -> Link | LinkReference:
        """Handle link token.

        Links resolved through a reference definition carry 'ref' and 'label'
        keys and become LinkReference nodes.

        """
        children = self._process_inline_tokens(token.get("children", []))
        if token.get("ref"):
            return LinkReference(identifier=token["ref"].lower(), label=token.get("label"), children=children)

        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(url=attrs.get("url", ""), title=attrs.get("title"), children=children)

    def _handle_image_token(self, token: dict[str, Any]) -> Image | ImageReference:
        """Handle image token."""
        # Alt text is in children, not attrs
        alt = "".join(self._plain_text(child) for child in token.get("children", []))
        if token.get("ref"):
            return ImageReference(identifier=token["ref"].lower(), label=token.get("label"), alt=alt)

        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Image(url=attrs.get("url", ""), alt=alt, title=attrs.get("title"))

    def _plain_text(self, token: dict[str, Any]) -> str:
        """Flatten an inline token to its text content."""
        if not isinstance(token, dict):
            return ""
        if "children" in token:
            return "".join(self._plain_text(child) for child in token["children"])
        if token.get("type") == "softbreak":
            return " "
        return token.get("raw", "")

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node, or None for unknown token types

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Callable[[dict[str, Any]], Node]] = {
            "text": self._handle_text_token,
            "softbreak": self._handle_softbreak_token,
            "linebreak": self._handle_linebreak_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "strikethrough": self._handle_strikethrough_token,
            "codespan": self._handle_codespan_token,
            "inline_math": self._handle_inline_math_token,
            "inline_html": self._handle_inline_html_token,
            "footnote_ref": self._handle_footnote_ref_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)

        logger.debug("Skipping unhandled inline token type '%s'", token_type)
        return None


def markdown_to_ast(markdown_content: str, options: MarkdownParserOptions | None = None) -> Root:
    r"""Convert a Markdown string to an AST.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Root
        AST root node

    Examples
    --------
    >>> from md2nexus.parsers.markdown import markdown_to_ast
    >>> root = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(root.children)
    2

    """
    return MarkdownParser(options).parse(markdown_content)
