#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/ast/nodes.py
"""AST node classes for Markdown document representation.

This module defines the closed set of node variants produced by the tree
builders and consumed by the renderers. The node names and payloads follow
the mdast vocabulary so that trees built by the mistune-backed parser and
trees read from mdast JSON are interchangeable.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Container/block nodes own a ``children`` sequence:
    - Root, Paragraph, BlockQuote, List, ListItem, Heading
    - Table, TableRow, TableCell, FootnoteDefinition

Leaf block nodes carry a literal ``value``:
    - ThematicBreak, Code, Math, Yaml, Toml, Html

Inline nodes:
    - Emphasis, Strong, Delete, Link, LinkReference (children)
    - Text, InlineCode, InlineMath, Image, ImageReference, Break,
      FootnoteReference (leaf)

Deferred nodes:
    - Definition, FootnoteDefinition

Unsupported nodes (MDX constructs with no BBCode equivalent):
    - MdxjsEsm, MdxFlowExpression, MdxTextExpression,
      MdxJsxFlowElement, MdxJsxTextElement

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, ClassVar, Literal, Optional

Alignment = Literal["left", "center", "right"]


@dataclass
class SourceLocation:
    """Source location information for AST nodes.

    Parameters
    ----------
    line : int or None, default = None
        1-based line number where the node starts
    column : int or None, default = None
        1-based column number where the node starts

    """

    line: Optional[int] = None
    column: Optional[int] = None

    def __str__(self) -> str:
        """Format as ``line:column`` for diagnostics."""
        if self.line is None:
            return "?"
        if self.column is None:
            return str(self.line)
        return f"{self.line}:{self.column}"


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for traversal and rendering. Extra positional arguments given to
    ``accept`` are forwarded to the visitor method, which lets renderers
    thread an explicit context object through the recursion.

    """

    source_location: Optional[SourceLocation]

    @abstractmethod
    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        *args : Any
            Extra arguments forwarded to the visit method

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Root(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Top-level nodes in the document
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this document.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_root method
        *args : Any
            Extra arguments forwarded to the visit method

        Returns
        -------
        Any
            Result from visitor.visit_root(self, *args)

        """
        return visitor.visit_root(self, *args)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Inline nodes representing paragraph content
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this paragraph.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_paragraph method
        *args : Any
            Extra arguments forwarded to the visit method

        Returns
        -------
        Any
            Result from visitor.visit_paragraph(self, *args)

        """
        return visitor.visit_paragraph(self, *args)


@dataclass
class Heading(Node):
    """Heading node with level and inline content.

    Parameters
    ----------
    level : int
        Heading level (1-6)
    children : list of Node, default = empty list
        Inline nodes representing heading text
    source_location : SourceLocation or None, default = None
        Source location information

    Raises
    ------
    ValueError
        If level is not between 1 and 6

    """

    level: int
    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def __post_init__(self) -> None:
        """Validate heading level."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self, *args)


@dataclass
class BlockQuote(Node):
    """Block quote node containing block-level content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes inside the quote
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this block quote."""
        return visitor.visit_block_quote(self, *args)


@dataclass
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool, default = False
        Whether this is an ordered (numbered) list
    children : list of Node, default = empty list
        List items
    start : int or None, default = None
        Starting number for ordered lists
    source_location : SourceLocation or None, default = None
        Source location information

    """

    ordered: bool = False
    children: list[Node] = field(default_factory=list)
    start: Optional[int] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this list."""
        return visitor.visit_list(self, *args)


@dataclass
class ListItem(Node):
    """List item node containing block-level content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Content of the list item
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this list item."""
        return visitor.visit_list_item(self, *args)


@dataclass
class Table(Node):
    """Table node (GFM extension).

    The first row is the header row when the source had one; rows are not
    otherwise distinguished.

    Parameters
    ----------
    children : list of Node, default = empty list
        Table rows
    align : list, default = empty list
        Column alignments ('left', 'center', 'right', or None)
    source_location : SourceLocation or None, default = None
        Source location information

    """

    children: list[Node] = field(default_factory=list)
    align: list[Optional[Alignment]] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this table."""
        return visitor.visit_table(self, *args)


@dataclass
class TableRow(Node):
    """Table row node containing cells."""

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this table row."""
        return visitor.visit_table_row(self, *args)


@dataclass
class TableCell(Node):
    """Table cell node containing inline content."""

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this table cell."""
        return visitor.visit_table_cell(self, *args)


@dataclass
class ThematicBreak(Node):
    """Thematic break node (horizontal rule)."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this thematic break."""
        return visitor.visit_thematic_break(self, *args)


@dataclass
class Code(Node):
    """Fenced or indented code block.

    Parameters
    ----------
    value : str
        Literal code content, without the trailing newline
    lang : str or None, default = None
        Language from the fence info string
    source_location : SourceLocation or None, default = None
        Source location information

    """

    value: str
    lang: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this code block."""
        return visitor.visit_code(self, *args)


@dataclass
class Math(Node):
    """Display math block.

    Parameters
    ----------
    value : str
        Literal math source (typically LaTeX)
    source_location : SourceLocation or None, default = None
        Source location information

    """

    value: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this math block."""
        return visitor.visit_math(self, *args)


@dataclass
class Yaml(Node):
    """YAML front matter block, kept as literal text."""

    value: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this YAML block."""
        return visitor.visit_yaml(self, *args)


@dataclass
class Toml(Node):
    """TOML front matter block, kept as literal text."""

    value: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this TOML block."""
        return visitor.visit_toml(self, *args)


@dataclass
class Html(Node):
    """Raw HTML, block or inline.

    Parameters
    ----------
    value : str
        Raw HTML markup exactly as it appeared in the source
    source_location : SourceLocation or None, default = None
        Source location information

    """

    value: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this HTML node."""
        return visitor.visit_html(self, *args)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    value : str
        Text content
    source_location : SourceLocation or None, default = None
        Source location information

    """

    value: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this text node."""
        return visitor.visit_text(self, *args)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node containing inline content."""

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this emphasis node."""
        return visitor.visit_emphasis(self, *args)


@dataclass
class Strong(Node):
    """Strong (bold) node containing inline content."""

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this strong node."""
        return visitor.visit_strong(self, *args)


@dataclass
class Delete(Node):
    """Strikethrough node containing inline content (GFM extension)."""

    children: list[Node] = field(default_factory=list)
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this strikethrough node."""
        return visitor.visit_delete(self, *args)


@dataclass
class InlineCode(Node):
    """Inline code span."""

    value: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this code span."""
        return visitor.visit_inline_code(self, *args)


@dataclass
class InlineMath(Node):
    """Inline math span."""

    value: str
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this math span."""
        return visitor.visit_inline_math(self, *args)


@dataclass
class Link(Node):
    """Link node.

    Parameters
    ----------
    url : str
        Link destination URL
    children : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    children: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self, *args)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str
        Image source URL
    alt : str, default = ''
        Alternative text
    title : str or None, default = None
        Optional image title
    source_location : SourceLocation or None, default = None
        Source location information

    """

    url: str
    alt: str = ""
    title: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this image."""
        return visitor.visit_image(self, *args)


@dataclass
class Break(Node):
    """Hard line break."""

    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this line break."""
        return visitor.visit_break(self, *args)


# ============================================================================
# References and deferred definitions
# ============================================================================


@dataclass
class FootnoteReference(Node):
    """Footnote reference marker (e.g. ``[^1]``).

    Parameters
    ----------
    identifier : str
        Normalized footnote identifier
    label : str or None, default = None
        Identifier as written in the source
    source_location : SourceLocation or None, default = None
        Source location information

    """

    identifier: str
    label: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this footnote reference."""
        return visitor.visit_footnote_reference(self, *args)


@dataclass
class FootnoteDefinition(Node):
    """Footnote definition with its block content.

    Parameters
    ----------
    identifier : str
        Normalized footnote identifier
    children : list of Node, default = empty list
        Footnote content
    label : str or None, default = None
        Identifier as written in the source
    source_location : SourceLocation or None, default = None
        Source location information

    """

    identifier: str
    children: list[Node] = field(default_factory=list)
    label: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this footnote definition."""
        return visitor.visit_footnote_definition(self, *args)


@dataclass
class Definition(Node):
    """Link or image reference definition (``[id]: url "title"``).

    Parameters
    ----------
    identifier : str
        Normalized reference identifier
    url : str
        Target URL
    title : str or None, default = None
        Optional title
    label : str or None, default = None
        Identifier as written in the source
    source_location : SourceLocation or None, default = None
        Source location information

    """

    identifier: str
    url: str
    title: Optional[str] = None
    label: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this definition."""
        return visitor.visit_definition(self, *args)


@dataclass
class ImageReference(Node):
    """Image referring to a definition (``![alt][id]``)."""

    identifier: str
    alt: str = ""
    label: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this image reference."""
        return visitor.visit_image_reference(self, *args)


@dataclass
class LinkReference(Node):
    """Link referring to a definition (``[text][id]``)."""

    identifier: str
    children: list[Node] = field(default_factory=list)
    label: Optional[str] = None
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this link reference."""
        return visitor.visit_link_reference(self, *args)


# ============================================================================
# Unsupported nodes
# ============================================================================


@dataclass
class UnsupportedNode(Node):
    """Base for node kinds that have no BBCode rendering.

    Every subclass dispatches to ``visit_unsupported`` so that visitors handle
    the whole closed set in one place. ``category`` names the construct family
    in diagnostics.

    Parameters
    ----------
    value : str, default = ''
        Raw source of the construct, when available
    source_location : SourceLocation or None, default = None
        Source location information

    """

    category: ClassVar[str] = "unsupported"

    value: str = ""
    source_location: Optional[SourceLocation] = None

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this unsupported node."""
        return visitor.visit_unsupported(self, *args)


@dataclass
class MdxjsEsm(UnsupportedNode):
    """MDX ESM ``import``/``export`` block."""

    category: ClassVar[str] = "mdx/jsx"


@dataclass
class MdxFlowExpression(UnsupportedNode):
    """MDX block-level ``{expression}``."""

    category: ClassVar[str] = "mdx"


@dataclass
class MdxTextExpression(UnsupportedNode):
    """MDX inline ``{expression}``."""

    category: ClassVar[str] = "mdx"


@dataclass
class MdxJsxFlowElement(UnsupportedNode):
    """MDX block-level JSX element."""

    category: ClassVar[str] = "mdx/jsx"

    name: Optional[str] = None


@dataclass
class MdxJsxTextElement(UnsupportedNode):
    """MDX inline JSX element."""

    category: ClassVar[str] = "mdx/jsx"

    name: Optional[str] = None


UNSUPPORTED_NODE_TYPES: tuple[type[UnsupportedNode], ...] = (
    MdxjsEsm,
    MdxFlowExpression,
    MdxTextExpression,
    MdxJsxFlowElement,
    MdxJsxTextElement,
)
