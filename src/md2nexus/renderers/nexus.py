#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/renderers/nexus.py
"""NexusMods BBCode rendering from AST.

This module provides the NexusRenderer class which converts AST nodes to the
BBCode dialect accepted by NexusMods mod pages.

The dialect has no block model of its own, so every block construct emits
its own leading and trailing newlines and one normalization pass at the end
cleans up the blank lines that pile up between blocks.

Render state is explicit. Each visit method receives the :class:`RenderState`
of its caller and returns a :class:`Rendered` pair: the text for the node and
an optional :class:`StateEffect` that the caller applies to that state. Link
definitions and footnotes are captured this way and emitted at the end of the
document; table rows and cells are collected the same way into a grid.

"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import NamedTuple, Optional, Sequence

from md2nexus.ast.nodes import (
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
    UnsupportedNode,
    Yaml,
)
from md2nexus.ast.visitors import NodeVisitor
from md2nexus.constants import FOOTNOTE_MARKER, LIST_ITEM_MARKER, THEMATIC_BREAK_TAG
from md2nexus.options.nexus import NexusRendererOptions
from md2nexus.renderers._grid import render_grid
from md2nexus.renderers.base import BaseRenderer

logger = logging.getLogger(__name__)

_EXCESS_NEWLINES = re.compile(r"\n{3,}")
_MARKER_NEWLINES = re.compile(re.escape(LIST_ITEM_MARKER) + r"\n+")


@dataclass
class TableAccumulator:
    """Rows of plain cell text collected while rendering one table."""

    rows: list[list[str]] = field(default_factory=list)


@dataclass
class RenderState:
    """Mutable state for one render pass or one table/row sub-pass.

    Parameters
    ----------
    definitions : list of Definition
        Link definitions captured so far, in document order
    footnotes : list of FootnoteDefinition
        Footnote definitions captured so far, in document order
    table : TableAccumulator or None
        Present only while rendering the children of a Table
    row : list of str or None
        Present only while rendering the children of a TableRow

    """

    definitions: list[Definition] = field(default_factory=list)
    footnotes: list[FootnoteDefinition] = field(default_factory=list)
    table: Optional[TableAccumulator] = None
    row: Optional[list[str]] = None

    @property
    def in_table(self) -> bool:
        """Whether inline formatting must be suppressed for cell text."""
        return self.table is not None or self.row is not None


class StateEffect(ABC):
    """A change to a RenderState requested by a visit method."""

    @abstractmethod
    def apply(self, state: RenderState) -> None:
        """Apply this effect to ``state``."""


@dataclass(frozen=True)
class CaptureDefinition(StateEffect):
    """Queue a link definition for the end of the document."""

    definition: Definition

    def apply(self, state: RenderState) -> None:
        state.definitions.append(self.definition)


@dataclass(frozen=True)
class CaptureFootnote(StateEffect):
    """Queue a footnote for the end of the document."""

    footnote: FootnoteDefinition

    def apply(self, state: RenderState) -> None:
        state.footnotes.append(self.footnote)


@dataclass(frozen=True)
class AppendRow(StateEffect):
    """Add a finished row to the enclosing table, if there is one."""

    cells: tuple[str, ...]

    def apply(self, state: RenderState) -> None:
        if state.table is not None:
            state.table.rows.append(list(self.cells))


@dataclass(frozen=True)
class AppendCell(StateEffect):
    """Add one cell's text to the enclosing row, if there is one."""

    text: str

    def apply(self, state: RenderState) -> None:
        if state.row is not None:
            state.row.append(self.text)


class Rendered(NamedTuple):
    """Result of visiting one node: output text plus an optional state change."""

    text: str
    effect: Optional[StateEffect] = None


class NexusRenderer(NodeVisitor, BaseRenderer):
    """Render AST to NexusMods BBCode.

    Parameters
    ----------
    options : NexusRendererOptions or None, default = None
        BBCode rendering options

    Examples
    --------
    Basic usage:

        >>> from md2nexus.ast import Root, Paragraph, Text, Strong
        >>> root = Root(children=[Paragraph(children=[Text(value="Hello "), Strong(children=[Text(value="world")])])])
        >>> NexusRenderer().render_to_string(root)
        'Hello \\n[b]world[/b]'

    """

    def __init__(self, options: NexusRendererOptions | None = None):
        """Initialize the BBCode renderer with options."""
        BaseRenderer._validate_options_type(options, NexusRendererOptions, "nexus")
        options = options or NexusRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: NexusRendererOptions = options

    def render_to_string(self, doc: Root) -> str:
        """Render a document AST to a BBCode string.

        Link definitions and footnotes are collected during the walk and
        appended after the body. Footnote bodies are rendered against the
        same collection, so a definition or footnote nested inside a
        footnote is appended as well. The result is trimmed, runs of three or
        more newlines are collapsed to two, and newlines directly after a
        list marker are removed.

        Parameters
        ----------
        doc : Root
            The document node to render

        Returns
        -------
        str
            BBCode text

        """
        if not doc.children:
            return ""

        state = RenderState()
        body = self._render_children(doc.children, state)

        # Footnote bodies render against the same state, so the list may grow while it is walked.
        footnote_lines = []
        index = 0
        while index < len(state.footnotes):
            footnote = state.footnotes[index]
            content = self._render_children(footnote.children, state).strip()
            footnote_lines.append(f"\n{FOOTNOTE_MARKER}{footnote.identifier}: {content}")
            index += 1

        definitions = "\n".join(
            f"\n{FOOTNOTE_MARKER}{d.identifier}: [url={d.url}]{d.title or d.identifier}[/url]"
            for d in state.definitions
        )
        footnotes = "\n".join(footnote_lines)

        result = (body + definitions + footnotes).strip()
        result = _EXCESS_NEWLINES.sub("\n\n", result)
        return _MARKER_NEWLINES.sub(LIST_ITEM_MARKER, result)

    def _render_children(self, nodes: Sequence[Node], state: RenderState) -> str:
        """Render nodes in order, applying each returned effect to ``state``.

        Parameters
        ----------
        nodes : sequence of Node
            Sibling nodes to render
        state : RenderState
            State the effects are applied to

        Returns
        -------
        str
            Concatenated output of all nodes

        """
        parts = []
        for node in nodes:
            rendered: Rendered = node.accept(self, state)
            if rendered.effect is not None:
                rendered.effect.apply(state)
            parts.append(rendered.text)
        return "".join(parts)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_root(self, node: Root, state: RenderState) -> Rendered:
        """Render a nested Root node by rendering its children."""
        return Rendered(self._render_children(node.children, state))

    def visit_paragraph(self, node: Paragraph, state: RenderState) -> Rendered:
        """Render a Paragraph node surrounded by newlines."""
        return Rendered(f"\n{self._render_children(node.children, state)}\n")

    def visit_heading(self, node: Heading, state: RenderState) -> Rendered:
        """Render a Heading node.

        The dialect has no heading levels, so every level uses the configured
        ``[size]`` and the level itself is ignored.

        """
        content = self._render_children(node.children, state)
        return Rendered(f"\n[size={self.options.heading_size}]{content}[/size]\n\n")

    def visit_block_quote(self, node: BlockQuote, state: RenderState) -> Rendered:
        return Rendered(f"[quote]{self._render_children(node.children, state)}[/quote]\n")

    def visit_list(self, node: List, state: RenderState) -> Rendered:
        """Render a List node as ``[list]`` or ``[list=1]``.

        The start number of an ordered list is not representable and is
        ignored.

        """
        tag = "[list=1]" if node.ordered else "[list]"
        return Rendered(f"\n{tag}\n{self._render_children(node.children, state)}[/list]")

    def visit_list_item(self, node: ListItem, state: RenderState) -> Rendered:
        """Render a ListItem node with a ``[*]`` marker."""
        content = self._render_children(node.children, state)
        if not content.endswith("\n"):
            content += "\n"
        return Rendered(f"{LIST_ITEM_MARKER}{content}")

    def visit_table(self, node: Table, state: RenderState) -> Rendered:
        """Render a Table node as a plain-text grid inside ``[code]``.

        Rows are collected into a fresh state so nothing leaks into
        sibling tables or the enclosing document.

        """
        table_state = RenderState(table=TableAccumulator())
        self._render_children(node.children, table_state)
        if table_state.table is None:
            return Rendered("")
        return Rendered(f"[code]{render_grid(table_state.table.rows)}[/code]\n")

    def visit_table_row(self, node: TableRow, state: RenderState) -> Rendered:
        """Collect a TableRow's cells and hand the row to the enclosing table.

        Outside a table this renders nothing.

        """
        if state.table is None:
            return Rendered("")
        row_state = RenderState(row=[])
        self._render_children(node.children, row_state)
        return Rendered("", AppendRow(tuple(row_state.row or ())))

    def visit_table_cell(self, node: TableCell, state: RenderState) -> Rendered:
        """Render a TableCell to plain text for the enclosing row.

        Outside a row this renders nothing.

        """
        if state.row is None:
            return Rendered("")
        return Rendered("", AppendCell(self._render_children(node.children, state)))

    def visit_thematic_break(self, node: ThematicBreak, state: RenderState) -> Rendered:
        return Rendered(f"\n\n{THEMATIC_BREAK_TAG}\n\n")

    def visit_code(self, node: Code, state: RenderState) -> Rendered:
        """Render a Code block. The language is dropped."""
        return Rendered(f"\n[code]{node.value}[/code]\n")

    def visit_math(self, node: Math, state: RenderState) -> Rendered:
        """Render a Math block as code, the dialect has no math support."""
        return Rendered(f"\n[code]{node.value}[/code]\n")

    def visit_yaml(self, node: Yaml, state: RenderState) -> Rendered:
        return Rendered(f"\n[code]{node.value}[/code]\n\n")

    def visit_toml(self, node: Toml, state: RenderState) -> Rendered:
        return Rendered(f"\n[code]{node.value}[/code]\n\n")

    def visit_html(self, node: Html, state: RenderState) -> Rendered:
        """Pass raw HTML through unchanged."""
        return Rendered(node.value)

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text, state: RenderState) -> Rendered:
        return Rendered(node.value)

    def visit_emphasis(self, node: Emphasis, state: RenderState) -> Rendered:
        return Rendered(f"[i]{self._render_children(node.children, state)}[/i]")

    def visit_strong(self, node: Strong, state: RenderState) -> Rendered:
        return Rendered(f"\n[b]{self._render_children(node.children, state)}[/b]\n")

    def visit_delete(self, node: Delete, state: RenderState) -> Rendered:
        return Rendered(f"[s]{self._render_children(node.children, state)}[/s]")

    def _monospace(self, value: str, state: RenderState) -> Rendered:
        if state.in_table:
            return Rendered(value)
        return Rendered(f'[font="{self.options.monospace_font}"]{value}[/font]')

    def visit_inline_code(self, node: InlineCode, state: RenderState) -> Rendered:
        """Render inline code in the monospace font, or bare inside a table."""
        return self._monospace(node.value, state)

    def visit_inline_math(self, node: InlineMath, state: RenderState) -> Rendered:
        """Render inline math in the monospace font, or bare inside a table."""
        return self._monospace(node.value, state)

    def visit_link(self, node: Link, state: RenderState) -> Rendered:
        """Render a Link node. The title is dropped."""
        return Rendered(f"[url={node.url}]{self._render_children(node.children, state)}[/url]")

    def visit_image(self, node: Image, state: RenderState) -> Rendered:
        """Render an Image node. Alt text and title are dropped."""
        return Rendered(f"[img]{node.url}[/img]")

    def visit_break(self, node: Break, state: RenderState) -> Rendered:
        """Render a hard line break as a paragraph break."""
        return Rendered("\n\n")

    # ------------------------------------------------------------------
    # References and deferred definitions
    # ------------------------------------------------------------------

    def visit_footnote_reference(self, node: FootnoteReference, state: RenderState) -> Rendered:
        return Rendered(f"(See {FOOTNOTE_MARKER}{node.identifier})")

    def visit_footnote_definition(self, node: FootnoteDefinition, state: RenderState) -> Rendered:
        """Capture a footnote; it is rendered after the body."""
        return Rendered("", CaptureFootnote(node))

    def visit_definition(self, node: Definition, state: RenderState) -> Rendered:
        """Capture a link definition; it is rendered after the body."""
        return Rendered("", CaptureDefinition(node))

    def visit_image_reference(self, node: ImageReference, state: RenderState) -> Rendered:
        """Render an ImageReference as a placeholder.

        The reference is not resolved against its definition.

        """
        return Rendered(f"[{node.identifier}] {node.alt}")

    def visit_link_reference(self, node: LinkReference, state: RenderState) -> Rendered:
        """Render a LinkReference as a placeholder.

        The reference is not resolved against its definition.

        """
        return Rendered(f"(See {node.identifier}; {self._render_children(node.children, state)})")

    def visit_unsupported(self, node: UnsupportedNode, state: RenderState) -> Rendered:
        """Drop an MDX construct, logging one warning per occurrence."""
        logger.warning("%s not supported in nexus bbcode", node.category)
        return Rendered("")
