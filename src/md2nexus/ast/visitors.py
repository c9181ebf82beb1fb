#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for traversing and processing
AST nodes. Every node kind in the closed set has an abstract ``visit_*``
method, so a concrete visitor that forgets a kind cannot be instantiated.
The MDX node kinds share a single ``visit_unsupported`` method.

Extra positional arguments passed to ``Node.accept`` are forwarded to the
visit method. Renderers use this to thread an explicit state object through
the recursion instead of keeping it on the visitor.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses must implement a visit_* method for each node kind. The
    visitor pattern allows algorithms to be separated from the node
    structure.

    Examples
    --------
    Visitor that collects plain text:

        >>> class TextCollector(NodeVisitor):
        ...     def visit_text(self, node, *args):
        ...         return node.value
        ...     # remaining visit_* methods omitted

    """

    @abstractmethod
    def visit_root(self, node: Root, *args: Any) -> Any:
        """Visit a Root node.

        Parameters
        ----------
        node : Root
            The root node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, *args: Any) -> Any:
        """Visit a Paragraph node.

        Parameters
        ----------
        node : Paragraph
            The paragraph node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_heading(self, node: Heading, *args: Any) -> Any:
        """Visit a Heading node.

        Parameters
        ----------
        node : Heading
            The heading node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote, *args: Any) -> Any:
        """Visit a BlockQuote node.

        Parameters
        ----------
        node : BlockQuote
            The block quote node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list(self, node: List, *args: Any) -> Any:
        """Visit a List node.

        Parameters
        ----------
        node : List
            The list node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem, *args: Any) -> Any:
        """Visit a ListItem node.

        Parameters
        ----------
        node : ListItem
            The list item node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table(self, node: Table, *args: Any) -> Any:
        """Visit a Table node.

        Parameters
        ----------
        node : Table
            The table node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table_row(self, node: TableRow, *args: Any) -> Any:
        """Visit a TableRow node.

        Parameters
        ----------
        node : TableRow
            The table row node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_table_cell(self, node: TableCell, *args: Any) -> Any:
        """Visit a TableCell node.

        Parameters
        ----------
        node : TableCell
            The table cell node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak, *args: Any) -> Any:
        """Visit a ThematicBreak node.

        Parameters
        ----------
        node : ThematicBreak
            The thematic break node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_code(self, node: Code, *args: Any) -> Any:
        """Visit a Code node.

        Parameters
        ----------
        node : Code
            The code node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_math(self, node: Math, *args: Any) -> Any:
        """Visit a Math node.

        Parameters
        ----------
        node : Math
            The math node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_yaml(self, node: Yaml, *args: Any) -> Any:
        """Visit a Yaml node.

        Parameters
        ----------
        node : Yaml
            The yaml node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_toml(self, node: Toml, *args: Any) -> Any:
        """Visit a Toml node.

        Parameters
        ----------
        node : Toml
            The toml node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_html(self, node: Html, *args: Any) -> Any:
        """Visit an Html node.

        Parameters
        ----------
        node : Html
            The html node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_text(self, node: Text, *args: Any) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis, *args: Any) -> Any:
        """Visit an Emphasis node.

        Parameters
        ----------
        node : Emphasis
            The emphasis node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_strong(self, node: Strong, *args: Any) -> Any:
        """Visit a Strong node.

        Parameters
        ----------
        node : Strong
            The strong node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_delete(self, node: Delete, *args: Any) -> Any:
        """Visit a Delete node.

        Parameters
        ----------
        node : Delete
            The delete node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_inline_code(self, node: InlineCode, *args: Any) -> Any:
        """Visit an InlineCode node.

        Parameters
        ----------
        node : InlineCode
            The inline code node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_inline_math(self, node: InlineMath, *args: Any) -> Any:
        """Visit an InlineMath node.

        Parameters
        ----------
        node : InlineMath
            The inline math node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_link(self, node: Link, *args: Any) -> Any:
        """Visit a Link node.

        Parameters
        ----------
        node : Link
            The link node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_image(self, node: Image, *args: Any) -> Any:
        """Visit an Image node.

        Parameters
        ----------
        node : Image
            The image node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_break(self, node: Break, *args: Any) -> Any:
        """Visit a Break node.

        Parameters
        ----------
        node : Break
            The break node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference, *args: Any) -> Any:
        """Visit a FootnoteReference node.

        Parameters
        ----------
        node : FootnoteReference
            The footnote reference node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition, *args: Any) -> Any:
        """Visit a FootnoteDefinition node.

        Parameters
        ----------
        node : FootnoteDefinition
            The footnote definition node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_definition(self, node: Definition, *args: Any) -> Any:
        """Visit a Definition node.

        Parameters
        ----------
        node : Definition
            The definition node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_image_reference(self, node: ImageReference, *args: Any) -> Any:
        """Visit an ImageReference node.

        Parameters
        ----------
        node : ImageReference
            The image reference node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_link_reference(self, node: LinkReference, *args: Any) -> Any:
        """Visit a LinkReference node.

        Parameters
        ----------
        node : LinkReference
            The link reference node to visit
        *args : Any
            Extra arguments forwarded from accept

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_unsupported(self, node: UnsupportedNode, *args: Any) -> Any:
        """Visit a node kind that the target format cannot express.

        Parameters
        ----------
        node : UnsupportedNode
            The unsupported node; ``node.category`` names its family
        *args : Any
            Extra arguments forwarded from ``accept``

        Returns
        -------
        Any
            Result of processing this node

        """
        pass
