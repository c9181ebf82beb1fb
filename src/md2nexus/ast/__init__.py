#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/ast/__init__.py
"""Abstract Syntax Tree (AST) module for Markdown document representation.

The tree builders (the mistune-backed Markdown parser and the mdast JSON
reader) produce these nodes and the renderers consume them, so parsing and
rendering stay independent of each other.

The module consists of several components:

- nodes: AST node classes for the closed set of mdast constructs
- visitors: Visitor base class with one abstract method per node kind
- serialization: conversion to and from mdast JSON

Examples
--------
Basic usage:

    >>> from md2nexus.ast import Root, Heading, Paragraph, Text
    >>> from md2nexus.renderers.nexus import NexusRenderer
    >>>
    >>> root = Root(children=[
    ...     Heading(level=1, children=[Text(value="Title")]),
    ...     Paragraph(children=[Text(value="Hello world")])
    ... ])
    >>> NexusRenderer().render_to_string(root)
    '[size=5]Title[/size]\\n\\nHello world'

"""

from __future__ import annotations

from md2nexus.ast.nodes import (
    UNSUPPORTED_NODE_TYPES,
    Alignment,
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
    MdxFlowExpression,
    MdxjsEsm,
    MdxJsxFlowElement,
    MdxJsxTextElement,
    MdxTextExpression,
    Node,
    Paragraph,
    Root,
    SourceLocation,
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
from md2nexus.ast.serialization import ast_to_json, dict_to_ast, json_to_ast, node_to_dict
from md2nexus.ast.visitors import NodeVisitor

__all__ = [
    # Core node types
    "Node",
    "SourceLocation",
    "Alignment",
    "Root",
    "Paragraph",
    "Heading",
    "BlockQuote",
    "List",
    "ListItem",
    "Table",
    "TableRow",
    "TableCell",
    "ThematicBreak",
    "Code",
    "Math",
    "Yaml",
    "Toml",
    "Html",
    "Text",
    "Emphasis",
    "Strong",
    "Delete",
    "InlineCode",
    "InlineMath",
    "Link",
    "Image",
    "Break",
    "FootnoteReference",
    "FootnoteDefinition",
    "Definition",
    "ImageReference",
    "LinkReference",
    # Unsupported node kinds
    "UnsupportedNode",
    "MdxjsEsm",
    "MdxFlowExpression",
    "MdxTextExpression",
    "MdxJsxFlowElement",
    "MdxJsxTextElement",
    "UNSUPPORTED_NODE_TYPES",
    # Visitors
    "NodeVisitor",
    # Serialization
    "node_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
