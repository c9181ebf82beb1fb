#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2nexus/ast/serialization.py
"""Conversion between AST nodes and mdast JSON.

This module converts node trees to and from the unist/mdast JSON shape used
by other Markdown tool chains (remark, markdown-rs). Node ``type`` values use
the mdast names (``root``, ``blockquote``, ``inlineCode``,
``mdxJsxFlowElement`` and so on), and unist ``position`` objects map to
:class:`SourceLocation`.

Examples
--------
Serialize a tree to JSON:

    >>> from md2nexus.ast import Root, Paragraph, Text
    >>> from md2nexus.ast.serialization import ast_to_json
    >>>
    >>> root = Root(children=[Paragraph(children=[Text(value="hi")])])
    >>> print(ast_to_json(root))
    {"type": "root", "children": [{"type": "paragraph", "children": [{"type": "text", "value": "hi"}]}]}

Read a tree produced by another tool:

    >>> from md2nexus.ast.serialization import json_to_ast
    >>> root = json_to_ast('{"type": "root", "children": []}')
    >>> root.children
    []

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

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
    Yaml,
)

logger = logging.getLogger(__name__)

# Node classes whose payload is a ``children`` list and nothing else
_PARENT_TYPES: dict[type[Node], str] = {
    Root: "root",
    Paragraph: "paragraph",
    BlockQuote: "blockquote",
    ListItem: "listItem",
    TableRow: "tableRow",
    TableCell: "tableCell",
    Emphasis: "emphasis",
    Strong: "strong",
    Delete: "delete",
}

# Node classes whose payload is a literal ``value`` and nothing else
_LITERAL_TYPES: dict[type[Node], str] = {
    Text: "text",
    InlineCode: "inlineCode",
    InlineMath: "inlineMath",
    Math: "math",
    Yaml: "yaml",
    Toml: "toml",
    Html: "html",
    MdxjsEsm: "mdxjsEsm",
    MdxFlowExpression: "mdxFlowExpression",
    MdxTextExpression: "mdxTextExpression",
}


# ============================================================================
# Serialization
# ============================================================================


def _serialize_position(location: SourceLocation) -> dict[str, Any]:
    """Serialize a SourceLocation as a unist position."""
    start: dict[str, Any] = {}
    if location.line is not None:
        start["line"] = location.line
    if location.column is not None:
        start["column"] = location.column
    return {"start": start}


def _finish(result: dict[str, Any], node: Node) -> dict[str, Any]:
    if node.source_location is not None:
        result["position"] = _serialize_position(node.source_location)
    return result


def _children(node: Any) -> list[dict[str, Any]]:
    return [node_to_dict(child) for child in node.children]


def _serialize_heading(node: Heading) -> dict[str, Any]:
    return {"type": "heading", "depth": node.level, "children": _children(node)}


def _serialize_list(node: List) -> dict[str, Any]:
    result: dict[str, Any] = {"type": "list", "ordered": node.ordered}
    if node.start is not None:
        result["start"] = node.start
    result["children"] = _children(node)
    return result


def _serialize_table(node: Table) -> dict[str, Any]:
    return {"type": "table", "align": list(node.align), "children": _children(node)}


def _serialize_code(node: Code) -> dict[str, Any]:
    return {"type": "code", "lang": node.lang, "value": node.value}


def _serialize_link(node: Link) -> dict[str, Any]:
    return {"type": "link", "url": node.url, "title": node.title, "children": _children(node)}


def _serialize_image(node: Image) -> dict[str, Any]:
    return {"type": "image", "url": node.url, "alt": node.alt, "title": node.title}


def _serialize_footnote_reference(node: FootnoteReference) -> dict[str, Any]:
    return {"type": "footnoteReference", "identifier": node.identifier, "label": node.label}


def _serialize_footnote_definition(node: FootnoteDefinition) -> dict[str, Any]:
    return {
        "type": "footnoteDefinition",
        "identifier": node.identifier,
        "label": node.label,
        "children": _children(node),
    }


def _serialize_definition(node: Definition) -> dict[str, Any]:
    return {
        "type": "definition",
        "identifier": node.identifier,
        "label": node.label,
        "url": node.url,
        "title": node.title,
    }


def _serialize_image_reference(node: ImageReference) -> dict[str, Any]:
    return {
        "type": "imageReference",
        "identifier": node.identifier,
        "label": node.label,
        "referenceType": "full",
        "alt": node.alt,
    }


def _serialize_link_reference(node: LinkReference) -> dict[str, Any]:
    return {
        "type": "linkReference",
        "identifier": node.identifier,
        "label": node.label,
        "referenceType": "full",
        "children": _children(node),
    }


def _serialize_jsx_element(node: MdxJsxFlowElement | MdxJsxTextElement, node_type: str) -> dict[str, Any]:
    return {"type": node_type, "name": node.name, "attributes": [], "children": []}


# Dispatch table mapping node classes with extra attributes to their serializers
_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Heading: _serialize_heading,
    List: _serialize_list,
    Table: _serialize_table,
    Code: _serialize_code,
    Link: _serialize_link,
    Image: _serialize_image,
    ThematicBreak: lambda n: {"type": "thematicBreak"},
    Break: lambda n: {"type": "break"},
    FootnoteReference: _serialize_footnote_reference,
    FootnoteDefinition: _serialize_footnote_definition,
    Definition: _serialize_definition,
    ImageReference: _serialize_image_reference,
    LinkReference: _serialize_link_reference,
    MdxJsxFlowElement: lambda n: _serialize_jsx_element(n, "mdxJsxFlowElement"),
    MdxJsxTextElement: lambda n: _serialize_jsx_element(n, "mdxJsxTextElement"),
}


def node_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to an mdast dictionary.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        mdast representation of the node and its subtree

    Raises
    ------
    ValueError
        If the node class has no mdast equivalent

    Examples
    --------
    >>> from md2nexus.ast import Text
    >>> node_to_dict(Text(value="Hello"))
    {'type': 'text', 'value': 'Hello'}

    """
    node_class = type(node)

    if node_class in _PARENT_TYPES:
        return _finish({"type": _PARENT_TYPES[node_class], "children": _children(node)}, node)
    if node_class in _LITERAL_TYPES:
        return _finish({"type": _LITERAL_TYPES[node_class], "value": node.value}, node)  # type: ignore[attr-defined]

    serializer = _SERIALIZATION_DISPATCH.get(node_class)
    if serializer:
        return _finish(serializer(node), node)

    raise ValueError(f"Unknown node type for serialization: {node_class.__name__}")


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to an mdast JSON string.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Indentation passed to ``json.dumps``

    Returns
    -------
    str
        JSON text

    """
    return json.dumps(node_to_dict(node), indent=indent, ensure_ascii=False)


# ============================================================================
# Deserialization
# ============================================================================


def _deserialize_position(data: dict[str, Any]) -> Optional[SourceLocation]:
    """Read a unist ``position`` into a SourceLocation.

    Parameters
    ----------
    data : dict
        Node dictionary that may carry a ``position`` field

    Returns
    -------
    SourceLocation or None
        Start line and column, or None when the node has no position

    """
    position = data.get("position")
    if not isinstance(position, dict):
        return None
    start = position.get("start")
    if not isinstance(start, dict):
        return None
    return SourceLocation(line=start.get("line"), column=start.get("column"))


def _deserialize_children(data: dict[str, Any], strict_mode: bool) -> list[Node]:
    """Deserialize the ``children`` array of a parent node.

    Unknown children are dropped when ``strict_mode`` is False.

    """
    children_data = data.get("children", [])
    if not isinstance(children_data, list):
        raise ValueError(f"'children' of {data.get('type')!r} node must be an array")

    children: list[Node] = []
    for child in children_data:
        node = dict_to_ast(child, strict_mode=strict_mode)
        if node is not None:
            children.append(node)
    return children


def _require(data: dict[str, Any], key: str) -> Any:
    if key not in data:
        raise ValueError(f"{data.get('type')!r} node is missing required field '{key}'")
    return data[key]


def _deserialize_heading(data: dict[str, Any], strict_mode: bool) -> Heading:
    return Heading(
        level=int(data.get("depth", 1)),
        children=_deserialize_children(data, strict_mode),
        source_location=_deserialize_position(data),
    )


def _deserialize_list(data: dict[str, Any], strict_mode: bool) -> List:
    return List(
        ordered=bool(data.get("ordered", False)),
        start=data.get("start"),
        children=_deserialize_children(data, strict_mode),
        source_location=_deserialize_position(data),
    )


def _deserialize_table(data: dict[str, Any], strict_mode: bool) -> Table:
    return Table(
        align=list(data.get("align") or []),
        children=_deserialize_children(data, strict_mode),
        source_location=_deserialize_position(data),
    )


def _deserialize_code(data: dict[str, Any], strict_mode: bool) -> Code:
    return Code(
        value=data.get("value", ""),
        lang=data.get("lang"),
        source_location=_deserialize_position(data),
    )


def _deserialize_link(data: dict[str, Any], strict_mode: bool) -> Link:
    return Link(
        url=_require(data, "url"),
        title=data.get("title"),
        children=_deserialize_children(data, strict_mode),
        source_location=_deserialize_position(data),
    )


def _deserialize_image(data: dict[str, Any], strict_mode: bool) -> Image:
    return Image(
        url=_require(data, "url"),
        alt=data.get("alt") or "",
        title=data.get("title"),
        source_location=_deserialize_position(data),
    )


def _deserialize_footnote_reference(data: dict[str, Any], strict_mode: bool) -> FootnoteReference:
    return FootnoteReference(
        identifier=_require(data, "identifier"),
        label=data.get("label"),
        source_location=_deserialize_position(data),
    )


def _deserialize_footnote_definition(data: dict[str, Any], strict_mode: bool) -> FootnoteDefinition:
    return FootnoteDefinition(
        identifier=_require(data, "identifier"),
        label=data.get("label"),
        children=_deserialize_children(data, strict_mode),
        source_location=_deserialize_position(data),
    )


def _deserialize_definition(data: dict[str, Any], strict_mode: bool) -> Definition:
    return Definition(
        identifier=_require(data, "identifier"),
        url=_require(data, "url"),
        title=data.get("title"),
        label=data.get("label"),
        source_location=_deserialize_position(data),
    )


def _deserialize_image_reference(data: dict[str, Any], strict_mode: bool) -> ImageReference:
    return ImageReference(
        identifier=_require(data, "identifier"),
        alt=data.get("alt") or "",
        label=data.get("label"),
        source_location=_deserialize_position(data),
    )


def _deserialize_link_reference(data: dict[str, Any], strict_mode: bool) -> LinkReference:
    return LinkReference(
        identifier=_require(data, "identifier"),
        label=data.get("label"),
        children=_deserialize_children(data, strict_mode),
        source_location=_deserialize_position(data),
    )


def _deserialize_jsx_flow(data: dict[str, Any], strict_mode: bool) -> MdxJsxFlowElement:
    return MdxJsxFlowElement(name=data.get("name"), source_location=_deserialize_position(data))


def _deserialize_jsx_text(data: dict[str, Any], strict_mode: bool) -> MdxJsxTextElement:
    return MdxJsxTextElement(name=data.get("name"), source_location=_deserialize_position(data))


# Dispatch table mapping mdast type names to deserializer functions
_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], Node]] = {
    "heading": _deserialize_heading,
    "list": _deserialize_list,
    "table": _deserialize_table,
    "code": _deserialize_code,
    "link": _deserialize_link,
    "image": _deserialize_image,
    "thematicBreak": lambda d, s: ThematicBreak(source_location=_deserialize_position(d)),
    "break": lambda d, s: Break(source_location=_deserialize_position(d)),
    "footnoteReference": _deserialize_footnote_reference,
    "footnoteDefinition": _deserialize_footnote_definition,
    "definition": _deserialize_definition,
    "imageReference": _deserialize_image_reference,
    "linkReference": _deserialize_link_reference,
    "mdxJsxFlowElement": _deserialize_jsx_flow,
    "mdxJsxTextElement": _deserialize_jsx_text,
}
_PARENT_CLASSES: dict[str, type[Node]] = {name: cls for cls, name in _PARENT_TYPES.items()}
_LITERAL_CLASSES: dict[str, type[Node]] = {name: cls for cls, name in _LITERAL_TYPES.items()}


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Optional[Node]:
    """Convert an mdast dictionary to an AST node.

    Parameters
    ----------
    data : dict
        mdast representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types.
        If False, log and drop unknown nodes (returns None for them).

    Returns
    -------
    Node or None
        Reconstructed AST node, or None for a dropped node

    Raises
    ------
    ValueError
        If the data is not an object, a required field is missing, or the
        node type is unknown and strict_mode is True

    Examples
    --------
    >>> node = dict_to_ast({"type": "text", "value": "Hello"})
    >>> print(node.value)
    Hello

    """
    if not isinstance(data, dict):
        raise ValueError(f"mdast node must be an object, got {type(data).__name__}")

    node_type = data.get("type")
    if not node_type:
        if strict_mode:
            raise ValueError("mdast node must contain a 'type' field")
        logger.warning("mdast node missing 'type' field, skipping")
        return None

    if node_type in _PARENT_CLASSES:
        return _PARENT_CLASSES[node_type](  # type: ignore[call-arg]
            children=_deserialize_children(data, strict_mode),
            source_location=_deserialize_position(data),
        )
    if node_type in _LITERAL_CLASSES:
        return _LITERAL_CLASSES[node_type](  # type: ignore[call-arg]
            value=data.get("value", ""),
            source_location=_deserialize_position(data),
        )

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if not deserializer:
        if strict_mode:
            raise ValueError(f"Unknown node type: {node_type}")
        logger.warning(f"Unknown node type '{node_type}', skipping")
        return None

    return deserializer(data, strict_mode)


def json_to_ast(json_str: str, strict_mode: bool = True) -> Root:
    """Deserialize an mdast JSON document to a Root node.

    Parameters
    ----------
    json_str : str
        JSON text whose top-level value is an mdast ``root`` object
    strict_mode : bool, default True
        Passed through to :func:`dict_to_ast`

    Returns
    -------
    Root
        Reconstructed document tree

    Raises
    ------
    json.JSONDecodeError
        If the text is not valid JSON
    ValueError
        If the JSON does not describe a root node

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError(f"mdast document must be a JSON object, got {type(data).__name__}")
    if data.get("type") != "root":
        raise ValueError(f"mdast document must have type 'root', got {data.get('type')!r}")

    root = dict_to_ast(data, strict_mode=strict_mode)
    if not isinstance(root, Root):
        raise ValueError(f"mdast document did not build a root node, got {type(root).__name__}")
    return root
