#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for AST node classes and visitor dispatch."""
from unittest.mock import Mock

import pytest

from md2nexus.ast import (
    UNSUPPORTED_NODE_TYPES,
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
    NodeVisitor,
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

DISPATCH_CASES = [
    (Root(), "visit_root"),
    (Paragraph(), "visit_paragraph"),
    (Heading(level=2), "visit_heading"),
    (BlockQuote(), "visit_block_quote"),
    (List(), "visit_list"),
    (ListItem(), "visit_list_item"),
    (Table(), "visit_table"),
    (TableRow(), "visit_table_row"),
    (TableCell(), "visit_table_cell"),
    (ThematicBreak(), "visit_thematic_break"),
    (Code(value="x"), "visit_code"),
    (Math(value="x"), "visit_math"),
    (Yaml(value="x"), "visit_yaml"),
    (Toml(value="x"), "visit_toml"),
    (Html(value="<br>"), "visit_html"),
    (Text(value="x"), "visit_text"),
    (Emphasis(), "visit_emphasis"),
    (Strong(), "visit_strong"),
    (Delete(), "visit_delete"),
    (InlineCode(value="x"), "visit_inline_code"),
    (InlineMath(value="x"), "visit_inline_math"),
    (Link(url="u"), "visit_link"),
    (Image(url="u"), "visit_image"),
    (Break(), "visit_break"),
    (FootnoteReference(identifier="1"), "visit_footnote_reference"),
    (FootnoteDefinition(identifier="1"), "visit_footnote_definition"),
    (Definition(identifier="a", url="u"), "visit_definition"),
    (ImageReference(identifier="a"), "visit_image_reference"),
    (LinkReference(identifier="a"), "visit_link_reference"),
]


@pytest.mark.unit
class TestNodeDispatch:
    """Test that every node kind dispatches to its visit method."""

    @pytest.mark.parametrize("node,method", DISPATCH_CASES)
    def test_accept_calls_matching_visit_method(self, node, method):
        visitor = Mock()
        node.accept(visitor)
        getattr(visitor, method).assert_called_once_with(node)

    def test_accept_forwards_extra_arguments(self):
        visitor = Mock()
        node = Paragraph(children=[Text(value="hi")])
        context = object()

        node.accept(visitor, context)

        visitor.visit_paragraph.assert_called_once_with(node, context)

    @pytest.mark.parametrize("node_class", UNSUPPORTED_NODE_TYPES)
    def test_unsupported_nodes_share_one_visit_method(self, node_class):
        visitor = Mock()
        node = node_class()
        node.accept(visitor, "ctx")
        visitor.visit_unsupported.assert_called_once_with(node, "ctx")


@pytest.mark.unit
class TestNodeConstruction:
    """Test node defaults and validation."""

    def test_heading_level_validation(self):
        with pytest.raises(ValueError, match="Heading level must be 1-6"):
            Heading(level=0)
        with pytest.raises(ValueError):
            Heading(level=7)

    def test_list_defaults(self):
        node = List()
        assert node.ordered is False
        assert node.start is None
        assert node.children == []

    def test_children_lists_are_independent(self):
        first = Paragraph()
        second = Paragraph()
        first.children.append(Text(value="a"))
        assert second.children == []

    def test_image_defaults(self):
        node = Image(url="a.png")
        assert node.alt == ""
        assert node.title is None

    def test_unsupported_categories(self):
        assert MdxjsEsm.category == "mdx/jsx"
        assert MdxFlowExpression.category == "mdx"
        assert MdxTextExpression.category == "mdx"
        assert MdxJsxFlowElement.category == "mdx/jsx"
        assert MdxJsxTextElement.category == "mdx/jsx"

    def test_jsx_element_name(self):
        assert MdxJsxFlowElement(name="Tabs").name == "Tabs"

    def test_source_location_str(self):
        assert str(SourceLocation(line=3, column=5)) == "3:5"
        assert str(SourceLocation(line=3)) == "3"
        assert str(SourceLocation()) == "?"


@pytest.mark.unit
class TestNodeVisitorContract:
    """Test the abstract visitor interface."""

    def test_incomplete_visitor_cannot_be_instantiated(self):
        class TextOnlyVisitor(NodeVisitor):
            def visit_text(self, node, *args):
                return node.value

        with pytest.raises(TypeError):
            TextOnlyVisitor()  # type: ignore[abstract]

    def test_every_node_method_is_abstract(self):
        expected = {method for _, method in DISPATCH_CASES} | {"visit_unsupported"}
        assert expected <= NodeVisitor.__abstractmethods__

    def test_interface_is_only_visit_methods(self):
        public = {name for name in vars(NodeVisitor) if not name.startswith("_")}

        assert public == set(NodeVisitor.__abstractmethods__)
