#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the NexusMods BBCode renderer."""
import logging
from io import StringIO

import pytest

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
    MdxFlowExpression,
    MdxjsEsm,
    MdxJsxFlowElement,
    MdxJsxTextElement,
    MdxTextExpression,
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
from md2nexus.exceptions import InvalidOptionsError
from md2nexus.options import MarkdownParserOptions, NexusRendererOptions
from md2nexus.renderers.nexus import (
    AppendCell,
    AppendRow,
    CaptureDefinition,
    CaptureFootnote,
    NexusRenderer,
    Rendered,
    RenderState,
    TableAccumulator,
)


def render(*children, **options) -> str:
    """Render top-level nodes with optional NexusRendererOptions fields."""
    renderer = NexusRenderer(NexusRendererOptions(**options) if options else None)
    return renderer.render_to_string(Root(children=list(children)))


def text_cell(value: str) -> TableCell:
    return TableCell(children=[Text(value=value)])


@pytest.mark.unit
class TestScenarios:
    """End-to-end behaviour on small trees."""

    def test_single_paragraph_is_trimmed(self):
        assert render(Paragraph(children=[Text(value="hi")])) == "hi"

    def test_unordered_list(self):
        items = [ListItem(children=[Text(value="a")]), ListItem(children=[Text(value="b")])]
        tree = List(ordered=False, children=items)
        assert render(tree) == "[list]\n[*]a\n[*]b\n[/list]"

    def test_list_items_with_paragraphs_have_no_newline_after_marker(self):
        tree = List(
            children=[
                ListItem(children=[Paragraph(children=[Text(value="a")])]),
                ListItem(children=[Paragraph(children=[Text(value="b")])]),
            ]
        )
        assert render(tree) == "[list]\n[*]a\n[*]b\n[/list]"

    def test_footnote_reference_and_definition(self):
        result = render(
            Paragraph(children=[FootnoteReference(identifier="1")]),
            FootnoteDefinition(identifier="1", children=[Text(value="note")]),
        )

        assert result == "(See ^1)\n\n^1: note"
        assert result.count("^1: note") == 1

    def test_single_row_table(self):
        tree = Table(children=[TableRow(children=[text_cell("a"), text_cell("b")])])
        assert render(tree) == "[code]+---+---+\n| a | b |\n+---+---+\n[/code]"

    def test_unsupported_node_renders_empty_with_one_warning(self, caplog):
        tree = Paragraph(children=[Text(value="a"), MdxTextExpression(value="1 + 1"), Text(value="b")])

        with caplog.at_level(logging.WARNING, logger="md2nexus.renderers.nexus"):
            result = render(tree)

        assert result == "ab"
        warnings = [r for r in caplog.records if r.name == "md2nexus.renderers.nexus"]
        assert len(warnings) == 1
        assert warnings[0].getMessage() == "mdx not supported in nexus bbcode"


@pytest.mark.unit
class TestBlockRules:
    """Rendering of block-level nodes."""

    def test_empty_document(self):
        assert render() == ""

    def test_heading_uses_configured_size(self):
        assert render(Heading(level=1, children=[Text(value="Title")])) == "[size=5]Title[/size]"
        assert render(Heading(level=1, children=[Text(value="Title")]), heading_size=3) == "[size=3]Title[/size]"

    def test_heading_level_is_ignored(self):
        text = [Text(value="T")]
        assert render(Heading(level=1, children=text)) == render(Heading(level=6, children=text))

    def test_heading_then_paragraph(self):
        result = render(Heading(level=2, children=[Text(value="Title")]), Paragraph(children=[Text(value="Body")]))
        assert result == "[size=5]Title[/size]\n\nBody"

    def test_ordered_list_ignores_start(self):
        tree = List(ordered=True, start=4, children=[ListItem(children=[Text(value="a")])])
        assert render(tree) == "[list=1]\n[*]a\n[/list]"

    def test_nested_list(self):
        tree = List(
            children=[
                ListItem(
                    children=[
                        Paragraph(children=[Text(value="a")]),
                        List(children=[ListItem(children=[Text(value="b")])]),
                    ]
                )
            ]
        )
        assert render(tree) == "[list]\n[*]a\n\n[list]\n[*]b\n[/list]\n[/list]"

    def test_block_quote(self):
        assert render(BlockQuote(children=[Paragraph(children=[Text(value="q")])])) == "[quote]\nq\n[/quote]"

    def test_thematic_break_between_paragraphs(self):
        result = render(Paragraph(children=[Text(value="a")]), ThematicBreak(), Paragraph(children=[Text(value="b")]))
        assert result == "a\n\n[line]\n\nb"

    def test_code_block_drops_language(self):
        assert render(Code(value="x = 1", lang="python")) == "[code]x = 1[/code]"

    def test_math_block(self):
        assert render(Math(value="e = mc^2")) == "[code]e = mc^2[/code]"

    def test_front_matter(self):
        assert render(Yaml(value="title: Mod")) == "[code]title: Mod[/code]"
        assert render(Toml(value='title = "Mod"')) == '[code]title = "Mod"[/code]'

    def test_front_matter_followed_by_paragraph(self):
        assert render(Yaml(value="a: 1"), Paragraph(children=[Text(value="x")])) == "[code]a: 1[/code]\n\nx"

    def test_html_passes_through(self):
        assert render(Html(value="<center>hi</center>")) == "<center>hi</center>"


@pytest.mark.unit
class TestInlineRules:
    """Rendering of inline nodes."""

    def test_emphasis(self):
        tree = Paragraph(children=[Text(value="Some "), Emphasis(children=[Text(value="e")]), Text(value=" here.")])
        assert render(tree) == "Some [i]e[/i] here."

    def test_strong_is_wrapped_in_newlines(self):
        tree = Paragraph(children=[Text(value="a "), Strong(children=[Text(value="b")]), Text(value=" c")])
        assert render(tree) == "a \n[b]b[/b]\n c"

    def test_delete(self):
        assert render(Paragraph(children=[Delete(children=[Text(value="old")])])) == "[s]old[/s]"

    def test_inline_code_uses_monospace_font(self):
        assert render(Paragraph(children=[InlineCode(value="x")])) == '[font="Courier"]x[/font]'

    def test_monospace_font_is_configurable(self):
        result = render(Paragraph(children=[InlineMath(value="x^2")]), monospace_font="Consolas")
        assert result == '[font="Consolas"]x^2[/font]'

    def test_link_drops_title(self):
        tree = Paragraph(children=[Link(url="https://e.test", title="t", children=[Text(value="w")])])
        assert render(tree) == "[url=https://e.test]w[/url]"

    def test_image_drops_alt_and_title(self):
        assert render(Paragraph(children=[Image(url="a.png", alt="A", title="t")])) == "[img]a.png[/img]"

    def test_hard_break_becomes_paragraph_break(self):
        tree = Paragraph(children=[Text(value="a"), Break(), Text(value="b")])
        assert render(tree) == "a\n\nb"

    def test_inline_html(self):
        tree = Paragraph(children=[Text(value="a"), Html(value="<br>"), Text(value="b")])
        assert render(tree) == "a<br>b"


@pytest.mark.unit
class TestTables:
    """Tables become ASCII grids inside [code]."""

    def test_ragged_rows_are_padded(self):
        tree = Table(
            children=[
                TableRow(children=[text_cell("a"), text_cell("bb")]),
                TableRow(children=[text_cell("ccc")]),
            ]
        )
        expected = "[code]+-----+----+\n| a   | bb |\n+-----+----+\n| ccc |    |\n+-----+----+\n[/code]"
        assert render(tree) == expected

    def test_inline_code_inside_cells_is_bare(self):
        tree = Table(children=[TableRow(children=[TableCell(children=[InlineCode(value="x")])])])
        result = render(tree)

        assert "| x |" in result
        assert "[font" not in result

    def test_inline_math_inside_cells_is_bare(self):
        tree = Table(children=[TableRow(children=[TableCell(children=[InlineMath(value="y")])])])
        assert "[font" not in render(tree)

    def test_empty_table(self):
        assert render(Table()) == "[code][/code]"

    def test_sibling_tables_do_not_share_rows(self):
        first = Table(children=[TableRow(children=[text_cell("a")])])
        second = Table(children=[TableRow(children=[text_cell("b")])])
        result = render(first, second)

        assert result.count("| a |") == 1
        assert result.count("| b |") == 1
        assert result.count("[code]") == 2

    def test_row_outside_table_renders_nothing(self):
        assert render(TableRow(children=[text_cell("x")])) == ""

    def test_cell_outside_row_renders_nothing(self):
        assert render(Paragraph(children=[text_cell("x")])) == ""

    def test_inline_code_after_table_uses_font(self):
        table = Table(children=[TableRow(children=[TableCell(children=[InlineCode(value="x")])])])
        result = render(table, Paragraph(children=[InlineCode(value="y")]))
        assert result.endswith('[font="Courier"]y[/font]')


@pytest.mark.unit
class TestReferencesAndDefinitions:
    """Deferred blocks and unresolved references."""

    def test_definition_uses_title(self):
        result = render(
            Paragraph(children=[LinkReference(identifier="wiki", children=[Text(value="Wiki")])]),
            Definition(identifier="wiki", url="https://w.test", title="The Wiki"),
        )
        assert result == "(See wiki; Wiki)\n\n^wiki: [url=https://w.test]The Wiki[/url]"

    def test_definition_without_title_uses_identifier(self):
        assert render(Definition(identifier="d", url="u")) == "^d: [url=u]d[/url]"

    def test_definitions_precede_footnotes(self):
        result = render(
            FootnoteDefinition(identifier="n", children=[Text(value="note")]),
            Definition(identifier="d", url="u"),
            Paragraph(children=[Text(value="body")]),
        )
        assert result == "body\n\n^d: [url=u]d[/url]\n^n: note"

    def test_deferred_blocks_keep_document_order(self):
        result = render(
            Definition(identifier="b", url="u2"),
            Definition(identifier="a", url="u1"),
        )
        assert result.index("^b:") < result.index("^a:")

    def test_footnote_paragraph_content_is_trimmed(self):
        result = render(FootnoteDefinition(identifier="1", children=[Paragraph(children=[Text(value="note")])]))
        assert result == "^1: note"

    def test_footnote_inside_block_quote_is_captured(self):
        result = render(BlockQuote(children=[FootnoteDefinition(identifier="1", children=[Text(value="n")])]))
        assert result == "[quote][/quote]\n\n^1: n"

    def test_definition_inside_footnote_is_appended(self):
        result = render(
            Paragraph(children=[FootnoteReference(identifier="1")]),
            FootnoteDefinition(
                identifier="1",
                children=[Paragraph(children=[Text(value="note")]), Definition(identifier="a", url="http://x")],
            ),
        )
        assert "^a: [url=http://x]a[/url]" in result
        assert "^1: note" in result

    def test_footnote_inside_footnote_is_appended(self):
        result = render(
            FootnoteDefinition(
                identifier="1",
                children=[
                    Paragraph(children=[Text(value="outer")]),
                    FootnoteDefinition(identifier="2", children=[Paragraph(children=[Text(value="inner")])]),
                ],
            ),
        )
        assert result == "^1: outer\n\n^2: inner"

    def test_image_reference_placeholder(self):
        assert render(Paragraph(children=[ImageReference(identifier="logo", alt="Logo")])) == "[logo] Logo"

    def test_references_are_not_resolved(self):
        result = render(
            Paragraph(children=[LinkReference(identifier="a", children=[Text(value="A")])]),
            Definition(identifier="a", url="https://a.test"),
        )
        assert "[url=https://a.test]A[/url]" not in result


@pytest.mark.unit
class TestUnsupportedNodes:
    """MDX constructs are dropped with a warning."""

    @pytest.mark.parametrize(
        "node,category",
        [
            (MdxjsEsm(value="import X from 'x'"), "mdx/jsx"),
            (MdxFlowExpression(value="{1}"), "mdx"),
            (MdxJsxFlowElement(name="Tabs"), "mdx/jsx"),
        ],
    )
    def test_block_level(self, node, category, caplog):
        with caplog.at_level(logging.WARNING):
            result = render(Paragraph(children=[Text(value="before")]), node, Paragraph(children=[Text(value="after")]))

        assert result == "before\n\nafter"
        assert f"{category} not supported in nexus bbcode" in caplog.text

    def test_one_warning_per_occurrence(self, caplog):
        tree = Paragraph(children=[MdxJsxTextElement(name="A"), Text(value="x"), MdxJsxTextElement(name="B")])

        with caplog.at_level(logging.WARNING, logger="md2nexus.renderers.nexus"):
            assert render(tree) == "x"

        assert len([r for r in caplog.records if "not supported" in r.getMessage()]) == 2


@pytest.mark.unit
class TestRendererApi:
    """Renderer construction and output helpers."""

    def test_wrong_options_class(self):
        with pytest.raises(InvalidOptionsError):
            NexusRenderer(MarkdownParserOptions())  # type: ignore[arg-type]

    def test_render_to_stream(self):
        buffer = StringIO()
        NexusRenderer().render(Root(children=[Paragraph(children=[Text(value="hi")])]), buffer)
        assert buffer.getvalue() == "hi"

    def test_render_to_path(self, tmp_path):
        target = tmp_path / "out.bbcode"
        NexusRenderer().render(Root(children=[Paragraph(children=[Text(value="hi")])]), target)
        assert target.read_text(encoding="utf-8") == "hi"

    def test_renderer_is_reusable(self):
        renderer = NexusRenderer()
        doc = Root(
            children=[
                Paragraph(children=[FootnoteReference(identifier="1")]),
                FootnoteDefinition(identifier="1", children=[Text(value="n")]),
            ]
        )
        assert renderer.render_to_string(doc) == renderer.render_to_string(doc)


@pytest.mark.unit
class TestRenderState:
    """State effects apply only where they make sense."""

    def test_capture_effects(self):
        state = RenderState()
        definition = Definition(identifier="a", url="u")
        footnote = FootnoteDefinition(identifier="1")

        CaptureDefinition(definition).apply(state)
        CaptureFootnote(footnote).apply(state)

        assert state.definitions == [definition]
        assert state.footnotes == [footnote]

    def test_append_row_requires_table(self):
        state = RenderState()
        AppendRow(("a",)).apply(state)
        assert state.table is None

        state = RenderState(table=TableAccumulator())
        AppendRow(("a", "b")).apply(state)
        assert state.table.rows == [["a", "b"]]

    def test_append_cell_requires_row(self):
        state = RenderState()
        AppendCell("x").apply(state)
        assert state.row is None

        state = RenderState(row=[])
        AppendCell("x").apply(state)
        assert state.row == ["x"]

    def test_in_table(self):
        assert not RenderState().in_table
        assert RenderState(table=TableAccumulator()).in_table
        assert RenderState(row=[]).in_table

    def test_visit_returns_rendered_with_effect(self):
        renderer = NexusRenderer()
        definition = Definition(identifier="a", url="u")

        rendered = definition.accept(renderer, RenderState())

        assert isinstance(rendered, Rendered)
        assert rendered.text == ""
        assert rendered.effect == CaptureDefinition(definition)
