"""Tests for the markdown renderer."""

from __future__ import annotations

import pytest

from codewalk.config import WalkConfig, walk_config_context
from codewalk.linebuilder import LineBuilder
from codewalk.location import SourceLocation
from codewalk.nodes import Block, Document, ProseBlock, SnippetBlock
from codewalk.renderers import DocumentRenderer, MarkdownRenderer, attribution

ADD = SnippetBlock(
    SourceLocation(3),
    file="foo.go",
    start=0,
    lines=("func Add(a, b int) int {", "\treturn a + b", "}"),
)


def doc(*blocks: Block) -> Document:
    return Document(SourceLocation(1), children=blocks)


class TestAttribution:
    """The quoted source link above each snippet."""

    def test_first_line(self) -> None:
        assert attribution(ADD) == "> from [foo.go](foo.go#L1):"

    def test_line_number_is_one_based(self) -> None:
        block = SnippetBlock(SourceLocation(1), "pkg/server.go", 41, ("}",))
        assert attribution(block) == "> from [pkg/server.go](pkg/server.go#L42):"


class TestMarkdownRenderer:
    """Block rendering and newline termination."""

    def test_snippet(self) -> None:
        out = MarkdownRenderer(language="go").render(doc(ADD))
        assert out == (
            "> from [foo.go](foo.go#L1):\n"
            "\n"
            "```go\n"
            "func Add(a, b int) int {\n"
            "\treturn a + b\n"
            "}\n"
            "```\n"
        )

    def test_prose_is_verbatim(self) -> None:
        prose = ProseBlock(SourceLocation(1), ("# Title", "", "  indented  ", "```python"))
        out = MarkdownRenderer().render(doc(prose))
        assert out == "# Title\n\n  indented  \n```python\n"

    def test_prose_around_snippet(self) -> None:
        out = MarkdownRenderer(language="go").render(
            doc(
                ProseBlock(SourceLocation(1), ("Adding:",)),
                ADD,
                ProseBlock(SourceLocation(6), ("Done.",)),
            )
        )
        assert out.startswith("Adding:\n> from [foo.go]")
        assert out.endswith("```\nDone.\n")

    def test_empty_document(self) -> None:
        assert MarkdownRenderer().render(doc()) == ""

    def test_language_from_context(self) -> None:
        with walk_config_context(WalkConfig(language="python")):
            renderer = MarkdownRenderer()
        assert "```python\n" in renderer.render(doc(ADD))

    def test_empty_language(self) -> None:
        out = MarkdownRenderer(language="").render(doc(ADD))
        assert "\n```\nfunc Add" in out

    def test_custom_fence(self) -> None:
        out = MarkdownRenderer(language="go", fence="~~~").render(doc(ADD))
        assert "~~~go\n" in out
        assert out.endswith("}\n~~~\n")

    def test_unknown_block_type(self) -> None:
        with pytest.raises(TypeError, match="Block"):
            MarkdownRenderer().render(doc(Block(SourceLocation(1))))

    def test_satisfies_protocol(self) -> None:
        assert isinstance(MarkdownRenderer(), DocumentRenderer)


class TestLineBuilder:
    """Newline-terminated accumulation."""

    def test_every_line_terminated(self) -> None:
        lb = LineBuilder().line("a").line().lines(["b", "c"])
        assert lb.build() == "a\n\nb\nc\n"
        assert len(lb) == 4

    def test_empty(self) -> None:
        lb = LineBuilder()
        assert not lb
        assert lb.build() == ""

    def test_single_blank_line(self) -> None:
        assert LineBuilder().line().build() == "\n"
