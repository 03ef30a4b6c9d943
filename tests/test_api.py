"""Tests for the high-level API: compose, render, generate_text, generate."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import assume, given
from hypothesis import strategies as st

from codewalk import compose, generate, generate_text, render
from codewalk.composer import split_document
from codewalk.config import WalkConfig, walk_config_context
from codewalk.errors import AnchorNotFoundError, SourceReadError, UnknownDirectiveError
from codewalk.nodes import ProseBlock, SnippetBlock

ADD_OUTPUT = "> from [foo.go](foo.go#L1):\n\n```go\nfunc Add(a, b int) int {\n\treturn a + b\n}\n```\n"


class TestGenerateText:
    """End-to-end rewriting of document text."""

    def test_function_block(self, walk_config: WalkConfig, foo_go: Path) -> None:
        source = "```codewalk\nfile foo.go\ngo:func Add\n```\n"
        assert generate_text(source, config=walk_config) == ADD_OUTPUT

    def test_prose_is_kept(self, walk_config: WalkConfig, foo_go: Path) -> None:
        source = "# Adding\n\nSee:\n```codewalk\nfile foo.go\ngo:func Add\n```\nThat's all.\n"
        assert generate_text(source, config=walk_config) == (
            "# Adding\n\nSee:\n" + ADD_OUTPUT + "That's all.\n"
        )

    def test_start_end_block(self, walk_config: WalkConfig, shapes_go: Path) -> None:
        source = "```codewalk\nfile shapes.go\nstart ^// Dist\nend ^}\nendUp 1\n```"
        assert generate_text(source, config=walk_config) == (
            "> from [shapes.go](shapes.go#L18):\n"
            "\n"
            "```go\n"
            "// Dist returns the distance between p and q.\n"
            "func (p Point) Dist(q Point) float64 {\n"
            "\treturn math.Hypot(q.X-p.X, q.Y-p.Y)\n"
            "```\n"
        )

    def test_crlf_document(self, walk_config: WalkConfig, foo_go: Path) -> None:
        source = "Intro\r\n```codewalk\r\nfile foo.go\r\ngo:func Add\r\n```\r\n"
        assert generate_text(source, config=walk_config) == "Intro\n" + ADD_OUTPUT

    def test_trailing_blank_lines_collapse(self, walk_config: WalkConfig) -> None:
        assert generate_text("text\n\n\n\n", config=walk_config) == "text\n"

    def test_empty_document(self, walk_config: WalkConfig) -> None:
        assert generate_text("", config=walk_config) == ""

    def test_language_option(self, tmp_path: Path, foo_go: Path) -> None:
        config = WalkConfig(base_dir=tmp_path, language="golang")
        out = generate_text("```codewalk\nfile foo.go\ngo:func Add\n```", config=config)
        assert "```golang\n" in out

    def test_context_config(self, walk_config: WalkConfig, foo_go: Path) -> None:
        with walk_config_context(walk_config):
            assert generate_text("```codewalk\nfile foo.go\ngo:func Add\n```") == ADD_OUTPUT

    def test_error_carries_document_location(self, walk_config: WalkConfig, foo_go: Path) -> None:
        source = "```codewalk\nfile foo.go\nstart ^func Sub\n```"
        with pytest.raises(AnchorNotFoundError) as excinfo:
            generate_text(source, source_file="guide.md", config=walk_config)
        assert str(excinfo.value).startswith("guide.md:3: ")

    @given(st.text())
    def test_documents_without_blocks_are_normalized_copies(self, source: str) -> None:
        lines = split_document(source)
        assume("```codewalk" not in lines)
        expected = "\n".join(lines) + "\n" if lines else ""
        assert generate_text(source, config=WalkConfig()) == expected


class TestComposeAndRender:
    """The two halves of generate_text."""

    def test_compose_returns_blocks(self, walk_config: WalkConfig, foo_go: Path) -> None:
        doc = compose("a\n```codewalk\nfile foo.go\ngo:func Add\n```", config=walk_config)
        assert [type(b) for b in doc.children] == [ProseBlock, SnippetBlock]
        assert doc.snippets[0].file == "foo.go"
        assert doc.snippets[0].start == 0

    def test_render_language_override(self, walk_config: WalkConfig, foo_go: Path) -> None:
        doc = compose("```codewalk\nfile foo.go\ngo:func Add\n```", config=walk_config)
        assert "```text\n" in render(doc, language="text")


class TestGenerate:
    """File-to-file rewriting."""

    def test_writes_target(self, tmp_path: Path, walk_config: WalkConfig, foo_go: Path) -> None:
        src = tmp_path / "README.src.md"
        dst = tmp_path / "README.md"
        src.write_text("```codewalk\nfile foo.go\ngo:func Add\n```\n", encoding="utf-8")
        doc = generate(src, dst, config=walk_config)
        assert dst.read_bytes().decode("utf-8") == ADD_OUTPUT
        assert len(doc.snippets) == 1

    def test_error_leaves_target_untouched(
        self, tmp_path: Path, walk_config: WalkConfig, foo_go: Path
    ) -> None:
        src = tmp_path / "README.src.md"
        dst = tmp_path / "README.md"
        src.write_text("ok\n```codewalk\nbogus\n```\n", encoding="utf-8")
        dst.write_text("previous\n", encoding="utf-8")
        with pytest.raises(UnknownDirectiveError) as excinfo:
            generate(src, dst, config=walk_config)
        assert excinfo.value.source_file == str(src)
        assert excinfo.value.lineno == 3
        assert dst.read_text(encoding="utf-8") == "previous\n"

    def test_error_creates_no_target(self, tmp_path: Path, walk_config: WalkConfig) -> None:
        src = tmp_path / "README.src.md"
        dst = tmp_path / "README.md"
        src.write_text("```codewalk\nfile missing.go\ngo:func Add\n```\n", encoding="utf-8")
        with pytest.raises(SourceReadError, match="missing.go"):
            generate(src, dst, config=walk_config)
        assert not dst.exists()

    def test_missing_source_document(self, tmp_path: Path, walk_config: WalkConfig) -> None:
        with pytest.raises(SourceReadError, match="nope.md"):
            generate(tmp_path / "nope.md", tmp_path / "out.md", config=walk_config)

    def test_output_uses_lf(self, tmp_path: Path, walk_config: WalkConfig) -> None:
        src = tmp_path / "in.md"
        dst = tmp_path / "out.md"
        src.write_bytes(b"a\r\nb\r\n")
        generate(src, dst, config=walk_config)
        assert dst.read_bytes() == b"a\nb\n"
