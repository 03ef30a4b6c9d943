"""Markdown renderer for composed codewalk documents.

Prose blocks are written back verbatim. Each snippet block becomes an
attribution line linking to the target file at the first captured line,
a blank line, and a fenced copy of the captured lines:

    > from [server.go](server.go#L42):

    ```go
    func (s *Server) Serve() error {
    ...
    }
    ```

Thread Safety:
Renderer instances hold only immutable settings. Safe to share.
"""

from __future__ import annotations

from codewalk.config import get_walk_config
from codewalk.linebuilder import LineBuilder
from codewalk.nodes import Document, ProseBlock, SnippetBlock


def attribution(block: SnippetBlock) -> str:
    """Format the quoted source link for a snippet block.

    Example:
        >>> attribution(SnippetBlock(SourceLocation(3), "foo.go", 0, ("x",)))
        '> from [foo.go](foo.go#L1):'

    """
    return f"> from [{block.file}]({block.file}#L{block.lineno}):"


class MarkdownRenderer:
    """Render a Document back to markdown text.

    Args:
        language: Info string for snippet fences (default from WalkConfig)
        fence: Code fence marker
    """

    __slots__ = ("_language", "_fence")

    def __init__(self, *, language: str | None = None, fence: str = "```") -> None:
        self._language = language if language is not None else get_walk_config().language
        self._fence = fence

    def render(self, doc: Document) -> str:
        """Render every block in order; each output line ends with a newline."""
        lb = LineBuilder()
        for block in doc.children:
            if isinstance(block, SnippetBlock):
                self._render_snippet(block, lb)
            elif isinstance(block, ProseBlock):
                lb.lines(block.lines)
            else:
                msg = f"cannot render block of type {type(block).__name__}"
                raise TypeError(msg)
        return lb.build()

    def _render_snippet(self, block: SnippetBlock, lb: LineBuilder) -> None:
        lb.line(attribution(block))
        lb.line()
        lb.line(f"{self._fence}{self._language}")
        lb.lines(block.lines)
        lb.line(self._fence)
