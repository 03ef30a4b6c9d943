"""Single-pass block composer for codewalk documents.

The composer walks the document line by line in one of two modes:

- PROSE: lines are buffered verbatim. A line equal to the opening fence
  flushes the buffer as a ProseBlock and switches to IN_BLOCK.
- IN_BLOCK: every line is a directive applied to the block's Snippet. A
  line equal to the closing fence finishes the Snippet, emits a
  SnippetBlock and switches back to PROSE.

Any error aborts the run. Errors leave the composer located at the
offending document line.

Thread Safety:
Composer instances are single-use. Create one per document.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from codewalk.config import WalkConfig, get_walk_config
from codewalk.directives.registry import DirectiveRegistry, create_default_registry
from codewalk.errors import CodewalkError, UnknownDirectiveError, UnterminatedBlockError
from codewalk.lexer import KEYWORD_CHARS, Lexer
from codewalk.location import SourceLocation
from codewalk.nodes import Block, Document, ProseBlock, SnippetBlock
from codewalk.snippet import Snippet
from codewalk.sources import DictSourceCache, SourceReader
from codewalk.utils.logger import get_logger

logger = get_logger(__name__)


class ComposerMode(Enum):
    """Composer operating modes."""

    PROSE = auto()  # Outside extraction blocks
    IN_BLOCK = auto()  # Between the opening and closing fence


def split_document(source: str) -> list[str]:
    """Normalize newlines and split a document into lines.

    CRLF becomes LF and trailing newlines are dropped, so a document
    ending in blank lines composes the same as one without them. An empty
    document has no lines.

    Example:
        >>> split_document("a\\r\\nb\\n\\n")
        ['a', 'b']

    """
    text = source.replace("\r\n", "\n").rstrip("\n")
    if not text:
        return []
    return text.split("\n")


class BlockComposer:
    """Streaming state machine turning document lines into blocks.

    Usage:
            >>> composer = BlockComposer(source_file="README.src.md")
            >>> for lineno, line in enumerate(lines, 1):
            ...     composer.feed(line, lineno)
            >>> blocks = composer.close()

    Args:
        source_file: Document path, used in error messages and locations
        config: Run configuration (defaults to the context's WalkConfig)
        reader: Target file reader (defaults to one built from config)
    """

    __slots__ = (
        "_source_file",
        "_open_fence",
        "_close_fence",
        "_registry",
        "_reader",
        "_detector",
        "_mode",
        "_blocks",
        "_prose",
        "_prose_start",
        "_snippet",
        "_block_start",
    )

    def __init__(
        self,
        *,
        source_file: str | None = None,
        config: WalkConfig | None = None,
        reader: SourceReader | None = None,
    ) -> None:
        config = config or get_walk_config()
        self._source_file = source_file
        self._open_fence = config.open_fence
        self._close_fence = config.close_fence
        self._registry: DirectiveRegistry = config.directive_registry or create_default_registry()
        self._detector = config.boundary_detector
        if reader is None:
            cache = DictSourceCache() if config.cache_sources else None
            reader = SourceReader(base_dir=config.base_dir, cache=cache)
        self._reader = reader

        self._mode = ComposerMode.PROSE
        self._blocks: list[Block] = []
        self._prose: list[str] = []
        self._prose_start = 1
        self._snippet: Snippet | None = None
        self._block_start = 0

    @property
    def mode(self) -> ComposerMode:
        """Current operating mode."""
        return self._mode

    @property
    def blocks(self) -> tuple[Block, ...]:
        """Blocks finished so far."""
        return tuple(self._blocks)

    def feed(self, line: str, lineno: int) -> None:
        """Consume one document line.

        Args:
            line: Line text without its newline
            lineno: Line number in the document (1-indexed)

        Raises:
            CodewalkError: Located at ``lineno``
        """
        try:
            if self._mode is ComposerMode.PROSE:
                self._feed_prose(line, lineno)
            else:
                self._feed_block(line, lineno)
        except CodewalkError as exc:
            raise exc.at(self._source_file, lineno)

    def close(self) -> tuple[Block, ...]:
        """Flush trailing prose and return all blocks.

        Raises:
            UnterminatedBlockError: If the document ends inside a block
        """
        if self._mode is ComposerMode.IN_BLOCK:
            raise UnterminatedBlockError(
                f"codewalk block is not closed by {self._close_fence!r}",
                lineno=self._block_start,
                source_file=self._source_file,
            )
        self._flush_prose()
        return tuple(self._blocks)

    def compose(self, lines: Iterable[str]) -> Document:
        """Feed every line, close, and wrap the blocks in a Document."""
        for lineno, line in enumerate(lines, 1):
            self.feed(line, lineno)
        return Document(
            location=SourceLocation(1, self._source_file),
            children=self.close(),
        )

    # =========================================================================
    # Mode handlers
    # =========================================================================

    def _feed_prose(self, line: str, lineno: int) -> None:
        if line != self._open_fence:
            if not self._prose:
                self._prose_start = lineno
            self._prose.append(line)
            return

        self._flush_prose()
        self._mode = ComposerMode.IN_BLOCK
        self._snippet = Snippet(self._reader, self._detector)
        self._block_start = lineno
        logger.debug("%s: codewalk block opened", self._location(lineno))

    def _feed_block(self, line: str, lineno: int) -> None:
        snippet = self._snippet
        assert snippet is not None

        if line == self._close_fence:
            captured = snippet.finish()
            assert snippet.start is not None
            self._blocks.append(
                SnippetBlock(
                    location=self._location(self._block_start),
                    file=snippet.file,
                    start=snippet.start,
                    lines=tuple(captured),
                )
            )
            logger.debug(
                "%s: captured %d lines from %s:%d",
                self._location(lineno),
                len(captured),
                snippet.file,
                snippet.start + 1,
            )
            self._snippet = None
            self._mode = ComposerMode.PROSE
            return

        self._apply_directive(snippet, line)

    def _apply_directive(self, snippet: Snippet, line: str) -> None:
        lex = Lexer(line)
        keyword = lex.next_byte_set(KEYWORD_CHARS)
        lex.skip_hspace()

        handler = self._registry.get(keyword)
        if handler is None:
            raise UnknownDirectiveError(keyword)
        handler.apply(snippet, lex.rest())

    # =========================================================================
    # Helpers
    # =========================================================================

    def _flush_prose(self) -> None:
        if self._prose:
            self._blocks.append(
                ProseBlock(
                    location=self._location(self._prose_start),
                    lines=tuple(self._prose),
                )
            )
            self._prose = []

    def _location(self, lineno: int) -> SourceLocation:
        return SourceLocation(lineno, self._source_file)


__all__ = ["BlockComposer", "ComposerMode", "split_document"]
