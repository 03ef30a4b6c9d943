"""
codewalk: verbatim source excerpts for markdown documentation

Rewrites a markdown document by replacing each ```codewalk block with a
fenced copy of the lines it selects from a live source file, preceded by an
attribution link to the file and line.

Quick Start:
    >>> from codewalk import generate_text
    >>> source = "Adding:\\n```codewalk\\nfile foo.go\\ngo:func Add\\n```\\n"
    >>> print(generate_text(source, source_file="README.src.md"))
    Adding:
    > from [foo.go](foo.go#L1):
    <BLANKLINE>
    ```go
    func Add(a, b int) int {
    	return a + b
    }
    ```

Directives:
    file <path>                                     target file
    start <regexp>                                  unique start anchor
    end <regexp>                                    first end anchor after start
    endUp <n>                                       move end up n lines
    go:func [-no-doc] [-no-body] [<Type>.]<Name>    function or method
    go:type [-no-doc] [-no-body] <Type>             type definition

Command line:
    codewalk README.src.md README.md
"""

from __future__ import annotations

from pathlib import Path

from codewalk.boundaries import BoundaryDetector, HeuristicBoundaryDetector, LineRange
from codewalk.composer import BlockComposer, ComposerMode, split_document
from codewalk.config import (
    WalkConfig,
    get_walk_config,
    reset_walk_config,
    set_walk_config,
    walk_config_context,
)
from codewalk.directives import (
    DirectiveHandler,
    DirectiveRegistry,
    DirectiveRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)
from codewalk.errors import CodewalkError
from codewalk.lexer import ByteSet, Lexer
from codewalk.location import SourceLocation
from codewalk.nodes import Block, Document, ProseBlock, SnippetBlock
from codewalk.renderers import DocumentRenderer, MarkdownRenderer
from codewalk.snippet import Snippet
from codewalk.sources import DictSourceCache, SourceCache, SourceReader, read_text
from codewalk.utils.logger import get_logger

__version__ = "0.1.0"

logger = get_logger(__name__)


def compose(
    source: str,
    *,
    source_file: str | None = None,
    config: WalkConfig | None = None,
) -> Document:
    """Resolve every extraction block of a document.

    Args:
        source: Markdown document text
        source_file: Document path for error messages
        config: Run configuration (uses the context's config if None)

    Returns:
        Document with prose and resolved snippet blocks in source order

    Raises:
        CodewalkError: On the first directive or resolution failure
    """
    config = config or get_walk_config()
    composer = BlockComposer(source_file=source_file, config=config)
    return composer.compose(split_document(source))


def render(doc: Document, *, language: str | None = None) -> str:
    """Render a composed Document back to markdown.

    Args:
        doc: Composed document
        language: Snippet fence info string (defaults to WalkConfig.language)
    """
    return MarkdownRenderer(language=language).render(doc)


def generate_text(
    source: str,
    *,
    source_file: str | None = None,
    config: WalkConfig | None = None,
) -> str:
    """Compose and render a document in one call."""
    config = config or get_walk_config()
    doc = compose(source, source_file=source_file, config=config)
    return render(doc, language=config.language)


def generate(
    src: str | Path,
    dst: str | Path,
    *,
    config: WalkConfig | None = None,
) -> Document:
    """Rewrite the document at ``src`` into ``dst``.

    The output is written once, after every block resolved. On any error
    ``dst`` is left untouched.

    Returns:
        The composed Document

    Raises:
        CodewalkError: On read, directive or resolution failure
        OSError: If ``dst`` cannot be written
    """
    config = config or get_walk_config()
    src_path = str(src)
    doc = compose(read_text(src_path), source_file=src_path, config=config)
    output = render(doc, language=config.language)
    Path(dst).write_bytes(output.encode("utf-8"))
    logger.info("%s -> %s: %d snippets", src_path, dst, len(doc.snippets))
    return doc


__all__ = [  # noqa: RUF022 (grouped by category)
    # Version
    "__version__",
    # Core API
    "compose",
    "render",
    "generate",
    "generate_text",
    # Nodes
    "Block",
    "Document",
    "ProseBlock",
    "SnippetBlock",
    "SourceLocation",
    # Engine
    "BlockComposer",
    "ComposerMode",
    "Snippet",
    "split_document",
    "ByteSet",
    "Lexer",
    # Boundary detection
    "BoundaryDetector",
    "HeuristicBoundaryDetector",
    "LineRange",
    # Directive extensibility
    "DirectiveHandler",
    "DirectiveRegistry",
    "DirectiveRegistryBuilder",
    "create_default_registry",
    "create_registry_with_defaults",
    # Sources
    "DictSourceCache",
    "SourceCache",
    "SourceReader",
    "read_text",
    # Renderers
    "DocumentRenderer",
    "MarkdownRenderer",
    # Configuration (ContextVar-based)
    "WalkConfig",
    "get_walk_config",
    "set_walk_config",
    "reset_walk_config",
    "walk_config_context",
    # Errors
    "CodewalkError",
]
