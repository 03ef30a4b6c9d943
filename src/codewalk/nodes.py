"""Typed document blocks for codewalk.

All blocks are frozen dataclasses with slots. A composed document is a flat
sequence of blocks in source order:

Node (base)
├── Document
└── Block
    ├── ProseBlock     (lines copied verbatim)
    └── SnippetBlock   (lines captured from a target file)

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from dataclasses import dataclass

from codewalk.location import SourceLocation


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all nodes; location is the first document line."""

    location: SourceLocation


@dataclass(frozen=True, slots=True)
class Block(Node):
    """Base class for document blocks."""


@dataclass(frozen=True, slots=True)
class ProseBlock(Block):
    """Document lines outside any extraction block, kept verbatim."""

    lines: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class SnippetBlock(Block):
    """A resolved extraction block.

    Attributes:
        file: Target path as written in the ``file`` directive
        start: Zero-based index of the first captured line
        lines: Captured target lines, verbatim

    """

    file: str
    start: int
    lines: tuple[str, ...]

    @property
    def lineno(self) -> int:
        """One-based line number of the first captured line."""
        return self.start + 1


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node: the blocks of one document in source order."""

    children: tuple[Block, ...]

    @property
    def snippets(self) -> tuple[SnippetBlock, ...]:
        """Only the resolved extraction blocks."""
        return tuple(b for b in self.children if isinstance(b, SnippetBlock))


__all__ = ["Block", "Document", "Node", "ProseBlock", "SnippetBlock"]
