"""Source location tracking for blocks and error messages.

Thread Safety:
SourceLocation is frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a line in the document being rewritten.

    Line numbers are 1-indexed, matching what editors display.

    Attributes:
        lineno: Line number (1-indexed)
        source_file: Document path (optional)

    Examples:
            >>> loc = SourceLocation(7, "docs/guide.md")
            >>> str(loc)
            'docs/guide.md:7'

    """

    lineno: int
    source_file: str | None = None

    def __str__(self) -> str:
        if self.source_file:
            return f"{self.source_file}:{self.lineno}"
        return str(self.lineno)

    @classmethod
    def unknown(cls) -> SourceLocation:
        """Create a placeholder location for synthesized blocks."""
        return cls(lineno=0)
