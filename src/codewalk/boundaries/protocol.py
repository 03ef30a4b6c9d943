"""BoundaryDetector protocol for locating definitions in target files.

A detector answers one question: which inclusive line range holds the
definition of a named function or type. The directive handlers only depend
on this contract, so a parser-based detector can replace the textual
heuristic without changing how directives behave.

Thread Safety:
Detectors must be stateless. The same instance may be used by several runs.

Example:
    >>> class TreeSitterDetector:
    ...     def find_function(self, lines, name, *, path, include_doc, include_body):
    ...         ...
    ...     def find_type(self, lines, name, *, path, after, include_doc, include_body):
    ...         ...
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@dataclass(frozen=True, slots=True)
class LineRange:
    """Inclusive, zero-based range of lines in a target file.

    Attributes:
        start: Index of the first line
        end: Index of the last line

    """

    start: int
    end: int

    def __len__(self) -> int:
        return max(self.end - self.start + 1, 0)


@runtime_checkable
class BoundaryDetector(Protocol):
    """Protocol for function and type range detection."""

    def find_function(
        self,
        lines: Sequence[str],
        name: str,
        *,
        path: str,
        include_doc: bool,
        include_body: bool,
    ) -> LineRange:
        """Locate a function or method definition.

        Args:
            lines: Target file split into lines
            name: Dotted name, e.g. ``"Add"`` or ``"Server.Serve"``
            path: Target path as written, for error messages
            include_doc: Extend the range over the preceding doc comment
            include_body: Extend the range to the end of the body

        Returns:
            The resolved range

        Raises:
            NameNotFoundError: If no definition matches
            UnterminatedBodyError: If a body opens but never closes
        """
        ...

    def find_type(
        self,
        lines: Sequence[str],
        name: str,
        *,
        path: str,
        after: int | None,
        include_doc: bool,
        include_body: bool,
    ) -> LineRange:
        """Locate a type definition.

        Args:
            lines: Target file split into lines
            name: Type name
            path: Target path as written, for error messages
            after: Only consider lines strictly after this index (None = all)
            include_doc: Extend the range over the preceding doc comment
            include_body: Extend the range to the end of a struct body

        Returns:
            The resolved range

        Raises:
            NameNotFoundError: If no definition matches
            UnterminatedBodyError: If a body opens but never closes
        """
        ...
