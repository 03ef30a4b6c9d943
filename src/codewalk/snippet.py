"""Line-range resolution for a single extraction block.

A Snippet starts empty and is narrowed by directives, one call per
directive line:

    file foo.go          -> snippet.file = "foo.go"
    start ^func main     -> snippet.set_start(re.compile("^func main"))
    end ^}               -> snippet.set_end(re.compile("^}"))
    endUp 1              -> snippet.set_end_relative(1)
    go:func Server.Serve -> snippet.set_function_boundary("Server.Serve")
    go:type Config       -> snippet.set_type_boundary("Config")

When the block closes, finish() returns the captured lines. Unresolved
positions are None; a start on line zero is a resolved start.

Every operation reads the target file through the SourceReader, so with
caching disabled each directive sees the file as it is on disk right now.

Thread Safety:
Snippet instances belong to one block of one run. Not shared.
"""

from __future__ import annotations

import re

from codewalk.boundaries import BoundaryDetector, LineRange, default_boundary_detector
from codewalk.errors import (
    AmbiguousAnchorError,
    AnchorNotFoundError,
    DirectiveOrderError,
    MissingRangeError,
    ResolveError,
)
from codewalk.sources import SourceReader
from codewalk.utils.logger import get_logger

logger = get_logger(__name__)


class Snippet:
    """Resolution state for one extraction block.

    Attributes:
        file: Target path as written in the ``file`` directive ("" until set)
        start: Zero-based index of the first captured line, or None
        end: Zero-based index of the last captured line (inclusive), or None

    Usage:
            >>> snippet = Snippet()
            >>> snippet.file = "foo.go"
            >>> snippet.set_function_boundary("Add")
            >>> snippet.start, snippet.end
            (0, 2)
            >>> snippet.finish()
            ['func Add(a, b int) int {', '\\treturn a + b', '}']

    """

    __slots__ = ("file", "start", "end", "_reader", "_detector")

    def __init__(
        self,
        reader: SourceReader | None = None,
        detector: BoundaryDetector | None = None,
    ) -> None:
        self.file = ""
        self.start: int | None = None
        self.end: int | None = None
        self._reader = reader or SourceReader()
        self._detector = detector or default_boundary_detector()

    def __repr__(self) -> str:
        return f"Snippet(file={self.file!r}, start={self.start!r}, end={self.end!r})"

    @property
    def resolved(self) -> bool:
        """True once both ends of the range are known."""
        return self.start is not None and self.end is not None

    def _lines(self) -> list[str]:
        if not self.file:
            msg = 'no target file; a "file" command must come first'
            raise DirectiveOrderError(msg)
        return self._reader.read_lines(self.file)

    def set_start(self, pattern: re.Pattern[str]) -> None:
        """Anchor the start on the one line matching ``pattern``.

        Raises:
            AnchorNotFoundError: If no line matches
            AmbiguousAnchorError: If more than one line matches
        """
        matches = [i for i, line in enumerate(self._lines()) if pattern.search(line)]
        if not matches:
            msg = f"regular expression {pattern.pattern!r} not found in {self.file!r}"
            raise AnchorNotFoundError(msg)
        if len(matches) > 1:
            raise AmbiguousAnchorError(pattern.pattern, self.file, len(matches))
        self.start = matches[0]
        logger.debug("%s: start at line %d", self.file, self.start + 1)

    def set_end(self, pattern: re.Pattern[str]) -> None:
        """Anchor the end on the first line after the start matching ``pattern``.

        Raises:
            DirectiveOrderError: If the start is not resolved yet
            AnchorNotFoundError: If no later line matches
        """
        if self.start is None:
            msg = 'the "end" command is only valid after a preceding "start" command'
            raise DirectiveOrderError(msg)

        lines = self._lines()
        for i in range(self.start + 1, len(lines)):
            if pattern.search(lines[i]):
                self.end = i
                logger.debug("%s: end at line %d", self.file, i + 1)
                return

        msg = f"regular expression {pattern.pattern!r} not found after {self.file}:{self.start + 1}"
        raise AnchorNotFoundError(msg)

    def set_end_relative(self, n: int) -> None:
        """Move the end up by ``n`` lines (down for negative ``n``).

        The result is not checked against the start; finish() rejects an
        inverted range.

        Raises:
            DirectiveOrderError: If the end is not resolved yet
        """
        if self.end is None:
            msg = 'the "endUp" command is only valid after the end line is resolved'
            raise DirectiveOrderError(msg)
        self.end -= n

    def set_function_boundary(
        self,
        name: str,
        include_doc: bool = True,
        include_body: bool = True,
    ) -> None:
        """Resolve the range of the function or method ``name``.

        Args:
            name: Dotted name such as ``"Add"`` or ``"Server.Serve"``
            include_doc: Include the doc comment above the signature
            include_body: Include the body up to its closing brace
        """
        found = self._detector.find_function(
            self._lines(),
            name,
            path=self.file,
            include_doc=include_doc,
            include_body=include_body,
        )
        self._apply(found)

    def set_type_boundary(
        self,
        name: str,
        include_doc: bool = True,
        include_body: bool = True,
    ) -> None:
        """Resolve the range of the type ``name``.

        Only lines after the current start are searched, so an earlier
        ``start`` directive can skip past a same-named type.
        """
        found = self._detector.find_type(
            self._lines(),
            name,
            path=self.file,
            after=self.start,
            include_doc=include_doc,
            include_body=include_body,
        )
        self._apply(found)

    def _apply(self, found: LineRange) -> None:
        self.start = found.start
        self.end = found.end
        logger.debug("%s: lines %d-%d", self.file, found.start + 1, found.end + 1)

    def finish(self) -> list[str]:
        """Return the captured lines, start and end inclusive.

        Raises:
            MissingRangeError: If the start or end is unresolved, or the
                end lies above the start
            ResolveError: If the file no longer reaches the end line
        """
        lines = self._lines()
        if self.start is None:
            raise MissingRangeError("missing start for codewalk block")
        if self.end is None:
            raise MissingRangeError("missing end for codewalk block")
        if self.end < self.start:
            msg = (
                f"empty range in {self.file!r}: end line {self.end + 1} "
                f"is above start line {self.start + 1}"
            )
            raise MissingRangeError(msg)
        if self.end >= len(lines):
            msg = (
                f"lines {self.start + 1}-{self.end + 1} lie outside {self.file!r}, "
                f"which has {len(lines)} lines"
            )
            raise ResolveError(msg)
        return lines[self.start : self.end + 1]


__all__ = ["Snippet"]
