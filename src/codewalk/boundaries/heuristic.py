"""Textual boundary detection for gofmt-formatted source.

Definitions are found with line prefix and suffix tests only:

- a function starts on the first line matching ``^func\\b.*<parts>``
- a body opens when that line ends with ``{`` (types: contains ``struct {``)
- a body closes on the next line that starts with ``}``
- a doc comment is the contiguous run of ``//`` lines directly above

Pathological layouts (several braces on one line, multi-line signatures,
one-line bodies) resolve to the wrong range. Conventionally formatted
source resolves correctly, and no parser for the target language is needed.

Thread Safety:
Stateless after construction. Safe for concurrent use.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from codewalk.boundaries.protocol import LineRange
from codewalk.errors import NameNotFoundError, UnterminatedBodyError


class HeuristicBoundaryDetector:
    """Line-prefix heuristic implementing BoundaryDetector.

    Args:
        func_keyword: Keyword that starts a function definition
        type_keyword: Keyword that starts a type definition
        comment_prefix: Prefix of a doc-comment line
        body_open: Suffix of a function line whose body follows
        body_close: Prefix of the line that closes a top-level body
        struct_marker: Substring of a type line whose body follows
    """

    __slots__ = (
        "func_keyword",
        "type_keyword",
        "comment_prefix",
        "body_open",
        "body_close",
        "struct_marker",
    )

    def __init__(
        self,
        *,
        func_keyword: str = "func",
        type_keyword: str = "type",
        comment_prefix: str = "//",
        body_open: str = "{",
        body_close: str = "}",
        struct_marker: str = "struct {",
    ) -> None:
        self.func_keyword = func_keyword
        self.type_keyword = type_keyword
        self.comment_prefix = comment_prefix
        self.body_open = body_open
        self.body_close = body_close
        self.struct_marker = struct_marker

    def function_pattern(self, name: str) -> re.Pattern[str]:
        """Build the signature matcher for a dotted name.

        Each segment is word-bounded and anything may sit between segments,
        which absorbs receivers such as ``(s *Server) Serve``.

        Example:
            >>> HeuristicBoundaryDetector().function_pattern("Server.Serve").pattern
            '^func\\\\b.*\\\\bServer\\\\b.*\\\\bServe\\\\b'

        """
        parts = [rf"\b{re.escape(part)}\b" for part in name.split(".") if part]
        return re.compile(rf"^{re.escape(self.func_keyword)}\b.*" + ".*".join(parts))

    def find_function(
        self,
        lines: Sequence[str],
        name: str,
        *,
        path: str,
        include_doc: bool,
        include_body: bool,
    ) -> LineRange:
        pattern = self.function_pattern(name)
        for i, line in enumerate(lines):
            if not pattern.search(line):
                continue
            end = i
            if include_body and line.endswith(self.body_open):
                end = self._body_end(lines, i)
                if end is None:
                    msg = f"end of function {name!r} not found after {path}:{i + 1}"
                    raise UnterminatedBodyError(msg)
            return LineRange(self._doc_start(lines, i) if include_doc else i, end)

        raise NameNotFoundError(f"function {name!r} not found in {path!r}")

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
        needle = f"{self.type_keyword} {name} "
        first = 0 if after is None else after + 1
        for i in range(first, len(lines)):
            line = lines[i]
            if not line.startswith(needle):
                continue
            end = i
            if include_body and self.struct_marker in line:
                end = self._body_end(lines, i)
                if end is None:
                    msg = f"end of type {name!r} not found after {path}:{i + 1}"
                    raise UnterminatedBodyError(msg)
            return LineRange(self._doc_start(lines, i) if include_doc else i, end)

        raise NameNotFoundError(f"type {name!r} not found in {path!r}")

    def _body_end(self, lines: Sequence[str], start: int) -> int | None:
        """Index of the first line after ``start`` that closes a body."""
        for j in range(start + 1, len(lines)):
            if lines[j].startswith(self.body_close):
                return j
        return None

    def _doc_start(self, lines: Sequence[str], start: int) -> int:
        """Walk upward over the comment lines directly above ``start``."""
        while start > 0 and lines[start - 1].startswith(self.comment_prefix):
            start -= 1
        return start
