"""LineBuilder for O(n) accumulation of newline-terminated output.

Collects lines in a list and joins once at the end, terminating every line
with ``\\n`` (including the last).

Thread Safety:
LineBuilder instances are local to each render() call.

"""

from __future__ import annotations

from collections.abc import Iterable


class LineBuilder:
    """Newline-terminated line accumulator.

    Usage:
            >>> lb = LineBuilder()
            >>> _ = lb.line("```go").lines(["x := 1"]).line("```")
            >>> lb.build()
            '```go\\nx := 1\\n```\\n'

    """

    __slots__ = ("_lines",)

    def __init__(self) -> None:
        self._lines: list[str] = []

    def line(self, s: str = "") -> LineBuilder:
        """Append one line (empty string = blank line)."""
        self._lines.append(s)
        return self

    def lines(self, lines: Iterable[str]) -> LineBuilder:
        """Append several lines verbatim."""
        self._lines.extend(lines)
        return self

    def build(self) -> str:
        """Join all lines, each followed by a newline."""
        if not self._lines:
            return ""
        return "\n".join(self._lines) + "\n"

    def __len__(self) -> int:
        """Number of lines appended so far."""
        return len(self._lines)

    def __bool__(self) -> bool:
        return bool(self._lines)
