"""Target and anchor directives: file, start, end, endUp.

Syntax:
file path/to/source.go
start ^func \\(s \\*Server\\) Serve
end ^}
endUp 1

``start`` needs exactly one matching line in the file. ``end`` takes the
first match after the start. ``endUp`` moves the end up, typically to drop
a closing brace.

Thread Safety:
Stateless handlers. Safe for concurrent use across threads.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar

from codewalk.errors import DirectiveUsageError, PatternError

if TYPE_CHECKING:
    from codewalk.snippet import Snippet


def compile_pattern(text: str) -> re.Pattern[str]:
    """Compile an anchor argument.

    Raises:
        PatternError: If ``text`` is not a valid regular expression
    """
    try:
        return re.compile(text)
    except re.error as exc:
        raise PatternError(text, str(exc)) from exc


class FileDirective:
    """Set the target file of the block."""

    names: ClassVar[tuple[str, ...]] = ("file",)
    usage: ClassVar[str] = "file <path>"

    def apply(self, snippet: Snippet, argument: str) -> None:
        if not argument:
            raise DirectiveUsageError(f"usage: {self.usage}")
        snippet.file = argument


class StartDirective:
    """Anchor the range start on the one line matching a pattern."""

    names: ClassVar[tuple[str, ...]] = ("start",)
    usage: ClassVar[str] = "start <regexp>"

    def apply(self, snippet: Snippet, argument: str) -> None:
        snippet.set_start(compile_pattern(argument))


class EndDirective:
    """Anchor the range end on the first later line matching a pattern."""

    names: ClassVar[tuple[str, ...]] = ("end",)
    usage: ClassVar[str] = "end <regexp>"

    def apply(self, snippet: Snippet, argument: str) -> None:
        snippet.set_end(compile_pattern(argument))


class EndUpDirective:
    """Move the resolved end up by a number of lines."""

    names: ClassVar[tuple[str, ...]] = ("endUp",)
    usage: ClassVar[str] = "endUp <lines>"

    def apply(self, snippet: Snippet, argument: str) -> None:
        try:
            n = int(argument)
        except ValueError:
            msg = f"usage: {self.usage}: invalid line count {argument!r}"
            raise DirectiveUsageError(msg) from None
        snippet.set_end_relative(n)
