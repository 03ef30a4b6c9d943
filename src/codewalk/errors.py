"""Exception classes for codewalk.

Every failure raised while composing a document derives from CodewalkError.
Errors are raised without a location by the resolver and the directive
handlers; the block composer attaches the document path and line number
before the error leaves the run.
"""

from __future__ import annotations


class CodewalkError(Exception):
    """Base exception for all codewalk errors.

    Carries an optional document location. Once located, the string form
    reads ``docs/guide.md:7: message``.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize error with optional location.

        Args:
            message: Error description
            lineno: Line number in the source document (1-indexed)
            source_file: Path to the source document (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file
        super().__init__(self._format())

    def _format(self) -> str:
        location = ""
        if self.source_file:
            location = f"{self.source_file}:"
        if self.lineno is not None:
            location += f"{self.lineno}:"
        if location:
            return f"{location} {self.message}"
        return self.message

    def at(self, source_file: str | None, lineno: int) -> CodewalkError:
        """Attach a document location to this error.

        Errors that already carry a line number keep it.

        Args:
            source_file: Path to the source document
            lineno: Line number of the offending line (1-indexed)

        Returns:
            self, for ``raise err.at(path, lineno)``
        """
        if self.lineno is None:
            self.source_file = source_file
            self.lineno = lineno
            self.args = (self._format(),)
        return self


class SourceReadError(CodewalkError):
    """A document or target file could not be read as text."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        super().__init__(f"cannot read {path!r}: {reason}")


class DirectiveError(CodewalkError):
    """Base class for errors tied to a single directive line."""


class UnknownDirectiveError(DirectiveError):
    """The leading keyword of a directive line is not registered."""

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__(f"invalid codewalk command {keyword!r}")


class DirectiveUsageError(DirectiveError):
    """A directive received malformed arguments."""


class DirectiveOrderError(DirectiveError):
    """A directive needs state that an earlier directive has not set."""


class PatternError(DirectiveError):
    """An anchor argument is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        super().__init__(f"invalid regular expression {pattern!r}: {reason}")


class ResolveError(CodewalkError):
    """Base class for failures to resolve a line range in a target file."""


class AnchorNotFoundError(ResolveError):
    """A start or end anchor matched no line."""


class AmbiguousAnchorError(ResolveError):
    """A start anchor matched more than one line."""

    def __init__(self, pattern: str, path: str, count: int) -> None:
        self.pattern = pattern
        self.path = path
        self.count = count
        super().__init__(f"regular expression {pattern!r} found {count} times in {path!r}")


class NameNotFoundError(ResolveError):
    """No function or type definition with the requested name exists."""


class UnterminatedBodyError(ResolveError):
    """A definition opened a body that no top-level closing line ends."""


class MissingRangeError(ResolveError):
    """An extraction block closed without a resolved start or end."""


class UnterminatedBlockError(CodewalkError):
    """The document ended inside an extraction block."""


__all__ = [
    "AmbiguousAnchorError",
    "AnchorNotFoundError",
    "CodewalkError",
    "DirectiveError",
    "DirectiveOrderError",
    "DirectiveUsageError",
    "MissingRangeError",
    "NameNotFoundError",
    "PatternError",
    "ResolveError",
    "SourceReadError",
    "UnknownDirectiveError",
    "UnterminatedBlockError",
    "UnterminatedBodyError",
]
