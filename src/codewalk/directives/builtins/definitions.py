"""Definition directives: go:func and go:type.

Syntax:
go:func [-no-doc] [-no-body] [<Type>.]<Name>
go:type [-no-doc] [-no-body] <Type>

By default the range covers the doc comment, the signature and the body.
``-no-doc`` drops the comment; ``-no-body`` keeps only the signature line.
Ranges are located by the configured BoundaryDetector.

Thread Safety:
Stateless handlers. Safe for concurrent use across threads.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from codewalk.directives.options import DefinitionOptions, FlagError
from codewalk.errors import DirectiveUsageError

if TYPE_CHECKING:
    from codewalk.snippet import Snippet


class _DefinitionDirective:
    usage: ClassVar[str]

    def _parse(self, argument: str) -> tuple[DefinitionOptions, str]:
        try:
            options, args = DefinitionOptions.parse(argument)
        except FlagError as exc:
            raise DirectiveUsageError(f"{exc}; usage: {self.usage}") from None
        if len(args) != 1 or not args[0].strip("."):
            raise DirectiveUsageError(f"usage: {self.usage}")
        return options, args[0]


class GoFuncDirective(_DefinitionDirective):
    """Capture a function or method definition."""

    names: ClassVar[tuple[str, ...]] = ("go:func",)
    usage: ClassVar[str] = "go:func [-no-doc] [-no-body] [<Type>.]<Name>"

    def apply(self, snippet: Snippet, argument: str) -> None:
        options, name = self._parse(argument)
        snippet.set_function_boundary(
            name,
            include_doc=options.include_doc,
            include_body=options.include_body,
        )


class GoTypeDirective(_DefinitionDirective):
    """Capture a type definition."""

    names: ClassVar[tuple[str, ...]] = ("go:type",)
    usage: ClassVar[str] = "go:type [-no-doc] [-no-body] <Type>"

    def apply(self, snippet: Snippet, argument: str) -> None:
        options, name = self._parse(argument)
        snippet.set_type_boundary(
            name,
            include_doc=options.include_doc,
            include_body=options.include_body,
        )
