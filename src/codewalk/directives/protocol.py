"""DirectiveHandler protocol for extraction-block commands.

Each line inside an extraction block starts with a keyword. The composer
looks the keyword up in the registry and hands the rest of the line to the
matching handler, which narrows the block's Snippet.

Thread Safety:
Handlers must be stateless. All state lives in the Snippet passed in.

Example:
    >>> class SkipDirective:
    ...     names = ("skip",)
    ...     usage = "skip <lines>"
    ...
    ...     def apply(self, snippet, argument):
    ...         snippet.start += int(argument)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from codewalk.snippet import Snippet


@runtime_checkable
class DirectiveHandler(Protocol):
    """Protocol for directive implementations.

    Attributes:
        names: Keywords this handler responds to, e.g. ("go:func",)
        usage: One-line usage string shown on malformed arguments
    """

    names: ClassVar[tuple[str, ...]]
    usage: ClassVar[str]

    def apply(self, snippet: Snippet, argument: str) -> None:
        """Apply the directive to the block's snippet.

        Args:
            snippet: Resolution state of the enclosing block
            argument: Text after the keyword and its following whitespace

        Raises:
            CodewalkError: On malformed arguments or failed resolution
        """
        ...
