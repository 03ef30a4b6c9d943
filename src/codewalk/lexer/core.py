"""Forward-only lexer for directive lines.

Splits a string into parts by repeatedly chopping off a prefix. The
``next_*`` methods chop off and return the matched portion; the ``skip_*``
methods chop off the matched portion and report whether anything matched.
The position never moves backwards.

Thread Safety:
Lexer instances are single-use. Create one per directive line.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from typing import TYPE_CHECKING

from codewalk.lexer.charsets import HSPACE

if TYPE_CHECKING:
    from codewalk.lexer.byteset import ByteSet


class Lexer:
    """Prefix-chopping scanner over one line of text.

    Usage:
            >>> from codewalk.lexer import KEYWORD_CHARS
            >>> lex = Lexer("go:func  -no-doc Add")
            >>> lex.next_byte_set(KEYWORD_CHARS)
            'go:func'
            >>> lex.skip_hspace()
            True
            >>> lex.rest()
            '-no-doc Add'

    """

    __slots__ = ("_text", "_pos")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def rest(self) -> str:
        """Return the part of the text that has not been chopped off yet."""
        return self._text[self._pos :]

    def at_end(self) -> bool:
        """Return True when the whole text has been consumed."""
        return self._pos >= len(self._text)

    def skip_hspace(self) -> bool:
        """Chop off the longest run of spaces and tabs.

        Returns:
            True if at least one character was consumed
        """
        return bool(self.next_byte_set(HSPACE))

    def next_byte_set(self, chars: ByteSet) -> str:
        """Chop off the longest prefix (possibly empty) made of ``chars``.

        Args:
            chars: Allowed characters

        Returns:
            The consumed prefix
        """
        text = self._text
        start = self._pos
        end = start
        length = len(text)
        while end < length and chars.contains(text[end]):
            end += 1
        self._pos = end
        return text[start:end]
