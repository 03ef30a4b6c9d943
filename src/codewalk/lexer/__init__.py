"""Directive-line lexer for codewalk.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, ByteSet, character sets
├── core.py              # Lexer (forward-only prefix chopping)
├── byteset.py           # ByteSet (256-entry membership table)
└── charsets.py          # KEYWORD_CHARS, HSPACE

Usage:
    >>> from codewalk.lexer import KEYWORD_CHARS, Lexer
    >>> lex = Lexer("start ^func main")
    >>> lex.next_byte_set(KEYWORD_CHARS), lex.skip_hspace(), lex.rest()
    ('start', True, '^func main')

"""

from codewalk.lexer.byteset import ByteSet
from codewalk.lexer.charsets import HSPACE, KEYWORD_CHARS
from codewalk.lexer.core import Lexer

__all__ = ["HSPACE", "KEYWORD_CHARS", "ByteSet", "Lexer"]
