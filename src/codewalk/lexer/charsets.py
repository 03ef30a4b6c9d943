"""Shared character sets for directive lexing.

Module-level instances, built once and reused for every line.

Usage:
    from codewalk.lexer.charsets import KEYWORD_CHARS

    keyword = lexer.next_byte_set(KEYWORD_CHARS)
"""

from codewalk.lexer.byteset import ByteSet

# Directive keywords: "file", "endUp", "go:func", ...
KEYWORD_CHARS: ByteSet = ByteSet("A-Za-z:")

# Horizontal whitespace between a keyword and its argument
HSPACE: ByteSet = ByteSet(" \t")
