"""Byte-valued character classes for O(1) classification.

A ByteSet covers the 256 single-byte code points, which in practice means
ASCII keyword and punctuation alphabets. Characters above U+00FF are never
members.

Thread Safety:
ByteSet instances are immutable after construction. Safe to share.

"""

from __future__ import annotations

_BYTE_RANGE = 256


class ByteSet:
    """Fixed alphabet built from a compact pattern such as ``"0-9A-Za-z_"``.

    Pattern syntax:
    - ``a-z`` adds the inclusive range from ``a`` to ``z``
    - any other character adds itself
    - a literal hyphen must be written first, last, or directly after a
      completed range (``"a-z-"``), otherwise it is read as a range operator

    Usage:
            >>> keyword = ByteSet("A-Za-z:")
            >>> keyword.contains("g"), ":" in keyword, "-" in keyword
            (True, True, False)

    """

    __slots__ = ("_bits", "_pattern")

    def __init__(self, pattern: str) -> None:
        """Build the membership table.

        Args:
            pattern: Literal characters and inclusive ranges

        Raises:
            ValueError: If the pattern names a character above U+00FF
        """
        bits = [False] * _BYTE_RANGE
        i = 0
        n = len(pattern)
        while i < n:
            if i + 2 < n and pattern[i + 1] == "-":
                low = self._code(pattern, pattern[i])
                high = self._code(pattern, pattern[i + 2])  # inclusive
                for code in range(low, high + 1):
                    bits[code] = True
                i += 3
            else:
                bits[self._code(pattern, pattern[i])] = True
                i += 1
        self._bits = tuple(bits)
        self._pattern = pattern

    @staticmethod
    def _code(pattern: str, ch: str) -> int:
        code = ord(ch)
        if code >= _BYTE_RANGE:
            msg = f"ByteSet pattern {pattern!r} contains non-byte character {ch!r}"
            raise ValueError(msg)
        return code

    def contains(self, ch: str) -> bool:
        """Test whether a single character belongs to the set."""
        code = ord(ch)
        return code < _BYTE_RANGE and self._bits[code]

    def __contains__(self, ch: object) -> bool:
        return isinstance(ch, str) and len(ch) == 1 and self.contains(ch)

    def __len__(self) -> int:
        """Number of member code points."""
        return sum(self._bits)

    def __repr__(self) -> str:
        return f"ByteSet({self._pattern!r})"
