"""Typed flag parsing for directive arguments.

Directives such as ``go:func`` take leading flags followed by positional
arguments, in the style of Go's ``flag`` package:

    go:func -no-doc -no-body Server.Serve

Rules:
- a flag is ``-name`` or ``--name``, optionally ``=value`` for booleans
- parsing stops at the first token that is not a flag, or after ``--``
- an unknown flag is an error

Thread Safety:
All options classes are frozen dataclasses (immutable).

Example:
    >>> opts, args = DefinitionOptions.parse("-no-doc Server.Serve")
    >>> opts.include_doc, opts.include_body, args
    (False, True, ['Server.Serve'])

"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Self

_TRUE_VALUES = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE_VALUES = frozenset({"0", "f", "F", "false", "FALSE", "False"})


class FlagError(ValueError):
    """A flag token could not be parsed."""


@dataclass(frozen=True, slots=True)
class DirectiveOptions:
    """Base class for boolean directive flags.

    Every field is a bool flag; the flag name is the field name with
    underscores written as hyphens (``no_doc`` -> ``-no-doc``).
    """

    @classmethod
    def flag_names(cls) -> dict[str, str]:
        """Map flag spelling to field name."""
        return {f.name.replace("_", "-"): f.name for f in fields(cls)}

    @classmethod
    def parse(cls, argument: str) -> tuple[Self, list[str]]:
        """Split an argument string into flags and positional arguments.

        Args:
            argument: Directive argument text

        Returns:
            (options, positional arguments)

        Raises:
            FlagError: On an unknown flag or a bad boolean value
        """
        known = cls.flag_names()
        kwargs: dict[str, Any] = {}
        tokens = argument.split()

        i = 0
        while i < len(tokens):
            token = tokens[i]
            if token == "--":
                i += 1
                break
            if len(token) < 2 or not token.startswith("-"):
                break

            name = token[2:] if token.startswith("--") else token[1:]
            name, has_value, value = name.partition("=")
            if name not in known:
                msg = f"flag provided but not defined: -{name}"
                raise FlagError(msg)
            kwargs[known[name]] = cls._coerce(value, name) if has_value else True
            i += 1

        return cls(**kwargs), tokens[i:]

    @staticmethod
    def _coerce(value: str, name: str) -> bool:
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        msg = f"invalid boolean value {value!r} for -{name}"
        raise FlagError(msg)


@dataclass(frozen=True, slots=True)
class DefinitionOptions(DirectiveOptions):
    """Flags shared by ``go:func`` and ``go:type``.

    Attributes:
        no_doc: Leave out the doc comment above the definition
        no_body: Capture the signature line only
    """

    no_doc: bool = False
    no_body: bool = False

    @property
    def include_doc(self) -> bool:
        return not self.no_doc

    @property
    def include_body(self) -> bool:
        return not self.no_body


__all__ = ["DefinitionOptions", "DirectiveOptions", "FlagError"]
