"""Built-in directive handlers."""

from codewalk.directives.builtins.anchors import (
    EndDirective,
    EndUpDirective,
    FileDirective,
    StartDirective,
    compile_pattern,
)
from codewalk.directives.builtins.definitions import GoFuncDirective, GoTypeDirective

BUILTIN_DIRECTIVES = (
    FileDirective,
    StartDirective,
    EndDirective,
    EndUpDirective,
    GoFuncDirective,
    GoTypeDirective,
)

__all__ = [
    "BUILTIN_DIRECTIVES",
    "EndDirective",
    "EndUpDirective",
    "FileDirective",
    "GoFuncDirective",
    "GoTypeDirective",
    "StartDirective",
    "compile_pattern",
]
