"""Directive system for extraction blocks.

Provides:
- DirectiveHandler: protocol for keyword handlers
- DirectiveRegistry / DirectiveRegistryBuilder: keyword lookup
- DirectiveOptions / DefinitionOptions: Go-style flag parsing
- Built-in handlers for file, start, end, endUp, go:func, go:type

Example:
    >>> from codewalk.directives import create_default_registry
    >>> registry = create_default_registry()
    >>> sorted(registry.names)
    ['end', 'endUp', 'file', 'go:func', 'go:type', 'start']

"""

from codewalk.directives.builtins import (
    BUILTIN_DIRECTIVES,
    EndDirective,
    EndUpDirective,
    FileDirective,
    GoFuncDirective,
    GoTypeDirective,
    StartDirective,
)
from codewalk.directives.options import DefinitionOptions, DirectiveOptions, FlagError
from codewalk.directives.protocol import DirectiveHandler
from codewalk.directives.registry import (
    DirectiveRegistry,
    DirectiveRegistryBuilder,
    create_default_registry,
    create_registry_with_defaults,
)

__all__ = [
    "BUILTIN_DIRECTIVES",
    "DefinitionOptions",
    "DirectiveHandler",
    "DirectiveOptions",
    "DirectiveRegistry",
    "DirectiveRegistryBuilder",
    "EndDirective",
    "EndUpDirective",
    "FileDirective",
    "FlagError",
    "GoFuncDirective",
    "GoTypeDirective",
    "StartDirective",
    "create_default_registry",
    "create_registry_with_defaults",
]
