"""Directive registry for keyword lookup and registration.

Thread Safety:
DirectiveRegistry is immutable after creation. Safe to share.
Use DirectiveRegistryBuilder for mutable construction.

Example:
    >>> builder = create_registry_with_defaults()
    >>> builder.register(SkipDirective())
    >>> registry = builder.build()
    >>> registry.get("skip")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codewalk.directives.protocol import DirectiveHandler


class DirectiveRegistry:
    """Immutable mapping from directive keywords to handlers."""

    __slots__ = ("_handlers", "_by_name")

    def __init__(
        self,
        handlers: tuple[DirectiveHandler, ...],
        by_name: dict[str, DirectiveHandler],
    ) -> None:
        """Initialize registry with pre-built mappings.

        Use DirectiveRegistryBuilder to create instances.
        """
        self._handlers = handlers
        self._by_name = by_name

    def get(self, name: str) -> DirectiveHandler | None:
        """Get handler for a keyword, or None if unregistered."""
        return self._by_name.get(name)

    def has(self, name: str) -> bool:
        """Check if keyword is registered."""
        return name in self._by_name

    @property
    def names(self) -> frozenset[str]:
        """Get all registered keywords."""
        return frozenset(self._by_name.keys())

    @property
    def handlers(self) -> tuple[DirectiveHandler, ...]:
        """Get all registered handlers."""
        return self._handlers

    def __contains__(self, name: str) -> bool:
        return self.has(name)

    def __len__(self) -> int:
        """Number of registered keywords."""
        return len(self._by_name)


class DirectiveRegistryBuilder:
    """Mutable builder for DirectiveRegistry."""

    __slots__ = ("_handlers", "_by_name")

    def __init__(self) -> None:
        self._handlers: list[DirectiveHandler] = []
        self._by_name: dict[str, DirectiveHandler] = {}

    def register(self, handler: DirectiveHandler) -> DirectiveRegistryBuilder:
        """Register a directive handler.

        Returns:
            Self for chaining

        Raises:
            TypeError: If handler has no ``names`` or ``apply``
            ValueError: If a keyword is already registered
        """
        if not hasattr(handler, "names"):
            msg = f"Handler {type(handler).__name__} missing 'names' attribute"
            raise TypeError(msg)
        if not callable(getattr(handler, "apply", None)):
            msg = f"Handler {type(handler).__name__} missing 'apply' method"
            raise TypeError(msg)

        for name in handler.names:
            if name in self._by_name:
                existing = self._by_name[name]
                msg = f"Directive '{name}' already registered by {type(existing).__name__}"
                raise ValueError(msg)
            self._by_name[name] = handler

        self._handlers.append(handler)
        return self

    def register_all(self, handlers: list[DirectiveHandler]) -> DirectiveRegistryBuilder:
        """Register multiple handlers."""
        for handler in handlers:
            self.register(handler)
        return self

    def build(self) -> DirectiveRegistry:
        """Build immutable registry from registered handlers."""
        return DirectiveRegistry(
            handlers=tuple(self._handlers),
            by_name=dict(self._by_name),
        )

    def __len__(self) -> int:
        """Number of registered handlers."""
        return len(self._handlers)


def create_registry_with_defaults() -> DirectiveRegistryBuilder:
    """Create a builder pre-populated with the built-in directives.

    Built-ins: file, start, end, endUp, go:func, go:type.
    """
    from codewalk.directives.builtins import BUILTIN_DIRECTIVES

    builder = DirectiveRegistryBuilder()
    builder.register_all([cls() for cls in BUILTIN_DIRECTIVES])
    return builder


# Cached singleton; DirectiveRegistry is immutable
_DEFAULT_REGISTRY: DirectiveRegistry | None = None


def create_default_registry() -> DirectiveRegistry:
    """Get the default directive registry (cached singleton)."""
    global _DEFAULT_REGISTRY
    if _DEFAULT_REGISTRY is None:
        _DEFAULT_REGISTRY = create_registry_with_defaults().build()
    return _DEFAULT_REGISTRY
