"""ContextVar-based run configuration for codewalk.

Config is set once per run and read by the composer, the directive handlers
and the renderer within that context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so concurrent runs never observe each other's configuration.

Usage:
    from codewalk.config import WalkConfig, walk_config_context

    with walk_config_context(WalkConfig(language="python", base_dir="src")):
        doc = compose(source, source_file="README.src.md")

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from codewalk.boundaries.protocol import BoundaryDetector
    from codewalk.directives.registry import DirectiveRegistry


@dataclass(frozen=True, slots=True)
class WalkConfig:
    """Immutable run configuration.

    Attributes:
        open_fence: Line that opens an extraction block
        close_fence: Line that closes an extraction block
        language: Info string written on rendered code fences
        base_dir: Directory that relative target paths are resolved against
            (None means the current working directory)
        cache_sources: Read each target file once per run
        boundary_detector: Function/type locator (None means the heuristic)
        directive_registry: Keyword handlers (None means the built-ins)

    """

    open_fence: str = "```codewalk"
    close_fence: str = "```"
    language: str = "go"
    base_dir: str | Path | None = None
    cache_sources: bool = True
    boundary_detector: "BoundaryDetector | None" = None
    directive_registry: "DirectiveRegistry | None" = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "WalkConfig":
        """Create WalkConfig from dictionary.

        Only includes keys that are valid WalkConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = WalkConfig.from_dict({"language": "rust", "color": "red"})
            >>> config.language
            'rust'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: WalkConfig = WalkConfig()

_walk_config: ContextVar[WalkConfig] = ContextVar(
    "walk_config",
    default=_DEFAULT_CONFIG,
)


def get_walk_config() -> WalkConfig:
    """Get current run configuration (thread-local)."""
    return _walk_config.get()


def set_walk_config(config: WalkConfig) -> None:
    """Set run configuration for current context."""
    _walk_config.set(config)


def reset_walk_config() -> None:
    """Reset to default configuration."""
    _walk_config.set(_DEFAULT_CONFIG)


@contextmanager
def walk_config_context(config: WalkConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with walk_config_context(WalkConfig(language="python")):
        ...     get_walk_config().language
        'python'

    """
    previous = _walk_config.get()
    _walk_config.set(config)
    try:
        yield
    finally:
        _walk_config.set(previous)


__all__ = [
    "WalkConfig",
    "get_walk_config",
    "reset_walk_config",
    "set_walk_config",
    "walk_config_context",
]
