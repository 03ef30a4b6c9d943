"""Target-file reading with an optional per-run content cache.

Every directive that needs file content, and every block close, reads the
target file through a SourceReader. With a cache attached, the first read
of a path populates it and later reads reuse the text; without one, each
read goes back to disk.

Content is assumed not to change while a document is being processed, so
both modes observe the same lines. Caches live for one run only.

Thread Safety:
    DictSourceCache is not thread-safe. Runs create their own cache and
    never share it.

Example:
    >>> reader = SourceReader(base_dir="examples", cache=DictSourceCache())
    >>> lines = reader.read_lines("hello.go")
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from codewalk.errors import SourceReadError
from codewalk.utils.logger import get_logger

logger = get_logger(__name__)


class SourceCache(Protocol):
    """Protocol for path-keyed content caches."""

    def get(self, path: str) -> str | None:
        """Return cached text if present, else None."""
        ...

    def put(self, path: str, text: str) -> None:
        """Store text for path."""
        ...


class DictSourceCache:
    """In-memory source cache using a dict.

    Not thread-safe. Create one per run.
    """

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, path: str) -> str | None:
        """Return cached text if present, else None."""
        return self._data.get(path)

    def put(self, path: str, text: str) -> None:
        """Store text for path."""
        self._data[path] = text

    def clear(self) -> None:
        """Drop every entry."""
        self._data.clear()

    def __contains__(self, path: str) -> bool:
        return path in self._data

    def __len__(self) -> int:
        return len(self._data)


def read_text(path: str | Path) -> str:
    """Read a file as UTF-8 text without newline translation.

    Raises:
        SourceReadError: If the file is missing, unreadable or not UTF-8
    """
    try:
        return Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        reason = exc.strerror if isinstance(exc, OSError) and exc.strerror else str(exc)
        raise SourceReadError(str(path), reason) from exc


class SourceReader:
    """Reads target files relative to a base directory.

    Args:
        base_dir: Directory for relative paths (None = current directory)
        cache: Optional content cache shared by all reads of one run
    """

    __slots__ = ("_base_dir", "_cache")

    def __init__(
        self,
        base_dir: str | Path | None = None,
        cache: SourceCache | None = None,
    ) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else None
        self._cache = cache

    def resolve(self, path: str) -> Path:
        """Map a path as written in a directive to a filesystem path."""
        candidate = Path(path)
        if self._base_dir is None or candidate.is_absolute():
            return candidate
        return self._base_dir / candidate

    def read_text(self, path: str) -> str:
        """Return the full text of a target file."""
        resolved = str(self.resolve(path))
        if self._cache is not None:
            cached = self._cache.get(resolved)
            if cached is not None:
                return cached
        logger.debug("reading %s", resolved)
        text = read_text(resolved)
        if self._cache is not None:
            self._cache.put(resolved, text)
        return text

    def read_lines(self, path: str) -> list[str]:
        """Return a target file split on newlines.

        A trailing newline yields a final empty line, so indices match the
        file's line numbers minus one.
        """
        return self.read_text(path).split("\n")


__all__ = [
    "DictSourceCache",
    "SourceCache",
    "SourceReader",
    "read_text",
]
