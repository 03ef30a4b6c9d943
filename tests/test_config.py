"""Tests for ContextVar-based run configuration.

Validates defaults, immutability, context manager behavior and thread
isolation.
"""

from pathlib import Path
from threading import Thread

import pytest

from codewalk import generate_text
from codewalk.config import (
    WalkConfig,
    get_walk_config,
    reset_walk_config,
    set_walk_config,
    walk_config_context,
)
from codewalk.directives import create_default_registry


class TestWalkConfigDataclass:
    """Test WalkConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = WalkConfig()
        assert config.open_fence == "```codewalk"
        assert config.close_fence == "```"
        assert config.language == "go"
        assert config.base_dir is None
        assert config.cache_sources is True
        assert config.boundary_detector is None
        assert config.directive_registry is None

    def test_immutability(self) -> None:
        config = WalkConfig()
        with pytest.raises(AttributeError):
            config.language = "rust"  # type: ignore[misc]

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = WalkConfig.from_dict({"language": "rust", "cache_sources": False, "color": 1})
        assert config.language == "rust"
        assert config.cache_sources is False
        assert config.open_fence == "```codewalk"

    def test_from_dict_accepts_objects(self) -> None:
        registry = create_default_registry()
        config = WalkConfig.from_dict({"directive_registry": registry})
        assert config.directive_registry is registry


class TestContextVarFunctions:
    """Test get/set/reset functions."""

    def test_default(self) -> None:
        reset_walk_config()
        assert get_walk_config() == WalkConfig()

    def test_set_and_reset(self) -> None:
        set_walk_config(WalkConfig(language="python"))
        try:
            assert get_walk_config().language == "python"
        finally:
            reset_walk_config()
        assert get_walk_config().language == "go"


class TestWalkConfigContext:
    """Test walk_config_context context manager."""

    def test_restores_previous(self) -> None:
        outer = WalkConfig(language="c")
        with walk_config_context(outer):
            with walk_config_context(WalkConfig(language="rust")):
                assert get_walk_config().language == "rust"
            assert get_walk_config() is outer
        assert get_walk_config().language == "go"

    def test_restores_on_exception(self) -> None:
        with pytest.raises(RuntimeError):
            with walk_config_context(WalkConfig(language="rust")):
                raise RuntimeError("boom")
        assert get_walk_config().language == "go"

    def test_generate_text_reads_context(self, tmp_path: Path, foo_go: Path) -> None:
        source = "```codewalk\nfile foo.go\ngo:func Add\n```"
        with walk_config_context(WalkConfig(base_dir=tmp_path, language="zig")):
            assert "```zig\n" in generate_text(source)


class TestThreadIsolation:
    """Each thread sees its own configuration."""

    def test_threads_do_not_share_config(self) -> None:
        results: dict[str, str] = {}

        def worker(language: str) -> None:
            set_walk_config(WalkConfig(language=language))
            results[language] = get_walk_config().language

        threads = [Thread(target=worker, args=(lang,)) for lang in ("go", "rust", "c", "zig")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == {"go": "go", "rust": "rust", "c": "c", "zig": "zig"}
        assert get_walk_config().language == "go"
