"""Shared fixtures: a small Go source tree under tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from codewalk.config import WalkConfig
from codewalk.snippet import Snippet
from codewalk.sources import SourceReader

# Line indices (0-based) are relied on by the tests:
#   2 import, 4-5 Point doc, 6-8 Point struct, 10 Unit,
#   12 Add doc, 13-15 Add, 17 Dist doc, 18-20 Dist, 22 Short
SHAPES_GO = """\
package shapes

import "math"

// Point is a location in the plane.
// It is immutable.
type Point struct {
\tX, Y float64
}

type Unit string

// Add returns the sum of a and b.
func Add(a, b int) int {
\treturn a + b
}

// Dist returns the distance between p and q.
func (p Point) Dist(q Point) float64 {
\treturn math.Hypot(q.X-p.X, q.Y-p.Y)
}

func Short() int { return 1 }
"""

FOO_GO = "func Add(a, b int) int {\n\treturn a + b\n}"


@pytest.fixture
def shapes_go(tmp_path: Path) -> Path:
    path = tmp_path / "shapes.go"
    path.write_text(SHAPES_GO, encoding="utf-8")
    return path


@pytest.fixture
def foo_go(tmp_path: Path) -> Path:
    path = tmp_path / "foo.go"
    path.write_text(FOO_GO, encoding="utf-8")
    return path


@pytest.fixture
def reader(tmp_path: Path) -> SourceReader:
    return SourceReader(base_dir=tmp_path)


@pytest.fixture
def snippet(reader: SourceReader, shapes_go: Path) -> Snippet:
    s = Snippet(reader)
    s.file = "shapes.go"
    return s


@pytest.fixture
def walk_config(tmp_path: Path) -> WalkConfig:
    return WalkConfig(base_dir=tmp_path)
