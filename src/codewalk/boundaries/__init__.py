"""Definition boundary detection.

Provides:
- BoundaryDetector: protocol the go:func / go:type directives depend on
- HeuristicBoundaryDetector: default line-prefix implementation
- LineRange: inclusive result range

"""

from codewalk.boundaries.heuristic import HeuristicBoundaryDetector
from codewalk.boundaries.protocol import BoundaryDetector, LineRange

_DEFAULT_DETECTOR = HeuristicBoundaryDetector()


def default_boundary_detector() -> HeuristicBoundaryDetector:
    """Return the shared heuristic detector (stateless, safe to share)."""
    return _DEFAULT_DETECTOR


__all__ = [
    "BoundaryDetector",
    "HeuristicBoundaryDetector",
    "LineRange",
    "default_boundary_detector",
]
