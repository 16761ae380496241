# pathstar/planning/heuristics/__init__.py

from .base import Heuristic, AxisHeuristic, axis_deltas
from .euclidean import EuclideanHeuristic
from .octile import OctileHeuristic
from .chebyshev import ChebyshevHeuristic
from .zero import ZeroHeuristic
from .manhattan import ManhattanHeuristic


__all__ = [
    "Heuristic",
    "AxisHeuristic",
    "axis_deltas",
    "EuclideanHeuristic",
    "OctileHeuristic",
    "ChebyshevHeuristic",
    "ZeroHeuristic",
    "ManhattanHeuristic",
]
