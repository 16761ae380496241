# pathstar/planning/heuristics/chebyshev.py
from .base import AxisHeuristic

class ChebyshevHeuristic(AxisHeuristic):
    """
    切比雪夫距离 (L-inf).
    适用于 8-连通且每步代价都为 1 的栅格 (斜行与直行同价)，此时它是精确下界。
    """
    def combine(self, drow: int, dcol: int) -> float:
        return float(max(drow, dcol))
