# pathstar/planning/heuristics/octile.py
from .base import AxisHeuristic

class OctileHeuristic(AxisHeuristic):
    """
    针对 8-连通栅格地图的精确启发式。
    假设直行代价为 1.0，斜行代价为 sqrt(2) ≈ 1.414
    """
    def combine(self, drow: int, dcol: int) -> float:
        # 公式: (sqrt(2) - 1) * min(dx, dy) + max(dx, dy)
        # 0.414 ≈ sqrt(2) - 1
        return 0.41421356 * min(drow, dcol) + max(drow, dcol)
