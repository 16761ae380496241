# pathstar/planning/heuristics/manhattan.py
from .base import AxisHeuristic

class ManhattanHeuristic(AxisHeuristic):
    """
    曼哈顿距离 (L1).
    Cost = |drow| + |dcol|
    注意：在允许对角移动的 8-连通栅格中，
    Manhattan (2.0) > Diagonal (1.0 或 1.414)，违反了 Admissibility (h <= true_cost)。
    因此 A* 可能找不到最短路径，但通常能极大加速搜索（贪婪倾向）。
    4-连通栅格下它是精确且可采纳的。
    """
    def combine(self, drow: int, dcol: int) -> float:
        return float(drow + dcol)
