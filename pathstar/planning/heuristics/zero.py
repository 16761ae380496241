# pathstar/planning/heuristics/zero.py
from pathstar.types import Position, TargetSpec
from .base import Heuristic

class ZeroHeuristic(Heuristic):
    """
    零启发式 (h=0).
    这将使 A* 退化为 Dijkstra 算法，保证最优性，但搜索效率最低（向四面八方均匀扩散）。
    目标两轴都是通配时，任何启发式都会退化成这个。
    """
    def estimate(self, current: Position, target: TargetSpec) -> float:
        return 0.0
