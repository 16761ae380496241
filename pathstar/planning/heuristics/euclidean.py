# pathstar/planning/heuristics/euclidean.py
import math
from .base import AxisHeuristic

class EuclideanHeuristic(AxisHeuristic):
    """
    欧氏距离启发式
    适用于步长按几何距离计费的栅格 (配合 DistanceCost)。
    注意：如果斜行和直行都计 1 (UniformCost)，它会高估，不再可采纳。
    """
    def combine(self, drow: int, dcol: int) -> float:
        return math.hypot(drow, dcol)
