# pathstar/planning/costs/distance_cost.py
import math
from pathstar.types import Position
from .base import CostFunction

class DistanceCost(CostFunction):
    """
    几何步长代价。
    Cost = hypot(drow, dcol)，直行 1.0，斜行 sqrt(2)
    """
    def calculate(self, current: Position, next_position: Position) -> float:
        drow = next_position[0] - current[0]
        dcol = next_position[1] - current[1]
        return math.hypot(drow, dcol)
