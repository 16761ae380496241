# pathstar/planning/costs/uniform_cost.py
from pathstar.types import Position
from .base import CostFunction

class UniformCost(CostFunction):
    """
    每步固定代价 (默认 1)，不区分直行和斜行。
    配合 ChebyshevHeuristic 使用。
    """
    def __init__(self, step_cost: float = 1.0):
        self.step_cost = step_cost

    def calculate(self, current: Position, next_position: Position) -> float:
        return self.step_cost
