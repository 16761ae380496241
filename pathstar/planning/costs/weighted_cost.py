# pathstar/planning/costs/weighted_cost.py
from typing import List
from pathstar.types import Position
from .base import CostFunction

class WeightedCost(CostFunction):
    """
    多个代价函数的加权和。
    Cost = sum(w_i * fn_i(current, next))
    """
    def __init__(self, cost_functions: List[CostFunction], weights: List[float]):
        self.cost_fns = cost_functions
        self.weights = weights

        assert len(self.cost_fns) == len(self.weights), "Cost functions and weights mismatch"

    def calculate(self, current: Position, next_position: Position) -> float:
        total = 0.0
        for fn, w in zip(self.cost_fns, self.weights):
            total += w * fn.calculate(current, next_position)
        return total
