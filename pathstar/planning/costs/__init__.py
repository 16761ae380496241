# pathstar/planning/costs/__init__.py

from .base import CostFunction
from .uniform_cost import UniformCost
from .distance_cost import DistanceCost
from .weighted_cost import WeightedCost

__all__ = ['CostFunction', 'UniformCost', 'DistanceCost', 'WeightedCost']
