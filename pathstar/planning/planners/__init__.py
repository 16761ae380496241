# pathstar/planning/planners/__init__.py

from .base import PlannerBase, PathGenerator
from .a_star import AStarPlanner, search


__all__ = [
    "PlannerBase",
    "PathGenerator",
    "AStarPlanner",
    "search",
]
