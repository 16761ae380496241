# pathstar/planning/path_utils.py
from typing import Sequence

from pathstar.types import Position
from pathstar.planning.planners.base import PathGenerator


def path_cost(generator: PathGenerator, path: Sequence[Position]) -> float:
    """
    按生成器的单步代价累加整条路径的代价。
    path 是搜索结果的顺序 (目标在前，起点在后)，所以反向逐段计算。
    """
    total = 0.0
    for current, next_position in zip(reversed(path[1:]), reversed(path[:-1])):
        total += generator.calculate_cost(current, next_position)
    return total


def is_connected(generator: PathGenerator, path: Sequence[Position]) -> bool:
    """检查路径上每一步 (起点 -> 目标方向) 都是生成器给出的邻居"""
    if not path:
        return False
    for current, next_position in zip(reversed(path[1:]), reversed(path[:-1])):
        if next_position not in generator.generate_paths(current):
            return False
    return True
