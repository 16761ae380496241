from abc import ABC, abstractmethod
from typing import Optional, Tuple
from pathstar.types import Position, TargetSpec


def axis_deltas(position: Position, target: TargetSpec) -> Tuple[Optional[int], Optional[int]]:
    """
    目标在各轴上的距离 (drow, dcol)。
    目标中为 None 的轴是通配轴，对应的 delta 也为 None。
    """
    target_row, target_col = target
    drow = None if target_row is None else abs(position[0] - target_row)
    dcol = None if target_col is None else abs(position[1] - target_col)
    return drow, dcol


class Heuristic(ABC):
    @abstractmethod
    def estimate(self, current: Position, target: TargetSpec) -> float:
        """统一接口：只接受当前位置和目标描述"""
        pass


class AxisHeuristic(Heuristic):
    """
    处理通配目标的公共逻辑：
    1. 两轴都通配 -> 任何位置都满足，返回 0
    2. 只约束一轴 -> 只需走到那一行/列，返回该轴距离
    3. 两轴都约束 -> 交给子类的 combine
    """
    def estimate(self, current: Position, target: TargetSpec) -> float:
        drow, dcol = axis_deltas(current, target)
        if drow is None and dcol is None:
            return 0.0
        if drow is None:
            return float(dcol)
        if dcol is None:
            return float(drow)
        return self.combine(drow, dcol)

    @abstractmethod
    def combine(self, drow: int, dcol: int) -> float:
        pass
