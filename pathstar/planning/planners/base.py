# pathstar/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from pathstar.types import Position, TargetSpec
from pathstar.planning.interfaces import IPlannerObserver


class PathGenerator(ABC):
    """
    搜索空间的能力接口 (由调用方针对自己的地图/图结构实现)

    核心算法只读取这三个方法，不做任何校验：
    - 邻居越界、代价为负、启发式不可采纳等问题都属于调用方的责任。
    """

    @abstractmethod
    def generate_paths(self, from_position: Position) -> Sequence[Position]:
        """
        返回 from_position 可以一步到达的邻居位置。
        可以为空 (死路)，不能包含 from_position 本身。
        """
        pass

    @abstractmethod
    def calculate_cost(self, current_position: Position, next_position: Position) -> float:
        """相邻两点之间单条边的代价，必须有限且 >= 0"""
        pass

    @abstractmethod
    def calculate_heuristic_cost(self, position: Position, target: TargetSpec) -> float:
        """
        从 position 到满足 target 的剩余代价估计。
        要保证最优，不能高估真实剩余代价 (Admissibility)。
        """
        pass


class PlannerBase(ABC):
    """
    所有搜索器的抽象基类
    """

    @abstractmethod
    def plan(self,
             generator: PathGenerator,
             start: Position,
             target: TargetSpec,
             observer: Optional[IPlannerObserver] = None) -> Optional[List[Position]]:
        """
        执行搜索
        :param generator: 搜索空间 (邻居、代价、启发式)
        :param start: 起点
        :param target: 目标描述 (row?, col?)
        :param observer: 观察者钩子 (用于记录搜索过程)
        :return: 路径 (目标在前，起点在后)；无路径时返回 None
        """
        pass
