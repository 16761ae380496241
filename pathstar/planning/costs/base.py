# pathstar/planning/costs/base.py
from abc import ABC, abstractmethod
from pathstar.types import Position

class CostFunction(ABC):
    """
    代价函数基类 (Strategy Interface)
    用于定义从 current 位置移动到相邻的 next_position 的单步代价。
    """
    @abstractmethod
    def calculate(self, current: Position, next_position: Position) -> float:
        """
        计算单步移动的代价
        :param current: 当前位置
        :param next_position: 相邻的下一个位置
        :return: 代价数值 (必须 >= 0，核心算法不做检查)
        """
        pass
