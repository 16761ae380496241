# pathstar/types.py
import functools
from dataclasses import dataclass
from typing import Optional, Tuple

# (row, col)，核心不做范围检查，合法性由 PathGenerator 负责
Position = Tuple[int, int]

# (row?, col?)，None 表示该轴为通配
TargetSpec = Tuple[Optional[int], Optional[int]]


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class Node:
    """
    搜索树节点 (创建后不可变)

    注意：比较只看 total_cost。两个不同位置的节点 total_cost 相同即视为"相等"，
    这只用于 OpenSet 排序，不代表位置相同。
    """
    position: Position
    cost: float                              # 起点到此处的实际累计代价 (g)
    total_cost: float                        # g + h，创建时确定，之后不再重算
    predecessor: Optional["Node"] = None     # 起点为 None

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.total_cost == other.total_cost

    def __lt__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.total_cost < other.total_cost
