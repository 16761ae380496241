# pathstar/planning/frontier.py
import heapq
import itertools
from typing import List, Tuple

from pathstar.types import Node


class Frontier:
    """
    OpenSet: 按 total_cost 升序弹出节点。

    堆中元素为 (node, seq)。Node 只按 total_cost 比较，total_cost 相同时
    Python 的元组比较会退到 seq，所以同价节点按入队顺序 (FIFO) 弹出。
    同一位置允许同时存在多个条目 (不做 decrease-key)。
    """

    def __init__(self):
        self._heap: List[Tuple[Node, int]] = []
        self._counter = itertools.count()

    def push(self, node: Node):
        heapq.heappush(self._heap, (node, next(self._counter)))

    def pop(self) -> Node:
        node, _ = heapq.heappop(self._heap)
        return node

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)
