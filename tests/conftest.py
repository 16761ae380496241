import heapq
from collections import Counter
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np
import pytest

from pathstar.types import Position, TargetSpec
from pathstar.planning.planners.base import PathGenerator
from pathstar.planning.target import target_is_reached
from pathstar.planning.heuristics import Heuristic, ChebyshevHeuristic, ZeroHeuristic
from pathstar.planning.costs import CostFunction, UniformCost

# 8-连通运动集合 (drow, dcol)
# 顺序会影响同价节点的入队顺序，前六个方向与 block(2,2) 场景的期望路径对应
MOTIONS_8 = [
    (-1, -1), (0, -1), (-1, 0),
    (1, 1), (0, 1), (1, 0),
    (-1, 1), (1, -1),
]


class BlockedGridMap(PathGenerator):
    """
    测试用的栅格地图：0 表示空闲，1 表示障碍物。
    越界和障碍物都不会作为邻居返回。
    """
    def __init__(self,
                 height: int,
                 width: int,
                 blocks: Iterable[Position] = (),
                 heuristic: Optional[Heuristic] = None,
                 cost_fn: Optional[CostFunction] = None,
                 motions: List[Tuple[int, int]] = MOTIONS_8):
        self._grid = np.zeros((height, width), dtype=np.int8)
        for row, col in blocks:
            self._grid[row, col] = 1
        self.h_fn = heuristic if heuristic is not None else ChebyshevHeuristic()
        self.cost_fn = cost_fn if cost_fn is not None else UniformCost()
        self.motions = motions
        # 每个位置被调用 generate_paths 的次数
        self.expansion_counts: Counter = Counter()

    @classmethod
    def from_array(cls, grid: np.ndarray, **kwargs) -> "BlockedGridMap":
        blocks = [tuple(int(v) for v in idx) for idx in np.argwhere(grid == 1)]
        return cls(grid.shape[0], grid.shape[1], blocks, **kwargs)

    def is_blocked(self, position: Position) -> bool:
        row, col = position
        if not (0 <= row < self._grid.shape[0] and 0 <= col < self._grid.shape[1]):
            return True
        return self._grid[row, col] == 1

    def generate_paths(self, from_position: Position) -> List[Position]:
        self.expansion_counts[from_position] += 1
        neighbors = []
        for drow, dcol in self.motions:
            candidate = (from_position[0] + drow, from_position[1] + dcol)
            if not self.is_blocked(candidate):
                neighbors.append(candidate)
        return neighbors

    def calculate_cost(self, current_position: Position, next_position: Position) -> float:
        return self.cost_fn.calculate(current_position, next_position)

    def calculate_heuristic_cost(self, position: Position, target: TargetSpec) -> float:
        return self.h_fn.estimate(position, target)


class GraphGenerator(PathGenerator):
    """用邻接表描述的小图：{position: {neighbor: cost}}"""
    def __init__(self, edges: Dict[Position, Dict[Position, float]],
                 heuristic: Optional[Dict[Position, float]] = None):
        self.edges = edges
        self.heuristic = heuristic or {}
        self.expansion_counts: Counter = Counter()

    def generate_paths(self, from_position: Position) -> List[Position]:
        self.expansion_counts[from_position] += 1
        return list(self.edges.get(from_position, {}))

    def calculate_cost(self, current_position: Position, next_position: Position) -> float:
        return self.edges[current_position][next_position]

    def calculate_heuristic_cost(self, position: Position, target: TargetSpec) -> float:
        return self.heuristic.get(position, 0.0)


def dijkstra_cost(generator: PathGenerator, start: Position, target: TargetSpec) -> Optional[float]:
    """暴力 Dijkstra：到任意满足 target 的位置的最小代价，不可达返回 None"""
    if target_is_reached(target, start):
        return 0.0
    best = {start: 0.0}
    heap = [(0.0, start)]
    done = set()
    while heap:
        g, position = heapq.heappop(heap)
        if position in done:
            continue
        if target_is_reached(target, position):
            return g
        done.add(position)
        for neighbor in generator.generate_paths(position):
            new_g = g + generator.calculate_cost(position, neighbor)
            if new_g < best.get(neighbor, float('inf')):
                best[neighbor] = new_g
                heapq.heappush(heap, (new_g, neighbor))
    return None


def random_grid(height: int, width: int, density: float, seed: int,
                keep_free: Iterable[Position] = ()) -> np.ndarray:
    rng = np.random.default_rng(seed)
    grid = (rng.random((height, width)) < density).astype(np.int8)
    for row, col in keep_free:
        grid[row, col] = 0
    return grid


@pytest.fixture
def make_grid():
    def _make(height=8, width=8, blocks=(), **kwargs):
        return BlockedGridMap(height, width, blocks, **kwargs)
    return _make


@pytest.fixture(scope="session")
def make_random_grid():
    def _make(height, width, density, seed, keep_free=(), **kwargs):
        grid = random_grid(height, width, density, seed, keep_free)
        return BlockedGridMap.from_array(grid, **kwargs)
    return _make


@pytest.fixture
def make_graph():
    return GraphGenerator


@pytest.fixture
def reference_cost():
    return dijkstra_cost


@pytest.fixture
def blocked_center_grid():
    """8-连通，(2,2) 为障碍，每步代价 1，Chebyshev 启发式"""
    return BlockedGridMap(8, 8, blocks=[(2, 2)],
                          heuristic=ChebyshevHeuristic(), cost_fn=UniformCost())


@pytest.fixture
def open_grid_dijkstra():
    return BlockedGridMap(20, 20, heuristic=ZeroHeuristic())
