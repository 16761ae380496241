# pathstar/planning/planners/a_star.py
from typing import List, Dict, Optional

from pathstar.types import Node, Position, TargetSpec
from pathstar.config import GoalCheck, SearchConfig
from pathstar.planning.planners.base import PlannerBase, PathGenerator
from pathstar.planning.frontier import Frontier
from pathstar.planning.target import target_is_reached
from pathstar.planning.interfaces import IPlannerObserver
from pathstar.planning.observers import EfficientObserver, DebugObserver

class AStarPlanner(PlannerBase):
    """
    通用 A* 实现，搜索空间完全由 PathGenerator 提供。

    工作流程：
    1. 用起点节点初始化 OpenSet (Frontier)。
    2. 每轮弹出 total_cost 最小的节点 (同价按入队顺序)。
    3. 向 PathGenerator 询问邻居，跳过已在 ClosedSet 的位置。
    4. 邻居满足目标则直接回溯路径返回，否则计算代价后入队。
    5. 当前节点加入 ClosedSet，之后不再扩展。

    不做 relaxation：更便宜的路径只是作为新条目入队，旧条目在出队时
    如果位置已经关闭就直接丢弃。
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        # 只保存配置，OpenSet/ClosedSet 都是每次 plan 的局部变量
        self.config = config if config is not None else SearchConfig()

    def plan(self,
             generator: PathGenerator,
             start: Position,
             target: TargetSpec,
             observer: IPlannerObserver = None) -> Optional[List[Position]]:

        # 1. 初始化观察者 (自己创建的 DebugObserver 在搜索结束后关闭)
        owns_observer = observer is None and self.config.debug_mode
        observer = self._make_observer(observer)
        try:
            return self._search(generator, start, target, observer)
        finally:
            if owns_observer:
                observer.close()

    def _search(self, generator, start, target, observer):
        observer.set_search_info({
            'start': start,
            'target': target,
            'goal_check': self.config.goal_check.name,
        })
        observer.log("Start planning...", level='INFO',
                     payload={'start': start, 'target': target})

        # 起点本身满足目标：不扩展，直接返回单点路径
        if target_is_reached(target, start):
            observer.log("Start already satisfies target.", level='INFO')
            return [start]

        # 2. 初始化核心容器
        frontier = Frontier()
        frontier.push(Node(start, 0.0, generator.calculate_heuristic_cost(start, target)))

        # ClosedSet: {position: node}，位置只会关闭一次
        closed: Dict[Position, Node] = {}
        check_on_expand = self.config.goal_check == GoalCheck.ON_EXPAND
        expansions = 0

        # 3. 主循环
        while frontier:
            current = frontier.pop()

            # 过期条目：该位置已经以更低 total_cost 扩展过
            if current.position in closed:
                continue

            # A. 终止条件 (ON_EXPAND 模式)
            if check_on_expand and target_is_reached(target, current.position):
                return self._finish(observer, self._reconstruct_path(current), current.cost, expansions)

            if self.config.max_expansions is not None and expansions >= self.config.max_expansions:
                observer.log("Max expansions reached, path not found.", level='WARN',
                             payload={'expansions': expansions})
                return None

            expansions += 1
            observer.record_current_expansion(current.position)

            # B. 扩展邻居
            for neighbor in generator.generate_paths(current.position):
                if neighbor in closed:
                    continue

                step_cost = generator.calculate_cost(current.position, neighbor)
                new_cost = current.cost + step_cost
                h_val = generator.calculate_heuristic_cost(neighbor, target)

                # 终止条件 (ON_GENERATE 模式)：邻居满足目标即返回
                if not check_on_expand and target_is_reached(target, neighbor):
                    path = self._reconstruct_path(current)
                    path.insert(0, neighbor)
                    return self._finish(observer, path, new_cost, expansions)

                node = Node(neighbor, new_cost, new_cost + h_val, current)
                frontier.push(node)
                observer.record_open_set_node(neighbor, node.total_cost, h_val)
                observer.record_edge(current.position, neighbor)

            # C. 关闭当前节点
            closed[current.position] = current

        observer.log("Open set is empty, no path found.", level='WARN',
                     payload={'expansions': expansions})
        return None

    def _make_observer(self, observer: Optional[IPlannerObserver]) -> IPlannerObserver:
        if observer is not None:
            return observer
        if self.config.debug_mode:
            return DebugObserver(log_dir=self.config.debug_log_dir)
        return EfficientObserver()

    def _finish(self, observer, path, cost, expansions):
        observer.log("Goal reached.", level='INFO',
                     payload={'cost': cost, 'length': len(path), 'expansions': expansions})
        return path

    def _reconstruct_path(self, node: Node) -> List[Position]:
        """沿 predecessor 回溯，返回 [node, ..., start] 顺序的位置列表"""
        path = []
        while node is not None:
            path.append(node.position)
            node = node.predecessor
        return path


def search(generator: PathGenerator,
           start: Position,
           target: TargetSpec,
           config: Optional[SearchConfig] = None,
           observer: Optional[IPlannerObserver] = None) -> Optional[List[Position]]:
    """
    一次性搜索的便捷入口：AStarPlanner(config).plan(...)
    返回目标在前、起点在后的路径；找不到时返回 None。
    """
    return AStarPlanner(config).plan(generator, start, target, observer)
