import logging
import time
import os
from typing import Any, List, Tuple, Dict, Optional

import numpy as np

from pathstar.planning.interfaces import IPlannerObserver

class EfficientObserver(IPlannerObserver):
    """
    高效运行模式
    除了必要的流程不额外进行信息记录。
    相当于 NoOp。
    """
    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0): pass
    def record_current_expansion(self, node: Any): pass
    def record_edge(self, start_node: Any, end_node: Any): pass
    def set_search_info(self, search_info: Dict): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 仅在 ERROR 级别打印
        if level == 'ERROR':
            print(f"[ERROR] {message}")


def _as_row_col(node: Any) -> Tuple[int, int]:
    # 既支持 Node (有 position)，也支持 (row, col) 元组
    position = getattr(node, 'position', node)
    return position[0], position[1]


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    记录开集、扩展顺序、搜索树等关键算法执行内容。
    这些信息主要用于算法的比较 (例如不同启发式的扩展节点数)。
    """
    def __init__(self):
        # 存储格式: List[Tuple[row, col, f, h]]
        self.open_set_history: List[Tuple[int, int, float, float]] = []
        # 存储格式: List[Position]，按扩展顺序
        self.expanded_nodes: List[Tuple[int, int]] = []
        # 存储格式: List[Tuple[Position, Position]]
        self.edges: List[Tuple[Any, Any]] = []
        self.search_info: Dict = {}

    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        row, col = _as_row_col(node)
        self.open_set_history.append((row, col, f, h))

    def record_current_expansion(self, node: Any):
        self.expanded_nodes.append(_as_row_col(node))

    def record_edge(self, start_node: Any, end_node: Any):
        self.edges.append((_as_row_col(start_node), _as_row_col(end_node)))

    def set_search_info(self, search_info: Dict):
        self.search_info = dict(search_info)

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 实验模式只关心记录的数据，控制台保持安静
        pass

    def expanded_array(self) -> np.ndarray:
        """扩展顺序，shape (N, 2)，每行为 (row, col)"""
        return np.asarray(self.expanded_nodes, dtype=np.int64).reshape(-1, 2)

    def open_set_array(self) -> np.ndarray:
        """OpenSet 入队历史，shape (N, 4)，每行为 (row, col, f, h)"""
        return np.asarray(self.open_set_history, dtype=float).reshape(-1, 4)


class DebugObserver(IPlannerObserver):
    """
    Debug 模式
    用于详细分析一次搜索为什么效果不好甚至失败。
    将详细日志写入文件，同时保留实验数据以便对照。
    """
    def __init__(self, log_dir: str = "logs/planning_debug"):
        # 复用 ExperimentObserver 的存储
        self.recorder = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        timestamp = time.strftime("%Y%m%d_%H%M%S")
        self.log_file = os.path.join(self.log_dir, f"plan_debug_{timestamp}.log")

        self.logger = logging.getLogger(f"PlannerDebug_{timestamp}_{id(self)}")
        self.logger.setLevel(logging.DEBUG)

        # 避免添加重复 Handler
        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s')
            fh.setFormatter(formatter)
            self.logger.addHandler(fh)

        self.logger.info("=== Debug Session Started ===")

    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        self.recorder.record_open_set_node(node, f, h)
        self.logger.debug(f"OpenSet Push: {_as_row_col(node)} f={f:.2f} h={h:.2f}")

    def record_current_expansion(self, node: Any):
        self.recorder.record_current_expansion(node)
        self.logger.debug(f"Expanding: {node}")

    def record_edge(self, start_node: Any, end_node: Any):
        self.recorder.record_edge(start_node, end_node)

    def set_search_info(self, search_info: Dict):
        self.recorder.set_search_info(search_info)
        self.logger.info(f"Search Info set: {search_info}")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        """释放文件句柄，并把本次会话的 logger 从 logging 注册表中移除"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)
        logging.Logger.manager.loggerDict.pop(self.logger.name, None)

    # Proxy properties for ExperimentObserver compatibility
    @property
    def expanded_nodes(self): return self.recorder.expanded_nodes
    @property
    def open_set_history(self): return self.recorder.open_set_history
    @property
    def edges(self): return self.recorder.edges
    @property
    def search_info(self): return self.recorder.search_info
