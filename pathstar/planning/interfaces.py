from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

class IPlannerObserver(ABC):
    """
    规划器观察者接口
    用于解耦搜索算法与 记录/调试 逻辑。
    支持三种模式：
    1. Efficient: 空实现，无开销
    2. Experiment: 记录扩展顺序、OpenSet 和搜索树，用于算法比较
    3. Debug: 详细日志记录用于问题排查
    """

    @abstractmethod
    def record_open_set_node(self, node: Any, f: float = 0.0, h: float = 0.0):
        """记录加入 OpenSet 的节点及其代价"""
        pass

    @abstractmethod
    def record_current_expansion(self, node: Any):
        """记录当前正在扩展的节点"""
        pass

    @abstractmethod
    def record_edge(self, start_node: Any, end_node: Any):
        """记录搜索树的一条边 (predecessor -> node)"""
        pass

    @abstractmethod
    def set_search_info(self, search_info: Dict):
        """设置本次搜索的基本信息 (起点、目标等)"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 日志级别 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外的结构化数据 (如起点、目标、扩展次数等)
        """
        pass
