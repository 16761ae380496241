# [关键] 全局配置定义

# pathstar/config.py
from enum import Enum
from dataclasses import dataclass
from typing import Optional


class GoalCheck(Enum):
    # 在生成邻居时检查目标 (默认行为，找到即返回)
    ON_GENERATE = 0

    # 在节点出队扩展时检查目标 (教科书 A*，非均匀代价下也保证最优)
    ON_EXPAND = 1


@dataclass
class SearchConfig:
    goal_check: GoalCheck = GoalCheck.ON_GENERATE
    # None 表示不限制扩展次数；超过上限视为无路径
    max_expansions: Optional[int] = None
    debug_mode: bool = False
    debug_log_dir: str = "logs/planning_debug"
