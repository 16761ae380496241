# pathstar/planning/target.py
from pathstar.types import Position, TargetSpec


def target_is_reached(target: TargetSpec, position: Position) -> bool:
    """
    判断 position 是否满足目标描述。
    每个给定的轴都必须相等；为 None 的轴总是通过。
    (None, None) 对任何位置都成立。
    """
    target_row, target_col = target
    if target_row is not None and target_row != position[0]:
        return False
    if target_col is not None and target_col != position[1]:
        return False
    return True
