"""
点状态跟踪
每次 cluster() 调用都会新建一个跟踪器，调用结束后丢弃
"""

from enum import Enum
from typing import Dict, Hashable, Iterable


class PointState(Enum):
    """点的状态 - 未访问、噪声或已聚类"""

    UNVISITED = 0  # 尚未访问
    NOISE = 1  # 已访问但暂未归入任何聚类（临时状态，可能被提升为CLUSTERED）
    CLUSTERED = 2  # 已归入某个聚类


class PointStateTracker:
    """点 -> 状态 的映射，只负责存取，不包含状态转换逻辑"""

    def __init__(self, points: Iterable[Hashable]):
        """
        初始化所有点为 UNVISITED

        Args:
            points: 待聚类的点（必须可哈希）
        """
        self._states: Dict[Hashable, PointState] = {}
        for p in points:
            self._states[p] = PointState.UNVISITED

    def get(self, point: Hashable) -> PointState:
        return self._states[point]

    def set(self, point: Hashable, state: PointState) -> None:
        self._states[point] = state

    def is_unvisited(self, point: Hashable) -> bool:
        return self._states[point] is PointState.UNVISITED

    def is_clustered(self, point: Hashable) -> bool:
        return self._states[point] is PointState.CLUSTERED

    def count(self, state: PointState) -> int:
        """统计处于某一状态的点的数量"""
        return sum(1 for s in self._states.values() if s is state)

    def __len__(self) -> int:
        return len(self._states)

    def __contains__(self, point: Hashable) -> bool:
        return point in self._states
