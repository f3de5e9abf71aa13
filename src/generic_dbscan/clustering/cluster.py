"""
聚类结果数据结构
"""

from typing import Generic, Hashable, Iterator, List, Set, TypeVar

T = TypeVar('T', bound=Hashable)


class Cluster(Generic[T]):
    """
    一个密度相连的点集合

    点按加入顺序保存且不重复。聚类完成后驱动程序会调用 freeze()，
    之后不能再添加点。
    """

    def __init__(self):
        self._points: List[T] = []
        self._members: Set[T] = set()
        self._frozen = False

    def add_point(self, point: T) -> None:
        """
        向聚类中添加一个点（已存在的点会被忽略）

        Args:
            point: 要添加的点

        Raises:
            RuntimeError: 聚类已冻结
        """
        if self._frozen:
            raise RuntimeError("聚类已冻结，不能再添加点")
        if point in self._members:
            return
        self._members.add(point)
        self._points.append(point)

    def get_points(self) -> List[T]:
        """返回聚类中所有点的副本（按加入顺序）"""
        return list(self._points)

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __iter__(self) -> Iterator[T]:
        return iter(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __contains__(self, point: object) -> bool:
        try:
            return point in self._members
        except TypeError:
            # 不可哈希的对象不可能是成员
            return False

    def __repr__(self) -> str:
        return f"Cluster(size={len(self._points)})"
