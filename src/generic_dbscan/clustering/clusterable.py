"""
可聚类点的距离能力协议
"""

from typing import Protocol, TypeVar, runtime_checkable

T_contra = TypeVar('T_contra', contravariant=True)


@runtime_checkable
class Clusterable(Protocol[T_contra]):
    """
    能计算到同类型另一个点的距离的点

    distance 必须对称、非负，且 distance(a, a) == 0。
    实现类同时必须可哈希，哈希/相等的语义决定了“同一个点”的含义。
    """

    def distance(self, other: T_contra) -> float:
        ...
