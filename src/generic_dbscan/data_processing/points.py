"""
点数据结构定义
实现了距离函数的欧氏空间点和地理坐标点
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple
import math

import numpy as np
from numba import jit
from scipy.spatial.distance import euclidean

EARTH_RADIUS_M = 6371000.0  # 地球平均半径（米）


@jit(nopython=True)
def _haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    使用Numba加速的Haversine距离计算

    Args:
        lat1, lon1: 第一个点的纬度、经度（度）
        lat2, lon2: 第二个点的纬度、经度（度）

    Returns:
        两点之间的距离（米）
    """
    # 转换为弧度
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dlat = phi2 - phi1
    dlon = math.radians(lon2) - math.radians(lon1)

    # Haversine公式
    a = math.sin(dlat / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlon / 2) ** 2
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


@dataclass(frozen=True)
class EuclideanPoint:
    """欧氏空间中的点"""

    coords: Tuple[float, ...]
    label: Optional[str] = field(default=None, compare=False)  # 仅用于展示，不参与相等比较

    def __post_init__(self):
        object.__setattr__(self, 'coords', tuple(float(c) for c in self.coords))
        if not self.coords:
            raise ValueError("坐标不能为空")

    @classmethod
    def of(cls, *coords: float, label: Optional[str] = None) -> 'EuclideanPoint':
        return cls(tuple(coords), label=label)

    @property
    def dim(self) -> int:
        return len(self.coords)

    def to_array(self) -> np.ndarray:
        """将点转换为numpy数组"""
        return np.array(self.coords)

    def distance(self, other: 'EuclideanPoint') -> float:
        """
        计算到另一个点的欧氏距离

        Args:
            other: 另一个点

        Returns:
            欧氏距离
        """
        if not isinstance(other, EuclideanPoint):
            raise TypeError(f"无法计算到 {type(other).__name__} 的欧氏距离")
        if self.dim != other.dim:
            raise ValueError(f"维度不一致: {self.dim} != {other.dim}")
        return float(euclidean(self.coords, other.coords))


@dataclass(frozen=True)
class GeoPoint:
    """地理坐标点"""

    latitude: float  # 纬度
    longitude: float  # 经度
    label: Optional[str] = field(default=None, compare=False)

    def __post_init__(self):
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"纬度超出范围: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"经度超出范围: {self.longitude}")

    def to_array(self) -> np.ndarray:
        """
        将点转换为numpy数组

        Returns:
            [latitude, longitude] 数组
        """
        return np.array([self.latitude, self.longitude])

    def distance(self, other: 'GeoPoint') -> float:
        """
        计算到另一个点的距离（使用Haversine公式）

        Args:
            other: 另一个地理坐标点

        Returns:
            距离（米）
        """
        if not isinstance(other, GeoPoint):
            raise TypeError(f"无法计算到 {type(other).__name__} 的地理距离")
        return _haversine(float(self.latitude), float(self.longitude),
                          float(other.latitude), float(other.longitude))
