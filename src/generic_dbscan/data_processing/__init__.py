"""
数据处理模块
点类型定义与数据加载
"""

from .points import EuclideanPoint, GeoPoint
from .loader import points_from_array, load_points_csv

__all__ = [
    'EuclideanPoint',
    'GeoPoint',
    'points_from_array',
    'load_points_csv',
]
