"""
通用DBSCAN密度聚类
任何提供 distance(other) 的点类型都可以直接聚类
"""

from .clustering import (
    DBSCANSequential,
    Cluster,
    Clusterable,
    DBSCANError,
    InvalidConfigurationError,
    InvalidInputError,
)
from .data_processing import EuclideanPoint, GeoPoint

__version__ = '0.1.0'

__all__ = [
    'DBSCANSequential',
    'Cluster',
    'Clusterable',
    'DBSCANError',
    'InvalidConfigurationError',
    'InvalidInputError',
    'EuclideanPoint',
    'GeoPoint',
]
