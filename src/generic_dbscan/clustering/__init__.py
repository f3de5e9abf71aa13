"""
聚类算法模块
包含DBSCAN算法的串行实现
"""

from .cluster import Cluster
from .clusterable import Clusterable
from .dbscan_sequential import DBSCANSequential
from .exceptions import DBSCANError, InvalidConfigurationError, InvalidInputError
from .states import PointState, PointStateTracker
from .utils import region_query, noise_points, cluster_labels, get_cluster_stats

__all__ = [
    'Cluster',
    'Clusterable',
    'DBSCANSequential',
    'DBSCANError',
    'InvalidConfigurationError',
    'InvalidInputError',
    'PointState',
    'PointStateTracker',
    'region_query',
    'noise_points',
    'cluster_labels',
    'get_cluster_stats',
]
