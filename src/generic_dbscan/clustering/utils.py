"""
聚类工具函数
提供区域查询和聚类结果的统计工具
"""

import math
import numbers
from typing import Any, Callable, Dict, Hashable, Iterable, List, Sequence

import numpy as np

from .cluster import Cluster
from .exceptions import InvalidInputError


def region_query(point: Any, candidates: Iterable[Any], eps: float,
                 distance: Callable[[Any, Any], float]) -> List[Any]:
    """
    查找指定点邻域内的所有点（线性扫描）

    结果包含点本身（distance(p, p) = 0 <= eps），顺序与 candidates 的迭代顺序一致。

    Args:
        point: 目标点
        candidates: 所有候选邻居点
        eps: 邻域半径
        distance: 距离函数 distance(p, q)

    Returns:
        邻域内点的列表

    Raises:
        InvalidInputError: 距离函数返回非数值、负数或NaN
    """
    neighbors = []

    for candidate in candidates:
        d = distance(point, candidate)
        if isinstance(d, bool) or not isinstance(d, numbers.Real):
            raise InvalidInputError(f"距离函数返回了非数值: {d!r}")
        if d < 0 or math.isnan(d):
            raise InvalidInputError(f"距离函数返回了非法值: {d!r}")
        if d <= eps:
            neighbors.append(candidate)

    return neighbors


def noise_points(clusters: Sequence[Cluster], points: Iterable[Hashable]) -> List[Hashable]:
    """
    找出不属于任何聚类的点（噪声点）

    Args:
        clusters: cluster() 返回的聚类列表
        points: 原始输入点

    Returns:
        噪声点列表（按输入顺序，不重复）
    """
    clustered = set()
    for cluster in clusters:
        clustered.update(cluster)

    noise = []
    seen = set()
    for p in points:
        if p in clustered or p in seen:
            continue
        seen.add(p)
        noise.append(p)

    return noise


def cluster_labels(clusters: Sequence[Cluster], points: Sequence[Hashable]) -> np.ndarray:
    """
    为每个输入点生成聚类标签

    Args:
        clusters: cluster() 返回的聚类列表
        points: 原始输入点

    Returns:
        形状为(n_points,)的整数数组，-1表示噪声，其余为聚类在列表中的下标
    """
    label_of = {}
    for idx, cluster in enumerate(clusters):
        for p in cluster:
            label_of[p] = idx

    return np.array([label_of.get(p, -1) for p in points], dtype=np.int32)


def get_cluster_stats(clusters: Sequence[Cluster], points: Sequence[Hashable]) -> Dict:
    """
    获取聚类统计信息

    Args:
        clusters: cluster() 返回的聚类列表
        points: 原始输入点

    Returns:
        包含聚类统计信息的字典
    """
    labels = cluster_labels(clusters, points)
    n_points = len(labels)
    n_noise = int(np.sum(labels == -1))

    stats = {
        'n_clusters': len(clusters),
        'n_noise': n_noise,
        'n_points': n_points,
        'noise_ratio': n_noise / n_points if n_points else 0.0,
        'cluster_sizes': {},
        'largest_cluster_size': 0,
    }

    for idx, cluster in enumerate(clusters):
        stats['cluster_sizes'][idx] = len(cluster)

    if stats['cluster_sizes']:
        stats['largest_cluster_size'] = max(stats['cluster_sizes'].values())

    return stats
