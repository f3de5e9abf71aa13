"""
串行DBSCAN实现
经典的密度聚类算法，适用于任何提供距离函数的点类型
"""

import math
import numbers
import warnings
from typing import Any, Callable, Collection, Generic, Hashable, Iterable, List, Mapping, Optional, TypeVar

from .cluster import Cluster
from .clusterable import Clusterable
from .exceptions import InvalidConfigurationError, InvalidInputError
from .states import PointState, PointStateTracker
from .utils import region_query

T = TypeVar('T', bound=Hashable)

Metric = Callable[[Any, Any], float]

# from_config 可识别的配置项（及别名）
_CONFIG_KEYS = {
    'eps': 'eps',
    'min_pts': 'min_pts',
    'minPts': 'min_pts',
}


def _point_distance(p: Clusterable, q: Clusterable) -> float:
    return p.distance(q)


class DBSCANSequential(Generic[T]):
    """
    串行版本的DBSCAN聚类算法

    对每个点 P，如果 P 的 eps 邻域内至少有 min_pts 个点（包括 P 本身），
    则 P 是核心点，其邻居都加入 P 所在的聚类；不能从任何核心点密度可达的点为噪声。
    """

    def __init__(self, eps: float = 0.5, min_pts: int = 5,
                 metric: Optional[Metric] = None):
        """
        初始化DBSCAN参数

        Args:
            eps: 邻域半径，必须非负
            min_pts: 核心点的最小邻居数（包括点本身），必须 >= 1
            metric: 可选的距离函数 metric(p, q)；为None时使用 p.distance(q)

        Raises:
            InvalidConfigurationError: 参数非法
        """
        self._eps = self._validate_eps(eps)
        self._min_pts = self._validate_min_pts(min_pts)

        if metric is not None and not callable(metric):
            raise InvalidConfigurationError(f"metric 必须是可调用对象: {metric!r}")
        self._metric = metric
        self._distance: Metric = metric if metric is not None else _point_distance

        if self._min_pts == 1:
            warnings.warn("min_pts=1: 每个点都是核心点，不会产生噪声点")
        if self._eps == 0:
            warnings.warn("eps=0: 只有完全相同的点才互为邻居")

    @classmethod
    def from_config(cls, config: Mapping[str, Any],
                    metric: Optional[Metric] = None) -> 'DBSCANSequential':
        """
        从配置字典创建聚类器

        Args:
            config: 形如 {'eps': 1.5, 'min_pts': 4} 的配置（也接受 'minPts'）
            metric: 可选的距离函数

        Returns:
            聚类器实例
        """
        params = {}
        for key, value in config.items():
            if key not in _CONFIG_KEYS:
                raise InvalidConfigurationError(f"未知的配置项: {key!r}")
            name = _CONFIG_KEYS[key]
            if name in params:
                raise InvalidConfigurationError(f"配置项重复: {key!r}")
            params[name] = value

        missing = {'eps', 'min_pts'} - params.keys()
        if missing:
            raise InvalidConfigurationError(f"缺少配置项: {sorted(missing)}")

        return cls(eps=params['eps'], min_pts=params['min_pts'], metric=metric)

    @staticmethod
    def _validate_eps(eps: Any) -> float:
        if isinstance(eps, bool) or not isinstance(eps, numbers.Real):
            raise InvalidConfigurationError(f"eps 必须是实数: {eps!r}")
        eps = float(eps)
        if math.isnan(eps) or eps < 0:
            raise InvalidConfigurationError(f"eps 必须非负: {eps}")
        return eps

    @staticmethod
    def _validate_min_pts(min_pts: Any) -> int:
        if isinstance(min_pts, bool) or not isinstance(min_pts, numbers.Integral):
            raise InvalidConfigurationError(f"min_pts 必须是整数: {min_pts!r}")
        min_pts = int(min_pts)
        if min_pts < 1:
            raise InvalidConfigurationError(f"min_pts 必须 >= 1: {min_pts}")
        return min_pts

    @property
    def eps(self) -> float:
        """邻域半径"""
        return self._eps

    @property
    def min_pts(self) -> int:
        """核心点的最小邻居数"""
        return self._min_pts

    @property
    def metric(self) -> Optional[Metric]:
        return self._metric

    def cluster(self, points: Iterable[T]) -> List[Cluster[T]]:
        """
        执行DBSCAN聚类

        DBSCAN不返回聚类中心，需要时可以对聚类中的点求平均。
        不属于任何聚类的点即为噪声点，可用 utils.noise_points 取得。

        Args:
            points: 待聚类的点集合

        Returns:
            聚类列表，各聚类互不相交

        Raises:
            InvalidInputError: 点集合中含有None、不可哈希的点或缺少距离函数的点
        """
        points = self._validate_points(points)

        clusters: List[Cluster[T]] = []
        states = PointStateTracker(points)

        for p in points:
            if not states.is_unvisited(p):  # 已访问的点
                continue

            # 先标记为噪声，之后可能被其他聚类的扩展提升为边界点
            states.set(p, PointState.NOISE)
            neighbors = self.region_query(p, points)

            if len(neighbors) < self._min_pts:
                continue

            # 发现核心点，开始新的聚类
            cluster: Cluster[T] = Cluster()
            self._expand_cluster(cluster, p, neighbors, points, states)
            clusters.append(cluster)

        for cluster in clusters:
            cluster.freeze()

        return clusters

    def region_query(self, point: T, candidates: Collection[T]) -> List[T]:
        """
        查找 point 的 eps 邻域内的所有点（包括 point 本身）

        子类可以重写此方法以使用空间索引，只要返回结果相同即可。

        Args:
            point: 目标点
            candidates: 所有候选邻居点

        Returns:
            邻域内点的列表
        """
        return region_query(point, candidates, self._eps, self._distance)

    def _expand_cluster(self, cluster: Cluster[T], p: T, neighbors: List[T],
                        points: Collection[T], states: PointStateTracker) -> None:
        """
        从核心点扩展聚类，加入所有密度可达的点

        Args:
            cluster: 要扩展的聚类
            p: 核心点
            neighbors: p 的邻居列表
            points: 所有点
            states: 点状态跟踪器
        """
        cluster.add_point(p)
        states.set(p, PointState.CLUSTERED)

        # 种子列表在遍历过程中会增长，因此按下标遍历
        seeds = list(neighbors)
        in_seeds = set(seeds)

        i = 0
        while i < len(seeds):
            q = seeds[i]

            if states.is_unvisited(q):
                states.set(q, PointState.NOISE)
                q_neighbors = self.region_query(q, points)

                if len(q_neighbors) >= self._min_pts:
                    # q 也是核心点，将其邻居加入种子列表
                    for n in q_neighbors:
                        if n not in in_seeds:
                            in_seeds.add(n)
                            seeds.append(n)

            # 噪声点在这里被重新归类为边界点；已聚类的点保持原聚类
            if not states.is_clustered(q):
                cluster.add_point(q)
                states.set(q, PointState.CLUSTERED)

            i += 1

    def _validate_points(self, points: Iterable[T]) -> List[T]:
        if points is None:
            raise InvalidInputError("点集合不能为None")
        try:
            points = list(points)
        except TypeError as e:
            raise InvalidInputError(f"点集合必须可迭代: {e}") from e

        for i, p in enumerate(points):
            if p is None:
                raise InvalidInputError(f"第 {i} 个点为None")
            try:
                hash(p)
            except TypeError as e:
                raise InvalidInputError(f"第 {i} 个点不可哈希: {type(p).__name__}") from e
            if self._metric is None and not isinstance(p, Clusterable):
                raise InvalidInputError(
                    f"第 {i} 个点没有 distance 方法且未指定 metric: {type(p).__name__}")
            if self._metric is None and type(p) is not type(points[0]):
                # distance 只在同类型的点之间有定义
                raise InvalidInputError(
                    f"第 {i} 个点类型不一致: {type(p).__name__} != {type(points[0]).__name__}")

        return points

    def __repr__(self) -> str:
        return f"DBSCANSequential(eps={self._eps}, min_pts={self._min_pts})"
