import sys
from pathlib import Path

import numpy as np
import pytest

# 未安装时直接从源码导入
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from generic_dbscan.data_processing import EuclideanPoint, points_from_array


@pytest.fixture
def scenario_a():
    """三个相邻的点和一个远离的点"""
    return [
        EuclideanPoint.of(0, 0),
        EuclideanPoint.of(0, 1),
        EuclideanPoint.of(1, 0),
        EuclideanPoint.of(10, 10),
    ]


@pytest.fixture
def chain():
    """一条链：只有中间两个点满足 min_pts=3（eps=1.0）"""
    return [EuclideanPoint.of(float(x), 0.0) for x in range(4)]


@pytest.fixture
def blobs():
    """两个分离的高斯团加少量噪声"""
    rng = np.random.default_rng(42)
    c1 = rng.normal(loc=[0, 0], scale=0.3, size=(40, 2))
    c2 = rng.normal(loc=[5, 5], scale=0.3, size=(40, 2))
    noise = np.array([[2.5, 2.5], [10, -10], [-8, 8]])
    return points_from_array(np.vstack([c1, c2, noise]))
