"""
点数据加载器
从numpy数组或CSV文件构建待聚类的点集合
"""

from pathlib import Path
from typing import List, Optional, Sequence, Union
import warnings

import numpy as np
import pandas as pd

from .points import EuclideanPoint, GeoPoint

POINT_TYPES = ('euclidean', 'geo')


def points_from_array(array: np.ndarray, point_type: str = 'euclidean',
                      labels: Optional[Sequence[str]] = None) -> List[Union[EuclideanPoint, GeoPoint]]:
    """
    将numpy数组转换为点列表

    Args:
        array: 形状为(n_samples, n_features)的数组；geo类型要求每一行是[latitude, longitude]
        point_type: 点类型，支持'euclidean'和'geo'
        labels: 每一行对应的标签（可选）

    Returns:
        点对象列表（包含NaN的行会被丢弃）
    """
    if point_type not in POINT_TYPES:
        raise ValueError(f"不支持的点类型: {point_type}")

    array = np.asarray(array, dtype=float)
    if array.ndim == 1:
        if array.size == 0:
            array = array.reshape(0, 2 if point_type == 'geo' else 1)
        else:
            array = array.reshape(-1, 1) if point_type == 'euclidean' else array.reshape(1, -1)
    if array.ndim != 2:
        raise ValueError(f"数组必须是二维的，实际维度: {array.ndim}")
    if point_type == 'geo' and array.shape[0] and array.shape[1] != 2:
        raise ValueError(f"地理坐标需要两列 [latitude, longitude]，实际列数: {array.shape[1]}")
    if labels is not None and len(labels) != array.shape[0]:
        raise ValueError("标签数量与行数不一致")

    valid = ~np.isnan(array).any(axis=1)
    n_dropped = int(np.sum(~valid))
    if n_dropped:
        warnings.warn(f"丢弃了 {n_dropped} 个包含NaN的点")

    points = []
    for i in np.flatnonzero(valid):
        label = None if labels is None else labels[i]
        row = array[i]
        if point_type == 'geo':
            points.append(GeoPoint(float(row[0]), float(row[1]), label=label))
        else:
            points.append(EuclideanPoint(tuple(row.tolist()), label=label))

    return points


def load_points_csv(path: Union[str, Path], columns: Optional[Sequence[str]] = None,
                    point_type: str = 'euclidean',
                    label_column: Optional[str] = None) -> List[Union[EuclideanPoint, GeoPoint]]:
    """
    从CSV文件加载点

    Args:
        path: CSV文件路径（需要表头）
        columns: 坐标列名；为None时使用所有数值列（标签列除外）
        point_type: 点类型，支持'euclidean'和'geo'
        label_column: 标签列名（可选）

    Returns:
        点对象列表
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"数据文件不存在: {path}")

    df = pd.read_csv(path)

    if label_column is not None and label_column not in df.columns:
        raise ValueError(f"未知的列: {label_column}")

    if columns is None:
        numeric = df.select_dtypes(include=[np.number])
        columns = [c for c in numeric.columns if c != label_column]
    else:
        unknown = [c for c in columns if c not in df.columns]
        if unknown:
            raise ValueError(f"未知的列: {unknown}")

    if not columns:
        raise ValueError("没有可用的坐标列")

    values = df[list(columns)].apply(pd.to_numeric, errors='coerce').to_numpy(dtype=float)
    labels = None
    if label_column is not None:
        labels = df[label_column].astype(str).tolist()

    return points_from_array(values, point_type=point_type, labels=labels)
