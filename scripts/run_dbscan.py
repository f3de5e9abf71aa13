#!/usr/bin/env python3
"""
运行串行DBSCAN聚类算法
从CSV文件加载点，或生成合成数据，输出聚类统计
"""

import sys
from pathlib import Path

# 添加src目录到Python路径（未安装时直接从源码运行）
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

import numpy as np
import time
import argparse
from typing import Dict, List, Optional

from generic_dbscan.clustering import DBSCANSequential, DBSCANError, get_cluster_stats
from generic_dbscan.data_processing import load_points_csv, points_from_array


def generate_synthetic_points(n_points: int, n_centers: int = 3,
                              seed: Optional[int] = None) -> np.ndarray:
    """
    生成合成的二维点数据（若干高斯团 + 少量均匀噪声）

    Args:
        n_points: 点数量
        n_centers: 团的数量
        seed: 随机种子

    Returns:
        形状为(n_points, 2)的数组
    """
    if n_points < 1:
        raise ValueError(f"点数量必须 >= 1: {n_points}")

    rng = np.random.default_rng(seed)
    n_noise = max(1, n_points // 20)
    n_blob = n_points - n_noise

    centers = rng.uniform(-10, 10, size=(n_centers, 2))
    assignment = rng.integers(0, n_centers, size=n_blob)
    blobs = centers[assignment] + rng.normal(scale=0.5, size=(n_blob, 2))
    noise = rng.uniform(-15, 15, size=(n_noise, 2))

    return np.vstack([blobs, noise])


def run_sequential_dbscan(points: List, eps: float, min_pts: int) -> Dict[str, any]:
    """
    运行串行DBSCAN算法

    Args:
        points: 点列表
        eps: 邻域半径
        min_pts: 核心点的最小邻居数

    Returns:
        聚类统计和执行时间
    """
    print("\n" + "=" * 60)
    print("运行串行DBSCAN聚类")
    print("=" * 60)

    print(f"算法参数:")
    print(f"  eps (邻域半径): {eps}")
    print(f"  min_pts (最小邻居数): {min_pts}")
    print(f"  数据点数量: {len(points)}")

    dbscan = DBSCANSequential(eps=eps, min_pts=min_pts)

    start_time = time.time()
    clusters = dbscan.cluster(points)
    execution_time = time.time() - start_time

    stats = get_cluster_stats(clusters, points)

    print(f"\n聚类结果:")
    print(f"  聚类数量: {stats['n_clusters']}")
    print(f"  噪声点数量: {stats['n_noise']} ({stats['noise_ratio']:.1%})")
    print(f"  总点数: {stats['n_points']}")

    if stats['cluster_sizes']:
        print(f"  聚类大小分布:")
        for label, size in list(stats['cluster_sizes'].items())[:10]:  # 显示前10个聚类
            print(f"    聚类 {label}: {size} 个点")
        if len(stats['cluster_sizes']) > 10:
            print(f"    ... 还有 {len(stats['cluster_sizes']) - 10} 个聚类")

    print(f"\n性能统计:")
    print(f"  执行时间: {execution_time:.4f} 秒")

    stats['execution_time'] = execution_time
    return stats


def main(argv: Optional[List[str]] = None) -> int:
    """主函数"""
    parser = argparse.ArgumentParser(description='运行串行DBSCAN聚类算法')
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--input', type=str,
                        help='CSV数据文件路径（需要表头）')
    source.add_argument('--synthetic', type=int, metavar='N',
                        help='生成N个合成二维点')
    parser.add_argument('--columns', type=str, nargs='+',
                        help='坐标列名（默认: 所有数值列）')
    parser.add_argument('--eps', type=float, default=0.5,
                        help='DBSCAN邻域半径（默认: 0.5）')
    parser.add_argument('--min-pts', type=int, default=5,
                        help='核心点的最小邻居数，包括点本身（默认: 5）')
    parser.add_argument('--metric', type=str, default='euclidean',
                        choices=['euclidean', 'haversine'],
                        help='距离度量方式；haversine 要求 [latitude, longitude] 两列，eps 单位为米')
    parser.add_argument('--seed', type=int, default=None,
                        help='合成数据的随机种子')

    args = parser.parse_args(argv)
    if args.synthetic is not None and args.synthetic < 1:
        parser.error(f"--synthetic 必须 >= 1: {args.synthetic}")
    point_type = 'geo' if args.metric == 'haversine' else 'euclidean'

    try:
        print("串行DBSCAN聚类算法")
        print("=" * 60)

        if args.input:
            points = load_points_csv(args.input, columns=args.columns, point_type=point_type)
            print(f"从 {args.input} 加载了 {len(points)} 个点")
        else:
            if point_type == 'geo':
                raise ValueError("合成数据只支持 euclidean 度量")
            points = points_from_array(generate_synthetic_points(args.synthetic, seed=args.seed))
            print(f"生成了 {len(points)} 个合成点")

        stats = run_sequential_dbscan(points, eps=args.eps, min_pts=args.min_pts)

        print("\n" + "=" * 60)
        print("串行DBSCAN聚类完成")
        print("=" * 60)
        print(f"  聚类数: {stats['n_clusters']}")
        print(f"  噪声点: {stats['n_noise']}")

    except (DBSCANError, ValueError, FileNotFoundError) as e:
        print(f"错误: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
