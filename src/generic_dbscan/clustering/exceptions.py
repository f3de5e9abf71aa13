"""
聚类异常定义
"""


class DBSCANError(Exception):
    """聚类相关异常的基类"""


class InvalidConfigurationError(DBSCANError, ValueError):
    """eps / min_pts 参数非法（构造时抛出）"""


class InvalidInputError(DBSCANError, ValueError):
    """输入点集合非法（空点、不可哈希的点、缺少距离函数等）"""
