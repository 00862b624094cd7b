"""
求解模块 - cover 适配 + 焦点约束的缩放/平移求解

子模块：
- interval: 夹取与闭区间求交
- search: 扩张 + 二分的最小可行值搜索（与几何无关）
- transform_solver: 逐轴可行性判定与求解主流程
"""

from .interval import clamp, intersect
from .search import SearchOutcome, find_minimal_feasible
from .transform_solver import AxisSpec, TransformSolver, resolve_axis, solve

__all__ = [
    "clamp",
    "intersect",
    "SearchOutcome",
    "find_minimal_feasible",
    "AxisSpec",
    "TransformSolver",
    "resolve_axis",
    "solve",
]
