"""
数据模型层 - 定义系统核心数据结构

所有模块通过这些模型交互，实现解耦：
- Size / Rectangle / Transform: 几何值类型
- SolveResult: 求解结果与诊断
- SourceDescriptor / Environment: 候选源与视口环境
- Placement: 放置流水线输出
"""

from .geometry import Rectangle, Size, Transform
from .solve import AxisMode, SolveResult
from .source import Environment, Placement, SourceDescriptor

__all__ = [
    "Size",
    "Rectangle",
    "Transform",
    "AxisMode",
    "SolveResult",
    "Environment",
    "SourceDescriptor",
    "Placement",
]
