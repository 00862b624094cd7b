"""
focuscover - 带焦点约束的 cover 适配变换求解

模块结构：
- config/     运行期配置（搜索参数/媒体条件/日志）
- models/     数据模型定义
- solver/     变换求解（区间运算/缩放搜索/逐轴判定）
- selection/  候选源校验、媒体条件、活动候选源选择
- pipeline/   放置流水线编排
"""

from .models import Rectangle, Size, SolveResult, Transform
from .solver import TransformSolver, solve

__version__ = "0.1.0"

__all__ = [
    "Rectangle",
    "Size",
    "Transform",
    "SolveResult",
    "TransformSolver",
    "solve",
]
