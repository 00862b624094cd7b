"""
流水线编排 - 候选源校验/选择 + 变换求解

子模块：
- placer: 放置流水线（校验 -> 选择 -> 求解）
- scene: YAML 场景文件加载
"""

from .placer import CoverPlacer
from .scene import Scene, load_scene, parse_scene

__all__ = [
    "CoverPlacer",
    "Scene",
    "load_scene",
    "parse_scene",
]
