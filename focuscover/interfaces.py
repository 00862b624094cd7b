"""
模块接口契约 - 定义各模块的抽象接口

设计原则：
1. 模块间通过接口通信，不直接依赖具体实现
2. 每个接口定义清晰的输入输出类型
3. 便于单元测试和mock替换

使用方式：
    from focuscover.interfaces import ISourceValidator

    class MyValidator(ISourceValidator):
        def check(self, source: SourceDescriptor) -> list[str]:
            ...
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .models import Environment, Rectangle, SolveResult, SourceDescriptor, Transform

logger = logging.getLogger(__name__)


# ============================================================================
# 求解模块接口
# ============================================================================

class ITransformSolver(ABC):
    """变换求解器接口 - 计算 cover + 焦点约束下的缩放与平移"""

    @abstractmethod
    def solve(
        self,
        cover_zone: Rectangle,
        target_zone: Rectangle,
        image_width: float,
        image_height: float,
        focus_zone: Rectangle,
    ) -> Transform:
        """
        求解变换

        Args:
            cover_zone: 必须被图像完全覆盖的外框（容器局部坐标）
            target_zone: 焦点区域应落入的目标框（与cover_zone同一坐标系）
            image_width: 图像原始宽度
            image_height: 图像原始高度
            focus_zone: 图像自身坐标系中的焦点区域

        Returns:
            {scale, x, y}

        Raises:
            InvalidGeometryError: 图像或外框尺寸非正
        """
        ...

    @abstractmethod
    def solve_detailed(
        self,
        cover_zone: Rectangle,
        target_zone: Rectangle,
        image_width: float,
        image_height: float,
        focus_zone: Rectangle,
    ) -> SolveResult:
        """求解变换并返回诊断信息（搜索轮数、各轴策略、是否兜底）"""
        ...


# ============================================================================
# 候选源模块接口
# ============================================================================

class ISourceValidator(ABC):
    """候选源校验器接口"""

    @abstractmethod
    def check(self, source: SourceDescriptor) -> list[str]:
        """
        校验单个候选源

        Returns:
            问题标记列表（空列表表示有效）
        """
        ...

    def is_valid(self, source: SourceDescriptor) -> bool:
        return not self.check(source)

    def filter_valid(
        self, sources: list[SourceDescriptor]
    ) -> list[tuple[int, SourceDescriptor]]:
        """
        过滤有效候选源，被忽略的候选源记录告警

        Returns:
            [(原始下标, 候选源)]，保持原有顺序
        """
        valid: list[tuple[int, SourceDescriptor]] = []
        for index, source in enumerate(sources):
            flags = self.check(source)
            if flags:
                logger.warning(f"候选源#{index} 被忽略 ({source.src or '-'}): {', '.join(flags)}")
                continue
            valid.append((index, source))
        return valid


class ISourceSelector(ABC):
    """活动候选源选择器接口"""

    @abstractmethod
    def select(
        self,
        sources: list[SourceDescriptor],
        environment: Environment | None = None,
    ) -> int | None:
        """
        选择当前活动的候选源

        Args:
            sources: 候选源列表（已通过校验）
            environment: 视口环境，None表示环境未知

        Returns:
            候选源下标，列表为空时返回None
        """
        ...


# ============================================================================
# 异常定义
# ============================================================================

class FocusCoverError(Exception):
    """基础异常"""
    pass


class InvalidGeometryError(FocusCoverError, ValueError):
    """几何输入非法（调用方契约违例）"""
    pass


class MediaQueryError(FocusCoverError, ValueError):
    """媒体条件无法解析"""
    pass


class SceneError(FocusCoverError):
    """场景文件格式错误"""
    pass
