"""
放置流水线 - 校验 -> 选择 -> 求解

职责：
1. 把目标框换算到外框局部坐标系（外框左上角为原点）
2. 过滤非法候选源（告警日志）
3. 按环境选出活动候选源
4. 求解变换，返回 Placement

每次调用相互独立，不做跨调用缓存
"""

from __future__ import annotations

import logging

from ..config import RuntimeConfig, get_config
from ..interfaces import ISourceSelector, ISourceValidator, ITransformSolver
from ..models import Environment, Placement, Rectangle, SourceDescriptor
from ..selection import ActiveSourceSelector, MediaEvaluator, SourceValidator
from ..solver import TransformSolver

logger = logging.getLogger(__name__)


class CoverPlacer:
    """放置流水线"""

    def __init__(
        self,
        solver: ITransformSolver | None = None,
        validator: ISourceValidator | None = None,
        selector: ISourceSelector | None = None,
        config: RuntimeConfig | None = None,
    ) -> None:
        self.config = config or get_config()
        self.solver = solver or TransformSolver(self.config.solver)
        self.validator = validator or SourceValidator()
        self.selector = selector or ActiveSourceSelector(
            MediaEvaluator(em_px=self.config.media.em_px)
        )

    def place(
        self,
        cover_zone: Rectangle,
        target_zone: Rectangle,
        sources: list[SourceDescriptor],
        environment: Environment | None = None,
    ) -> Placement | None:
        """
        计算活动候选源的放置

        Args:
            cover_zone: 外框（任意坐标系）
            target_zone: 目标框（与cover_zone同一坐标系）
            sources: 候选源列表（按优先级排列）
            environment: 视口环境，None表示未知

        Returns:
            Placement；没有有效候选源时返回None
        """
        local_target = target_zone.relative_to(cover_zone)
        local_cover = Rectangle(x=0, y=0, width=cover_zone.width, height=cover_zone.height)

        valid = self.validator.filter_valid(sources)
        if not valid:
            logger.error("没有有效的候选源，宿主应使用回退图像")
            return None

        picked = self.selector.select([source for _, source in valid], environment)
        if picked is None:
            return None
        source_index, source = valid[picked]
        logger.debug(f"活动候选源#{source_index}: {source.src or '-'}")

        result = self.solver.solve_detailed(
            local_cover,
            local_target,
            source.size.width,
            source.size.height,
            source.focus_zone,
        )
        if result.fallback:
            logger.debug(f"候选源#{source_index} 无法满足焦点约束，已回退到最小覆盖缩放")

        return Placement(source_index=source_index, source=source, result=result)
