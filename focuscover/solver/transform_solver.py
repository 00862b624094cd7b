"""
变换求解器 - 在覆盖外框的前提下把焦点区域放进目标框

求解策略：
1. 最小覆盖缩放 min_cover = max(cover.w / img.w, cover.h / img.h)（等价于 object-fit: cover）
2. 对候选缩放 s，逐轴计算：
   - 覆盖区间 [cover - img*s, 0]
   - 居中默认值 (cover - img*s) / 2
   - 焦点区间 [target.start - focus.start*s, target.end - focus.end*s]
3. 逐轴判定：
   - 焦点能放进目标（focus*s <= target）：覆盖区间与焦点区间求交，取最接近居中值的点
   - 放不下：焦点中点对齐目标中点，该位置必须落在覆盖区间内
4. 从 min_cover 起扩张 + 二分搜索最小可行缩放；找不到则回退到 min_cover + 居中夹取

对同一输入的结果逐位一致，不保存任何状态。
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..config import SolverConfig
from ..interfaces import InvalidGeometryError, ITransformSolver
from ..models import AxisMode, Rectangle, SolveResult, Transform
from .interval import clamp, intersect
from .search import find_minimal_feasible

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AxisSpec:
    """单轴几何参数（X轴取宽度/x，Y轴取高度/y）"""
    cover_extent: float
    image_extent: float
    target_start: float
    target_extent: float
    focus_start: float
    focus_extent: float

    def cover_interval(self, scale: float) -> tuple[float, float]:
        """图像两端仍包住外框的平移区间"""
        return self.cover_extent - self.image_extent * scale, 0.0

    def centered(self, scale: float) -> float:
        return (self.cover_extent - self.image_extent * scale) / 2

    def focus_interval(self, scale: float) -> tuple[float, float]:
        """缩放后焦点两端落在目标框内的平移区间"""
        return (
            self.target_start - self.focus_start * scale,
            self.target_start + self.target_extent - (self.focus_start + self.focus_extent) * scale,
        )

    def aligned(self, scale: float) -> float:
        """焦点中点与目标中点重合时的平移"""
        target_mid = self.target_start + self.target_extent / 2
        focus_mid = (self.focus_start + self.focus_extent / 2) * scale
        return target_mid - focus_mid

    def fits(self, scale: float) -> bool:
        return self.focus_extent * scale <= self.target_extent

    def max_fit_scale(self) -> float:
        """焦点尺寸仍不超过目标尺寸的最大缩放"""
        if self.focus_extent <= 0:
            return math.inf
        return self.target_extent / self.focus_extent


def _axes(
    cover_zone: Rectangle,
    target_zone: Rectangle,
    image_width: float,
    image_height: float,
    focus_zone: Rectangle,
) -> tuple[AxisSpec, AxisSpec]:
    x_axis = AxisSpec(
        cover_extent=cover_zone.width,
        image_extent=image_width,
        target_start=target_zone.x,
        target_extent=target_zone.width,
        focus_start=focus_zone.x,
        focus_extent=focus_zone.width,
    )
    y_axis = AxisSpec(
        cover_extent=cover_zone.height,
        image_extent=image_height,
        target_start=target_zone.y,
        target_extent=target_zone.height,
        focus_start=focus_zone.y,
        focus_extent=focus_zone.height,
    )
    return x_axis, y_axis


def resolve_axis(axis: AxisSpec, scale: float) -> tuple[float | None, AxisMode]:
    """
    在给定缩放下求单轴平移

    Returns:
        (平移, 方式)；该轴在此缩放下不可行时平移为None
    """
    cover_lo, cover_hi = axis.cover_interval(scale)

    if axis.fits(scale):
        focus_lo, focus_hi = axis.focus_interval(scale)
        position = intersect(cover_lo, cover_hi, focus_lo, focus_hi, axis.centered(scale))
        return position, AxisMode.CONTAIN

    position = axis.aligned(scale)
    if cover_lo <= position <= cover_hi:
        return position, AxisMode.ALIGN
    return None, AxisMode.ALIGN


def _clamped(axis: AxisSpec, scale: float) -> float:
    cover_lo, cover_hi = axis.cover_interval(scale)
    return clamp(axis.centered(scale), cover_lo, cover_hi)


class TransformSolver(ITransformSolver):
    """变换求解器"""

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig()

    @staticmethod
    def min_cover_scale(cover_zone: Rectangle, image_width: float, image_height: float) -> float:
        """最小覆盖缩放（object-fit: cover）"""
        return max(cover_zone.width / image_width, cover_zone.height / image_height)

    def solve(
        self,
        cover_zone: Rectangle,
        target_zone: Rectangle,
        image_width: float,
        image_height: float,
        focus_zone: Rectangle,
    ) -> Transform:
        return self.solve_detailed(
            cover_zone, target_zone, image_width, image_height, focus_zone
        ).transform

    def solve_detailed(
        self,
        cover_zone: Rectangle,
        target_zone: Rectangle,
        image_width: float,
        image_height: float,
        focus_zone: Rectangle,
    ) -> SolveResult:
        self._check_inputs(cover_zone, image_width, image_height)

        x_axis, y_axis = _axes(cover_zone, target_zone, image_width, image_height, focus_zone)
        min_scale = self.min_cover_scale(cover_zone, image_width, image_height)

        upper: float | None = None
        if self.config.oversized_focus_policy == "clamp":
            if not (x_axis.fits(min_scale) and y_axis.fits(min_scale)):
                return self._solve_oversized_clamped(x_axis, y_axis, min_scale)
            upper = min(x_axis.max_fit_scale(), y_axis.max_fit_scale())
            if math.isinf(upper):
                upper = None

        def feasible(scale: float) -> bool:
            return (
                resolve_axis(x_axis, scale)[0] is not None and
                resolve_axis(y_axis, scale)[0] is not None
            )

        outcome = find_minimal_feasible(
            feasible,
            min_scale,
            growth_factor=self.config.growth_factor,
            max_growth_rounds=self.config.max_growth_rounds,
            tolerance=self.config.tolerance,
            max_iterations=self.config.max_bisect_iterations,
            upper=upper,
        )

        if not outcome.found:
            logger.debug(
                f"未找到可行缩放（扩张{outcome.growth_rounds}轮），回退到最小覆盖缩放 {min_scale}"
            )
            return SolveResult(
                transform=Transform(
                    x=_clamped(x_axis, min_scale),
                    y=_clamped(y_axis, min_scale),
                    scale=min_scale,
                ),
                min_cover_scale=min_scale,
                feasible=False,
                fallback=True,
                x_mode=AxisMode.CLAMP,
                y_mode=AxisMode.CLAMP,
                growth_rounds=outcome.growth_rounds,
            )

        scale = outcome.value
        x, x_mode = resolve_axis(x_axis, scale)
        y, y_mode = resolve_axis(y_axis, scale)
        logger.debug(
            f"可行缩放 {scale}（最小覆盖 {min_scale}，扩张{outcome.growth_rounds}轮，"
            f"二分{outcome.bisect_iterations}次）"
        )
        return SolveResult(
            transform=Transform(x=x, y=y, scale=scale),
            min_cover_scale=min_scale,
            x_mode=x_mode,
            y_mode=y_mode,
            growth_rounds=outcome.growth_rounds,
            bisect_iterations=outcome.bisect_iterations,
        )

    def _solve_oversized_clamped(
        self, x_axis: AxisSpec, y_axis: AxisSpec, scale: float
    ) -> SolveResult:
        """焦点在最小覆盖缩放下已超出目标：不放大，逐轴定位后夹入覆盖区间"""
        positions: list[float] = []
        modes: list[AxisMode] = []
        feasible = True
        for axis in (x_axis, y_axis):
            cover_lo, cover_hi = axis.cover_interval(scale)
            if axis.fits(scale):
                focus_lo, focus_hi = axis.focus_interval(scale)
                position = intersect(cover_lo, cover_hi, focus_lo, focus_hi, axis.centered(scale))
                mode = AxisMode.CONTAIN
                if position is None:
                    position = axis.centered(scale)
                    mode = AxisMode.CLAMP
            else:
                position = axis.aligned(scale)
                mode = AxisMode.ALIGN
            clamped = clamp(position, cover_lo, cover_hi)
            if clamped != position or mode is AxisMode.CLAMP:
                feasible = False
            positions.append(clamped)
            modes.append(mode)

        return SolveResult(
            transform=Transform(x=positions[0], y=positions[1], scale=scale),
            min_cover_scale=scale,
            feasible=feasible,
            fallback=not feasible,
            x_mode=modes[0],
            y_mode=modes[1],
        )

    @staticmethod
    def _check_inputs(cover_zone: Rectangle, image_width: float, image_height: float) -> None:
        for name, value in (
            ("image_width", image_width),
            ("image_height", image_height),
            ("cover_zone.width", cover_zone.width),
            ("cover_zone.height", cover_zone.height),
        ):
            if not math.isfinite(value) or value <= 0:
                raise InvalidGeometryError(f"{name} 必须为正的有限值: {value}")


def solve(
    cover_zone: Rectangle,
    target_zone: Rectangle,
    image_width: float,
    image_height: float,
    focus_zone: Rectangle,
    config: SolverConfig | None = None,
) -> Transform:
    """求解变换（无状态便捷入口）"""
    return TransformSolver(config).solve(
        cover_zone, target_zone, image_width, image_height, focus_zone
    )
