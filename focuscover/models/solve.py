"""
求解结果模型 - 变换 + 搜索诊断信息
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from .geometry import Transform


class AxisMode(str, Enum):
    """单轴平移的确定方式"""
    CONTAIN = "contain"   # 覆盖区间与焦点区间求交，取最接近居中值的点
    ALIGN = "align"       # 焦点过大：焦点中点对齐目标中点
    CLAMP = "clamp"       # 兜底：居中值夹入覆盖区间（放弃焦点约束）


class SolveResult(BaseModel):
    """求解结果"""
    transform: Transform
    min_cover_scale: float = Field(..., description="最小覆盖缩放")
    feasible: bool = Field(True, description="是否满足全部约束")
    fallback: bool = Field(False, description="是否使用了兜底策略")
    x_mode: AxisMode = AxisMode.CONTAIN
    y_mode: AxisMode = AxisMode.CONTAIN

    # 搜索统计
    growth_rounds: int = 0
    bisect_iterations: int = 0

    model_config = {"frozen": True}

    @property
    def scale(self) -> float:
        return self.transform.scale
