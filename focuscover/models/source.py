"""
候选源与视口环境模型

对应宿主侧的 <source> 描述：图像尺寸 + 焦点区域 + 媒体条件
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from .geometry import Rectangle, Size, Transform
from .solve import SolveResult


class Environment(BaseModel):
    """视口环境（媒体条件求值所需）"""
    viewport_width: float = Field(..., ge=0, description="视口宽度(px)")
    viewport_height: float = Field(..., ge=0, description="视口高度(px)")
    device_pixel_ratio: float = Field(1.0, gt=0, description="设备像素比")

    model_config = {"frozen": True, "allow_inf_nan": False}

    @property
    def orientation(self) -> str:
        return "portrait" if self.viewport_height >= self.viewport_width else "landscape"

    @property
    def aspect_ratio(self) -> float:
        if self.viewport_height == 0:
            return float("inf")
        return self.viewport_width / self.viewport_height


class SourceDescriptor(BaseModel):
    """候选图像源"""
    src: str = Field("", description="图像地址")
    src_set: str | None = Field(None, description="srcset（仅允许密度描述符）")
    media: str | None = Field(None, description="媒体条件，空表示始终匹配")
    size: Size | None = Field(None, description="1x分辨率下的图像尺寸")
    focus_zone: Rectangle | None = Field(None, description="图像坐标系中的焦点区域")
    alt: str | None = Field(None, description="覆盖默认替代文本")

    model_config = {"frozen": True}


class Placement(BaseModel):
    """放置结果"""
    source_index: int = Field(..., description="活动候选源在原始列表中的下标")
    source: SourceDescriptor
    result: SolveResult

    @property
    def transform(self) -> Transform:
        return self.result.transform

    @property
    def css_transform(self) -> str:
        return self.result.transform.to_css()
