"""
几何值类型 - 尺寸、矩形与变换

所有模型均为不可变值对象，且拒绝 NaN/∞（非有限值不会进入求解器）
"""

from __future__ import annotations

from pydantic import BaseModel

_VALUE_CONFIG = {"frozen": True, "allow_inf_nan": False}


def _css_number(value: float) -> str:
    text = f"{value:.6f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


class Size(BaseModel):
    """尺寸"""
    width: float
    height: float

    model_config = _VALUE_CONFIG


class Rectangle(BaseModel):
    """矩形（左上角 + 尺寸）"""
    x: float = 0.0
    y: float = 0.0
    width: float
    height: float

    model_config = _VALUE_CONFIG

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    @property
    def center_y(self) -> float:
        return self.y + self.height / 2

    @property
    def size(self) -> Size:
        return Size(width=self.width, height=self.height)

    def contains(self, other: Rectangle, tol: float = 0.0) -> bool:
        """判断other是否完全落在本矩形内（允许tol误差）"""
        return (
            other.x >= self.x - tol and
            other.y >= self.y - tol and
            other.right <= self.right + tol and
            other.bottom <= self.bottom + tol
        )

    def relative_to(self, origin: Rectangle) -> Rectangle:
        """换算到origin的局部坐标系（origin左上角为原点）"""
        return Rectangle(
            x=self.x - origin.x,
            y=self.y - origin.y,
            width=self.width,
            height=self.height,
        )


class Transform(BaseModel):
    """图像变换：先等比缩放scale，再把左上角平移到(x, y)"""
    x: float
    y: float
    scale: float

    model_config = _VALUE_CONFIG

    def image_rect(self, image_width: float, image_height: float) -> Rectangle:
        """缩放平移后的图像矩形"""
        return Rectangle(
            x=self.x,
            y=self.y,
            width=image_width * self.scale,
            height=image_height * self.scale,
        )

    def map_rect(self, rect: Rectangle) -> Rectangle:
        """把图像坐标系中的矩形映射到容器坐标系"""
        return Rectangle(
            x=self.x + rect.x * self.scale,
            y=self.y + rect.y * self.scale,
            width=rect.width * self.scale,
            height=rect.height * self.scale,
        )

    def to_css(self) -> str:
        """CSS transform 字符串（transform-origin 需为左上角）"""
        return (
            f"translate({_css_number(self.x)}px, {_css_number(self.y)}px) "
            f"scale({_css_number(self.scale)})"
        )
