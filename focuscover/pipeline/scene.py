"""
场景文件加载 - 从YAML读取外框/目标框/环境/候选源

文件结构：
    cover_zone: {x: 0, y: 0, width: 800, height: 600}
    target_zone: {x: 300, y: 200, width: 200, height: 200}
    environment: {viewport_width: 1280, viewport_height: 800}   # 可选
    sources:
      - src: hero.jpg
        media: "(min-width: 1024px)"
        size: {width: 1600, height: 1200}
        focus_zone: {x: 700, y: 500, width: 200, height: 200}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from ..interfaces import SceneError
from ..models import Environment, Rectangle, SourceDescriptor


class Scene(BaseModel):
    """放置场景"""
    cover_zone: Rectangle
    target_zone: Rectangle
    environment: Environment | None = None
    sources: list[SourceDescriptor] = Field(default_factory=list)


def load_scene(path: str | Path) -> Scene:
    """读取场景文件"""
    path = Path(path)
    if not path.exists():
        raise SceneError(f"场景文件不存在: {path}")

    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SceneError(f"场景文件YAML格式错误: {path}: {e}") from e

    return parse_scene(data)


def parse_scene(data: Any) -> Scene:
    if not isinstance(data, dict):
        raise SceneError("场景内容必须是映射")
    try:
        return Scene.model_validate(data)
    except ValidationError as e:
        raise SceneError(f"场景字段非法: {e}") from e
