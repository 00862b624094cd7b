"""
运行期配置 - 读取 config/runtime.yaml

职责：
- 加载求解器搜索参数/媒体条件/日志等运行参数
- 提供环境变量覆盖机制（FOCUSCOVER_SOLVER__GROWTH_FACTOR=1.5）
- 类型安全的配置访问
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings

DEFAULT_CONFIG_PATH = Path("config/runtime.yaml")


class SolverConfig(BaseModel):
    """求解器搜索配置"""

    growth_factor: float = Field(1.25, gt=1.0, description="扩张阶段每轮缩放倍数")
    max_growth_rounds: int = Field(80, ge=1, description="扩张阶段最大轮数")
    tolerance: float = Field(1e-7, gt=0, description="二分区间收敛阈值")
    max_bisect_iterations: int = Field(90, ge=1, description="二分最大迭代次数")
    # align: 焦点过大时中点对齐，不满足覆盖则继续放大
    # clamp: 焦点过大时停留在最小覆盖缩放，夹入覆盖区间
    oversized_focus_policy: Literal["align", "clamp"] = "align"


class MediaConfig(BaseModel):
    """媒体条件求值配置"""

    em_px: float = Field(16.0, gt=0, description="1em对应像素")


class LoggingConfig(BaseModel):
    """日志配置"""

    log_level: str = "INFO"
    log_format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class RuntimeConfig(BaseSettings):
    """运行期配置（支持环境变量覆盖）"""

    # 各子配置
    solver: SolverConfig = Field(default_factory=SolverConfig)
    media: MediaConfig = Field(default_factory=MediaConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "env_prefix": "FOCUSCOVER_",
        "env_nested_delimiter": "__",
    }

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RuntimeConfig:
        """从YAML文件加载配置"""
        path = Path(yaml_path)
        if not path.exists():
            return cls()

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}

        runtime_opts = data.get("runtime_options", {}) or {}

        return cls(
            solver=SolverConfig(**cls._extract(runtime_opts, "solver")),
            media=MediaConfig(**cls._extract(runtime_opts, "media")),
            logging=LoggingConfig(**cls._extract(runtime_opts, "logging")),
        )

    @staticmethod
    def _extract(data: dict[str, Any], key: str) -> dict[str, Any]:
        """提取并展平配置"""
        section = data.get(key) or {}
        result = {}
        for k, v in section.items():
            if isinstance(v, dict) and "default" in v:
                result[k] = v["default"]
            elif not isinstance(v, dict):
                result[k] = v
        return result


# 全局配置实例
_config: RuntimeConfig | None = None


def get_config() -> RuntimeConfig:
    """获取全局配置（惰性加载）"""
    global _config
    if _config is None:
        _config = RuntimeConfig.from_yaml(DEFAULT_CONFIG_PATH)
    return _config


def reload_config(yaml_path: str | Path | None = None) -> RuntimeConfig:
    """重新加载配置"""
    global _config
    path = yaml_path or DEFAULT_CONFIG_PATH
    _config = RuntimeConfig.from_yaml(path)
    return _config
