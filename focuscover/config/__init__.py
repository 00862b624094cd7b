"""
配置层 - 加载运行期配置

职责：
- 加载 config/runtime.yaml（求解器搜索参数、媒体条件、日志）
- 支持 FOCUSCOVER_ 前缀的环境变量覆盖
- 提供类型安全的配置访问接口
"""

from .runtime_config import (
    LoggingConfig,
    MediaConfig,
    RuntimeConfig,
    SolverConfig,
    get_config,
    reload_config,
)

__all__ = [
    "RuntimeConfig",
    "SolverConfig",
    "MediaConfig",
    "LoggingConfig",
    "get_config",
    "reload_config",
]
