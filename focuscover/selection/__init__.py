"""
候选源模块 - 校验、媒体条件求值、活动候选源选择

子模块：
- validator: 过滤结构非法的候选源（告警日志）
- media: CSS 风格媒体条件求值
- active_source: 按环境选出活动候选源
"""

from .active_source import ActiveSourceSelector
from .media import MediaEvaluator, matches
from .validator import SourceValidator

__all__ = [
    "SourceValidator",
    "MediaEvaluator",
    "matches",
    "ActiveSourceSelector",
]
