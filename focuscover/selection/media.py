"""
媒体条件求值 - 对 CSS 风格的媒体查询求值

支持范围：
- 逗号分隔的查询列表（任一匹配即匹配）
- and 连接、not / only 前缀
- 媒体类型 all / screen（匹配）、print（不匹配）
- 特性 width / height / min-* / max-*（px, em, rem）
- orientation、min-/max-resolution（dppx, x, dpi, dpcm）、min-/max-aspect-ratio（w/h）

无法解析的查询视为不匹配，并记录告警
"""

from __future__ import annotations

import logging
import re

from ..interfaces import MediaQueryError
from ..models import Environment

logger = logging.getLogger(__name__)

_AND = re.compile(r"\s+and\s+")
_FEATURE = re.compile(r"^\(\s*([a-z-]+)\s*(?::\s*(.+?))?\s*\)$")
_LENGTH = re.compile(r"^(-?\d*\.?\d+)(px|em|rem)?$")
_RESOLUTION = re.compile(r"^(\d*\.?\d+)(dppx|x|dpi|dpcm)$")
_RATIO = re.compile(r"^(\d*\.?\d+)\s*(?:/\s*(\d*\.?\d+))?$")

_MATCHING_TYPES = {"all", "screen"}
_NON_MATCHING_TYPES = {"print", "speech"}


class MediaEvaluator:
    """媒体条件求值器"""

    def __init__(self, em_px: float = 16.0) -> None:
        self.em_px = em_px

    def matches(self, query: str | None, environment: Environment) -> bool:
        """查询列表中任一查询匹配即返回True；空查询总是匹配"""
        if query is None or not query.strip():
            return True
        for single in query.split(","):
            try:
                if self._evaluate(single.strip().lower(), environment):
                    return True
            except MediaQueryError as e:
                logger.warning(f"无法解析媒体条件 '{single.strip()}': {e}")
        return False

    def _evaluate(self, query: str, env: Environment) -> bool:
        if not query:
            raise MediaQueryError("空查询")

        negate = False
        if query.startswith("not "):
            negate = True
            query = query[4:].strip()
        elif query.startswith("only "):
            query = query[5:].strip()

        result = True
        for part in _AND.split(query):
            part = part.strip()
            if part.startswith("("):
                result = self._feature(part, env) and result
            elif part in _MATCHING_TYPES:
                continue
            elif part in _NON_MATCHING_TYPES:
                result = False
            else:
                raise MediaQueryError(f"未知媒体类型: {part}")

        return not result if negate else result

    def _feature(self, expr: str, env: Environment) -> bool:
        m = _FEATURE.match(expr)
        if not m:
            raise MediaQueryError(f"特性表达式格式错误: {expr}")
        name, value = m.group(1), m.group(2)

        if value is None:
            # 布尔形式，如 (width)、(orientation)
            if name == "width":
                return env.viewport_width > 0
            if name == "height":
                return env.viewport_height > 0
            if name in ("orientation", "resolution", "aspect-ratio"):
                return True
            raise MediaQueryError(f"不支持的特性: {name}")

        prefix, feature = "", name
        if name.startswith(("min-", "max-")):
            prefix, feature = name[:3], name[4:]

        if feature == "orientation" and not prefix:
            if value not in ("portrait", "landscape"):
                raise MediaQueryError(f"orientation取值非法: {value}")
            return env.orientation == value

        if feature in ("width", "height"):
            actual = env.viewport_width if feature == "width" else env.viewport_height
            return _compare(prefix, actual, self._length(value))

        if feature == "resolution":
            return _compare(prefix, env.device_pixel_ratio, _resolution(value))

        if feature == "aspect-ratio":
            return _compare(prefix, env.aspect_ratio, _ratio(value))

        raise MediaQueryError(f"不支持的特性: {name}")

    def _length(self, value: str) -> float:
        m = _LENGTH.match(value.replace(" ", ""))
        if not m:
            raise MediaQueryError(f"长度格式错误: {value}")
        number = float(m.group(1))
        unit = m.group(2) or "px"
        if unit in ("em", "rem"):
            return number * self.em_px
        return number


def _compare(prefix: str, actual: float, expected: float) -> bool:
    if prefix == "min":
        return actual >= expected
    if prefix == "max":
        return actual <= expected
    return actual == expected


def _resolution(value: str) -> float:
    m = _RESOLUTION.match(value.replace(" ", ""))
    if not m:
        raise MediaQueryError(f"分辨率格式错误: {value}")
    number = float(m.group(1))
    unit = m.group(2)
    if unit == "dpi":
        return number / 96.0
    if unit == "dpcm":
        return number * 2.54 / 96.0
    return number


def _ratio(value: str) -> float:
    m = _RATIO.match(value.strip())
    if not m:
        raise MediaQueryError(f"宽高比格式错误: {value}")
    numerator = float(m.group(1))
    denominator = float(m.group(2)) if m.group(2) is not None else 1.0
    if denominator == 0:
        raise MediaQueryError(f"宽高比分母为0: {value}")
    return numerator / denominator


def matches(query: str | None, environment: Environment, em_px: float = 16.0) -> bool:
    """便捷入口"""
    return MediaEvaluator(em_px).matches(query, environment)
