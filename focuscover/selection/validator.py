"""
候选源校验器 - 过滤结构非法的候选源

校验规则：
1. size / focus_zone 必须提供
2. size 宽高为正
3. focus_zone 位置非负、尺寸为正，且不超出 size 范围
4. src_set 不允许宽度描述符（如 "800w"），只允许密度描述符

校验失败不抛异常，返回问题标记并记录告警日志
"""

from __future__ import annotations

import re

from ..interfaces import ISourceValidator
from ..models import SourceDescriptor

_WIDTH_DESCRIPTOR = re.compile(r"\s\d+w(,|\s|$)")

FLAG_MISSING_SIZE = "缺少size"
FLAG_MISSING_FOCUS = "缺少focus_zone"
FLAG_SIZE_NOT_POSITIVE = "size宽高非正"
FLAG_FOCUS_NEGATIVE_POSITION = "焦点位置为负"
FLAG_FOCUS_NOT_POSITIVE = "焦点宽高非正"
FLAG_FOCUS_OUT_OF_BOUNDS = "焦点超出图像范围"
FLAG_WIDTH_DESCRIPTOR = "srcset含宽度描述符"


class SourceValidator(ISourceValidator):
    """候选源校验器"""

    def check(self, source: SourceDescriptor) -> list[str]:
        flags: list[str] = []
        size = source.size
        focus = source.focus_zone

        if size is None:
            flags.append(FLAG_MISSING_SIZE)
        if focus is None:
            flags.append(FLAG_MISSING_FOCUS)
        if flags:
            return flags

        if size.width <= 0 or size.height <= 0:
            flags.append(FLAG_SIZE_NOT_POSITIVE)
        if focus.x < 0 or focus.y < 0:
            flags.append(FLAG_FOCUS_NEGATIVE_POSITION)
        if focus.width <= 0 or focus.height <= 0:
            flags.append(FLAG_FOCUS_NOT_POSITIVE)
        if focus.right > size.width or focus.bottom > size.height:
            flags.append(FLAG_FOCUS_OUT_OF_BOUNDS)

        if source.src_set and _WIDTH_DESCRIPTOR.search(source.src_set):
            flags.append(FLAG_WIDTH_DESCRIPTOR)

        return flags
