"""
活动候选源选择

规则：
1. 环境未知（如服务端渲染）时取第一个候选源
2. 否则取第一个媒体条件匹配（或无媒体条件）的候选源
3. 都不匹配时回退到第一个候选源
"""

from __future__ import annotations

import logging

from ..interfaces import ISourceSelector
from ..models import Environment, SourceDescriptor
from .media import MediaEvaluator

logger = logging.getLogger(__name__)


class ActiveSourceSelector(ISourceSelector):
    """活动候选源选择器"""

    def __init__(self, evaluator: MediaEvaluator | None = None) -> None:
        self.evaluator = evaluator or MediaEvaluator()

    def select(
        self,
        sources: list[SourceDescriptor],
        environment: Environment | None = None,
    ) -> int | None:
        if not sources:
            return None
        if environment is None:
            return 0

        for index, source in enumerate(sources):
            if self.evaluator.matches(source.media, environment):
                return index

        logger.debug("没有候选源匹配当前环境，回退到第一个候选源")
        return 0
