"""
最小可行值搜索 - 与几何无关的纯数值例程

策略：
1. start 可行则直接返回
2. 扩张：按 growth_factor 逐轮放大，直到找到第一个可行值（最多 max_growth_rounds 轮）
3. 二分：在最后一个不可行值与第一个可行值之间收敛，区间宽度 < tolerance 或达到迭代上限
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True)
class SearchOutcome:
    """搜索结果"""
    value: float | None  # None 表示未能在扩张上限内找到可行值
    growth_rounds: int = 0
    bisect_iterations: int = 0

    @property
    def found(self) -> bool:
        return self.value is not None


def find_minimal_feasible(
    predicate: Callable[[float], bool],
    start: float,
    growth_factor: float = 1.25,
    max_growth_rounds: int = 80,
    tolerance: float = 1e-7,
    max_iterations: int = 90,
    upper: float | None = None,
) -> SearchOutcome:
    """
    查找 >= start 的最小可行值

    Args:
        predicate: 可行性判定
        start: 搜索下界（必须为正）
        growth_factor: 扩张倍数（> 1）
        max_growth_rounds: 扩张轮数上限
        tolerance: 二分收敛阈值
        max_iterations: 二分迭代上限
        upper: 可选的扩张上界，扩张值不超过该值

    Returns:
        SearchOutcome；value 始终是一个被判定为可行的值
    """
    if predicate(start):
        return SearchOutcome(start)
    if upper is not None and upper <= start:
        return SearchOutcome(None)

    low = start
    high: float | None = None
    rounds = 0
    candidate = start
    while rounds < max_growth_rounds:
        rounds += 1
        candidate *= growth_factor
        if upper is not None and candidate > upper:
            candidate = upper
        if predicate(candidate):
            high = candidate
            break
        low = candidate
        if upper is not None and candidate >= upper:
            break

    if high is None:
        return SearchOutcome(None, growth_rounds=rounds)

    iterations = 0
    while high - low > tolerance and iterations < max_iterations:
        mid = (low + high) / 2
        if predicate(mid):
            high = mid
        else:
            low = mid
        iterations += 1

    return SearchOutcome(high, growth_rounds=rounds, bisect_iterations=iterations)
