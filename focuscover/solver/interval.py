"""
区间运算 - 夹取与闭区间求交
"""

from __future__ import annotations


def clamp(value: float, lo: float, hi: float) -> float:
    """把value夹入[lo, hi]；区间倒置时以hi为准"""
    return min(hi, max(lo, value))


def intersect(
    lo1: float,
    hi1: float,
    lo2: float,
    hi2: float,
    preferred: float,
) -> float | None:
    """
    两个闭区间求交，返回交集中最接近preferred的值

    Returns:
        交集内的值；交集为空时返回None
    """
    lo = max(lo1, lo2)
    hi = min(hi1, hi2)
    if lo <= hi:
        return clamp(preferred, lo, hi)
    return None
