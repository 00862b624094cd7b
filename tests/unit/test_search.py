"""
区间运算与缩放搜索单元测试（合成判定函数，不涉及几何）

每个模块完成后必须运行：pytest tests/unit/test_search.py -v
"""

import pytest

from focuscover.solver import clamp, find_minimal_feasible, intersect


class TestInterval:
    """区间运算测试"""

    def test_clamp(self):
        assert clamp(5, 0, 10) == 5
        assert clamp(-1, 0, 10) == 0
        assert clamp(11, 0, 10) == 10

    def test_intersect_prefers_closest(self):
        """测试交集内取最接近偏好值的点"""
        assert intersect(-50, 50, 0, 100, -20) == 0
        assert intersect(-50, 50, 0, 100, 20) == 20
        assert intersect(-50, 50, 0, 100, 80) == 50

    def test_intersect_single_point(self):
        assert intersect(0, 0, -50, 50, -25) == 0

    def test_intersect_empty(self):
        """测试无交集"""
        assert intersect(0, 10, 11, 20, 5) is None


class TestFindMinimalFeasible:
    """最小可行值搜索测试"""

    def test_start_feasible(self):
        """起点可行时直接返回"""
        outcome = find_minimal_feasible(lambda s: s >= 1, 1.0)
        assert outcome.value == 1.0
        assert outcome.growth_rounds == 0
        assert outcome.bisect_iterations == 0

    def test_bracket_and_bisect(self):
        """测试扩张后二分收敛到阈值"""
        outcome = find_minimal_feasible(lambda s: s >= 3, 1.0)
        # 1.25^5 ≈ 3.05 为第一个可行值
        assert outcome.growth_rounds == 5
        assert outcome.value >= 3
        assert outcome.value == pytest.approx(3, abs=1e-6)

    def test_value_is_always_feasible(self):
        calls: list[float] = []

        def predicate(s: float) -> bool:
            calls.append(s)
            return s >= 2.2

        outcome = find_minimal_feasible(predicate, 1.0, tolerance=1e-3)
        assert predicate(outcome.value)
        assert outcome.value - 2.2 < 1e-3

    def test_not_found_within_rounds(self):
        """测试扩张上限内找不到可行值"""
        outcome = find_minimal_feasible(lambda s: False, 1.0, max_growth_rounds=80)
        assert not outcome.found
        assert outcome.value is None
        assert outcome.growth_rounds == 80

    def test_growth_rounds_cap(self):
        outcome = find_minimal_feasible(lambda s: s >= 3, 1.0, max_growth_rounds=3)
        assert outcome.value is None
        assert outcome.growth_rounds == 3

    def test_iteration_cap(self):
        """测试二分迭代上限"""
        outcome = find_minimal_feasible(lambda s: s >= 3, 1.0, max_iterations=2)
        assert outcome.bisect_iterations == 2
        assert outcome.value >= 3

    def test_upper_caps_growth(self):
        """测试扩张上界"""
        outcome = find_minimal_feasible(lambda s: s >= 1.7, 1.0, upper=1.8)
        # 1.25 -> 1.5625 -> 1.8（被截断）
        assert outcome.growth_rounds == 3
        assert outcome.value == pytest.approx(1.7, abs=1e-6)

    def test_upper_unreachable(self):
        outcome = find_minimal_feasible(lambda s: s >= 2, 1.0, upper=1.8)
        assert outcome.value is None
        assert outcome.growth_rounds == 3

    def test_upper_below_start(self):
        outcome = find_minimal_feasible(lambda s: s >= 2, 1.0, upper=0.5)
        assert outcome.value is None
        assert outcome.growth_rounds == 0

    def test_deterministic(self):
        first = find_minimal_feasible(lambda s: s * s >= 7, 0.3)
        second = find_minimal_feasible(lambda s: s * s >= 7, 0.3)
        assert first == second
