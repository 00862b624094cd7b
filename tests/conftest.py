"""
pytest 配置与公共 fixtures

使用方式：
    def test_something(solver, cover_zone):
        assert solver.solve(cover_zone, ...).scale > 0
"""

from __future__ import annotations

from pathlib import Path

import pytest

from focuscover.config import RuntimeConfig, SolverConfig
from focuscover.models import Environment, Rectangle, Size, SourceDescriptor
from focuscover.solver import TransformSolver

REPO_ROOT = Path(__file__).resolve().parents[1]


# ============================================================================
# 配置 Fixtures
# ============================================================================

@pytest.fixture
def runtime_config() -> RuntimeConfig:
    """运行期配置（默认值，不读取文件）"""
    return RuntimeConfig()


@pytest.fixture
def sample_config_path() -> Path:
    """仓库自带的运行期配置样例"""
    return REPO_ROOT / "config" / "runtime.yaml"


# ============================================================================
# 求解器 Fixtures
# ============================================================================

@pytest.fixture
def solver() -> TransformSolver:
    """默认求解器（align 策略）"""
    return TransformSolver()


@pytest.fixture
def clamp_solver() -> TransformSolver:
    """历史策略求解器（焦点过大时不放大）"""
    return TransformSolver(SolverConfig(oversized_focus_policy="clamp"))


# ============================================================================
# 几何 Fixtures
# ============================================================================

@pytest.fixture
def cover_zone() -> Rectangle:
    """800x600 外框"""
    return Rectangle(x=0, y=0, width=800, height=600)


@pytest.fixture
def target_zone() -> Rectangle:
    """外框中部的 200x200 目标框"""
    return Rectangle(x=300, y=200, width=200, height=200)


@pytest.fixture
def focus_zone() -> Rectangle:
    """1600x1200 图像中心的 200x200 焦点"""
    return Rectangle(x=700, y=500, width=200, height=200)


# ============================================================================
# 候选源 Fixtures
# ============================================================================

@pytest.fixture
def sample_source(focus_zone: Rectangle) -> SourceDescriptor:
    """合法候选源"""
    return SourceDescriptor(
        src="hero-wide.jpg",
        src_set="hero-wide.jpg 1x, hero-wide@2x.jpg 2x",
        size=Size(width=1600, height=1200),
        focus_zone=focus_zone,
    )


@pytest.fixture
def portrait_source() -> SourceDescriptor:
    """仅竖屏匹配的候选源"""
    return SourceDescriptor(
        src="hero-portrait.jpg",
        media="(orientation: portrait)",
        size=Size(width=1200, height=1600),
        focus_zone=Rectangle(x=500, y=700, width=200, height=200),
    )


@pytest.fixture
def landscape_env() -> Environment:
    """1280x800 横屏，2x 像素比"""
    return Environment(viewport_width=1280, viewport_height=800, device_pixel_ratio=2.0)


@pytest.fixture
def portrait_env() -> Environment:
    """390x844 竖屏"""
    return Environment(viewport_width=390, viewport_height=844, device_pixel_ratio=3.0)

