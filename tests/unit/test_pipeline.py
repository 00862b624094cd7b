"""
放置流水线/场景加载/命令行工具单元测试

每个模块完成后必须运行：pytest tests/unit/test_pipeline.py -v
"""

import importlib.util
import logging
from pathlib import Path

import pytest

from focuscover.config import RuntimeConfig, SolverConfig
from focuscover.interfaces import SceneError
from focuscover.models import Environment, Rectangle, SourceDescriptor
from focuscover.pipeline import CoverPlacer, load_scene, parse_scene

REPO_ROOT = Path(__file__).resolve().parents[2]

SCENE_YAML = """\
cover_zone: {x: 100, y: 50, width: 800, height: 600}
target_zone: {x: 400, y: 250, width: 200, height: 200}
environment: {viewport_width: 1280, viewport_height: 800}
sources:
  - src: broken.jpg
  - src: hero-wide.jpg
    size: {width: 1600, height: 1200}
    focus_zone: {x: 700, y: 500, width: 200, height: 200}
"""


@pytest.fixture
def placer(runtime_config: RuntimeConfig) -> CoverPlacer:
    return CoverPlacer(config=runtime_config)


class TestCoverPlacer:
    """放置流水线测试"""

    def test_place(
        self,
        placer: CoverPlacer,
        cover_zone: Rectangle,
        target_zone: Rectangle,
        sample_source: SourceDescriptor,
        landscape_env: Environment,
    ):
        placement = placer.place(cover_zone, target_zone, [sample_source], landscape_env)
        assert placement is not None
        assert placement.source_index == 0
        assert placement.transform.scale == pytest.approx(0.5)
        assert placement.css_transform == "translate(0px, 0px) scale(0.5)"

    def test_target_rebased_on_cover(
        self, placer: CoverPlacer, sample_source: SourceDescriptor
    ):
        """测试外框不在原点时目标框换算到外框局部坐标"""
        cover = Rectangle(x=100, y=50, width=800, height=600)
        target = Rectangle(x=400, y=250, width=200, height=200)
        placement = placer.place(cover, target, [sample_source])

        local_target = target.relative_to(cover)
        mapped = placement.transform.map_rect(sample_source.focus_zone)
        assert local_target.contains(mapped, tol=1e-6)

    def test_skips_invalid_sources(
        self,
        placer: CoverPlacer,
        cover_zone: Rectangle,
        target_zone: Rectangle,
        sample_source: SourceDescriptor,
        portrait_source: SourceDescriptor,
        landscape_env: Environment,
    ):
        """测试非法候选源被跳过，下标指向原始列表"""
        broken = SourceDescriptor(src="broken.jpg", media="(min-width: 1px)")
        sources = [broken, portrait_source, sample_source]
        placement = placer.place(cover_zone, target_zone, sources, landscape_env)
        assert placement.source_index == 2
        assert placement.source is sample_source

    def test_environment_selects_portrait(
        self,
        placer: CoverPlacer,
        target_zone: Rectangle,
        sample_source: SourceDescriptor,
        portrait_source: SourceDescriptor,
        portrait_env: Environment,
    ):
        cover = Rectangle(x=0, y=0, width=600, height=800)
        placement = placer.place(cover, target_zone, [portrait_source, sample_source], portrait_env)
        assert placement.source_index == 0
        assert placement.result.min_cover_scale == pytest.approx(0.5)

    def test_no_valid_sources(
        self,
        placer: CoverPlacer,
        cover_zone: Rectangle,
        target_zone: Rectangle,
        caplog: pytest.LogCaptureFixture,
    ):
        """测试没有有效候选源"""
        with caplog.at_level(logging.ERROR):
            assert placer.place(cover_zone, target_zone, [SourceDescriptor(src="x.jpg")]) is None
        assert "没有有效的候选源" in caplog.text

    def test_uses_configured_solver(
        self, cover_zone: Rectangle, sample_source: SourceDescriptor
    ):
        """测试求解器参数来自配置"""
        config = RuntimeConfig(solver=SolverConfig(max_growth_rounds=1))
        placer = CoverPlacer(config=config)
        # 目标框远离焦点所在位置，需要多轮放大
        target = Rectangle(x=0, y=0, width=150, height=150)
        placement = placer.place(cover_zone, target, [sample_source])
        assert placement.result.fallback
        assert placement.transform.scale == pytest.approx(0.5)


class TestScene:
    """场景文件测试"""

    def test_load_scene(self, tmp_path: Path):
        path = tmp_path / "scene.yaml"
        path.write_text(SCENE_YAML, encoding="utf-8")
        scene = load_scene(path)
        assert scene.cover_zone.x == 100
        assert scene.environment.orientation == "landscape"
        assert len(scene.sources) == 2
        assert scene.sources[0].size is None

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(SceneError):
            load_scene(tmp_path / "missing.yaml")

    def test_invalid_content(self):
        with pytest.raises(SceneError):
            parse_scene(["not", "a", "mapping"])
        with pytest.raises(SceneError):
            parse_scene({"cover_zone": {"width": 10}})

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "scene.yaml"
        path.write_text("cover_zone: {x: 1", encoding="utf-8")
        with pytest.raises(SceneError):
            load_scene(path)


class TestRunPlacementTool:
    """命令行工具测试"""

    @pytest.fixture
    def tool(self):
        spec = importlib.util.spec_from_file_location(
            "run_placement", REPO_ROOT / "tools" / "run_placement.py"
        )
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
        return module

    def test_main(self, tool, tmp_path: Path, sample_config_path: Path, capsys):
        path = tmp_path / "scene.yaml"
        path.write_text(SCENE_YAML, encoding="utf-8")
        code = tool.main(["--scene", str(path), "--config", str(sample_config_path)])
        out = capsys.readouterr().out
        assert code == 0
        assert "source=#1 hero-wide.jpg" in out
        assert "scale=0.500000" in out
        assert "css=translate(0px, 0px) scale(0.5)" in out

    def test_example_scene(self, tool, sample_config_path: Path, capsys):
        code = tool.main([
            "--scene", str(REPO_ROOT / "tools" / "scene.example.yaml"),
            "--config", str(sample_config_path),
        ])
        assert code == 0
        assert "source=#1 hero-wide.jpg" in capsys.readouterr().out

    def test_bad_scene(self, tool, tmp_path: Path, capsys):
        code = tool.main(["--scene", str(tmp_path / "missing.yaml")])
        assert code == 1
        assert "ERROR" in capsys.readouterr().out
