import argparse
import logging
from pathlib import Path

from focuscover.config import RuntimeConfig, get_config
from focuscover.interfaces import SceneError
from focuscover.pipeline import CoverPlacer, load_scene


def _load_config(config_path: str) -> RuntimeConfig:
    if config_path:
        return RuntimeConfig.from_yaml(config_path)
    return get_config()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Compute the focus-aware cover transform for a YAML scene."
    )
    parser.add_argument(
        "--scene",
        required=True,
        help="场景YAML（cover_zone/target_zone/environment/sources）",
    )
    parser.add_argument(
        "--config",
        default="",
        help="可选：运行期配置YAML（默认：config/runtime.yaml）",
    )
    args = parser.parse_args(argv)

    config = _load_config(args.config)
    logging.basicConfig(
        level=config.logging.log_level.upper(),
        format=config.logging.log_format,
    )

    try:
        scene = load_scene(Path(args.scene))
    except SceneError as exc:
        print(f"ERROR {exc}")
        return 1

    placement = CoverPlacer(config=config).place(
        scene.cover_zone,
        scene.target_zone,
        scene.sources,
        scene.environment,
    )
    if placement is None:
        print("没有有效的候选源")
        return 1

    t = placement.transform
    result = placement.result
    print(f"source=#{placement.source_index} {placement.source.src or '-'}")
    print(f"scale={t.scale:.6f} x={t.x:.3f} y={t.y:.3f}")
    print(f"min_cover_scale={result.min_cover_scale:.6f} modes={result.x_mode.value}/{result.y_mode.value}")
    if result.fallback:
        print("fallback=true")
    print(f"css={placement.css_transform}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
