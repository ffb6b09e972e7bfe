from __future__ import annotations

import argparse
from typing import Type

from manim import Scene
from manim import config as manim_config

from iit_anim.scenes.network_scenes import NetworkComparisonScene, SplitBrainScene

SCENES = {
    "NetworkComparisonScene": NetworkComparisonScene,
    "SplitBrainScene": SplitBrainScene,
}


def render_scene(scene_cls: Type[Scene], quality: str = "ql", preview: bool = False, time_scale: float = 1.0):
    # Configure manim (quality shortcuts)
    if quality == "ql":
        manim_config.quality = "low_quality"
    elif quality == "qh":
        manim_config.quality = "high_quality"
    else:
        manim_config.quality = quality

    manim_config.frame_rate = int(30 * max(0.1, time_scale))
    manim_config.preview = preview

    scene = scene_cls()
    scene.render()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render IIT network animations")
    parser.add_argument("--scene", default="NetworkComparisonScene", choices=sorted(SCENES))
    parser.add_argument("--quality", default="ql", help="manim quality: ql/qh")
    parser.add_argument("--preview", action="store_true")
    parser.add_argument("--time-scale", type=float, default=1.0)
    args = parser.parse_args(argv)

    render_scene(SCENES[args.scene], quality=args.quality, preview=args.preview, time_scale=args.time_scale)


if __name__ == "__main__":  # pragma: no cover
    main()
