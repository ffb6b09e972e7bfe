from __future__ import annotations

from typing import Tuple

import numpy as np

from iit_core.geometry import Point


def to_scene_point(point: Point, surface: Tuple[float, float], extent: float = 6.0, origin: Tuple[float, float] = (0.0, 0.0)) -> np.ndarray:
    """Map a surface point (y down) into Manim scene space (y up, centred).

    The longer surface side spans `extent` scene units; `origin` shifts the
    centre of the surface in the scene.

    Returns array (x, y, 0)
    """
    width, height = surface
    unit = extent / max(width, height, 1e-9)
    x = (point[0] - width / 2.0) * unit + origin[0]
    y = (height / 2.0 - point[1]) * unit + origin[1]
    return np.array([x, y, 0.0])


def to_scene_length(length: float, surface: Tuple[float, float], extent: float = 6.0) -> float:
    width, height = surface
    return float(length) * extent / max(width, height, 1e-9)
