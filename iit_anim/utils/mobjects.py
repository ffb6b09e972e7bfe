from __future__ import annotations

from typing import Tuple

from manim import Dot, Line, VGroup, ManimColor

from iit_core.renderer import Disk, Drawing, Segment
from iit_anim.utils.layout import to_scene_length, to_scene_point


def segment_mobject(seg: Segment, surface, extent: float = 6.0, origin=(0.0, 0.0)) -> Line:
    line = Line(
        to_scene_point(seg.start, surface, extent, origin),
        to_scene_point(seg.end, surface, extent, origin),
        color=ManimColor(seg.color),
        stroke_width=seg.width * 2,
    )
    line.set_stroke(opacity=seg.opacity)
    return line


def disk_mobject(disk: Disk, surface, extent: float = 6.0, origin=(0.0, 0.0)) -> Dot:
    return Dot(
        to_scene_point(disk.center, surface, extent, origin),
        radius=to_scene_length(disk.radius, surface, extent),
        color=ManimColor(disk.color),
        fill_opacity=disk.opacity,
    )


def drawing_to_mobjects(drawing: Drawing, extent: float = 6.0, origin: Tuple[float, float] = (0.0, 0.0)) -> VGroup:
    """Build a VGroup whose submobject order matches the drawing's element order.

    Manim paints submobjects in order, so segments stay underneath disks.
    """
    surface = (drawing.width, drawing.height)
    group = VGroup()
    for element in drawing.elements:
        if isinstance(element, Segment):
            group.add(segment_mobject(element, surface, extent, origin))
        elif isinstance(element, Disk):
            group.add(disk_mobject(element, surface, extent, origin))
    return group
