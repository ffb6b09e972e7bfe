"""
Network graph renderer.

`render` turns a `Network`, a surface size and a `RenderStyle` into a
`Drawing`: an ordered, immutable list of primitives that any host (matplotlib,
Manim, JSON export) can replay. All connections are emitted before any node,
so nodes are always painted on top.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional, Tuple, Union

from .config import RenderStyle
from .geometry import Point, Size, fit_square, scale, surface_dimensions
from .graph import Network


@dataclass(frozen=True)
class Segment:
    """A straight connection line between two scaled node positions."""

    edge_id: str
    start: Point
    end: Point
    color: str
    width: float
    opacity: float


@dataclass(frozen=True)
class Disk:
    """A filled node disk centred on a scaled node position."""

    node_id: int
    center: Point
    radius: float
    color: str
    opacity: float


Element = Union[Segment, Disk]


@dataclass(frozen=True)
class Drawing:
    title: str
    width: float
    height: float
    elements: Tuple[Element, ...]

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(e for e in self.elements if isinstance(e, Segment))

    @property
    def disks(self) -> Tuple[Disk, ...]:
        return tuple(e for e in self.elements if isinstance(e, Disk))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation; each element carries its `type`."""
        return {
            "title": self.title,
            "width": self.width,
            "height": self.height,
            "elements": [{"type": type(e).__name__, **asdict(e)} for e in self.elements],
        }


def render(
    network: Network,
    surface: Size,
    style: Optional[RenderStyle] = None,
    rectangular: bool = False,
) -> Drawing:
    """
    Lay out `network` on a drawing surface.

    Args:
        network: Nodes and connections to draw; never mutated
        surface: (width, height) of the target container, or a scalar side
        style: Colors and stroke settings; defaults to `RenderStyle()`
        rectangular: Scale x by width and y by height instead of fitting
            everything into the largest square

    Returns:
        Drawing whose elements are all segments followed by all disks.
        Connections with an endpoint missing from the network are skipped.
    """
    style = style or RenderStyle()
    width, height = surface_dimensions(surface)
    size: Size = (width, height) if rectangular else fit_square(surface)

    segments = []
    for edge, src, dst in network.resolved_edges():
        segments.append(
            Segment(
                edge_id=edge.id,
                start=scale(src.position, size),
                end=scale(dst.position, size),
                color=style.color,
                width=style.edge_width,
                opacity=style.edge_opacity,
            )
        )

    disks = [
        Disk(
            node_id=node.id,
            center=scale(node.position, size),
            radius=style.node_radius,
            color=style.color,
            opacity=style.node_opacity,
        )
        for node in network.nodes
    ]

    return Drawing(title=style.title, width=width, height=height, elements=tuple(segments) + tuple(disks))
