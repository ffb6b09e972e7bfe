"""
Configuration objects for the network renderer.

Exposes the cosmetic parameters of a drawing so callers can restyle panels
without touching the rendering logic.
"""

from __future__ import annotations
from dataclasses import dataclass

# Default panel surface in abstract length units (width, height)
DEFAULT_SURFACE = (300.0, 300.0)

THALAMOCORTICAL_COLOR = "#3B82F6"
CEREBELLUM_COLOR = "#22C55E"


@dataclass
class RenderStyle:
    """
    Style descriptor passed to `render`.

    Edge opacity must stay below node opacity so that nodes visually
    dominate the connections drawn underneath them.
    """

    color: str = THALAMOCORTICAL_COLOR
    title: str = ""

    # Nodes are uniform filled disks
    node_radius: float = 10.0
    node_opacity: float = 1.0

    # Connections
    edge_width: float = 1.5
    edge_opacity: float = 0.5

    def __post_init__(self):
        for name in ("node_opacity", "edge_opacity"):
            value = getattr(self, name)
            if not (0.0 <= value <= 1.0):
                raise ValueError(f"{name} {value} is outside valid range [0.0, 1.0]")
        if self.edge_opacity >= self.node_opacity:
            raise ValueError(
                f"edge_opacity {self.edge_opacity} must be below node_opacity {self.node_opacity}"
            )
