"""
Lightweight matplotlib drawing helpers decoupled from Streamlit to enable testing.
"""

from __future__ import annotations

from typing import Optional, Tuple

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle, FancyArrowPatch, FancyBboxPatch, Rectangle

from iit_core.config import DEFAULT_SURFACE, RenderStyle
from iit_core.datasets import CORE_NODES, dynamic_core, split_brain
from iit_core.geometry import Size, fit_square
from iit_core.graph import Network
from iit_core.renderer import Disk, Drawing, Segment, render

PANEL_BACKGROUND = "#F3F4F6"


def draw_on_axes(ax: Axes, drawing: Drawing) -> None:
    """Replay a `Drawing` onto matplotlib axes, preserving element order as z-order.

    The axes are set up in surface coordinates with y pointing down.
    """
    for z, element in enumerate(drawing.elements, start=1):
        if isinstance(element, Segment):
            (x0, y0), (x1, y1) = element.start, element.end
            ax.plot(
                [x0, x1],
                [y0, y1],
                color=element.color,
                alpha=element.opacity,
                linewidth=element.width,
                solid_capstyle="round",
                zorder=z,
            )
        elif isinstance(element, Disk):
            ax.add_patch(
                Circle(element.center, element.radius, facecolor=element.color, edgecolor="none", alpha=element.opacity, zorder=z)
            )

    ax.set_xlim(0, drawing.width)
    ax.set_ylim(drawing.height, 0)
    ax.set_aspect("equal")
    ax.axis("off")
    if drawing.title:
        ax.set_title(drawing.title, fontsize=11, fontweight="bold")


def network_figure(
    network: Network,
    style: Optional[RenderStyle] = None,
    surface: Size = DEFAULT_SURFACE,
    figsize: Tuple[float, float] = (4, 4),
) -> Figure:
    """Render `network` into a standalone panel figure."""
    fig, ax = plt.subplots(figsize=figsize)
    fig.patch.set_facecolor(PANEL_BACKGROUND)
    draw_on_axes(ax, render(network, surface, style))
    return fig


def comparison_figure(left: Tuple[Network, RenderStyle], right: Tuple[Network, RenderStyle], surface: Size = DEFAULT_SURFACE) -> Figure:
    """Two renderer panels side by side."""
    fig, (ax_left, ax_right) = plt.subplots(1, 2, figsize=(9, 4.5))
    fig.patch.set_facecolor(PANEL_BACKGROUND)
    for ax, (network, style) in ((ax_left, left), (ax_right, right)):
        draw_on_axes(ax, render(network, surface, style))
    fig.tight_layout()
    return fig


def dynamic_core_figure(surface: Size = DEFAULT_SURFACE) -> Figure:
    """
    Schematic of the dynamic core: a shaded main complex with the
    informationally insulated afferent, efferent and loop ports around it.
    """
    network = dynamic_core()
    drawing = render(network, surface, RenderStyle(color="#CA8A04", node_opacity=0.8, edge_opacity=0.35))
    w, h = drawing.width, drawing.height
    size = min(w, h)

    fig, ax = plt.subplots(figsize=(6, 6))
    ax.add_patch(
        Circle((0.5 * size, 0.48 * size), 0.27 * size, facecolor="#FACC15", alpha=0.2, edgecolor="#EAB308", linewidth=2, zorder=0)
    )
    ax.text(0.5 * size, 0.16 * size, "Main Complex (High Φ)", ha="center", fontsize=11, fontweight="bold")

    ports = {
        "afferent": ("#2563EB", "Sensory Afferents (e.g., Retina)"),
        "efferent": ("#DC2626", "Motor Efferents (e.g., Actions)"),
        "loop-1": ("#16A34A", "Subcortical Loop"),
    }
    # Only the core is drawn as a network; ports get dashed arrows below
    core_segments = tuple(s for s in drawing.segments if s.edge_id not in ports and s.edge_id != "loop-2")
    core_disks = tuple(d for d in drawing.disks if d.node_id in CORE_NODES)
    draw_on_axes(ax, Drawing(title="", width=w, height=h, elements=core_segments + core_disks))

    for seg in drawing.segments:
        if seg.edge_id in ports:
            color, label = ports[seg.edge_id]
            ax.annotate(
                "",
                xy=seg.end,
                xytext=seg.start,
                arrowprops=dict(arrowstyle="-|>", linestyle="--", color=color, linewidth=2),
            )
            ax.text(seg.start[0], seg.start[1] - 0.03 * size, label, fontsize=8, fontweight="bold", color=color)
        elif seg.edge_id == "loop-2":
            ax.add_patch(
                FancyArrowPatch(seg.start, seg.end, connectionstyle="arc3,rad=0.6", linestyle="--", color="#16A34A", linewidth=2)
            )
    ax.set_xlim(0, w)
    ax.set_ylim(h, 0)
    fig.tight_layout()
    return fig


def split_brain_figure(severed: bool, surface: Size = DEFAULT_SURFACE) -> Figure:
    """Hemispheres drawn as boxes behind their networks; the callosum only when intact."""
    network = split_brain(severed=severed)
    fig, ax = plt.subplots(figsize=(6, 4))
    size = fit_square(surface)
    shift = 0.04 * size if severed else 0.0

    for x0, color, label in ((0.02, "#FB923C", "Left Hemi."), (0.56, "#A855F7", "Right Hemi.")):
        offset = -shift if x0 < 0.5 else shift
        ax.add_patch(
            FancyBboxPatch(
                ((x0 * size) + offset, 0.08 * size), 0.42 * size, 0.8 * size,
                boxstyle="round,pad=0,rounding_size=12", facecolor=color, alpha=0.35, edgecolor="none", zorder=0,
            )
        )
        ax.text((x0 + 0.21) * size + offset, 0.96 * size, label, ha="center", fontweight="bold")
    if not severed:
        ax.add_patch(Rectangle((0.46 * size, 0.35 * size), 0.08 * size, 0.3 * size, facecolor="#6B7280", zorder=0))

    title = "State: Split Brain" if severed else "State: Intact Brain"
    draw_on_axes(ax, render(network, size, RenderStyle(color="#1F2937", title=title, node_radius=7.0)))
    ax.set_xlim(-shift - 5, size + shift + 5)
    fig.tight_layout()
    return fig


def split_brain_caption(severed: bool) -> str:
    if severed:
        return "Result: Two independent complexes with lower Φ each."
    return "Result: One main complex with high Φ."
