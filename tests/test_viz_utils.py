"""
Tests for the matplotlib helpers in viz.utils.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402
from matplotlib.colors import to_hex  # noqa: E402
from matplotlib.patches import Circle  # noqa: E402

from iit_core.config import CEREBELLUM_COLOR, THALAMOCORTICAL_COLOR, RenderStyle  # noqa: E402
from iit_core.datasets import cerebellum, thalamocortical  # noqa: E402
from iit_core.renderer import render  # noqa: E402
from viz import content  # noqa: E402
from viz.utils import (  # noqa: E402
    comparison_figure,
    draw_on_axes,
    dynamic_core_figure,
    network_figure,
    split_brain_caption,
    split_brain_figure,
)


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestDrawOnAxes:
    def test_one_artist_per_element(self):
        fig, ax = plt.subplots()
        drawing = render(cerebellum(), 300, RenderStyle(title="Cerebellum"))
        draw_on_axes(ax, drawing)
        assert len(ax.lines) == 9
        assert len([p for p in ax.patches if isinstance(p, Circle)]) == 9
        assert ax.get_title() == "Cerebellum"

    def test_lines_sit_below_disks(self):
        fig, ax = plt.subplots()
        draw_on_axes(ax, render(thalamocortical(), 300))
        top_line = max(line.get_zorder() for line in ax.lines)
        bottom_disk = min(p.get_zorder() for p in ax.patches)
        assert top_line < bottom_disk

    def test_axes_use_surface_coordinates_with_y_down(self):
        fig, ax = plt.subplots()
        draw_on_axes(ax, render(thalamocortical(), (300, 200), rectangular=True))
        assert ax.get_xlim() == (0.0, 300.0)
        assert ax.get_ylim() == (200.0, 0.0)

    def test_styles_are_applied_to_artists(self):
        fig, ax = plt.subplots()
        draw_on_axes(ax, render(cerebellum(), 300, RenderStyle(edge_opacity=0.25, edge_width=3.0)))
        assert {line.get_alpha() for line in ax.lines} == {0.25}
        assert {line.get_linewidth() for line in ax.lines} == {3.0}


class TestFigures:
    def test_network_figure(self):
        fig = network_figure(thalamocortical(), RenderStyle(title=content.THALAMOCORTICAL_TITLE))
        ax = fig.axes[0]
        assert ax.get_title() == content.THALAMOCORTICAL_TITLE
        assert len(ax.lines) == 10

    def test_comparison_figure_has_two_panels(self):
        fig = comparison_figure((thalamocortical(), RenderStyle()), (cerebellum(), RenderStyle()))
        assert len(fig.axes) == 2
        assert len(fig.axes[0].lines) == 10
        assert len(fig.axes[1].lines) == 9

    def test_comparison_figure_keeps_panel_titles_and_colors(self):
        fig = comparison_figure(
            (thalamocortical(), RenderStyle(color=THALAMOCORTICAL_COLOR, title=content.THALAMOCORTICAL_TITLE)),
            (cerebellum(), RenderStyle(color=CEREBELLUM_COLOR, title=content.CEREBELLUM_TITLE)),
        )
        left, right = fig.axes
        assert left.get_title() == content.THALAMOCORTICAL_TITLE
        assert right.get_title() == content.CEREBELLUM_TITLE
        assert {to_hex(line.get_color()) for line in left.lines} == {THALAMOCORTICAL_COLOR.lower()}
        assert {to_hex(line.get_color()) for line in right.lines} == {CEREBELLUM_COLOR.lower()}

    def test_dynamic_core_figure_draws_core_nodes_only_as_disks(self):
        fig = dynamic_core_figure()
        ax = fig.axes[0]
        disks = [p for p in ax.patches if isinstance(p, Circle) and p.get_zorder() > 0]
        assert len(disks) == 3
        assert any("Main Complex" in t.get_text() for t in ax.texts)

    def test_split_brain_figure_titles(self):
        intact = split_brain_figure(severed=False).axes[0]
        severed = split_brain_figure(severed=True).axes[0]
        assert intact.get_title() == "State: Intact Brain"
        assert severed.get_title() == "State: Split Brain"
        # callosal connections disappear when severed
        assert len(intact.lines) - len(severed.lines) == 3

    def test_split_brain_caption(self):
        assert "One main complex" in split_brain_caption(False)
        assert "Two independent complexes" in split_brain_caption(True)


class TestContent:
    def test_references(self):
        assert len(content.REFERENCES) == 3
        assert content.REFERENCES[0].startswith("Sperry")
        assert all("https://doi.org/" in ref for ref in content.REFERENCES)
