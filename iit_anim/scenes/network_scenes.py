from __future__ import annotations

from manim import DOWN, UP, Create, FadeIn, FadeOut, Scene, Text, Transform

from iit_core.config import CEREBELLUM_COLOR, DEFAULT_SURFACE, THALAMOCORTICAL_COLOR, RenderStyle
from iit_core.datasets import cerebellum, split_brain, thalamocortical
from iit_core.renderer import render
from iit_anim.utils.mobjects import drawing_to_mobjects


class NetworkComparisonScene(Scene):
    """Thalamocortical and cerebellum panels side by side, edges drawn first."""

    extent = 5.0

    def construct(self):
        panels = [
            (thalamocortical(), RenderStyle(color=THALAMOCORTICAL_COLOR, title="Thalamocortical-like (High Φ)"), -3.5),
            (cerebellum(), RenderStyle(color=CEREBELLUM_COLOR, title="Cerebellum-like (Low Φ)"), 3.5),
        ]
        for network, style, x in panels:
            drawing = render(network, DEFAULT_SURFACE, style)
            group = drawing_to_mobjects(drawing, extent=self.extent, origin=(x, -0.4))
            title = Text(drawing.title, font_size=24).move_to((x, 3.1, 0))
            segments = group[: len(drawing.segments)]
            disks = group[len(drawing.segments):]
            self.play(FadeIn(title))
            self.play(*[Create(m) for m in segments], run_time=1.0)
            self.play(*[FadeIn(m) for m in disks], run_time=0.6)
        self.wait(1.0)


class SplitBrainScene(Scene):
    """Animate the corpus callosum being cut: one complex becomes two."""

    extent = 6.0

    def construct(self):
        style = RenderStyle(color="#F97316")
        intact = drawing_to_mobjects(render(split_brain(severed=False), DEFAULT_SURFACE, style), extent=self.extent)
        caption = Text("State: Intact Brain", font_size=28).to_edge(UP)
        result = Text("One main complex with high Φ", font_size=22).to_edge(DOWN)
        self.play(FadeIn(intact), FadeIn(caption), FadeIn(result))
        self.wait(1.0)

        severed = drawing_to_mobjects(render(split_brain(severed=True), DEFAULT_SURFACE, style), extent=self.extent)
        self.play(
            Transform(intact, severed),
            Transform(caption, Text("State: Split Brain", font_size=28).to_edge(UP)),
            Transform(result, Text("Two independent complexes with lower Φ each", font_size=22).to_edge(DOWN)),
            run_time=1.5,
        )
        self.wait(1.0)
        self.play(FadeOut(intact), FadeOut(caption), FadeOut(result))
