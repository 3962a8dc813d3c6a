"""Static gradient swatch summarizing the trace color scale."""

from __future__ import annotations

from ..core.colors import ColorAssignment
from ..core.constants import gradient_height
from ..render.base import RenderBackend


class LegendGradient:
    """Horizontal bar running from the first frame's color to the last's.

    It spans the plot width and sits on the bottom edge of the canvas, below
    the x-axis labels.
    """

    def __init__(self, colors: ColorAssignment, layout, height: float = gradient_height) -> None:
        self.colors = colors
        self.layout = layout
        self.height = height

    def bounds(self) -> tuple[float, float, float, float]:
        """(x, y, width, height) in plot-area pixels."""
        y = self.layout.plot_height + self.layout.margin["bottom"] - self.height
        return 0.0, float(y), float(self.layout.plot_width), float(self.height)

    def render(self, backend: RenderBackend):
        start, end = self.colors.endpoints
        x, y, w, h = self.bounds()
        return backend.create_gradient(x, y, w, h, start, end)
