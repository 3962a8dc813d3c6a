"""matplotlib implementation of ``RenderBackend``.

The Axes' data coordinates are plot-area pixels: x runs over
``[0, plot_width]`` and y over ``[plot_height, 0]`` (inverted), so the values
produced by ``CoordinateMapper`` can be drawn without further transforms.
Titles, the date label and the legend swatch sit outside that box and are
drawn unclipped.
"""

from __future__ import annotations

import math
from typing import Callable, Sequence

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.patches import PathPatch
from matplotlib.path import Path

from ..core.constants import dpi, foreground, tween_step_ms
from ..core.fonts import get_font, px_to_pt
from ..core.style import setup_curve_plot_style
from .base import CurvePath, PathStyle, RenderBackend, Scheduler, TextStyle, TimerHandle
from .schedulers import CanvasScheduler

PRIMARY_Z = 3.0
TEXT_Z = 4.0
LEGEND_Z = 1.0
_HALIGN = {"start": "left", "middle": "center", "end": "right"}


def to_mpl_path(path: CurvePath) -> Path:
    """Build a MOVETO + CURVE4 ``Path`` from a ``CurvePath``."""
    if path.is_empty:
        return Path(np.zeros((1, 2)), [Path.MOVETO])
    vertices = path.vertices()
    codes = [Path.MOVETO] + [Path.CURVE4] * (len(vertices) - 1)
    return Path(vertices, codes)


def ease_cubic_in_out(t: float) -> float:
    t *= 2
    if t <= 1:
        return t * t * t / 2
    t -= 2
    return (t * t * t + 2) / 2


class _Layer:
    def __init__(self, name: str, top_z: float) -> None:
        self.name = name
        self.top_z = top_z
        self.members: list[PathPatch] = []

    def next_z(self, lower: bool) -> float:
        # Members occupy (top_z - 1, top_z]; each lowered member sits below the last.
        if not lower:
            return self.top_z
        return self.top_z - 1 + 1.0 / (len(self.members) + 1)


class MatplotlibBackend(RenderBackend):
    """Draw the chart onto one matplotlib Axes.

    Args:
        figure: Figure that owns ``ax``.
        ax: Axes whose data limits equal the plot-area pixel box.
        scheduler: Timer source; defaults to the figure canvas' timers.
        at_dpi: Dots per inch used for pixel-to-point conversions.
    """

    def __init__(
        self,
        figure: plt.Figure,
        ax: plt.Axes,
        scheduler: Scheduler | None = None,
        at_dpi: int = dpi,
    ) -> None:
        self.figure = figure
        self.ax = ax
        self.at_dpi = at_dpi
        self.scheduler = scheduler or CanvasScheduler(figure.canvas)
        self._limits = (ax.get_xlim(), ax.get_ylim())

    @classmethod
    def create(cls, layout, scheduler: Scheduler | None = None, at_dpi: int = dpi) -> "MatplotlibBackend":
        """Create a figure sized and positioned for ``layout``."""
        fig = plt.figure(figsize=(layout.width / at_dpi, layout.height / at_dpi), dpi=at_dpi)
        ax = fig.add_axes(
            [
                layout.margin["left"] / layout.width,
                layout.margin["bottom"] / layout.height,
                layout.plot_width / layout.width,
                layout.plot_height / layout.height,
            ]
        )
        ax.set_xlim(0, layout.plot_width)
        ax.set_ylim(layout.plot_height, 0)
        setup_curve_plot_style(ax)
        return cls(fig, ax, scheduler=scheduler, at_dpi=at_dpi)

    def _restore_limits(self) -> None:
        xlim, ylim = self._limits
        self.ax.set_xlim(*xlim)
        self.ax.set_ylim(*ylim)

    def create_layer(self, name: str) -> _Layer:
        return _Layer(name, top_z=PRIMARY_Z - 1)

    def create_path(self, style: PathStyle, layer: _Layer | None = None, lower: bool = False) -> PathPatch:
        zorder = layer.next_z(lower) if layer is not None else PRIMARY_Z
        patch = PathPatch(
            to_mpl_path(CurvePath(())),
            fill=False,
            edgecolor=style.color,
            alpha=style.opacity,
            linewidth=px_to_pt(style.width_px, self.at_dpi),
            capstyle="round",
            joinstyle="round",
            zorder=zorder,
            clip_on=False,
        )
        self.ax.add_patch(patch)
        if layer is not None:
            layer.members.append(patch)
        return patch

    def update_path(self, handle: PathPatch, path: CurvePath) -> None:
        handle.set_path(to_mpl_path(path))
        handle.stale = True

    def animate_path(
        self,
        handle: PathPatch,
        path: CurvePath,
        duration_ms: float,
        on_end: Callable[[], None],
    ) -> TimerHandle:
        target = to_mpl_path(path)
        if duration_ms <= 0:
            handle.set_path(target)
            handle.stale = True
            self.refresh()
            return self.scheduler.call_later(0, on_end)
        start = handle.get_path().vertices.copy()
        if start.shape != target.vertices.shape:
            start = None
        steps = max(1, math.ceil(duration_ms / tween_step_ms))
        state = {"step": 0}
        timers: list[TimerHandle] = []

        def tick():
            state["step"] += 1
            if start is None or state["step"] >= steps:
                handle.set_path(target)
            else:
                t = ease_cubic_in_out(state["step"] / steps)
                handle.set_path(Path(start + (target.vertices - start) * t, target.codes))
            handle.stale = True
            self.refresh()
            if state["step"] >= steps:
                timers[0].stop()
                on_end()
                return False
            return None

        timers.append(self.scheduler.call_every(duration_ms / steps, tick))
        return timers[0]

    def create_text(self, x: float, y: float, text: str, style: TextStyle):
        return self.ax.text(
            x,
            y,
            text,
            color=style.color,
            fontproperties=get_font(style.size_px, style.weight, self.at_dpi),
            ha=_HALIGN[style.anchor],
            va="baseline",
            clip_on=False,
            zorder=TEXT_Z,
        )

    def set_text(self, handle, text: str) -> None:
        handle.set_text(text)

    def create_gradient(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        start_color: str,
        end_color: str,
    ):
        cmap = LinearSegmentedColormap.from_list("legend_gradient", [start_color, end_color])
        image = self.ax.imshow(
            np.linspace(0.0, 1.0, 256).reshape(1, -1),
            cmap=cmap,
            aspect="auto",
            extent=(x, x + width, y + height, y),
            interpolation="bilinear",
            clip_on=False,
            zorder=LEGEND_Z,
        )
        self._restore_limits()
        return image

    def draw_x_axis(self, ticks: Sequence[tuple[float, str]]) -> None:
        self.ax.set_xticks([p for p, _ in ticks], [label for _, label in ticks])
        self.ax.tick_params(axis="x", length=0, pad=10, labelrotation=45)
        for label in self.ax.get_xticklabels():
            label.set_horizontalalignment("right")
        self.ax.grid(True, axis="x", color=foreground, alpha=0.2, linewidth=0.5)
        self.ax.set_axisbelow(True)
        self._restore_limits()

    def draw_y_axis(self, ticks: Sequence[tuple[float, str]]) -> None:
        self.ax.set_yticks([p for p, _ in ticks], [label for _, label in ticks])
        self.ax.tick_params(axis="y", length=0, pad=10)
        self.ax.grid(True, axis="y", color=foreground, alpha=0.2, linewidth=0.5)
        self.ax.set_axisbelow(True)
        self._restore_limits()

    def refresh(self) -> None:
        self.figure.canvas.draw_idle()
