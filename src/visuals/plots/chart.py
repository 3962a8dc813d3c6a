"""Compose the animated yield-curve chart."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Optional

from src.data.models import Dataset

from ..anims.curve import CurveRenderer
from ..anims.playback import PlaybackController
from ..anims.traces import TraceAccumulator
from ..core import constants
from ..core.colors import ColorAssignment
from ..core.mapper import CoordinateMapper
from ..render.base import PathStyle, RenderBackend, Scheduler, TextStyle
from .legend import LegendGradient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlotLayout:
    width: int
    height: int
    margin: dict
    plot_width: int
    plot_height: int


def compute_layout(
    width: int = constants.width,
    height: int = constants.height,
    margin: Optional[dict] = None,
) -> PlotLayout:
    margin = dict(constants.margin if margin is None else margin)
    plot_width = width - margin["left"] - margin["right"]
    plot_height = height - margin["top"] - margin["bottom"]
    if plot_width <= 0 or plot_height <= 0:
        raise ValueError(f"margins {margin} leave no plot area in {width}x{height}")
    return PlotLayout(width, height, margin, plot_width, plot_height)


def percent_label(value: float) -> str:
    return f"{value:g}%"


class ChartAssembler:
    """Build every chart element once and hand over to playback.

    Args:
        dataset: Validated frames to animate.
        backend: Drawing surface; a matplotlib figure is created when omitted.
        layout: Canvas geometry; the default constants when omitted.
        title: Chart title.
        scheduler: Timer source for a backend created here.
        transition_ms: Primary-curve transition duration.
        frame_interval_ms: Time between successive frames.
        on_cycle: Forwarded to the ``PlaybackController``.
    """

    def __init__(
        self,
        dataset: Dataset,
        backend: Optional[RenderBackend] = None,
        layout: Optional[PlotLayout] = None,
        title: str = constants.title,
        scheduler: Optional[Scheduler] = None,
        transition_ms: float = constants.transition_ms,
        frame_interval_ms: float = constants.frame_interval_ms,
        on_cycle: Optional[Callable[[int], None]] = None,
    ) -> None:
        self.dataset = dataset
        self.layout = layout or compute_layout()
        if backend is None:
            from ..render.mpl_backend import MatplotlibBackend

            backend = MatplotlibBackend.create(self.layout, scheduler=scheduler)
        self.backend = backend
        self.title = title
        self.transition_ms = transition_ms
        self.frame_interval_ms = frame_interval_ms
        self.on_cycle = on_cycle

        self.mapper: Optional[CoordinateMapper] = None
        self.colors: Optional[ColorAssignment] = None
        self.traces: Optional[TraceAccumulator] = None
        self.controller: Optional[PlaybackController] = None

    def assemble(self, start: bool = True) -> PlaybackController:
        layout = self.layout
        backend = self.backend

        self.mapper = CoordinateMapper.from_dataset(
            self.dataset, layout.plot_width, layout.plot_height, constants.band_padding
        )
        backend.draw_x_axis(self.mapper.x_ticks())
        backend.draw_y_axis([(pos, percent_label(v)) for pos, v in self.mapper.y_ticks()])

        backend.create_text(
            layout.plot_width / 2,
            -layout.margin["top"] / 2,
            self.title,
            TextStyle(size_px=constants.title_font_px, color=constants.foreground, anchor="middle"),
        )

        self.colors = ColorAssignment(len(self.dataset))
        LegendGradient(self.colors, layout).render(backend)

        renderer = CurveRenderer(self.mapper)
        primary = backend.create_path(
            PathStyle(color=constants.foreground, width_px=constants.primary_stroke_width)
        )
        self.traces = TraceAccumulator(backend, renderer, self.colors)
        date_label = backend.create_text(
            layout.width - 200,
            -30,
            "",
            TextStyle(size_px=constants.date_font_px, color=constants.foreground),
        )

        self.controller = PlaybackController(
            self.dataset,
            backend,
            renderer,
            self.traces,
            primary,
            date_label,
            transition_ms=self.transition_ms,
            frame_interval_ms=self.frame_interval_ms,
            on_cycle=self.on_cycle,
        )
        logger.info(
            "chart assembled: %d buckets, y domain %s",
            len(self.mapper.buckets),
            self.mapper.y_domain,
        )
        if start:
            self.controller.start()
        return self.controller
