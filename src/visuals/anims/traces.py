"""Faded archive of every frame that has finished its primary display."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from src.data.models import Point

from ..core.colors import ColorAssignment
from ..core.constants import trace_opacity, trace_stroke_width
from ..render.base import PathStyle, RenderBackend
from .curve import CurveRenderer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TraceEntry:
    frame_index: int
    points: tuple[Point, ...]


class TraceAccumulator:
    """Append-only set of trace curves.

    Every archived frame becomes a thin, translucent path colored by its
    frame index and stacked beneath all earlier traces. Nothing is ever
    removed, so entries grow by one per displayed frame for as long as
    playback runs.
    """

    def __init__(
        self,
        backend: RenderBackend,
        renderer: CurveRenderer,
        colors: ColorAssignment,
        opacity: float = trace_opacity,
        stroke_width: float = trace_stroke_width,
    ) -> None:
        self.backend = backend
        self.renderer = renderer
        self.colors = colors
        self.opacity = opacity
        self.stroke_width = stroke_width
        self.layer = backend.create_layer("traces")
        self.entries: list[TraceEntry] = []

    def archive(self, frame_index: int, points: Sequence[Point]) -> TraceEntry:
        entry = TraceEntry(frame_index, tuple(points))
        style = PathStyle(
            color=self.colors(frame_index),
            width_px=self.stroke_width,
            opacity=self.opacity,
        )
        handle = self.backend.create_path(style, layer=self.layer, lower=True)
        self.backend.update_path(handle, self.renderer.render(entry.points))
        self.entries.append(entry)
        logger.debug("archived frame %d (%d traces)", frame_index, len(self.entries))
        return entry

    def __len__(self) -> int:
        return len(self.entries)
