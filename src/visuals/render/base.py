"""Rendering backend contract.

The chart logic talks to the drawing surface only through ``RenderBackend``
and schedules work only through ``Scheduler``. Coordinates are plot-area
pixels with the origin at the top-left corner and y growing downward.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Sequence

import numpy as np

Vertex = tuple[float, float]


@dataclass(frozen=True)
class CurvePath:
    """Backend-agnostic smoothed path.

    ``anchors`` are the on-curve vertices in drawing order. ``controls`` holds
    one pair of cubic Bezier control points per segment, so it is always one
    shorter than ``anchors`` (or empty).
    """

    anchors: tuple[Vertex, ...]
    controls: tuple[tuple[Vertex, Vertex], ...] = ()

    def __post_init__(self) -> None:
        if self.anchors and len(self.controls) != len(self.anchors) - 1:
            raise ValueError("need one control pair per segment")

    @property
    def is_empty(self) -> bool:
        return not self.anchors

    def vertices(self) -> np.ndarray:
        """Flattened vertices: anchor, then (c1, c2, anchor) per segment."""
        if self.is_empty:
            return np.empty((0, 2))
        out = [self.anchors[0]]
        for (c1, c2), end in zip(self.controls, self.anchors[1:]):
            out.extend((c1, c2, end))
        return np.asarray(out, dtype=float)


@dataclass(frozen=True)
class PathStyle:
    color: str
    width_px: float
    opacity: float = 1.0


@dataclass(frozen=True)
class TextStyle:
    size_px: float
    color: str
    weight: str = "bold"
    anchor: str = "start"  # start | middle | end


class TimerHandle(ABC):
    """A scheduled callback that can be cancelled."""

    active: bool = True

    @abstractmethod
    def stop(self) -> None:
        """Cancel the callback. Stopping twice is a no-op."""


class Scheduler(ABC):
    """Single-threaded timer source.

    A recurring callback that returns ``False`` is removed after that call.
    """

    @abstractmethod
    def call_every(self, interval_ms: float, callback: Callable[[], Any]) -> TimerHandle:
        ...

    @abstractmethod
    def call_later(self, delay_ms: float, callback: Callable[[], Any]) -> TimerHandle:
        ...


class RenderBackend(ABC):
    """Drawing primitives the chart needs from a 2D surface."""

    scheduler: Scheduler

    @abstractmethod
    def create_layer(self, name: str) -> Any:
        """Create a container drawn beneath free-standing paths."""

    @abstractmethod
    def create_path(self, style: PathStyle, layer: Any = None, lower: bool = False) -> Any:
        """Create an empty path. In a ``layer`` with ``lower`` it goes beneath
        every earlier member of that layer."""

    @abstractmethod
    def update_path(self, handle: Any, path: CurvePath) -> None:
        ...

    @abstractmethod
    def animate_path(
        self,
        handle: Any,
        path: CurvePath,
        duration_ms: float,
        on_end: Callable[[], None],
    ) -> TimerHandle:
        """Start morphing ``handle`` into ``path`` and return immediately.

        ``on_end`` is invoked once, after the final shape is in place.
        """

    @abstractmethod
    def create_text(self, x: float, y: float, text: str, style: TextStyle) -> Any:
        ...

    @abstractmethod
    def set_text(self, handle: Any, text: str) -> None:
        ...

    @abstractmethod
    def create_gradient(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        start_color: str,
        end_color: str,
    ) -> Any:
        """Draw a rectangle filled left-to-right from ``start_color`` to ``end_color``."""

    @abstractmethod
    def draw_x_axis(self, ticks: Sequence[tuple[float, str]]) -> None:
        ...

    @abstractmethod
    def draw_y_axis(self, ticks: Sequence[tuple[float, str]]) -> None:
        ...

    def refresh(self) -> None:
        """Request a redraw. Backends that draw eagerly can ignore this."""
