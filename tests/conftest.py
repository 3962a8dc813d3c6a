"""Pytest fixtures shared across the chart tests."""

from __future__ import annotations

from datetime import date
from typing import Callable, Sequence

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from src.data.models import Dataset, Frame, Point  # noqa: E402
from src.visuals.render.base import CurvePath, PathStyle, RenderBackend, TextStyle  # noqa: E402
from src.visuals.render.schedulers import SteppedScheduler  # noqa: E402


class RecordedPath:
    def __init__(self, style: PathStyle, layer, lower: bool) -> None:
        self.style = style
        self.layer = layer
        self.lower = lower
        self.path: CurvePath | None = None


class RecordedText:
    def __init__(self, x: float, y: float, text: str, style: TextStyle) -> None:
        self.x = x
        self.y = y
        self.style = style
        self.history = [text]

    @property
    def text(self) -> str:
        return self.history[-1]


class RecordedLayer:
    def __init__(self, name: str) -> None:
        self.name = name
        self.members: list[RecordedPath] = []


class RecordingBackend(RenderBackend):
    """In-memory backend; transitions finish when the stepped clock reaches them."""

    def __init__(self) -> None:
        self.scheduler = SteppedScheduler()
        self.events: list[tuple] = []
        self.paths: list[RecordedPath] = []
        self.texts: list[RecordedText] = []
        self.layers: list[RecordedLayer] = []
        self.gradients: list[tuple] = []
        self.x_ticks: list[tuple[float, str]] = []
        self.y_ticks: list[tuple[float, str]] = []
        self.fail_animate = False

    def create_layer(self, name: str) -> RecordedLayer:
        layer = RecordedLayer(name)
        self.layers.append(layer)
        return layer

    def create_path(self, style: PathStyle, layer=None, lower: bool = False) -> RecordedPath:
        handle = RecordedPath(style, layer, lower)
        self.paths.append(handle)
        if layer is not None:
            if lower:
                layer.members.insert(0, handle)
            else:
                layer.members.append(handle)
            self.events.append(("trace", style.color))
        return handle

    def update_path(self, handle: RecordedPath, path: CurvePath) -> None:
        handle.path = path

    def animate_path(self, handle, path, duration_ms, on_end):
        if self.fail_animate:
            raise RuntimeError("transition could not be scheduled")
        self.events.append(("animate", path))

        def finish() -> None:
            handle.path = path
            on_end()

        return self.scheduler.call_later(duration_ms, finish)

    def create_text(self, x: float, y: float, text: str, style: TextStyle) -> RecordedText:
        handle = RecordedText(x, y, text, style)
        self.texts.append(handle)
        return handle

    def set_text(self, handle: RecordedText, text: str) -> None:
        handle.history.append(text)
        self.events.append(("label", text))

    def create_gradient(self, x, y, width, height, start_color, end_color):
        self.gradients.append((x, y, width, height, start_color, end_color))
        return self.gradients[-1]

    def draw_x_axis(self, ticks: Sequence[tuple[float, str]]) -> None:
        self.x_ticks = list(ticks)

    def draw_y_axis(self, ticks: Sequence[tuple[float, str]]) -> None:
        self.y_ticks = list(ticks)


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def make_dataset() -> Callable[..., Dataset]:
    """Return a factory building a Dataset from ``(date, rates)`` rows."""

    def _make(rows: Sequence[tuple[date, Sequence[float | None]]], buckets: Sequence[str]) -> Dataset:
        frames = [
            Frame(day, tuple(Point(b, r) for b, r in zip(buckets, rates)))
            for day, rates in rows
        ]
        return Dataset.from_frames(frames)

    return _make


@pytest.fixture
def three_day_dataset(make_dataset) -> Dataset:
    return make_dataset(
        [
            (date(2022, 1, 1), [0.05, 0.40]),
            (date(2022, 1, 2), [0.06, 0.41]),
            (date(2022, 1, 3), [0.08, 0.39]),
        ],
        buckets=["1 Mo", "1 Yr"],
    )


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")
