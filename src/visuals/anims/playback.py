"""Playback loop for the yield-curve animation.

One frame is on screen at a time. Each step runs Draw (render the frame as
the primary curve, update the date label, start the transition), Settle
(archive the frame as a trace once the transition finishes) and Advance
(move to the next frame, wrapping at the end, and Draw again). Only one
transition is ever in flight, and a frame is archived before the next one
starts drawing.
"""

from __future__ import annotations

import logging
from datetime import date
from functools import partial
from typing import Any, Callable, Optional, Sequence

from src.data.models import Dataset, Frame

from ..core.constants import frame_interval_ms, transition_ms
from ..render.base import RenderBackend, TimerHandle
from .curve import CurveRenderer
from .state import PlaybackState
from .traces import TraceAccumulator

logger = logging.getLogger(__name__)


class PlaybackError(RuntimeError):
    """Raised when the backend fails mid-playback. Playback is halted."""


def format_date(day: date) -> str:
    """Render a date label like ``"Jan 1, 2022"``."""
    return f"{day:%b} {day.day}, {day.year}"


class PlaybackController:
    """Drive the Draw -> Settle -> Advance cycle forever.

    Args:
        dataset: Frames to play; a plain sequence is validated into a Dataset.
        backend: Drawing surface and timer source.
        renderer: Path builder for frame points.
        traces: Archive that receives each settled frame.
        primary: Backend handle of the primary curve.
        date_label: Backend handle of the date text.
        transition_ms: Duration of each primary-curve transition.
        frame_interval_ms: Time between successive Draws; never shorter
            than ``transition_ms``.
        date_format: Callable rendering a frame date for the label.
        on_cycle: Called with the completed cycle count each time playback
            wraps back to the first frame.
    """

    def __init__(
        self,
        dataset: Dataset | Sequence[Frame],
        backend: RenderBackend,
        renderer: CurveRenderer,
        traces: TraceAccumulator,
        primary: Any,
        date_label: Any,
        transition_ms: float = transition_ms,
        frame_interval_ms: float = frame_interval_ms,
        date_format: Callable[[date], str] = format_date,
        on_cycle: Optional[Callable[[int], None]] = None,
    ) -> None:
        if not isinstance(dataset, Dataset):
            dataset = Dataset.from_frames(dataset)
        if transition_ms < 0:
            raise ValueError("transition_ms must not be negative")
        if frame_interval_ms < transition_ms:
            raise ValueError("frame_interval_ms must be at least transition_ms")
        self.dataset = dataset
        self.backend = backend
        self.renderer = renderer
        self.traces = traces
        self.primary = primary
        self.date_label = date_label
        self.transition_ms = transition_ms
        self.frame_interval_ms = frame_interval_ms
        self.date_format = date_format
        self.on_cycle = on_cycle

        self.state = PlaybackState(len(dataset))
        self.running = False
        self.in_flight = False
        self._pending: Optional[TimerHandle] = None

    @property
    def current_index(self) -> int:
        return self.state.current_index

    def start(self) -> None:
        if self.running:
            raise PlaybackError("playback already running")
        self.running = True
        logger.info(
            "playback start: %d frames, transition=%sms interval=%sms",
            len(self.dataset),
            self.transition_ms,
            self.frame_interval_ms,
        )
        self._draw()

    def stop(self) -> None:
        """Cancel the in-flight transition or hold; no further frame is drawn."""
        self.running = False
        self.in_flight = False
        if self._pending is not None:
            self._pending.stop()
            self._pending = None
        logger.info(
            "playback stopped at frame %d after %d cycles",
            self.state.current_index,
            self.state.cycles,
        )

    def _draw(self) -> None:
        self._pending = None
        if not self.running:
            return
        if self.in_flight:
            raise PlaybackError("a transition is already in flight")
        index = self.state.current_index
        frame = self.dataset[index]
        logger.debug("draw frame %d (%s)", index, frame.date)
        try:
            path = self.renderer.render(frame.points)
            self.backend.set_text(self.date_label, self.date_format(frame.date))
            self.in_flight = True
            self._pending = self.backend.animate_path(
                self.primary,
                path,
                self.transition_ms,
                partial(self._settle, index),
            )
        except Exception as exc:
            self._fail("draw", index, exc)

    def _settle(self, index: int) -> None:
        self._pending = None
        self.in_flight = False
        if not self.running:
            return
        try:
            self.traces.archive(index, self.dataset[index].points)
        except Exception as exc:
            self._fail("settle", index, exc)
        self._advance()

    def _advance(self) -> None:
        index = self.state.current_index
        try:
            if self.state.advance():
                logger.info(
                    "cycle %d complete: %d traces on screen",
                    self.state.cycles,
                    len(self.traces),
                )
                if self.on_cycle is not None:
                    self.on_cycle(self.state.cycles)
            # on_cycle may have stopped playback
            if not self.running:
                return
            hold = self.frame_interval_ms - self.transition_ms
            if hold > 0:
                self._pending = self.backend.scheduler.call_later(hold, self._draw)
                return
        except Exception as exc:
            self._fail("advance", index, exc)
        self._draw()

    def _fail(self, phase: str, index: int, exc: Exception) -> None:
        self.running = False
        self.in_flight = False
        if self._pending is not None:
            self._pending.stop()
            self._pending = None
        logger.exception("%s failed at frame %d; playback halted", phase, index)
        raise PlaybackError(f"{phase} failed at frame {index}: {exc}") from exc
