"""Visuals package public API.
This module re-exports key classes and functions from submodules
to provide a simplified interface.
"""

from .anims.curve import CurveRenderer
from .anims.playback import PlaybackController, PlaybackError, format_date
from .anims.state import PlaybackState
from .anims.traces import TraceAccumulator, TraceEntry
from .core.colors import ColorAssignment
from .core.mapper import CoordinateMapper
from .io.export import export_gif, iter_frames_jpeg
from .plots.chart import ChartAssembler, PlotLayout, compute_layout
from .plots.legend import LegendGradient
from .render.base import CurvePath, PathStyle, RenderBackend, Scheduler, TextStyle, TimerHandle
from .render.mpl_backend import MatplotlibBackend
from .render.schedulers import CanvasScheduler, SteppedScheduler

__all__ = [
    "ChartAssembler",
    "PlotLayout",
    "compute_layout",
    "CoordinateMapper",
    "ColorAssignment",
    "CurveRenderer",
    "CurvePath",
    "TraceAccumulator",
    "TraceEntry",
    "LegendGradient",
    "PlaybackController",
    "PlaybackError",
    "PlaybackState",
    "format_date",
    "RenderBackend",
    "Scheduler",
    "TimerHandle",
    "PathStyle",
    "TextStyle",
    "MatplotlibBackend",
    "CanvasScheduler",
    "SteppedScheduler",
    "export_gif",
    "iter_frames_jpeg",
]
