"""Headless rendering of the yield-curve animation.

The chart is driven on a ``SteppedScheduler`` so frames are captured at exact
virtual times instead of waiting on a GUI event loop.
"""

from __future__ import annotations

import io
import logging
import math
import os
from typing import Iterator

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.backends.backend_agg import FigureCanvasAgg as FigureCanvas
from PIL import Image

from src.data.models import Dataset

from ..core import constants
from ..plots.chart import ChartAssembler
from ..render.schedulers import SteppedScheduler

logger = logging.getLogger(__name__)


def build_export_chart(
    dataset: Dataset,
    cycles: int,
    scheduler: SteppedScheduler,
    title: str = constants.title,
) -> ChartAssembler:
    """Chart whose playback stops once ``cycles`` passes have been archived.

    The last frame stays on screen instead of the next cycle's first Draw.
    """
    chart = ChartAssembler(dataset, title=title, scheduler=scheduler)

    def stop_after(done: int) -> None:
        if done >= cycles:
            chart.controller.stop()

    chart.on_cycle = stop_after
    return chart


def iter_frames(
    dataset: Dataset,
    cycles: int = 1,
    fps: int = 25,
    title: str = constants.title,
) -> Iterator[Image.Image]:
    """Yield RGB frames covering ``cycles`` full passes over ``dataset``."""
    if cycles < 1:
        raise ValueError("cycles must be at least 1")
    if fps <= 0:
        raise ValueError("fps must be positive")

    scheduler = SteppedScheduler()
    chart = build_export_chart(dataset, cycles, scheduler, title=title)
    controller = chart.assemble(start=False)
    fig = chart.backend.figure
    canvas = FigureCanvas(fig)
    step_ms = 1000.0 / fps
    total_ms = cycles * len(dataset) * chart.frame_interval_ms
    frame_total = math.ceil(total_ms / step_ms)
    try:
        controller.start()
        for frame_idx in range(frame_total):
            scheduler.advance(max(0.0, min(step_ms, total_ms - scheduler.now)))
            canvas.draw()
            w, h = canvas.get_width_height()
            buf = np.frombuffer(canvas.buffer_rgba(), dtype=np.uint8).reshape(h, w, 4)
            if frame_idx % 200 == 0:
                logger.info("export: prepared frame %s/%s", frame_idx, frame_total)
            yield Image.fromarray(buf[:, :, :3].copy())
    finally:
        if controller.running:
            controller.stop()
        plt.close(fig)


def iter_frames_jpeg(
    dataset: Dataset,
    cycles: int = 1,
    fps: int = 25,
    quality: int = 75,
    title: str = constants.title,
) -> Iterator[bytes]:
    """Yield JPEG bytes frame-by-frame without materializing the whole animation."""
    for img in iter_frames(dataset, cycles=cycles, fps=fps, title=title):
        out = io.BytesIO()
        img.save(out, format="JPEG", quality=quality, subsampling=2, optimize=False)
        yield out.getvalue()


def export_gif(
    dataset: Dataset,
    out_path: str | os.PathLike,
    cycles: int = 1,
    fps: int = 25,
    title: str = constants.title,
) -> int:
    """Write a looping animated GIF and return the number of frames written."""
    frames = list(iter_frames(dataset, cycles=cycles, fps=fps, title=title))
    first, rest = frames[0], frames[1:]
    first.save(
        out_path,
        format="GIF",
        save_all=True,
        append_images=rest,
        duration=int(round(1000 / fps)),
        loop=0,
    )
    logger.info("export: wrote %d frames to %s", len(frames), out_path)
    return len(frames)
