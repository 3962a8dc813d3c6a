"""Domain-to-pixel mapping for the yield chart.

Horizontal positions come from a band scale over the ordered bucket labels,
vertical positions from a linear scale over ``[0, max rate]`` rounded out to
a nice tick. Pixel y grows downward, so higher rates map to smaller y.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np
from matplotlib.ticker import MaxNLocator

from src.data.models import Dataset

from .constants import band_padding


def nice_ticks(upper: float, count: int = 10) -> list[float]:
    """Nice tick values covering ``[0, upper]``, ending on the first tick >= upper."""
    if upper <= 0:
        upper = 1.0
    locator = MaxNLocator(nbins=count, steps=[1, 2, 5, 10])
    raw = np.round(locator.tick_values(0.0, upper), 10)
    ticks = [float(t) for t in raw if t >= 0]
    end = next((t for t in ticks if t >= upper), ticks[-1])
    return [t for t in ticks if t <= end]


class CoordinateMapper:
    """Pure mapping from (bucket, rate) to plot-area pixels.

    Args:
        buckets: Ordered bucket labels.
        max_rate: Largest rate in the dataset (``None`` when no rate is known).
        plot_width: Plot-area width in pixels.
        plot_height: Plot-area height in pixels.
        padding: Band padding as a fraction of the band step, applied both
            between bands and at the outer edges.
        tick_count: Approximate number of vertical ticks.
    """

    def __init__(
        self,
        buckets: Sequence[str],
        max_rate: float | None,
        plot_width: float,
        plot_height: float,
        padding: float = band_padding,
        tick_count: int = 10,
    ) -> None:
        if not buckets:
            raise ValueError("at least one bucket is required")
        if not 0 <= padding < 1:
            raise ValueError("padding must be in [0, 1)")
        self.buckets = tuple(buckets)
        self.plot_width = float(plot_width)
        self.plot_height = float(plot_height)
        self.padding = padding

        n = len(self.buckets)
        self.step = self.plot_width / max(1.0, n - padding + 2 * padding)
        self.bandwidth = self.step * (1 - padding)
        start = (self.plot_width - self.step * (n - padding)) * 0.5
        self._centers = {
            b: start + self.step * i + self.bandwidth / 2
            for i, b in enumerate(self.buckets)
        }

        self._y_ticks = nice_ticks(max_rate if max_rate is not None else 0.0, tick_count)
        self.y_domain = (0.0, self._y_ticks[-1])

    @classmethod
    def from_dataset(
        cls,
        dataset: Dataset,
        plot_width: float,
        plot_height: float,
        padding: float = band_padding,
    ) -> "CoordinateMapper":
        return cls(dataset.buckets, dataset.max_rate(), plot_width, plot_height, padding)

    def x(self, bucket: str) -> float:
        """Center pixel x of ``bucket``'s band. Unknown labels raise KeyError."""
        return self._centers[bucket]

    def y(self, rate: float) -> float:
        lo, hi = self.y_domain
        return self.plot_height * (1 - (rate - lo) / (hi - lo))

    def x_ticks(self) -> list[tuple[float, str]]:
        return [(self._centers[b], b) for b in self.buckets]

    def y_ticks(self) -> list[tuple[float, float]]:
        return [(self.y(v), v) for v in self._y_ticks]
