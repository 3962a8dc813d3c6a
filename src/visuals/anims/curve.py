"""Turn one frame's points into a smoothed, overshoot-free path."""

from __future__ import annotations

from typing import Sequence

import numpy as np
from scipy.interpolate import PchipInterpolator

from src.data.models import Point

from ..core.mapper import CoordinateMapper
from ..render.base import CurvePath


class CurveRenderer:
    """Build monotone cubic paths through mapped points.

    Points without a rate are dropped before interpolation, so the curve runs
    straight through the gap using its well-defined neighbours. Slopes come
    from a PCHIP interpolant in pixel space, which never overshoots between
    samples; each segment is emitted as the equivalent cubic Bezier.

    Args:
        mapper: Coordinate mapping for the chart.
    """

    def __init__(self, mapper: CoordinateMapper) -> None:
        self.mapper = mapper

    def anchors(self, points: Sequence[Point]) -> list[tuple[float, float]]:
        return [
            (self.mapper.x(p.bucket), self.mapper.y(p.rate))
            for p in points
            if p.has_value
        ]

    def render(self, points: Sequence[Point]) -> CurvePath:
        anchors = self.anchors(points)
        if len(anchors) < 2:
            return CurvePath(tuple(anchors))

        xs = np.array([a[0] for a in anchors])
        ys = np.array([a[1] for a in anchors])
        slopes = PchipInterpolator(xs, ys).derivative()(xs)

        controls = []
        for i in range(len(anchors) - 1):
            third = (xs[i + 1] - xs[i]) / 3.0
            controls.append(
                (
                    (float(xs[i] + third), float(ys[i] + slopes[i] * third)),
                    (float(xs[i + 1] - third), float(ys[i + 1] - slopes[i + 1] * third)),
                )
            )
        return CurvePath(
            tuple((float(x), float(y)) for x, y in anchors),
            tuple(controls),
        )

