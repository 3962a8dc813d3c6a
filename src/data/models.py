"""Yield-curve data model shared by the loader and the visuals.

A ``Dataset`` is an ordered, validated sequence of ``Frame`` snapshots. Each
frame carries exactly one ``Point`` per maturity bucket, in the same bucket
order as every other frame.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Iterator, Optional, Sequence


class DatasetError(ValueError):
    """Raised when a dataset cannot be played back."""


@dataclass(frozen=True)
class Point:
    """One maturity bucket of a frame. ``rate`` is ``None`` when unknown."""

    bucket: str
    rate: Optional[float]

    @property
    def has_value(self) -> bool:
        return self.rate is not None


@dataclass(frozen=True)
class Frame:
    date: date
    points: tuple[Point, ...]

    @property
    def buckets(self) -> tuple[str, ...]:
        return tuple(p.bucket for p in self.points)


def parse_rate(raw) -> Optional[float]:
    """Parse a rate cell into a float, or ``None`` for "no value".

    Blank strings, non-numeric text (e.g. ``"n/a"``) and NaN all map to
    ``None``; nothing is coerced to zero.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.strip()
        if not raw:
            return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if math.isnan(value) or math.isinf(value):
        return None
    return value


@dataclass(frozen=True)
class Dataset:
    """Chronologically ordered frames sharing one bucket layout.

    Args:
        frames: Frames in playback order.

    Raises:
        DatasetError: If ``frames`` is empty or the frames disagree on their
            bucket labels or bucket order.
    """

    frames: tuple[Frame, ...]

    def __post_init__(self) -> None:
        if not self.frames:
            raise DatasetError("dataset is empty")
        expected = self.frames[0].buckets
        if not expected:
            raise DatasetError("frames have no maturity buckets")
        if len(set(expected)) != len(expected):
            raise DatasetError(f"duplicate bucket labels: {list(expected)}")
        for index, frame in enumerate(self.frames[1:], start=1):
            if frame.buckets != expected:
                raise DatasetError(
                    f"frame {index} ({frame.date}) has buckets {list(frame.buckets)}, "
                    f"expected {list(expected)}"
                )

    @classmethod
    def from_frames(cls, frames: Sequence[Frame]) -> "Dataset":
        return cls(tuple(frames))

    @property
    def buckets(self) -> tuple[str, ...]:
        return self.frames[0].buckets

    def max_rate(self) -> Optional[float]:
        """Largest known rate over every frame and bucket, ``None`` if none."""
        rates = [p.rate for f in self.frames for p in f.points if p.rate is not None]
        return max(rates) if rates else None

    def __len__(self) -> int:
        return len(self.frames)

    def __getitem__(self, index: int) -> Frame:
        return self.frames[index]

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)
