"""Color utilities for visuals."""

from matplotlib import colormaps
from matplotlib.colors import to_hex

from .constants import colormap


class ColorAssignment:
    """Map a frame index onto a sequential colormap.

    The domain is ``[0, frame_count - 1]``; index 0 takes the low end of the
    map and the last index the high end. A single-frame domain is degenerate
    and every index takes the map's midpoint.

    Args:
        frame_count: Number of frames in the dataset.
        cmap_name: Registered matplotlib colormap name.
    """

    def __init__(self, frame_count: int, cmap_name: str = colormap) -> None:
        if frame_count < 1:
            raise ValueError("frame_count must be at least 1")
        self.frame_count = frame_count
        self._cmap = colormaps[cmap_name]
        self._cache: dict[int, str] = {}

    def position(self, index: int) -> float:
        if self.frame_count == 1:
            return 0.5
        return index / (self.frame_count - 1)

    def __call__(self, index: int) -> str:
        """Return the hex color for ``index``."""
        if index in self._cache:
            return self._cache[index]
        color = to_hex(self._cmap(self.position(index)))
        self._cache[index] = color
        return color

    @property
    def endpoints(self) -> tuple[str, str]:
        return self(0), self(self.frame_count - 1)
