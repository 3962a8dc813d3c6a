"""Playback state container used by the curve animation.

Tracks the index of the frame on screen and how many full passes over the
dataset have completed.
"""


class PlaybackState:
    """Holds the mutable position of the playback loop.

    Args:
        frame_count: Number of frames in the dataset.
    """

    def __init__(self, frame_count: int) -> None:
        if frame_count < 1:
            raise ValueError("frame_count must be at least 1")
        self.frame_count = frame_count
        self.current_index: int = 0
        self.cycles: int = 0

    def advance(self) -> bool:
        """Step to the next frame, wrapping to 0. Returns True on wrap."""
        self.current_index = (self.current_index + 1) % self.frame_count
        if self.current_index == 0:
            self.cycles += 1
            return True
        return False
