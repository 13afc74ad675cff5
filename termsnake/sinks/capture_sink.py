"""
Capturing sink - keeps frames in memory instead of drawing them.
"""

from typing import List, Optional

from .base import FrameSink


class CapturingSink(FrameSink):
    """
    Records every frame it receives. Used for headless runs and tests.
    """

    def __init__(self):
        self.frames: List[str] = []

    def write_frame(self, frame: str) -> None:
        self.frames.append(frame)

    @property
    def last_frame(self) -> Optional[str]:
        return self.frames[-1] if self.frames else None
