"""
Stream sink - writes frames to a text stream such as sys.stdout.
"""

from typing import TextIO

from .base import FrameSink


class StreamSink(FrameSink):
    """
    Writes each frame to a stream in one call and flushes it, so the
    terminal never shows a half-drawn frame.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream
        self.frames_written = 0

    def write_frame(self, frame: str) -> None:
        self.stream.write(frame)
        self.stream.flush()
        self.frames_written += 1
