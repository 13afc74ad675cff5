"""
Frame sinks for termsnake.

The renderer never writes to the terminal directly; it hands finished
frames to a sink.
"""

from .base import FrameSink
from .stream_sink import StreamSink
from .capture_sink import CapturingSink

__all__ = [
    'FrameSink',
    'StreamSink',
    'CapturingSink',
]
