"""
Base frame sink interface for the renderer.
"""


class FrameSink:
    """
    Base class/interface for frame output.

    The renderer builds each frame as a single string and hands it to a sink
    exactly once per tick.
    """

    def write_frame(self, frame: str) -> None:
        """
        Deliver one complete frame.

        Args:
            frame: escape-sequence text for the whole screen
        """
        raise NotImplementedError
