"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Iterable, Tuple


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from the tail at index 0 to the head at the end
    """

    def __init__(self, positions: Iterable[Tuple[int, int]]):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (last element)."""
        return self.positions[-1]

    @property
    def body(self) -> list:
        """Every segment except the head, tail first."""
        return list(self.positions)[:-1]

    def advance(self, new_head: Tuple[int, int], grow: bool = False):
        self.positions.append(new_head)
        if not grow:
            self.positions.popleft()

    def __len__(self) -> int:
        return len(self.positions)

    def __repr__(self):
        return f"<Snake length={len(self)}, head={self.head}>"
