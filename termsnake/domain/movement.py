"""
Grid movement on a wrapping (toroidal) board.
"""

from typing import Tuple

from .constants import UP, DOWN, LEFT, RIGHT, OPPOSITES


def move(position: Tuple[int, int], direction: str, width: int, height: int) -> Tuple[int, int]:
    """
    Shift a cell one step along a direction, wrapping around the board edges.

    Args:
        position: (x, y) cell to move from
        direction: one of UP, DOWN, LEFT, RIGHT
        width, height: board dimensions

    Returns:
        The new (x, y) cell.
    """
    x, y = position
    if direction == LEFT:
        return ((x - 1) % width, y)
    if direction == RIGHT:
        return ((x + 1) % width, y)
    if direction == UP:
        return (x, (y - 1) % height)
    if direction == DOWN:
        return (x, (y + 1) % height)
    raise ValueError(f"Unrecognized direction: {direction!r}")


def is_opposite(first: str, second: str) -> bool:
    return OPPOSITES.get(first) == second
