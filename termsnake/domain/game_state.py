"""
GameState entity - everything the loop mutates between ticks.
"""

from typing import List, Optional, Tuple

from .constants import DEFAULT_TICKS_PER_SECOND
from .snake import Snake


class GameState:
    """
    The state of a running game.

    Attributes:
        snake: the Snake, tail first and head last
        direction: direction the head moved on the last tick
        food: (x, y) position of the food
        width, height: board dimensions (fixed for the session)
        ticks_per_second: current game speed
        directions_queue: pending direction inputs, oldest first
        overwrite_queue: set once a queued direction is committed; the next
            keypress clears the queue before it is recorded
        running: cleared when the player asks to quit
        tick_count: number of ticks played so far
    """

    def __init__(
        self,
        snake: Snake,
        direction: str,
        food: Tuple[int, int],
        width: int,
        height: int,
        ticks_per_second: int = DEFAULT_TICKS_PER_SECOND,
        directions_queue: Optional[List[str]] = None,
        overwrite_queue: bool = False,
    ):
        self.snake = snake
        self.direction = direction
        self.food = food
        self.width = width
        self.height = height
        self.ticks_per_second = ticks_per_second
        self.directions_queue = list(directions_queue) if directions_queue else []
        self.overwrite_queue = overwrite_queue
        self.running = True
        self.tick_count = 0

    def print_board(self) -> str:
        """
        Returns a plain-text picture of the board with:
        . = empty cell
        @ = food
        # = snake body
        H = snake head
        (0,0) is the top left corner, as on the terminal.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        board[fy][fx] = '@'

        for x, y in self.snake.body:
            board[y][x] = '#'
        hx, hy = self.snake.head
        board[hy][hx] = 'H'

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_count}, head={self.snake.head}, "
            f"direction={self.direction}, food={self.food}, "
            f"queue={self.directions_queue}, tps={self.ticks_per_second}>"
        )
