"""
Game engine: keypress handling and the per-tick state update.

Both entry points take the GameState and return it. Apart from the single
render call at the end of tick(), neither touches the terminal, so they can
be driven directly from tests.
"""

import logging
import random
from typing import Dict, Optional, Tuple

from .domain.constants import (
    RIGHT,
    VALID_DIRECTIONS,
    FASTER,
    SLOWER,
    QUIT,
    DEFAULT_TICKS_PER_SECOND,
    MIN_TICKS_PER_SECOND,
    MAX_TICKS_PER_SECOND,
    START_LENGTH,
)
from .domain.game_state import GameState
from .domain.movement import move, is_opposite
from .domain.snake import Snake
from .keys import DEFAULT_BINDINGS
from .render import DEFAULT_THEME, Theme, draw_frame
from .sinks.base import FrameSink

logger = logging.getLogger(__name__)


def food_region(width: int, height: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """
    Return the inclusive ((x_min, x_max), (y_min, y_max)) ranges food is drawn
    from: the central half of the board on each axis.
    """
    return (
        (width // 4, min(width - 1, 3 * width // 4)),
        (height // 4, min(height - 1, 3 * height // 4)),
    )


def random_food_position(width: int, height: int, rng=None) -> Tuple[int, int]:
    rng = rng or random
    (x_min, x_max), (y_min, y_max) = food_region(width, height)
    return (rng.randint(x_min, x_max), rng.randint(y_min, y_max))


def new_game(
    width: int,
    height: int,
    ticks_per_second: int = DEFAULT_TICKS_PER_SECOND,
    rng=None,
) -> GameState:
    """
    Set up a fresh game: a short snake on the left edge, halfway down,
    heading right, with food somewhere in the middle of the board.
    """
    if width < START_LENGTH or height < 1:
        raise ValueError(f"Board of {width}x{height} is too small to play on.")
    if not MIN_TICKS_PER_SECOND <= ticks_per_second <= MAX_TICKS_PER_SECOND:
        raise ValueError(
            f"ticks_per_second must be between {MIN_TICKS_PER_SECOND} "
            f"and {MAX_TICKS_PER_SECOND}, got {ticks_per_second}."
        )

    row = height // 2
    snake = Snake([(x, row) for x in range(START_LENGTH)])
    return GameState(
        snake=snake,
        direction=RIGHT,
        food=random_food_position(width, height, rng),
        width=width,
        height=height,
        ticks_per_second=ticks_per_second,
    )


def tick_delay(state: GameState) -> float:
    """Seconds to wait before the next tick, rounded to whole milliseconds."""
    return round(1000 / state.ticks_per_second) / 1000


def change_speed(state: GameState, delta: int) -> GameState:
    tps = max(MIN_TICKS_PER_SECOND, min(MAX_TICKS_PER_SECOND, state.ticks_per_second + delta))
    if tps != state.ticks_per_second:
        logger.debug(f"Game speed {state.ticks_per_second} -> {tps} ticks per second")
    state.ticks_per_second = tps
    return state


def handle_input(state: GameState, key: str, bindings: Optional[Dict[str, str]] = None) -> GameState:
    """
    Apply one keypress to the game.

    Direction keys are queued for the next tick rather than applied at once,
    so several quick presses between two ticks are played out in order.

    Args:
        state: game to update
        key: key name as produced by keys.decode_keys()
        bindings: key name -> action; defaults to keys.DEFAULT_BINDINGS

    Returns:
        The same GameState.
    """
    if state.overwrite_queue:
        state.overwrite_queue = False
        state.directions_queue = []

    action = (bindings if bindings is not None else DEFAULT_BINDINGS).get(key)
    if action is None:
        return state

    if action in VALID_DIRECTIONS:
        state.directions_queue.append(action)
    elif action == FASTER:
        change_speed(state, +1)
    elif action == SLOWER:
        change_speed(state, -1)
    elif action == QUIT:
        logger.info("Quit requested")
        state.running = False
    return state


def drain_queue(state: GameState) -> GameState:
    """
    Commit at most one queued direction.

    Entries are taken oldest first; a direction opposite to the current one
    is dropped. The first acceptable one wins and marks the rest of the queue
    for overwrite on the next keypress.
    """
    while state.directions_queue:
        direction = state.directions_queue.pop(0)
        if not is_opposite(direction, state.direction):
            if direction != state.direction:
                logger.debug(f"Direction {state.direction} -> {direction}")
            state.direction = direction
            state.overwrite_queue = True
            break
    return state


def advance(state: GameState, rng=None) -> GameState:
    """Move the snake one cell, growing it and moving the food when it eats."""
    new_head = move(state.snake.head, state.direction, state.width, state.height)

    if new_head == state.food:
        state.food = random_food_position(state.width, state.height, rng)
        state.snake.advance(new_head, grow=True)
        logger.debug(f"Ate food at {new_head}, length {len(state.snake)}, new food at {state.food}")
    else:
        state.snake.advance(new_head)

    state.tick_count += 1
    return state


def tick(
    state: GameState,
    sink: FrameSink,
    rng=None,
    theme: Theme = DEFAULT_THEME,
    show_board: bool = True,
    debug: bool = False,
) -> GameState:
    """
    Execute one tick:
      1) Commit the next queued direction, if any
      2) Move the snake (grow on food, otherwise drop the tail)
      3) Draw the frame into the sink
    """
    drain_queue(state)
    advance(state, rng)
    draw_frame(state, sink, theme, show_board=show_board, debug=debug)
    return state
