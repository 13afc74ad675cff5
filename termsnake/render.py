"""
Frame rendering for termsnake.

A frame is built as one string of escape sequences and handed to a sink in
a single write, so the terminal never shows a partial board.
"""

from dataclasses import dataclass
from typing import Tuple

from . import ansi
from .domain.constants import UP, DOWN, LEFT, RIGHT
from .domain.game_state import GameState
from .sinks.base import FrameSink

HEAD_GLYPHS = {
    LEFT: "<",
    RIGHT: ">",
    UP: "^",
    DOWN: "v",
}


@dataclass
class Theme:
    board_char: str = "·"
    board_style: Tuple[int, ...] = (ansi.DIM, ansi.FG_WHITE)
    body_char: str = "█"
    body_style: Tuple[int, ...] = (ansi.FG_WHITE,)
    head_style: Tuple[int, ...] = (ansi.BG_WHITE, ansi.FG_BLACK)
    food_char: str = "@"
    food_style: Tuple[int, ...] = (ansi.FG_BRIGHT_RED, ansi.BOLD)
    info_style: Tuple[int, ...] = (ansi.BG_BRIGHT_YELLOW, ansi.FG_BLACK)


DEFAULT_THEME = Theme()


def head_glyph(direction: str) -> str:
    try:
        return HEAD_GLYPHS[direction]
    except KeyError:
        raise ValueError(f"Unrecognized direction: {direction!r}") from None


def render_board(width: int, height: int, theme: Theme = DEFAULT_THEME) -> str:
    # Dot every other column. Rows are positioned one by one and never run
    # past the right edge.
    row = ((theme.board_char + " ") * ((width + 1) // 2))[:width]
    styled_row = ansi.style(row, *theme.board_style)
    return "".join(ansi.cursor_to(0, y) + styled_row for y in range(height))


def render_debug_info(state: GameState, theme: Theme = DEFAULT_THEME) -> str:
    lines = [
        f"Head at {state.snake.head}",
        f"Food at {state.food}",
        f"Current direction: {state.direction}",
        f"Queued directions: {', '.join(state.directions_queue) or '-'}",
        f"Game speed: {state.ticks_per_second} ticks per second",
    ]
    return "".join(
        ansi.cursor_to(0, y) + ansi.style(line, *theme.info_style)
        for y, line in enumerate(lines)
    )


def render_frame(
    state: GameState,
    theme: Theme = DEFAULT_THEME,
    show_board: bool = True,
    debug: bool = False,
) -> str:
    """
    Serialize the game state into one full-screen frame.

    Drawing order matters: board, body, food, head, then debug text, so
    the head is always visible even when it sits on the food cell.

    Args:
        state: game to draw
        theme: glyphs and SGR styles for each region
        show_board: paint the dotted background pattern
        debug: append coordinates, queue and speed at the top left

    Returns:
        The frame as a string of escape sequences.
    """
    frame = ansi.ERASE_SCREEN

    if show_board:
        frame += render_board(state.width, state.height, theme)

    for x, y in state.snake.body:
        frame += ansi.cursor_to(x, y)
        frame += ansi.style(theme.body_char, *theme.body_style)

    frame += ansi.cursor_to(*state.food)
    frame += ansi.style(theme.food_char, *theme.food_style)

    # Show where the snake is about to turn, not only where it went
    pending = state.directions_queue[-1] if state.directions_queue else state.direction
    frame += ansi.cursor_to(*state.snake.head)
    frame += ansi.style(head_glyph(pending), *theme.head_style)

    if debug:
        frame += render_debug_info(state, theme)

    frame += ansi.cursor_to(0, 0)
    return frame


def draw_frame(
    state: GameState,
    sink: FrameSink,
    theme: Theme = DEFAULT_THEME,
    show_board: bool = True,
    debug: bool = False,
) -> None:
    sink.write_frame(render_frame(state, theme, show_board=show_board, debug=debug))
