"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
terminal concerns (raw mode, escape sequences, the event loop).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_DIRECTIONS, OPPOSITES,
    FASTER, SLOWER, QUIT, VALID_ACTIONS,
    DEFAULT_TICKS_PER_SECOND, MIN_TICKS_PER_SECOND, MAX_TICKS_PER_SECOND,
)
from .movement import move, is_opposite
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_DIRECTIONS', 'OPPOSITES',
    'FASTER', 'SLOWER', 'QUIT', 'VALID_ACTIONS',
    'DEFAULT_TICKS_PER_SECOND', 'MIN_TICKS_PER_SECOND', 'MAX_TICKS_PER_SECOND',
    'move', 'is_opposite',
    'Snake',
    'GameState',
]
