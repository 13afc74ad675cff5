"""
Game constants for termsnake.
"""

# Movement directions
UP = "up"
DOWN = "down"
LEFT = "left"
RIGHT = "right"
VALID_DIRECTIONS = {UP, DOWN, LEFT, RIGHT}
OPPOSITES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Non-movement actions a key can be bound to
FASTER = "faster"
SLOWER = "slower"
QUIT = "quit"
VALID_ACTIONS = VALID_DIRECTIONS | {FASTER, SLOWER, QUIT}

# Game settings
DEFAULT_TICKS_PER_SECOND = 9
MIN_TICKS_PER_SECOND = 1
MAX_TICKS_PER_SECOND = 60
START_LENGTH = 3
