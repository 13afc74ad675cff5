"""
ANSI/VT escape sequences used to draw on the terminal.
"""

CSI = "\x1b["

ERASE_SCREEN = CSI + "2J"
CURSOR_HIDE = CSI + "?25l"
CURSOR_SHOW = CSI + "?25h"
ENTER_ALTERNATE_SCREEN = CSI + "?1049h"
EXIT_ALTERNATE_SCREEN = CSI + "?1049l"
RESET = CSI + "0m"

# SGR parameters
BOLD = 1
DIM = 2
FG_BLACK = 30
FG_WHITE = 37
FG_BRIGHT_RED = 91
BG_WHITE = 47
BG_BRIGHT_YELLOW = 103


def cursor_to(x: int, y: int) -> str:
    """Move the cursor to a 0-indexed column/row (the terminal counts from 1)."""
    return f"{CSI}{y + 1};{x + 1}H"


def style(text: str, *codes: int) -> str:
    if not codes:
        return text
    params = ";".join(str(code) for code in codes)
    return f"{CSI}{params}m{text}{RESET}"
