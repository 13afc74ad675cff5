"""
Keyboard decoding and key bindings.

Raw bytes read from a terminal in cbreak mode are turned into key names:
arrow keys become "up", "down", "left", "right", everything else is the
character itself. Bindings map key names to game actions.
"""

import logging
from typing import Dict, Iterable, List, Optional

from .domain.constants import UP, DOWN, LEFT, RIGHT, FASTER, SLOWER, QUIT, VALID_ACTIONS

logger = logging.getLogger(__name__)

ESCAPE = "\x1b"

# Final byte of CSI (ESC [) and SS3 (ESC O) cursor key sequences
ARROW_KEYS = {
    "A": UP,
    "B": DOWN,
    "C": RIGHT,
    "D": LEFT,
}

DEFAULT_BINDINGS: Dict[str, str] = {
    # WASD
    "w": UP, "W": UP,
    "s": DOWN, "S": DOWN,
    "d": RIGHT, "D": RIGHT,
    "a": LEFT, "A": LEFT,
    # Arrow keys
    "up": UP,
    "down": DOWN,
    "right": RIGHT,
    "left": LEFT,
    # vi
    "k": UP,
    "j": DOWN,
    "l": RIGHT,
    "h": LEFT,
    # Game speed
    "]": FASTER, "x": FASTER,
    "[": SLOWER, "z": SLOWER,
    "q": QUIT,
}


def _sequence_end(text: str, start: int) -> int:
    """
    Index just past the escape sequence that begins at text[start] (an ESC
    followed by '[' or 'O'). A truncated sequence ends where it stops.
    """
    i = start + 2
    if text[start + 1] == "[":
        while i < len(text) and "\x30" <= text[i] <= "\x3f":
            i += 1
        while i < len(text) and "\x20" <= text[i] <= "\x2f":
            i += 1
    if i < len(text) and "\x40" <= text[i] <= "\x7e":
        i += 1
    return i


def decode_keys(data: bytes) -> List[str]:
    """
    Split a chunk of raw terminal input into key names.

    A single read may carry several keypresses (fast typing, key repeat),
    so the whole chunk is scanned. CSI and SS3 sequences are consumed whole:
    plain arrows become direction names, every other sequence (modified
    arrows, Home, Delete, function keys) becomes the unbound "escape" key.
    """
    text = data.decode("utf-8", errors="ignore")
    keys: List[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == ESCAPE and i + 1 < len(text) and text[i + 1] in "[O":
            end = _sequence_end(text, i)
            sequence = text[i + 2:end]
            keys.append(ARROW_KEYS.get(sequence, "escape"))
            i = end
            continue
        keys.append("escape" if char == ESCAPE else char)
        i += 1
    return keys


def parse_bindings(specs: Iterable[str]) -> Dict[str, str]:
    """
    Parse "KEY=ACTION" strings into a bindings dict.

    Raises:
        ValueError: when a spec is malformed or names an unknown action
    """
    bindings: Dict[str, str] = {}
    for spec in specs:
        spec = spec.strip()
        if not spec:
            continue
        key, sep, action = spec.rpartition("=")
        if not sep or not key:
            raise ValueError(f"Invalid key binding {spec!r}, expected KEY=ACTION.")
        action = action.strip().lower()
        if action not in VALID_ACTIONS:
            raise ValueError(
                f"Unknown action {action!r} in binding {spec!r}. "
                f"Valid actions: {', '.join(sorted(VALID_ACTIONS))}"
            )
        bindings[key] = action
    return bindings


def build_bindings(overrides: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    bindings = dict(DEFAULT_BINDINGS)
    if overrides:
        bindings.update(overrides)
        logger.debug(f"Key binding overrides: {overrides}")
    return bindings
