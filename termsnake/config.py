"""
Run settings for termsnake.

Values come from the environment (a local .env file is loaded first) and
serve as defaults for the command-line flags.

Variables:
    TERMSNAKE_TICKS_PER_SECOND  starting game speed
    TERMSNAKE_BINDINGS          extra key bindings, "KEY=ACTION,KEY=ACTION"
    TERMSNAKE_SHOW_BOARD        draw the dotted background (true/false)
    TERMSNAKE_DEBUG             draw coordinates and queue on screen (true/false)
    TERMSNAKE_LOG_FILE          write log records to this file
    TERMSNAKE_LOG_LEVEL         log level name, e.g. DEBUG
"""

import os
from dataclasses import dataclass, field
from typing import Dict, Optional

from dotenv import load_dotenv

from .domain.constants import DEFAULT_TICKS_PER_SECOND
from .keys import parse_bindings

TRUE_VALUES = {"1", "true", "yes", "on"}
FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class Settings:
    ticks_per_second: int = DEFAULT_TICKS_PER_SECOND
    bindings: Dict[str, str] = field(default_factory=dict)
    show_board: bool = True
    debug: bool = False
    log_file: Optional[str] = None
    log_level: str = "INFO"


def _get_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in TRUE_VALUES:
        return True
    if value in FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be true or false, got {raw!r}")


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    """
    Build Settings from the environment.

    Args:
        dotenv_path: explicit .env file; by default python-dotenv searches
            from the current directory upwards

    Raises:
        ValueError: when a variable holds a value that cannot be used
    """
    load_dotenv(dotenv_path)

    return Settings(
        ticks_per_second=_get_int("TERMSNAKE_TICKS_PER_SECOND", DEFAULT_TICKS_PER_SECOND),
        bindings=parse_bindings(os.getenv("TERMSNAKE_BINDINGS", "").split(",")),
        show_board=_get_bool("TERMSNAKE_SHOW_BOARD", True),
        debug=_get_bool("TERMSNAKE_DEBUG", False),
        log_file=os.getenv("TERMSNAKE_LOG_FILE") or None,
        log_level=os.getenv("TERMSNAKE_LOG_LEVEL", "INFO").upper(),
    )
