#!/usr/bin/env python3
"""
Play snake in the terminal.

Usage:
    termsnake [--tps 9] [--bind KEY=ACTION ...] [--board | --no-board] [--debug | --no-debug]

Controls: WASD, arrow keys or hjkl to steer, ] / x faster, [ / z slower,
q to quit.
"""

import argparse
import asyncio
import logging
import random
import sys
from typing import List, Optional

from .config import Settings, load_settings
from .domain.constants import MIN_TICKS_PER_SECOND, MAX_TICKS_PER_SECOND, VALID_ACTIONS
from .engine import new_game
from .keys import build_bindings, parse_bindings
from .loop import game_loop
from .sinks import StreamSink
from .terminal import TerminalSession, terminal_size

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="termsnake",
        description="Play snake in the terminal. The board wraps around at the edges.",
    )
    parser.add_argument("--tps", type=int, default=settings.ticks_per_second,
                        help=f"Starting speed in ticks per second "
                             f"({MIN_TICKS_PER_SECOND}-{MAX_TICKS_PER_SECOND})")
    parser.add_argument("--bind", action="append", default=[], metavar="KEY=ACTION",
                        help=f"Bind a key to an action, may be repeated. "
                             f"Actions: {', '.join(sorted(VALID_ACTIONS))}")
    parser.add_argument("--board", dest="show_board", action="store_true",
                        help="Draw the dotted background")
    parser.add_argument("--no-board", dest="show_board", action="store_false",
                        help="Do not draw the dotted background")
    parser.add_argument("--debug", dest="debug", action="store_true",
                        help="Show head/food coordinates, queued directions and speed")
    parser.add_argument("--no-debug", dest="debug", action="store_false",
                        help="Hide the debug text")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement")
    parser.add_argument("--log-file", default=settings.log_file,
                        help="Write log records to this file")
    parser.add_argument("--log-level", default=settings.log_level,
                        help="Log level when --log-file is set (default: %(default)s)")
    parser.set_defaults(show_board=settings.show_board, debug=settings.debug)
    return parser


def configure_logging(log_file: Optional[str], log_level: str):
    """
    The screen belongs to the game, so full logging only goes to a file.
    Without one, just warnings and errors reach stderr.
    """
    if log_file:
        logging.basicConfig(filename=log_file, level=log_level, format=LOG_FORMAT)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)


def main(argv: Optional[List[str]] = None) -> int:
    try:
        settings = load_settings()
    except ValueError as e:
        print(f"termsnake: error: {e}", file=sys.stderr)
        return 2

    parser = build_parser(settings)
    args = parser.parse_args(argv)

    if not (MIN_TICKS_PER_SECOND <= args.tps <= MAX_TICKS_PER_SECOND):
        parser.error(f"--tps must be between {MIN_TICKS_PER_SECOND} and {MAX_TICKS_PER_SECOND}")
    if not isinstance(logging.getLevelName(args.log_level.upper()), int):
        parser.error(f"unknown log level: {args.log_level}")
    try:
        overrides = dict(settings.bindings)
        overrides.update(parse_bindings(args.bind))
    except ValueError as e:
        parser.error(str(e))
    if not sys.stdin.isatty() or not sys.stdout.isatty():
        parser.error("stdin and stdout must be an interactive terminal")

    configure_logging(args.log_file, args.log_level.upper())

    width, height = terminal_size(sys.stdout)
    rng = random.Random(args.seed)
    try:
        state = new_game(width, height, ticks_per_second=args.tps, rng=rng)
    except ValueError as e:
        parser.error(str(e))
    bindings = build_bindings(overrides)

    with TerminalSession(sys.stdin, sys.stdout):
        status = asyncio.run(
            game_loop(
                state,
                StreamSink(sys.stdout),
                sys.stdin.fileno(),
                bindings=bindings,
                rng=rng,
                show_board=args.show_board,
                debug=args.debug,
            )
        )

    logger.info(f"Exiting with status {status}")
    return status


if __name__ == "__main__":
    sys.exit(main())
