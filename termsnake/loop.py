"""
asyncio game loop.

Keypresses and ticks both run as callbacks on one event loop, so the game
state is never touched by two things at once. The tick is re-armed only
after the previous frame has been written.
"""

import asyncio
import logging
import os
import signal
from typing import Dict, Iterable, Optional

from .domain.game_state import GameState
from .engine import handle_input, tick, tick_delay
from .keys import decode_keys
from .render import DEFAULT_THEME, Theme
from .sinks.base import FrameSink

logger = logging.getLogger(__name__)

STOP_SIGNALS = (signal.SIGINT, signal.SIGTERM, signal.SIGHUP)
READ_SIZE = 1024


async def game_loop(
    state: GameState,
    sink: FrameSink,
    input_fd: int,
    bindings: Optional[Dict[str, str]] = None,
    rng=None,
    theme: Theme = DEFAULT_THEME,
    show_board: bool = True,
    debug: bool = False,
    stop_signals: Iterable[int] = STOP_SIGNALS,
) -> int:
    """
    Run the game until the player quits or a stop signal arrives.

    Args:
        state: game to play
        sink: where frames go
        input_fd: file descriptor to read keypresses from
        bindings: key name -> action overrides for handle_input()
        rng: random source for food placement
        stop_signals: signals that end the game cleanly

    Returns:
        Exit status: 0 after a quit, 128 + signal number after a signal.
    """
    loop = asyncio.get_running_loop()
    stop = asyncio.Event()
    received = []

    def on_input():
        data = os.read(input_fd, READ_SIZE)
        if not data:
            logger.info("Input closed")
            stop.set()
            return
        for key in decode_keys(data):
            handle_input(state, key, bindings)
        if not state.running:
            stop.set()

    def on_signal(signum):
        logger.info(f"Received {signal.Signals(signum).name}, stopping")
        received.append(signum)
        stop.set()

    previous_handlers = {}
    loop.add_reader(input_fd, on_input)
    for signum in stop_signals:
        previous_handlers[signum] = signal.getsignal(signum)
        loop.add_signal_handler(signum, on_signal, signum)

    logger.info(
        f"Game started on a {state.width}x{state.height} board "
        f"at {state.ticks_per_second} ticks per second"
    )
    try:
        while not stop.is_set():
            try:
                await asyncio.wait_for(stop.wait(), timeout=tick_delay(state))
            except asyncio.TimeoutError:
                tick(state, sink, rng, theme, show_board=show_board, debug=debug)
    finally:
        loop.remove_reader(input_fd)
        # Removal leaves the default action behind; put back what was there
        for signum, handler in previous_handlers.items():
            loop.remove_signal_handler(signum)
            if handler is not None:
                signal.signal(signum, handler)

    logger.info(f"Game stopped after {state.tick_count} ticks, snake length {len(state.snake)}")
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Final board:\n" + state.print_board())
    if received:
        return 128 + received[0]
    return 0
