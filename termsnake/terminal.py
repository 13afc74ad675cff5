"""
Terminal setup and teardown.
"""

import logging
import os
import signal
import sys
import termios
import tty
from typing import Optional, TextIO, Tuple

from . import ansi

logger = logging.getLogger(__name__)

SESSION_SIGNALS = (signal.SIGTERM, signal.SIGHUP)


def terminal_size(stream: Optional[TextIO] = None) -> Tuple[int, int]:
    """Return (columns, lines) of the terminal behind the stream."""
    stream = stream or sys.stdout
    size = os.get_terminal_size(stream.fileno())
    return size.columns, size.lines


def _exit_on_signal(signum, frame):
    raise SystemExit(128 + signum)


class TerminalSession:
    """
    Puts the terminal into game mode for the duration of a with-block.

    On entry: SIGTERM and SIGHUP turned into SystemExit, cbreak mode on
    stdin (no echo, no line buffering, SIGINT still delivered), alternate
    screen, hidden cursor. On exit, whatever the reason, all of it is undone
    in reverse order.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.fd: Optional[int] = None
        self.saved_attributes = None
        self.saved_handlers = {}

    def __enter__(self):
        for signum in SESSION_SIGNALS:
            self.saved_handlers[signum] = signal.signal(signum, _exit_on_signal)
        try:
            self.fd = self.stdin.fileno()
            self.saved_attributes = termios.tcgetattr(self.fd)
            tty.setcbreak(self.fd)
            self.stdout.write(ansi.ENTER_ALTERNATE_SCREEN + ansi.CURSOR_HIDE)
            self.stdout.flush()
        except BaseException:
            try:
                self._restore_attributes()
            finally:
                self._restore_handlers()
            raise
        logger.info("Terminal session started")
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            self.stdout.write(ansi.CURSOR_SHOW + ansi.EXIT_ALTERNATE_SCREEN)
            self.stdout.flush()
        finally:
            try:
                self._restore_attributes()
            finally:
                self._restore_handlers()
            logger.info("Terminal session restored")
        return False

    def _restore_attributes(self):
        if self.saved_attributes is not None:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self.saved_attributes)
            self.saved_attributes = None

    def _restore_handlers(self):
        while self.saved_handlers:
            signum, handler = self.saved_handlers.popitem()
            if handler is not None:
                signal.signal(signum, handler)
