"""
Tests for main.py - the command-line entry point.

The terminal, the event loop and the game itself are mocked; these tests
only cover argument handling and wiring.
"""

import os
import sys
from unittest.mock import MagicMock, Mock, patch

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from termsnake.config import Settings
from termsnake.domain import UP, QUIT
from termsnake.main import build_parser, main


def tty_sys():
    mock_sys = MagicMock()
    mock_sys.stdin.isatty.return_value = True
    mock_sys.stdout.isatty.return_value = True
    mock_sys.stdin.fileno.return_value = 0
    return mock_sys


class TestBuildParser:
    """Tests for build_parser()."""

    def test_defaults_come_from_settings(self):
        """Settings provide the flag defaults."""
        settings = Settings(ticks_per_second=14, show_board=False, debug=True, log_file="x.log")
        args = build_parser(settings).parse_args([])

        assert args.tps == 14
        assert args.show_board is False
        assert args.debug is True
        assert args.log_file == "x.log"
        assert args.bind == []

    def test_flags_override_settings(self):
        """Command-line flags win over settings."""
        settings = Settings(ticks_per_second=14, show_board=True)
        args = build_parser(settings).parse_args(
            ["--tps", "5", "--no-board", "--bind", "p=quit", "--bind", "i=up", "--seed", "3"]
        )

        assert args.tps == 5
        assert args.show_board is False
        assert args.bind == ["p=quit", "i=up"]
        assert args.seed == 3

    def test_flags_turn_settings_back_on_and_off(self):
        """--board and --no-debug undo .env settings that disable the board or enable debug."""
        settings = Settings(show_board=False, debug=True)
        args = build_parser(settings).parse_args(["--board", "--no-debug"])

        assert args.show_board is True
        assert args.debug is False


class TestMain:
    """Tests for main()."""

    @patch('termsnake.main.load_settings', return_value=Settings())
    def test_rejects_out_of_range_speed(self, mock_settings):
        """--tps outside 1-60 is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--tps", "0"])
        assert exc_info.value.code == 2

    @patch('termsnake.main.load_settings', return_value=Settings())
    def test_rejects_bad_binding(self, mock_settings):
        """A binding to an unknown action is a usage error."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--bind", "p=fly"])
        assert exc_info.value.code == 2

    @patch('termsnake.main.load_settings', return_value=Settings())
    def test_rejects_unknown_log_level(self, mock_settings):
        """Log levels must be real logging level names."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--log-level", "chatty"])
        assert exc_info.value.code == 2

    @patch('termsnake.main.load_settings', side_effect=ValueError("TERMSNAKE_DEBUG must be true or false"))
    def test_bad_environment_returns_two(self, mock_settings):
        """Broken settings are reported and exit with status 2."""
        assert main([]) == 2

    @patch('termsnake.main.sys')
    @patch('termsnake.main.load_settings', return_value=Settings())
    def test_requires_interactive_terminal(self, mock_settings, mock_sys):
        """Running without a terminal is a usage error."""
        mock_sys.stdin.isatty.return_value = False
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2

    @patch('termsnake.main.configure_logging')
    @patch('termsnake.main.asyncio')
    @patch('termsnake.main.game_loop', new_callable=Mock)
    @patch('termsnake.main.TerminalSession')
    @patch('termsnake.main.terminal_size', return_value=(40, 20))
    @patch('termsnake.main.sys', new_callable=tty_sys)
    @patch('termsnake.main.load_settings', return_value=Settings(bindings={"p": QUIT}))
    def test_runs_game_in_terminal_session(
        self, mock_settings, mock_sys, mock_size, mock_session, mock_loop, mock_asyncio, mock_logging
    ):
        """A normal run sets up the game, plays it inside a session and returns its status."""
        mock_asyncio.run.return_value = 0

        status = main(["--tps", "12", "--bind", "i=up", "--seed", "1", "--debug"])

        assert status == 0
        mock_session.assert_called_once_with(mock_sys.stdin, mock_sys.stdout)
        mock_session.return_value.__enter__.assert_called_once()
        mock_session.return_value.__exit__.assert_called_once()
        mock_asyncio.run.assert_called_once_with(mock_loop.return_value)

        state, sink, input_fd = mock_loop.call_args[0]
        kwargs = mock_loop.call_args[1]
        assert (state.width, state.height) == (40, 20)
        assert state.ticks_per_second == 12
        assert sink.stream is mock_sys.stdout
        assert input_fd == 0
        assert kwargs["bindings"]["i"] == UP
        assert kwargs["bindings"]["p"] == QUIT
        assert kwargs["bindings"]["w"] == UP
        assert kwargs["debug"] is True
        assert kwargs["show_board"] is True

    @patch('termsnake.main.configure_logging')
    @patch('termsnake.main.asyncio')
    @patch('termsnake.main.game_loop', new_callable=Mock)
    @patch('termsnake.main.TerminalSession')
    @patch('termsnake.main.terminal_size', return_value=(40, 20))
    @patch('termsnake.main.sys', new_callable=tty_sys)
    @patch('termsnake.main.load_settings', return_value=Settings())
    def test_signal_status_is_returned(
        self, mock_settings, mock_sys, mock_size, mock_session, mock_loop, mock_asyncio, mock_logging
    ):
        """The loop's exit status becomes the process exit status."""
        mock_asyncio.run.return_value = 143
        assert main([]) == 143

    @patch('termsnake.main.TerminalSession')
    @patch('termsnake.main.terminal_size', return_value=(2, 20))
    @patch('termsnake.main.sys', new_callable=tty_sys)
    @patch('termsnake.main.configure_logging')
    @patch('termsnake.main.load_settings', return_value=Settings())
    def test_tiny_terminal_is_usage_error(
        self, mock_settings, mock_logging, mock_sys, mock_size, mock_session
    ):
        """A terminal too narrow for the snake is reported before the session starts."""
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
        mock_session.assert_not_called()
