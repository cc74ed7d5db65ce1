"""Terminal front end for Higher/Lower."""

from terminal_ui.main import TerminalGame, build_game, main, parse_command

__all__ = [
    "TerminalGame",
    "build_game",
    "main",
    "parse_command",
]
