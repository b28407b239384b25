"""Line-oriented console output for the REPL.

All user-visible text goes through ``Console`` so tests can capture it with a
``StringIO`` and the theme stays in one place.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from .listing import RenderedLine
from .ui_theme import PLAIN_THEME, UITheme

CLEAR_SCREEN_SEQUENCE = "\033[2J\033[3J\033[H"


class Console:
    """Writes prompts, messages, and rendered rows to a text stream."""

    def __init__(self, stream: TextIO, theme: UITheme = PLAIN_THEME, *, can_clear: bool = False) -> None:
        self.stream = stream
        self.theme = theme
        self.can_clear = can_clear

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def line(self, text: str = "") -> None:
        self.write(text + "\n")

    def _styled(self, color: str, text: str) -> str:
        if not color:
            return text
        return f"{color}{text}{self.theme.reset}"

    def notice(self, text: str) -> None:
        self.line(self._styled(self.theme.notice, text))

    def error(self, text: str) -> None:
        self.line(self._styled(self.theme.error, text))

    def rendered(self, row: RenderedLine) -> None:
        self.line(row.prefix + self._styled(self.theme.color_for_kind(row.kind), row.label))

    def current_directory(self, path: Path) -> None:
        self.line(f"Current Directory: {self._styled(self.theme.path, str(path))}")

    def prompt(self, path: Path, pending: str = "") -> None:
        """Write ``<path>> `` followed by any pending input."""
        self.write(self._styled(self.theme.prompt, f"{path}> ") + pending)

    def clear_screen(self) -> None:
        """Clear the terminal; a no-op when output is not a terminal."""
        if self.can_clear:
            self.write(CLEAR_SCREEN_SEQUENCE)


__all__ = ["CLEAR_SCREEN_SEQUENCE", "Console"]
