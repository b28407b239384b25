"""Terminal control helpers for the REPL session.

Owns the cbreak/no-echo lifecycle so keys arrive one at a time while the line
editor does its own echoing. Signals stay enabled, so Ctrl+C still raises
``KeyboardInterrupt``.
"""

from __future__ import annotations

import contextlib
import termios
import tty


class TerminalController:
    """Switch a tty into key-at-a-time mode and restore it afterwards."""

    def __init__(self, stdin_fd: int) -> None:
        """Capture tty state for ``stdin_fd``."""
        self.stdin_fd = stdin_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_key_mode(self) -> None:
        """Disable line buffering and echo."""
        tty.setcbreak(self.stdin_fd, termios.TCSAFLUSH)

    def restore(self) -> None:
        """Restore the tty state captured at construction."""
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    @contextlib.contextmanager
    def key_mode(self):
        """Context manager that brackets code with enable/restore calls."""
        try:
            self.enable_key_mode()
            yield
        finally:
            self.restore()


__all__ = ["TerminalController"]
