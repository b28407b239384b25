"""Keystroke-level line editing with tab completion.

``LineEditor`` consumes one key token at a time and keeps a single pending
buffer. Enter hands the finished line back to the caller; Tab asks the
completion engine about the segment typed since the last separator.
"""

from __future__ import annotations

import os

from ..completion import CompletionEngine, MultipleMatches, NoMatch, SingleMatch
from ..console import Console
from ..path_state import PathState
from .key_registry import KeyClassBinding, KeyClassRegistry

SEPARATORS: tuple[str, ...] = tuple(sorted({"/", "\\", os.sep}))


def ends_with_separator(text: str) -> bool:
    return text.endswith(SEPARATORS)


def last_segment(text: str) -> str:
    """Return the part of ``text`` after its last path separator."""
    cut = max(text.rfind(sep) for sep in SEPARATORS)
    return text[cut + 1 :]


def classify_key(key: str) -> str:
    """Map a key token to the class the editor dispatches on."""
    if key in {"ENTER_CR", "ENTER_LF"}:
        return "enter"
    if key == "TAB":
        return "tab"
    if key == "BACKSPACE":
        return "backspace"
    if len(key) == 1 and key.isprintable():
        return "printable"
    return "other"


class LineEditor:
    """Builds one command line from key tokens, echoing to the console."""

    def __init__(self, console: Console, completion: CompletionEngine, path_state: PathState) -> None:
        self.console = console
        self.completion = completion
        self.path_state = path_state
        self.buffer = ""
        self._finished: str | None = None
        self._skip_next_lf = False
        self._just_completed = False
        self._registry = KeyClassRegistry(classify_key).register_bindings(
            KeyClassBinding(("printable",), self._insert),
            KeyClassBinding(("backspace",), self._backspace),
            KeyClassBinding(("tab",), self._complete),
            KeyClassBinding(("enter",), self._submit),
        )

    def feed(self, key: str) -> str | None:
        """Consume ``key``; return the finished line once Enter is pressed."""
        if self._skip_next_lf:
            self._skip_next_lf = False
            if key == "ENTER_LF":
                return None
        if classify_key(key) != "enter":
            self._just_completed = False
        self._registry.dispatch(key)
        line, self._finished = self._finished, None
        return line

    def _insert(self, key: str) -> None:
        self.buffer += key
        self.console.write(key)

    def _backspace(self, _key: str) -> None:
        if not self.buffer:
            return
        self.buffer = self.buffer[:-1]
        self.console.write("\b \b")

    def _submit(self, key: str) -> None:
        self.console.write("\n")
        # Enter straight after a completion reports the separator shown on screen.
        self._finished = os.sep if self._just_completed and not self.buffer else self.buffer
        self.buffer = ""
        self._just_completed = False
        self._skip_next_lf = key == "ENTER_CR"

    def _complete(self, _key: str) -> None:
        if not self.buffer.strip() or ends_with_separator(self.buffer):
            return
        partial = last_segment(self.buffer)
        result = self.completion.complete(partial, self.path_state)
        if isinstance(result, SingleMatch):
            self.console.write("\b" * len(partial) + result.name + os.sep)
            self.buffer = ""
            self._just_completed = True
            return

        self.console.line()
        if isinstance(result, NoMatch):
            self.console.line("No matches found.")
        elif isinstance(result, MultipleMatches):
            self.console.line("Multiple matches found:")
            for name in result.names:
                self.console.line(name)
            self.console.line()
        self.console.prompt(self.path_state.current, self.buffer)


__all__ = [
    "SEPARATORS",
    "LineEditor",
    "classify_key",
    "ends_with_separator",
    "last_segment",
]
