"""Main read-eval-print loop.

Prints the prompt, feeds key tokens into the line editor until a line is
finished, and hands the line to the interpreter. The loop ends when the
interpreter exits or the key source reports end of input.
"""

from __future__ import annotations

from collections.abc import Callable

from ..commands import CommandInterpreter, InterpreterState
from ..console import Console
from ..help import START_BROWSING_HINT, render_start_page
from ..input import LineEditor, ends_with_separator


def read_line(editor: LineEditor, next_key: Callable[[], str]) -> str | None:
    """Feed keys into ``editor`` until a line completes; ``None`` at end of input."""
    while True:
        key = next_key()
        if not key or key in {"CTRL_C", "CTRL_D"}:
            return None
        line = editor.feed(key)
        if line is not None:
            return line


def run_repl(
    interpreter: CommandInterpreter,
    editor: LineEditor,
    console: Console,
    next_key: Callable[[], str],
) -> InterpreterState:
    """Run the interactive loop until ``exit`` or end of input."""
    console.clear_screen()
    for text in render_start_page(console.theme):
        console.line(text)
    console.line(START_BROWSING_HINT)

    path_state = interpreter.path_state
    while interpreter.state is not InterpreterState.EXITED:
        console.line()
        console.current_directory(path_state.current)
        console.prompt(path_state.current)
        line = read_line(editor, next_key)
        if line is None:
            console.line()
            break
        if ends_with_separator(line):
            # Enter right after a separator lists the directory just entered.
            interpreter.list_current()
        interpreter.execute(line)
    return interpreter.state


__all__ = ["read_line", "run_repl"]
