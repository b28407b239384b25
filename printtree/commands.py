"""Command parsing and dispatch for one REPL line.

The interpreter only ever sits in ``AWAITING_COMMAND`` until ``exit`` moves
it to ``EXITED``. Lines that match no command are ignored without a message.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from .console import Console
from .errors import UserInputError
from .fs import FileSystem
from .ignore_set import AddStatus, IgnoreSet
from .listing import DirectoryLister, error_line
from .path_state import PathState, is_drive_spec
from .printer import RecursivePrinter

logger = logging.getLogger(__name__)


class InterpreterState(enum.Enum):
    AWAITING_COMMAND = "awaiting_command"
    EXITED = "exited"


@dataclass(frozen=True)
class Command:
    """Parsed command name plus its raw argument text."""

    name: str
    argument: str = ""


def parse_command(line: str) -> Command | None:
    """Parse ``line`` into a ``Command``; ``None`` for blank or unknown input.

    Keywords compare case-insensitively. Arguments keep their casing.
    """
    text = line.strip()
    if not text:
        return None
    lowered = text.lower()
    if lowered in {"exit", "ls", "print", "..", "print ignore", "clear ignore"}:
        return Command(lowered)
    for keyword in ("ignore", "unignore"):
        if lowered.startswith(keyword + " "):
            argument = text[len(keyword) + 1 :].strip()
            return Command(keyword, argument) if argument else None
    if is_drive_spec(text):
        return Command("drive", text)
    return None


class CommandInterpreter:
    """Applies parsed commands to the path state, ignore set, and console."""

    def __init__(
        self,
        fs: FileSystem,
        path_state: PathState,
        ignore_set: IgnoreSet,
        console: Console,
    ) -> None:
        self.fs = fs
        self.path_state = path_state
        self.ignore_set = ignore_set
        self.console = console
        self.lister = DirectoryLister(fs, ignore_set)
        self.printer = RecursivePrinter(fs, ignore_set)
        self.state = InterpreterState.AWAITING_COMMAND
        self._handlers = {
            "exit": self._exit,
            "ls": self._list,
            "print": self._print,
            "print ignore": self._print_ignore,
            "clear ignore": self._clear_ignore,
            "..": self._go_up,
            "ignore": self._ignore,
            "unignore": self._unignore,
            "drive": self._switch_drive,
        }

    def execute(self, line: str) -> InterpreterState:
        """Run one input line and return the resulting state."""
        command = parse_command(line)
        if command is None:
            return self.state
        logger.debug("dispatch %s %r", command.name, command.argument)
        try:
            self._handlers[command.name](command.argument)
        except UserInputError as exc:
            self.console.error(str(exc))
        return self.state

    def list_current(self) -> None:
        """Write the non-recursive listing of the current directory."""
        for row in self.lister.render(self.path_state.current):
            self.console.rendered(row)

    def _exit(self, _argument: str) -> None:
        self.state = InterpreterState.EXITED

    def _list(self, _argument: str) -> None:
        self.list_current()

    def _print(self, _argument: str) -> None:
        self.console.clear_screen()
        self.printer.print_tree(self.path_state.current, self.console)

    def _print_ignore(self, _argument: str) -> None:
        names = self.ignore_set.names()
        if not names:
            self.console.line("No files are currently ignored.")
            return
        self.console.line("Ignored files:")
        for name in names:
            self.console.line(name)

    def _clear_ignore(self, _argument: str) -> None:
        self.ignore_set.clear()
        self.console.notice("Ignore list cleared.")

    def _go_up(self, _argument: str) -> None:
        self.path_state.go_up()

    def _ignore(self, argument: str) -> None:
        try:
            entries = self.fs.list_entries(self.path_state.current)
        except OSError as exc:
            self.console.rendered(error_line("", exc))
            return
        for outcome in self.ignore_set.add(argument.split(), entries):
            if outcome.status is AddStatus.MISSING:
                self.console.error(outcome.message())
            else:
                self.console.notice(outcome.message())

    def _unignore(self, argument: str) -> None:
        if self.ignore_set.remove(argument):
            self.console.notice(f"Unignored file: {argument}")

    def _switch_drive(self, argument: str) -> None:
        self.path_state.switch_drive(argument)


__all__ = [
    "Command",
    "CommandInterpreter",
    "InterpreterState",
    "parse_command",
]
