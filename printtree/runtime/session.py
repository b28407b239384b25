"""Session bootstrap: wires path state, ignore set, and interpreter together."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ..commands import CommandInterpreter
from ..completion import CompletionEngine
from ..console import Console
from ..fs import FileSystem, LocalFileSystem
from ..ignore_set import IgnoreSet
from ..input import LineEditor
from ..path_state import PathState


@dataclass
class Session:
    """All per-process state of one interactive run."""

    fs: FileSystem
    path_state: PathState
    ignore_set: IgnoreSet
    console: Console
    interpreter: CommandInterpreter
    editor: LineEditor


def default_start_path() -> Path:
    """Return the filesystem root of the working directory's drive."""
    return Path(Path.cwd().anchor)


def build_session(start: Path, console: Console, fs: FileSystem | None = None) -> Session:
    """Create a fresh session rooted at ``start`` with an empty ignore set."""
    active_fs = fs if fs is not None else LocalFileSystem()
    path_state = PathState(start, active_fs)
    ignore_set = IgnoreSet()
    interpreter = CommandInterpreter(active_fs, path_state, ignore_set, console)
    editor = LineEditor(console, CompletionEngine(active_fs), path_state)
    return Session(
        fs=active_fs,
        path_state=path_state,
        ignore_set=ignore_set,
        console=console,
        interpreter=interpreter,
        editor=editor,
    )


__all__ = ["Session", "build_session", "default_start_path"]
