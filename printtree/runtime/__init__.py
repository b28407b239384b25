"""Runtime wiring for the interactive session."""

from .loop import read_line, run_repl
from .session import Session, build_session, default_start_path

__all__ = [
    "Session",
    "build_session",
    "default_start_path",
    "read_line",
    "run_repl",
]
