"""Command-line front door for printtree.

Parses the optional CLI flags, sets up logging and the terminal, then runs
the interactive session. With no arguments the session starts at the
filesystem root.
"""

from __future__ import annotations

import argparse
import contextlib
import logging
import os
import sys
from pathlib import Path

from .console import Console
from .input import read_key
from .runtime import build_session, default_start_path, run_repl
from .ui_theme import available_theme_names, resolve_theme

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _log_level(value: str) -> int:
    """argparse type for logging level names."""
    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"unknown log level: {value!r}")
    return level


def configure_logging(log_file: Path | None, level: int) -> None:
    """Send package log records to ``log_file``; the console never gets them."""
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger = logging.getLogger("printtree")
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Browse directories and print their structure, skipping ignored names."
    )
    parser.add_argument(
        "path",
        nargs="?",
        default=None,
        help="Directory to start in. Defaults to the filesystem root.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write debug/info logs to this file.")
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=logging.INFO,
        help="Log level for --log-file (default: INFO).",
    )
    return parser


def _key_mode(stdin_fd: int):
    """Return the terminal key-mode context when stdin is a tty."""
    if not os.isatty(stdin_fd):
        return contextlib.nullcontext()
    from .terminal import TerminalController

    return TerminalController(stdin_fd).key_mode()


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run the interactive session.

    ``default_path`` is primarily for tests; when omitted the filesystem root
    of the working directory is used.
    """
    args = build_parser().parse_args()
    configure_logging(args.log_file, args.log_level)

    if default_path is None:
        default_path = default_start_path()
    start = Path(args.path).resolve() if args.path else default_path
    if not start.exists():
        raise SystemExit(f"Path not found: {start}")
    if not start.is_dir():
        raise SystemExit(f"Not a directory: {start}")

    stdout_is_tty = sys.stdout.isatty()
    theme = resolve_theme(args.theme, no_color=args.no_color or not stdout_is_tty)
    console = Console(sys.stdout, theme, can_clear=stdout_is_tty)
    session = build_session(start, console)
    logging.getLogger(__name__).info("session started at %s", start)

    stdin_fd = sys.stdin.fileno()
    try:
        with _key_mode(stdin_fd):
            run_repl(session.interpreter, session.editor, console, lambda: read_key(stdin_fd))
    except KeyboardInterrupt:
        console.line()


if __name__ == "__main__":
    main()
