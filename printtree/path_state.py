"""Current-directory state for the REPL.

``current`` always names an existing directory: every mutation checks its
target first and leaves the state untouched when the check fails.
"""

from __future__ import annotations

import logging
from pathlib import Path

from .errors import InvalidDriveError
from .fs import FileSystem

logger = logging.getLogger(__name__)


class PathState:
    """Holds the REPL's current directory and applies navigation commands."""

    def __init__(self, start: Path, fs: FileSystem) -> None:
        if not fs.is_directory(start):
            raise ValueError(f"not an existing directory: {start}")
        self.fs = fs
        self.current = start

    def change_to(self, target: Path) -> bool:
        """Move to ``target`` if it is an existing directory."""
        if not self.fs.is_directory(target):
            logger.debug("rejected move to %s", target)
            return False
        logger.debug("current path %s -> %s", self.current, target)
        self.current = target
        return True

    def go_up(self) -> bool:
        """Move to the parent directory; no-op at a root."""
        parent = self.fs.parent(self.current)
        if parent is None:
            return False
        return self.change_to(parent)

    def enter(self, name: str) -> bool:
        """Move into child directory ``name`` of the current directory."""
        return self.change_to(self.current / name)

    def switch_drive(self, drive: str) -> Path:
        """Switch to the root of ``drive`` (``"d:"``), raising when it is missing."""
        root = self.fs.drive_root(drive[0])
        if root is None or not self.change_to(root):
            raise InvalidDriveError(drive)
        return root


def is_drive_spec(text: str) -> bool:
    """Return whether ``text`` looks like ``<letter>:``."""
    return len(text) == 2 and text[0].isalpha() and text[1] == ":"


__all__ = ["PathState", "is_drive_spec"]
