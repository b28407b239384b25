"""Host filesystem access used by listing, printing, and completion.

``LocalFileSystem`` is the only production implementation. Everything above
this module talks to the ``FileSystem`` protocol so tests can swap in fakes.
"""

from __future__ import annotations

import glob
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DirectoryEntry:
    """One child of a listed directory, produced fresh on every listing."""

    name: str
    is_dir: bool
    path: Path


class FileSystem(Protocol):
    def list_entries(self, path: Path) -> list[DirectoryEntry]: ...

    def is_directory(self, path: Path) -> bool: ...

    def exists(self, path: Path) -> bool: ...

    def parent(self, path: Path) -> Path | None: ...

    def drive_root(self, letter: str) -> Path | None: ...

    def glob_directories(self, path: Path, prefix: str) -> list[str]: ...


def entry_sort_key(name: str) -> tuple[str, str]:
    """Order names case-insensitively, keeping case variants stable."""
    return (name.casefold(), name)


class LocalFileSystem:
    """``FileSystem`` backed by ``os.scandir`` and ``glob``."""

    def list_entries(self, path: Path) -> list[DirectoryEntry]:
        """Return children of ``path`` ordered by name.

        Raises ``OSError`` (including ``PermissionError``, ``FileNotFoundError``
        and ``NotADirectoryError``) when ``path`` cannot be scanned.
        """
        entries: list[DirectoryEntry] = []
        with os.scandir(path) as scan:
            for child in scan:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                entries.append(DirectoryEntry(name=child.name, is_dir=is_dir, path=Path(child.path)))
        entries.sort(key=lambda item: entry_sort_key(item.name))
        return entries

    def is_directory(self, path: Path) -> bool:
        try:
            return path.is_dir()
        except OSError:
            return False

    def exists(self, path: Path) -> bool:
        try:
            return path.exists()
        except OSError:
            return False

    def parent(self, path: Path) -> Path | None:
        """Return the parent directory, or ``None`` at a filesystem root."""
        parent = path.parent
        if parent == path:
            return None
        return parent

    def drive_root(self, letter: str) -> Path | None:
        """Return ``X:\\`` for drive ``letter`` on Windows; POSIX has no drives."""
        if os.name != "nt":
            return None
        return Path(f"{letter.upper()}:\\")

    def glob_directories(self, path: Path, prefix: str) -> list[str]:
        """Return names of subdirectories of ``path`` starting with ``prefix``.

        Matching is delegated to ``glob`` so case sensitivity follows the
        platform (``os.path.normcase``).
        """
        pattern = os.path.join(glob.escape(str(path)), glob.escape(prefix) + "*")
        names = [Path(match).name for match in glob.glob(pattern) if os.path.isdir(match)]
        logger.debug("glob %r matched %d directories", pattern, len(names))
        return sorted(names, key=entry_sort_key)


__all__ = [
    "DirectoryEntry",
    "FileSystem",
    "LocalFileSystem",
    "entry_sort_key",
]
