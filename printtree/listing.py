"""Non-recursive directory listing filtered by the ignore set."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .fs import DirectoryEntry, FileSystem
from .ignore_set import IgnoreSet

logger = logging.getLogger(__name__)

EMPTY_DIRECTORY_LABEL = "(Empty Directory)"
LISTING_HEADING = "Directory Contents (excluding ignored files):"


@dataclass(frozen=True)
class RenderedLine:
    """One output row: indentation prefix plus a label of a given kind.

    ``kind`` is one of ``dir``, ``file``, ``empty``, ``error`` or ``heading``.
    """

    prefix: str
    label: str
    kind: str

    @property
    def text(self) -> str:
        return self.prefix + self.label


def error_line(prefix: str, exc: OSError) -> RenderedLine:
    return RenderedLine(prefix, f"Error listing contents: {exc}", "error")


def empty_line(prefix: str) -> RenderedLine:
    return RenderedLine(prefix, EMPTY_DIRECTORY_LABEL, "empty")


def entry_line(prefix: str, entry: DirectoryEntry) -> RenderedLine:
    return RenderedLine(prefix, entry.name, "dir" if entry.is_dir else "file")


class DirectoryLister:
    """Lists one directory, dropping names held by the ignore set."""

    def __init__(self, fs: FileSystem, ignore_set: IgnoreSet) -> None:
        self.fs = fs
        self.ignore_set = ignore_set

    def list(self, path: Path) -> list[DirectoryEntry]:
        """Return visible entries of ``path``; raises ``OSError`` on scan failure."""
        return [entry for entry in self.fs.list_entries(path) if not self.ignore_set.contains(entry.name)]

    def render(self, path: Path) -> list[RenderedLine]:
        """Build the ``ls`` output for ``path``, reporting failures as a line."""
        try:
            entries = self.list(path)
        except OSError as exc:
            logger.debug("listing %s failed: %s", path, exc)
            return [error_line("", exc)]
        if not entries:
            return [empty_line("")]
        return [RenderedLine("", LISTING_HEADING, "heading")] + [entry_line("", entry) for entry in entries]


__all__ = [
    "EMPTY_DIRECTORY_LABEL",
    "LISTING_HEADING",
    "RenderedLine",
    "DirectoryLister",
    "error_line",
    "empty_line",
    "entry_line",
]
