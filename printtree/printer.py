"""Recursive, ignore-aware directory printer.

The walk is plain recursion with no depth guard: a very deep tree, or a
symlink loop reported as a directory by the host, ends in ``RecursionError``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING

from .fs import FileSystem
from .ignore_set import IgnoreSet
from .listing import RenderedLine, empty_line, entry_line, error_line

if TYPE_CHECKING:
    from .console import Console

logger = logging.getLogger(__name__)

LEVEL_INDENT = "       - "


class RecursivePrinter:
    """Renders a directory tree depth-first, one line per visible entry."""

    def __init__(self, fs: FileSystem, ignore_set: IgnoreSet) -> None:
        self.fs = fs
        self.ignore_set = ignore_set

    def iter_lines(self, path: Path, prefix: str = "") -> Iterator[RenderedLine]:
        """Yield rendered rows for the contents of ``path``.

        Each level gets its own dedup set so case variants such as
        ``Admin.txt`` and ``admin.txt`` render once per level. A level with
        nothing left to show yields ``(Empty Directory)``; a scan failure
        yields one error row and stops that branch only.
        """
        try:
            entries = self.fs.list_entries(path)
        except OSError as exc:
            logger.debug("print skipped %s: %s", path, exc)
            yield error_line(prefix, exc)
            return

        printed: set[str] = set()
        for entry in entries:
            folded = entry.name.casefold()
            if self.ignore_set.contains(entry.name) or folded in printed:
                continue
            printed.add(folded)
            yield entry_line(prefix, entry)
            if entry.is_dir:
                yield from self.iter_lines(entry.path, prefix + LEVEL_INDENT)

        if not printed:
            yield empty_line(prefix)

    def print_tree(self, path: Path, console: Console, prefix: str = "") -> int:
        """Write the tree under ``path`` to ``console``; returns rows written."""
        count = 0
        for line in self.iter_lines(path, prefix):
            console.rendered(line)
            count += 1
        return count


__all__ = ["LEVEL_INDENT", "RecursivePrinter"]
