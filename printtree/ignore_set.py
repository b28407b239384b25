"""Names excluded from listing and printing.

Lookups are case-insensitive while removal is exact. Names keep the spelling
the user typed and are reported in insertion order.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .fs import DirectoryEntry

logger = logging.getLogger(__name__)


class AddStatus(enum.Enum):
    IGNORED = "ignored"
    ALREADY_IGNORED = "already_ignored"
    MISSING = "missing"


@dataclass(frozen=True)
class AddOutcome:
    """Per-name result of ``IgnoreSet.add``."""

    name: str
    status: AddStatus

    def message(self) -> str:
        if self.status is AddStatus.IGNORED:
            return f"Ignoring file: {self.name}"
        if self.status is AddStatus.ALREADY_IGNORED:
            return f"Already ignoring file: {self.name}"
        return f"File '{self.name}' does not exist in the current directory."


class IgnoreSet:
    """Ordered, case-insensitive collection of ignored names."""

    def __init__(self) -> None:
        self._names: list[str] = []
        self._folded: set[str] = set()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._names))

    def __len__(self) -> int:
        return len(self._names)

    def contains(self, name: str) -> bool:
        return name.casefold() in self._folded

    def add(self, names: Iterable[str], context_entries: Iterable[DirectoryEntry]) -> list[AddOutcome]:
        """Ignore each of ``names`` that exists among ``context_entries``.

        Existence is checked case-insensitively. A name already ignored under
        any casing is left as is and reported as ``ALREADY_IGNORED``.
        """
        present = {entry.name.casefold() for entry in context_entries}
        outcomes: list[AddOutcome] = []
        for name in names:
            folded = name.casefold()
            if folded not in present:
                outcomes.append(AddOutcome(name, AddStatus.MISSING))
                continue
            if folded in self._folded:
                outcomes.append(AddOutcome(name, AddStatus.ALREADY_IGNORED))
                continue
            self._names.append(name)
            self._folded.add(folded)
            logger.debug("ignoring %r", name)
            outcomes.append(AddOutcome(name, AddStatus.IGNORED))
        return outcomes

    def remove(self, name: str) -> bool:
        """Remove ``name`` by exact, case-sensitive match."""
        try:
            self._names.remove(name)
        except ValueError:
            return False
        self._folded = {stored.casefold() for stored in self._names}
        logger.debug("unignored %r", name)
        return True

    def clear(self) -> None:
        self._names.clear()
        self._folded.clear()

    def names(self) -> list[str]:
        return list(self._names)


__all__ = ["AddStatus", "AddOutcome", "IgnoreSet"]
