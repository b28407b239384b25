"""Tab completion of subdirectory names."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .fs import FileSystem
from .path_state import PathState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoMatch:
    pass


@dataclass(frozen=True)
class SingleMatch:
    name: str


@dataclass(frozen=True)
class MultipleMatches:
    names: tuple[str, ...]


CompletionResult = NoMatch | SingleMatch | MultipleMatches


class CompletionEngine:
    """Resolves a typed prefix against the directories of one path."""

    def __init__(self, fs: FileSystem) -> None:
        self.fs = fs

    def resolve(self, partial: str, directory: Path) -> CompletionResult:
        """Classify directories of ``directory`` starting with ``partial``.

        Files never match. Prefix matching uses the host's glob rules, so it
        is case-insensitive on Windows and case-sensitive elsewhere.
        """
        names = self.fs.glob_directories(directory, partial)
        if not names:
            return NoMatch()
        if len(names) == 1:
            return SingleMatch(names[0])
        return MultipleMatches(tuple(names))

    def complete(self, partial: str, path_state: PathState) -> CompletionResult:
        """Resolve ``partial`` in the current directory and enter a unique match."""
        result = self.resolve(partial, path_state.current)
        if isinstance(result, SingleMatch):
            if not path_state.enter(result.name):
                # Vanished between glob and the move.
                return NoMatch()
        logger.debug("completion of %r -> %r", partial, result)
        return result


__all__ = [
    "CompletionEngine",
    "CompletionResult",
    "MultipleMatches",
    "NoMatch",
    "SingleMatch",
]
