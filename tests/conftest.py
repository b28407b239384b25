"""Pytest bootstrap for local imports.

Puts the repository root on ``sys.path`` so ``import printtree`` picks up the
working tree, and the tests directory so test modules can share ``fakes``.
"""

from __future__ import annotations

import sys
from pathlib import Path


TESTS_DIR = Path(__file__).resolve().parent

for entry in (TESTS_DIR.parent, TESTS_DIR):
    entry_str = str(entry)
    if entry_str not in sys.path:
        sys.path.insert(0, entry_str)
