"""Input-layer public API for key decoding and line editing.

Exports are split between low-level terminal decoding (`read_key`) and the
line editor the REPL feeds key tokens into.
"""

from .key_registry import KeyClassBinding, KeyClassRegistry
from .line_editor import LineEditor, classify_key, ends_with_separator, last_segment
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "KeyClassBinding",
    "KeyClassRegistry",
    "LineEditor",
    "classify_key",
    "ends_with_separator",
    "last_segment",
]
