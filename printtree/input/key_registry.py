"""Key-class dispatch table used by the line editor."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

KeyHandler = Callable[[str], None]


@dataclass(frozen=True)
class KeyClassBinding:
    """Mapping from one or more key classes to a handler taking the raw key."""

    classes: tuple[str, ...]
    handler: KeyHandler


class KeyClassRegistry:
    """Dispatches a key to the handler registered for its class.

    ``classify`` maps a raw key token to a class name; keys whose class has no
    handler are dropped.
    """

    def __init__(self, classify: Callable[[str], str]) -> None:
        self._classify = classify
        self._handlers: dict[str, KeyHandler] = {}

    def register_binding(self, binding: KeyClassBinding) -> KeyClassRegistry:
        """Register one binding, overwriting existing handlers for same classes."""
        for key_class in binding.classes:
            self._handlers[key_class] = binding.handler
        return self

    def register_bindings(self, *bindings: KeyClassBinding) -> KeyClassRegistry:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def dispatch(self, key: str) -> bool:
        """Invoke the handler for ``key``'s class; returns whether one ran."""
        handler = self._handlers.get(self._classify(key))
        if handler is None:
            return False
        handler(key)
        return True


__all__ = ["KeyClassBinding", "KeyClassRegistry", "KeyHandler"]
