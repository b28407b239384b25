"""User-facing error types raised by state mutations.

Filesystem failures stay as ``OSError``; these cover bad user input only.
"""

from __future__ import annotations


class UserInputError(ValueError):
    """Input that cannot be applied; the message is shown to the user verbatim."""


class InvalidDriveError(UserInputError):
    def __init__(self, drive: str) -> None:
        super().__init__("Invalid drive.")
        self.drive = drive


__all__ = ["UserInputError", "InvalidDriveError"]
