# src/omni/core/errors.py

from __future__ import annotations


class OmniError(Exception):
    """Base error for everything the interpreter reports back to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def user_message(self) -> str:
        return self.message


class InvalidArgumentError(OmniError):
    """Malformed or out-of-range user input (bad index, date, description...)."""


class UnknownCommandError(OmniError):
    """The command keyword is not registered."""


class CorruptedFileError(OmniError):
    """The tasks file cannot be read or one of its lines breaks the entry format."""


class TaskIndexError(OmniError, IndexError):
    """Zero-based index outside of the task list."""
