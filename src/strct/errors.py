"""Exception hierarchy shared by every strct operation."""

from __future__ import annotations


class StrctError(Exception):
    """Base class for all strct failures."""


class InvalidArgumentError(StrctError, ValueError):
    """Raised when a parameter is outside the operation's documented domain."""


class EmptyInputError(InvalidArgumentError):
    """Raised when an operation has no defined result for empty text."""


class DelimiterNotFoundError(InvalidArgumentError):
    """Raised when a required delimiter does not occur in the text."""

    def __init__(self, delimiter: str) -> None:
        super().__init__(f"Delimiter {delimiter!r} not found")
        self.delimiter = delimiter
