"""Exception types raised by the string manipulation helpers."""

from __future__ import annotations


class ArgumentError(ValueError):
    """Raised when a ``string_manip`` call is missing, repeats or misuses an argument."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
