"""Conversion between CMake lists and Python sequences."""

from __future__ import annotations

from typing import Iterable

__all__ = ["DEFAULT_SEPARATOR", "join_list", "list_length", "split_list"]


DEFAULT_SEPARATOR = ";"


def split_list(value: str, *, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Return the elements of the CMake list ``value``.

    The empty string is the empty list. Empty elements between separators are
    kept, matching how CMake itself reports ``a;;b`` as three elements.
    """

    if not value:
        return []
    return value.split(separator)


def join_list(items: Iterable[str], *, separator: str = DEFAULT_SEPARATOR) -> str:
    """Encode ``items`` as a CMake list."""

    return separator.join(str(item) for item in items)


def list_length(value: str, *, separator: str = DEFAULT_SEPARATOR) -> int:
    return len(split_list(value, separator=separator))
