"""Word splitting, start casing and interface stripping for build strings."""

from __future__ import annotations

import re
from typing import Iterable, MutableSequence, overload

from .config import StringManipConfig

__all__ = [
    "make_c_identifier",
    "split",
    "start_case",
    "start_case_list",
    "start_case_string",
    "start_case_word",
    "strip_interfaces",
]


_INVALID_IDENTIFIER = re.compile(r"[^0-9a-zA-Z_]")
_WORD = re.compile(r"[^_][^A-Z_]*")
_SINGLE_UPPERCASE_WORD = re.compile(r"[A-Z0-9]*[A-Z][A-Z0-9]*")

_DEFAULT_CONFIG = StringManipConfig()


def make_c_identifier(value: str) -> str:
    """Replace every character outside ``[A-Za-z0-9_]`` with an underscore.

    A leading digit is prefixed with an underscore so the result is always a
    valid C identifier, or the empty string.
    """

    candidate = _INVALID_IDENTIFIER.sub("_", value)
    if candidate[:1].isdigit():
        candidate = f"_{candidate}"
    return candidate


def split(value: str) -> list[str]:
    """Split ``value`` into words at underscores and before uppercase letters.

    ``value`` is first reduced to a C identifier, so any punctuation or
    whitespace acts like an underscore. Underscores never appear in the
    returned words and the empty string yields an empty list.

    >>> split("fooBarBaz")
    ['foo', 'Bar', 'Baz']
    >>> split("foo-bar baz")
    ['foo', 'bar', 'baz']
    """

    return _WORD.findall(make_c_identifier(value))


def start_case_word(word: str) -> str:
    """Lowercase ``word`` and uppercase its first character."""

    if not word:
        return word
    lowered = word.lower()
    return lowered[0].upper() + lowered[1:]


def start_case_string(value: str) -> str:
    """Split ``value`` and join its start cased words without a separator.

    An all-uppercase identifier such as ``HELLO`` is a single word rather than
    a run of one-letter words.
    """

    identifier = make_c_identifier(value)
    if _SINGLE_UPPERCASE_WORD.fullmatch(identifier):
        return start_case_word(identifier)

    words = _WORD.findall(identifier)
    if len(words) >= 2:
        return "".join(start_case_word(word) for word in words)
    return start_case_word(words[0] if words else "")


def start_case_list(words: Iterable[str], *, in_place: bool = False) -> list[str]:
    """Start case every element of ``words``, keeping order and length.

    When ``in_place`` is true ``words`` must be a mutable sequence; it is
    updated and returned.
    """

    if in_place:
        if not isinstance(words, MutableSequence):
            raise TypeError("in_place requires a mutable sequence")
        words[:] = [start_case_word(word) for word in words]
        return words  # type: ignore[return-value]
    return [start_case_word(word) for word in words]


@overload
def start_case(value: str) -> str: ...


@overload
def start_case(value: Iterable[str]) -> list[str]: ...


def start_case(value: str | Iterable[str]) -> str | list[str]:
    """Convert a string or a sequence of words to start case.

    Strings go through :func:`start_case_string`; any other iterable is
    treated as a word list and handled by :func:`start_case_list`.
    """

    if isinstance(value, str):
        return start_case_string(value)
    if isinstance(value, bytes):
        raise TypeError("start_case expects text, not bytes")
    return start_case_list(value)


def strip_interfaces(value: str, *, config: StringManipConfig | None = None) -> str:
    """Remove build and install interface generator expressions from ``value``.

    Each ``$<BUILD_INTERFACE:...>`` or ``$<INSTALL_INTERFACE:...>`` is removed
    along with the list separator in front of it. A marker at the very start
    of the string has no separator in front, so the one after it goes instead.

    >>> strip_interfaces("$<BUILD_INTERFACE:/usr/include>;/opt/lib")
    '/opt/lib'
    """

    config = config or _DEFAULT_CONFIG
    pattern = config.interface_pattern

    leading = pattern.match(value)
    stripped = pattern.sub("", value)
    if leading and not value.startswith(config.separator) and stripped.startswith(config.separator):
        stripped = stripped[1:]
    return stripped
