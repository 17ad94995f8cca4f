"""Build-support helpers for a CMake based C++ project template.

The package exposes the string operations used while configuring a build
(word splitting, start casing, stripping of interface generator
expressions) both as plain functions and through a ``string_manip(...)``
call form that mirrors the CMake command.
"""

from __future__ import annotations

from .arguments import Operation, StringManipArguments, parse_arguments
from .command import Assignment, execute, string_manip
from .config import StringManipConfig
from .errors import ArgumentError
from .lists import join_list, split_list
from .string_manip import (
    make_c_identifier,
    split,
    start_case,
    start_case_list,
    start_case_string,
    start_case_word,
    strip_interfaces,
)

__all__ = [
    "ArgumentError",
    "Assignment",
    "Operation",
    "StringManipArguments",
    "StringManipConfig",
    "execute",
    "join_list",
    "make_c_identifier",
    "parse_arguments",
    "split",
    "split_list",
    "start_case",
    "start_case_list",
    "start_case_string",
    "start_case_word",
    "string_manip",
    "strip_interfaces",
]

__version__ = "0.1.0"
