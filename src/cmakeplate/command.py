"""Evaluate ``string_manip(...)`` calls against an explicit variable scope."""

from __future__ import annotations

import logging
from typing import Mapping, MutableMapping

from pydantic import BaseModel, ConfigDict, Field

from .arguments import Operation, StringManipArguments, parse_arguments
from .config import StringManipConfig
from .lists import join_list, split_list
from .string_manip import split, start_case_list, start_case_string, strip_interfaces

__all__ = ["Assignment", "execute", "string_manip"]


LOGGER = logging.getLogger(__name__)


class Assignment(BaseModel):
    """Variable update produced by a ``string_manip`` call."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    variable: str = Field(..., description="Name of the variable to set.")
    value: str = Field(..., description="New value; lists are encoded as CMake lists.")


def _read(scope: Mapping[str, str], name: str) -> str:
    if name not in scope:
        LOGGER.debug("variable %s is not defined, reading it as empty", name)
        return ""
    return scope[name]


def execute(
    arguments: StringManipArguments,
    scope: Mapping[str, str],
    *,
    config: StringManipConfig | None = None,
) -> Assignment:
    """Run ``arguments`` and return the assignment it produces.

    ``scope`` is only read. SPLIT takes its input literally; TRANSFORM and
    STRIP_INTERFACES take the name of a variable in ``scope``.
    """

    config = config or StringManipConfig()
    separator = config.separator

    if arguments.operation is Operation.SPLIT:
        value = join_list(split(arguments.target), separator=separator)
    elif arguments.operation is Operation.TRANSFORM:
        current = _read(scope, arguments.target)
        elements = split_list(current, separator=separator)
        if len(elements) == 1:
            value = start_case_string(current)
        else:
            value = join_list(start_case_list(elements), separator=separator)
    else:
        value = strip_interfaces(_read(scope, arguments.target), config=config)

    LOGGER.debug("%s stores %r in %s", arguments.operation.value, value, arguments.destination)
    return Assignment(variable=arguments.destination, value=value)


def string_manip(
    *args: str,
    scope: MutableMapping[str, str],
    config: StringManipConfig | None = None,
) -> Assignment:
    """Parse and run a ``string_manip`` call, storing the result in ``scope``.

    The call either succeeds and updates exactly one variable or raises
    :class:`~cmakeplate.errors.ArgumentError` without touching ``scope``.
    """

    arguments = parse_arguments(args)
    assignment = execute(arguments, scope, config=config)
    scope[assignment.variable] = assignment.value
    return assignment
