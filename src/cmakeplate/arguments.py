"""Parsing of ``string_manip(...)`` argument vectors."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from pydantic import BaseModel, ConfigDict, Field

from .errors import ArgumentError

__all__ = ["Operation", "StringManipArguments", "parse_arguments"]


class Operation(str, Enum):
    """Operations understood by ``string_manip``."""

    SPLIT = "SPLIT"
    TRANSFORM = "TRANSFORM"
    STRIP_INTERFACES = "STRIP_INTERFACES"


OPTIONS = frozenset({"START_CASE"})
ONE_VALUE_KEYWORDS = frozenset({"TRANSFORM", "STRIP_INTERFACES", "OUTPUT_VARIABLE"})
MULTI_VALUE_KEYWORDS = frozenset({"SPLIT"})
KEYWORDS = OPTIONS | ONE_VALUE_KEYWORDS | MULTI_VALUE_KEYWORDS


class StringManipArguments(BaseModel):
    """Validated arguments of a single ``string_manip`` call."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    operation: Operation = Field(..., description="The operation to run.")
    target: str = Field(..., description="Input string for SPLIT, input variable name otherwise.")
    split_output: str | None = Field(None, description="Variable receiving the SPLIT result.")
    start_case: bool = Field(False, description="Whether the START_CASE modifier was given.")
    output_variable: str | None = Field(None, description="Explicit output variable, if any.")

    @property
    def destination(self) -> str:
        """Name of the variable the call writes to."""

        if self.operation is Operation.SPLIT:
            assert self.split_output is not None
            return self.split_output
        return self.output_variable or self.target


def _group(args: Iterable[str]) -> tuple[dict[str, list[str]], list[str]]:
    """Bind every value to the keyword in front of it.

    Returns the keyword groups and the values that belong to no keyword.
    """

    groups: dict[str, list[str]] = {}
    unparsed: list[str] = []
    current: str | None = None

    for arg in args:
        if arg in KEYWORDS:
            if arg in groups:
                raise ArgumentError(f"{arg} argument is given more than once")
            groups[arg] = []
            current = None if arg in OPTIONS else arg
            continue

        if current is None:
            unparsed.append(arg)
            continue

        values = groups[current]
        if current in ONE_VALUE_KEYWORDS and values:
            unparsed.append(arg)
            continue
        values.append(arg)

    return groups, unparsed


def _single_value(groups: dict[str, list[str]], keyword: str) -> str | None:
    values = groups.get(keyword)
    if values is None:
        return None
    if not values:
        raise ArgumentError(f"{keyword} argument is missing")
    return values[0]


def parse_arguments(args: Iterable[str]) -> StringManipArguments:
    """Parse the arguments of a ``string_manip`` call.

    Exactly one of ``SPLIT``, ``TRANSFORM`` and ``STRIP_INTERFACES`` must be
    present. ``SPLIT`` takes exactly two values; ``TRANSFORM`` needs the
    ``START_CASE`` modifier. Anything else raises :class:`ArgumentError`.
    """

    groups, unparsed = _group(args)
    if unparsed:
        raise ArgumentError(f'Unrecognized arguments: "{";".join(unparsed)}"')

    operations = [operation for operation in Operation if operation.value in groups]
    if not operations:
        raise ArgumentError("Operation argument is missing")
    if len(operations) > 1:
        names = ", ".join(operation.value for operation in operations)
        raise ArgumentError(f"Only one operation argument is allowed, got: {names}")

    operation = operations[0]
    start_case = "START_CASE" in groups
    output_variable = _single_value(groups, "OUTPUT_VARIABLE")

    if operation is Operation.SPLIT:
        values = groups["SPLIT"]
        if len(values) != 2:
            raise ArgumentError("SPLIT argument is missing or wrong")
        if start_case or output_variable is not None:
            extra = [name for name in ("START_CASE", "OUTPUT_VARIABLE") if name in groups]
            raise ArgumentError(f'Unrecognized arguments: "{";".join(extra)}"')
        return StringManipArguments(operation=operation, target=values[0], split_output=values[1])

    target = _single_value(groups, operation.value)
    assert target is not None

    if operation is Operation.TRANSFORM:
        if not start_case:
            raise ArgumentError("START_CASE argument is missing")
    elif start_case:
        raise ArgumentError('Unrecognized arguments: "START_CASE"')

    return StringManipArguments(
        operation=operation,
        target=target,
        start_case=start_case,
        output_variable=output_variable,
    )
