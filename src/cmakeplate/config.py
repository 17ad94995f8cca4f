"""Configuration shared by the string manipulation helpers and the CLI."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Mapping

from .lists import DEFAULT_SEPARATOR

__all__ = ["DEFAULT_INTERFACE_MARKERS", "StringManipConfig"]


DEFAULT_INTERFACE_MARKERS = ("BUILD_INTERFACE", "INSTALL_INTERFACE")

_MARKER_NAME = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


@dataclass(slots=True, frozen=True)
class StringManipConfig:
    """Settings controlling list encoding and interface stripping.

    Attributes
    ----------
    separator:
        The CMake list separator. Defaults to ``;``.
    interface_markers:
        Names of the generator expressions removed by
        :func:`~cmakeplate.string_manip.strip_interfaces`. Every name must be
        a valid identifier, for example ``BUILD_INTERFACE``.
    """

    separator: str = DEFAULT_SEPARATOR
    interface_markers: tuple[str, ...] = DEFAULT_INTERFACE_MARKERS
    _interface_pattern: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise ValueError("separator must be a single character")
        if self.separator == ">":
            raise ValueError("separator must not be the generator expression delimiter")
        if not self.interface_markers:
            raise ValueError("at least one interface marker is required")
        for marker in self.interface_markers:
            if not _MARKER_NAME.match(marker):
                raise ValueError(f"invalid interface marker '{marker}'")

        markers = "|".join(re.escape(marker) for marker in self.interface_markers)
        pattern = re.compile(rf"{re.escape(self.separator)}?\$<(?:{markers}):[^>]+>")
        object.__setattr__(self, "_interface_pattern", pattern)

    @property
    def interface_pattern(self) -> re.Pattern[str]:
        """Pattern matching one marker and its optional leading separator."""

        return self._interface_pattern

    @classmethod
    def from_mapping(cls, settings: Mapping[str, str]) -> "StringManipConfig":
        """Build a config from string settings such as environment variables.

        ``CMAKEPLATE_LIST_SEPARATOR`` overrides the separator and
        ``CMAKEPLATE_INTERFACE_MARKERS`` holds a comma separated list of marker
        names. Unknown keys are ignored.
        """

        separator = settings.get("CMAKEPLATE_LIST_SEPARATOR") or DEFAULT_SEPARATOR
        raw_markers = settings.get("CMAKEPLATE_INTERFACE_MARKERS", "")
        markers = tuple(part.strip() for part in raw_markers.split(",") if part.strip())
        return cls(separator=separator, interface_markers=markers or DEFAULT_INTERFACE_MARKERS)
