"""Command line interface for the cmakeplate string helpers."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, Sequence

from .command import string_manip
from .config import StringManipConfig
from .errors import ArgumentError
from .lists import join_list
from .string_manip import split, start_case_list, start_case_string, strip_interfaces

LOGGER = logging.getLogger(__name__)


def _parse_definitions(pairs: Iterable[str]) -> dict[str, str]:
    scope: dict[str, str] = {}
    for pair in pairs:
        if "=" not in pair:
            raise argparse.ArgumentTypeError(
                f"invalid definition '{pair}'. Expected NAME=VALUE syntax."
            )
        name, value = pair.split("=", 1)
        name = name.strip()
        if not name:
            raise argparse.ArgumentTypeError("variable names must not be empty")
        scope[name] = value
    return scope


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="String helpers used while configuring CMake builds")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--separator", help="List separator (defaults to ';')")
    subparsers = parser.add_subparsers(dest="command", required=True)

    split_parser = subparsers.add_parser("split", help="split a string into words")
    split_parser.add_argument("value", help="String to split")

    case_parser = subparsers.add_parser("start-case", help="convert a string or a word list to start case")
    case_parser.add_argument(
        "values",
        nargs="+",
        help="A single string, or several words transformed one by one",
    )

    strip_parser = subparsers.add_parser(
        "strip-interfaces", help="remove BUILD_INTERFACE and INSTALL_INTERFACE expressions"
    )
    strip_parser.add_argument("value", help="String to strip")

    call_parser = subparsers.add_parser("call", help="evaluate a string_manip(...) call")
    call_parser.add_argument(
        "-D",
        "--define",
        metavar="NAME=VALUE",
        action="append",
        default=[],
        help="Variables visible to the call",
    )
    call_parser.add_argument("args", nargs="+", help="Arguments of the string_manip call")

    return parser


def _load_config(args: argparse.Namespace) -> StringManipConfig:
    config = StringManipConfig.from_mapping(os.environ)
    if args.separator:
        config = StringManipConfig(separator=args.separator, interface_markers=config.interface_markers)
    return config


def _handle_split(args: argparse.Namespace, config: StringManipConfig) -> int:
    print(join_list(split(args.value), separator=config.separator))
    return 0


def _handle_start_case(args: argparse.Namespace, config: StringManipConfig) -> int:
    if len(args.values) == 1:
        print(start_case_string(args.values[0]))
    else:
        print(join_list(start_case_list(args.values), separator=config.separator))
    return 0


def _handle_strip(args: argparse.Namespace, config: StringManipConfig) -> int:
    print(strip_interfaces(args.value, config=config))
    return 0


def _handle_call(args: argparse.Namespace, config: StringManipConfig) -> int:
    scope = _parse_definitions(args.define)
    assignment = string_manip(*args.args, scope=scope, config=config)
    print(f"{assignment.variable}={assignment.value}")
    return 0


_HANDLERS = {
    "split": _handle_split,
    "start-case": _handle_start_case,
    "strip-interfaces": _handle_strip,
    "call": _handle_call,
}


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handler = _HANDLERS.get(args.command)
    if handler is None:
        parser.error("no command provided")
        return 2

    try:
        config = _load_config(args)
    except ValueError as exc:
        parser.error(str(exc))
        return 2

    try:
        return handler(args, config)
    except argparse.ArgumentTypeError as exc:
        parser.error(str(exc))
        return 2
    except ArgumentError as exc:
        LOGGER.debug("string_manip call rejected", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
