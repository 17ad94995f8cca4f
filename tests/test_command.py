from __future__ import annotations

from types import MappingProxyType

import pytest

from cmakeplate.arguments import parse_arguments
from cmakeplate.command import Assignment, execute, string_manip
from cmakeplate.config import StringManipConfig
from cmakeplate.errors import ArgumentError


def test_split_stores_a_list():
    scope: dict[str, str] = {}
    assignment = string_manip("SPLIT", "fooBarBaz", "words", scope=scope)
    assert assignment == Assignment(variable="words", value="foo;Bar;Baz")
    assert scope == {"words": "foo;Bar;Baz"}


def test_split_of_empty_string_stores_empty_list():
    scope: dict[str, str] = {}
    string_manip("SPLIT", "", "words", scope=scope)
    assert scope["words"] == ""


def test_transform_list_in_place():
    scope = {"words": "foo;bAR;baz"}
    string_manip("TRANSFORM", "words", "START_CASE", scope=scope)
    assert scope["words"] == "Foo;Bar;Baz"


def test_transform_string_to_output_variable():
    scope = {"name": "my_project"}
    string_manip("TRANSFORM", "name", "START_CASE", "OUTPUT_VARIABLE", "label", scope=scope)
    assert scope == {"name": "my_project", "label": "MyProject"}


def test_transform_single_all_caps_word():
    scope = {"name": "HELLO"}
    string_manip("TRANSFORM", "name", "START_CASE", scope=scope)
    assert scope["name"] == "Hello"


def test_transform_undefined_variable_reads_as_empty():
    scope: dict[str, str] = {}
    string_manip("TRANSFORM", "missing", "START_CASE", "OUTPUT_VARIABLE", "out", scope=scope)
    assert scope == {"out": ""}


def test_strip_interfaces_in_place():
    scope = {"includes": "$<BUILD_INTERFACE:/usr/include>;/opt/lib"}
    string_manip("STRIP_INTERFACES", "includes", scope=scope)
    assert scope["includes"] == "/opt/lib"


def test_execute_only_reads_scope():
    scope = MappingProxyType({"includes": "/opt/lib;$<INSTALL_INTERFACE:/usr/local>"})
    arguments = parse_arguments(["STRIP_INTERFACES", "includes", "OUTPUT_VARIABLE", "clean"])
    assignment = execute(arguments, scope)
    assert assignment.variable == "clean"
    assert assignment.value == "/opt/lib"


def test_execute_uses_configured_separator():
    config = StringManipConfig(separator=",")
    arguments = parse_arguments(["SPLIT", "fooBar", "words"])
    assert execute(arguments, {}, config=config).value == "foo,Bar"

    arguments = parse_arguments(["TRANSFORM", "words", "START_CASE"])
    assert execute(arguments, {"words": "foo,bAR"}, config=config).value == "Foo,Bar"


@pytest.mark.parametrize(
    "args",
    [
        (),
        ("SPLIT", "a"),
        ("TRANSFORM", "name"),
        ("STRIP_INTERFACES", "name", "extra"),
        ("SPLIT", "a", "b", "STRIP_INTERFACES", "name"),
    ],
)
def test_failed_call_leaves_scope_untouched(args):
    scope = {"name": "value"}
    with pytest.raises(ArgumentError):
        string_manip(*args, scope=scope)
    assert scope == {"name": "value"}
