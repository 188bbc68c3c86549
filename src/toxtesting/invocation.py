#
# src/toxtesting/invocation.py
#
"""
Typed representation of a `run_tox_tests` request and its validator.

An invocation is one of four frozen variants, discriminated by `mode`.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeAlias

from attrs import define, field

from toxtesting.exceptions import InvalidParamsError


class Mode(str, Enum):
    """Test execution modes accepted by the tool."""

    ALL = "all"
    FILE = "file"
    CASE = "case"
    DIRECTORY = "directory"


@define(frozen=True, slots=True)
class AllInvocation:
    """Run the whole suite, or one named group of it."""
    group: str | None = field(default=None)
    mode: Mode = field(default=Mode.ALL, init=False)


@define(frozen=True, slots=True)
class FileInvocation:
    test_file: str = field()
    mode: Mode = field(default=Mode.FILE, init=False)


@define(frozen=True, slots=True)
class CaseInvocation:
    test_file: str = field()
    test_case: str = field()
    mode: Mode = field(default=Mode.CASE, init=False)


@define(frozen=True, slots=True)
class DirectoryInvocation:
    directory: str = field()
    mode: Mode = field(default=Mode.DIRECTORY, init=False)


Invocation: TypeAlias = AllInvocation | FileInvocation | CaseInvocation | DirectoryInvocation

VALID_MODES = [mode.value for mode in Mode]


def _require_string(arguments: Mapping[str, Any], key: str, mode: Mode) -> str:
    value = arguments.get(key)
    if value is None:
        raise InvalidParamsError(f"{key} is required for {mode.value} mode", field=key)
    if not isinstance(value, str):
        raise InvalidParamsError(
            f"{key} must be a string for {mode.value} mode, got {type(value).__name__}",
            field=key,
        )
    if not value:
        raise InvalidParamsError(f"{key} must not be empty for {mode.value} mode", field=key)
    return value


def parse_invocation(arguments: Any) -> Invocation:
    """
    Validates loosely-typed tool arguments and returns the matching variant.

    Args:
        arguments: The raw `arguments` object of the tool call.

    Returns:
        One of the four Invocation variants.

    Raises:
        InvalidParamsError: naming the missing or malformed field.
    """
    if arguments is None or not isinstance(arguments, Mapping):
        raise InvalidParamsError("Invalid tox test arguments: expected an object")

    raw_mode = arguments.get("mode")
    if not isinstance(raw_mode, str) or raw_mode not in VALID_MODES:
        raise InvalidParamsError(
            f"Invalid test mode: {raw_mode!r}. Valid modes are: {', '.join(VALID_MODES)}",
            field="mode",
        )
    mode = Mode(raw_mode)

    if mode is Mode.ALL:
        group = arguments.get("group")
        if group is not None and not isinstance(group, str):
            raise InvalidParamsError(
                f"group must be a string, got {type(group).__name__}", field="group"
            )
        # An empty group means the whole suite.
        return AllInvocation(group=group or None)
    if mode is Mode.FILE:
        return FileInvocation(test_file=_require_string(arguments, "testFile", mode))
    if mode is Mode.CASE:
        return CaseInvocation(
            test_file=_require_string(arguments, "testFile", mode),
            test_case=_require_string(arguments, "testCase", mode),
        )
    return DirectoryInvocation(directory=_require_string(arguments, "directory", mode))


# 🔼⚙️
