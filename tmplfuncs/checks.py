"""Assertion, requirement and type-inspection template functions."""

from __future__ import annotations

import inspect
from collections.abc import Mapping
from typing import Any

from tmplfuncs.values import to_bool, to_string

_NUMBER_KINDS = frozenset(
    {
        "int", "int8", "int16", "int32", "int64",
        "uint", "uint8", "uint16", "uint32", "uint64", "uintptr",
        "float32", "float64",
        "complex64", "complex128",
    }
)
_REQUIRED_MESSAGE = "can not render template: a required value was not set"


class CheckError(Exception):
    """Raised when a template check fails or is called wrongly."""


def _message_arg(value: Any) -> str:
    if not isinstance(value, str):
        raise CheckError(f"at <1>: expected string; found {type(value).__name__}")
    return value


class CheckFuncs:
    """Functions that make templates fail loudly or inspect values."""

    def assert_that(self, *args: Any) -> str:
        """Raise CheckError unless the last argument is true; an optional message comes first."""
        if len(args) not in (1, 2):
            raise CheckError(f"wrong number of args: want 1 or 2, got {len(args)}")
        message = _message_arg(args[0]) if len(args) == 2 else ""
        if not to_bool(args[-1]):
            raise CheckError(f"assertion failed: {message}" if message else "assertion failed")
        return ""

    def fail(self, *args: Any) -> str:
        """Always raise CheckError, with an optional message."""
        if len(args) > 1:
            raise CheckError(f"wrong number of args: want 0 or 1, got {len(args)}")
        message = to_string(args[0]) if args else ""
        raise CheckError(
            f"template generation failed: {message}" if message else "template generation failed"
        )

    def required(self, *args: Any) -> Any:
        """Return the last argument, raising CheckError when it is None or empty."""
        if len(args) not in (1, 2):
            raise CheckError(f"wrong number of args: want 1 or 2, got {len(args)}")
        message = _message_arg(args[0]) if len(args) == 2 else ""
        value = args[-1]
        if value is None or (isinstance(value, str) and value == ""):
            raise CheckError(message or _REQUIRED_MESSAGE)
        return value

    def ternary(self, tval: Any, fval: Any, condition: Any) -> Any:
        return tval if to_bool(condition) else fval

    def kind(self, value: Any) -> str:
        """Return the kind of ``value``: string, int, float64, slice, map, struct and so on."""
        if value is None:
            return "invalid"
        if isinstance(value, bool):
            return "bool"
        if isinstance(value, int):
            return "int"
        if isinstance(value, float):
            return "float64"
        if isinstance(value, complex):
            return "complex128"
        if isinstance(value, str):
            return "string"
        if isinstance(value, tuple):
            return "array"
        if isinstance(value, (list, bytes, bytearray)):
            return "slice"
        if isinstance(value, (Mapping, set, frozenset)):
            return "map"
        if inspect.isroutine(value):
            return "func"
        return "struct"

    def is_kind(self, kind: str, value: Any) -> bool:
        """Test the kind of ``value``; "number" matches any numeric kind."""
        actual = self.kind(value)
        if kind == "number" and actual in _NUMBER_KINDS:
            return True
        return actual == kind