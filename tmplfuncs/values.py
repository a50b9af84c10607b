"""Loose conversions between template values."""

from __future__ import annotations

import math
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_TRUE_WORDS = frozenset({"1", "t", "true", "yes", "on"})


def interface_slice(value: Any) -> list:
    """Return the items of a list-like value as a new list."""
    if isinstance(value, list):
        return value
    if isinstance(value, Sequence) and not isinstance(value, str):
        return list(value)
    raise TypeError(
        f"expected an array or slice, but got a type={type(value).__name__} = {value!r}"
    )


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    dec = Decimal(repr(number)).normalize()
    exponent = dec.adjusted()
    if -4 <= exponent < 6:
        return format(dec, "f")
    sign, digits, _ = dec.as_tuple()
    text = "".join(map(str, digits))
    mantissa = text[0] + ("." + text[1:] if len(text) > 1 else "")
    exp_sign = "-" if exponent < 0 else "+"
    return f"{'-' if sign else ''}{mantissa}e{exp_sign}{abs(exponent):02d}"


def to_string(value: Any) -> str:
    """Render ``value`` as text the way templates print it."""
    if value is None:
        return "nil"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="replace")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def to_bytes(value: Any) -> bytes:
    """Return ``value`` as bytes, rendering non-byte values as text."""
    if value is None:
        return b""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    getvalue = getattr(value, "getvalue", None)
    if callable(getvalue):
        content = getvalue()
        if isinstance(content, (bytes, bytearray)):
            return bytes(content)
    if hasattr(value, "__bytes__"):
        return bytes(value)
    return to_string(value).encode("utf-8")


def _parse_int_literal(text: str) -> int:
    """Parse an integer literal with an optional 0x, 0o, 0b or leading-0 prefix."""
    body = text
    sign = 1
    if body and body[0] in "+-":
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    lowered = body.lower()
    if lowered.startswith("0x"):
        base, digits = 16, body[2:]
    elif lowered.startswith("0b"):
        base, digits = 2, body[2:]
    elif lowered.startswith("0o"):
        base, digits = 8, body[2:]
    elif len(body) > 1 and body[0] == "0":
        base, digits = 8, body[1:]
    else:
        base, digits = 10, body
    if base != 10 and digits.startswith("_"):
        digits = digits[1:]
    if (
        not digits
        or not digits.isascii()
        or digits[0] in "+-_"
        or any(ch.isspace() for ch in digits)
    ):
        raise ValueError(f"invalid integer syntax: {text!r}")
    try:
        number = sign * int(digits, base)
    except ValueError:
        raise ValueError(f"invalid integer syntax: {text!r}") from None
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return number


def _parse_float_literal(text: str) -> float:
    """Parse a float literal, including NaN and signed infinities."""
    if not text or not text.isascii() or "_" in text or any(ch.isspace() for ch in text):
        raise ValueError(f"invalid float syntax: {text!r}")
    body = text.lstrip("+-")
    if body.lower().startswith("0x"):
        try:
            return float.fromhex(text)
        except ValueError:
            raise ValueError(f"invalid float syntax: {text!r}") from None
    return float(text)


def to_int(value: Any) -> int:
    """Convert ``value`` to an integer, yielding 0 when it is not numeric."""
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return int(value)
    text = to_string(value)
    try:
        return _parse_int_literal(text)
    except ValueError:
        pass
    try:
        number = _parse_float_literal(text)
    except ValueError:
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number)


def to_float(value: Any) -> float:
    """Convert ``value`` to a float, yielding 0.0 when it is not numeric."""
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    text = to_string(value)
    try:
        return _parse_float_literal(text)
    except ValueError:
        pass
    try:
        return float(_parse_int_literal(text))
    except ValueError:
        return 0.0


def to_bool(value: Any) -> bool:
    """Interpret ``value`` as a boolean flag such as true, yes, on or 1."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value == 1
    if value is None:
        return False
    return to_string(value).strip().lower() in _TRUE_WORDS


def is_true(value: Any) -> bool:
    """Return the template truthiness of ``value``: zero and empty are false."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, complex)):
        return value != 0
    if hasattr(value, "__len__"):
        return len(value) > 0
    return True