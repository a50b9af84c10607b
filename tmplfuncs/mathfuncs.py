"""Arithmetic template functions over loosely typed numbers."""

from __future__ import annotations

import math
from typing import Any

from tmplfuncs.values import _parse_float_literal, _parse_int_literal, to_float, to_int


def _wrap64(number: int) -> int:
    return ((number + 2**63) % 2**64) - 2**63


def _fmax(left: float, right: float) -> float:
    if math.isinf(left) and left > 0 or math.isinf(right) and right > 0:
        return math.inf
    if math.isnan(left) or math.isnan(right):
        return math.nan
    if left == 0 and right == 0:
        return right if math.copysign(1, left) < 0 else left
    return left if left > right else right


def _fmin(left: float, right: float) -> float:
    if math.isinf(left) and left < 0 or math.isinf(right) and right < 0:
        return -math.inf
    if math.isnan(left) or math.isnan(right):
        return math.nan
    if left == 0 and right == 0:
        return left if math.copysign(1, left) < 0 else right
    return left if left < right else right


def _round_half_away(number: float) -> float:
    if not math.isfinite(number):
        return number
    whole = math.trunc(number)
    if abs(number - whole) >= 0.5:
        whole += 1 if number > 0 else -1
    return math.copysign(float(whole), number)


def _go_pow(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except ValueError:
        return math.nan
    except OverflowError:
        negative = base < 0 and float(exponent).is_integer() and int(exponent) % 2 == 1
        return -math.inf if negative else math.inf


class MathFuncs:
    """Math functions that pick integer or float arithmetic from their inputs."""

    def is_int(self, value: Any) -> bool:
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        if isinstance(value, str):
            try:
                _parse_int_literal(value)
            except ValueError:
                return False
            return True
        return False

    def is_float(self, value: Any) -> bool:
        if isinstance(value, float):
            return True
        if isinstance(value, str):
            try:
                _parse_float_literal(value)
            except ValueError:
                return False
            return not self.is_int(value)
        return False

    def is_num(self, value: Any) -> bool:
        return self.is_int(value) or self.is_float(value)

    def contains_float(self, *args: Any) -> bool:
        return any(self.is_float(arg) for arg in args)

    def abs(self, value: Any) -> int | float:
        magnitude = math.fabs(to_float(value))
        if self.is_int(value):
            return to_int(magnitude)
        return magnitude

    def add(self, *args: Any) -> int | float:
        if self.contains_float(*args):
            return sum((to_float(arg) for arg in args), 0.0)
        return _wrap64(sum(to_int(arg) for arg in args))

    def mul(self, *args: Any) -> int | float:
        if self.contains_float(*args):
            return math.prod((to_float(arg) for arg in args), start=1.0)
        return _wrap64(math.prod(to_int(arg) for arg in args))

    def sub(self, a: Any, b: Any) -> int | float:
        if self.contains_float(a, b):
            return to_float(a) - to_float(b)
        return _wrap64(to_int(a) - to_int(b))

    def div(self, a: Any, b: Any) -> float:
        """Float division; raises ZeroDivisionError when ``b`` is zero."""
        dividend = to_float(a)
        divisor = to_float(b)
        if divisor == 0:
            raise ZeroDivisionError("error: division by 0")
        return dividend / divisor

    def rem(self, a: Any, b: Any) -> int:
        """Integer remainder whose sign follows the dividend."""
        dividend = to_int(a)
        divisor = to_int(b)
        remainder = abs(dividend) % abs(divisor)
        return _wrap64(-remainder if dividend < 0 else remainder)

    def pow(self, a: Any, b: Any) -> int | float:
        result = _go_pow(to_float(a), to_float(b))
        if self.is_float(a):
            return result
        return to_int(result)

    def seq(self, *args: Any) -> list[int]:
        """Integers from start to end inclusive; start and step default to 1."""
        if not args:
            raise ValueError("math.Seq must be given at least an 'end' value")
        start, end, step = 1, 0, 1
        if len(args) == 1:
            end = to_int(args[0])
        elif len(args) == 2:
            start, end = to_int(args[0]), to_int(args[1])
        elif len(args) == 3:
            start, end, step = (to_int(arg) for arg in args)
        if step == 0:
            return []
        if (end < start and step > 0) or (end > start and step < 0):
            step = -step
        return list(range(start, end + (1 if step > 0 else -1), step))

    def max(self, first: Any, *args: Any) -> int | float:
        if self.is_float(first) or self.contains_float(*args):
            result = to_float(first)
            for arg in args:
                result = _fmax(result, to_float(arg))
            return result
        return max([to_int(first), *(to_int(arg) for arg in args)])

    def min(self, first: Any, *args: Any) -> int | float:
        if self.is_float(first) or self.contains_float(*args):
            result = to_float(first)
            for arg in args:
                result = _fmin(result, to_float(arg))
            return result
        return min([to_int(first), *(to_int(arg) for arg in args)])

    def ceil(self, value: Any) -> float:
        number = to_float(value)
        if not math.isfinite(number):
            return number
        return math.copysign(float(math.ceil(number)), number)

    def floor(self, value: Any) -> float:
        number = to_float(value)
        if not math.isfinite(number):
            return number
        return math.copysign(float(math.floor(number)), number)

    def round(self, value: Any) -> float:
        """Round half away from zero."""
        return _round_half_away(to_float(value))