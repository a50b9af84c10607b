"""Time and duration template functions."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from fractions import Fraction
from typing import Any

from tmplfuncs.values import _parse_int_literal, to_int, to_string

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_NANOSECOND = 1
_MICROSECOND = 1_000 * _NANOSECOND
_MILLISECOND = 1_000 * _MICROSECOND
_SECOND = 1_000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_UNITS = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "\u00b5s": _MICROSECOND,
    "\u03bcs": _MICROSECOND,
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}
_COMPONENT = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")
_DURATION_LIMIT = 2**63


def _from_nanos(nanos: int) -> timedelta:
    return timedelta(microseconds=round(Fraction(nanos, 1000)))


def _pad_right(text: str, pad: str, length: int) -> str:
    """Append ``pad`` at least once, then cut to ``length`` characters."""
    return (text + pad * (length + 1))[:length]


def parse_num(value: Any) -> tuple[int, int]:
    """Split a number into whole seconds and nanoseconds.

    Strings, integers and objects with a textual form are accepted; floats
    are rejected because they cannot carry the precision reliably.
    """
    if isinstance(value, str):
        parts = value.split(".")
        if len(parts) > 2:
            raise ValueError(
                f"can not parse '{value}' as a number - too many decimal points"
            )
        if len(parts) == 1:
            return _parse_int_literal(value), 0
        integral = _parse_int_literal(parts[0])
        fractional = _parse_int_literal(_pad_right(parts[1], "0", 9))
        return integral, fractional
    if value is None or isinstance(value, bool):
        return 0, 0
    if isinstance(value, int):
        return int(value), 0
    if isinstance(value, float):
        raise ValueError(
            f"can not parse floating point number ({value:f}) - use a string instead"
        )
    if type(value).__str__ is not object.__str__:
        return parse_num(str(value))
    return 0, 0


def _parse_duration_nanos(text: str) -> int:
    invalid = ValueError(f'time: invalid duration "{text}"')
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return 0
    if not rest:
        raise invalid
    total = 0
    position = 0
    while position < len(rest):
        char = rest[position]
        if not (char == "." or "0" <= char <= "9"):
            raise invalid
        component = _COMPONENT.match(rest, position)
        whole, fraction, unit = component.groups()
        if not whole and not fraction:
            raise invalid
        if not unit:
            raise ValueError(f'time: missing unit in duration "{text}"')
        scale = _UNITS.get(unit)
        if scale is None:
            raise ValueError(f'time: unknown unit "{unit}" in duration "{text}"')
        amount = int(whole or "0") * scale
        if fraction:
            amount += int(Fraction(int(fraction), 10 ** len(fraction)) * scale)
        total += amount
        if total > _DURATION_LIMIT:
            raise invalid
        position = component.end()
    if negative:
        return -total
    if total >= _DURATION_LIMIT:
        raise invalid
    return total


class TimeFuncs:
    """Clock, epoch-conversion and duration functions."""

    def zone_name(self) -> str:
        """Return the name of the local time zone."""
        return datetime.now().astimezone().tzname() or ""

    def zone_offset(self) -> int:
        """Return the local time zone's offset from UTC, in seconds."""
        offset = datetime.now().astimezone().utcoffset()
        return int(offset.total_seconds()) if offset is not None else 0

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def unix(self, value: Any) -> datetime:
        """Convert seconds since the UNIX epoch (number or string) to local time."""
        seconds, nanos = parse_num(value)
        moment = _EPOCH + timedelta(seconds=seconds) + _from_nanos(nanos)
        return moment.astimezone()

    def nanosecond(self, count: Any) -> timedelta:
        return _from_nanos(to_int(count) * _NANOSECOND)

    def microsecond(self, count: Any) -> timedelta:
        return _from_nanos(to_int(count) * _MICROSECOND)

    def millisecond(self, count: Any) -> timedelta:
        return _from_nanos(to_int(count) * _MILLISECOND)

    def second(self, count: Any) -> timedelta:
        return _from_nanos(to_int(count) * _SECOND)

    def minute(self, count: Any) -> timedelta:
        return _from_nanos(to_int(count) * _MINUTE)

    def hour(self, count: Any) -> timedelta:
        return _from_nanos(to_int(count) * _HOUR)

    def parse_duration(self, value: Any) -> timedelta:
        """Parse a duration such as "1h30m" or "-1.5s"; raises ValueError."""
        return _from_nanos(_parse_duration_nanos(to_string(value)))

    def since(self, moment: datetime) -> timedelta:
        return datetime.now(moment.tzinfo) - moment

    def until(self, moment: datetime) -> timedelta:
        return moment - datetime.now(moment.tzinfo)