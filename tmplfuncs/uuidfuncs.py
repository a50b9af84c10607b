"""UUID generation and parsing template functions."""

from __future__ import annotations

import uuid
from typing import Any

from tmplfuncs.values import to_string

_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
_URN_PREFIX = "urn:uuid:"
_STANDARD_LENGTH = 36
_HYPHENS = (8, 13, 18, 23)


def _from_hex(text: str) -> uuid.UUID:
    if len(text) != 32 or any(char not in _HEX_DIGITS for char in text):
        raise ValueError("invalid UUID format")
    return uuid.UUID(hex=text)


def _parse_uuid(text: str) -> uuid.UUID:
    length = len(text)
    if length == _STANDARD_LENGTH + len(_URN_PREFIX):
        prefix = text[: len(_URN_PREFIX)]
        if prefix.lower() != _URN_PREFIX:
            raise ValueError(f"invalid urn prefix: {prefix!r}")
        text = text[len(_URN_PREFIX):]
    elif length == _STANDARD_LENGTH + 2:
        if text[0] != "{" or text[-1] != "}":
            raise ValueError("invalid bracketed UUID format")
        text = text[1:-1]
    elif length == 32:
        return _from_hex(text)
    elif length != _STANDARD_LENGTH:
        raise ValueError(f"invalid UUID length: {length}")
    if any(text[index] != "-" for index in _HYPHENS):
        raise ValueError("invalid UUID format")
    return _from_hex(text[:8] + text[9:13] + text[14:18] + text[19:23] + text[24:])


class UUIDFuncs:
    """Create, validate and parse UUIDs."""

    def v1(self) -> str:
        """Return a time-based version 1 UUID; prefer v4 in most cases."""
        return str(uuid.uuid1())

    def v4(self) -> str:
        """Return a random version 4 UUID."""
        return str(uuid.uuid4())

    def nil(self) -> str:
        return str(uuid.UUID(int=0))

    def is_valid(self, value: Any) -> bool:
        """Check the format only; version and variant are not validated."""
        try:
            self.parse(value)
        except ValueError:
            return False
        return True

    def parse(self, value: Any) -> uuid.UUID:
        """Parse the standard, urn:uuid:, {braced} or raw 32-hex-digit forms."""
        return _parse_uuid(to_string(value))