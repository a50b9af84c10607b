"""Base64, URL-query and hashing template functions."""

from __future__ import annotations

import base64
import binascii
import hashlib
import re
from typing import Any
from urllib.parse import quote_plus, unquote_plus

from tmplfuncs.values import to_bytes, to_string

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _decode_base64(text: str) -> bytes:
    try:
        data = text.encode("ascii")
    except UnicodeEncodeError:
        raise ValueError("illegal base64 data: non-ASCII input") from None
    padded = data + b"=" * (-len(data) % 4)
    for altchars in (None, b"-_"):
        try:
            return base64.b64decode(padded, altchars=altchars, validate=True)
        except binascii.Error:
            continue
    raise ValueError(f"illegal base64 data: {text!r}")


class Base64Funcs:
    """Base64 encoding and decoding."""

    def encode(self, value: Any) -> str:
        return base64.b64encode(to_bytes(value)).decode("ascii")

    def decode(self, value: Any) -> str:
        return self.decode_bytes(value).decode("utf-8", errors="replace")

    def decode_bytes(self, value: Any) -> bytes:
        return _decode_base64(to_string(value))


class EncodeFuncs:
    """URL query-string escaping."""

    def url_encode(self, text: str) -> str:
        return quote_plus(text, safe="")

    def url_decode(self, text: str) -> str:
        bad = _BAD_ESCAPE.search(text)
        if bad is not None:
            start = bad.start()
            raise ValueError(f'invalid URL escape "{text[start:start + 3]}"')
        return unquote_plus(text, errors="replace")


def _digest(name: str, value: Any) -> bytes:
    return hashlib.new(name, to_bytes(value)).digest()


class CryptoFuncs:
    """SHA digests of values, as hex strings or raw bytes.

    SHA-1 is cryptographically broken and should not be used for security.
    """

    def sha1(self, value: Any) -> str:
        return self.sha1_bytes(value).hex()

    def sha224(self, value: Any) -> str:
        return self.sha224_bytes(value).hex()

    def sha256(self, value: Any) -> str:
        return self.sha256_bytes(value).hex()

    def sha384(self, value: Any) -> str:
        return self.sha384_bytes(value).hex()

    def sha512(self, value: Any) -> str:
        return self.sha512_bytes(value).hex()

    def sha512_224(self, value: Any) -> str:
        return self.sha512_224_bytes(value).hex()

    def sha512_256(self, value: Any) -> str:
        return self.sha512_256_bytes(value).hex()

    def sha1_bytes(self, value: Any) -> bytes:
        return _digest("sha1", value)

    def sha224_bytes(self, value: Any) -> bytes:
        return _digest("sha224", value)

    def sha256_bytes(self, value: Any) -> bytes:
        return _digest("sha256", value)

    def sha384_bytes(self, value: Any) -> bytes:
        return _digest("sha384", value)

    def sha512_bytes(self, value: Any) -> bytes:
        return _digest("sha512", value)

    def sha512_224_bytes(self, value: Any) -> bytes:
        return _digest("sha512_224", value)

    def sha512_256_bytes(self, value: Any) -> bytes:
        return _digest("sha512_256", value)