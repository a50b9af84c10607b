"""String manipulation template functions.

Most functions take the string to operate on as their last argument so that
they read naturally when values are piped through a template.
"""

from __future__ import annotations

import re
from typing import Any

from slugify import slugify

from tmplfuncs.values import to_int, to_string

_ABBREV_MARKER = "..."
_WORD = re.compile(r"\w+(?:['\u2019]\w+)*")
_SLUG_REPLACEMENTS = [
    ["&", "and"],
    ["@", "at"],
    ["'", ""],
    ['"', ""],
    ["\u2019", ""],
]
_QUOTE_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    "\\": "\\\\",
    '"': '\\"',
}


def _abbreviate(text: str, offset: int, max_width: int) -> str:
    """Shorten ``text`` to ``max_width`` characters using "..." markers."""
    if not text:
        return ""
    if max_width < 4:
        raise ValueError("minimum abbreviation width is 4")
    if len(text) <= max_width:
        return text
    offset = min(offset, len(text))
    keep = max_width - len(_ABBREV_MARKER)
    if len(text) - offset < keep:
        offset = len(text) - keep
    if offset <= 4:
        return text[:keep] + _ABBREV_MARKER
    if max_width < 7:
        raise ValueError("minimum abbreviation width with offset is 7")
    if offset + keep < len(text):
        return _ABBREV_MARKER + _abbreviate(text[offset:], 0, keep)
    return _ABBREV_MARKER + text[len(text) - keep:]


def _title_word(word: str) -> str:
    return word[0].title() + word[1:].lower()


def _indent(width: int, indent: str, text: str) -> str:
    if width == 0:
        return text
    if width > 1:
        indent = indent * width
    return "\n".join(indent + line if line else line for line in text.split("\n"))


def _shell_quote(text: str) -> str:
    return "'" + text.replace("'", "'\"'\"'") + "'"


def _quote_char(char: str) -> str:
    escaped = _QUOTE_ESCAPES.get(char)
    if escaped is not None:
        return escaped
    if char == " " or char.isprintable():
        return char
    code = ord(char)
    if code < 0x80:
        return f"\\x{code:02x}"
    if code < 0x10000:
        return f"\\u{code:04x}"
    return f"\\U{code:08x}"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class StringFuncs:
    """String functions with the subject string as the last argument."""

    def abbrev(self, *args: Any) -> str:
        """abbrev([offset,] max_width, text): shorten text with "..." markers."""
        if len(args) < 2:
            raise ValueError("abbrev requires a 'maxWidth' and 'input' argument")
        text, offset, max_width = "", 0, 0
        if len(args) == 2:
            max_width, text = to_int(args[0]), to_string(args[1])
        elif len(args) == 3:
            offset = to_int(args[0])
            max_width = to_int(args[1])
            text = to_string(args[2])
        if len(text) <= max_width:
            return text
        return _abbreviate(text, offset, max_width)

    def replace_all(self, old: str, new: str, value: Any) -> str:
        return to_string(value).replace(old, new)

    def contains(self, substr: str, value: Any) -> bool:
        return substr in to_string(value)

    def has_prefix(self, prefix: str, value: Any) -> bool:
        return to_string(value).startswith(prefix)

    def has_suffix(self, suffix: str, value: Any) -> bool:
        return to_string(value).endswith(suffix)

    def repeat(self, count: int, value: Any) -> str:
        """Repeat the text ``count`` times; a negative count raises ValueError."""
        count = int(count)
        if count < 0:
            raise ValueError(f"negative count {count}")
        return to_string(value) * count

    def sort(self, values: Any) -> list[str]:
        """Return the items, rendered as text, in sorted order."""
        if not isinstance(values, (list, tuple)):
            raise TypeError(
                f"wrong type for value; expected a list of strings; got {type(values).__name__}"
            )
        return sorted(to_string(item) for item in values)

    def split(self, sep: str, value: Any) -> list[str]:
        text = to_string(value)
        if not sep:
            return list(text)
        return text.split(sep)

    def split_n(self, sep: str, n: int, value: Any) -> list[str]:
        """Split into at most ``n`` pieces; zero gives none and negative gives all."""
        n = int(n)
        text = to_string(value)
        if n == 0:
            return []
        if not sep:
            chars = list(text)
            if 0 < n < len(chars):
                return chars[: n - 1] + [text[n - 1:]]
            return chars
        return text.split(sep, n - 1 if n > 0 else -1)

    def trim(self, cutset: str, value: Any) -> str:
        text = to_string(value)
        if not cutset:
            return text
        return text.strip(cutset)

    def trim_prefix(self, prefix: str, value: Any) -> str:
        return to_string(value).removeprefix(prefix)

    def trim_suffix(self, suffix: str, value: Any) -> str:
        return to_string(value).removesuffix(suffix)

    def title(self, value: Any) -> str:
        """Title-case every word, lower-casing the rest of it."""
        return _WORD.sub(lambda match: _title_word(match.group()), to_string(value))

    def to_upper(self, value: Any) -> str:
        return to_string(value).upper()

    def to_lower(self, value: Any) -> str:
        return to_string(value).lower()

    def trim_space(self, value: Any) -> str:
        return to_string(value).strip()

    def trunc(self, length: int, value: Any) -> str:
        """Cut the text to ``length`` characters; a negative length keeps it all."""
        text = to_string(value)
        length = int(length)
        if length < 0 or len(text) <= length:
            return text
        return text[:length]

    def indent(self, *args: Any) -> str:
        """indent([width,] [indent,] text): prefix every non-empty line."""
        if not args:
            raise TypeError("indent: invalid arguments")
        text = to_string(args[-1])
        indent, width = " ", 1
        if len(args) == 2:
            if isinstance(args[0], str):
                indent = args[0]
            elif _is_int(args[0]):
                width = args[0]
            else:
                raise TypeError("indent: invalid arguments")
        elif len(args) == 3:
            if not _is_int(args[0]) or not isinstance(args[1], str):
                raise TypeError("indent: invalid arguments")
            width, indent = args[0], args[1]
        return _indent(width, indent, text)

    def slug(self, value: Any) -> str:
        return slugify(to_string(value), replacements=_SLUG_REPLACEMENTS)

    def quote(self, value: Any) -> str:
        """Wrap in double quotes, escaping quotes, backslashes and control characters."""
        return '"' + "".join(_quote_char(char) for char in to_string(value)) + '"'

    def shell_quote(self, value: Any) -> str:
        """Quote for a POSIX shell; list items are quoted separately and space-joined."""
        if isinstance(value, (list, tuple)):
            return " ".join(_shell_quote(to_string(item)) for item in value)
        return _shell_quote(to_string(value))

    def squote(self, value: Any) -> str:
        return "'" + to_string(value).replace("'", "''") + "'"

    def rune_count(self, *args: Any) -> int:
        """Count the characters of all arguments rendered as text."""
        return sum(len(to_string(arg)) for arg in args)