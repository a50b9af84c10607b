"""Regular-expression template functions."""

from __future__ import annotations

import re
from typing import Any, Callable, Iterator

from tmplfuncs.values import to_int, to_string

_META = frozenset("\\.+*?()|[]{}^$")
_TEMPLATE_REF = re.compile(r"\$(?:(\$)|\{(\w+)\}|(\w+))")


def _matches(regex: re.Pattern, text: str, limit: int = -1) -> Iterator[re.Match]:
    """Yield up to ``limit`` matches (all when negative).

    Empty matches directly after a preceding match are skipped.
    """
    if limit == 0:
        return
    count = 0
    previous_end = -1
    for match in regex.finditer(text):
        if match.start() == match.end() == previous_end:
            continue
        yield match
        previous_end = match.end()
        count += 1
        if count == limit:
            return


def _group_text(match: re.Match, name: str) -> str:
    if name.isascii() and name.isdigit():
        index = int(name)
        if index <= match.re.groups:
            return match.group(index) or ""
        return ""
    if name in match.re.groupindex:
        return match.group(name) or ""
    return ""


def _expand(template: str, match: re.Match) -> str:
    """Substitute $1, ${1}, $name, ${name} and $$ in ``template``."""

    def reference(ref: re.Match) -> str:
        if ref.group(1):
            return "$"
        return _group_text(match, ref.group(2) or ref.group(3))

    return _TEMPLATE_REF.sub(reference, template)


def _replace(regex: re.Pattern, text: str, render: Callable[[re.Match], str]) -> str:
    pieces = []
    last = 0
    for match in _matches(regex, text):
        pieces.append(text[last:match.start()])
        pieces.append(render(match))
        last = match.end()
    pieces.append(text[last:])
    return "".join(pieces)


def _split(regex: re.Pattern, limit: int, text: str) -> list[str]:
    if limit == 0:
        return []
    if regex.pattern and not text:
        return [""]
    pieces: list[str] = []
    begin = end = 0
    for match in _matches(regex, text, limit):
        if limit > 0 and len(pieces) == limit - 1:
            break
        end = match.start()
        if match.end() != 0:
            pieces.append(text[begin:end])
        begin = match.end()
    if end != len(text):
        pieces.append(text[begin:])
    return pieces


def _pattern_args(args: tuple, default_limit: int) -> tuple[re.Pattern, int, str]:
    if len(args) == 2:
        pattern, limit, text = args[0], default_limit, args[1]
    elif len(args) == 3:
        pattern, limit, text = args[0], to_int(args[1]), args[2]
    else:
        raise TypeError(f"wrong number of args: want 2 or 3, got {len(args)}")
    return re.compile(to_string(pattern)), limit, to_string(text)


class ReFuncs:
    """Find, match, replace and split with regular expressions.

    Malformed patterns raise ``re.error``.
    """

    def find(self, pattern: Any, text: Any) -> str:
        """Return the leftmost match, or an empty string."""
        match = re.compile(to_string(pattern)).search(to_string(text))
        return match.group() if match else ""

    def find_all(self, *args: Any) -> list[str]:
        """find_all(pattern, [limit,] text): all matches, at most ``limit`` if given."""
        regex, limit, text = _pattern_args(args, -1)
        return [match.group() for match in _matches(regex, text, limit)]

    def match(self, pattern: Any, text: Any) -> bool:
        return re.compile(to_string(pattern)).search(to_string(text)) is not None

    def quote_meta(self, text: Any) -> str:
        return "".join("\\" + char if char in _META else char for char in to_string(text))

    def replace(self, pattern: Any, replacement: Any, text: Any) -> str:
        """Replace every match, expanding $1, ${name} and $$ in ``replacement``."""
        template = to_string(replacement)
        return _replace(
            re.compile(to_string(pattern)),
            to_string(text),
            lambda match: _expand(template, match),
        )

    def replace_literal(self, pattern: Any, replacement: Any, text: Any) -> str:
        """Replace every match with ``replacement`` taken literally."""
        literal = to_string(replacement)
        return _replace(re.compile(to_string(pattern)), to_string(text), lambda _: literal)

    def split(self, *args: Any) -> list[str]:
        """split(pattern, [limit,] text): the pieces between matches."""
        regex, limit, text = _pattern_args(args, -1)
        return _split(regex, limit, text)