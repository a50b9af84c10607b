"""Slash-separated and OS-specific path manipulation template functions."""

from __future__ import annotations

import ntpath
import os
import re
from dataclasses import dataclass
from typing import Any

from tmplfuncs.values import to_string

_BAD_PATTERN = "syntax error in pattern"


@dataclass(frozen=True)
class _PathFlavor:
    """Lexical path rules for one separator convention."""

    sep: str
    windows: bool

    @property
    def _separators(self) -> str:
        return "/\\" if self.windows else "/"

    def is_sep(self, char: str) -> bool:
        return char in self._separators

    def volume_len(self, path: str) -> int:
        if not self.windows:
            return 0
        drive, _ = ntpath.splitdrive(path)
        return len(drive)

    def volume_name(self, path: str) -> str:
        return path[: self.volume_len(path)]

    def last_sep(self, path: str) -> int:
        return max(path.rfind(char) for char in self._separators)

    def from_slash(self, path: str) -> str:
        return path if self.sep == "/" else path.replace("/", self.sep)

    def to_slash(self, path: str) -> str:
        return path if self.sep == "/" else path.replace(self.sep, "/")

    def _elements(self, path: str) -> list[str]:
        return re.split("[" + re.escape(self._separators) + "]", path)

    def clean(self, path: str) -> str:
        original = path
        vol_len = self.volume_len(path)
        volume, path = original[:vol_len], original[vol_len:]
        if not path:
            if vol_len > 1 and self.is_sep(original[0]) and self.is_sep(original[1]):
                return self.from_slash(original)
            return original + "."
        rooted = self.is_sep(path[0])
        parts: list[str] = []
        for part in self._elements(path):
            if part in ("", "."):
                continue
            if part == "..":
                if parts and parts[-1] != "..":
                    parts.pop()
                elif not rooted:
                    parts.append("..")
                continue
            parts.append(part)
        body = self.sep.join(parts)
        if rooted:
            body = self.sep + body
        elif not body:
            body = "."
        return self.from_slash(volume + body)

    def base(self, path: str) -> str:
        if not path:
            return "."
        path = path.rstrip(self._separators)
        path = path[self.volume_len(path):]
        index = self.last_sep(path)
        if index >= 0:
            path = path[index + 1:]
        return path or self.sep

    def dir(self, path: str) -> str:
        vol_len = self.volume_len(path)
        volume = path[:vol_len]
        index = max(self.last_sep(path), vol_len - 1)
        directory = self.clean(path[vol_len:index + 1])
        if directory == "." and len(volume) > 2:
            return volume
        return volume + directory

    def ext(self, path: str) -> str:
        for index in range(len(path) - 1, -1, -1):
            char = path[index]
            if self.is_sep(char):
                break
            if char == ".":
                return path[index:]
        return ""

    def is_abs(self, path: str) -> bool:
        if not self.windows:
            return path.startswith("/")
        vol_len = self.volume_len(path)
        if vol_len == 0:
            return False
        if vol_len > 1 and self.is_sep(path[0]) and self.is_sep(path[1]):
            return True
        rest = path[vol_len:]
        return bool(rest) and self.is_sep(rest[0])

    def join(self, elements: list[str]) -> str:
        for index, element in enumerate(elements):
            if element:
                return self.clean(self.sep.join(elements[index:]))
        return ""

    def split(self, path: str) -> list[str]:
        vol_len = self.volume_len(path)
        index = max(self.last_sep(path), vol_len - 1)
        return [path[:index + 1], path[index + 1:]]

    def _same(self, left: str, right: str) -> bool:
        if self.windows:
            return left.casefold() == right.casefold()
        return left == right

    def rel(self, basepath: str, targpath: str) -> str:
        base_vol = self.volume_name(basepath)
        targ_vol = self.volume_name(targpath)
        base = self.clean(basepath)
        targ = self.clean(targpath)
        if self._same(targ, base):
            return "."
        base = base[len(base_vol):]
        targ = targ[len(targ_vol):]
        if base == ".":
            base = ""
        elif base == "" and len(base_vol) > 2:
            base = self.sep
        base_rooted = base.startswith(self.sep)
        targ_rooted = targ.startswith(self.sep)
        if base_rooted != targ_rooted or not self._same(base_vol, targ_vol):
            raise ValueError(f"Rel: can't make {targpath} relative to {basepath}")
        base_parts = [part for part in base.split(self.sep) if part]
        targ_parts = [part for part in targ.split(self.sep) if part]
        common = 0
        for left, right in zip(base_parts, targ_parts):
            if not self._same(left, right):
                break
            common += 1
        remaining = base_parts[common:]
        if ".." in remaining:
            raise ValueError(f"Rel: can't make {targpath} relative to {basepath}")
        return self.sep.join([".."] * len(remaining) + targ_parts[common:]) or "."

    def _class_char(self, pattern: str, index: int) -> tuple[str, int]:
        if index >= len(pattern) or pattern[index] in "-]":
            raise ValueError(_BAD_PATTERN)
        if pattern[index] == "\\" and not self.windows:
            index += 1
            if index >= len(pattern):
                raise ValueError(_BAD_PATTERN)
        char = pattern[index]
        index += 1
        if index >= len(pattern):
            raise ValueError(_BAD_PATTERN)
        return char, index

    def _translate_class(self, pattern: str, index: int) -> tuple[str, int]:
        negated = index < len(pattern) and pattern[index] == "^"
        if negated:
            index += 1
        ranges: list[tuple[str, str]] = []
        seen = 0
        while True:
            if index < len(pattern) and pattern[index] == "]" and seen:
                index += 1
                break
            low, index = self._class_char(pattern, index)
            high = low
            if pattern[index] == "-":
                high, index = self._class_char(pattern, index + 1)
            seen += 1
            if low <= high:
                ranges.append((low, high))
        body = "".join(
            re.escape(low) if low == high else f"{re.escape(low)}-{re.escape(high)}"
            for low, high in ranges
        )
        if not body:
            return ("(?s:.)" if negated else "(?!)"), index
        return "[" + ("^" if negated else "") + body + "]", index

    def _translate(self, pattern: str) -> re.Pattern:
        not_sep = "[^" + re.escape(self.sep) + "]"
        parts: list[str] = []
        index = 0
        while index < len(pattern):
            char = pattern[index]
            if char == "*":
                parts.append(not_sep + "*")
                index += 1
            elif char == "?":
                parts.append(not_sep)
                index += 1
            elif char == "[":
                regex, index = self._translate_class(pattern, index + 1)
                parts.append(regex)
            elif char == "\\" and not self.windows:
                index += 1
                if index >= len(pattern):
                    raise ValueError(_BAD_PATTERN)
                parts.append(re.escape(pattern[index]))
                index += 1
            else:
                parts.append(re.escape(char))
                index += 1
        return re.compile("".join(parts), re.DOTALL)

    def match(self, pattern: str, name: str) -> bool:
        return self._translate(pattern).fullmatch(name) is not None


_SLASH = _PathFlavor("/", windows=False)
_NATIVE = _PathFlavor(os.sep, windows=os.name == "nt")


class PathFuncs:
    """Slash-separated path functions, independent of the operating system."""

    def base(self, value: Any) -> str:
        return _SLASH.base(to_string(value))

    def clean(self, value: Any) -> str:
        return _SLASH.clean(to_string(value))

    def dir(self, value: Any) -> str:
        return _SLASH.dir(to_string(value))

    def ext(self, value: Any) -> str:
        return _SLASH.ext(to_string(value))

    def is_abs(self, value: Any) -> bool:
        return _SLASH.is_abs(to_string(value))

    def join(self, *args: Any) -> str:
        return _SLASH.join([to_string(arg) for arg in args])

    def match(self, pattern: Any, name: Any) -> bool:
        """Glob-match ``name``; raises ValueError on a malformed pattern."""
        return _SLASH.match(to_string(pattern), to_string(name))

    def split(self, value: Any) -> list[str]:
        return _SLASH.split(to_string(value))


class FilePathFuncs:
    """Path functions following the conventions of the host operating system."""

    def base(self, value: Any) -> str:
        return _NATIVE.base(to_string(value))

    def clean(self, value: Any) -> str:
        return _NATIVE.clean(to_string(value))

    def dir(self, value: Any) -> str:
        return _NATIVE.dir(to_string(value))

    def ext(self, value: Any) -> str:
        return _NATIVE.ext(to_string(value))

    def from_slash(self, value: Any) -> str:
        return _NATIVE.from_slash(to_string(value))

    def is_abs(self, value: Any) -> bool:
        return _NATIVE.is_abs(to_string(value))

    def join(self, *args: Any) -> str:
        return _NATIVE.join([to_string(arg) for arg in args])

    def match(self, pattern: Any, name: Any) -> bool:
        """Glob-match ``name``; raises ValueError on a malformed pattern."""
        return _NATIVE.match(to_string(pattern), to_string(name))

    def rel(self, basepath: Any, targpath: Any) -> str:
        """Return ``targpath`` relative to ``basepath``; ValueError if impossible."""
        return _NATIVE.rel(to_string(basepath), to_string(targpath))

    def split(self, value: Any) -> list[str]:
        return _NATIVE.split(to_string(value))

    def to_slash(self, value: Any) -> str:
        return _NATIVE.to_slash(to_string(value))

    def volume_name(self, value: Any) -> str:
        return _NATIVE.volume_name(to_string(value))