"""File-mode normalisation and lazily opened or change-detecting streams."""

from __future__ import annotations

import stat
import sys
import threading
from typing import Any, BinaryIO, Callable, Optional

_WHITESPACE = frozenset(b" \t\n\r\v")


def normalize_file_mode(mode: int) -> int:
    """Convert ``mode`` to one that behaves as expected on the current OS."""
    if sys.platform == "win32":
        return windows_file_mode(mode)
    return mode


def windows_file_mode(mode: int) -> int:
    """Reduce ``mode`` to what Windows honours: only the owner read/write bits."""
    if not stat.S_ISDIR(mode):
        # non-owner and execute bits are stripped on files
        mode &= ~0o177
    if mode & 0o200:
        # writeable implies read/write on Windows
        mode |= 0o666
    elif mode & 0o400:
        mode |= 0o444
    return mode


def all_whitespace(data: bytes) -> bool:
    """Return True when every byte of ``data`` is ASCII whitespace."""
    return all(byte in _WHITESPACE for byte in bytes(data))


class _LazyStream:
    """Opens the wrapped stream once, on first use, caching any failure."""

    def __init__(self, opener: Callable[[], Any]) -> None:
        self._opener = opener
        self._lock = threading.Lock()
        self._attempted = False
        self._target: Any = None
        self._error: Optional[BaseException] = None

    def _resolve(self) -> Any:
        with self._lock:
            if not self._attempted:
                self._attempted = True
                try:
                    self._target = self._opener()
                except Exception as exc:  # cached and re-raised on every access
                    self._error = exc
                else:
                    if self._target is None:
                        self._error = ValueError("nil stream returned by open")
        if self._error is not None:
            raise self._error
        return self._target

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:  # pragma: no cover - overridden
        raise NotImplementedError


class LazyReader(_LazyStream):
    """A reader that opens the stream given by ``opener`` on first access."""

    def read(self, size: int = -1) -> bytes:
        return self._resolve().read(size)

    def close(self) -> None:
        self._resolve().close()


class LazyWriter(_LazyStream):
    """A writer that opens the stream given by ``opener`` on first access."""

    def write(self, data: bytes) -> int:
        written = self._resolve().write(data)
        return len(data) if written is None else written

    def close(self) -> None:
        self._resolve().close()


class EmptySkipper:
    """Buffers whitespace and only opens the target once real content arrives."""

    def __init__(self, opener: Callable[[], Optional[BinaryIO]]) -> None:
        self._opener = opener
        self._writer: Optional[BinaryIO] = None
        self._buffer = bytearray()
        self._started = False

    def write(self, data: bytes) -> int:
        if not self._started:
            if all_whitespace(data):
                self._buffer += data
                return len(data)
            self._started = True
            writer = self._opener()
            if writer is None:
                raise ValueError("nil writer returned by open")
            self._writer = writer
            if self._buffer:
                writer.write(bytes(self._buffer))
                self._buffer.clear()
        self._writer.write(data)
        return len(data)

    def close(self) -> None:
        close = getattr(self._writer, "close", None)
        if close is not None:
            close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class SameSkipper:
    """Only opens and writes the target once output differs from ``reader``.

    ``reader`` yields the current content; writes that match it are buffered.
    """

    def __init__(self, reader: BinaryIO, opener: Callable[[], Optional[BinaryIO]]) -> None:
        self._reader = reader
        self._opener = opener
        self._writer: Optional[BinaryIO] = None
        self._buffer = bytearray()
        self._differs = False

    def write(self, data: bytes) -> int:
        if not self._differs:
            current = self._reader.read(len(data)) or b""
            if current == bytes(data):
                self._buffer += data
                return len(data)
            self._differs = True
            self._flush()
        self._writer.write(data)
        return len(data)

    def _flush(self) -> None:
        if self._writer is None:
            writer = self._opener()
            if writer is None:
                raise ValueError("nil writer returned by open")
            self._writer = writer
        if self._buffer:
            self._writer.write(bytes(self._buffer))
            self._buffer.clear()

    def close(self) -> None:
        if not self._differs and self._reader.read(1):
            # the existing content is longer than what was written
            try:
                self._flush()
            except Exception as exc:
                raise OSError(f"failed to flush on close: {exc}") from exc
        if self._writer is not None:
            self._writer.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()