"""Read a stream one line at a time through a fixed-size buffer."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import Any, AnyStr, Generic

BUFFER_SIZE = 42


class LineReader(Generic[AnyStr]):
    """Yield newline-terminated lines from a stream with a ``read(size)`` method.

    The last line is returned without a newline if the stream does not end
    with one. Works with both text and binary streams.
    """

    def __init__(self, stream: Any, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _has_newline(self) -> bool:
        if not self._pending:
            return False
        newline = "\n" if isinstance(self._pending, str) else b"\n"
        return newline in self._pending

    def _read_chunk(self) -> AnyStr | None:
        try:
            return self.stream.read(self.buffer_size)
        except OSError:
            self._pending = None
            raise

    def next_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        while not self._has_newline():
            chunk = self._read_chunk()
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        newline = "\n" if isinstance(pending, str) else b"\n"
        index = pending.find(newline)
        if index < 0:
            self._pending = None
            return pending
        rest = pending[index + 1:]
        self._pending = rest or None
        return pending[: index + 1]

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.next_line()) is not None:
            yield line


class _DescriptorStream:
    def __init__(self, fd: int) -> None:
        self.fd = fd

    def read(self, size: int) -> bytes:
        return os.read(self.fd, size)


_readers: dict[int, LineReader[bytes]] = {}


def get_next_line(fd: int) -> bytes | None:
    """Return the next line read from file descriptor ``fd``.

    Each descriptor keeps its own unread data between calls. Returns None at
    end of input, for a negative descriptor, or when reading fails.
    """
    if fd < 0:
        return None
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(_DescriptorStream(fd))
    try:
        return reader.next_line()
    except OSError:
        _readers.pop(fd, None)
        return None