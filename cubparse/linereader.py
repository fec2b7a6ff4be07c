"""Reading a stream line by line through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr

DEFAULT_BUFFER_SIZE = 10
_INT_MAX = 2**31 - 1


class LineReader:
    """Reads lines from a text or binary stream, ``buffer_size`` units at a time.

    Each line keeps its trailing newline; the last line of a stream that does
    not end in a newline is returned as it is.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if not 0 < buffer_size < _INT_MAX:
            raise ValueError(f"buffer size out of range: {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = None

    def read_line(self):
        """Return the next line, or None once the stream is exhausted."""
        while True:
            if self._pending:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                index = self._pending.find(newline)
                if index >= 0:
                    line = self._pending[: index + 1]
                    self._pending = self._pending[index + 1:]
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        line = self._pending
        self._pending = None
        return line or None

    def __iter__(self) -> Iterator:
        while (line := self.read_line()) is not None:
            yield line


def iter_lines(stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> Iterator:
    """Yield the lines of ``stream`` as :class:`LineReader` reads them."""
    yield from LineReader(stream, buffer_size)