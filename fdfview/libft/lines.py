"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, Optional, Union

BUFFER_SIZE = 1024

Chunk = Union[str, bytes]


class LineReader:
    """Yield the lines of a text or binary stream, newline included.

    The last line is returned without a newline if the stream does not end
    with one; an empty stream yields nothing.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[Chunk] = None
        self._searched = 0

    def next_line(self) -> Optional[Chunk]:
        """The next line, or None once the stream is exhausted."""
        while True:
            if self._pending is not None:
                newline = "\n" if isinstance(self._pending, str) else b"\n"
                index = self._pending.find(newline, self._searched)
                if index >= 0:
                    line = self._pending[: index + 1]
                    self._pending = self._pending[index + 1:]
                    self._searched = 0
                    return line
                self._searched = len(self._pending)
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk
        if self._pending:
            line = self._pending
            self._pending = self._pending[:0]
            self._searched = 0
            return line
        return None

    def __iter__(self) -> Iterator[Chunk]:
        while True:
            line = self.next_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Iterate over the lines of a stream, newline included."""
    yield from LineReader(stream)