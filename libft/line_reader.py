"""Line-by-line reading from a file descriptor or a readable stream."""

from __future__ import annotations

import os
from typing import IO, Iterator, Optional, Union

DEFAULT_BUFFER_SIZE = 5
MAX_BUFFER_SIZE = 8_000_000

Source = Union[int, IO[str], IO[bytes]]
Line = Union[str, bytes]


class LineReader:
    """Read a source one line at a time, ``buffer_size`` units per read call.

    The source is either an open file descriptor (read as bytes) or any
    object with a ``read(size)`` method returning ``str`` or ``bytes``.
    Lines keep their trailing newline; the last line of a source that does
    not end in a newline is returned without one.
    """

    def __init__(self, source: Source, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(source, int) and not isinstance(source, bool):
            if source < 0:
                raise ValueError(f"file descriptor must not be negative, got {source}")
        elif not callable(getattr(source, "read", None)):
            raise TypeError("source must be a file descriptor or have a read() method")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.source = source
        self.buffer_size = min(buffer_size, MAX_BUFFER_SIZE)
        self._pending: Optional[Line] = None
        self._closed = False

    @property
    def closed(self) -> bool:
        """True once ``close`` has been called."""
        return self._closed

    def _read_chunk(self) -> Line:
        if isinstance(self.source, int):
            return os.read(self.source, self.buffer_size)
        chunk = self.source.read(self.buffer_size)
        return chunk if chunk is not None else b""

    @staticmethod
    def _newline_in(data: Line) -> int:
        return data.find(b"\n" if isinstance(data, bytes) else "\n")

    def _fill(self) -> None:
        """Read until the pending data holds a newline or the source is exhausted."""
        while self._pending is None or self._newline_in(self._pending) < 0:
            chunk = self._read_chunk()
            if not chunk:
                break
            self._pending = chunk if self._pending is None else self._pending + chunk

    def read_line(self) -> Optional[Line]:
        """The next line, including its newline, or None at the end of the source."""
        if self._closed:
            raise ValueError("read from a closed LineReader")
        self._fill()
        pending = self._pending
        if not pending:
            self._pending = None
            return None
        index = self._newline_in(pending)
        if index >= 0:
            self._pending = pending[index + 1:]
            return pending[: index + 1]
        self._pending = None
        return pending

    def drain(self) -> int:
        """Read and discard every remaining line; return how many were discarded."""
        count = 0
        while self.read_line() is not None:
            count += 1
        return count

    def close(self) -> None:
        """Discard buffered data and close the underlying source."""
        if self._closed:
            return
        self._closed = True
        self._pending = None
        if isinstance(self.source, int):
            os.close(self.source)
        else:
            closer = getattr(self.source, "close", None)
            if callable(closer):
                closer()

    def __iter__(self) -> Iterator[Line]:
        while (line := self.read_line()) is not None:
            yield line

    def __enter__(self) -> "LineReader":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()