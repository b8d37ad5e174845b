"""Line-by-line reading from a stream with a fixed read size."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr, Generic

BUFFER_SIZE = 1024


def _newline_index(data: AnyStr) -> int:
    """Return the index of the first newline in ``data``, or -1 if none."""
    if isinstance(data, (bytes, bytearray)):
        return data.find(b"\n")
    return data.find("\n")


class LineReader(Generic[AnyStr]):
    """Read lines, newline included, from a text or binary stream.

    Data is pulled in chunks of ``buffer_size`` until a newline is seen; what
    follows the newline is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.stream = stream
        self.buffer_size = buffer_size
        self._pending: AnyStr | None = None

    def _take_line(self) -> AnyStr | None:
        pending = self._pending
        if pending is None:
            return None
        cut = _newline_index(pending)
        if cut < 0:
            return None
        self._pending = pending[cut + 1:]
        return pending[:cut + 1]

    def _load(self) -> bool:
        """Read chunks until one holds a newline; return False at end of stream."""
        while True:
            try:
                chunk = self.stream.read(self.buffer_size)
            except OSError:
                self._pending = None
                raise
            if not chunk:
                return False
            self._pending = chunk if self._pending is None else self._pending + chunk
            if _newline_index(chunk) >= 0:
                return True

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None once the stream is exhausted."""
        line = self._take_line()
        if line is not None:
            return line
        if self._load():
            return self._take_line()
        rest, self._pending = self._pending, None
        return rest if rest else None

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line