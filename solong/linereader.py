"""Read a stream line by line in fixed-size chunks."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, Optional, Union

BUFFER_SIZE = 48

Text = Union[str, bytes]


def _line_end(stash: Text) -> int:
    """Return the index just past the first newline in ``stash``, or -1."""
    newline = b"\n" if isinstance(stash, (bytes, bytearray)) else "\n"
    index = stash.find(newline)
    return index + 1 if index >= 0 else -1


class LineReader:
    """Return one line at a time from a text or binary stream.

    Each line keeps its trailing newline; the last line may lack one.
    The stream is read ``buffer_size`` units at a time.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._stash: Optional[Text] = None

    def _fill(self) -> None:
        while self._stash is None or _line_end(self._stash) < 0:
            try:
                chunk = self._stream.read(self._buffer_size)
            except Exception:
                self._stash = None
                raise
            if self._stash is None:
                self._stash = chunk[:0]
            if not chunk:
                return
            self._stash += chunk

    def read_line(self) -> Optional[Text]:
        """Return the next line, or None once the stream is exhausted."""
        self._fill()
        stash = self._stash
        if not stash:
            self._stash = None
            return None
        end = _line_end(stash)
        if end < 0:
            line, self._stash = stash, stash[:0]
        else:
            line, self._stash = stash[:end], stash[end:]
        return line

    def __iter__(self) -> Iterator[Text]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line