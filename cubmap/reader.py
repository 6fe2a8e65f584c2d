"""Line-oriented reading of map files."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from typing import IO, AnyStr

BUFFER_SIZE = 42


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of ``stream``, reading ``buffer_size`` units at a time.

    Every line keeps its trailing newline; a final line without one is
    yielded as it is, and an empty stream yields nothing.  Works with
    both text and binary streams.
    """
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    pending = None
    while True:
        chunk = stream.read(buffer_size)
        if pending is None:
            pending = chunk[:0]
        if not chunk:
            break
        pending += chunk
        newline = "\n" if isinstance(pending, str) else b"\n"
        while (cut := pending.find(newline)) != -1:
            yield pending[:cut + 1]
            pending = pending[cut + 1:]
    if pending:
        yield pending


def read_map_file(path: str | PathLike[str]) -> list[str]:
    """Return every line of the file at ``path``, newlines included.

    Line endings are kept exactly as stored.  Raises ``OSError`` when the
    file cannot be opened.
    """
    with open(path, encoding="latin-1", newline="") as handle:
        return list(iter_lines(handle))