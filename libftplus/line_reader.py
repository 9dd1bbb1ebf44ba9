"""Reading a file descriptor one line at a time through a fixed-size buffer."""

from __future__ import annotations

import operator
import os
from collections.abc import Iterator

__all__ = ["LineReader", "get_next_line"]

BUFFER_SIZE = 10

_shared_stash = bytearray()


def _check(fd: int, buffer_size: int) -> tuple[int, int]:
    fd = operator.index(fd)
    buffer_size = operator.index(buffer_size)
    if fd < 0:
        raise ValueError(f"file descriptor must not be negative, got {fd}")
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive, got {buffer_size}")
    return fd, buffer_size


def _next_line(fd: int, stash: bytearray, buffer_size: int) -> bytes | None:
    """Take the next line from *stash*, refilling it from *fd* as needed."""
    while b"\n" not in stash:
        chunk = os.read(fd, buffer_size)
        if not chunk:
            break
        stash += chunk
    if not stash:
        return None
    newline = stash.find(b"\n")
    end = len(stash) if newline < 0 else newline + 1
    line = bytes(stash[:end])
    del stash[:end]
    return line


class LineReader:
    """Reads lines from a file descriptor, *buffer_size* bytes per read."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        self.fd, self.buffer_size = _check(fd, buffer_size)
        self._stash = bytearray()

    def read_line(self) -> bytes | None:
        """Return the next line with its newline, the final unterminated
        line without one, or None once the input is exhausted."""
        return _next_line(self.fd, self._stash, self.buffer_size)

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


def get_next_line(fd: int) -> bytes | None:
    """Return the next line from *fd*, or None at the end of input.

    Unconsumed data is kept in a single buffer shared by all calls.
    """
    fd, buffer_size = _check(fd, BUFFER_SIZE)
    return _next_line(fd, _shared_stash, buffer_size)