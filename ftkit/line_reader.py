"""Reading a file descriptor one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator

BUFFER_SIZE = 1024
FD_MAX = 512

_NEWLINE = b"\n"


def _next_line(fd: int, pending: bytes, buffer_size: int) -> tuple[bytes | None, bytes]:
    """Read from ``fd`` until ``pending`` holds a newline or input ends.

    Returns the next line (with its newline, if any) and what remains. A read
    error ends the input just as end of file does.
    """
    while _NEWLINE not in pending:
        try:
            chunk = os.read(fd, buffer_size)
        except OSError:
            break
        if not chunk:
            break
        pending += chunk
    if not pending:
        return None, b""
    end = pending.find(_NEWLINE)
    if end < 0:
        return pending, b""
    return pending[:end + 1], pending[end + 1:]


def _decode(line: bytes | None) -> str | None:
    return None if line is None else line.decode("utf-8", errors="surrogateescape")


class LineReader:
    """Read lines from a file descriptor, keeping unread data between calls.

    Each line keeps its trailing newline; the last line may have none.
    """

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._pending = b""

    def read_line(self) -> str | None:
        """Return the next line, or ``None`` when no data is left."""
        line, self._pending = _next_line(self.fd, self._pending, self.buffer_size)
        return _decode(line)

    def __iter__(self) -> Iterator[str]:
        while (line := self.read_line()) is not None:
            yield line


class _SharedBuffer:
    """Unread data kept by :func:`get_next_line`, whatever the descriptor."""

    def __init__(self) -> None:
        self.data = b""


_shared = _SharedBuffer()
_per_fd: dict[int, bytes] = {}


def get_next_line(fd: int) -> str | None:
    """Return the next line from ``fd`` using one buffer shared by all calls.

    A negative descriptor gives ``None``.
    """
    if fd < 0:
        return None
    line, _shared.data = _next_line(fd, _shared.data, BUFFER_SIZE)
    return _decode(line)


def get_next_line_multi(fd: int) -> str | None:
    """Return the next line from ``fd``, keeping a separate buffer per descriptor.

    Descriptors outside ``0 <= fd < FD_MAX`` give ``None``.
    """
    if not 0 <= fd < FD_MAX:
        return None
    line, rest = _next_line(fd, _per_fd.get(fd, b""), BUFFER_SIZE)
    if rest:
        _per_fd[fd] = rest
    else:
        _per_fd.pop(fd, None)
    return _decode(line)