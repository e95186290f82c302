"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def put_char_fd(c: str | int, fd: int) -> None:
    """Write one character to ``fd``.

    An integer is written as a single byte; a string character is written
    UTF-8 encoded.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        _write_all(fd, c.encode("utf-8"))
    elif isinstance(c, int) and not isinstance(c, bool):
        _write_all(fd, bytes((c & 0xFF,)))
    else:
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")


def put_str_fd(s: str | None, fd: int) -> None:
    """Write ``s`` to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8"))


def put_endl_fd(s: str | None, fd: int) -> None:
    """Write ``s`` followed by a newline to ``fd``; ``None`` writes nothing."""
    if s is None:
        return
    _write_all(fd, s.encode("utf-8") + b"\n")


def put_nbr_fd(n: int, fd: int) -> None:
    """Write the decimal representation of ``n`` to ``fd``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    _write_all(fd, str(n).encode("ascii"))