"""Byte-buffer operations on ``bytearray`` and other byte sequences.

Functions that write take a mutable buffer and modify it in place; they
return the destination for convenience. Lengths larger than a buffer raise
``ValueError`` instead of reading or writing past it.
"""

from __future__ import annotations

SIZE_MAX = 2**64 - 1


def _check_length(buf, n: int, name: str = "buffer") -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"length {n} exceeds {name} of {len(buf)} bytes")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    _check_length(buf, n)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    A zero count or size still yields a one-byte buffer. Negative arguments
    raise ``ValueError``; a total of ``SIZE_MAX`` or more raises
    ``OverflowError``.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if nmemb * size >= SIZE_MAX:
        raise OverflowError("requested allocation is too large")
    if nmemb == 0 or size == 0:
        nmemb = size = 1
    return bytearray(nmemb * size)


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` taken as a byte."""
    _check_length(buf, n)
    buf[:n] = bytes((value & 0xFF,)) * n
    return buf


def memcpy(dest: bytearray, src, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``."""
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    if n and dest is not src:
        dest[:n] = bytes(src[:n])
    return dest


def memmove(dest: bytearray, src, n: int) -> bytearray:
    """Copy ``n`` bytes from ``src`` to ``dest``; overlapping views are safe."""
    _check_length(dest, n, "destination")
    _check_length(src, n, "source")
    if n:
        # Snapshot first so that overlapping memoryviews copy correctly.
        dest[:n] = bytes(src[:n])
    return dest


def memchr(buf, value: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``value`` within ``n`` bytes."""
    _check_length(buf, n)
    index = bytes(buf[:n]).find(bytes((value & 0xFF,)))
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(a, n, "first buffer")
    _check_length(b, n, "second buffer")
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0