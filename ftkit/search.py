"""String length, searching, comparison and bounded copying.

Characters to look for may be given as a one-character string or as an
integer code; an integer is taken as a byte. Searching for the code 0 finds
the end of the text, where a terminated string would keep its terminator.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence


def _search_char(c: str | int) -> str:
    """Return the character to search for, reducing integer codes to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c & 0xFF)


def _require_str(value, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _require_count(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def strlen(text: str | None) -> int:
    """Return the length of ``text``; ``None`` has length 0."""
    if text is None:
        return 0
    return len(_require_str(text, "text"))


def strchr(text: str, c: str | int) -> int | None:
    """Return the index of the first ``c`` in ``text``, or ``None``.

    Searching for the code 0 returns ``len(text)``.
    """
    text = _require_str(text, "text")
    ch = _search_char(c)
    if ch == "\0":
        return len(text)
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, c: str | int) -> int | None:
    """Return the index of the last ``c`` in ``text``, or ``None``.

    Searching for the code 0 returns ``len(text)``.
    """
    text = _require_str(text, "text")
    ch = _search_char(c)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters of ``a`` and ``b``.

    Returns the difference of the codes of the first pair that differs,
    counting the end of a string as code 0, or 0 when none differ.
    """
    a = _require_str(a, "a")
    b = _require_str(b, "b")
    n = _require_count(n, "n")
    for i in range(min(n, max(len(a), len(b)))):
        x = ord(a[i]) if i < len(a) else 0
        y = ord(b[i]) if i < len(b) else 0
        if x != y:
            return x - y
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Return where ``needle`` first occurs wholly within ``haystack[:length]``.

    An empty needle is found at 0; otherwise a zero length finds nothing.
    """
    haystack = _require_str(haystack, "haystack")
    needle = _require_str(needle, "needle")
    length = _require_count(length, "length")
    if not needle:
        return 0
    if not length:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a destination of ``size`` slots, terminator included.

    Returns the resulting destination text and ``len(src)``, the length that
    was attempted. A ``size`` of 0 leaves ``dst`` unchanged.
    """
    dst = _require_str(dst, "dst")
    src = _require_str(src, "src")
    size = _require_count(size, "size")
    if size == 0:
        return dst, len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` in a destination of ``size`` slots.

    Returns the resulting text and the length that was attempted: the length
    of ``dst`` (at most ``size``) plus ``len(src)``. When ``dst`` already
    fills ``size`` slots nothing is appended.
    """
    dst = _require_str(dst, "dst")
    src = _require_str(src, "src")
    size = _require_count(size, "size")
    dst_len = min(len(dst), size)
    if dst_len == size:
        return dst, size + len(src)
    room = size - dst_len - 1
    return dst + src[:room], dst_len + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a new string made of ``func(index, char)`` for each character."""
    text = _require_str(text, "text")
    if func is None:
        raise TypeError("func must be callable")
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    text: MutableSequence | None,
    func: Callable[[int, MutableSequence], None] | None,
) -> None:
    """Call ``func(index, text)`` for each position of a mutable sequence.

    ``func`` may change ``text[index]`` in place. A ``None`` sequence or
    function does nothing.
    """
    if text is None or func is None:
        return
    for index in range(len(text)):
        func(index, text)