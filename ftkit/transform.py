"""String building, splitting and integer conversion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import groupby

from ftkit.chars import in_charset

_INT_BITS = 32
_INT_SPAN = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))

# Whitespace skipped before a number: \t \n \v \f \r and space.
_LEADING_SPACE = frozenset("\t\n\v\f\r ")


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


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to the range of a 32-bit signed integer."""
    return (value - _INT_MIN) % _INT_SPAN + _INT_MIN


def atoi(text: str) -> int:
    """Parse a leading decimal integer, as C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits gives 0.
    The result wraps around to a 32-bit signed integer.
    """
    text = _require_str(text, "text")
    pos = 0
    while pos < len(text) and text[pos] in _LEADING_SPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in text[pos:]:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"n must be an integer, got {type(n).__name__}")
    return str(n)


def _words(text: str, separators: Iterable[str] | None) -> Iterator[str]:
    """Yield the non-empty runs of ``text`` free of separator characters."""
    for is_separator, run in groupby(text, key=lambda ch: in_charset(ch, separators)):
        if not is_separator:
            yield "".join(run)


def word_lengths(text: str, separators: str | None) -> list[int]:
    """Return the length of each word of ``text`` between separator characters.

    A ``separators`` of ``None`` makes the whole text one word.
    """
    text = _require_str(text, "text")
    return [len(word) for word in _words(text, separators)]


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    text = _require_str(text, "text")
    sep = _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"sep must be a single character, got {sep!r}")
    return list(_words(text, sep))


def multi_split(text: str, separators: str | None) -> list[str]:
    """Split ``text`` on any character of ``separators``, dropping empty pieces."""
    text = _require_str(text, "text")
    return list(_words(text, separators))


def strjoin(a: str, b: str) -> str:
    """Return ``a`` followed by ``b``."""
    return _require_str(a, "a") + _require_str(b, "b")


def strtrim(text: str, charset: str) -> str:
    """Remove characters of ``charset`` from both ends of ``text``."""
    text = _require_str(text, "text")
    charset = _require_str(charset, "charset")
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` beginning at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    text = _require_str(text, "text")
    start = _require_count(start, "start")
    length = _require_count(length, "length")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strndup(text: str, length: int) -> str:
    """Return the first ``length`` characters of ``text``.

    Asking for more characters than the text holds raises ``ValueError``.
    """
    text = _require_str(text, "text")
    length = _require_count(length, "length")
    if length > len(text):
        raise ValueError(f"length {length} exceeds text of {len(text)} characters")
    return text[:length]