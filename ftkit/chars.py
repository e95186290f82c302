"""Character classification and case conversion.

Every function accepts either a one-character string or an integer
character code. The case converters return the same kind they receive.
"""

from __future__ import annotations

from collections.abc import Iterable

CharLike = int | str


def _code(c: CharLike) -> int:
    """Return the integer code for a character given as ``str`` or ``int``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def _same_kind(original: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True for ASCII letters ``a``-``z`` and ``A``-``Z``."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: CharLike) -> bool:
    """True for the ASCII digits ``0``-``9``."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: CharLike) -> bool:
    """True for ASCII letters and digits; integer codes are taken as a byte."""
    code = _code(c) & 0xFF
    return is_digit(code) or is_alpha(code)


def is_ascii(c: CharLike) -> bool:
    """True for codes 0 through 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True for printable ASCII, space (32) through tilde (126)."""
    return 32 <= _code(c) <= 126


def to_lower(c: CharLike) -> CharLike:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        return _same_kind(c, code + 32)
    return c


def to_upper(c: CharLike) -> CharLike:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        return _same_kind(c, code - 32)
    return c


def in_charset(c: CharLike, charset: Iterable[CharLike] | None) -> bool:
    """True if ``c`` is one of the characters in ``charset``.

    A missing charset (``None``) contains nothing.
    """
    if charset is None:
        return False
    code = _code(c)
    return any(_code(member) == code for member in charset)