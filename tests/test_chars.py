import string

import pytest

from ftkit.chars import (
    in_charset,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("c", list(string.ascii_letters))
def test_is_alpha_accepts_letters(c):
    assert is_alpha(c) is True
    assert is_alpha(ord(c)) is True


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " \t\n"))
def test_is_alpha_rejects_non_letters(c):
    assert is_alpha(c) is False


def test_is_alpha_rejects_non_ascii_letters():
    assert is_alpha("é") is False


@pytest.mark.parametrize("c", list(string.digits))
def test_is_digit_accepts_digits(c):
    assert is_digit(c) is True


@pytest.mark.parametrize("c", ["a", "Z", " ", "/", ":"])
def test_is_digit_rejects_others(c):
    assert is_digit(c) is False


def test_is_alnum_matches_union_of_alpha_and_digit():
    for code in range(128):
        assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_is_alnum_takes_integer_codes_as_a_byte():
    assert is_alnum(0x100 + ord("a")) is True
    assert is_alnum(0x100 + ord("!")) is False


@pytest.mark.parametrize("code, expected", [(0, True), (127, True), (128, False), (-1, False)])
def test_is_ascii_bounds(code, expected):
    assert is_ascii(code) is expected


@pytest.mark.parametrize(
    "code, expected", [(31, False), (32, True), (126, True), (127, False)]
)
def test_is_print_bounds(code, expected):
    assert is_print(code) is expected


@pytest.mark.parametrize("c", list(string.printable))
def test_is_print_agrees_with_visible_characters(c):
    assert is_print(c) == (c == " " or (c.isprintable() and not c.isspace()))


@pytest.mark.parametrize("c", list(string.ascii_uppercase))
def test_to_lower_on_upper_letters(c):
    assert to_lower(c) == c.lower()
    assert to_lower(ord(c)) == ord(c.lower())


@pytest.mark.parametrize("c", list(string.ascii_lowercase))
def test_to_upper_on_lower_letters(c):
    assert to_upper(c) == c.upper()
    assert to_upper(ord(c)) == ord(c.upper())


@pytest.mark.parametrize("c", list(string.digits + string.punctuation + " "))
def test_case_conversion_leaves_other_characters(c):
    assert to_lower(c) == c
    assert to_upper(c) == c


def test_case_conversion_round_trip():
    for c in string.ascii_letters:
        assert to_upper(to_lower(c)) == c.upper()
        assert to_lower(to_upper(c)) == c.lower()


def test_in_charset_string_members():
    assert in_charset(" ", " \n") is True
    assert in_charset("\n", " \n") is True
    assert in_charset("x", " \n") is False


def test_in_charset_integer_and_mixed():
    assert in_charset(ord(","), ",;") is True
    assert in_charset("a", [ord("a"), ord("b")]) is True


def test_in_charset_empty_and_none():
    assert in_charset("a", "") is False
    assert in_charset("a", None) is False


def test_multi_character_string_is_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_character_is_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)