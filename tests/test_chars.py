import string

import pytest

from libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_spaces,
    to_lower,
    to_upper,
)

ASCII_CHARS = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


def test_is_alpha_accepts_integer_codes():
    assert is_alpha(ord("q")) is True
    assert is_alpha(ord("@")) is False


@pytest.mark.parametrize("code", [-1, 128, 255, 1000])
def test_is_ascii_rejects_out_of_range(code):
    assert is_ascii(code) is False


@pytest.mark.parametrize("code", [0, 65, 127])
def test_is_ascii_accepts_range(code):
    assert is_ascii(code) is True


def test_is_print_bounds():
    assert is_print(31) is False
    assert is_print(32) is True
    assert is_print(126) is True
    assert is_print(127) is False


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_is_print_matches_printable_without_whitespace_controls(ch):
    assert is_print(ch) == (ch.isprintable() and ch.isascii())


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_to_upper_matches_ascii_upper(ch):
    assert to_upper(ch) == ch.upper()


@pytest.mark.parametrize("ch", ASCII_CHARS)
def test_to_lower_matches_ascii_lower(ch):
    assert to_lower(ch) == ch.lower()


def test_case_conversion_keeps_integer_type():
    assert to_upper(ord("b")) == ord("B")
    assert to_lower(ord("B")) == ord("b")
    assert to_upper(200) == 200


@pytest.mark.parametrize("ch", list(string.ascii_letters))
def test_case_round_trip(ch):
    assert to_lower(to_upper(ch)) == ch.lower()
    assert to_upper(to_lower(ch)) == ch.upper()


@pytest.mark.parametrize("text", ["", " ", "     "])
def test_is_spaces_true(text):
    assert is_spaces(text) is True


@pytest.mark.parametrize("text", ["a", " a ", "\t", " \n "])
def test_is_spaces_false(text):
    assert is_spaces(text) is False


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(3.5)