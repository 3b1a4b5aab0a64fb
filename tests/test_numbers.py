import pytest

from libft.numbers import absolute, atoi, atoi_base, itoa, maximum, minimum


@pytest.mark.parametrize("text", ["0", "42", "-42", "+7", "2147483647", "-2147483648"])
def test_atoi_plain_numbers(text):
    assert atoi(text) == int(text)


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r-123") == int("-123")


def test_atoi_stops_at_first_non_digit():
    assert atoi("99bottles") == int("99")


@pytest.mark.parametrize("text", ["", "abc", "-", "+-5", " + 5"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


@pytest.mark.parametrize("text", ["2147483648", "-2147483649", "99999999999999999999"])
def test_atoi_overflow_raises(text):
    with pytest.raises(OverflowError):
        atoi(text)


def test_atoi_base_hex():
    assert atoi_base("ff", "0123456789abcdef") == int("ff", 16)


def test_atoi_base_binary_negative():
    assert atoi_base("  -1011", "01") == -int("1011", 2)


def test_atoi_base_stops_at_foreign_char():
    assert atoi_base("+777z", "01234567") == int("777", 8)


def test_atoi_base_empty_alphabet():
    assert atoi_base("123", "") == 0


@pytest.mark.parametrize("value", [0, 5, -5, 10, 2147483647, -2147483648])
def test_itoa_round_trip(value):
    assert atoi(itoa(value)) == value


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


def test_itoa_zero():
    assert itoa(0) == "0"


@pytest.mark.parametrize("a,b", [(1, 2), (2, 1), (-3, 3), (4, 4)])
def test_minimum_maximum(a, b):
    low, high = minimum(a, b), maximum(a, b)
    assert low <= high
    assert {low, high} == {a, b}


@pytest.mark.parametrize("value", [0, 7, -7, -2147483647])
def test_absolute(value):
    result = absolute(value)
    assert result >= 0
    assert result in (value, -value)