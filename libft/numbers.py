"""Integer parsing, formatting and small arithmetic helpers."""

from __future__ import annotations

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def atoi(text: str) -> int:
    """Parse a leading decimal integer as C ``atoi`` does.

    Leading whitespace is skipped, one optional sign is read, then digits up to
    the first non-digit. Text without digits gives 0. Raises OverflowError when
    the value does not fit a 32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = []
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    value = sign * int("".join(digits)) if digits else 0
    if not INT_MIN <= value <= INT_MAX:
        raise OverflowError(f"{value} does not fit a 32-bit integer")
    return value


def atoi_base(text: str, base: str) -> int:
    """Parse a leading integer written with the digit alphabet ``base``.

    Each digit's value is its first position in ``base``; the radix is
    ``len(base)``. Leading whitespace and one sign are accepted.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    radix = len(base)
    result = 0
    for ch in rest:
        position = base.find(ch)
        if position < 0:
            break
        result = result * radix + position
    return sign * result


def itoa(n: int) -> str:
    """Decimal text of the integer ``n``."""
    return str(int(n))


def minimum(a: int, b: int) -> int:
    """The smaller of ``a`` and ``b``."""
    return a if a < b else b


def maximum(a: int, b: int) -> int:
    """The larger of ``a`` and ``b``."""
    return a if a > b else b


def absolute(a: int) -> int:
    """The absolute value of ``a``."""
    return -a if a < 0 else a