"""Classification and case conversion of single ASCII characters."""

from __future__ import annotations

from typing import Union

Char = Union[str, int]


def _code(c: Char) -> int:
    """Return the integer code of a one-character string or an integer."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def is_alpha(c: Char) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(c: Char) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range 0..127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True if ``c`` is a printable ASCII character (32..126)."""
    return 32 <= _code(c) < 127


def to_upper(c: Char) -> Char:
    """Convert an ASCII lowercase letter to uppercase; others pass through.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Convert an ASCII uppercase letter to lowercase; others pass through.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def is_spaces(text: str) -> bool:
    """True if ``text`` holds nothing but space characters (or is empty)."""
    return all(ch == " " for ch in text)