"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

CONVERSIONS = "cspdiuxX%"

_UINT32 = 2**32
_INT32_MIN = -(2**31)
_POINTER_MASK = 2**64 - 1


class FormatError(ValueError):
    """Raised for a malformed format string or missing arguments."""


def _to_int32(value: int) -> int:
    return (value - _INT32_MIN) % _UINT32 + _INT32_MIN


def _to_uint32(value: int) -> int:
    return value % _UINT32


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError(f"%c expects a single character, got {value!r}")
        return value
    if isinstance(value, int):
        return chr(value & 0xFF)
    raise FormatError(f"%c expects a character or int, got {type(value).__name__}")


def _integer(value: Any, spec: str) -> int:
    if isinstance(value, int):
        return value
    raise FormatError(f"%{spec} expects an int, got {type(value).__name__}")


def _pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    address = value if isinstance(value, int) else id(value)
    return f"0x{address & _POINTER_MASK:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_to_int32(_integer(value, spec)))
    if spec == "u":
        return str(_to_uint32(_integer(value, spec)))
    text = f"{_to_uint32(_integer(value, spec)):x}"
    return text.upper() if spec == "X" else text


def _pieces(fmt: str, args: tuple) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, "")
        if not spec:
            raise FormatError("format string ends with a lone '%'")
        if spec in CONVERSIONS:
            yield _convert(spec, remaining)
        elif spec.isascii() and spec.isalpha():
            # Unknown letter conversions are echoed literally.
            yield "%" + spec
        else:
            raise FormatError(f"invalid conversion '%{spec}'")


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (stdout by default).

    Returns the number of characters written. Raises FormatError before
    writing anything when the format is malformed.
    """
    text = format_string(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)