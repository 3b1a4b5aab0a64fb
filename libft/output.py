"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

from typing import Optional, TextIO, Union

Char = Union[str, int]


def _as_char(c: Char) -> str:
    """Return ``c`` as a one-character string; integers are byte codes."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def put_char(c: Char, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    stream.write(_as_char(c))


def put_str(text: Optional[str], stream: TextIO) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is None:
        return
    stream.write(text)


def put_endl(text: Optional[str], stream: TextIO) -> None:
    """Write ``text`` followed by a newline; None writes nothing at all."""
    if text is None:
        return
    stream.write(text)
    stream.write("\n")


def put_nbr(n: int, stream: TextIO) -> None:
    """Write the decimal representation of the integer ``n``."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected int, got {type(n).__name__}")
    stream.write(str(n))