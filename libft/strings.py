"""String searching, comparison, bounded copying and building helpers."""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Union

Char = Union[str, int]

_NUL = "\0"


def _as_char(c: Char) -> str:
    """Return ``c`` as a one-character string; integers are taken as codes."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c & 0xFF)
    raise TypeError(f"expected str or int, got {type(c).__name__}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def find_char(text: str, c: Char) -> Optional[int]:
    """Index of the first occurrence of ``c`` in ``text``.

    Searching for the NUL character gives ``len(text)``, the position of the
    terminator. Returns None when ``c`` does not occur.
    """
    ch = _as_char(c)
    index = text.find(ch)
    if index >= 0:
        return index
    if ch == _NUL:
        return len(text)
    return None


def rfind_char(text: str, c: Char) -> Optional[int]:
    """Index of the last occurrence of ``c`` in ``text``.

    Searching for the NUL character gives ``len(text)``. Returns None when
    ``c`` does not occur.
    """
    ch = _as_char(c)
    if ch == _NUL:
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    The end of a string compares as code 0. Returns the difference of the
    codes at the first mismatch, or 0 when the compared parts are equal.
    """
    _check_non_negative("n", n)
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def find_substring(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within ``haystack[:length]``.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including a terminator.

    Returns the text that fits (at most ``size - 1`` characters; empty when
    ``size`` is 0) and the full length of ``src``, so truncation happened
    exactly when the length is not less than ``size``.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation would
    have had. When ``size`` does not exceed ``len(dst)`` nothing is appended
    and the length reported is ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def substr(text: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``text`` beginning at ``start``.

    A start at or beyond the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start : start + length]


def join(s1: str, s2: str) -> str:
    """The concatenation of ``s1`` and ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("join expects two strings")
    return s1 + s2


def trim(text: str, charset: str) -> str:
    """Remove every character found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, sep: Char) -> list[str]:
    """Split ``text`` on the single character ``sep``, dropping empty pieces."""
    delimiter = _as_char(sep)
    return [word for word in text.split(delimiter) if word]


def map_indexed(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def iter_indexed(
    chars: MutableSequence, func: Callable[[int, object], object]
) -> None:
    """Call ``func(index, item)`` for each item of ``chars`` in order.

    When ``func`` returns something other than None, that value replaces the
    item in place, so the sequence can be rewritten as it is walked.
    """
    for index, item in enumerate(chars):
        replacement = func(index, item)
        if replacement is not None:
            chars[index] = replacement