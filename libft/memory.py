"""Byte buffer operations: fill, copy, move, search, compare, allocate."""

from __future__ import annotations

from typing import Optional

SIZE_MAX = 2**64 - 1


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for length in lengths:
        if n > length:
            raise ValueError(f"byte count {n} exceeds buffer length {length}")


def memset(buffer: bytearray, value: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buffer`` with ``value`` (taken modulo 256)."""
    _check_count(n, len(buffer))
    buffer[:n] = bytes([value & 0xFF]) * n
    return buffer


def bzero(buffer: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buffer`` to zero."""
    memset(buffer, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` over the start of ``dest``."""
    _check_count(n, len(dest), len(src))
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buffer: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buffer`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were copied first.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buffer) - dest_offset, len(buffer) - src_offset)
    buffer[dest_offset:dest_offset + n] = bytes(buffer[src_offset:src_offset + n])
    return buffer


def memchr(data: bytes, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (mod 256) among the first ``n``.

    Returns None when no such byte occurs.
    """
    _check_count(n, len(data))
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b`` as unsigned values.

    Returns the difference of the first differing pair, or 0.
    """
    _check_count(n, len(a), len(b))
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Allocate ``count * size`` zeroed bytes.

    Raises OverflowError when the total does not fit a machine size.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    total = count * size
    if total > SIZE_MAX:
        raise OverflowError(f"{count} * {size} bytes exceeds the addressable size")
    return bytearray(total)