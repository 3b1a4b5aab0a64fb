"""Utilities for characters, byte buffers, numbers, strings, printf-style formatting, linked lists and line reading."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "memory",
    "numbers",
    "strings",
    "output",
    "printf",
    "linked_list",
    "line_reader",
]