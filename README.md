# libft

This package collects small utilities for ASCII characters, byte buffers,
integers and strings. It also has printf-style formatting, a singly linked
list and a buffered line reader.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Modules

- `libft.chars` covers ASCII classification and case conversion. Its
  functions are `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
  `to_upper`, `to_lower` and `is_spaces`. Each takes a one-character string
  or an integer code. `to_upper` and `to_lower` return a value of the same
  type as their argument.
- `libft.memory` works on `bytearray` and `bytes`. Its functions are
  `memset`, `bzero`, `memcpy`, `memmove(buffer, dest_offset, src_offset, n)`,
  `memchr`, `memcmp` and `calloc`. `memchr` returns an index or `None`. A
  negative count, or a count larger than the buffer, raises `ValueError`.
  `calloc` raises `OverflowError` when the total size is larger than a
  64-bit size.
- `libft.numbers` parses and formats integers. Its functions are `atoi`,
  `atoi_base`, `itoa`, `minimum`, `maximum` and `absolute`. `atoi` raises
  `OverflowError` when the result does not fit a 32-bit signed integer.
- `libft.strings` holds string helpers. Its functions are:
  - `find_char` and `rfind_char`, which return an index or `None`.
  - `strncmp`.
  - `find_substring(haystack, needle, length)`.
  - `strlcpy(src, size)` and `strlcat(dst, src, size)`. Both return a pair:
    the resulting text and the length that was reported.
  - `substr`, `join`, `trim` and `split`. `split` drops empty pieces.
  - `map_indexed`.
  - `iter_indexed`. It replaces an item in place when the callback returns
    a value other than `None`.
- `libft.output` writes to a text stream. Its functions are `put_char`,
  `put_str`, `put_endl` and `put_nbr`. `put_str` and `put_endl` write nothing
  when they are given `None`.
- `libft.printf` handles the `%c %s %p %d %i %u %x %X %%` conversions.
  - `format_string(fmt, *args)` returns the formatted text.
  - `printf(fmt, *args, file=None)` writes the text to `file`, or to stdout
    when no file is given, and returns the number of characters written.
  - `%d`, `%i`, `%u`, `%x` and `%X` wrap their values to 32 bits.
  - `%s` of `None` gives `(null)`, and `%p` of `None` or 0 gives `(nil)`.
  - An unknown letter after `%` is echoed as it stands.
  - A lone trailing `%`, a non-letter conversion or a missing argument
    raises `FormatError`.
- `libft.linked_list` has the `Node` and `LinkedList` classes.
  - A `LinkedList` can be built from an iterable. It supports `len()` and
    iterates over its contents.
  - `push_front` and `push_back` return the new node.
  - `last` returns the final node, or `None` when the list is empty.
  - `remove_first(delete=None)` and `clear(delete=None)` call the optional
    `delete` callback on the contents they remove.
  - `iterate` calls a function on each content.
  - `map` returns a new `LinkedList`.
- `libft.line_reader` has `LineReader`, which reads one line at a time.
  - It reads from a file descriptor, or from any object with a `read(size)`
    method that returns `str` or `bytes`. A file descriptor is read as
    `bytes`.
  - It reads `buffer_size` units per call. The default is 5 and the maximum
    is 8,000,000.
  - Lines keep their newline.
  - `read_line` returns `None` at the end of the source.
  - `drain` discards the remaining lines and returns how many there were.
  - `close` closes the source. The reader is also iterable and works as a
    context manager.

## Examples

```python
import io

from libft.numbers import atoi, itoa
from libft.strings import split, trim
from libft.printf import format_string
from libft.linked_list import LinkedList
from libft.line_reader import LineReader

atoi("   -42abc")                      # -42
itoa(-2147483648)                      # "-2147483648"
split("  hello  world ", " ")          # ["hello", "world"]
trim("xxhixx", "x")                    # "hi"
format_string("%d%% of %s", 50, "it")  # "50% of it"

items = LinkedList([1, 2])
list(items.map(lambda value: value * 2))  # [2, 4]

reader = LineReader(io.BytesIO(b"one\ntwo"))
reader.read_line()                     # b"one\n"
reader.read_line()                     # b"two"
reader.read_line()                     # None

with LineReader(io.StringIO("a\nb\n")) as text_reader:
    list(text_reader)                  # ["a\n", "b\n"]
```

## What it does not include

This package is a library only. It installs no command-line program.

## Running the tests

```
pytest
```