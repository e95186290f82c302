# ftkit

A small library of helpers for characters, byte buffers, strings, singly
linked lists and reading a file descriptor one line at a time. It has no
dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `ftkit.chars`

ASCII character tests and case conversion. Each function takes a
one-character string or an integer code.

- `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print` return `bool`.
- `to_lower`, `to_upper` convert ASCII letters and return the same kind
  (string or integer) they were given.
- `in_charset(c, charset)` tells whether `c` is in `charset`; a `None`
  charset contains nothing.

### `ftkit.memory`

Operations on byte buffers. Writing functions modify a `bytearray` in place
and return it. A length larger than a buffer, or negative, raises
`ValueError`.

- `bzero(buf, n)`, `memset(buf, value, n)`
- `memcpy(dest, src, n)`, `memmove(dest, src, n)`
- `memchr(buf, value, n)` returns an index or `None`.
- `memcmp(a, b, n)` returns the difference of the first unequal bytes, or 0.
- `calloc(nmemb, size)` returns a zeroed `bytearray`; a zero count or size
  gives one byte, negative arguments raise `ValueError` and a total of
  `SIZE_MAX` or more raises `OverflowError`.

### `ftkit.transform`

- `atoi(text)` parses a leading decimal integer after whitespace and one
  optional sign, stopping at the first non-digit; the result wraps to a
  32-bit signed integer.
- `itoa(n)` returns the decimal text of `n`.
- `split(text, sep)` splits on one character; `multi_split(text, separators)`
  splits on any of several. Empty pieces are dropped.
- `word_lengths(text, separators)` returns the length of each such piece.
- `strjoin(a, b)`, `strtrim(text, charset)`, `substr(text, start, length)`,
  `strndup(text, length)` (which raises `ValueError` if `length` exceeds the
  text).

### `ftkit.output`

`put_char_fd`, `put_str_fd`, `put_endl_fd` and `put_nbr_fd` write a
character, a string, a string with a newline, or a number to a file
descriptor. Strings are written UTF-8 encoded; `None` writes nothing.

### `ftkit.search`

- `strlen(text)` (`None` has length 0).
- `strchr(text, c)` and `strrchr(text, c)` return the index of the first or
  last match, or `None`; searching for code 0 returns `len(text)`.
- `strncmp(a, b, n)` compares at most `n` characters.
- `strnstr(haystack, needle, length)` returns the index of `needle` within
  the first `length` characters, or `None`.
- `strlcpy(dst, src, size)` and `strlcat(dst, src, size)` return a tuple of
  the resulting text and the length that was attempted.
- `strmapi(text, func)` builds a string from `func(index, char)`;
  `striteri(seq, func)` calls `func(index, seq)` on a mutable sequence.

### `ftkit.linked_list`

`ListNode` and `LinkedList`, a singly linked list with `push_front`,
`push_back`, `last`, `len()`, iteration over contents, `for_each`, `map`
(returning a new list) and `clear(on_delete)`.

### `ftkit.line_reader`

- `LineReader(fd, buffer_size=1024)` reads lines from a file descriptor,
  keeping unread data between calls. `read_line()` returns the next line
  with its newline, or `None` at the end; iterating yields every line.
- `get_next_line(fd)` reads with one buffer shared by all calls.
- `get_next_line_multi(fd)` keeps a separate buffer for each descriptor
  below `FD_MAX` (512).

## Examples

```python
from ftkit.transform import atoi, itoa, split
from ftkit.linked_list import LinkedList

atoi("  -42abc")          # -42
itoa(-2147483648)         # "-2147483648"
split("a,,b,c", ",")      # ["a", "b", "c"]

items = LinkedList([1, 2, 3])
items.push_front(0)
list(items.map(lambda x: x * 10))   # [0, 10, 20, 30]
```

Reading a file line by line:

```python
import os
from ftkit.line_reader import LineReader

fd = os.open("data.txt", os.O_RDONLY)
try:
    for line in LineReader(fd):
        print(line, end="")
finally:
    os.close(fd)
```

## What it does not do

ftkit is a library only: it installs no command-line program.