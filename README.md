# ftlib

Helpers that follow the classic C standard library. The package covers
ASCII character classification, byte-buffer operations, string utilities,
a singly linked list and a small `printf`. It is pure Python and has no
runtime dependencies.

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

### `ftlib.chars`

`is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper` and
`to_lower`. Each one accepts an integer character code or a one-character
string. Classification follows ASCII ranges only. `to_upper` and `to_lower`
change ASCII letters and return the same kind of value they were given:

```python
from ftlib.chars import to_upper, is_print

to_upper("a")   # 'A'
to_upper(97)    # 65
is_print(127)   # False
```

A string longer than one character raises `ValueError`. Any other type
raises `TypeError`.

### `ftlib.memory`

`memset`, `bzero`, `memcpy`, `memmove`, `memchr`, `memcmp` and `calloc`.

- `memset`, `bzero`, `memcpy` and `memmove` modify a `bytearray` in place.
- `memmove(buf, dest_offset, src_offset, n)` copies inside one buffer and
  handles regions that overlap.
- `memchr` returns an index, or `None` when the byte is not found.
- `memcmp` returns the difference of the first pair of bytes that differ,
  or `0` when they all match.
- `calloc(nmemb, size)` returns a zero-filled `bytearray`.

A negative count, or a count larger than a buffer, raises `ValueError`.

### `ftlib.output`

`putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd` write to any text
stream. `putstr_fd` and `putendl_fd` write nothing when they are given
`None`.

### `ftlib.strings`

`strlen`, `atoi`, `itoa`, `split`, `strchr`, `strrchr`, `strdup`,
`striteri`, `strjoin`, `strlcpy`, `strlcat`, `strmapi`, `strncmp`,
`strnstr`, `strtrim` and `substr`.

- The search functions return indexes, or `None` when nothing is found.
  `strchr` and `strrchr` return `len(s)` when searching for `"\0"` finds
  no NUL in the string.
- `split` drops empty pieces. `split(None, sep)` returns `[]`.
- `striteri` works on a mutable sequence of characters in place. A callback
  that returns a character replaces the one at that index.
- `strlcpy` and `strlcat` write NUL-terminated bytes into a `bytearray`.
  They return the length the full result would have had.

```python
from ftlib.strings import split, atoi, strtrim

split("  one two  three ", " ")   # ['one', 'two', 'three']
atoi("   -123abc")                # -123
strtrim("xxhixx", "x")            # 'hi'
```

### `ftlib.linkedlist`

`Node` is a dataclass with the fields `content` and `next`. `LinkedList`
keeps its first node as `head`. It provides:

- `add_front` and `add_back`, which return the new node
- `last`, which returns the last node, or `None` when the list is empty
- `clear(delete)`, which passes each value to `delete` and then empties the
  list. Given `None`, it leaves the list unchanged.
- `for_each(f)`
- `map(f)`, which returns a new list and leaves out `None` results

The list supports `len()` and iteration over its values.

```python
from ftlib.linkedlist import LinkedList

items = LinkedList([1, 2, 3])
items.add_front(0)
list(items.map(lambda x: x * 2))   # [0, 2, 4, 6]
```

### `ftlib.printf`

`format_string(fmt, *args)` returns the formatted text.
`printf(fmt, *args, stream=None)` writes that text to `stream`, or to
standard output when no stream is given. It returns the number of
characters written, or `-1` when `fmt` is `None`.

The supported conversions are `%c %s %p %d %i %u %x %X %%`.

- Unknown conversions produce nothing.
- A lone `%` at the end of the format produces nothing.
- Extra arguments are ignored.
- Too few arguments raise `TypeError`.

```python
from ftlib.printf import format_string

format_string("%s is %d (0x%x)", "answer", 42, 42)
# 'answer is 42 (0x2a)'
```

Integer conversions follow 32-bit semantics:

- `%u`, `%x` and `%X` wrap negative values.
- `%d` and `%i` wrap values outside the signed 32-bit range.

Special values:

- `%s` with `None` prints `(null)`.
- `%p` with `0` or `None` prints `(nil)`. Any other address prints in
  lowercase hex after `0x`.
- `%c` with an integer uses its low byte.

## What it does not do

This is a library only. It installs no command-line program. `printf` does
not support field widths, precision or flags.