"""String utilities: conversion, searching, splitting and bounded copies.

Text functions work on ``str`` and report positions as indexes (``None``
when nothing is found). The bounded copy functions ``strlcpy`` and
``strlcat`` write NUL-terminated byte strings into a ``bytearray``.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Union

_WHITESPACE = frozenset(" \t\n\v\f\r")
_NUL = "\0"

CharLike = Union[int, str]
BytesLike = Union[bytes, bytearray, memoryview, str]


def _char(c: CharLike) -> str:
    """Return ``c`` as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, int):
        return chr(c)
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def _c_bytes(data: BytesLike) -> bytes:
    """Return ``data`` as bytes, cut at its first NUL byte."""
    raw = data.encode("utf-8") if isinstance(data, str) else bytes(data)
    end = raw.find(0)
    return raw if end < 0 else raw[:end]


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(s)


def atoi(s: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. A string with no digits gives 0.
    """
    pos = 0
    while pos < len(s) and s[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(s) and s[pos] in "+-":
        if s[pos] == "-":
            sign = -1
        pos += 1
    value = 0
    for ch in s[pos:]:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return sign * value


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(int(n))


def split(s: Optional[str], sep: str) -> List[str]:
    """Split ``s`` on the character ``sep``, dropping empty pieces.

    ``None`` gives an empty list.
    """
    sep = _char(sep)
    if s is None:
        return []
    return [word for word in s.split(sep) if word]


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``.

    Searching for NUL finds the end of the string, ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL and _NUL not in s:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``.

    Searching for NUL finds the end of the string, ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return "".join(s)


def striteri(
    chars: Optional[MutableSequence[str]],
    f: Optional[Callable[[int, str], Optional[str]]],
) -> None:
    """Call ``f(index, char)`` on each character of ``chars`` in place.

    When ``f`` returns a character it replaces the one at that index;
    returning ``None`` leaves it unchanged. Nothing happens if either
    argument is ``None``.
    """
    if chars is None or f is None:
        return
    for index, ch in enumerate(list(chars)):
        replacement = f(index, ch)
        if replacement is not None:
            chars[index] = _char(replacement)


def strjoin(s1: str, s2: str) -> str:
    """Return ``s1`` followed by ``s2``."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strjoin needs two strings")
    return s1 + s2


def strlcpy(dest: bytearray, src: BytesLike, size: int) -> int:
    """Copy ``src`` into ``dest`` as a NUL-terminated string of at most ``size`` bytes.

    At most ``size - 1`` bytes are copied and a NUL is written after them;
    a ``size`` of 0 writes nothing. Returns the full length of ``src``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    data = _c_bytes(src)
    if size:
        chunk = data[:size - 1]
        if len(chunk) >= len(dest):
            raise ValueError(
                f"destination of length {len(dest)} cannot hold {len(chunk) + 1} bytes"
            )
        dest[:len(chunk)] = chunk
        dest[len(chunk)] = 0
    return len(data)


def strlcat(dest: Optional[bytearray], src: BytesLike, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dest``.

    The result holds at most ``size - 1`` bytes plus a NUL. Returns the
    length of ``src`` plus the shorter of the existing string's length and
    ``size``: the length the full result would have had.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    data = _c_bytes(src)
    if dest is None:
        if size == 0:
            return len(data)
        raise TypeError("strlcat needs a destination buffer")
    limit = min(size, len(dest))
    terminator = dest.find(0, 0, limit)
    if terminator >= 0:
        dest_len = terminator
    elif size > len(dest):
        raise ValueError("destination is not NUL-terminated within its length")
    else:
        dest_len = size
    chunk = data[:max(size - dest_len - 1, 0)]
    if chunk:
        end = dest_len + len(chunk)
        if end >= len(dest):
            raise ValueError(
                f"destination of length {len(dest)} cannot hold {end + 1} bytes"
            )
        dest[dest_len:end] = chunk
        dest[end] = 0
    return len(data) + dest_len


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string made of ``f(index, char)`` for each character."""
    return "".join(_char(f(index, ch)) for index, ch in enumerate(s))


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    A NUL character ends a string. Returns the code difference of the
    first differing pair, or 0.
    """
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    for a, b in zip_longest(s1[:n], s2[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Return the index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strtrim(s: Optional[str], charset: Optional[str]) -> Optional[str]:
    """Remove characters found in ``charset`` from both ends of ``s``.

    Returns ``None`` if either argument is ``None``.
    """
    if s is None or charset is None:
        return None
    if not charset:
        return s
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` at or past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]