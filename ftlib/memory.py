"""Byte-buffer operations on ``bytearray`` objects."""

from __future__ import annotations

import sys
from typing import Optional


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer of length {len(buf)}")


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with the low byte of ``c``."""
    _check_length(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first ``n`` bytes of ``buf``."""
    memset(buf, 0, n)


def memcpy(dest: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dest``.

    Returns ``dest``; when both buffers are ``None`` nothing is copied and
    ``None`` is returned.
    """
    if dest is None and src is None:
        return None
    if dest is None or src is None:
        raise TypeError("memcpy needs both a destination and a source buffer")
    _check_length(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy ``n`` bytes within ``buf`` from ``src_offset`` to ``dest_offset``.

    The regions may overlap; the result is as if the source were first
    copied aside.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_length(n, buf[dest_offset:], buf[src_offset:])
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c & 0xFF`` among the first ``n``."""
    _check_length(n, buf)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare the first ``n`` bytes; return the difference of the first unequal pair."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes."""
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    total = nmemb * size
    if total > sys.maxsize:
        raise OverflowError(f"{nmemb} * {size} bytes is too large to allocate")
    return bytearray(total)