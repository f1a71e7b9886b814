"""A small printf supporting the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import sys
from typing import Any, Iterator, Optional, TextIO

_INT_BITS = 32
_POINTER_MASK = (1 << 64) - 1
_UINT_MASK = (1 << _INT_BITS) - 1


def _to_int32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << _INT_BITS) if value >> (_INT_BITS - 1) else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    address = 0 if value is None else int(value) & _POINTER_MASK
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_to_int32(int(value)))
    if spec == "u":
        return str(int(value) & _UINT_MASK)
    return format(int(value) & _UINT_MASK, spec)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Unknown conversions and a lone trailing ``%`` produce nothing. Surplus
    arguments are ignored; too few raise :class:`TypeError`.
    """
    values = iter(args)
    parts = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            parts.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        parts.append(_convert(spec, values))
    return "".join(parts)


def printf(fmt: Optional[str], *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of characters written, or -1 when ``fmt`` is ``None``.
    """
    if fmt is None:
        return -1
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)