"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

from typing import Optional, TextIO


def putchar_fd(c: str, stream: TextIO) -> None:
    """Write the single character ``c`` to ``stream``."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    stream.write(c)


def putstr_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` to ``stream``; ``None`` writes nothing."""
    if s is None:
        return
    stream.write(s)


def putendl_fd(s: Optional[str], stream: TextIO) -> None:
    """Write ``s`` followed by a newline; ``None`` writes nothing at all."""
    if s is None:
        return
    stream.write(s + "\n")


def putnbr_fd(n: int, stream: TextIO) -> None:
    """Write the decimal form of ``n`` to ``stream``."""
    stream.write(str(int(n)))