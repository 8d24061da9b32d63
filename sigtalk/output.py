"""Writing characters, strings and integers to file descriptors.

A negative descriptor means there is nowhere to write: the call does
nothing. Text is written encoded as UTF-8.
"""

from __future__ import annotations

import os
from typing import Optional, Union

CharLike = Union[int, str]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _char_bytes(c: CharLike) -> bytes:
    if isinstance(c, bool):
        raise TypeError("a character must be an int or a one-character str")
    if isinstance(c, int):
        return bytes([c & 0xFF])
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        return c.encode("utf-8")
    raise TypeError("a character must be an int or a one-character str")


def putchar_fd(c: CharLike, fd: int) -> None:
    """Write the single character *c* to *fd*; an int is written as one byte."""
    if fd < 0:
        return
    _write_all(fd, _char_bytes(c))


def putstr_fd(s: Optional[str], fd: int) -> None:
    """Write *s* to *fd*; ``None`` writes nothing."""
    if s is None or fd < 0:
        return
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: Optional[str], fd: int) -> None:
    """Write *s* followed by a newline to *fd*; ``None`` writes nothing."""
    if s is None or fd < 0:
        return
    _write_all(fd, (s + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal form of the integer *n* to *fd*."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("putnbr_fd expects an int")
    if fd < 0:
        return
    _write_all(fd, str(n).encode("ascii"))