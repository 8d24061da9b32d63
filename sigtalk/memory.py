"""Byte-buffer filling, searching, comparing and copying.

Buffers are ``bytes``-like objects; functions that write need a mutable
one such as ``bytearray``. A count that reaches past the end of a buffer
raises ``ValueError`` instead of touching memory that is not there.
"""

from __future__ import annotations

from typing import Optional, Union

ByteLike = Union[int, str]


def _count(n: int, name: str = "n") -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int")
    if n < 0:
        raise ValueError(f"{name} must not be negative")
    return n


def _fits(n: int, *buffers) -> None:
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"count {n} exceeds buffer length {len(buf)}")


def _byte(c: ByteLike) -> int:
    """Return *c* as a byte value, truncating integers to eight bits."""
    if isinstance(c, bool):
        raise TypeError("a byte must be an int or a one-character str")
    if isinstance(c, int):
        return c & 0xFF
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)}")
        code = ord(c)
        if code > 0xFF:
            raise ValueError("character does not fit in one byte")
        return code
    raise TypeError("a byte must be an int or a one-character str")


def memset(buf: bytearray, c: ByteLike, n: int) -> bytearray:
    """Fill the first *n* bytes of *buf* with *c* and return *buf*."""
    n = _count(n)
    _fits(n, buf)
    buf[:n] = bytes([_byte(c)]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Set the first *n* bytes of *buf* to zero."""
    memset(buf, 0, n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer of *nmemb* elements of *size* bytes each."""
    return bytearray(_count(nmemb, "nmemb") * _count(size, "size"))


def memchr(data: bytes, c: ByteLike, n: int) -> Optional[int]:
    """Return the index of the first byte *c* within the first *n* bytes, or ``None``."""
    n = _count(n)
    _fits(n, data)
    index = bytes(data[:n]).find(_byte(c))
    return None if index < 0 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first *n* bytes of two buffers.

    Returns 0 when they match, otherwise the difference between the first
    pair of differing bytes.
    """
    n = _count(n)
    _fits(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy the first *n* bytes of *src* to the start of *dest* and return *dest*."""
    n = _count(n)
    _fits(n, dest, src)
    dest[:n] = bytes(src[:n])
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy *n* bytes from offset *src* to offset *dest* within *buf*.

    The regions may overlap; the result is as if the source bytes were
    first copied aside. Returns *buf*.
    """
    n = _count(n)
    dest = _count(dest, "dest")
    src = _count(src, "src")
    if dest + n > len(buf) or src + n > len(buf):
        raise ValueError("region reaches past the end of the buffer")
    buf[dest : dest + n] = bytes(buf[src : src + n])
    return buf